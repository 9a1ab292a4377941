"""API-level constants shared across modules."""
from __future__ import annotations

TRACER_NAME = "config"
CREATE_CONFIG_SPAN = "CreateConfig"


class MediaType:
    YAML = "application/yaml"
    JSON = "application/json"


class ResponseMessage:
    INVALID_METHOD = "Invalid request method"
    INVALID_CONTENT_TYPE = "Invalid content type"
    PROCESSING_FAILED = "Failed to process configuration"
    RECEIVED = "Configuration received"
    MARSHAL_FAILED = "Failed to marshal response"


class SpanStatusDescription:
    INVALID_METHOD = "invalid request method"
    INVALID_CONTENT_TYPE = "invalid request content type"
    MARSHAL_FAILED = "failed to marshal response"
    WRITE_FAILED = "failed to write response"
