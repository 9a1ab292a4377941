"""Identifiers shared by the API modules."""

SERVICE_NAME = "seedling"
SERVICE_VERSION = "0.1.0"
