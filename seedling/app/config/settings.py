"""Settings for the API."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    service_name: str = Field("seedling", validation_alias="SERVICE_NAME")
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(8080, validation_alias="PORT")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(False, validation_alias="LOG_JSON")

    # Comma-separated processor backends, invoked in the listed order.
    processors: str = Field("", validation_alias="PROCESSORS")
    max_logged_bytes: int = Field(4096, validation_alias="MAX_LOGGED_BYTES")

    trace_exporter: str = Field("none", validation_alias="TRACE_EXPORTER")
    otlp_endpoint: str = Field("http://localhost:4317", validation_alias="OTEL_EXPORTER_OTLP_ENDPOINT")

    @property
    def processor_backends(self) -> list[str]:
        return [name.strip().lower() for name in self.processors.split(",") if name.strip()]
