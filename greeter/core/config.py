"""
Application configuration.

Loads settings from environment variables (prefix ``GREETER_``) and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the HTTP listener binds to.
        port: Port the HTTP listener binds to.
        max_request_size_bytes: Maximum allowed request body size.
        strict_domain_errors: Map domain failures to non-200 responses
            instead of reporting them inside a 200 response body.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GREETER_",
        extra="ignore",
    )

    project_name: str = "Greeter"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    max_request_size_bytes: int = 1_048_576  # 1 MB
    strict_domain_errors: bool = False

    @property
    def listen_addr(self) -> str:
        """Return the listen address as logged at startup (e.g. ``:8080``)."""
        if self.host in ("", "0.0.0.0"):
            return f":{self.port}"
        return f"{self.host}:{self.port}"


settings = Settings()
