"""SDK configuration via environment variables."""

import ssl
from enum import Enum
from typing import Literal, Optional

from pydantic_settings import BaseSettings

from paysimple.validation.policy import ValidationPolicy


class Environment(str, Enum):
    """PaySimple hosting environments."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"


BASE_URLS = {
    Environment.SANDBOX: "https://sandbox-api.paysimple.com",
    Environment.PRODUCTION: "https://api.paysimple.com",
}


class Settings(BaseSettings):
    username: str = ""
    api_key: str = ""
    environment: Environment = Environment.SANDBOX
    base_url: Optional[str] = None  # Overrides the environment URL (e.g. a local stub)
    api_version: str = "v4"
    retry_count: int = 1  # Total attempts, not retries after the first
    retry_delay: float = 1.0  # Seconds between attempts
    timeout: float = 30.0
    minimum_tls_version: Literal["TLSv1_2", "TLSv1_3"] = "TLSv1_2"
    validation_policy: ValidationPolicy = ValidationPolicy.PERMISSIVE
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "PAYSIMPLE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "frozen": True,
    }

    @property
    def endpoint_root(self) -> str:
        root = (self.base_url or BASE_URLS[self.environment]).rstrip("/")
        return f"{root}/{self.api_version}"

    @property
    def tls_version(self) -> ssl.TLSVersion:
        return ssl.TLSVersion[self.minimum_tls_version]


settings = Settings()
