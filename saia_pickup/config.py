from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

SAIA_PICKUP_URL = "http://www.saiasecure.com/webservice/pickup/xml.aspx"


class SaiaConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SAIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Mode: test until explicitly switched to production
    production: bool = False

    # HTTP
    # 10 seconds is long, but the carrier is sometimes very slow to reply.
    timeout: float = 10.0
    test_url: str = SAIA_PICKUP_URL
    production_url: str = SAIA_PICKUP_URL

    # Service
    pickup_service: str = "saia"  # "saia" | "mock"

    # Logging
    log_payloads: bool = False  # redacted request/response documents at DEBUG

    @property
    def endpoint_url(self) -> str:
        return self.production_url if self.production else self.test_url

    @property
    def test_mode_flag(self) -> str:
        """Value sent in the request's TestMode element."""
        return "N" if self.production else "Y"

    def with_production_mode(self, enabled: bool) -> "SaiaConfig":
        return self.model_copy(update={"production": enabled})

    def with_timeout(self, seconds: float) -> "SaiaConfig":
        """Copy with a new HTTP timeout. The value is passed to httpx unchecked."""
        return self.model_copy(update={"timeout": seconds})

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SaiaConfig":
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    @classmethod
    def for_testing(cls) -> "SaiaConfig":
        """Pre-configured for tests: mock service, test mode, short timeout."""
        return cls(
            production=False,
            pickup_service="mock",
            timeout=2.0,
        )
