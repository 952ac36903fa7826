"""PickupServiceBuilder: picks the pickup service implementation from SaiaConfig."""
import httpx

from saia_pickup.config import SaiaConfig
from saia_pickup.services.pickup.base import PickupService
from saia_pickup.services.pickup.mock import MockPickupService
from saia_pickup.services.pickup.saia import SaiaPickupService


class PickupServiceBuilder:
    """Builds the pickup service described by config."""

    def __init__(self, config: SaiaConfig, transport: httpx.BaseTransport | None = None):
        self.config = config
        self._transport = transport
        self._pickup_service = self._build_pickup_service()

    @property
    def pickup_service(self) -> PickupService:
        return self._pickup_service

    def _build_pickup_service(self) -> PickupService:
        if self.config.pickup_service == "mock":
            return MockPickupService(config=self.config)
        if self.config.pickup_service == "saia":
            return SaiaPickupService(self.config, transport=self._transport)
        raise ValueError(f"Unknown pickup service: {self.config.pickup_service}")
