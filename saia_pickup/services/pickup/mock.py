from saia_pickup.config import SaiaConfig
from saia_pickup.core.pickup_request import PickupRequest
from saia_pickup.core.pickup_response import PickupResponse
from saia_pickup.services.pickup.base import PickupService


class MockPickupService(PickupService):
    """Inspectable stand-in for the carrier. Captures every request for assertion."""

    def __init__(
        self,
        config: SaiaConfig | None = None,
        response: PickupResponse | None = None,
        should_raise: Exception | None = None,
    ):
        self._config = config or SaiaConfig.for_testing()
        self._response = response or PickupResponse(
            test_mode=self._config.test_mode_flag,
            pickup_number="MOCK-0001",
        )
        self._should_raise = should_raise
        self._requests: list[PickupRequest] = []

    @property
    def config(self) -> SaiaConfig:
        return self._config

    def request_pickup(self, request: PickupRequest) -> PickupResponse:
        request.test_mode = self._config.test_mode_flag
        self._requests.append(request.model_copy(deep=True))
        if self._should_raise:
            raise self._should_raise
        return self.check_outcome(self._response.model_copy(deep=True))

    # --- Inspection API ---

    @property
    def requests(self) -> list[PickupRequest]:
        return list(self._requests)

    def reset(self):
        self._requests.clear()
