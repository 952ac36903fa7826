"""Unit tests for PickupServiceBuilder."""
import pytest

from saia_pickup.builder import PickupServiceBuilder
from saia_pickup.config import SaiaConfig
from saia_pickup.services.pickup.mock import MockPickupService
from saia_pickup.services.pickup.saia import SaiaPickupService
from tests.mocks import CarrierStub, make_request


class TestPickupServiceBuilder:
    def test_testing_config_creates_mock_service(self):
        builder = PickupServiceBuilder(SaiaConfig.for_testing())
        assert isinstance(builder.pickup_service, MockPickupService)

    def test_default_config_creates_saia_service(self):
        builder = PickupServiceBuilder(SaiaConfig(pickup_service="saia"))
        assert isinstance(builder.pickup_service, SaiaPickupService)

    def test_saia_service_receives_config(self):
        config = SaiaConfig(pickup_service="saia", timeout=7)
        service = PickupServiceBuilder(config).pickup_service
        assert service.config.timeout == 7

    def test_passes_transport_to_saia_service(self):
        stub = CarrierStub()
        config = SaiaConfig(pickup_service="saia", test_url="http://carrier.example/xml.aspx")
        service = PickupServiceBuilder(config, transport=stub.transport).pickup_service
        service.request_pickup(make_request())
        assert len(stub.requests) == 1

    def test_unknown_service_raises(self):
        with pytest.raises(ValueError, match="Unknown pickup service"):
            PickupServiceBuilder(SaiaConfig(pickup_service="fedex"))
