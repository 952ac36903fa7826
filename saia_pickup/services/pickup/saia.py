import logging
import time

import httpx

from saia_pickup.config import SaiaConfig
from saia_pickup.core.errors import TransportError
from saia_pickup.core.pickup_request import PickupRequest
from saia_pickup.core.pickup_response import PickupResponse
from saia_pickup.core.xml_codec import decode_response, encode_request, redact_credentials
from saia_pickup.services.pickup.base import PickupService

logger = logging.getLogger("saia_pickup.client")


class SaiaPickupService(PickupService):
    """PickupService that POSTs the `Create` document to the carrier over httpx.

    One blocking request per call. `config.timeout` bounds the whole exchange,
    not just each connect or read. No retries.
    """

    def __init__(self, config: SaiaConfig, transport: httpx.BaseTransport | None = None):
        self._config = config
        self._transport = transport

    @property
    def config(self) -> SaiaConfig:
        return self._config

    def set_production_mode(self, enabled: bool) -> None:
        self._config = self._config.with_production_mode(enabled)

    def set_timeout(self, seconds: float) -> None:
        self._config = self._config.with_timeout(seconds)

    def request_pickup(self, request: PickupRequest) -> PickupResponse:
        config = self._config
        request.test_mode = config.test_mode_flag

        xml_text = encode_request(request)
        if config.log_payloads:
            logger.debug(f"Pickup request document: {redact_credentials(xml_text)}")

        url = config.endpoint_url
        if config.timeout < 0:
            logger.error(f"Pickup request to {url} not sent: negative timeout {config.timeout}")
            raise TransportError(f"could not post pickup request to {url}: invalid timeout {config.timeout}")

        deadline = time.monotonic() + config.timeout
        try:
            with httpx.Client(timeout=config.timeout, transport=self._transport) as client:
                with client.stream(
                    "POST",
                    url,
                    content=xml_text.encode("utf-8"),
                    headers={"Content-Type": "text/xml"},
                ) as res:
                    body = _read_before(res, deadline)
        except httpx.HTTPError as e:
            logger.error(f"Pickup request to {url} failed: {type(e).__name__}: {e}")
            raise TransportError(f"could not post pickup request to {url}: {e}") from e

        response = decode_response(body)
        if config.log_payloads:
            logger.debug(
                f"Pickup response (HTTP {res.status_code}): "
                f"{response.model_dump_json(exclude={'pickup_terminal'})}"
            )
        return self.check_outcome(response)


def _read_before(res: httpx.Response, deadline: float) -> bytes:
    """Read the response body, raising ReadTimeout once the deadline has passed."""
    chunks = []
    for chunk in res.iter_bytes():
        chunks.append(chunk)
        if time.monotonic() > deadline:
            break
    if time.monotonic() > deadline:
        raise httpx.ReadTimeout("pickup reply not received within the timeout", request=res.request)
    return b"".join(chunks)
