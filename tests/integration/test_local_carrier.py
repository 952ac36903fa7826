"""Integration tests: SaiaPickupService over real HTTP against a local carrier stand-in.

Uses a threaded http.server on localhost, no external network.
"""
import threading
import time
import xml.etree.ElementTree as ET
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from saia_pickup.config import SaiaConfig
from saia_pickup.core.errors import PickupRequestFailed, TransportError
from saia_pickup.services.pickup.saia import SaiaPickupService
from tests.mocks import CONFIRMED_REPLY, REJECTED_REPLY, make_request


class _CarrierHandler(BaseHTTPRequestHandler):
    reply = CONFIRMED_REPLY
    delay = 0.0
    chunk_delay = 0.0
    received: list[dict] = []

    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length)
        type(self).received.append({
            "path": self.path,
            "content_type": self.headers.get("Content-Type"),
            "body": body,
        })
        if self.delay:
            time.sleep(self.delay)
        try:
            self.send_response(200)
            self.send_header("Content-Type", "text/xml")
            self.send_header("Content-Length", str(len(self.reply)))
            self.end_headers()
            if not self.chunk_delay:
                self.wfile.write(self.reply)
                return
            for start in range(0, len(self.reply), 60):
                time.sleep(self.chunk_delay)
                self.wfile.write(self.reply[start:start + 60])
                self.wfile.flush()
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format, *args):
        pass


@pytest.fixture
def carrier():
    """Start a local carrier; yields (handler class, base url)."""
    handler = type("Handler", (_CarrierHandler,), {"received": [], "reply": CONFIRMED_REPLY, "delay": 0.0, "chunk_delay": 0.0})
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address
    yield handler, f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


def _config(base_url: str, **overrides) -> SaiaConfig:
    fields = {
        "test_url": f"{base_url}/test/xml.aspx",
        "production_url": f"{base_url}/prod/xml.aspx",
        "timeout": 5,
    }
    fields.update(overrides)
    return SaiaConfig(**fields)


class TestLocalCarrier:
    def test_confirmed_pickup_round_trip(self, carrier):
        handler, base_url = carrier
        response = SaiaPickupService(_config(base_url)).request_pickup(make_request())

        assert response.pickup_number == "ATL123456"
        assert len(handler.received) == 1
        received = handler.received[0]
        assert received["path"] == "/test/xml.aspx"
        assert received["content_type"] == "text/xml"
        document = ET.fromstring(received["body"])
        assert document.findtext("TestMode") == "Y"
        assert document.findtext("Details/DetailItem/Package") == "SK"

    def test_production_mode_posts_to_production_path(self, carrier):
        handler, base_url = carrier
        service = SaiaPickupService(_config(base_url))
        service.set_production_mode(True)
        service.request_pickup(make_request())

        assert handler.received[0]["path"] == "/prod/xml.aspx"
        assert ET.fromstring(handler.received[0]["body"]).findtext("TestMode") == "N"

    def test_rejection_over_http(self, carrier):
        handler, base_url = carrier
        handler.reply = REJECTED_REPLY
        with pytest.raises(PickupRequestFailed, match="Invalid account number"):
            SaiaPickupService(_config(base_url)).request_pickup(make_request())

    def test_slow_carrier_times_out_within_bound(self, carrier):
        handler, base_url = carrier
        handler.delay = 2.0
        service = SaiaPickupService(_config(base_url, timeout=0.3))

        start = time.monotonic()
        with pytest.raises(TransportError):
            service.request_pickup(make_request())
        elapsed = time.monotonic() - start

        assert elapsed < 1.5

    def test_slowly_trickled_reply_times_out_within_bound(self, carrier):
        handler, base_url = carrier
        handler.chunk_delay = 0.2
        service = SaiaPickupService(_config(base_url, timeout=0.5))

        start = time.monotonic()
        with pytest.raises(TransportError):
            service.request_pickup(make_request())
        elapsed = time.monotonic() - start

        assert elapsed < 1.2

    def test_connection_refused_is_transport_error(self):
        config = SaiaConfig(test_url="http://127.0.0.1:1/xml.aspx", timeout=2)
        with pytest.raises(TransportError):
            SaiaPickupService(config).request_pickup(make_request())
