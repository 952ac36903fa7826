"""Manual smoke test: submit one pickup request to the carrier's test endpoint.

Usage:
    uv run python scripts/request_pickup.py pickup.example.yaml [--production] [--timeout 20]

Reads SAIA_USER_ID and SAIA_PASSWORD from .env. Test mode unless --production is given.
"""
# ruff: noqa: E402
import argparse
import logging
import os
import sys
from pathlib import Path

project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import yaml
from dotenv import load_dotenv
load_dotenv(Path(project_root) / ".env")

from saia_pickup.builder import PickupServiceBuilder
from saia_pickup.config import SaiaConfig
from saia_pickup.core.errors import PickupRequestFailed, PickupRescheduleRequired, SaiaError
from saia_pickup.core.pickup_request import PickupRequest


def main():
    parser = argparse.ArgumentParser(description="Submit a SAIA pickup request")
    parser.add_argument("request_file", help="YAML file with the pickup request fields")
    parser.add_argument("--config", default=str(Path(project_root) / "config.yaml"))
    parser.add_argument("--production", action="store_true", help="schedule a real pickup")
    parser.add_argument("--timeout", type=float, default=None)
    parser.add_argument("--debug", action="store_true", help="log redacted XML documents")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    user_id = os.getenv("SAIA_USER_ID")
    password = os.getenv("SAIA_PASSWORD")
    if not user_id or not password:
        print("ERROR: SAIA_USER_ID and SAIA_PASSWORD must be set in .env")
        sys.exit(1)

    config = SaiaConfig.from_yaml(args.config).with_production_mode(args.production)
    if args.timeout is not None:
        config = config.with_timeout(args.timeout)
    if args.debug:
        config = config.model_copy(update={"log_payloads": True})

    with open(args.request_file) as f:
        fields = yaml.safe_load(f)
    request = PickupRequest(UserID=user_id, Password=password, **fields)

    service = PickupServiceBuilder(config).pickup_service
    print(f"Submitting pickup to {config.endpoint_url} (TestMode={config.test_mode_flag})...")
    try:
        response = service.request_pickup(request)
    except PickupRescheduleRequired as e:
        print(f"  RESCHEDULE: {e} (next business day: {e.next_business_day})")
        sys.exit(2)
    except PickupRequestFailed as e:
        print(f"  REJECTED: code={e.code} element={e.response.element} {e}")
        sys.exit(1)
    except SaiaError as e:
        print(f"  FAIL: {e}")
        sys.exit(1)

    terminal = response.pickup_terminal
    print(f"  OK: pickup number {response.pickup_number}")
    print(f"  Terminal: {terminal.name} ({terminal.id}), dispatch {terminal.city_dispatch_phone}")
    print(f"  Totals: {response.total_pieces} pieces, {response.total_weight} lbs")


if __name__ == "__main__":
    main()
