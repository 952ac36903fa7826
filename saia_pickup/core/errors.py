"""Exceptions raised by the pickup client.

Every failure surfaces as a subclass of SaiaError. Nothing is retried.
"""
from saia_pickup.core.pickup_response import PickupResponse


class SaiaError(Exception):
    """Base class for all pickup client errors."""


class TransportError(SaiaError):
    """Connecting to, sending to, or reading from the carrier failed."""


class EncodingError(SaiaError):
    """The request could not be serialized to XML."""


class DecodingError(SaiaError):
    """The carrier reply was not the expected XML document."""


class PickupRequestFailed(SaiaError):
    """The carrier answered but did not confirm the pickup."""

    def __init__(self, response: PickupResponse):
        self.response = response
        super().__init__(f"pickup request failed: {response.message}")

    @property
    def code(self) -> str:
        return self.response.code

    @property
    def message(self) -> str:
        return self.response.message


class PickupRescheduleRequired(PickupRequestFailed):
    """The pickup cannot be made today; resubmit for the next business day."""

    @property
    def next_business_day(self) -> str:
        return self.response.next_business_day
