import logging
from abc import ABC, abstractmethod

from saia_pickup.core.errors import PickupRequestFailed, PickupRescheduleRequired
from saia_pickup.core.pickup_request import PickupRequest
from saia_pickup.core.pickup_response import PickupOutcome, PickupResponse

logger = logging.getLogger("saia_pickup.client")


class PickupService(ABC):
    """Abstract interface for scheduling an LTL pickup with the carrier.

    Implementations overwrite the request's TestMode from their configuration,
    submit it exactly once and classify the reply with `check_outcome`.
    """

    @abstractmethod
    def request_pickup(self, request: PickupRequest) -> PickupResponse:
        """Submit a pickup request.

        Returns:
            The carrier's confirmation when the pickup was scheduled.

        Raises:
            TransportError: The carrier could not be reached or did not reply in time.
            EncodingError / DecodingError: The request or reply was not valid XML.
            PickupRescheduleRequired: The pickup must move to the next business day.
            PickupRequestFailed: The carrier rejected the request.
        """
        ...

    @staticmethod
    def check_outcome(response: PickupResponse) -> PickupResponse:
        """Return the response if the pickup was confirmed, raise otherwise.

        The HTTP status is not consulted: a reply counts as confirmed only when
        it carries no error code and a non-empty pickup number.
        """
        outcome = response.outcome
        if outcome is PickupOutcome.CONFIRMED:
            logger.info(
                f"Pickup confirmed: pickup_number={response.pickup_number}, "
                f"terminal={response.pickup_terminal.id or '-'}"
            )
            return response

        logger.warning(
            f"Pickup request failed: outcome={outcome.value}, code={response.code!r}, "
            f"element={response.element!r}, fault={response.fault!r}, message={response.message!r}"
        )
        if outcome is PickupOutcome.RESCHEDULE:
            raise PickupRescheduleRequired(response)
        raise PickupRequestFailed(response)
