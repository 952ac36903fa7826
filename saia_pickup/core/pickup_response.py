from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

RESCHEDULE_CODE = "S04"


class PickupOutcome(str, Enum):
    CONFIRMED = "confirmed"
    RESCHEDULE = "reschedule"
    REJECTED = "rejected"


class PickupTerminal(BaseModel):
    """Terminal that will perform the pickup."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", alias="ID")
    name: str = Field(default="", alias="Name")
    manager: str = Field(default="", alias="Manager")
    address1: str = Field(default="", alias="Address1")
    address2: str = Field(default="", alias="Address2")
    city: str = Field(default="", alias="City")
    state: str = Field(default="", alias="State")
    zipcode: str = Field(default="", alias="Zipcode")
    city_dispatch_phone: str = Field(default="", alias="CityDispatchPhone")
    customer_service_phone: str = Field(default="", alias="CustomerServicePhone")
    toll_free_phone: str = Field(default="", alias="TollFreePhone")
    fax: str = Field(default="", alias="Fax")


class PickupResponse(BaseModel):
    """Carrier reply to a pickup request. Covers both success and error replies."""
    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(default="", alias="Code")
    element: str = Field(default="", alias="Element")
    fault: str = Field(default="", alias="Fault")  # S = server, C = client
    message: str = Field(default="", alias="Message")
    test_mode: str = Field(default="", alias="TestMode")
    pickup_number: str = Field(default="", alias="PickupNumber")
    total_pieces: int = Field(default=0, alias="TotalPieces")
    total_weight: float = Field(default=0.0, alias="TotalWeight")
    next_business_day: str = Field(default="", alias="NextBusinessDay")  # only set with code S04
    pickup_terminal: PickupTerminal = Field(default_factory=PickupTerminal, alias="PickupTerminal")

    @property
    def outcome(self) -> PickupOutcome:
        if not self.code and self.pickup_number:
            return PickupOutcome.CONFIRMED
        if self.code == RESCHEDULE_CODE or self.next_business_day:
            return PickupOutcome.RESCHEDULE
        return PickupOutcome.REJECTED

    @property
    def succeeded(self) -> bool:
        return self.outcome is PickupOutcome.CONFIRMED
