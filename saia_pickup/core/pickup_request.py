from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class ShipmentItem(BaseModel):
    """Details on the freight being picked up (Details > DetailItem)."""
    model_config = ConfigDict(populate_by_name=True)

    # required
    destination_zipcode: str = Field(alias="DestinationZipcode", min_length=1)
    pieces: int = Field(alias="Pieces", ge=0)
    package: str = Field(alias="Package", pattern=r"^[A-Z]{2}$")  # SK = skids
    weight: float = Field(alias="Weight", ge=0)  # lbs

    # optional
    destination_country: Literal["US", "CN", "MX"] | None = Field(default=None, alias="DestinationCountry")
    freezable: Literal["Y", "N"] | None = Field(default=None, alias="Freezable")

    @field_validator("destination_country", "freezable", mode="before")
    @classmethod
    def _empty_as_unset(cls, value):
        return None if value == "" else value


class PickupRequest(BaseModel):
    """A pickup request, serialized as the carrier's `Create` document.

    Field order matches the element order the carrier expects. Aliases are the
    carrier's element names; callers may use either form.
    """
    model_config = ConfigDict(populate_by_name=True)

    # required
    item: ShipmentItem = Field(alias="DetailItem")
    user_id: str = Field(alias="UserID", min_length=1)
    password: SecretStr = Field(alias="Password")
    test_mode: Literal["Y", "N"] = Field(default="Y", alias="TestMode")  # overwritten on send
    account_number: str = Field(alias="AccountNumber", min_length=1)

    # optional
    company_name: str | None = Field(default=None, alias="CompanyName")  # may be empty if account is the pickup location
    street: str | None = Field(default=None, alias="Street")
    city: str | None = Field(default=None, alias="City")
    state: str | None = Field(default=None, alias="State", min_length=2, max_length=2)
    zipcode: str | None = Field(default=None, alias="Zipcode")
    contact_name: str | None = Field(default=None, alias="ContactName")
    contact_phone: str | None = Field(default=None, alias="ContactPhone")
    pickup_date: str | None = Field(default=None, alias="PickupDate")  # yyyy-mm-dd
    ready_time: str | None = Field(default=None, alias="ReadyTime")  # hh:mm:ss, 24 hour
    close_time: str | None = Field(default=None, alias="CloseTime")  # hh:mm:ss, 24 hour
    special_instructions: str | None = Field(default=None, alias="SpecialInstructions")

    @field_validator(
        "company_name", "street", "city", "state", "zipcode", "contact_name",
        "contact_phone", "pickup_date", "ready_time", "close_time", "special_instructions",
        mode="before",
    )
    @classmethod
    def _empty_as_unset(cls, value):
        return None if value == "" else value

    @field_validator("password")
    @classmethod
    def _password_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("password must not be empty")
        return value

    @field_validator("pickup_date")
    @classmethod
    def _valid_date(cls, value: str | None) -> str | None:
        if value:
            datetime.strptime(value, "%Y-%m-%d")
        return value

    @field_validator("ready_time", "close_time")
    @classmethod
    def _valid_time(cls, value: str | None) -> str | None:
        if value:
            datetime.strptime(value, "%H:%M:%S")
        return value
