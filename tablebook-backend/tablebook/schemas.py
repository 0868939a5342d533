from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReserveRequest(BaseModel):
    """Raw booking request. Presence of fields is checked by the policy, not here."""
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    contact: str | None = None
    date: str | None = None
    time: str | None = None
    guests: int | None = None
    payment_method: str | None = Field(None, alias="paymentMethod")

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str) and v == "":
            return None
        return v


class ReservationRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    name: str
    contact: str
    date: str
    time: str
    slot: str
    guests: int
    payment_method: str = Field(..., alias="paymentMethod")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
