"""Pydantic contracts for booking input."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

HomeBase = Literal["A", "B"]


class BookingRequest(BaseModel):
    """Seats sold and fares charged for one flight."""

    model_config = ConfigDict(frozen=True)

    home_base: HomeBase = Field(..., description="Departure base: A (MAN) or B (LGW)")
    overseas_airport_code: str = Field(..., description="Destination airport code")
    aircraft_type: str = Field(..., description="Aircraft type as named in the aircraft table")
    economy_booked: int = Field(0, ge=0)
    business_booked: int = Field(0, ge=0)
    first_class_booked: int = Field(0, ge=0)
    economy_price: float = Field(0.0, ge=0, allow_inf_nan=False)
    business_price: float = Field(0.0, ge=0, allow_inf_nan=False)
    first_class_price: float = Field(0.0, ge=0, allow_inf_nan=False)

    @field_validator("home_base", mode="before")
    @classmethod
    def normalize_home_base(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def total_booked(self) -> int:
        return self.economy_booked + self.business_booked + self.first_class_booked
