"""Exception types raised by the flight planning package."""

from __future__ import annotations

from typing import Dict, Type

from .schemas import Rejection, RejectionKind


class ReferenceDataError(RuntimeError):
    """Raised when airport or aircraft reference data cannot be parsed."""


class FlightRejectedError(RuntimeError):
    """Raised when a booking fails resolution or feasibility checks."""

    def __init__(self, rejection: Rejection) -> None:
        super().__init__(rejection.reason)
        self.rejection = rejection

    @property
    def kind(self) -> RejectionKind:
        return self.rejection.kind


class LookupFailure(FlightRejectedError):
    """Airport code or aircraft type missing from the reference tables."""


class RangeInfeasible(FlightRejectedError):
    """Route distance exceeds the aircraft's maximum range."""


class OverbookingTotal(FlightRejectedError):
    """Total booked seats exceed the aircraft's total capacity."""


class OverbookingClass(FlightRejectedError):
    """Booked seats in one cabin class exceed that class's capacity."""


_ERRORS_BY_KIND: Dict[str, Type[FlightRejectedError]] = {
    "LOOKUP_FAILURE": LookupFailure,
    "RANGE_INFEASIBLE": RangeInfeasible,
    "OVERBOOKING_TOTAL": OverbookingTotal,
    "OVERBOOKING_CLASS": OverbookingClass,
}


def error_for(rejection: Rejection) -> FlightRejectedError:
    return _ERRORS_BY_KIND.get(rejection.kind, FlightRejectedError)(rejection)
