"""Flight planning package: booking feasibility and valuation."""

from .config import PlanningConfig, build_planning_config, planning_config_from_env
from .data_access import build_reference_tables, load_reference_tables
from .engine import Flight, FlightOutcome, build_flight, evaluate_booking
from .errors import (
    FlightRejectedError,
    LookupFailure,
    OverbookingClass,
    OverbookingTotal,
    RangeInfeasible,
    ReferenceDataError,
)
from .models import BookingRequest
from .schemas import (
    AircraftRecord,
    AirportRecord,
    FlightResult,
    ReferenceTables,
    Rejection,
    ResolvedSpecification,
    ValidationResult,
)

__all__ = [
    "AircraftRecord",
    "AirportRecord",
    "BookingRequest",
    "Flight",
    "FlightOutcome",
    "FlightRejectedError",
    "FlightResult",
    "LookupFailure",
    "OverbookingClass",
    "OverbookingTotal",
    "PlanningConfig",
    "RangeInfeasible",
    "ReferenceDataError",
    "ReferenceTables",
    "Rejection",
    "ResolvedSpecification",
    "ValidationResult",
    "build_flight",
    "build_planning_config",
    "build_reference_tables",
    "evaluate_booking",
    "load_reference_tables",
    "planning_config_from_env",
]
