"""Flight evaluation pipeline: resolve, validate, then value a booking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .config import PlanningConfig
from .errors import error_for
from .lookup import resolve_specification
from .models import BookingRequest
from .schemas import FlightResult, ReferenceTables, Rejection, ResolvedSpecification
from .validator import validate
from .valuation import value_flight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flight:
    """A booking that passed every feasibility rule, with its financial result.

    Instances are produced by :func:`build_flight`; all figures are computed
    once at build time and the accessors only read them back.
    """

    request: BookingRequest
    specification: ResolvedSpecification
    result: FlightResult
    origin: str
    tables: ReferenceTables = field(repr=False, compare=False)

    @property
    def destination(self) -> str:
        return self.request.overseas_airport_code.strip()

    @property
    def income(self) -> float:
        return self.result.income

    @property
    def cost(self) -> float:
        return self.result.cost

    @property
    def profit(self) -> float:
        return self.result.profit

    @property
    def distance(self) -> float:
        return self.specification.distance

    @property
    def running_cost(self) -> float:
        return self.specification.running_cost

    @property
    def total_seats(self) -> int:
        return self.specification.total_capacity

    @property
    def booked_seats(self) -> int:
        return self.request.total_booked

    def as_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "origin": self.origin,
            "destination": self.destination,
            "aircraftType": self.request.aircraft_type.strip(),
            "distance": self.distance,
            "runningCost": self.running_cost,
            "totalSeats": self.total_seats,
            "bookedSeats": self.booked_seats,
        }
        payload.update(self.result.as_dict())
        return payload


@dataclass(frozen=True)
class FlightOutcome:
    """Either a built :class:`Flight` or the rejections that prevented it."""

    flight: Optional[Flight] = None
    rejections: Tuple[Rejection, ...] = ()

    @property
    def ok(self) -> bool:
        return self.flight is not None

    @property
    def rejection(self) -> Optional[Rejection]:
        return self.rejections[0] if self.rejections else None

    def unwrap(self) -> Flight:
        """Return the flight or raise the typed error for the first rejection."""

        if self.flight is not None:
            return self.flight
        if self.rejection is None:
            raise RuntimeError("Outcome holds neither a flight nor a rejection")
        raise error_for(self.rejection)


def _coerce_request(request: Union[BookingRequest, Mapping[str, Any]]) -> BookingRequest:
    if isinstance(request, BookingRequest):
        return request
    return BookingRequest.model_validate(dict(request))


def build_flight(
    request: Union[BookingRequest, Mapping[str, Any]],
    tables: ReferenceTables,
    *,
    config: Optional[PlanningConfig] = None,
) -> FlightOutcome:
    """Resolve, validate and value ``request`` against ``tables``.

    A lookup failure stops the pipeline before validation. Validation reports
    the first failing rule unless ``config.collect_all_failures`` is set.
    """

    config = config or PlanningConfig()
    booking = _coerce_request(request)

    resolved = resolve_specification(booking, tables, config)
    if isinstance(resolved, Rejection):
        logger.info("Booking rejected while resolving: %s", resolved.reason)
        return FlightOutcome(rejections=(resolved,))

    validation = validate(resolved, booking, config=config)
    if not validation.valid:
        logger.info(
            "Booking rejected while validating: %s",
            "; ".join(failure.reason for failure in validation.failures),
        )
        return FlightOutcome(rejections=validation.failures)

    result = value_flight(resolved, booking)
    flight = Flight(
        request=booking,
        specification=resolved,
        result=result,
        tables=tables,
        origin=config.home_base_code(booking.home_base),
    )
    logger.debug(
        "Valued %s -> %s: income=%s cost=%s profit=%s",
        flight.origin,
        flight.destination,
        result.income,
        result.cost,
        result.profit,
    )
    return FlightOutcome(flight=flight)


def evaluate_booking(
    request: Union[BookingRequest, Mapping[str, Any]],
    tables: ReferenceTables,
    *,
    config: Optional[PlanningConfig] = None,
) -> Flight:
    """Build a flight or raise the matching :class:`FlightRejectedError`."""

    return build_flight(request, tables, config=config).unwrap()
