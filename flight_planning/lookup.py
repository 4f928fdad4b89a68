"""Resolve route distance and aircraft specification from reference tables."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .config import PlanningConfig
from .models import BookingRequest
from .schemas import AircraftRecord, ReferenceTables, Rejection, ResolvedSpecification

logger = logging.getLogger(__name__)


def _normalize_key(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip()


def resolve_distance(home_base: str, overseas_code: str, tables: ReferenceTables) -> Optional[float]:
    """Return the distance from ``home_base`` to ``overseas_code`` or ``None`` if unknown."""

    record = tables.airports.get(_normalize_key(overseas_code))
    if record is None:
        return None
    return record.distance_from(home_base)


def resolve_aircraft(aircraft_type: str, tables: ReferenceTables) -> Optional[AircraftRecord]:
    return tables.aircraft.get(_normalize_key(aircraft_type))


def _lookup_failure(reason: str) -> Rejection:
    return Rejection(kind="LOOKUP_FAILURE", reason=reason, phase="RESOLVING")


def resolve_specification(
    request: BookingRequest,
    tables: ReferenceTables,
    config: Optional[PlanningConfig] = None,
) -> Union[ResolvedSpecification, Rejection]:
    """Join ``request`` against the reference tables.

    The route is checked before the aircraft: the departure must be a
    configured home base and the overseas code must be in the airports table.
    The first missing entity is returned as a ``LOOKUP_FAILURE`` rejection and
    nothing is resolved.
    """

    config = config or PlanningConfig()
    overseas_code = _normalize_key(request.overseas_airport_code)

    departure = config.home_bases.get(request.home_base)
    if departure is None:
        return _lookup_failure(f"Invalid departure airport: home base '{request.home_base}' is not configured")

    distance = resolve_distance(request.home_base, overseas_code, tables)
    if distance is None:
        return _lookup_failure(f"Invalid airport code: '{overseas_code}' is not a known overseas airport")

    aircraft = resolve_aircraft(request.aircraft_type, tables)
    if aircraft is None:
        return _lookup_failure(f"Invalid aircraft type: '{_normalize_key(request.aircraft_type)}' is not in the fleet")

    resolved = ResolvedSpecification.from_records(distance, aircraft)
    logger.debug(
        "Resolved %s -> %s on %s: distance=%s running_cost=%s capacity=%d",
        departure,
        overseas_code,
        aircraft.type,
        resolved.distance,
        resolved.running_cost,
        resolved.total_capacity,
    )
    return resolved
