"""Feasibility rules applied to a resolved booking."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .config import PlanningConfig
from .models import BookingRequest
from .schemas import Rejection, ResolvedSpecification, ValidationResult


def check_range(
    resolved: ResolvedSpecification, request: BookingRequest, config: PlanningConfig
) -> Optional[Rejection]:
    if resolved.distance <= resolved.max_range:
        return None
    origin = config.home_base_code(request.home_base)
    destination = request.overseas_airport_code.strip()
    return Rejection(
        kind="RANGE_INFEASIBLE",
        reason=(
            f"{request.aircraft_type.strip()} does not have the range to fly from {origin} to {destination} "
            f"({resolved.distance:g} > {resolved.max_range:g})"
        ),
    )


def check_total_capacity(resolved: ResolvedSpecification, request: BookingRequest) -> Optional[Rejection]:
    booked = request.total_booked
    if booked <= resolved.total_capacity:
        return None
    return Rejection(
        kind="OVERBOOKING_TOTAL",
        reason=f"Flight overbooked: {booked} seats booked but capacity is {resolved.total_capacity}",
    )


_CABIN_CLASSES: Sequence[Tuple[str, str, str]] = (
    ("economy", "economy_booked", "economy_capacity"),
    ("business", "business_booked", "business_capacity"),
    ("first class", "first_class_booked", "first_class_capacity"),
)


def check_class_capacity(resolved: ResolvedSpecification, request: BookingRequest) -> List[Rejection]:
    """Return per-class overbooking violations in economy, business, first class order."""

    failures: List[Rejection] = []
    for label, booked_attr, capacity_attr in _CABIN_CLASSES:
        booked = getattr(request, booked_attr)
        capacity = getattr(resolved, capacity_attr)
        if booked > capacity:
            failures.append(
                Rejection(
                    kind="OVERBOOKING_CLASS",
                    reason=f"Too many {label} seats booked: {booked} booked but only {capacity} available",
                )
            )
    return failures


def validate(
    resolved: ResolvedSpecification,
    request: BookingRequest,
    *,
    config: Optional[PlanningConfig] = None,
    collect_all: Optional[bool] = None,
) -> ValidationResult:
    """Run the range, total capacity and per-class capacity rules in order.

    By default evaluation stops at the first failing rule. With
    ``collect_all`` every violation is reported, still in rule order.
    """

    config = config or PlanningConfig()
    if collect_all is None:
        collect_all = config.collect_all_failures

    failures: List[Rejection] = []
    range_failure = check_range(resolved, request, config)
    if range_failure is not None:
        failures.append(range_failure)
        if not collect_all:
            return ValidationResult(failures=tuple(failures))

    total_failure = check_total_capacity(resolved, request)
    if total_failure is not None:
        failures.append(total_failure)
        if not collect_all:
            return ValidationResult(failures=tuple(failures))

    class_failures = check_class_capacity(resolved, request)
    if class_failures:
        failures.extend(class_failures if collect_all else class_failures[:1])

    return ValidationResult(failures=tuple(failures))
