"""Income, cost and profit for a validated booking."""

from __future__ import annotations

from .models import BookingRequest
from .schemas import FlightResult, ResolvedSpecification

# Running cost is quoted per seat per 100 distance units.
COST_DISTANCE_UNIT = 100


def compute_income(request: BookingRequest) -> float:
    return (
        request.economy_booked * request.economy_price
        + request.business_booked * request.business_price
        + request.first_class_booked * request.first_class_price
    )


def compute_cost(resolved: ResolvedSpecification, request: BookingRequest) -> float:
    return resolved.running_cost / COST_DISTANCE_UNIT * resolved.distance * request.total_booked


def compute_profit(income: float, cost: float) -> float:
    return income - cost


def value_flight(resolved: ResolvedSpecification, request: BookingRequest) -> FlightResult:
    """Return unrounded income, cost and profit for ``request``."""

    income = compute_income(request)
    cost = compute_cost(resolved, request)
    return FlightResult(income=income, cost=cost, profit=compute_profit(income, cost))
