"""Shared dataclasses for reference records, resolution and valuation."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Literal, Mapping, Optional, Tuple

RejectionKind = Literal["LOOKUP_FAILURE", "RANGE_INFEASIBLE", "OVERBOOKING_TOTAL", "OVERBOOKING_CLASS"]
Phase = Literal["RESOLVING", "VALIDATING"]


@dataclass(frozen=True)
class AirportRecord:
    code: str
    name: str
    distance_from_base_a: float
    distance_from_base_b: float

    def distance_from(self, home_base: str) -> float:
        if home_base == "A":
            return self.distance_from_base_a
        if home_base == "B":
            return self.distance_from_base_b
        raise ValueError(f"Unknown home base '{home_base}'")


@dataclass(frozen=True)
class AircraftRecord:
    type: str
    running_cost: float
    max_range: float
    economy_capacity: int
    business_capacity: int
    first_class_capacity: int

    @property
    def total_capacity(self) -> int:
        return self.economy_capacity + self.business_capacity + self.first_class_capacity


@dataclass(frozen=True)
class ReferenceTables:
    """Read-only airport and aircraft lookups shared across flights."""

    airports: Mapping[str, AirportRecord] = field(default_factory=dict)
    aircraft: Mapping[str, AircraftRecord] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "airports", MappingProxyType(dict(self.airports)))
        object.__setattr__(self, "aircraft", MappingProxyType(dict(self.aircraft)))


@dataclass(frozen=True)
class ResolvedSpecification:
    """Distance, running cost, range and capacities derived for one booking."""

    distance: float
    running_cost: float
    max_range: float
    economy_capacity: int
    business_capacity: int
    first_class_capacity: int

    @property
    def total_capacity(self) -> int:
        return self.economy_capacity + self.business_capacity + self.first_class_capacity

    @classmethod
    def from_records(cls, distance: float, aircraft: AircraftRecord) -> "ResolvedSpecification":
        return cls(
            distance=distance,
            running_cost=aircraft.running_cost,
            max_range=aircraft.max_range,
            economy_capacity=aircraft.economy_capacity,
            business_capacity=aircraft.business_capacity,
            first_class_capacity=aircraft.first_class_capacity,
        )


@dataclass(frozen=True)
class FlightResult:
    income: float
    cost: float
    profit: float

    def as_dict(self, *, rounded: bool = True) -> Dict[str, float]:
        """Return the figures, rounded to two decimals unless ``rounded`` is false."""

        payload = {"income": self.income, "cost": self.cost, "profit": self.profit}
        if rounded:
            return {key: round(value, 2) for key, value in payload.items()}
        return payload


@dataclass(frozen=True)
class Rejection:
    """A single reason a booking cannot be flown."""

    kind: RejectionKind
    reason: str
    phase: Phase = "VALIDATING"

    def as_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "reason": self.reason, "phase": self.phase}


@dataclass(frozen=True)
class ValidationResult:
    failures: Tuple[Rejection, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.failures

    @property
    def first_failure(self) -> Optional[Rejection]:
        return self.failures[0] if self.failures else None
