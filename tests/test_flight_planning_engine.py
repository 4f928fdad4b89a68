"""Tests for the flight build pipeline."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flight_planning import (
    BookingRequest,
    Flight,
    LookupFailure,
    OverbookingClass,
    OverbookingTotal,
    PlanningConfig,
    RangeInfeasible,
    build_flight,
    build_reference_tables,
    evaluate_booking,
)

AIRPORT_ROWS = [
    ["JFK", "John F Kennedy International", 5376, 5583],
    ["ORY", "Paris-Orly", 610, 325],
    ["MAD", "Madrid-Barajas", 1435, 1216],
    ["AMS", "Amsterdam Schiphol", 485, 363],
    ["CAI", "Cairo International", 3740, 3494],
]

AIRCRAFT_ROWS = [
    ["Medium narrow body", "£8", 2650, 160, 12, 0],
    ["Large narrow body", "£7", 5600, 180, 20, 4],
    ["Medium wide body", "£5", 4050, 380, 20, 8],
]

TABLES = build_reference_tables(AIRPORT_ROWS, AIRCRAFT_ROWS)


def _build_request(**overrides) -> BookingRequest:
    payload = {
        "home_base": "A",
        "overseas_airport_code": "JFK",
        "aircraft_type": "Large narrow body",
        "economy_booked": 150,
        "business_booked": 12,
        "first_class_booked": 2,
        "economy_price": 399,
        "business_price": 999,
        "first_class_price": 1899,
    }
    payload.update(overrides)
    return BookingRequest(**payload)


def test_route_beyond_aircraft_range_is_rejected() -> None:
    outcome = build_flight(_build_request(aircraft_type="Medium narrow body", first_class_booked=0), TABLES)

    assert not outcome.ok
    assert outcome.flight is None
    assert outcome.rejection.kind == "RANGE_INFEASIBLE"
    assert outcome.rejection.phase == "VALIDATING"
    assert "Medium narrow body" in outcome.rejection.reason
    assert "MAN" in outcome.rejection.reason
    assert "JFK" in outcome.rejection.reason


def test_wide_body_within_limits_is_valued() -> None:
    request = _build_request(
        overseas_airport_code="CAI",
        aircraft_type="Medium wide body",
        economy_booked=100,
        business_booked=10,
        first_class_booked=5,
    )

    flight = build_flight(request, TABLES).unwrap()

    assert flight.distance == 3740
    assert flight.running_cost == 5
    assert flight.total_seats == 408
    assert flight.booked_seats == 115
    assert flight.income == pytest.approx(100 * 399 + 10 * 999 + 5 * 1899)
    assert flight.cost == pytest.approx(5 / 100 * 3740 * 115)
    assert flight.profit == pytest.approx(flight.income - flight.cost, abs=1e-9)


def test_large_narrow_body_to_jfk_uses_per_hundred_cost_unit() -> None:
    flight = build_flight(_build_request(), TABLES).unwrap()

    assert flight.origin == "MAN"
    assert flight.destination == "JFK"
    assert flight.distance == 5376
    assert flight.cost == pytest.approx(7 / 100 * 5376 * 164)
    assert flight.income == pytest.approx(75636)
    assert flight.as_dict()["profit"] == round(75636 - 7 / 100 * 5376 * 164, 2)


def test_home_base_b_uses_second_distance_column() -> None:
    flight = build_flight(
        _build_request(home_base="B", overseas_airport_code="ORY", aircraft_type="Medium narrow body", first_class_booked=0),
        TABLES,
    ).unwrap()

    assert flight.origin == "LGW"
    assert flight.distance == 325


def test_unknown_overseas_airport_fails_lookup_regardless_of_other_fields() -> None:
    outcome = build_flight(
        _build_request(overseas_airport_code="XXX", aircraft_type="Unknown jet", economy_booked=999),
        TABLES,
    )

    assert outcome.rejection.kind == "LOOKUP_FAILURE"
    assert outcome.rejection.phase == "RESOLVING"
    assert "XXX" in outcome.rejection.reason
    assert len(outcome.rejections) == 1


def test_unknown_aircraft_fails_lookup() -> None:
    outcome = build_flight(_build_request(aircraft_type="Jumbo"), TABLES)

    assert outcome.rejection.kind == "LOOKUP_FAILURE"
    assert "Jumbo" in outcome.rejection.reason
    with pytest.raises(LookupFailure):
        outcome.unwrap()


def test_lookup_trims_whitespace_but_keeps_case() -> None:
    assert build_flight(_build_request(overseas_airport_code=" JFK ", aircraft_type=" Large narrow body "), TABLES).ok

    outcome = build_flight(_build_request(overseas_airport_code="jfk"), TABLES)
    assert outcome.rejection.kind == "LOOKUP_FAILURE"


def test_single_class_overbooked_within_total_capacity() -> None:
    request = _build_request(
        overseas_airport_code="ORY",
        aircraft_type="Medium narrow body",
        economy_booked=100,
        business_booked=0,
        first_class_booked=1,
    )

    outcome = build_flight(request, TABLES)

    assert outcome.rejection.kind == "OVERBOOKING_CLASS"
    assert "first class" in outcome.rejection.reason
    with pytest.raises(OverbookingClass):
        outcome.unwrap()


def test_first_failing_rule_is_reported_by_default() -> None:
    request = _build_request(aircraft_type="Medium narrow body", economy_booked=200, first_class_booked=3)

    outcome = build_flight(request, TABLES)

    assert [rejection.kind for rejection in outcome.rejections] == ["RANGE_INFEASIBLE"]
    with pytest.raises(RangeInfeasible):
        outcome.unwrap()


def test_collect_all_mode_reports_every_violation_in_rule_order() -> None:
    request = _build_request(aircraft_type="Medium narrow body", economy_booked=200, first_class_booked=3)

    outcome = build_flight(request, TABLES, config=PlanningConfig(collect_all_failures=True))

    assert [rejection.kind for rejection in outcome.rejections] == [
        "RANGE_INFEASIBLE",
        "OVERBOOKING_TOTAL",
        "OVERBOOKING_CLASS",
        "OVERBOOKING_CLASS",
    ]
    assert outcome.rejection.kind == "RANGE_INFEASIBLE"


def test_repeated_queries_return_identical_values() -> None:
    flight = build_flight(_build_request(), TABLES).unwrap()

    assert flight.profit == flight.profit
    assert flight.cost == flight.cost
    assert flight.result is flight.result


def test_negative_profit_is_not_floored() -> None:
    flight = build_flight(
        _build_request(economy_booked=10, business_booked=0, first_class_booked=0, economy_price=1),
        TABLES,
    ).unwrap()

    assert flight.profit < 0
    assert flight.profit == pytest.approx(10 - 7 / 100 * 5376 * 10)


def test_mapping_requests_are_validated_at_the_boundary() -> None:
    flight = evaluate_booking(
        {
            "home_base": "a",
            "overseas_airport_code": "AMS",
            "aircraft_type": "Medium narrow body",
            "economy_booked": 50,
            "economy_price": 120,
        },
        TABLES,
    )

    assert flight.origin == "MAN"
    assert flight.distance == 485
    assert flight.income == pytest.approx(6000)


def test_total_overbooking_is_reported_before_class_overbooking() -> None:
    request = _build_request(
        overseas_airport_code="CAI",
        aircraft_type="Medium wide body",
        economy_booked=381,
        business_booked=20,
        first_class_booked=8,
    )

    outcome = build_flight(request, TABLES)

    assert [rejection.kind for rejection in outcome.rejections] == ["OVERBOOKING_TOTAL"]
    assert "409" in outcome.rejection.reason
    with pytest.raises(OverbookingTotal):
        outcome.unwrap()


def test_outcome_rejections_cannot_be_modified() -> None:
    outcome = build_flight(_build_request(overseas_airport_code="XXX"), TABLES)

    assert isinstance(outcome.rejections, tuple)
    with pytest.raises(AttributeError):
        outcome.rejections.append(outcome.rejection)  # type: ignore[attr-defined]


def test_flight_requires_an_origin() -> None:
    built = build_flight(_build_request(), TABLES).unwrap()

    with pytest.raises(TypeError):
        Flight(  # type: ignore[call-arg]
            request=built.request,
            specification=built.specification,
            result=built.result,
            tables=TABLES,
        )
