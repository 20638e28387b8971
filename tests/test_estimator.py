from pathlib import Path
import sys

if str(Path(__file__).resolve().parents[1]) not in sys.path:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest

from core.estimator import (
    base_tat,
    classify_risk,
    cost_curve,
    estimate_cost,
    fleet_delay_summary,
    infer_aircraft_type,
    predict_turnaround,
    recommendation,
    resolve_flight,
    risk_probability,
    select_bottleneck,
)
from core.fixtures import ACTIVE_FLIGHTS
from core.schema import AircraftType, Bottleneck, FlightResource, PredictionInput, RiskLevel


def _build_resource(baggage: int = 100, fuel: int = 100, catering: int = 100, flight_id: str = "SO-101") -> FlightResource:
    return FlightResource(
        flight_id=flight_id,
        airline="IndiGo",
        baggage_readiness=baggage,
        fuel_readiness=fuel,
        catering_readiness=catering,
    )


def test_base_tat_lookup() -> None:
    assert base_tat("A320") == 45
    assert base_tat("B737") == 45
    assert base_tat(AircraftType.B737) == 45
    assert base_tat("A350") == 60
    assert base_tat("B777") == 60
    assert base_tat("Concorde") == 60
    assert base_tat("a320") == 60


def test_end_to_end_prediction() -> None:
    resource = _build_resource(baggage=74, fuel=58, catering=49)

    result = predict_turnaround(resource, PredictionInput("SO-101", "A320", 10))

    assert result.tat == 77
    assert result.base_tat == 45
    assert result.risk == RiskLevel.MEDIUM
    assert result.cost == 2080
    assert result.probability == 45
    assert result.bottleneck == Bottleneck.CATERING
    assert recommendation(result) == "Reallocate catering crew for SO-101 to mitigate projected delay."


def test_high_risk_when_delayed_and_catering_low() -> None:
    result = predict_turnaround(_build_resource(catering=55), PredictionInput("SO-101", "B777", 20))

    assert result.risk == RiskLevel.HIGH
    assert result.probability == 85


def test_high_risk_rule_needs_both_conditions() -> None:
    assert classify_risk(15, 55, 45, 45) == RiskLevel.LOW
    assert classify_risk(16, 60, 45, 45) == RiskLevel.LOW
    assert classify_risk(16, 59, 45, 45) == RiskLevel.HIGH


def test_low_risk_for_small_delay_and_full_readiness() -> None:
    result = predict_turnaround(_build_resource(), PredictionInput("SO-101", "A320", 5))

    assert result.tat == 49
    assert result.risk == RiskLevel.LOW
    assert result.probability == 15
    assert result.cost == 260
    assert recommendation(result) is None


def test_medium_risk_threshold() -> None:
    assert classify_risk(0, 100, 55, 45) == RiskLevel.LOW
    assert classify_risk(0, 100, 56, 45) == RiskLevel.MEDIUM


def test_bottleneck_ties_resolve_to_last_checked() -> None:
    assert select_bottleneck(_build_resource(40, 40, 40)) == Bottleneck.CATERING
    assert select_bottleneck(_build_resource(40, 40, 50)) == Bottleneck.FUEL
    assert select_bottleneck(_build_resource(40, 50, 40)) == Bottleneck.CATERING
    assert select_bottleneck(_build_resource(40, 50, 50)) == Bottleneck.BAGGAGE
    assert select_bottleneck(_build_resource(90, 60, 70)) == Bottleneck.FUEL


def test_cost_estimate() -> None:
    assert estimate_cost(45, 45) == 0
    assert estimate_cost(55, 45) == 650
    assert estimate_cost(40, 45) == 0


def test_probability_lookup() -> None:
    assert risk_probability(RiskLevel.HIGH) == 85
    assert risk_probability(RiskLevel.MEDIUM) == 45
    assert risk_probability("Low") == 15


def test_negative_delay_is_rejected() -> None:
    with pytest.raises(ValueError):
        PredictionInput("SO-101", "A320", -5)


def test_resolve_flight_falls_back_to_first() -> None:
    resources = [_build_resource(flight_id="SO-1"), _build_resource(flight_id="SO-2")]

    assert resolve_flight(resources, "SO-2").flight_id == "SO-2"
    assert resolve_flight(resources, "XX-0").flight_id == "SO-1"
    assert resolve_flight(resources, None).flight_id == "SO-1"


def test_resolve_flight_without_resources() -> None:
    with pytest.raises(ValueError):
        resolve_flight([], "SO-1")


def test_infer_aircraft_type_from_prefix() -> None:
    assert infer_aircraft_type("SO-101", "A350") == "B737"
    assert infer_aircraft_type("AM-204", "B777") == "A320"
    assert infer_aircraft_type("DE-315", "A320") == "B777"
    assert infer_aircraft_type("6E-482", "A350") == "A350"


def test_cost_curve_points() -> None:
    curve = cost_curve()

    assert curve["minutes"].tolist() == list(range(0, 61, 5))
    assert curve["cost"].tolist()[-1] == 60 * 65


def test_fleet_delay_summary_over_board() -> None:
    summary = fleet_delay_summary(ACTIVE_FLIGHTS)

    assert summary == {"total_delay_minutes": 67, "total_financial_loss": 67 * 65}


def test_fleet_delay_summary_ignores_early_flights() -> None:
    summary = fleet_delay_summary([{"predicted_tat": 40, "base_tat": 45}])

    assert summary["total_delay_minutes"] == 0
