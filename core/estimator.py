from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from core.config import (
    COST_PER_MINUTE,
    IMPACT_SLIDER_MAX,
    NARROW_BODY_BASE_TAT,
    WIDE_BODY_BASE_TAT,
)
from core.preprocess import round_half_up
from core.schema import (
    AircraftType,
    Bottleneck,
    FlightResource,
    PredictionInput,
    PredictionResult,
    RiskLevel,
)

NARROW_BODY_TYPES = {AircraftType.A320.value, AircraftType.B737.value}

AIRCRAFT_BY_FLIGHT_PREFIX = {
    'SO': AircraftType.B737.value,
    'AM': AircraftType.A320.value,
    'DE': AircraftType.B777.value,
}

RISK_PROBABILITY = {
    RiskLevel.HIGH: 85,
    RiskLevel.MEDIUM: 45,
    RiskLevel.LOW: 15,
}


def base_tat(aircraft_type: str) -> int:
    """Scheduled turnaround in minutes. Anything but A320/B737 is treated as wide-body."""
    code = aircraft_type.value if isinstance(aircraft_type, AircraftType) else str(aircraft_type)
    return NARROW_BODY_BASE_TAT if code in NARROW_BODY_TYPES else WIDE_BODY_BASE_TAT


def added_delay(arrival_delay: float, resource: FlightResource) -> float:
    return (
        arrival_delay * 0.8
        + (100 - resource.baggage_readiness) * 0.2
        + (100 - resource.fuel_readiness) * 0.15
        + (100 - resource.catering_readiness) * 0.25
    )


def classify_risk(arrival_delay: float, catering_readiness: int, final_tat: int, base: int) -> RiskLevel:
    if arrival_delay > 15 and catering_readiness < 60:
        return RiskLevel.HIGH
    if final_tat > base + 10:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def select_bottleneck(resource: FlightResource) -> Bottleneck:
    """
    Lowest-readiness resource. Ties go to the later check: Catering beats Fuel beats Baggage.
    """
    lowest = min(resource.baggage_readiness, resource.fuel_readiness, resource.catering_readiness)

    bottleneck = Bottleneck.BAGGAGE
    if lowest == resource.fuel_readiness:
        bottleneck = Bottleneck.FUEL
    if lowest == resource.catering_readiness:
        bottleneck = Bottleneck.CATERING
    return bottleneck


def estimate_cost(final_tat: int, base: int) -> int:
    return max(0, (final_tat - base) * COST_PER_MINUTE)


def risk_probability(risk: RiskLevel) -> int:
    return RISK_PROBABILITY[RiskLevel(risk)]


def predict_turnaround(resource: FlightResource, prediction_input: PredictionInput) -> PredictionResult:
    """
    Estimates turnaround time, risk, penalty cost and bottleneck for one flight.

    Args:
        resource: The flight's readiness scores.
        prediction_input: Aircraft type and arrival delay chosen by the user.

    Returns:
        A PredictionResult.
    """
    base = base_tat(prediction_input.aircraft_type)
    delay = prediction_input.arrival_delay_minutes
    final_tat = round_half_up(base + added_delay(delay, resource))
    risk = classify_risk(delay, resource.catering_readiness, final_tat, base)

    return PredictionResult(
        flight_id=resource.flight_id,
        tat=final_tat,
        base_tat=base,
        risk=risk,
        cost=estimate_cost(final_tat, base),
        probability=risk_probability(risk),
        bottleneck=select_bottleneck(resource),
    )


def recommendation(result: PredictionResult) -> Optional[str]:
    """Crew reallocation hint, only shown for Medium and High risk."""
    if result.risk == RiskLevel.LOW:
        return None
    return (f"Reallocate {result.bottleneck.value.lower()} crew for {result.flight_id} "
            f"to mitigate projected delay.")


def resolve_flight(resources: List[FlightResource], flight_id: Optional[str]) -> FlightResource:
    """Finds the selected flight, falling back to the first available one."""
    if not resources:
        raise ValueError("No joined flights available for prediction.")
    for resource in resources:
        if resource.flight_id == flight_id:
            return resource
    return resources[0]


def infer_aircraft_type(flight_id: str, current: str) -> str:
    prefix = flight_id.split('-')[0]
    return AIRCRAFT_BY_FLIGHT_PREFIX.get(prefix, current)


def cost_curve(max_minutes: int = IMPACT_SLIDER_MAX, step: int = 5) -> pd.DataFrame:
    """Penalty cost for delays from 0 to max_minutes."""
    minutes = np.arange(0, max_minutes + 1, step)
    return pd.DataFrame({'minutes': minutes, 'cost': minutes * COST_PER_MINUTE})


def fleet_delay_summary(flights: List[Dict]) -> Dict[str, int]:
    """
    Total delay minutes and financial loss across a board of flights.

    Args:
        flights: Dicts with 'predicted_tat' and 'base_tat' keys.

    Returns:
        A dict with 'total_delay_minutes' and 'total_financial_loss'.
    """
    total_delay = sum(max(0, f['predicted_tat'] - f['base_tat']) for f in flights)
    return {
        'total_delay_minutes': total_delay,
        'total_financial_loss': total_delay * COST_PER_MINUTE,
    }
