from core.config import MAX_READINESS, MIN_READINESS
from core.preprocess import round_half_up


def clamp_readiness(score: float) -> int:
    """Rounds a raw readiness score and clamps it to the [40, 100] band."""
    return max(MIN_READINESS, min(MAX_READINESS, round_half_up(score)))


def baggage_readiness(unload_minutes: float, bag_count: float) -> int:
    return clamp_readiness(100 - unload_minutes * 0.8 - bag_count * 0.06)


def fuel_readiness(fuel_minutes: float, fuel_liters: float) -> int:
    return clamp_readiness(100 - fuel_minutes * 1.1 - fuel_liters / 850)


def catering_readiness(load_minutes: float, meals_qty: float) -> int:
    return clamp_readiness(100 - load_minutes * 1.2 - meals_qty * 0.05)
