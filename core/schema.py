# core/schema.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class AircraftType(str, Enum):
    A320 = "A320"
    B737 = "B737"
    A350 = "A350"
    B777 = "B777"


AIRCRAFT_LABELS = {
    AircraftType.A320: "Airbus A320 (Narrow-body)",
    AircraftType.B737: "Boeing 737 (Narrow-body)",
    AircraftType.A350: "Airbus A350 (Wide-body)",
    AircraftType.B777: "Boeing 777 (Wide-body)",
}


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Bottleneck(str, Enum):
    BAGGAGE = "Baggage"
    FUEL = "Fuel"
    CATERING = "Catering"


@dataclass
class RawCsvTable:
    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


@dataclass(frozen=True)
class FlightResource:
    flight_id: str
    airline: str
    baggage_readiness: int
    fuel_readiness: int
    catering_readiness: int


@dataclass(frozen=True)
class PredictionInput:
    flight_id: str
    aircraft_type: str
    arrival_delay_minutes: int

    def __post_init__(self):
        if self.arrival_delay_minutes < 0:
            raise ValueError(f"Arrival delay cannot be negative: {self.arrival_delay_minutes}")


@dataclass(frozen=True)
class PredictionResult:
    flight_id: str
    tat: int
    base_tat: int
    risk: RiskLevel
    cost: int
    probability: int
    bottleneck: Bottleneck


@dataclass
class JoinReport:
    """Diagnostics collected while joining the three resource tables."""
    joined: int = 0
    dropped: List[str] = field(default_factory=list)
    defaulted_fields: Dict[str, int] = field(default_factory=dict)

    def record_default(self, table: str, column: str) -> None:
        key = f"{table}.{column}"
        self.defaulted_fields[key] = self.defaulted_fields.get(key, 0) + 1

    @property
    def total_defaulted(self) -> int:
        return sum(self.defaulted_fields.values())


CsvRecord = Dict[str, str]
