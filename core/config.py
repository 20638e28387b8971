import os

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Source data
DATA_DIR = os.environ.get('GROUNDOPS_DATA_DIR', os.path.join(PROJECT_ROOT, 'data'))
BAGGAGE_FILE = 'baggage_flow.csv'
CATERING_FILE = 'catering_logs.csv'
FUEL_FILE = 'fuel_operations.csv'

JOIN_KEY = 'Flight_ID'
MASK_CHAR = '*'


def _latency_from_env(default: float = 1.2) -> float:
    raw = os.environ.get('GROUNDOPS_PREDICTION_LATENCY')
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


# Simulated "processing" delay before a prediction is reported, in seconds
PREDICTION_LATENCY_SECONDS = _latency_from_env()

# Estimator parameters
COST_PER_MINUTE = 65
NARROW_BODY_BASE_TAT = 45
WIDE_BODY_BASE_TAT = 60
MIN_READINESS = 40
MAX_READINESS = 100

# UI defaults
DEFAULT_AIRCRAFT_TYPE = 'A320'
DEFAULT_ARRIVAL_DELAY = 5
DELAY_SLIDER_MIN = 0
DELAY_SLIDER_MAX = 120
DELAY_SLIDER_STEP = 5
IMPACT_SLIDER_MAX = 60
