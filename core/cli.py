# cli.py
import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import DATA_DIR, DEFAULT_AIRCRAFT_TYPE, DEFAULT_ARRIVAL_DELAY
from core.estimator import predict_turnaround, recommendation, resolve_flight
from core.join import build_flight_resources, resources_to_dataframe
from core.load import load_resource_tables
from core.predictor import run_prediction
from core.schema import PredictionInput


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turnaround readiness and TAT estimates from ground-ops CSV logs.")
    parser.add_argument("data_dir", nargs="?", default=DATA_DIR, help="Directory with the baggage, catering and fuel CSVs")
    parser.add_argument("--flight", help="Flight id to predict (defaults to the first joined flight)")
    parser.add_argument("--aircraft", default=DEFAULT_AIRCRAFT_TYPE, help="Aircraft type, e.g. A320, B737, A350, B777")
    parser.add_argument("--delay", type=int, default=DEFAULT_ARRIVAL_DELAY, help="Arrival delay in minutes")
    parser.add_argument("--no-wait", action="store_true", help="Skip the simulated processing delay")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        tables = load_resource_tables(args.data_dir)
        resources, report = build_flight_resources(tables['baggage'], tables['catering'], tables['fuel'])
        print(resources_to_dataframe(resources).to_string(index=False))
        if report.dropped:
            print(f"Dropped (no catering/fuel match): {', '.join(report.dropped)}")

        resource = resolve_flight(resources, args.flight)
        prediction_input = PredictionInput(resource.flight_id, args.aircraft, args.delay)
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.no_wait:
        result = predict_turnaround(resource, prediction_input)
    else:
        print("Analyzing unmasked CSV operations logs...")
        result = run_prediction(resource, prediction_input)

    print(f"\nFlight {result.flight_id} ({resource.airline}), {args.aircraft}, arrival delay {args.delay} min")
    print(f"Predicted TAT: {result.tat} mins (base {result.base_tat})")
    print(f"Risk: {result.risk.value} ({result.probability}%)")
    print(f"Primary bottleneck: {result.bottleneck.value}")
    print(f"Est. penalty: ${result.cost:,}")
    advice = recommendation(result)
    if advice:
        print(advice)
    return 0


if __name__ == "__main__":
    sys.exit(main())
