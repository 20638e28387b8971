from typing import Dict, List, Optional, Tuple

import pandas as pd

from core.config import JOIN_KEY
from core.load import table_to_records
from core.preprocess import duration_in_minutes, parse_clock, try_parse_number, unmask
from core.readiness import baggage_readiness, catering_readiness, fuel_readiness
from core.schema import CsvRecord, FlightResource, JoinReport, RawCsvTable

UNKNOWN_AIRLINE = 'Unknown'


def _require_join_key(name: str, table: RawCsvTable) -> None:
    if table.rows and JOIN_KEY not in table.headers:
        raise KeyError(f"'{JOIN_KEY}' column not found in {name} table. Columns: {table.headers}")


def index_by_flight(records: List[CsvRecord]) -> Dict[str, CsvRecord]:
    """Maps unmasked flight id to record. A repeated id keeps the last record."""
    return {unmask(record.get(JOIN_KEY, '')): record for record in records}


def _number(record: CsvRecord, column: str, table: str, report: JoinReport) -> float:
    value = try_parse_number(record.get(column, ''))
    if value is None:
        report.record_default(table, column)
        return 0.0
    return value


def _duration(record: CsvRecord, start_col: str, end_col: str, table: str, report: JoinReport) -> int:
    start = record.get(start_col, '')
    end = record.get(end_col, '')
    for column, value in ((start_col, start), (end_col, end)):
        if parse_clock(value) is None:
            report.record_default(table, column)
    return duration_in_minutes(start, end)


def score_flight(
    flight_id: str,
    baggage: CsvRecord,
    catering: CsvRecord,
    fuel: CsvRecord,
    report: Optional[JoinReport] = None,
) -> FlightResource:
    """
    Computes the three readiness scores for one joined flight.

    Args:
        flight_id: The unmasked flight id.
        baggage: The flight's baggage record.
        catering: The flight's catering record.
        fuel: The flight's fuel record.
        report: Collects the fields that fell back to a default value.

    Returns:
        A FlightResource.
    """
    report = report if report is not None else JoinReport()

    unload_mins = _duration(baggage, 'Unload_Start', 'Unload_End', 'baggage', report)
    bag_count = _number(baggage, 'Bags_Count', 'baggage', report)

    fuel_mins = _duration(fuel, 'Arrival_Time', 'Finish_Time', 'fuel', report)
    fuel_liters = _number(fuel, 'Fuel_Liters', 'fuel', report)

    catering_mins = _duration(catering, 'Load_Start', 'Load_Finish', 'catering', report)
    meals = _number(catering, 'Meals_Qty', 'catering', report)

    return FlightResource(
        flight_id=flight_id,
        airline=unmask(fuel.get('Airline', '')) or UNKNOWN_AIRLINE,
        baggage_readiness=baggage_readiness(unload_mins, bag_count),
        fuel_readiness=fuel_readiness(fuel_mins, fuel_liters),
        catering_readiness=catering_readiness(catering_mins, meals),
    )


def build_flight_resources(
    baggage: RawCsvTable,
    catering: RawCsvTable,
    fuel: RawCsvTable,
) -> Tuple[List[FlightResource], JoinReport]:
    """
    Inner-joins the three resource tables on the unmasked flight id.

    The baggage table drives the join: output follows baggage order, and a baggage
    row without both a catering and a fuel partner is dropped.

    Args:
        baggage: The baggage flow table.
        catering: The catering log table.
        fuel: The fuel operations table.

    Returns:
        The joined FlightResource list and a JoinReport with drop/default counts.
    """
    for name, table in (('baggage', baggage), ('catering', catering), ('fuel', fuel)):
        _require_join_key(name, table)

    catering_by_flight = index_by_flight(table_to_records(catering))
    fuel_by_flight = index_by_flight(table_to_records(fuel))

    report = JoinReport()
    resources = []
    for baggage_record in table_to_records(baggage):
        flight_id = unmask(baggage_record.get(JOIN_KEY, ''))
        catering_record = catering_by_flight.get(flight_id)
        fuel_record = fuel_by_flight.get(flight_id)
        if catering_record is None or fuel_record is None:
            report.dropped.append(flight_id)
            continue

        resources.append(score_flight(flight_id, baggage_record, catering_record, fuel_record, report))

    report.joined = len(resources)
    print(f"Joined {report.joined} flights, dropped {len(report.dropped)}, "
          f"defaulted {report.total_defaulted} fields.")
    return resources, report


def resources_to_dataframe(resources: List[FlightResource]) -> pd.DataFrame:
    columns = ['flight_id', 'airline', 'baggage_readiness', 'fuel_readiness', 'catering_readiness']
    return pd.DataFrame([[getattr(r, col) for col in columns] for r in resources], columns=columns)
