import os
from typing import Dict, List

import pandas as pd

from core.config import BAGGAGE_FILE, CATERING_FILE, DATA_DIR, FUEL_FILE
from core.schema import CsvRecord, RawCsvTable

MISSING_CELL = '-'

SOURCE_FILES = {
    'baggage': BAGGAGE_FILE,
    'catering': CATERING_FILE,
    'fuel': FUEL_FILE,
}


def parse_csv_table(raw_text: str) -> RawCsvTable:
    """
    Parses comma-separated text into headers and rows.

    Lines are trimmed and blank lines dropped. The first remaining line is the header.
    Quoting is not supported, so a field containing a comma splits into two cells.

    Args:
        raw_text: The raw CSV text.

    Returns:
        A RawCsvTable. Cells are kept as strings.
    """
    lines = [line.strip() for line in (raw_text or '').splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return RawCsvTable()

    headers = [col.strip() for col in lines[0].split(',')]
    rows = [[value.strip() for value in line.split(',')] for line in lines[1:]]
    return RawCsvTable(headers=headers, rows=rows)


def row_to_record(headers: List[str], row: List[str]) -> CsvRecord:
    # Short rows map the missing columns to '', extra cells are ignored
    return {key: (row[index] if index < len(row) else '') for index, key in enumerate(headers)}


def table_to_records(table: RawCsvTable) -> List[CsvRecord]:
    return [row_to_record(table.headers, row) for row in table.rows]


def parse_csv_records(raw_text: str) -> List[CsvRecord]:
    return table_to_records(parse_csv_table(raw_text))


def table_to_dataframe(table: RawCsvTable) -> pd.DataFrame:
    """Display view of a raw table. Missing trailing cells show as '-'."""
    padded = [
        [row[index] if index < len(row) else MISSING_CELL for index in range(len(table.headers))]
        for row in table.rows
    ]
    return pd.DataFrame(padded, columns=table.headers)


def read_text(file_path: str) -> str:
    with open(file_path, encoding='utf-8-sig') as handle:
        return handle.read()


def load_resource_tables(data_dir: str = DATA_DIR) -> Dict[str, RawCsvTable]:
    """
    Loads the baggage, catering and fuel CSV files from a directory.

    Args:
        data_dir: The directory holding the three source files.

    Returns:
        A dict mapping 'baggage', 'catering' and 'fuel' to their parsed tables.
    """
    print(f"Loading resource tables from: {data_dir}")

    tables = {}
    for name, file_name in SOURCE_FILES.items():
        file_path = os.path.join(data_dir, file_name)
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Missing {name} data file: {file_path}")

        table = parse_csv_table(read_text(file_path))
        if not table.headers:
            print(f"Warning: {file_path} is empty.")
        tables[name] = table
        print(f"Loaded {name}: {len(table.rows)} rows, columns {table.headers}")

    return tables


if __name__ == '__main__':
    for table_name, loaded in load_resource_tables().items():
        print(f"\nFirst 5 rows of {table_name}:")
        print(table_to_dataframe(loaded).head())
