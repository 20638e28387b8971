from pathlib import Path
import sys

if str(Path(__file__).resolve().parents[1]) not in sys.path:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parents[1]
UI_PATH = str(ROOT / "app" / "ui.py")


def _write_sources(directory: Path, baggage_header: str = "Flight_ID,Bags_Count,Unload_Start,Unload_End") -> None:
    (directory / "baggage_flow.csv").write_text(f"{baggage_header}\nSO-1*,10,08:00,08:10\n")
    (directory / "catering_logs.csv").write_text("Flight_ID,Meals_Qty,Load_Start,Load_Finish\nSO-1*,10,08:00,08:10\n")
    (directory / "fuel_operations.csv").write_text(
        "Flight_ID,Fuel_Liters,Arrival_Time,Finish_Time,Airline\nSO-1*,100,08:00,08:10,IndiGo\n"
    )


def test_dashboard_overview_renders_joined_counts(tmp_path, monkeypatch) -> None:
    _write_sources(tmp_path)
    monkeypatch.setenv("GROUNDOPS_DATA_DIR", str(tmp_path))

    at = AppTest.from_file(UI_PATH, default_timeout=30).run()

    assert not at.exception
    assert at.metric[0].value == "1"


def test_dashboard_shows_error_for_missing_join_key(tmp_path, monkeypatch) -> None:
    _write_sources(tmp_path, baggage_header="Flight,Bags_Count,Unload_Start,Unload_End")
    monkeypatch.setenv("GROUNDOPS_DATA_DIR", str(tmp_path))

    at = AppTest.from_file(UI_PATH, default_timeout=30).run()

    assert not at.exception
    assert len(at.error) == 1
    assert "'Flight_ID' column not found in baggage table" in at.error[0].value


def test_dashboard_shows_error_for_missing_files(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GROUNDOPS_DATA_DIR", str(tmp_path))

    at = AppTest.from_file(UI_PATH, default_timeout=30).run()

    assert not at.exception
    assert "Missing baggage data file" in at.error[0].value
