import os
import sys

import pandas as pd
import streamlit as st

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import (
    COST_PER_MINUTE,
    DATA_DIR,
    DEFAULT_AIRCRAFT_TYPE,
    DEFAULT_ARRIVAL_DELAY,
    DELAY_SLIDER_MAX,
    DELAY_SLIDER_MIN,
    DELAY_SLIDER_STEP,
    IMPACT_SLIDER_MAX,
)
from core.estimator import fleet_delay_summary, infer_aircraft_type, recommendation, resolve_flight
from core.fixtures import ACTIVE_FLIGHTS, DELAY_CONTRIBUTORS, LIVE_STATUS
from core.join import build_flight_resources, resources_to_dataframe
from core.load import load_resource_tables, table_to_dataframe
from core.predictor import run_prediction
from core.schema import AIRCRAFT_LABELS, AircraftType, PredictionInput, RiskLevel
from core.visualize import plot_cost_curve, plot_delay_contributors, plot_readiness

# --- Page Configuration ---
st.set_page_config(
    page_title="IndiGround AI",
    page_icon="✈️",
    layout="wide",
    initial_sidebar_state="expanded",
)

# --- Helper Functions ---

@st.cache_data
def load_data(data_dir):
    """Loads and joins the three resource CSVs with caching."""
    try:
        tables = load_resource_tables(data_dir)
        resources, report = build_flight_resources(tables['baggage'], tables['catering'], tables['fuel'])
    except (FileNotFoundError, KeyError) as e:
        # KeyError wraps its message in quotes when str()-ed
        return None, None, e.args[0] if e.args else str(e)
    return tables, (resources, report), None


def on_flight_change():
    flight_id = st.session_state['flight_id']
    st.session_state['aircraft_type'] = infer_aircraft_type(flight_id, st.session_state['aircraft_type'])


data_dir = os.environ.get("GROUNDOPS_DATA_DIR", DATA_DIR)
tables, joined, load_error = load_data(data_dir)

# --- Sidebar Navigation ---
st.sidebar.title("IndiGround AI")
page = st.sidebar.radio(
    "Go to",
    ["Overview", "AI Predictor", "Resource Hub", "Impact Analysis", "Live Telemetry", "CSV Tables"],
)

# --- Main App ---

if load_error:
    st.error(f"{load_error}. Place the CSV files in `{data_dir}` or set GROUNDOPS_DATA_DIR.")
    st.stop()

resources, report = joined

if page == "Overview":
    st.title("✈️ Ground Operations Overview")
    st.markdown("Turnaround readiness across baggage, fuel and catering for every flight found in all three logs.")

    col1, col2, col3 = st.columns(3)
    col1.metric("Joined Flights", report.joined)
    col2.metric("Dropped (no match)", len(report.dropped))
    col3.metric("Defaulted Fields", report.total_defaulted)

    if resources:
        st.plotly_chart(plot_readiness(resources_to_dataframe(resources)), width="stretch")
    else:
        st.warning("No flight appears in all three CSV files.")


elif page == "AI Predictor":
    st.title("🔮 Predictive TAT Model")
    st.markdown("Using all 3 CSV datasets with unmasked records for TAT forecasting.")

    if not resources:
        st.error("No joined flights available. Check the CSV files.")
        st.stop()

    flight_ids = [r.flight_id for r in resources]
    st.session_state.setdefault('flight_id', flight_ids[0])
    st.session_state.setdefault('aircraft_type', DEFAULT_AIRCRAFT_TYPE)

    left, right = st.columns([5, 7])
    with left:
        st.subheader("Input Parameters")
        airline_by_id = {r.flight_id: r.airline for r in resources}
        st.selectbox(
            "Flight From Unified CSV Data",
            flight_ids,
            key='flight_id',
            format_func=lambda fid: f"{fid} · {airline_by_id[fid]}",
            on_change=on_flight_change,
        )
        aircraft_codes = [a.value for a in AircraftType]
        st.selectbox(
            "Aircraft Type",
            aircraft_codes,
            key='aircraft_type',
            format_func=lambda code: AIRCRAFT_LABELS[AircraftType(code)],
        )
        arrival_delay = st.slider(
            "Arrival Delay (minutes)", DELAY_SLIDER_MIN, DELAY_SLIDER_MAX, DEFAULT_ARRIVAL_DELAY, DELAY_SLIDER_STEP
        )

        active = resolve_flight(resources, st.session_state['flight_id'])
        st.markdown("**Resource Availability (from all three CSVs)**")
        st.write(f"Baggage readiness: `{active.baggage_readiness}%`")
        st.write(f"Fuel readiness: `{active.fuel_readiness}%`")
        st.write(f"Catering readiness: `{active.catering_readiness}%`")

        prediction_input = PredictionInput(active.flight_id, st.session_state['aircraft_type'], arrival_delay)
        run_clicked = st.button("Run Prediction", width="stretch")

    with right:
        if run_clicked:
            with st.spinner("Analyzing unmasked CSV operations logs..."):
                st.session_state['prediction'] = (prediction_input, run_prediction(active, prediction_input))

        stored = st.session_state.get('prediction')
        # A result only stays on screen while its inputs are unchanged
        if stored and stored[0] == prediction_input:
            result = stored[1]
            st.metric("Predicted Turnaround Time", f"{result.tat} mins")
            c1, c2, c3, c4 = st.columns(4)
            c1.metric("Risk Level", result.risk.value)
            c2.metric("Probability", f"{result.probability}%")
            c3.metric("Primary Bottleneck", result.bottleneck.value)
            c4.metric("Est. Penalty", f"${result.cost:,}")

            advice = recommendation(result)
            if result.risk == RiskLevel.HIGH:
                st.error(advice)
            elif advice:
                st.warning(advice)
        else:
            st.info("Select a flight and run prediction.")


elif page == "Resource Hub":
    st.title("🧭 Resource Hub")
    summary = fleet_delay_summary(ACTIVE_FLIGHTS)

    col1, col2 = st.columns(2)
    col1.metric("Total Delay Minutes", summary['total_delay_minutes'])
    col2.metric("Projected Financial Loss", f"${summary['total_financial_loss']:,}")

    board = pd.DataFrame([
        {
            'Flight': f['id'], 'Gate': f['gate'], 'Aircraft': f['aircraft'],
            'Predicted TAT': f['predicted_tat'], 'Base TAT': f['base_tat'],
            'Risk': f['risk'], 'Bottleneck': f['bottleneck'],
        }
        for f in ACTIVE_FLIGHTS
    ])
    st.dataframe(board, width="stretch", hide_index=True)

    selected_id = st.selectbox("Flight", [f['id'] for f in ACTIVE_FLIGHTS])
    selected = next(f for f in ACTIVE_FLIGHTS if f['id'] == selected_id)
    st.write({k.title(): v for k, v in selected['status'].items()})
    if selected['recommended_action']:
        if st.button(f"Apply: {selected['recommended_action']}"):
            st.success(f"Action applied for {selected['id']}. Estimated savings ${selected['savings']:,}.")
    else:
        st.success("All resources stable. No action required.")


elif page == "Impact Analysis":
    st.title("💸 Financial Impact Simulation")
    st.markdown("Visualize the cascading financial cost of turnaround delays.")

    delay_minutes = st.slider("Simulate Delay (minutes)", 0, IMPACT_SLIDER_MAX, 15)
    st.metric("Estimated Cost", f"${delay_minutes * COST_PER_MINUTE:,}")
    st.plotly_chart(plot_cost_curve(delay_minutes, IMPACT_SLIDER_MAX), width="stretch")


elif page == "Live Telemetry":
    st.title("📡 Live Operations Overview")

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(plot_delay_contributors(DELAY_CONTRIBUTORS), width="stretch")
    with col2:
        for step in LIVE_STATUS:
            st.write(f"**{step['task']}** · {step['time']} · {step['status']}")
            st.progress(step['progress'])


elif page == "CSV Tables":
    st.title("🗂️ CSV Table View")
    st.markdown("Browse baggage, catering, and fuel source data in one place.")

    tab_baggage, tab_catering, tab_fuel = st.tabs(["Baggage CSV", "Catering CSV", "Fuel CSV"])
    with tab_baggage:
        st.dataframe(table_to_dataframe(tables['baggage']), width="stretch")
    with tab_catering:
        st.dataframe(table_to_dataframe(tables['catering']), width="stretch")
    with tab_fuel:
        st.dataframe(table_to_dataframe(tables['fuel']), width="stretch")
