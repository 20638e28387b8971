import os
from typing import List, Optional

import pandas as pd
import plotly.graph_objects as go

from core.config import COST_PER_MINUTE
from core.estimator import cost_curve


def plot_readiness(resources_df: pd.DataFrame, output_path: Optional[str] = None) -> go.Figure:
    """
    Creates a grouped bar chart of baggage, fuel and catering readiness per flight.

    Args:
        resources_df: DataFrame from join.resources_to_dataframe.
        output_path: If given, the figure is also saved there as HTML.

    Returns:
        The plotly Figure.
    """
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=resources_df['flight_id'],
        y=resources_df['baggage_readiness'],
        name='Baggage',
        marker_color='indianred'
    ))
    fig.add_trace(go.Bar(
        x=resources_df['flight_id'],
        y=resources_df['fuel_readiness'],
        name='Fuel',
        marker_color='lightsalmon'
    ))
    fig.add_trace(go.Bar(
        x=resources_df['flight_id'],
        y=resources_df['catering_readiness'],
        name='Catering',
        marker_color='seagreen'
    ))

    fig.update_layout(
        barmode='group',
        title_text='<b>Resource Readiness by Flight</b>',
        xaxis_title='Flight',
        yaxis_title='Readiness (%)',
        yaxis=dict(range=[0, 100]),
        legend_title_text='Resource',
        template='plotly_white'
    )

    if output_path:
        fig.write_html(output_path)
        print(f"Saved readiness plot to {output_path}")
    return fig


def plot_cost_curve(current_delay: int, max_minutes: int = 60, output_path: Optional[str] = None) -> go.Figure:
    """
    Creates an area chart of penalty cost against delay minutes, marking the current delay.
    """
    curve = cost_curve(max_minutes)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=curve['minutes'],
        y=curve['cost'],
        name='Cost',
        mode='lines',
        fill='tozeroy',
        line=dict(color='firebrick', width=3)
    ))
    fig.add_vline(
        x=current_delay,
        line_dash='dash',
        line_color='royalblue',
        annotation_text=f"Current Simulation (${current_delay * COST_PER_MINUTE:,})",
        annotation_position='top'
    )
    fig.update_layout(
        title_text='<b>Delay Cost Impact</b>',
        xaxis_title='Delay (Minutes)',
        yaxis_title='Cost ($)',
        template='plotly_white'
    )

    if output_path:
        fig.write_html(output_path)
        print(f"Saved cost curve plot to {output_path}")
    return fig


def plot_delay_contributors(contributors: List[dict]) -> go.Figure:
    fig = go.Figure(go.Pie(
        labels=[c['name'] for c in contributors],
        values=[c['value'] for c in contributors],
        hole=0.5
    ))
    fig.update_layout(title_text='<b>Delay Contributors</b>', template='plotly_white')
    return fig


if __name__ == '__main__':
    from core.config import DATA_DIR, PROJECT_ROOT
    from core.join import build_flight_resources, resources_to_dataframe
    from core.load import load_resource_tables

    tables = load_resource_tables(DATA_DIR)
    resources, _ = build_flight_resources(tables['baggage'], tables['catering'], tables['fuel'])

    plots_dir = os.path.join(PROJECT_ROOT, 'outputs', 'plots')
    if not os.path.exists(plots_dir):
        os.makedirs(plots_dir)

    plot_readiness(resources_to_dataframe(resources), os.path.join(plots_dir, 'readiness_by_flight.html'))
    plot_cost_curve(15, output_path=os.path.join(plots_dir, 'delay_cost_curve.html'))
