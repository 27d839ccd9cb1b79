import pandas as pd
import plotly.graph_objects as go

from .config import DEFAULT_VALUE_LABEL


# ============================================================
# Configuration / constants
# ============================================================

DIVISION_COLORS: dict[str, str] = {
    "New England": "#1f77b4",
    "Mid-Atlantic": "#d62728",
    "East North Central": "#2ca02c",
    "West North Central": "#9467bd",
    "South Atlantic": "#ff7f0e",
    "East South Central": "#8c564b",
    "West South Central": "#e377c2",
    "Mountain": "#7f7f7f",
    "Pacific": "#17becf",
}

HOVER_TEMPLATE_DIVISION = (
    "Division: %{customdata[0]}<br>"
    "Year: %{x}<br>"
    "Mean: %{y:,.1f}<extra></extra>"
)

HOVER_TEMPLATE_COUNTY = (
    "County: %{customdata[0]}<br>"
    "Year: %{x}<br>"
    "Value: %{y:,}<extra></extra>"
)


# ============================================================
# Helper functions
# ============================================================


def _pretty(label: str) -> str:
    """``"enrollment_count"`` -> ``"Enrollment Count"``."""
    return label.replace("_", " ").title()


def _style_layout(fig: go.Figure, title: str, y_axis_label: str, legend_title: str) -> None:
    fig.update_xaxes(title_text="Year", showgrid=True)
    fig.update_yaxes(title_text=y_axis_label, tickformat=",", rangemode="tozero")
    fig.update_layout(
        title=dict(text=f"<b>{title}</b>"),
        height=600,
        width=1000,
        legend=dict(
            title=legend_title,
            bordercolor="#c7c7c7",
            borderwidth=2,
            bgcolor="#f9f9f9",
            font=dict(size=12),
        ),
        margin=dict(t=100, l=50, r=80, b=40),
        plot_bgcolor="#f5f7fb",
    )


# ============================================================
# Main plotting functions
# ============================================================


def create_division_plot(
    trend: pd.DataFrame,
    *,
    value_label: str = DEFAULT_VALUE_LABEL,
) -> go.Figure:
    """
    Line chart of the yearly division means from ``division_trend``.

    Parameters
    ----------
    trend : pd.DataFrame
        Columns 'year', 'division' and 'mean_value'.
    value_label : str, default "enrollment_count"
        Name of the summarised metric (for titles).

    Returns
    -------
    go.Figure
        One trace per division; an empty Figure when there is nothing to plot.
    """
    df_clean = trend.dropna(subset=["mean_value"])
    if df_clean.empty:
        return go.Figure()

    fig = go.Figure()
    for division, sub in df_clean.groupby("division", sort=True):
        color = DIVISION_COLORS.get(division)
        fig.add_trace(
            go.Scatter(
                x=sub["year"],
                y=sub["mean_value"],
                mode="lines+markers",
                line=dict(width=3, color=color),
                marker=dict(size=8, color=color),
                name=division,
                hovertemplate=HOVER_TEMPLATE_DIVISION,
                customdata=[[division]] * len(sub),
            )
        )

    _style_layout(
        fig,
        title=f"Mean {_pretty(value_label)} by Census Division",
        y_axis_label=f"Mean {_pretty(value_label)}",
        legend_title="Division",
    )
    return fig


def create_county_plot(
    series: pd.DataFrame,
    *,
    state: str,
    direction: str,
    value_label: str = DEFAULT_VALUE_LABEL,
) -> go.Figure:
    """
    Line chart of the per-county series from ``county_ranking``.

    Traces follow the row order of ``series``, so the legend lists counties
    in rank order.
    """
    df_clean = series.dropna(subset=["value"])
    if df_clean.empty:
        return go.Figure()

    fig = go.Figure()
    for county, sub in df_clean.groupby("county", sort=False):
        fig.add_trace(
            go.Scatter(
                x=sub["year"],
                y=sub["value"],
                mode="lines+markers",
                line=dict(width=2),
                marker=dict(size=7),
                name=county,
                hovertemplate=HOVER_TEMPLATE_COUNTY,
                customdata=[[county]] * len(sub),
            )
        )

    n_counties = df_clean["county"].nunique()
    _style_layout(
        fig,
        title=f"{direction.title()} {n_counties} Counties in {state} by {_pretty(value_label)}",
        y_axis_label=_pretty(value_label),
        legend_title="County",
    )
    return fig
