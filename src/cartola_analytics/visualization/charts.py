"""
Plotly Chart Generators

Generates interactive charts for the team dashboard.
All charts return HTML strings for embedding or standalone use.
"""

from html import escape

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from cartola_analytics.models import (
    DashboardResponse,
    EfficiencyTable,
    PositionAverage,
    RoundSeries,
    ScoutPoints,
    StarPlayer,
)


DARK_THEME = {
    "paper_bgcolor": "#1a1a2e",
    "plot_bgcolor": "#16213e",
    "font_color": "#e8e8e8",
    "gridcolor": "#2d3a4f",
    "colorway": [
        "#00d9ff",
        "#ff6b6b",
        "#4ecdc4",
        "#ffe66d",
        "#a855f7",
        "#f97316",
        "#10b981",
        "#ec4899",
    ],
}


def _apply_dark_theme(fig: go.Figure) -> go.Figure:
    """Apply dark theme styling to a figure."""
    fig.update_layout(
        paper_bgcolor=DARK_THEME["paper_bgcolor"],
        plot_bgcolor=DARK_THEME["plot_bgcolor"],
        font={"color": DARK_THEME["font_color"], "family": "Inter, sans-serif"},
        colorway=DARK_THEME["colorway"],
        margin={"l": 60, "r": 40, "t": 60, "b": 60},
    )
    fig.update_xaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    fig.update_yaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    return fig


def _to_html(fig: go.Figure) -> str:
    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")


def points_series_chart(series: RoundSeries, title: str = "Points per Round") -> str:
    """
    Create a bar chart of points per round with the moving average as a line.

    Args:
        series: Season round series
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    if not any(entry.points is not None for entry in series.points):
        return "<div>No rounds imported yet</div>"

    rounds = [entry.round for entry in series.points]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=rounds,
            y=[entry.points for entry in series.points],
            name="Points",
            marker_color="#00d9ff",
            hovertemplate="Round %{x}<br>Points: %{y:.2f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=rounds,
            y=[entry.moving_avg for entry in series.points],
            name="Moving average",
            mode="lines",
            line={"color": "#ffe66d", "width": 3},
            connectgaps=False,
            hovertemplate="Round %{x}<br>Average: %{y:.2f}<extra></extra>",
        )
    )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        xaxis_title="Round",
        yaxis_title="Points",
        xaxis={"dtick": 1},
        height=450,
        legend={"orientation": "h", "yanchor": "bottom", "y": 1.02, "x": 0.5, "xanchor": "center"},
    )
    return _to_html(fig)


def asset_value_chart(series: RoundSeries, title: str = "Asset Value per Round") -> str:
    """Bar chart of the team's asset value (patrimônio) per round."""
    if not any(entry.asset_value is not None for entry in series.asset_value):
        return "<div>No asset value data available</div>"

    fig = go.Figure(
        go.Bar(
            x=[entry.round for entry in series.asset_value],
            y=[entry.asset_value for entry in series.asset_value],
            marker_color="#10b981",
            hovertemplate="Round %{x}<br>C$ %{y:.2f}<extra></extra>",
        )
    )
    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        xaxis_title="Round",
        yaxis_title="C$",
        xaxis={"dtick": 1},
        height=400,
    )
    return _to_html(fig)


def scout_points_chart(rows: list[ScoutPoints], title: str = "Points by Scout") -> str:
    """
    Create a horizontal bar chart of points contributed by each scout.

    Args:
        rows: Scout totals, sorted descending
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    if not rows:
        return "<div>No scout data available</div>"

    ordered = list(reversed(rows))
    fig = go.Figure(
        go.Bar(
            y=[r.scout for r in ordered],
            x=[r.points for r in ordered],
            orientation="h",
            marker_color=["#10b981" if r.points >= 0 else "#ef4444" for r in ordered],
            text=[f"{r.points:.1f}" for r in ordered],
            textposition="outside",
        )
    )
    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        xaxis_title="Points",
        height=max(400, len(rows) * 28),
    )
    return _to_html(fig)


def efficiency_chart(
    sg_efficiency: EfficiencyTable,
    offensive_efficiency: EfficiencyTable,
    title: str = "Positional Efficiency",
) -> str:
    """
    Create side-by-side bar charts of clean-sheet and offensive rates.

    Args:
        sg_efficiency: Clean-sheet table
        offensive_efficiency: Goal/assist table
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    fig = make_subplots(
        rows=1,
        cols=2,
        subplot_titles=("Clean sheets (SG)", "Goals / assists"),
        horizontal_spacing=0.12,
    )

    for col, (table, color) in enumerate(
        ((sg_efficiency, "#4ecdc4"), (offensive_efficiency, "#a855f7")), start=1
    ):
        rows = [*table.by_position, table.total]
        fig.add_trace(
            go.Bar(
                x=[r.position for r in rows],
                y=[(r.rate or 0) * 100 for r in rows],
                marker_color=color,
                text=[f"{r.ok}/{r.n}" for r in rows],
                textposition="outside",
                showlegend=False,
            ),
            row=1,
            col=col,
        )

    fig.update_yaxes(title_text="Rate %", range=[0, 110])
    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        height=420,
    )
    return _to_html(fig)


def position_average_chart(
    rows: list[PositionAverage], title: str = "Average Points by Position"
) -> str:
    """Bar chart of the average points per position, captain included."""
    if not any(r.n for r in rows):
        return "<div>No picks with points available</div>"

    fig = go.Figure(
        go.Bar(
            x=[r.position for r in rows],
            y=[r.avg_points for r in rows],
            marker_color="#f97316",
            text=[f"n={r.n}" for r in rows],
            textposition="outside",
        )
    )
    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        yaxis_title="Points",
        height=400,
    )
    return _to_html(fig)


def _star_players_html(stars: list[StarPlayer]) -> str:
    items = []
    for star in stars:
        if not star.player_name:
            items.append(f"<li><b>{star.position}</b> —</li>")
            continue
        badge = (
            f'<img src="{escape(star.club_badge_url)}" alt="" width="20" height="20"> '
            if star.club_badge_url
            else ""
        )
        items.append(
            f"<li><b>{star.position}</b> {badge}{escape(star.player_name)} "
            f"({star.total_points or 0:.1f} pts in {star.appearances} rounds)</li>"
        )
    return "<ul class=\"stars\">" + "".join(items) + "</ul>"


def generate_dashboard(dashboard: DashboardResponse) -> str:
    """
    Generate a full dashboard HTML page with all charts.

    Args:
        dashboard: Computed dashboard payload

    Returns:
        Complete HTML page as string
    """
    team_name = escape(dashboard.team.name or f"Team {dashboard.team_id}")
    metrics = dashboard.metrics
    venue = {True: "Home games", False: "Away games"}.get(dashboard.filters.is_home, "All games")
    asset_value = dashboard.totals.asset_value_current
    asset_text = "—" if asset_value is None else f"C$ {asset_value:.2f}"

    sections = [
        ("Points per round", points_series_chart(dashboard.series)),
        ("Asset value", asset_value_chart(dashboard.series)),
        ("Average points by position", position_average_chart(metrics.avg_points_by_position)),
        ("Efficiency", efficiency_chart(metrics.sg_efficiency, metrics.offensive_efficiency)),
        ("Points by scout", scout_points_chart(metrics.points_by_scout)),
        ("Star players", _star_players_html(metrics.star_players)),
    ]
    body = "\n".join(
        f'<section class="chart-section"><h2>{heading}</h2>{html}</section>'
        for heading, html in sections
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{team_name} - Season Dashboard</title>
    <script src="https://cdn.plot.ly/plotly-latest.min.js"></script>
    <style>
        body {{
            font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
            color: #e8e8e8;
            margin: 0;
            padding: 20px;
        }}

        .header {{
            text-align: center;
            padding: 30px 20px;
            margin-bottom: 30px;
            background: rgba(255, 255, 255, 0.05);
            border-radius: 16px;
        }}

        .header p {{
            color: #a0a0a0;
        }}

        .dashboard {{
            display: grid;
            gap: 30px;
            max-width: 1600px;
            margin: 0 auto;
        }}

        .chart-section {{
            background: rgba(255, 255, 255, 0.03);
            border-radius: 16px;
            padding: 20px;
            border: 1px solid rgba(255, 255, 255, 0.1);
        }}

        .chart-section h2 {{
            font-size: 1.3rem;
            color: #00d9ff;
        }}

        .stars li {{
            padding: 4px 0;
        }}
    </style>
</head>
<body>
    <div class="header">
        <h1>{team_name}</h1>
        <p>{venue} · Total points {dashboard.totals.points_total:.2f} ·
        Asset value {asset_text}</p>
    </div>
    <div class="dashboard">
{body}
    </div>
</body>
</html>"""
