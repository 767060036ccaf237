"""Plotly 2D interactive star chart renderer.

Plots the scene in its own surface coordinates with the y axis reversed, so the
chart matches the PNG/SVG output. Supports wheel zoom and drag panning.
"""

import plotly.graph_objects as go

from skydome.models import RenderableScene
from skydome.renderers.palette import GUIDE_OPACITY, LABEL_FONT_SIZE, get_palette


def render_plotly_chart(scene: RenderableScene, theme: str = "dark") -> go.Figure:
    """Render a scene as a Plotly 2D interactive star chart.

    Args:
        scene: Composed scene.
        theme: Palette name ("light" or "dark").

    Returns:
        Plotly Figure object with a line, a star and a label trace.
    """
    palette = get_palette(theme)
    points = scene.points

    star_trace = go.Scatter(
        x=[p.x for p in points],
        y=[p.y for p in points],
        mode="markers",
        marker=dict(
            size=[2 * p.radius for p in points],
            color=palette.star,
            opacity=1.0,
            line=dict(width=0),
        ),
        customdata=[p.body_id for p in points],
        hoverinfo="skip",
        name="stars",
    )

    # Constellation lines: single trace using None separators
    lx: list[float | None] = []
    ly: list[float | None] = []
    for seg in scene.segments:
        lx += [seg.x1, seg.x2, None]
        ly += [seg.y1, seg.y2, None]

    line_trace = go.Scatter(
        x=lx,
        y=ly,
        mode="lines",
        line=dict(color=palette.line, width=1),
        opacity=palette.line_opacity,
        hoverinfo="skip",
        name="constellations",
    )

    labels = scene.labels
    label_trace = go.Scatter(
        x=[lb.x for lb in labels],
        y=[lb.y for lb in labels],
        mode="text",
        text=[lb.text for lb in labels],
        textfont=dict(color=palette.text, size=[LABEL_FONT_SIZE[lb.kind] for lb in labels]),
        hoverinfo="skip",
        name="labels",
    )

    fig = go.Figure(data=[line_trace, star_trace, label_trace])

    fig.update_layout(
        paper_bgcolor=palette.background,
        plot_bgcolor=palette.background,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=scene.width,
        height=scene.height,
        dragmode="pan",
        xaxis=dict(visible=False, range=[0, scene.width], fixedrange=False),
        yaxis=dict(
            visible=False,
            range=[scene.height, 0],
            scaleanchor="x",
            scaleratio=1,
            fixedrange=False,
        ),
        shapes=[
            dict(
                type="circle",
                xref="x",
                yref="y",
                x0=c.cx - c.radius,
                y0=c.cy - c.radius,
                x1=c.cx + c.radius,
                y1=c.cy + c.radius,
                line=dict(color=palette.guide, width=1),
                opacity=GUIDE_OPACITY[c.kind],
                fillcolor="rgba(0,0,0,0)",
                layer="below",
            )
            for c in scene.circles
        ],
    )

    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]

    return fig
