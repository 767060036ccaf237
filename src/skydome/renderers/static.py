"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from skydome.models import RenderableScene
from skydome.renderers.palette import GUIDE_OPACITY, LABEL_FONT_SIZE, get_palette


def _marker_area(radius: np.ndarray, dpi: int) -> np.ndarray:
    """Surface-pixel radius → scatter marker area in points²."""
    return (2 * radius * 72 / dpi) ** 2


def render_static_chart(scene: RenderableScene, theme: str = "light", dpi: int = 100) -> Figure:
    """Render a scene as a static matplotlib figure of the scene's pixel size.

    Args:
        scene: Composed scene.
        theme: Palette name ("light" or "dark").
        dpi: Figure resolution; one scene unit is one output pixel.

    Returns:
        matplotlib Figure object.
    """
    palette = get_palette(theme)
    fig = plt.figure(figsize=(scene.width / dpi, scene.height / dpi), dpi=dpi)
    ax = fig.add_axes((0, 0, 1, 1))
    fig.patch.set_facecolor(palette.background)
    ax.set_facecolor(palette.background)

    for guide in scene.circles:
        ax.add_patch(
            Circle(
                (guide.cx, guide.cy),
                guide.radius,
                fill=False,
                edgecolor=palette.guide,
                alpha=GUIDE_OPACITY[guide.kind],
                linewidth=1,
                zorder=0,
            )
        )

    segments = [[(s.x1, s.y1), (s.x2, s.y2)] for s in scene.segments]
    if segments:
        ax.add_collection(
            LineCollection(
                segments,
                colors=palette.line,
                linewidths=1,
                alpha=palette.line_opacity,
                zorder=1,
            )
        )

    points = scene.points
    if points:
        x_vals = np.array([p.x for p in points])
        y_vals = np.array([p.y for p in points])
        radii = np.array([p.radius for p in points])
        glow = np.array([p.glow for p in points])

        if glow.any():
            ax.scatter(
                x_vals[glow],
                y_vals[glow],
                s=_marker_area(radii[glow] * 3, dpi),
                color=palette.star,
                alpha=0.2,
                linewidths=0,
                zorder=2,
            )
        colors = np.tile(to_rgba(palette.star), (len(points), 1))
        colors[:, 3] = [p.intensity for p in points]
        ax.scatter(
            x_vals, y_vals, s=_marker_area(radii, dpi), c=colors, linewidths=0, zorder=3
        )

    for label in scene.labels:
        ax.text(
            label.x,
            label.y,
            label.text,
            color=palette.text,
            fontsize=LABEL_FONT_SIZE[label.kind],
            ha="center",
            va="center",
            zorder=4,
        )

    # Surface y grows downward
    ax.set_xlim(0, scene.width)
    ax.set_ylim(scene.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_chart(
    scene: RenderableScene,
    output_path: Path | None = None,
    theme: str = "light",
    name: str = "sky",
) -> Path:
    """Save a scene as a PNG file.

    Args:
        scene: Composed scene.
        output_path: Destination path. Auto-generated under ./results/ if None.
        theme: Palette name.
        name: Stem used for the auto-generated filename.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        filename = f"{name}.png".replace(" ", "_").replace(",", "")
        output_path = Path("results") / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(scene, theme=theme)
    fig.savefig(output_path, facecolor=get_palette(theme).background)
    plt.close(fig)
    return output_path
