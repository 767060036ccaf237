"""CLI entry point for star chart generation.

    skydome --place "New York" --when "2024-06-21 22:00" --format png|svg|html|plotly-html
"""

import argparse
import logging
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from skydome.compute import run  # noqa: E402
from skydome.i18n import t  # noqa: E402
from skydome.models import QueryInput  # noqa: E402
from skydome.observer import (  # noqa: E402
    DEFAULT_LOCATION,
    InvalidInputError,
    LocationNotFoundError,
    resolve_place,
)
from skydome.projection import SurfaceConfigError  # noqa: E402
from skydome.renderers.palette import PALETTES  # noqa: E402
from skydome.renderers.plotly_2d import render_plotly_chart  # noqa: E402
from skydome.renderers.static import save_static_chart  # noqa: E402
from skydome.renderers.svg_2d import render_svg, render_svg_html  # noqa: E402
from skydome.settings import Settings, SettingsError  # noqa: E402

LOG = logging.getLogger("skydome")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skydome",
        description="Render a simplified night-sky chart for a place and time.",
    )
    parser.add_argument("--place", default=DEFAULT_LOCATION.name, help='Preset name or "lat, lng"')
    parser.add_argument("--when", required=True, help='Local time, "YYYY-MM-DD HH:MM" or ISO 8601')
    parser.add_argument("--count", type=int, help="Procedural bodies per frame")
    parser.add_argument("--width", type=float, help="Surface width")
    parser.add_argument("--height", type=float, help="Surface height")
    parser.add_argument("--padding", type=float, help="Gap between horizon rim and surface edge")
    parser.add_argument("--theme", choices=sorted(PALETTES), help="Renderer palette")
    parser.add_argument("--lang", choices=("en", "ko"), help="Cardinal label language")
    parser.add_argument("--format", choices=("png", "svg", "html", "plotly-html"), default="png")
    parser.add_argument("--output", type=Path, help="Output file (default: results/<place>.<format>)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _apply_overrides(settings: Settings, namespace: argparse.Namespace) -> Settings:
    overrides = {
        "body_count": namespace.count,
        "surface_width": namespace.width,
        "surface_height": namespace.height,
        "padding": namespace.padding,
        "theme": namespace.theme,
        "lang": namespace.lang,
    }
    return replace(settings, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Sequence[str] | None = None) -> int:
    namespace = build_parser().parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if namespace.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = _apply_overrides(Settings.from_env(), namespace)
        if settings.body_count < 0:
            raise SettingsError(f"--count must be >= 0, got {settings.body_count}")
        scene = run(QueryInput(place=namespace.place, when=namespace.when), settings)
        place_name = resolve_place(namespace.place).name
    except (InvalidInputError, LocationNotFoundError, SettingsError, SurfaceConfigError) as exc:
        LOG.error("%s", exc)
        return 2

    output = namespace.output
    if namespace.format == "png":
        path = save_static_chart(scene, output, theme=settings.theme, name=place_name)
    else:
        if output is None:
            stem = place_name.replace(" ", "_").replace(",", "")
            suffix = "svg" if namespace.format == "svg" else "html"
            output = Path("results") / f"{stem}.{suffix}"
        output.parent.mkdir(parents=True, exist_ok=True)
        title = t("chart_title", settings.lang).format(place=place_name)
        if namespace.format == "plotly-html":
            fig = render_plotly_chart(scene, theme=settings.theme)
            fig.update_layout(title=title)
            fig.write_html(output, include_plotlyjs="cdn")
        elif namespace.format == "svg":
            output.write_text(render_svg(scene, theme=settings.theme), encoding="utf-8")
        else:
            text = render_svg_html(scene, theme=settings.theme, title=title)
            output.write_text(text, encoding="utf-8")
        path = output

    print(t("saved", settings.lang).format(path=path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
