"""
SVG preview of constructed dimension geometry.

Contents:
- render_dimension: one DimensionGeometry into an SVG group
- save_svg: standalone preview file for several dimensions
- default_styles: style dictionaries from the project configuration

Coordinates are written as given (drawing units, SVG user space); the
preview does not flip the Y axis.
"""

import logging
import math
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

import svgwrite

from dimline.dimensions.geometry import DimensionGeometry
from dimline.dimensions.label import DimensionLabel
from dimline.dimensions.terminators import ArrowStyle, Terminator
from dimline.geometry.line import LineSegment
from dimline.project_config import RenderConfig

logger = logging.getLogger(__name__)


def default_styles(config: Optional[RenderConfig] = None) -> Dict[str, dict]:
    """Line and text style dictionaries for the preview."""
    config = config or RenderConfig()
    return {
        'dimension': {
            'stroke': config.stroke,
            'stroke_width': config.stroke_width,
            'stroke_linecap': 'butt',
        },
        'dimension_text': {
            'font_family': f'{config.font_family}, Arial, sans-serif',
            'font_style': 'italic',
            'fill': config.stroke,
        },
        'dimension_arrow': {
            'fill': config.stroke,
            'stroke': 'none',
        },
    }


def render_dimension(
    dwg: svgwrite.Drawing,
    geometry: DimensionGeometry,
    styles: Optional[Dict[str, dict]] = None,
) -> svgwrite.container.Group:
    """Draw the parts of one dimension into a new SVG group.

    Args:
        dwg: SVG document (element factory).
        geometry: result of a layout pass.
        styles: dictionaries from default_styles().

    Returns:
        SVG group holding lines, terminators and the label.
    """
    styles = styles or default_styles()
    line_style = styles['dimension']
    group = dwg.g(class_='dimension')

    for line in geometry.lines:
        group.add(_create_dim_line(dwg, line, line_style))

    for term in geometry.terminators:
        if term.style is ArrowStyle.FILLED:
            group.add(_create_arrow(dwg, term, styles['dimension_arrow']))
        else:
            group.add(_create_tick(dwg, term, line_style))

    if geometry.label is not None and geometry.label.content:
        group.add(_create_dim_text(dwg, geometry.label, styles['dimension_text']))

    return group


def save_svg(
    geometries: Iterable[DimensionGeometry],
    path: Union[str, Path],
    size: Tuple[float, float] = (297.0, 210.0),
    styles: Optional[Dict[str, dict]] = None,
) -> Path:
    """Write a preview file with all given dimensions.

    Args:
        geometries: dimensions to draw.
        path: output .svg path.
        size: sheet width and height in mm (one user unit = 1 mm).
    """
    path = Path(path)
    width, height = size
    dwg = svgwrite.Drawing(
        str(path),
        size=(f'{width}mm', f'{height}mm'),
        viewBox=f"0 0 {width} {height}",
    )
    root = dwg.g(id='dimensions')
    count = 0
    for geometry in geometries:
        root.add(render_dimension(dwg, geometry, styles))
        count += 1
    dwg.add(root)
    dwg.save()
    logger.info("SVG preview written to %s", path, extra={"dimensions": count})
    return path


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------

def _create_dim_line(
    dwg: svgwrite.Drawing,
    line: LineSegment,
    line_style: dict,
) -> svgwrite.shapes.Line:
    return dwg.line(start=line.start, end=line.end, class_='dimension-line', **line_style)


def _create_arrow(
    dwg: svgwrite.Drawing,
    term: Terminator,
    arrow_style: dict,
) -> svgwrite.shapes.Polygon:
    return dwg.polygon(points=list(term.outline()), class_='arrow', **arrow_style)


def _create_tick(
    dwg: svgwrite.Drawing,
    term: Terminator,
    line_style: dict,
) -> svgwrite.shapes.Line:
    stroke = term.stroke()
    return dwg.line(start=stroke.start, end=stroke.end, class_='tick', **line_style)


def _create_dim_text(
    dwg: svgwrite.Drawing,
    label: DimensionLabel,
    text_style: dict,
) -> svgwrite.text.Text:
    """Label centred on its anchor.

    Baseline is lowered by 0.35 of the height (cap height is about 0.7 em)
    so the glyphs are vertically centred on the anchor.
    """
    x, y = label.anchor
    element = dwg.text(
        label.content,
        insert=(x, y + label.height * 0.35),
        font_size=label.height,
        text_anchor='middle',
        **text_style,
    )
    angle_deg = math.degrees(label.angle)
    if abs(angle_deg) > 0.01:
        element['transform'] = f"rotate({angle_deg:.2f},{x:.4f},{y:.4f})"
    return element
