"""
Linear dimension construction.

Modules:
  - spec:        persistent dimension data (DimensionSpec)
  - style:       dimension-style variables with lazy defaults
  - label:       label template resolution and the text entity
  - terminators: arrowheads and ticks
  - placer:      label anchor and label box
  - splitter:    splitting the line around a horizontal label
  - geometry:    constructed geometry batch
  - builder:     layout pass (DimensionBuilder)
  - entity:      Dimension container with transforms
  - renderer:    SVG preview
"""

from dimline.dimensions.builder import DimensionBuilder
from dimline.dimensions.entity import Dimension
from dimline.dimensions.geometry import DimensionGeometry
from dimline.dimensions.label import DimensionLabel, TextMetrics, format_measurement, resolve_label
from dimline.dimensions.renderer import render_dimension, save_svg
from dimline.dimensions.spec import DimensionSpec, HAlign, LineSpacingStyle, TextDirection, VAlign
from dimline.dimensions.style import (
    HeaderVariableStore,
    InMemoryVariableStore,
    StyleResolver,
    UnitConverter,
)
from dimline.dimensions.terminators import ArrowStyle, Terminator

__all__ = [
    'Dimension',
    'DimensionBuilder',
    'DimensionGeometry',
    'DimensionLabel',
    'DimensionSpec',
    'TextMetrics',
    'VAlign',
    'HAlign',
    'LineSpacingStyle',
    'TextDirection',
    'ArrowStyle',
    'Terminator',
    'StyleResolver',
    'UnitConverter',
    'InMemoryVariableStore',
    'HeaderVariableStore',
    'format_measurement',
    'resolve_label',
    'render_dimension',
    'save_svg',
]
