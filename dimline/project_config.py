"""
JSON-based project configuration for dimline.

The configuration supplies the dimension-style defaults (in millimetres)
that StyleResolver inserts into a drawing's variable store the first time
a variable is missing, plus text metrics and SVG preview styling.

Configuration hierarchy (later overrides earlier):
1. Built-in defaults (the dataclasses below)
2. User config (~/.dimline.json)
3. Project config (./.dimline.json or next to the drawing)
4. Explicit config path

Example .dimline.json:
{
    "style": {
        "arrow_size": 3.0,
        "text_height": 3.5,
        "align_text": false
    },
    "text": {
        "char_width_factor": 0.7,
        "decimals": 2
    },
    "render": {
        "stroke_width": 0.25,
        "font_family": "ISOCPEUR"
    }
}
"""

import json
import logging
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".dimline.json"


@dataclass
class DimensionStyleConfig:
    """Dimension-style defaults in millimetres (DXF $DIM* variables)."""
    general_scale: float = 1.0              # $DIMSCALE
    general_factor: float = 1.0             # $DIMLFAC
    text_height: float = 2.5                # $DIMTXT
    arrow_size: float = 2.5                 # $DIMASZ
    tick_size: float = 0.0                  # $DIMTSZ
    extension_line_extension: float = 1.25  # $DIMEXE
    extension_line_offset: float = 0.625    # $DIMEXO
    dimension_line_gap: float = 0.625       # $DIMGAP
    align_text: bool = False                # $DIMTIH, True = horizontal text


@dataclass
class TextConfig:
    """Label text metrics."""
    char_width_factor: float = 0.6  # glyph advance / text height
    width_hint: float = 30.0        # reference width passed to the text entity
    decimals: int = 1               # digits of a non-integer measurement


@dataclass
class RenderConfig:
    """SVG preview styling."""
    stroke: str = "black"
    stroke_width: float = 0.18
    font_family: str = "ISOCPEUR"


_SECTIONS = ('style', 'text', 'render')


@dataclass
class ProjectConfig:
    """Complete project configuration."""
    style: DimensionStyleConfig = field(default_factory=DimensionStyleConfig)
    text: TextConfig = field(default_factory=TextConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: Union[str, Path]) -> None:
        """Write the configuration as JSON."""
        path = Path(path)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json())
        logger.info("Configuration saved to %s", path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectConfig':
        """Build a configuration, ignoring unknown sections and keys."""
        config = cls()
        for section in _SECTIONS:
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning("Unknown config key %s.%s ignored", section, key)
        return config

    @classmethod
    def from_json(cls, json_str: str) -> 'ProjectConfig':
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'ProjectConfig':
        """Load configuration from a JSON file.

        Raises:
            FileNotFoundError: If file doesn't exist
            json.JSONDecodeError: If file is not valid JSON
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger.info("Configuration loaded from %s", path)
        return cls.from_dict(data)


def find_config_file(
    drawing_path: Optional[Union[str, Path]] = None,
    explicit_config: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """Find a configuration file.

    Search order:
    1. Explicit config path (if provided and existing)
    2. .dimline.json next to the drawing
    3. .dimline.json in the current working directory
    4. ~/.dimline.json

    Returns:
        Path to config file if found, None otherwise
    """
    if explicit_config:
        explicit = Path(explicit_config)
        if explicit.exists():
            return explicit
        logger.warning("Explicit config not found: %s", explicit)

    candidates = []
    if drawing_path:
        candidates.append(Path(drawing_path).parent / CONFIG_FILENAME)
    candidates.append(Path.cwd() / CONFIG_FILENAME)
    candidates.append(Path.home() / CONFIG_FILENAME)

    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def load_config(
    drawing_path: Optional[Union[str, Path]] = None,
    explicit_config: Optional[Union[str, Path]] = None,
) -> ProjectConfig:
    """Load configuration, falling back to defaults on any read error."""
    config_path = find_config_file(drawing_path, explicit_config)

    if config_path:
        try:
            return ProjectConfig.load(config_path)
        except (json.JSONDecodeError, IOError) as e:
            logger.error("Failed to load config %s: %s", config_path, e)

    return ProjectConfig()


def merge_configs(base: ProjectConfig, override: ProjectConfig) -> ProjectConfig:
    """Merge two configurations; override values that differ from defaults win."""
    merged = ProjectConfig.from_dict(base.to_dict())
    defaults = ProjectConfig()

    for section in _SECTIONS:
        source = getattr(override, section)
        target = getattr(merged, section)
        default = getattr(defaults, section)
        for f in fields(source):
            value = getattr(source, f.name)
            if value != getattr(default, f.name):
                setattr(target, f.name, value)

    return merged
