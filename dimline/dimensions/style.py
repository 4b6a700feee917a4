"""
Dimension-style parameters resolved from a drawing-variable store.

Parameters live in the drawing as DXF header variables ($DIMSCALE,
$DIMASZ, ...), stored in the drawing's active linear unit. A variable that
is missing is created on first use from a millimetre default converted to
that unit, so the store fills itself and later lookups never write again.

Stores:
  - InMemoryVariableStore: dict-backed store (tests, headless use)
  - HeaderVariableStore: adapter over a DXF document header (ezdxf API)
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Tuple, Union

from dimline.project_config import DimensionStyleConfig

logger = logging.getLogger(__name__)

# Values at or below this are "unset" (a stored 0.0 is a real value).
UNSET_THRESHOLD = -1.0e10

# DXF $INSUNITS codes.
UNITLESS = 0
INCHES = 1
FEET = 2
MILES = 3
MILLIMETERS = 4
CENTIMETERS = 5
METERS = 6
KILOMETERS = 7
MICROINCHES = 8
MILS = 9
YARDS = 10
MICRONS = 14
DECIMETERS = 15

# Millimetres per unit, by $INSUNITS code.
MM_PER_UNIT: Dict[int, float] = {
    INCHES: 25.4,
    FEET: 304.8,
    MILES: 1609344.0,
    MILLIMETERS: 1.0,
    CENTIMETERS: 10.0,
    METERS: 1000.0,
    KILOMETERS: 1000000.0,
    MICROINCHES: 25.4e-6,
    MILS: 25.4e-3,
    YARDS: 914.4,
    MICRONS: 1.0e-3,
    DECIMETERS: 100.0,
}

# Base unit of all built-in defaults.
BASE_UNIT = MILLIMETERS

# DXF group codes used as type tags when a variable is created.
CODE_REAL = 40
CODE_INT = 70

# Variable keys.
DIMSCALE = "$DIMSCALE"
DIMLFAC = "$DIMLFAC"
DIMTXT = "$DIMTXT"
DIMASZ = "$DIMASZ"
DIMTSZ = "$DIMTSZ"
DIMEXE = "$DIMEXE"
DIMEXO = "$DIMEXO"
DIMGAP = "$DIMGAP"
DIMTIH = "$DIMTIH"

Number = Union[int, float]


class VariableStore(Protocol):
    """Key/value store of drawing variables."""

    @property
    def units(self) -> int:
        """Active linear unit (DXF $INSUNITS code)."""

    def get_number(self, key: str) -> Optional[float]: ...

    def get_integer(self, key: str) -> Optional[int]: ...

    def set_number(self, key: str, value: float, code: int) -> None: ...

    def set_integer(self, key: str, value: int, code: int) -> None: ...

    def insert_default(self, key: str, value: float, code: int) -> Tuple[float, bool]:
        """Store value unless a set variable exists; returns (value, inserted)."""

    def correct_flag(self, key: str, default: int, code: int) -> Tuple[int, bool]:
        """Store default unless the variable is 0 or 1; returns (value, corrected)."""


def _is_unset(value: Optional[float]) -> bool:
    return value is None or value <= UNSET_THRESHOLD


class InMemoryVariableStore:
    """Dict-backed variable store.

    Writes go through a lock. insert_default and correct_flag check and
    write under the same lock, so dimensions sharing one store create
    each default once. `writes` counts every stored value.
    """

    def __init__(self, unit: int = BASE_UNIT, values: Optional[Dict[str, Number]] = None):
        self._unit = unit
        self._values: Dict[str, Tuple[Number, int]] = {}
        self._lock = threading.Lock()
        self.writes = 0
        for key, value in (values or {}).items():
            code = CODE_INT if isinstance(value, int) and not isinstance(value, bool) else CODE_REAL
            self._values[key] = (value, code)

    @property
    def units(self) -> int:
        return self._unit

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def code(self, key: str) -> Optional[int]:
        """Type tag the variable was stored with."""
        entry = self._values.get(key)
        return entry[1] if entry else None

    def get_number(self, key: str) -> Optional[float]:
        entry = self._values.get(key)
        return float(entry[0]) if entry is not None else None

    def get_integer(self, key: str) -> Optional[int]:
        entry = self._values.get(key)
        return int(entry[0]) if entry is not None else None

    def set_number(self, key: str, value: float, code: int = CODE_REAL) -> None:
        with self._lock:
            self._values[key] = (float(value), code)
            self.writes += 1

    def set_integer(self, key: str, value: int, code: int = CODE_INT) -> None:
        with self._lock:
            self._values[key] = (int(value), code)
            self.writes += 1

    def insert_default(self, key: str, value: float, code: int = CODE_REAL) -> Tuple[float, bool]:
        with self._lock:
            entry = self._values.get(key)
            if entry is not None and not _is_unset(entry[0]):
                return float(entry[0]), False
            self._values[key] = (float(value), code)
            self.writes += 1
            return float(value), True

    def correct_flag(self, key: str, default: int, code: int = CODE_INT) -> Tuple[int, bool]:
        with self._lock:
            entry = self._values.get(key)
            if entry is not None and int(entry[0]) in (0, 1):
                return int(entry[0]), False
            self._values[key] = (int(default), code)
            self.writes += 1
            return int(default), True


class HeaderVariableStore:
    """Variable store over the header section of a DXF document.

    Works with any document whose `header` supports `get(key, default)`
    and item assignment, as an ezdxf `Drawing` does. The header owns the
    group code of its variables, so the code argument of the setters is
    not used; a header rejecting an unknown key raises its own error.
    """

    def __init__(self, doc):
        self.doc = doc

    @property
    def units(self) -> int:
        return int(self.doc.header.get("$INSUNITS", UNITLESS))

    def get_number(self, key: str) -> Optional[float]:
        value = self.doc.header.get(key)
        return float(value) if value is not None else None

    def get_integer(self, key: str) -> Optional[int]:
        value = self.doc.header.get(key)
        return int(value) if value is not None else None

    def set_number(self, key: str, value: float, code: int = CODE_REAL) -> None:
        self.doc.header[key] = float(value)

    def set_integer(self, key: str, value: int, code: int = CODE_INT) -> None:
        self.doc.header[key] = int(value)

    def insert_default(self, key: str, value: float, code: int = CODE_REAL) -> Tuple[float, bool]:
        current = self.get_number(key)
        if not _is_unset(current):
            return current, False
        self.set_number(key, value, code)
        stored = self.get_number(key)
        return (float(value) if stored is None else stored), True

    def correct_flag(self, key: str, default: int, code: int = CODE_INT) -> Tuple[int, bool]:
        current = self.get_integer(key)
        if current in (0, 1):
            return current, False
        self.set_integer(key, default, code)
        stored = self.get_integer(key)
        return (int(default) if stored is None else stored), True


class UnitConverter:
    """Converts lengths between $INSUNITS codes.

    Unitless or unknown codes on either side leave the value unchanged.
    """

    def factor(self, from_unit: int, to_unit: int) -> float:
        if from_unit == to_unit:
            return 1.0
        source = MM_PER_UNIT.get(from_unit)
        target = MM_PER_UNIT.get(to_unit)
        if source is None or target is None:
            return 1.0
        return source / target

    def convert(self, value: float, from_unit: int, to_unit: int) -> float:
        return value * self.factor(from_unit, to_unit)


@dataclass(frozen=True)
class ResolvedStyle:
    """Parameters of one layout pass, already multiplied by the scale.

    Attributes:
        scale: overall dimension scale ($DIMSCALE).
        general_factor: measurement factor ($DIMLFAC).
        text_height, gap, arrow_size, tick_size: scaled sizes.
        extension_line_extension, extension_line_offset: scaled sizes.
        align_text: True for horizontal text with a split line.
    """
    scale: float
    general_factor: float
    text_height: float
    gap: float
    arrow_size: float
    tick_size: float
    extension_line_extension: float
    extension_line_offset: float
    align_text: bool


class StyleResolver:
    """Resolves dimension-style variables with lazy default insertion."""

    def __init__(
        self,
        store: VariableStore,
        converter: Optional[UnitConverter] = None,
        defaults: Optional[DimensionStyleConfig] = None,
    ):
        self.store = store
        self.converter = converter or UnitConverter()
        self.defaults = defaults or DimensionStyleConfig()

    def resolve(self, key: str, default_mm: float, code: int = CODE_REAL) -> float:
        """Value of a real variable, inserting the converted default if unset.

        Args:
            key: variable name, e.g. "$DIMASZ".
            default_mm: default in millimetres.
            code: type tag stored with a newly inserted variable.
        """
        value = self.store.get_number(key)
        if _is_unset(value):
            converted = self.converter.convert(default_mm, BASE_UNIT, self.store.units)
            value, inserted = self.store.insert_default(key, converted, code)
            if inserted:
                logger.debug("Inserted default variable", extra={
                    "key": key, "value": converted, "unit": self.store.units,
                })
        return value

    def resolve_flag(self, key: str, default: int = 0, code: int = CODE_INT) -> bool:
        """Boolean variable; values outside {0, 1} are rewritten to default.

        A missing variable reads as the out-of-range value 2, so it is
        created through the same correction.
        """
        value = self.store.get_integer(key)
        if value is None:
            value = 2
        if value not in (0, 1):
            stored = value
            value, corrected = self.store.correct_flag(key, default, code)
            if corrected:
                logger.warning("Correcting invalid flag variable", extra={
                    "key": key, "stored": stored, "corrected": default,
                })
        return value != 0

    # ------------------------------------------------------------------
    # Named parameters (unscaled, in drawing units)
    # ------------------------------------------------------------------

    def general_scale(self) -> float:
        return self.resolve(DIMSCALE, self.defaults.general_scale)

    def general_factor(self) -> float:
        return self.resolve(DIMLFAC, self.defaults.general_factor)

    def text_height(self) -> float:
        return self.resolve(DIMTXT, self.defaults.text_height)

    def arrow_size(self) -> float:
        return self.resolve(DIMASZ, self.defaults.arrow_size)

    def tick_size(self) -> float:
        return self.resolve(DIMTSZ, self.defaults.tick_size)

    def extension_line_extension(self) -> float:
        return self.resolve(DIMEXE, self.defaults.extension_line_extension)

    def extension_line_offset(self) -> float:
        return self.resolve(DIMEXO, self.defaults.extension_line_offset)

    def dimension_line_gap(self) -> float:
        return self.resolve(DIMGAP, self.defaults.dimension_line_gap)

    def align_text(self) -> bool:
        """True: horizontal text splitting the line; False: aligned text."""
        return self.resolve_flag(DIMTIH, int(bool(self.defaults.align_text)))

    def resolve_style(self) -> ResolvedStyle:
        """Snapshot of all parameters for one layout pass."""
        scale = self.general_scale()
        return ResolvedStyle(
            scale=scale,
            general_factor=self.general_factor(),
            text_height=self.text_height() * scale,
            gap=self.dimension_line_gap() * scale,
            arrow_size=self.arrow_size() * scale,
            tick_size=self.tick_size() * scale,
            extension_line_extension=self.extension_line_extension() * scale,
            extension_line_offset=self.extension_line_offset() * scale,
            align_text=self.align_text(),
        )
