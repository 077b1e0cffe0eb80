"""
Data models for the filter composition engine.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
from enum import Enum


class AdjustmentType(Enum):
    """CSS filter functions supported by the colour adjustment step."""
    BRIGHTNESS = "brightness"
    SATURATE = "saturate"
    HUE_ROTATE = "hue-rotate"
    CONTRAST = "contrast"
    SEPIA = "sepia"
    GRAYSCALE = "grayscale"


class BlendMode(Enum):
    """Blend modes available to overlay operations."""
    SCREEN = "screen"
    MULTIPLY = "multiply"
    OVERLAY = "overlay"
    SOFT_LIGHT = "soft-light"
    LIGHTEN = "lighten"
    DARKEN = "darken"
    COLOR_DODGE = "color-dodge"
    COLOR_BURN = "color-burn"
    EXCLUSION = "exclusion"
    COLORIZE = "color"


class GradientType(Enum):
    """Gradient geometries."""
    LINEAR = "linear"
    RADIAL = "radial"


LINEAR_DIRECTIONS = ("to right", "to bottom")

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class ColorStop:
    """A gradient colour stop.

    ``color`` is an 8-bit RGB triple, or ``None`` for a transparent stop.
    ``position`` is a fraction along the gradient axis and may exceed 1.
    """
    color: Optional[RGB]
    position: float
    alpha: float = 1.0

    def __post_init__(self):
        if self.color is not None:
            if len(self.color) != 3 or not all(0 <= c <= 255 for c in self.color):
                raise ValueError(f"Invalid stop colour {self.color!r}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Stop alpha {self.alpha} out of range [0, 1]")

    @classmethod
    def transparent(cls, position: float) -> 'ColorStop':
        """Create a ``none`` stop."""
        return cls(color=None, position=position, alpha=0.0)

    @property
    def effective_alpha(self) -> float:
        return 0.0 if self.color is None else self.alpha


@dataclass(frozen=True)
class GradientSpec:
    """Parameters for a linear or radial gradient."""
    type: GradientType
    stops: Tuple[ColorStop, ...]
    direction: str = "to right"  # linear only
    center: Tuple[float, float] = (0.5, 0.5)  # radial only, fractions of width/height

    def __post_init__(self):
        object.__setattr__(self, 'stops', tuple(self.stops))
        if len(self.stops) < 2:
            raise ValueError("A gradient needs at least two colour stops")
        positions = [stop.position for stop in self.stops]
        if any(b < a for a, b in zip(positions, positions[1:])):
            raise ValueError(f"Stop positions must be non-decreasing: {positions}")
        if self.type == GradientType.LINEAR and self.direction not in LINEAR_DIRECTIONS:
            raise ValueError(f"Unsupported gradient direction: {self.direction}")

    @classmethod
    def linear(cls, *stops: ColorStop, direction: str = "to right") -> 'GradientSpec':
        """Create a linear gradient spec."""
        return cls(type=GradientType.LINEAR, stops=stops, direction=direction)

    @classmethod
    def radial(cls, *stops: ColorStop,
               center: Tuple[float, float] = (0.5, 0.5)) -> 'GradientSpec':
        """Create a radial gradient spec centred on ``center``."""
        return cls(type=GradientType.RADIAL, stops=stops, center=center)


@dataclass(frozen=True)
class SolidFill:
    """Uniform overlay colour."""
    color: RGB


@dataclass(frozen=True)
class GradientFill:
    """Gradient overlay."""
    gradient: GradientSpec


Fill = Union[SolidFill, GradientFill]


@dataclass(frozen=True)
class Adjustment:
    """A colour adjustment expressed as one CSS filter function."""
    type: AdjustmentType
    amount: float

    def __post_init__(self):
        if self.type in (AdjustmentType.SEPIA, AdjustmentType.GRAYSCALE):
            if not 0.0 <= self.amount <= 1.0:
                raise ValueError(f"{self.type.value} amount {self.amount} out of range [0, 1]")
        elif self.type != AdjustmentType.HUE_ROTATE and self.amount < 0:
            raise ValueError(f"{self.type.value} amount must not be negative")

    def describe(self) -> str:
        if self.type == AdjustmentType.HUE_ROTATE:
            return f"hue-rotate({self.amount:g}deg)"
        return f"{self.type.value}({self.amount:g})"


@dataclass(frozen=True)
class Overlay:
    """A solid or gradient layer composited onto the working image."""
    fill: Fill
    blend_mode: BlendMode
    opacity_percent: float = 100.0

    def __post_init__(self):
        if not 0.0 <= self.opacity_percent <= 100.0:
            raise ValueError(f"Overlay opacity {self.opacity_percent} out of range [0, 100]")

    def describe(self) -> str:
        if isinstance(self.fill, SolidFill):
            source = "rgb({}, {}, {})".format(*self.fill.color)
        else:
            source = f"{self.fill.gradient.type.value}-gradient"
        return f"{source} {self.blend_mode.value} @ {self.opacity_percent:g}%"


Operation = Union[Adjustment, Overlay]


@dataclass(frozen=True)
class FilterSpec:
    """A named preset: an ordered sequence of operations."""
    name: str
    operations: Tuple[Operation, ...] = field(default_factory=tuple)
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'operations', tuple(self.operations))

    def describe(self) -> str:
        """Human readable summary of the operation sequence."""
        return " -> ".join(op.describe() for op in self.operations)
