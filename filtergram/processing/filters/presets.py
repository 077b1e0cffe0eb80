"""
Preset registry: every named filter as an ordered operation sequence.

Each preset reproduces one CSSgram recipe. Overlays that the recipe places
before the filter adjustments come first in the sequence, the rest follow
them; the executor runs the sequence exactly as listed.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .models import (
    Adjustment, AdjustmentType, BlendMode, ColorStop, FilterSpec,
    GradientFill, GradientSpec, Overlay, SolidFill,
)
from ...exceptions import UnknownFilterError


def brightness(amount: float) -> Adjustment:
    return Adjustment(AdjustmentType.BRIGHTNESS, amount)


def saturate(amount: float) -> Adjustment:
    return Adjustment(AdjustmentType.SATURATE, amount)


def hue_rotate(degrees: float) -> Adjustment:
    return Adjustment(AdjustmentType.HUE_ROTATE, degrees)


def contrast(amount: float) -> Adjustment:
    return Adjustment(AdjustmentType.CONTRAST, amount)


def sepia(amount: float) -> Adjustment:
    return Adjustment(AdjustmentType.SEPIA, amount)


def grayscale(amount: float) -> Adjustment:
    return Adjustment(AdjustmentType.GRAYSCALE, amount)


def solid(color: Tuple[int, int, int], mode: BlendMode,
          opacity: float = 100.0) -> Overlay:
    return Overlay(SolidFill(color), mode, opacity)


def gradient(spec: GradientSpec, mode: BlendMode, opacity: float = 100.0) -> Overlay:
    return Overlay(GradientFill(spec), mode, opacity)


def stop(color: Optional[Tuple[int, int, int]], position: float,
         alpha: float = 1.0) -> ColorStop:
    if color is None:
        return ColorStop.transparent(position)
    return ColorStop(color, position, alpha)


class FilterPresets:
    """
    Database of filter presets.

    Amounts use CSS units: factors for brightness, saturate and contrast,
    degrees for hue-rotate, 0-1 intensity for sepia and grayscale.
    """

    YEAR_1977 = FilterSpec(
        name="1977",
        description="contrast(1.1) brightness(1.1) saturate(1.3); pink screen",
        operations=(
            contrast(1.1),
            brightness(1.1),
            saturate(1.3),
            solid((243, 106, 188), BlendMode.SCREEN, 30),
        ),
    )

    ADEN = FilterSpec(
        name="aden",
        description="hue-rotate(-20deg) contrast(.9) saturate(.85) brightness(1.2); "
                    "left-to-right red fade darken",
        operations=(
            hue_rotate(-20),
            contrast(0.9),
            saturate(0.85),
            brightness(1.2),
            gradient(GradientSpec.linear(stop((66, 10, 14), 0.0, 0.2), stop(None, 1.0)),
                     BlendMode.DARKEN),
        ),
    )

    BRANNAN = FilterSpec(
        name="brannan",
        description="sepia(.5) contrast(1.4); purple lighten",
        operations=(
            sepia(0.5),
            contrast(1.4),
            solid((161, 44, 199), BlendMode.LIGHTEN, 31),
        ),
    )

    BROOKLYN = FilterSpec(
        name="brooklyn",
        description="contrast(.9) brightness(1.1); mint-to-lilac radial overlay",
        operations=(
            contrast(0.9),
            brightness(1.1),
            gradient(GradientSpec.radial(stop((168, 223, 193), 0.7, 0.4),
                                         stop((196, 183, 200), 1.0)),
                     BlendMode.OVERLAY),
        ),
    )

    CLARENDON = FilterSpec(
        name="clarendon",
        description="blue overlay underneath; contrast(1.2) saturate(1.35)",
        operations=(
            solid((127, 187, 227), BlendMode.OVERLAY, 20),
            contrast(1.2),
            saturate(1.35),
        ),
    )

    EARLYBIRD = FilterSpec(
        name="earlybird",
        description="contrast(.9) sepia(.2); warm vignette overlay",
        operations=(
            contrast(0.9),
            sepia(0.2),
            gradient(GradientSpec.radial(stop((208, 186, 142), 0.2),
                                         stop((54, 3, 9), 0.85),
                                         stop((29, 2, 16), 1.0)),
                     BlendMode.OVERLAY),
        ),
    )

    GINGHAM = FilterSpec(
        name="gingham",
        description="brightness(1.05) hue-rotate(-10deg); left-to-right red fade darken",
        operations=(
            brightness(1.05),
            hue_rotate(-10),
            gradient(GradientSpec.linear(stop((66, 10, 14), 0.0, 0.2), stop(None, 1.0)),
                     BlendMode.DARKEN),
        ),
    )

    HUDSON = FilterSpec(
        name="hudson",
        description="brightness(1.2) contrast(.9) saturate(1.1); blue radial multiply",
        operations=(
            brightness(1.2),
            contrast(0.9),
            saturate(1.1),
            gradient(GradientSpec.radial(stop((166, 177, 255), 0.5),
                                         stop((52, 33, 52), 1.0)),
                     BlendMode.MULTIPLY, 50),
        ),
    )

    INKWELL = FilterSpec(
        name="inkwell",
        description="sepia(.3) contrast(1.1) brightness(1.1) grayscale(1)",
        operations=(
            sepia(0.3),
            contrast(1.1),
            brightness(1.1),
            grayscale(1.0),
        ),
    )

    KELVIN = FilterSpec(
        name="kelvin",
        description="dark color-dodge, then amber overlay",
        operations=(
            solid((56, 44, 52), BlendMode.COLOR_DODGE),
            solid((183, 125, 33), BlendMode.OVERLAY),
        ),
    )

    LARK = FilterSpec(
        name="lark",
        description="navy color-dodge; contrast(.9); light grey darken",
        operations=(
            solid((34, 37, 63), BlendMode.COLOR_DODGE),
            contrast(0.9),
            solid((242, 242, 242), BlendMode.DARKEN, 80),
        ),
    )

    LOFI = FilterSpec(
        name="lofi",
        description="saturate(1.1) contrast(1.5); dark vignette multiply",
        operations=(
            saturate(1.1),
            contrast(1.5),
            gradient(GradientSpec.radial(stop(None, 0.7), stop((34, 34, 34), 1.5)),
                     BlendMode.MULTIPLY),
        ),
    )

    MAVEN = FilterSpec(
        name="maven",
        description="sepia(.25) brightness(.95) contrast(.95) saturate(1.5); green overlay",
        operations=(
            sepia(0.25),
            brightness(0.95),
            contrast(0.95),
            saturate(1.5),
            solid((3, 230, 26), BlendMode.OVERLAY, 20),
        ),
    )

    MAYFAIR = FilterSpec(
        name="mayfair",
        description="contrast(1.1) saturate(1.1); off-centre highlight overlay",
        operations=(
            contrast(1.1),
            saturate(1.1),
            gradient(GradientSpec.radial(stop((255, 255, 255), 0.0, 0.8),
                                         stop((255, 200, 200), 0.3, 0.6),
                                         stop((17, 17, 17), 0.6),
                                         center=(0.4, 0.4)),
                     BlendMode.OVERLAY, 40),
        ),
    )

    MOON = FilterSpec(
        name="moon",
        description="grayscale(1) contrast(1.1) brightness(1.1); grey soft-light and lighten",
        operations=(
            grayscale(1.0),
            contrast(1.1),
            brightness(1.1),
            solid((160, 160, 160), BlendMode.SOFT_LIGHT),
            solid((56, 56, 56), BlendMode.LIGHTEN),
        ),
    )

    NASHVILLE = FilterSpec(
        name="nashville",
        description="peach darken underneath; sepia(.2) contrast(1.2) brightness(1.05) "
                    "saturate(1.2); blue lighten",
        operations=(
            solid((247, 176, 153), BlendMode.DARKEN, 56),
            sepia(0.2),
            contrast(1.2),
            brightness(1.05),
            saturate(1.2),
            solid((0, 70, 150), BlendMode.LIGHTEN, 40),
        ),
    )

    PERPETUA = FilterSpec(
        name="perpetua",
        description="top-to-bottom blue-to-gold soft-light",
        operations=(
            gradient(GradientSpec.linear(stop((0, 91, 154), 0.0), stop((230, 193, 61), 1.0),
                                         direction="to bottom"),
                     BlendMode.SOFT_LIGHT, 50),
        ),
    )

    REYES = FilterSpec(
        name="reyes",
        description="sepia(.22) brightness(1.1) contrast(.85) saturate(.75); cream soft-light",
        operations=(
            sepia(0.22),
            brightness(1.1),
            contrast(0.85),
            saturate(0.75),
            solid((239, 205, 173), BlendMode.SOFT_LIGHT, 50),
        ),
    )

    RISE = FilterSpec(
        name="rise",
        description="warm radial multiply underneath; brightness(1.05) sepia(.2) "
                    "contrast(.9) saturate(.9); radial glow overlay",
        operations=(
            gradient(GradientSpec.radial(stop((236, 205, 169), 0.55, 0.15),
                                         stop((50, 30, 7), 1.0, 0.4)),
                     BlendMode.MULTIPLY),
            brightness(1.05),
            sepia(0.2),
            contrast(0.9),
            saturate(0.9),
            gradient(GradientSpec.radial(stop((232, 197, 152), 0.0, 0.8), stop(None, 0.9)),
                     BlendMode.OVERLAY, 60),
        ),
    )

    SLUMBER = FilterSpec(
        name="slumber",
        description="brown lighten underneath; saturate(.66) brightness(1.05); olive soft-light",
        operations=(
            solid((69, 41, 12), BlendMode.LIGHTEN, 40),
            saturate(0.66),
            brightness(1.05),
            solid((125, 105, 24), BlendMode.SOFT_LIGHT, 50),
        ),
    )

    STINSON = FilterSpec(
        name="stinson",
        description="salmon soft-light underneath; brightness(1.15) saturate(.85) contrast(.75)",
        operations=(
            solid((240, 149, 128), BlendMode.SOFT_LIGHT, 30),
            brightness(1.15),
            saturate(0.85),
            contrast(0.75),
        ),
    )

    TOASTER = FilterSpec(
        name="toaster",
        description="contrast(1.5) brightness(.9); orange-to-purple radial screen",
        operations=(
            contrast(1.5),
            brightness(0.9),
            gradient(GradientSpec.radial(stop((128, 78, 15), 0.0), stop((59, 0, 59), 1.0)),
                     BlendMode.SCREEN),
        ),
    )

    VALENCIA = FilterSpec(
        name="valencia",
        description="contrast(1.08) brightness(1.08) sepia(.08); plum exclusion",
        operations=(
            contrast(1.08),
            brightness(1.08),
            sepia(0.08),
            solid((58, 3, 57), BlendMode.EXCLUSION, 50),
        ),
    )

    WALDEN = FilterSpec(
        name="walden",
        description="brightness(1.1) hue-rotate(-10deg) sepia(.3) saturate(1.6); blue screen",
        operations=(
            brightness(1.1),
            hue_rotate(-10),
            sepia(0.3),
            saturate(1.6),
            solid((0, 68, 204), BlendMode.SCREEN, 30),
        ),
    )

    WILLOW = FilterSpec(
        name="willow",
        description="rose radial overlay underneath; grayscale(.5) contrast(.95) "
                    "brightness(.9); warm grey colorize",
        operations=(
            gradient(GradientSpec.radial(stop((212, 169, 175), 0.55), stop((0, 0, 0), 1.5)),
                     BlendMode.OVERLAY),
            grayscale(0.5),
            contrast(0.95),
            brightness(0.9),
            solid((216, 205, 203), BlendMode.COLORIZE),
        ),
    )

    XPRO2 = FilterSpec(
        name="xpro2",
        description="sepia(.3); pale-to-indigo radial color-burn",
        operations=(
            sepia(0.3),
            gradient(GradientSpec.radial(stop((230, 231, 224), 0.4),
                                         stop((43, 42, 161), 1.1, 0.6)),
                     BlendMode.COLOR_BURN),
        ),
    )

    # All presets in listing order
    ALL_PRESETS: Mapping[str, FilterSpec] = MappingProxyType({
        spec.name: spec for spec in (
            YEAR_1977, ADEN, BRANNAN, BROOKLYN, CLARENDON, EARLYBIRD, GINGHAM,
            HUDSON, INKWELL, KELVIN, LARK, LOFI, MAVEN, MAYFAIR, MOON,
            NASHVILLE, PERPETUA, REYES, RISE, SLUMBER, STINSON, TOASTER,
            VALENCIA, WALDEN, WILLOW, XPRO2,
        )
    })


def get_filter_spec(name: str) -> FilterSpec:
    """
    Look up a preset by name.

    Raises:
        UnknownFilterError: If no preset has that name
    """
    try:
        return FilterPresets.ALL_PRESETS[name]
    except (KeyError, TypeError):
        raise UnknownFilterError(name) from None


def list_filters() -> List[str]:
    """Preset names in registry order."""
    return list(FilterPresets.ALL_PRESETS)
