from flax.struct import dataclass

from .color import Color
from .tuples import Tuple


@dataclass
class Light:
    """
    Anything that illuminates the scene from a position with an intensity.
    Subclasses decide how the light spreads; only point lights exist for now.
    """

    position: Tuple
    intensity: Color


@dataclass
class PointLight(Light):
    """Light radiating equally in every direction from a single point."""
