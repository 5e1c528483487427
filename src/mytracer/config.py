import math
from pathlib import Path

from flax.struct import dataclass

from .camera import Camera
from .utils import timestamped_filename

SUPPORTED_FORMATS = ("png", "jpg", "jpeg", "bmp", "ppm")


@dataclass
class RenderSettings:
    width: int = 320
    height: int = 180
    field_of_view: float = math.pi / 3
    output_dir: str = "output"
    image_format: str = "png"

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"width and height must be >= 1, got {self.width}x{self.height}")
        if not (0 < self.field_of_view < math.pi):
            raise ValueError(f"field_of_view must be within (0, pi), got {self.field_of_view}")
        if self.image_format.lower() not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported image format {self.image_format!r}, pick one of {SUPPORTED_FORMATS}")

    def camera(self) -> Camera:
        return Camera(self.width, self.height, self.field_of_view)

    def output_path(self, prefix: str = "render") -> Path:
        return Path(self.output_dir) / timestamped_filename(prefix, self.image_format.lower())
