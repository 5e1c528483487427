from pathlib import Path
from typing import Iterator, Optional, Protocol

import numpy as np
from loguru import logger
from PIL import Image

from .color import Color
from .errors import OutOfBoundsError
from .types import PixelArr
from .utils import timestamped_filename

PPM_MAX_LINE_LENGTH = 70


class PixelSink(Protocol):
    """Anything the render loop can write colors into."""

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        ...


class Canvas:
    """
    Grid of colors, black when created.

    Pixels are stored unclamped as floats in a (height, width, 3) array;
    clamping happens when the canvas is encoded.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Canvas requires width and height >= 1, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: PixelArr = np.zeros((height, width, 3), dtype=np.float64)

    def _validate_coordinates(self, x: int, y: int):
        if not 0 <= x < self.width:
            raise OutOfBoundsError(f"x coordinate {x} at y {y} out of canvas bounds (width {self.width})")
        if not 0 <= y < self.height:
            raise OutOfBoundsError(f"y coordinate {y} at x {x} out of canvas bounds (height {self.height})")

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._validate_coordinates(x, y)
        self.pixels[y, x] = color.as_array()

    def pixel_at(self, x: int, y: int) -> Color:
        self._validate_coordinates(x, y)
        return Color.from_array(self.pixels[y, x].copy())

    def __iter__(self) -> Iterator[Color]:
        """Colors in row-major order, top row first."""
        for row in self.pixels:
            for rgb in row:
                yield Color.from_array(rgb.copy())

    def to_8bit(self) -> np.ndarray:
        return np.rint(np.clip(self.pixels, 0.0, 1.0) * 255).astype(np.uint8)  # shape (h, w, 3)

    def to_ppm(self) -> str:
        """
        Plain PPM (P3). Lines are wrapped so that none is longer than 70
        characters, and the file ends with a newline.
        """
        lines = ["P3", f"{self.width} {self.height}", "255"]
        for row in self.to_8bit():
            line = ""
            for value in row.ravel().tolist():
                token = str(value)
                if line and len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}" if line else token
            lines.append(line)
        return "\n".join(lines) + "\n"

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_8bit())

    def save(
            self,
            path: Optional[str | Path] = None,
            *,
            directory: str | Path = "output",
            image_format: str = "png",
        ) -> Path:
        """
        Write the canvas to `path`.

        Without a path, a timestamped file name is created inside `directory`.
        `.ppm` is written directly, every other format goes through Pillow.
        """
        if path is None:
            path = Path(directory) / timestamped_filename("render", image_format)
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"Saving to file {path}")
        if path.suffix.lower() == ".ppm":
            path.write_text(self.to_ppm(), encoding="ascii")
        else:
            self.to_image().save(path)
        return path
