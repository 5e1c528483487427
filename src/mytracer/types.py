import numpy as np
from jaxtyping import Float

Vec4 = Float[np.ndarray, "4"]
Rgb = Float[np.ndarray, "3"]
MatrixArr = Float[np.ndarray, "r c"]  # noqa: F722
PixelArr = Float[np.ndarray, "h w 3"]  # noqa: F722
