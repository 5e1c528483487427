from datetime import datetime

EPSILON = 1e-5


def float_eq(a: float, b: float) -> bool:
    """
    Compare two floats with the tolerance shared by every equality check in
    the package.
    """
    return abs(a - b) < EPSILON


def timestamped_filename(prefix: str = "render", suffix: str = "png") -> str:
    """
    Build a file name like `render-2024-05-01T10-11-12.123456+02-00.png`.

    Colons are replaced so the name is valid on every filesystem.
    """
    stamp = datetime.now().astimezone().isoformat().replace(":", "-")
    return f"{prefix}-{stamp}.{suffix}"
