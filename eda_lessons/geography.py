"""A coarse Texas boundary for map overlays.

Laid out like a ``map_data`` polygon table: one row per vertex with
``long``, ``lat``, ``group`` and ``order``. Good enough to orient points on a
slide, not for spatial joins.
"""

import pandas as pd

_TEXAS_VERTICES = [
    (-103.04, 36.50),
    (-100.00, 36.50),
    (-100.00, 34.56),
    (-99.19, 34.21),
    (-98.10, 34.13),
    (-96.80, 33.75),
    (-95.45, 33.87),
    (-94.48, 33.64),
    (-94.04, 33.55),
    (-94.04, 31.99),
    (-93.60, 31.18),
    (-93.84, 29.70),
    (-94.70, 29.35),
    (-95.50, 28.80),
    (-96.60, 28.30),
    (-97.20, 27.60),
    (-97.40, 26.90),
    (-97.15, 25.95),
    (-97.50, 25.90),
    (-98.30, 26.10),
    (-99.10, 26.50),
    (-99.50, 27.50),
    (-100.30, 28.30),
    (-101.00, 29.40),
    (-101.40, 29.77),
    (-102.40, 29.80),
    (-102.70, 29.60),
    (-103.10, 28.98),
    (-103.90, 29.30),
    (-104.50, 29.60),
    (-104.70, 30.20),
    (-105.00, 30.70),
    (-106.00, 31.40),
    (-106.63, 31.98),
    (-103.06, 32.00),
]


def texas_outline() -> pd.DataFrame:
    vertices = _TEXAS_VERTICES + _TEXAS_VERTICES[:1]
    outline = pd.DataFrame(vertices, columns=["long", "lat"])
    outline["group"] = 1
    outline["order"] = range(1, len(outline) + 1)
    return outline


def bounding_box(polygon: pd.DataFrame, pad: float = 0.5) -> tuple[float, float, float, float]:
    return (
        float(polygon["long"].min() - pad),
        float(polygon["long"].max() + pad),
        float(polygon["lat"].min() - pad),
        float(polygon["lat"].max() + pad),
    )
