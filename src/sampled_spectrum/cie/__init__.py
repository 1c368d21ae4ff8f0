from .dataset import CIE_1931_OBSERVER, CIE_SAMPLE_COUNT, load_cie_1931
from .reference import X, Y, Z, ReferenceCurveCache, default_cache, y_integral

__all__ = [
    "CIE_1931_OBSERVER",
    "CIE_SAMPLE_COUNT",
    "load_cie_1931",
    "ReferenceCurveCache",
    "default_cache",
    "X",
    "Y",
    "Z",
    "y_integral",
]
