from .resampler import average_samples, from_samples, resample

__all__ = [
    "average_samples",
    "from_samples",
    "resample",
]
