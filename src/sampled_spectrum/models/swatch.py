from dataclasses import dataclass


@dataclass(frozen=True)
class Swatch:
    source: str
    xyz: tuple[float, float, float]
    rgb_linear: tuple[float, float, float]
    srgb_8bit: tuple[int, int, int]
    generator_id: str
