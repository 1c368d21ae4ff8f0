from .embedder import extract_metadata, write_swatch

__all__ = [
    "write_swatch",
    "extract_metadata",
]
