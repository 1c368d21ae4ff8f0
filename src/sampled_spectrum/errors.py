"""Error handling utilities for spectrum resampling and conversion."""

import sys
from typing import Optional


class SpectrumError(Exception):
    """Base exception for sampled-spectrum errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class ContractViolationError(SpectrumError, ValueError):
    """Raised when caller input breaks a documented precondition."""


class NonIncreasingWavelengthsError(ContractViolationError):
    """Raised when tabulated wavelengths are not strictly increasing."""

    def __init__(self, index: int, previous: float, current: float):
        message = (
            f"Wavelengths must be strictly increasing: "
            f"wavelengths[{index}] = {current} follows {previous}"
        )
        suggestions = [
            "Sort the samples by wavelength before resampling",
            "Merge duplicate wavelengths into a single sample",
        ]
        super().__init__(message, suggestions)


class EmptySpectrumError(ContractViolationError):
    """Raised when a tabulated spectrum has no samples."""

    def __init__(self):
        message = "Tabulated spectrum must contain at least one sample"
        suggestions = [
            "Use SampledSpectrum(value) for a constant spectrum",
        ]
        super().__init__(message, suggestions)


class LengthMismatchError(ContractViolationError):
    """Raised when wavelength and value sequences disagree in length."""

    def __init__(self, wavelengths_len: int, values_len: int, count: Optional[int] = None):
        message = (
            f"wavelengths ({wavelengths_len}) and values ({values_len}) "
            f"must have the same length"
        )
        if count is not None:
            message += f" matching count ({count})"
        suggestions = [
            "Pass one value per wavelength",
            "Omit count to use the length of the sequences",
        ]
        super().__init__(message, suggestions)


class DegenerateIntervalError(ContractViolationError):
    """Raised when an averaging interval has zero or negative width."""

    def __init__(self, l_begin: float, l_end: float):
        message = (
            f"Averaging interval [{l_begin}, {l_end}] must have positive width"
        )
        suggestions = ["Ensure l_end is strictly greater than l_begin"]
        super().__init__(message, suggestions)


class SampleIndexError(ContractViolationError, IndexError):
    """Raised when a spectrum is indexed outside [0, size)."""

    def __init__(self, index: object, size: int):
        message = f"Sample index {index!r} outside valid range [0, {size})"
        suggestions = [
            "Indices are not wrapped: negative indices are rejected",
            "Slices are not supported, use to_array() for bulk access",
        ]
        super().__init__(message, suggestions)


class NonFiniteSampleError(ContractViolationError):
    """Raised when a spectrum sample is NaN or infinite."""

    def __init__(self, value: float):
        message = f"Spectrum samples must be finite, got {value}"
        suggestions = [
            "Check for division by zero or overflow in the input data",
        ]
        super().__init__(message, suggestions)


class SampleCountError(ContractViolationError):
    """Raised when bulk values do not match the number of bins."""

    def __init__(self, expected: int, actual: int):
        message = f"Expected {expected} samples, got {actual}"
        suggestions = [
            "Use from_samples() to resample a tabulated spectrum onto the bins",
        ]
        super().__init__(message, suggestions)


class FrozenSpectrumError(SpectrumError):
    """Raised when writing to a read-only spectrum."""

    def __init__(self):
        message = "Spectrum is read-only"
        suggestions = [
            "Reference curves are shared by all callers and cannot be modified",
            "Call copy() to obtain a writable spectrum",
        ]
        super().__init__(message, suggestions)


class DatasetError(SpectrumError):
    """Raised when the colour-matching dataset cannot be used."""

    def __init__(self, detail: str):
        message = f"Invalid colour-matching dataset: {detail}"
        suggestions = [
            "The dataset needs at least two strictly increasing wavelengths",
            "Check that colour-science is installed and up to date",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)

    if isinstance(error, SpectrumError):
        if error.suggestions:
            print(file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, SpectrumError):
        traceback.print_exc()

    return 1
