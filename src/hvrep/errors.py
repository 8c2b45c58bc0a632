from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_APPROXIMATION = "EmptyApproximation"
    EMPTY_REGION = "EmptyRegion"
    NON_MONOTONIC_SEGMENT = "NonMonotonicSegment"
    UNSORTED_SEGMENTS = "UnsortedSegments"
    WRONG_DIMENSIONS = "WrongDimensions"
    INVALID_REFERENCE = "InvalidReference"


class HypervolumeError(ValueError):
    """Validation error raised while building a selector from user input."""

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(f"{self.kind.value} - {message}" if message else self.kind.value)


class EmptyApproximation(HypervolumeError):
    kind = ErrorKind.EMPTY_APPROXIMATION


class EmptyRegion(HypervolumeError):
    kind = ErrorKind.EMPTY_REGION


class NonMonotonicSegment(HypervolumeError):
    kind = ErrorKind.NON_MONOTONIC_SEGMENT


UnsortedSegment = NonMonotonicSegment


class UnsortedSegments(HypervolumeError):
    kind = ErrorKind.UNSORTED_SEGMENTS


class WrongDimensions(HypervolumeError):
    kind = ErrorKind.WRONG_DIMENSIONS


class InvalidReference(HypervolumeError):
    kind = ErrorKind.INVALID_REFERENCE


class InvariantViolation(RuntimeError):
    """Internal ordering failure (e.g. a NaN contribution). Never expected for validated input."""
