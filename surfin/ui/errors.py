"""Errors raised while laying out a forecast view."""


class RenderError(Exception):
    """Base class for failures local to a single render call."""


class EmptyInputError(RenderError):
    """Raised when a section is built from zero forecast records."""


class InvariantViolationError(RenderError):
    """Raised when a layout invariant does not hold (widths, labels)."""
