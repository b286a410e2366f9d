class SpektreeError(Exception):
    """Base class for errors raised by spektree itself (never for test failures)."""

class IndentationUnderflowError(SpektreeError, RuntimeError):
    """on_success/on_failure arrived without a matching on_start."""

class SpecLoadError(SpektreeError, LookupError):
    """A spec target could not be imported or did not yield a SpecNode."""
