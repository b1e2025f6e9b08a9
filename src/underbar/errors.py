"""Error definitions for UNDERBAR."""

# ============================================================================
#                              Base error
# ============================================================================


class UnderbarError(Exception):
    """Base class for all UNDERBAR errors."""


# ============================================================================
#                           Argument errors
# ============================================================================


class InvalidArgumentError(UnderbarError, TypeError):
    """Raised when an argument has the wrong shape or type for an operation."""


class EmptyReductionError(InvalidArgumentError):
    """Raised when reducing an empty collection without an initial value."""

    def __init__(self) -> None:
        super().__init__("cannot reduce empty collection without initial value")


class MethodNotFoundError(UnderbarError, AttributeError):
    """Raised when `invoke` cannot resolve a named method on an element."""

    def __init__(self, name: str, element: object) -> None:
        super().__init__(
            f"{type(element).__name__!r} element has no callable method {name!r}"
        )
        self.name = name
        self.element = element


# ============================================================================
#                        Scheduling & settings errors
# ============================================================================


class SchedulerShutdownError(UnderbarError, RuntimeError):
    """Raised when scheduling work on a timer queue that has been shut down."""


class InvalidSettingError(UnderbarError, ValueError):
    """Raised when an environment setting holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name} ({value!r}): {reason}")
        self.name = name
        self.value = value
