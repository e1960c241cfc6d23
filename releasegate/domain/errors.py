class ReleaseGateError(Exception):
    """Base class for all release gate errors."""


class CheckFailedError(ReleaseGateError):
    """Raised by a validator to reject a check result."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CommandLaunchError(ReleaseGateError):
    """Raised when an external program cannot be started."""

    def __init__(self, program: str, reason: str) -> None:
        self.program = program
        self.reason = reason
        super().__init__(f"Failed to launch '{program}': {reason}")


class ManifestError(ReleaseGateError):
    """Raised when the project version cannot be read from its manifest."""
