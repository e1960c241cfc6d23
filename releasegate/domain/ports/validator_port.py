from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from releasegate.domain.value_objects.exec_result import ExecResult

ValidateFn = Callable[[ExecResult], Awaitable[str | None]]


class Validator(ABC):
    """Decides whether a check passed, given its command result."""

    @abstractmethod
    async def validate(self, result: ExecResult) -> str | None:
        """Return an optional success message, or raise CheckFailedError."""


class FunctionValidator(Validator):
    """Wraps a plain async function as a validator."""

    def __init__(self, fn: ValidateFn) -> None:
        self._fn = fn

    async def validate(self, result: ExecResult) -> str | None:
        return await self._fn(result)
