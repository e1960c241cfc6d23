from collections.abc import Sequence
from typing import Protocol

from releasegate.domain.value_objects.exec_result import ExecResult


class CommandExecutorPort(Protocol):
    async def execute(self, command: Sequence[str]) -> ExecResult:
        """Run program command[0] with the remaining arguments and wait for it to exit.

        Raises CommandLaunchError if the program cannot be started.
        """
        ...
