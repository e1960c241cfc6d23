import asyncio
import contextlib
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from releasegate.domain.errors import CommandLaunchError
from releasegate.domain.value_objects.exec_result import ExecResult


class SubprocessCommandExecutor:
    """Runs a command as a child process and captures all of its output.

    There is no timeout: a child that never exits blocks the caller.
    """

    def __init__(self, cwd: str | Path | None = None) -> None:
        self.cwd = cwd

    async def execute(self, command: Sequence[str]) -> ExecResult:
        if not command:
            raise ValueError("command must contain at least the program name")

        program, *args = command

        try:
            proc = await asyncio.create_subprocess_exec(
                program,
                *args,
                cwd=str(self.cwd) if self.cwd is not None else None,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error("Failed to launch '{}': {}", program, e)
            raise CommandLaunchError(program, e.strerror or str(e)) from e

        # communicate() drains both pipes and waits for exit
        try:
            stdout, stderr = await proc.communicate()
        except asyncio.CancelledError:
            logger.debug("Killing '{}' (pid {}) after cancellation", program, proc.pid)
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            raise

        return ExecResult(
            exit_code=proc.returncode or 0,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
