from collections.abc import Callable, Sequence

from loguru import logger

from releasegate.domain.entities.check_item import CheckItem
from releasegate.domain.ports.command_executor_port import CommandExecutorPort
from releasegate.domain.value_objects.exec_result import ExecResult
from releasegate.domain.value_objects.run_outcome import RunFailure, RunOutcome, RunSuccess

# Called with the check name before anything runs for it
StartCallback = Callable[[str], None]

# Called with (check_name, success_message) after the validator accepted
CompleteCallback = Callable[[str, str | None], None]

# Called with the failure message of the check that stopped the run
FailureCallback = Callable[[str], None]


def _failure_message(error: Exception) -> str:
    return str(error) or type(error).__name__


class CheckOrchestrator:
    """Runs check items one at a time and stops at the first failure.

    Item n+1 is never started (no command spawned, no validator invoked)
    until item n has settled. The orchestrator never exits the process; the
    caller maps the returned RunOutcome to an exit status.
    """

    def __init__(
        self,
        executor: CommandExecutorPort,
        on_start: StartCallback | None = None,
        on_complete: CompleteCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> None:
        self.executor = executor
        self.on_start = on_start
        self.on_complete = on_complete
        self.on_failure = on_failure

    async def run_item(self, item: CheckItem) -> str | None:
        """Run one item's command (if any) and its validator.

        Raises whatever the executor or validator raised.
        """
        if item.has_command:
            logger.debug("Check '{}' running command: {}", item.name, " ".join(item.command))
            result = await self.executor.execute(item.command)
            logger.debug("Check '{}' command exited with {}", item.name, result.exit_code)
        else:
            result = ExecResult.empty()
        return await item.evaluate(result)

    async def run_all(self, items: Sequence[CheckItem]) -> RunOutcome:
        for index, item in enumerate(items):
            if self.on_start:
                self.on_start(item.name)

            try:
                message = await self.run_item(item)
            except Exception as e:
                failure = RunFailure(index=index, name=item.name, message=_failure_message(e))
                logger.opt(exception=e).debug("Check '{}' failed", item.name)
                logger.warning("Check '{}' failed: {}", item.name, failure.message)
                if self.on_failure:
                    self.on_failure(failure.message)
                return failure

            logger.info("Check '{}' passed", item.name)
            if self.on_complete:
                self.on_complete(item.name, message or None)

        return RunSuccess(completed=len(items))
