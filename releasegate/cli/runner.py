import asyncio
from collections.abc import Sequence
from functools import partial

from rich.console import Console

from releasegate.application.check_orchestrator import CheckOrchestrator
from releasegate.cli.formatters.check_formatter import format_complete, format_error, format_start
from releasegate.domain.entities.check_item import CheckItem
from releasegate.domain.ports.command_executor_port import CommandExecutorPort
from releasegate.domain.value_objects.run_outcome import RunOutcome
from releasegate.infrastructure.process.command_executor import SubprocessCommandExecutor

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


async def run_checks(
    items: Sequence[CheckItem],
    executor: CommandExecutorPort | None = None,
) -> RunOutcome:
    """Run items in order, printing a header and an OK/[Error] line for each."""
    orchestrator = CheckOrchestrator(
        executor or SubprocessCommandExecutor(),
        on_start=partial(format_start, console),
        on_complete=partial(format_complete, console),
        on_failure=partial(format_error, err_console),
    )
    return await orchestrator.run_all(items)


def check(*items: CheckItem, executor: CommandExecutorPort | None = None) -> None:
    """Run the given checks; exit the process with status 1 on the first failure."""
    outcome = asyncio.run(run_checks(items, executor))
    if not outcome.is_success:
        raise SystemExit(outcome.exit_code)
