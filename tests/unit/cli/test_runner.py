"""Tests for the check() / run_checks() invocation surface."""

import asyncio
import sys
from io import StringIO
from unittest.mock import patch

import pytest
from fakes import FakeExecutor
from loguru import logger
from rich.console import Console

from releasegate.cli.runner import check, run_checks
from releasegate.domain.entities.check_item import CheckItem
from releasegate.domain.errors import CheckFailedError
from releasegate.domain.ports.validator_port import FunctionValidator
from releasegate.domain.value_objects.exec_result import ExecResult
from releasegate.domain.value_objects.run_outcome import RunFailure, RunSuccess


def make_console() -> Console:
    return Console(file=StringIO(), width=80)


def get_output(console: Console) -> str:
    console.file.seek(0)
    return console.file.read()


async def says_hello(result: ExecResult) -> str | None:
    return "hello"


async def rejects(result: ExecResult) -> str | None:
    raise CheckFailedError("not ready")


def item(name: str, fn=says_hello) -> CheckItem:
    return CheckItem(name=name, validator=FunctionValidator(fn))


class TestRunChecks:
    async def test_prints_header_and_message(self) -> None:
        out, err = make_console(), make_console()

        with (
            patch("releasegate.cli.runner.console", out),
            patch("releasegate.cli.runner.err_console", err),
        ):
            outcome = await run_checks([item("greet")], FakeExecutor())

        assert outcome == RunSuccess(completed=1)
        lines = get_output(out).splitlines()
        assert lines[0].startswith("== greet ")
        assert lines[1] == "OK ... greet: hello"
        assert get_output(err) == ""

    async def test_failure_goes_to_error_console(self) -> None:
        out, err = make_console(), make_console()

        with (
            patch("releasegate.cli.runner.console", out),
            patch("releasegate.cli.runner.err_console", err),
        ):
            outcome = await run_checks([item("bad", rejects), item("never")], FakeExecutor())

        assert outcome == RunFailure(index=0, name="bad", message="not ready")
        assert get_output(err) == "[Error] not ready\n"
        assert "never" not in get_output(out)


class TestCheck:
    def test_success_returns_normally(self) -> None:
        with patch("releasegate.cli.runner.console", make_console()):
            check(item("one"), item("two"), executor=FakeExecutor())

    def test_failure_exits_with_one(self) -> None:
        with (
            patch("releasegate.cli.runner.console", make_console()),
            patch("releasegate.cli.runner.err_console", make_console()),
            pytest.raises(SystemExit) as exc_info,
        ):
            check(item("one"), item("two", rejects), executor=FakeExecutor())

        assert exc_info.value.code == 1

    def test_library_use_emits_no_log_records(self) -> None:
        records: list[str] = []
        logger.add(records.append, level="DEBUG")

        with patch("releasegate.cli.runner.console", make_console()):
            check(item("quiet"), executor=FakeExecutor())

        assert records == []

    async def test_fresh_interpreter_stderr_is_empty(self) -> None:
        script = "\n".join(
            [
                "from releasegate.cli.runner import check",
                "from releasegate.domain.entities.check_item import CheckItem",
                "from releasegate.domain.ports.validator_port import FunctionValidator",
                "async def ok(result):",
                "    return None",
                "check(CheckItem(name='a', command=['true'], validator=FunctionValidator(ok)))",
            ]
        )
        proc = await asyncio.create_subprocess_exec(
            sys.executable,
            "-c",
            script,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()

        assert proc.returncode == 0
        assert stderr.decode() == ""
        assert "OK ... a" in stdout.decode()
