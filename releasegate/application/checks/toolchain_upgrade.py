import re

from releasegate.domain.entities.check_item import CheckItem
from releasegate.domain.errors import CheckFailedError
from releasegate.domain.ports.validator_port import Validator
from releasegate.domain.value_objects.exec_result import ExecResult

LATEST_VERSION_PATTERN = re.compile(r"Found latest stable version .*v([0-9.]+).*")


def find_latest_version(text: str) -> str | None:
    """Return the version from the last "Found latest stable version" line, if any."""
    version = None
    for line in text.split("\n"):
        match = LATEST_VERSION_PATTERN.fullmatch(line.strip())
        if match:
            version = match.group(1)
    return version


class ToolchainUpgradeValidator(Validator):
    """Fails when the toolchain's upgrade dry-run reports a newer stable release."""

    def __init__(self, toolchain: str) -> None:
        self.toolchain = toolchain

    async def validate(self, result: ExecResult) -> str | None:
        version = find_latest_version(result.stderr)
        if not version:
            return f"This {self.toolchain} version is latest"
        raise CheckFailedError(
            f"Found latest version: {version}\nExec `{self.toolchain} upgrade`"
        )


def create_toolchain_upgrade_check(toolchain: str = "deno") -> CheckItem:
    return CheckItem(
        name=f"{toolchain.capitalize()} version check",
        command=(toolchain, "upgrade", "--dry-run"),
        validator=ToolchainUpgradeValidator(toolchain),
    )
