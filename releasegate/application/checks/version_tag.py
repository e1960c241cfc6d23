import re

from loguru import logger
from rich.console import Console

from releasegate.domain.entities.check_item import CheckItem
from releasegate.domain.errors import CheckFailedError
from releasegate.domain.ports.validator_port import Validator
from releasegate.domain.services.version_comparator import is_newer
from releasegate.domain.value_objects.exec_result import ExecResult

_WHITESPACE = re.compile(r"\s")

NOT_UPDATED_MESSAGE = "VERSION is not updated. Update the project manifest version"


class VersionTagValidator(Validator):
    """Fails unless the project version is newer than the latest git tag."""

    def __init__(self, version: str, console: Console | None = None) -> None:
        self.version = version
        self.console = console or Console(highlight=False)

    async def validate(self, result: ExecResult) -> str | None:
        tag = _WHITESPACE.sub("", result.stdout)
        self.console.print(f"Now tag: {tag} Now ver: {self.version}", markup=False)
        if not is_newer(tag, self.version):
            logger.debug("Version {} is not newer than tag '{}'", self.version, tag)
            raise CheckFailedError(NOT_UPDATED_MESSAGE)
        return None


def create_version_check(version: str, console: Console | None = None) -> CheckItem:
    return CheckItem(
        name="VERSION check",
        command=("git", "describe", "--tags", "--abbrev=0"),
        validator=VersionTagValidator(version, console),
    )
