from releasegate.domain.entities.check_item import CheckItem
from releasegate.domain.errors import CheckFailedError
from releasegate.domain.ports.validator_port import Validator
from releasegate.domain.value_objects.exec_result import ExecResult


class PublishDryRunValidator(Validator):
    """Passes when the registry publish dry-run exits with status 0."""

    async def validate(self, result: ExecResult) -> str | None:
        if result.exit_code == 0:
            return None
        raise CheckFailedError(result.stderr)


def create_publish_check(toolchain: str = "deno", registry: str = "JSR") -> CheckItem:
    return CheckItem(
        name=f"{registry} Publish check",
        command=(toolchain, "publish", "--dry-run"),
        validator=PublishDryRunValidator(),
    )
