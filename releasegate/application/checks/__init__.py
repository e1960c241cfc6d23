from rich.console import Console

from releasegate.application.checks.publish_dry_run import (
    PublishDryRunValidator,
    create_publish_check,
)
from releasegate.application.checks.toolchain_upgrade import (
    ToolchainUpgradeValidator,
    create_toolchain_upgrade_check,
    find_latest_version,
)
from releasegate.application.checks.version_tag import VersionTagValidator, create_version_check
from releasegate.application.dto.gate_config import GateConfig
from releasegate.domain.entities.check_item import CheckItem


def default_checks(
    config: GateConfig, version: str, console: Console | None = None
) -> list[CheckItem]:
    """Toolchain upgrade, version-vs-tag and publish dry-run, in that order."""
    return [
        create_toolchain_upgrade_check(config.toolchain),
        create_version_check(version, console),
        create_publish_check(config.toolchain, config.registry),
    ]


__all__ = [
    "PublishDryRunValidator",
    "ToolchainUpgradeValidator",
    "VersionTagValidator",
    "create_publish_check",
    "create_toolchain_upgrade_check",
    "create_version_check",
    "default_checks",
    "find_latest_version",
]
