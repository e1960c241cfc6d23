import asyncio
import sys
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError

from releasegate.application.checks import default_checks
from releasegate.application.dto.gate_config import GateConfig
from releasegate.cli.formatters.check_formatter import format_error
from releasegate.cli.runner import console, err_console, run_checks
from releasegate.domain.errors import ManifestError
from releasegate.infrastructure.manifest.manifest_reader import read_project_version
from releasegate.infrastructure.process.command_executor import SubprocessCommandExecutor


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.enable("releasegate")

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )

    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            encoding="utf-8",
        )


def _build_config(
    toolchain: str,
    registry: str,
    manifest: Path,
    version: str | None,
    cwd: Path | None,
) -> GateConfig:
    fields: dict[str, object] = {
        "toolchain": toolchain,
        "registry": registry,
        "manifest_path": manifest,
        "version": version,
    }
    if cwd is not None:
        fields["cwd"] = cwd
    return GateConfig(**fields)


app = typer.Typer(
    name="releasegate",
    help="Run pre-release checks in order and stop at the first failure",
    add_completion=False,
)


@app.command()
def main(
    toolchain: str = typer.Option(
        "deno", "--toolchain", envvar="RELEASEGATE_TOOLCHAIN", help="Toolchain executable"
    ),
    registry: str = typer.Option(
        "JSR", "--registry", envvar="RELEASEGATE_REGISTRY", help="Registry name shown in output"
    ),
    manifest: Path = typer.Option(
        Path("deno.json"),
        "--manifest",
        envvar="RELEASEGATE_MANIFEST",
        help="Manifest file holding the project version",
    ),
    version: str | None = typer.Option(
        None,
        "--version-override",
        envvar="RELEASEGATE_VERSION",
        help="Use this version instead of reading the manifest",
    ),
    cwd: Path | None = typer.Option(
        None, "--cwd", envvar="RELEASEGATE_CWD", help="Directory to run the checks in"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write a debug log here"),
) -> None:
    """Toolchain upgrade check, VERSION check and publish dry-run, in that order."""
    setup_logging(verbose=verbose, log_file=log_file)

    try:
        config = _build_config(toolchain, registry, manifest, version, cwd)
        project_version = config.version or read_project_version(config.resolved_manifest_path)
    except ValidationError as e:
        logger.debug("Invalid configuration: {}", e)
        format_error(err_console, e.errors()[0]["msg"])
        raise typer.Exit(1) from None
    except ManifestError as e:
        logger.debug("Manifest error: {}", e)
        format_error(err_console, str(e))
        raise typer.Exit(1) from None

    logger.info("Running release checks in {} for version {}", config.cwd, project_version)

    items = default_checks(config, project_version, console)
    outcome = asyncio.run(run_checks(items, SubprocessCommandExecutor(config.cwd)))

    if not outcome.is_success:
        raise typer.Exit(outcome.exit_code)


if __name__ == "__main__":
    app()
