"""vsbridge CLI entrypoint.

Command-line interface used as Unity's External Script Editor. Configure
Unity with the bridge executable and the arguments:

    "$(File)" $(Line)

or, to target another Visual Studio Express edition:

    "$(File)" $(Line) 2013

The bridge always exits with status 0 and writes nothing to the console
unless --verbose is given; Unity ignores both.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path

import click

from vsbridge.core.invocation import parse_line_number, parse_variant
from vsbridge.core.use_case_errors import log_use_case_error
from vsbridge.domain.config import BridgeConfig, LoggingSettings
from vsbridge.shared.logging_setup import configure_logging
from vsbridge.version import __version__

logger = logging.getLogger(__name__)


def handle_bridge_errors(command_name: str):
    """Decorator that logs any failure and lets the command finish normally.

    Args:
        command_name: Name of the command for log messages.

    Returns:
        Decorated function that never raises except to exit.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (KeyboardInterrupt, SystemExit, click.exceptions.Exit):
                raise
            except Exception as e:
                log_use_case_error(e, command_name)
                return None

        return wrapper

    return decorator


def _load_config(config_path: Path | None) -> BridgeConfig:
    """Load configuration through the configured provider.

    Args:
        config_path: Explicit config file, or None for the default location.

    Returns:
        BridgeConfig with file values or defaults.
    """
    from vsbridge.adapters.factory import ConfigFactory

    return ConfigFactory().create_config_provider().load(config_path)


def _init_config(config_path: Path | None) -> None:
    """Write a commented default config file unless one exists."""
    from vsbridge.shared.config_io import create_default_config_file, get_config_path

    path = config_path if config_path is not None else get_config_path()
    if path.exists():
        click.echo(f"Config already exists: {path}")
        return
    create_default_config_file(path)
    click.echo(f"Created {path}")


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="vsbridge")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of the per-user config.toml.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log every step to stderr.",
)
@click.option(
    "--init-config",
    is_flag=True,
    help="Write a default config file and exit.",
)
@click.argument("file_path", required=False, default=None)
@click.argument("line", required=False, default=None)
@click.argument("variant", required=False, default=None)
@click.argument("extra", nargs=-1)
@handle_bridge_errors("vsbridge")
def cli(
    config_path: Path | None,
    verbose: bool,
    init_config: bool,
    file_path: str | None,
    line: str | None,
    variant: str | None,
    extra: tuple[str, ...],
) -> None:
    """Open FILE in Visual Studio Express and go to LINE.

    Reuses the editor that already has the file's Unity solution open, or
    launches one with the solution and FILE. VARIANT selects the edition
    year (2008, 2010, 2012, 2013; default 2010).
    """
    configure_logging(LoggingSettings(), verbose)

    if init_config:
        _init_config(config_path)
        return

    if not file_path:
        logger.debug("No file argument, nothing to do")
        return

    config = _load_config(config_path)
    configure_logging(config.logging, verbose)
    if extra:
        logger.debug("Ignoring extra arguments: %s", " ".join(extra))

    from vsbridge.adapters.factory import UseCaseFactory
    from vsbridge.core.orchestrator import BridgeRequest

    request = BridgeRequest(
        file_path=file_path,
        line=parse_line_number(line),
        variant=parse_variant(variant, config.bridge.default_variant),
    )
    orchestrator = UseCaseFactory(config).create_orchestrator()
    response = orchestrator.execute(request)

    if response.success:
        logger.info(
            "%s (%s)",
            response.launch_outcome.value if response.launch_outcome else "done",
            response.final_state.name if response.final_state else "",
        )


def main(argv: list[str] | None = None) -> None:
    """Console script entry point. Always exits with status 0."""
    try:
        cli.main(args=argv, prog_name="vsbridge", standalone_mode=False)
    except click.exceptions.Abort:
        pass
    except click.ClickException as e:
        logger.debug("Ignoring usage error: %s", e.format_message())
    sys.exit(0)
