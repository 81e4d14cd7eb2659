"""Command-line interface for cronparse."""

from __future__ import annotations

import logging

import typer

from cronparse.cli_modules.common.errors import ErrorContext, handle_cli_error
from cronparse.cli_modules.common.options import ConfigOpt, LogFormatOpt, LogLevelOpt
from cronparse.cli_modules.core import register_commands
from cronparse.infrastructure.config import ConfigError, load_config
from cronparse.infrastructure.logging import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cronparse",
    help="Expand crontab lines into explicit minute, hour, day, month and weekday values",
    add_completion=False,
)


@app.callback()
def main_callback(
    config: ConfigOpt = None,
    log_level: LogLevelOpt = None,
    log_format: LogFormatOpt = None,
) -> None:
    """Load configuration and set up logging before any command runs."""
    try:
        profile = load_config(config_path=config)
    except ConfigError as e:
        handle_cli_error(e, ErrorContext())

    configure_logging(
        level=log_level or profile.get_str("logging.level", default="INFO"),
        format=log_format or profile.get_str("logging.format", default="console"),
    )
    logger.debug("Configuration loaded from %s", config or "environment")


register_commands(app)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
