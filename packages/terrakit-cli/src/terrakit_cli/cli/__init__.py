import sys

import click
from terrakit_cli.schema.schema import schema
from terrakit_cli.tools.diff import diff
from terrakit_cli.tools.level import level
from terrakit_cli.tools.rand import rand
from terrakit_core.config import LoggingConfig, new_level_logger_from_env
from terrakit_core.log import LevelLogger, parse_severity


@click.group()
@click.option(
    "--log-level",
    type=str,
    default=None,
    help="Diagnostics threshold on stderr (DEBUG, TRACE, INFO, WARNING, ERROR, NONE). Overrides TERRAKIT_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Helpers for provider schema and test data work."""
    if log_level is None:
        ctx.obj = new_level_logger_from_env()
        return
    threshold, err = parse_severity(log_level)
    if err is not None:
        raise click.BadParameter(str(err), param_hint="--log-level")
    ctx.obj = LevelLogger(sys.stderr, LoggingConfig.from_env().flags, threshold)


# add cli groups here

cli.add_command(level)
cli.add_command(rand)
cli.add_command(schema)
cli.add_command(diff)
