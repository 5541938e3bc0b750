import click
from terrakit_core.log import LevelLogger
from terrakit_core.validation.diff_suppress import diff_suppress_string_ignore_case


@click.group()
def diff() -> None:
    """Diff suppression checks."""
    pass


@diff.command("ignore-case")
@click.argument("old")
@click.argument("new")
@click.option("--key", type=str, default="", help="Attribute key, for the log line only.")
@click.pass_obj
def ignore_case(log: LevelLogger, old: str, new: str, key: str) -> None:
    """Print "suppressed" when OLD and NEW differ only in case, else "changed"."""
    suppressed = diff_suppress_string_ignore_case(key, old, new)
    log.debug("key %r: old=%r new=%r suppressed=%s", key, old, new, suppressed)
    click.echo("suppressed" if suppressed else "changed")
