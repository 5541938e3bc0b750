import click
from terrakit_core.log import LevelLogger, parse_severity, severity_name


@click.command()
@click.argument("name")
@click.pass_obj
def level(log: LevelLogger, name: str) -> None:
    """Print the canonical name and rank of a log level."""
    severity, err = parse_severity(name)
    if err is not None:
        raise click.BadParameter(str(err), param_hint="NAME")
    log.debug("parsed %r as %s", name, severity_name(severity))
    click.echo(f"{severity_name(severity)} {int(severity)}")
