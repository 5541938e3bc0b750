import click
from terrakit_core.log import LevelLogger
from terrakit_core.rand import ALPHABETS, int_array_unique, random_string


def _build_alphabet(names: str) -> str:
    parts = [n.strip().lower() for n in names.split(",") if n.strip()]
    unknown = [n for n in parts if n not in ALPHABETS]
    if unknown:
        choices = ", ".join(sorted(ALPHABETS))
        raise click.BadParameter(f"unknown alphabet {unknown[0]!r} (choose from {choices})", param_hint="--alphabet")
    return "".join(ALPHABETS[n] for n in parts)


@click.group()
def rand() -> None:
    """Random test data."""
    pass


@rand.command("string")
@click.option("--length", type=int, default=16, show_default=True, help="Number of characters.")
@click.option(
    "--alphabet",
    type=str,
    default="alphanumeric",
    show_default=True,
    help="Comma-separated alphabets: lower, upper, digit, whitespace, special, alphanumeric.",
)
@click.pass_obj
def string_(log: LevelLogger, length: int, alphabet: str) -> None:
    """Random string drawn from the chosen alphabets."""
    chars = _build_alphabet(alphabet)
    try:
        value = random_string(length, chars)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    log.debug("generated %d character(s) from a %d-symbol alphabet", length, len(chars))
    click.echo(value)


@rand.command("ints")
@click.option("--count", type=int, default=10, show_default=True, help="Size of the permutation.")
@click.pass_obj
def ints(log: LevelLogger, count: int) -> None:
    """Random permutation of 0..COUNT-1, one number per line."""
    try:
        values = int_array_unique(count)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--count") from e
    log.debug("generated permutation of %d value(s)", count)
    for v in values:
        click.echo(v)
