import click
import yaml
from rich.console import Console
from rich.table import Table
from terrakit_core.data.loader import load_schema_map
from terrakit_core.helper.schema import data_source_schema_from_resource_schema
from terrakit_core.log import LevelLogger
from terrakit_core.models.field import ComplexElement, SchemaMap, SimpleElement

console = Console()


def _flatten(schema: SchemaMap, prefix: str = ""):
    """Yield (dotted name, field) pairs, descending into nested objects."""
    for name, field in schema.items():
        path = f"{prefix}{name}"
        yield path, field
        if isinstance(field.elem, ComplexElement):
            yield from _flatten(field.elem.fields, prefix=f"{path}.")


def _elem_label(elem) -> str:
    if isinstance(elem, SimpleElement):
        return elem.type
    if isinstance(elem, ComplexElement):
        return f"object ({len(elem.fields)} fields)"
    return ""


def render_schema_table(schema: SchemaMap, title: str) -> None:
    table = Table(title=title)
    for column in ("Field", "Type", "Computed", "Optional", "Required", "Set hash", "Element"):
        table.add_column(column)

    for path, field in _flatten(schema):
        table.add_row(
            path,
            field.type,
            str(field.computed),
            str(field.optional),
            str(field.required),
            field.set_hash.name if field.set_hash else "",
            _elem_label(field.elem),
        )

    console.print(table)


def dump_schema_yaml(schema: SchemaMap) -> str:
    doc = {name: field.model_dump(mode="python", exclude_none=True) for name, field in schema.items()}
    return yaml.safe_dump(doc, sort_keys=False)


@click.group()
def schema() -> None:
    """Schema helpers."""
    pass


@schema.command()
@click.argument("path", type=click.Path(path_type=str, dir_okay=False, exists=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["yaml", "table"], case_sensitive=False),
    default="yaml",
    show_default=True,
    help="Output format.",
)
@click.pass_obj
def project(log: LevelLogger, path: str, fmt: str) -> None:
    """Print the data source (computed-only) schema for a resource schema YAML."""
    try:
        resource_schema = load_schema_map(path)
    except (FileNotFoundError, ValueError) as e:
        log.error("loading %s failed: %s", path, e)
        raise click.ClickException(str(e)) from e

    log.debug("loaded %d field(s) from %s", len(resource_schema), path)
    projected = data_source_schema_from_resource_schema(resource_schema)

    if fmt.lower() == "table":
        render_schema_table(projected, title=f"Data source schema: {path}")
    else:
        click.echo(dump_schema_yaml(projected), nl=False)
