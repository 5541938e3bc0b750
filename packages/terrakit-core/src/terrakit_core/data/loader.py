from pathlib import Path
from typing import Any, TypeVar, overload

import yaml
from pydantic import TypeAdapter, ValidationError

from terrakit_core.codebase.debug import spy_trace
from terrakit_core.models.field import FieldDescriptor, SchemaMap

T = TypeVar("T")

_SCHEMA_MAP = TypeAdapter(dict[str, FieldDescriptor])


# -------------------------------
# Internal raw YAML reader
# -------------------------------


def _read_yaml_raw(path: Path | str) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {p}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        raise ValueError(f"Empty YAML file: {p}")

    return data


# -------------------------------
# Public typed YAML loader
# -------------------------------


@overload
def load_yaml_typed[T](path: Path | str, *, adapter: TypeAdapter[T]) -> T: ...


@overload
def load_yaml_typed[T](path: Path | str, *, model: type[T]) -> T: ...


def load_yaml_typed(
    path: Path | str,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
) -> T:
    """Read YAML and validate/parse it into a typed object using Pydantic v2.

    Exactly one of {adapter, model} must be supplied.

    Example:
        load_yaml_typed("schemas/bucket.yaml", adapter=TypeAdapter(dict[str, FieldDescriptor]))
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = _read_yaml_raw(path)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except ValidationError as e:
        # Normalize error so callers see the file path in the message
        raise ValueError(f"Invalid structure in {path}: {e}") from e


@spy_trace
def load_schema_map(path: Path | str) -> SchemaMap:
    """Load a YAML mapping of field name -> field descriptor."""
    return load_yaml_typed(path, adapter=_SCHEMA_MAP)
