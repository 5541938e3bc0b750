"""
Derive data source schemas from resource schemas.

A data source usually exposes the same attributes as the resource it reads,
but every one of them is read-only. ``data_source_schema_from_resource_schema``
produces that read-only copy: type and description are kept, every field
(at every nesting depth) becomes computed, and set hash handles are passed
through untouched.
"""

import logging
from collections.abc import Mapping

from terrakit_core.codebase.debug import spy_trace
from terrakit_core.models.field import ComplexElement, FieldDescriptor, SchemaMap, SimpleElement

_LOGGER = logging.getLogger("terrakit.schema")


@spy_trace
def data_source_schema_from_resource_schema(schema: Mapping[str, FieldDescriptor]) -> SchemaMap:
    """Return a computed-only copy of ``schema``.

    Per field:
      - type, description and sensitive are copied
      - computed is forced on, optional and required off
      - set_hash is the same handle object as the source's (or None)
      - a nested object element is projected recursively
      - a scalar element keeps only its type

    The input is never modified.
    """
    projected = _project_schema(schema)
    _LOGGER.debug("Projected %d top-level field(s) to computed", len(projected))
    return projected


def _project_schema(schema: Mapping[str, FieldDescriptor]) -> SchemaMap:
    return {name: _project_field(name, field) for name, field in schema.items()}


def _project_field(name: str, field: FieldDescriptor) -> FieldDescriptor:
    if not isinstance(field, FieldDescriptor):
        raise TypeError(f"field {name!r}: expected FieldDescriptor, got {type(field).__name__}")
    return FieldDescriptor(
        type=field.type,
        description=field.description,
        computed=True,
        optional=False,
        required=False,
        sensitive=field.sensitive,
        set_hash=field.set_hash,
        elem=_project_elem(name, field.elem),
    )


def _project_elem(name: str, elem: SimpleElement | ComplexElement | None) -> SimpleElement | ComplexElement | None:
    if elem is None:
        return None
    if isinstance(elem, ComplexElement):
        return ComplexElement(fields=_project_schema(elem.fields))
    if isinstance(elem, SimpleElement):
        return SimpleElement(type=elem.type)
    raise TypeError(f"field {name!r}: unsupported element {type(elem).__name__}")
