import zlib
from typing import Annotated, Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

ValueType = Literal["bool", "int", "float", "string", "list", "set", "map", "object"]


class SetHash:
    """Opaque handle to a set member hashing function.

    Equality is identity: two handles wrapping the same function are still
    different handles. Schema tooling passes handles through untouched; only
    the consuming framework calls them.
    """

    __slots__ = ("_func", "name")

    def __init__(self, func: Callable[[Any], int], name: str | None = None):
        if not callable(func):
            raise TypeError(f"set hash must be callable, got {type(func).__name__}")
        self._func = func
        self.name = name or getattr(func, "__name__", None)

    def __call__(self, value: Any) -> int:
        return self._func(value)

    def __repr__(self) -> str:
        return f"SetHash({self.name or '?'} @ {id(self):#x})"


_SET_HASHES: dict[str, SetHash] = {}


def register_set_hash(name: str, func: Callable[[Any], int]) -> SetHash:
    """Register a hashing function under ``name`` so schema documents can refer to it."""
    handle = SetHash(func, name=name)
    _SET_HASHES[name] = handle
    return handle


def lookup_set_hash(name: str) -> SetHash:
    try:
        return _SET_HASHES[name]
    except KeyError:
        known = ", ".join(sorted(_SET_HASHES)) or "none"
        raise ValueError(f"unknown set hash {name!r} (registered: {known})") from None


def _hash_string(value: Any) -> int:
    return zlib.crc32(str(value).encode("utf-8"))


def _hash_int(value: Any) -> int:
    return _hash_string(str(int(value)))


HASH_STRING = register_set_hash("string", _hash_string)
HASH_INT = register_set_hash("int", _hash_int)


class SimpleElement(BaseModel):
    """Element type of a list/set of scalars."""

    model_config = ConfigDict(extra="ignore", frozen=True)
    kind: Literal["simple"] = "simple"
    type: ValueType
    description: str = ""


class ComplexElement(BaseModel):
    """Element of a list/set of nested objects: a mapping of sub-fields."""

    model_config = ConfigDict(extra="ignore", frozen=True)
    kind: Literal["complex"] = "complex"
    fields: dict[str, "FieldDescriptor"] = Field(default_factory=dict)


Element = Annotated[Union[SimpleElement, ComplexElement], Field(discriminator="kind")]


class FieldDescriptor(BaseModel):
    """A named field of a resource or data source schema."""

    model_config = ConfigDict(extra="ignore", frozen=True, arbitrary_types_allowed=True)
    type: ValueType
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    set_hash: SetHash | None = None
    elem: Element | None = None

    @field_validator("set_hash", mode="before")
    @classmethod
    def _coerce_set_hash(cls, v):
        if v is None or isinstance(v, SetHash):
            return v
        if isinstance(v, str):
            return lookup_set_hash(v)
        if callable(v):
            return SetHash(v)
        raise ValueError("set_hash must be a SetHash, a callable or a registered name")

    @field_validator("elem", mode="before")
    @classmethod
    def _infer_elem_kind(cls, v):
        if not isinstance(v, dict):
            return v
        if "fields" in v and "type" in v:
            raise ValueError("elem must be either a simple element (type) or a nested object (fields), not both")
        # allow documents to omit `kind`; a `fields` key means a nested object
        if "kind" not in v:
            return {**v, "kind": "complex" if "fields" in v else "simple"}
        return v

    @field_serializer("set_hash")
    def _dump_set_hash(self, v: SetHash | None):
        # only registered handles have a name lookup_set_hash can load back
        if v is None or _SET_HASHES.get(v.name) is not v:
            return None
        return v.name


ComplexElement.model_rebuild()
FieldDescriptor.model_rebuild()

SchemaMap = dict[str, FieldDescriptor]
