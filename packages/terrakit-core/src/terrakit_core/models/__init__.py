from .field import (
    HASH_INT,
    HASH_STRING,
    ComplexElement,
    FieldDescriptor,
    SchemaMap,
    SetHash,
    SimpleElement,
    ValueType,
    lookup_set_hash,
    register_set_hash,
)

__all__ = [
    "HASH_INT",
    "HASH_STRING",
    "ComplexElement",
    "FieldDescriptor",
    "SchemaMap",
    "SetHash",
    "SimpleElement",
    "ValueType",
    "lookup_set_hash",
    "register_set_hash",
]
