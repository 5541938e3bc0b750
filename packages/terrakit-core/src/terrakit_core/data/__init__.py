from .loader import load_schema_map, load_yaml_typed

__all__ = [
    "load_schema_map",
    "load_yaml_typed",
]
