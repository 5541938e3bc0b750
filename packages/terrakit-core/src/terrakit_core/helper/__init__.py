from .schema import data_source_schema_from_resource_schema

__all__ = ["data_source_schema_from_resource_schema"]
