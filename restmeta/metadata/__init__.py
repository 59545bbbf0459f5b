"""Generic metadata configuration package.

This is a GENERIC component with no application-specific configuration and no
web framework dependency. Applications construct a MetadataConfiguration,
populate it at startup, freeze it, and hand it to whatever renders metadata.

Architecture:
    - formats.py: JsonSchemaFormat tags
    - type_registry.py: Ordered type-keyed registry with assignability fallback
    - configuration.py: MetadataConfiguration (flags, formats, patterns)
    - descriptions.py: Description key resolution honoring the omit policy
    - json_schema.py: Pydantic JSON schema decorated with configured metadata

Quick Start:
    ```python
    import numbers
    from datetime import date

    from restmeta.metadata import (
        JsonSchemaFormat,
        MetadataConfiguration,
        metadata_json_schema,
    )

    configuration = MetadataConfiguration()
    configuration.alps_enabled = False
    configuration.register_json_schema_format(JsonSchemaFormat.DATE, date)
    configuration.register_formatting_pattern_for(r"^\\d+$", numbers.Number)
    configuration.freeze()

    schema = metadata_json_schema(Invoice, configuration)
    ```
"""

from restmeta.metadata.configuration import MetadataConfiguration
from restmeta.metadata.descriptions import DescriptionResolver
from restmeta.metadata.formats import JsonSchemaFormat
from restmeta.metadata.json_schema import metadata_json_schema, resource_name_for
from restmeta.metadata.type_registry import TypeRegistry, is_assignable

__all__ = [
    "MetadataConfiguration",
    "JsonSchemaFormat",
    "TypeRegistry",
    "is_assignable",
    "DescriptionResolver",
    "metadata_json_schema",
    "resource_name_for",
]
