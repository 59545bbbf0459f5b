"""Metadata-aware JSON schema rendering for pydantic models.

Starts from pydantic's own JSON schema for a model and decorates each
property with what the MetadataConfiguration knows about the property's type:

- ``format``: JSON schema format registered for the exact type
- ``pattern``: formatting pattern registered for the type or a supertype
- ``description``: resolved through a DescriptionResolver, if given

A registered format replaces the one pydantic derives from the type (``date``,
``uuid``, ...) unless the field declares its own through
``Field(json_schema_extra={"format": ...})``. Descriptions and patterns
pydantic already emitted (e.g. ``Field(pattern=...)``) are kept.

Usage:
    ```python
    schema = metadata_json_schema(Person, configuration, resolver)
    ```
"""

import types
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from restmeta.metadata.configuration import MetadataConfiguration
from restmeta.metadata.descriptions import DescriptionResolver


def resource_name_for(model: type[BaseModel]) -> str:
    """Default resource name of a model (class name, first letter lowercased)."""
    name = model.__name__
    return name[:1].lower() + name[1:]


def resolve_property_type(annotation: Any) -> type | None:
    """Reduce a field annotation to the class its values are instances of.

    Unwraps ``Annotated[X, ...]`` and ``X | None``. Returns None for generic
    containers, unions of several types, and anything that is not a class.
    """
    origin = get_origin(annotation)

    if origin is Annotated:
        return resolve_property_type(get_args(annotation)[0])

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return resolve_property_type(members[0])
        return None

    if origin is not None:
        return None

    return annotation if isinstance(annotation, type) else None


def _value_schema(property_schema: dict[str, Any]) -> dict[str, Any] | None:
    # Optional fields render as anyOf [<value>, {"type": "null"}]
    if "anyOf" in property_schema:
        branches = [
            branch
            for branch in property_schema["anyOf"]
            if branch.get("type") != "null"
        ]
        target = branches[0] if len(branches) == 1 else None
    else:
        target = property_schema

    if target is None or "$ref" in target:
        return None
    return target


def _declares_format(field: FieldInfo) -> bool:
    # a format pydantic derives from the type (date, uuid, ...) is not a declaration
    extra = field.json_schema_extra
    return isinstance(extra, dict) and "format" in extra


def metadata_json_schema(
    model: type[BaseModel],
    configuration: MetadataConfiguration,
    resolver: DescriptionResolver | None = None,
    *,
    resource: str | None = None,
) -> dict[str, Any]:
    """Render the JSON schema of ``model`` decorated with configured metadata.

    Args:
        model: Pydantic model describing the resource.
        configuration: Source of formats and patterns.
        resolver: Optional description resolver.
        resource: Resource name used in description keys. Defaults to the
            model name with its first letter lowercased.

    Returns:
        dict[str, Any]: JSON schema document.
    """
    resource = resource or resource_name_for(model)
    schema = model.model_json_schema(by_alias=True)
    properties: dict[str, Any] = schema.get("properties", {})

    if resolver is not None:
        description = resolver.resolve(resolver.key_for(resource))
        if description is not None:
            schema.setdefault("description", description)

    for name, field in model.model_fields.items():
        key = field.alias if field.alias in properties else name
        property_schema = properties.get(key)
        if property_schema is None:
            continue

        if resolver is not None:
            description = resolver.resolve(resolver.key_for(resource, name))
            if description is not None:
                property_schema.setdefault("description", description)

        property_type = resolve_property_type(field.annotation)
        target = _value_schema(property_schema)
        if property_type is None or target is None:
            continue

        schema_format = configuration.get_schema_format_for(property_type)
        if schema_format is not None and not _declares_format(field):
            target["format"] = schema_format.value

        pattern = configuration.get_pattern_for(property_type)
        if pattern is not None:
            target.setdefault("pattern", pattern.pattern)

    return schema
