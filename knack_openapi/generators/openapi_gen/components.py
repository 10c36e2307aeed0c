"""Schema components for objects and views."""
import logging
from typing import Any, Dict, Optional, Tuple
from knack_openapi.schemas.knack import KnackObject, KnackSchema, KnackScene, KnackView
from knack_openapi.generators.openapi_gen.field_resolver import resolve_field
from knack_openapi.generators.openapi_gen.field_types import map_field_type, should_include_field
from knack_openapi.generators.openapi_gen.utils import find_object
from knack_openapi.generators.openapi_gen.view_fields import extract_field_keys

log = logging.getLogger(__name__)


def object_to_schema(obj: KnackObject) -> Tuple[str, Dict[str, Any]]:
    """Convert an object to (schema name, schema). The name is the object key."""
    properties: Dict[str, Any] = {}
    required = []

    for field in obj.fields:
        if not should_include_field(field):
            continue
        properties[field.key] = map_field_type(field)
        if field.required:
            required.append(field.key)

    schema: Dict[str, Any] = {
        "type": "object",
        "title": obj.name,
        "description": f"{obj.singular} object",
        "properties": properties,
    }
    if required:
        schema["required"] = required

    return obj.key, schema


def generate_object_components(knack_schema: KnackSchema) -> Dict[str, Dict[str, Any]]:
    schemas = {}
    for obj in knack_schema.application.objects:
        name, schema = object_to_schema(obj)
        schemas[name] = schema
    return schemas


def view_schema_name(scene: KnackScene, view: KnackView) -> str:
    return f"view_{scene.slug}_{view.key}"


def generate_view_schema(view: KnackView, scene: KnackScene, knack_schema: KnackSchema) -> Optional[Dict[str, Any]]:
    """
    Build the schema for the fields a view surfaces.

    Returns None when the source object does not resolve or no surfaced field does.
    """
    source_object = find_object(view.source_object_key, knack_schema)
    if source_object is None:
        return None

    field_keys = extract_field_keys(view)
    if not field_keys:
        return None

    properties: Dict[str, Any] = {}
    required = []
    for field_key in field_keys:
        field = resolve_field(field_key, source_object, knack_schema)
        if field is None:
            log.debug("Field %s in view %s does not resolve; skipping", field_key, view.key)
            continue
        if not should_include_field(field):
            continue
        properties[field.key] = map_field_type(field)
        if field.required:
            required.append(field.key)

    if not properties:
        return None

    schema: Dict[str, Any] = {
        "type": "object",
        "title": f"{view.name} in {scene.name}",
        "description": f"Schema for {view.name} view in {scene.name}",
        "properties": properties,
    }
    if required:
        schema["required"] = required
    return schema


def generate_view_components(knack_schema: KnackSchema) -> Dict[str, Dict[str, Any]]:
    schemas = {}
    for scene in knack_schema.application.scenes:
        for view in scene.views:
            if not view.source_object_key:
                continue
            view_schema = generate_view_schema(view, scene, knack_schema)
            if view_schema is not None:
                schemas[view_schema_name(scene, view)] = view_schema
    return schemas
