"""Utility functions for OpenAPI generation."""
import re
from typing import Optional
from knack_openapi.schemas.knack import KnackObject, KnackScene, KnackSchema


def format_name_for_operation_id(name: str) -> str:
    """Strip everything except ASCII letters and digits from a name."""
    return re.sub(r'[^a-zA-Z0-9]', '', name or "")


def build_operation_id(entity_key: str, verb: str, name: str) -> str:
    """Build an operation id: ``<entity key>_<verb><sanitized name>``."""
    return f"{entity_key}_{verb}{format_name_for_operation_id(name)}"


def schema_ref(schema_name: str) -> str:
    return f"#/components/schemas/{schema_name}"


def parameter_ref(parameter_name: str) -> str:
    return f"#/components/parameters/{parameter_name}"


def find_object(object_key: Optional[str], knack_schema: KnackSchema) -> Optional[KnackObject]:
    """Find an object by key, or None."""
    if not object_key:
        return None
    for obj in knack_schema.application.objects:
        if obj.key == object_key:
            return obj
    return None


def find_scene_by_slug(slug: Optional[str], knack_schema: KnackSchema) -> Optional[KnackScene]:
    """Find a scene by slug, or None."""
    if not slug:
        return None
    for scene in knack_schema.application.scenes:
        if scene.slug == slug:
            return scene
    return None
