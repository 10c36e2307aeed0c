"""Field lookup across a view's source object and its directly connected object."""
from typing import Optional
from knack_openapi.schemas.knack import KnackField, KnackFieldType, KnackObject, KnackSchema
from knack_openapi.generators.openapi_gen.utils import find_object


def _find_own_field(field_key: str, obj: KnackObject) -> Optional[KnackField]:
    for field in obj.fields:
        if field.key == field_key:
            return field
    return None


def _first_connection_target(obj: KnackObject) -> Optional[str]:
    for field in obj.fields:
        if field.type == KnackFieldType.CONNECTION.value and field.relationship and field.relationship.object:
            return field.relationship.object
    return None


def resolve_field(field_key: str, source_object: KnackObject, knack_schema: KnackSchema) -> Optional[KnackField]:
    """
    Resolve a field key surfaced by a view.

    Looks in the source object first, then follows the source object's first
    connection field one hop to the connected object. Deeper chains are not followed.
    """
    field = _find_own_field(field_key, source_object)
    if field is not None:
        return field

    connected_object = find_object(_first_connection_target(source_object), knack_schema)
    if connected_object is None:
        return None
    return _find_own_field(field_key, connected_object)
