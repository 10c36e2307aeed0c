"""Mapping of Knack field definitions to OpenAPI schema fragments."""
import copy
from typing import Any, Dict
from knack_openapi.schemas.knack import KnackField, KnackFieldType

PARAGRAPH_TEXT_MAX_LENGTH = 100000

# Fixed fragments for every type whose schema does not depend on the field's format.
_FIELD_TYPE_SCHEMAS: Dict[KnackFieldType, Dict[str, Any]] = {
    KnackFieldType.SHORT_TEXT: {"type": "string"},
    KnackFieldType.NAME: {"type": "string"},
    KnackFieldType.EMAIL: {"type": "string", "format": "email"},
    KnackFieldType.PASSWORD: {"type": "string"},
    KnackFieldType.PARAGRAPH_TEXT: {"type": "string", "maxLength": PARAGRAPH_TEXT_MAX_LENGTH},
    KnackFieldType.PHONE: {"type": "string"},
    KnackFieldType.ADDRESS: {"type": "string"},
    KnackFieldType.NUMBER: {"type": "number"},
    KnackFieldType.AUTO_INCREMENT: {"type": "integer", "readOnly": True},
    KnackFieldType.CURRENCY: {"type": "number", "format": "float"},
    KnackFieldType.DATE_TIME: {"type": "string", "format": "date-time"},
    KnackFieldType.BOOLEAN: {"type": "boolean"},
    KnackFieldType.FILE: {"type": "string", "format": "uri", "description": "URL to file"},
    KnackFieldType.IMAGE: {"type": "string", "format": "uri", "description": "URL to image"},
    KnackFieldType.SIGNATURE: {"type": "string", "format": "uri", "description": "URL to signature image"},
    KnackFieldType.USER_ROLES: {
        "type": "array",
        "items": {"type": "string"},
        "description": "List of user roles",
    },
    KnackFieldType.EQUATION: {"type": "number", "readOnly": True, "description": "Calculated field value"},
    KnackFieldType.TIMER: {"type": "number", "description": "Timer value in seconds"},
}


def _multiple_choice_schema(field: KnackField) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "string"}
    fmt = field.format if isinstance(field.format, dict) else {}
    if fmt.get("options"):
        schema["enum"] = list(fmt["options"])
        if fmt.get("default"):
            schema["default"] = fmt["default"]
    return schema


def _connection_schema(field: KnackField) -> Dict[str, Any]:
    if field.relationship is None:
        return {"type": "string"}
    return {
        "type": "string",
        "description": f"Reference to a {field.name} object",
        "format": "uuid",
    }


def map_field_type(field: KnackField) -> Dict[str, Any]:
    """Map a Knack field to an OpenAPI schema fragment.

    Never fails: a type outside KnackFieldType becomes a plain string schema whose
    description names the unknown type. Required-ness is not part of the fragment;
    the owning schema lists required field keys.
    """
    schema: Dict[str, Any] = {
        "title": field.name,
        "description": f"{field.name} field",
    }

    try:
        field_type = KnackFieldType(field.type)
    except ValueError:
        schema.update({"type": "string", "description": f"Unknown field type: {field.type}"})
        return schema

    if field_type == KnackFieldType.MULTIPLE_CHOICE:
        schema.update(_multiple_choice_schema(field))
    elif field_type == KnackFieldType.CONNECTION:
        schema.update(_connection_schema(field))
    else:
        schema.update(copy.deepcopy(_FIELD_TYPE_SCHEMAS[field_type]))
    return schema


def should_include_field(field: KnackField) -> bool:
    """Whether a field belongs in generated schemas."""
    return True
