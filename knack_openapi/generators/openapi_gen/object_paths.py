"""CRUD paths for Knack objects."""
from typing import Any, Dict
from knack_openapi.schemas.knack import KnackObject, KnackSchema
from knack_openapi.generators.openapi_gen.pagination import (
    PAGE_PARAM,
    ROWS_PER_PAGE_PARAM,
    SORT_FIELD_PARAM,
    SORT_ORDER_PARAM,
    paginated_response_schema,
    pagination_parameter_refs,
)
from knack_openapi.generators.openapi_gen.security_schemes import (
    app_id_security,
    object_record_security,
)
from knack_openapi.generators.openapi_gen.utils import build_operation_id, schema_ref


def get_unauthorized_response() -> Dict[str, Any]:
    return {"description": "Unauthorized - Missing or invalid API key"}


def get_not_found_response() -> Dict[str, Any]:
    return {"description": "Record not found"}


def get_invalid_input_response() -> Dict[str, Any]:
    return {"description": "Invalid input"}


def _json_content(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"application/json": {"schema": schema}}


def _id_parameter(obj: KnackObject, action: str) -> Dict[str, Any]:
    return {
        "name": "id",
        "in": "path",
        "description": f"ID of the {obj.singular} to {action}",
        "schema": {"type": "string"},
        "required": True,
    }


def generate_structure_operation(obj: KnackObject) -> Dict[str, Any]:
    return {
        "summary": f"Get {obj.singular} Structure",
        "description": f"Retrieves the structure definition for {obj.singular}",
        "operationId": build_operation_id(obj.key, "getStructure", obj.name),
        "tags": [obj.name, "Builder"],
        "responses": {
            "200": {
                "description": f"The structure definition for {obj.singular}",
                "content": _json_content({"$ref": schema_ref(obj.key)}),
            },
            "401": get_unauthorized_response(),
        },
        "security": app_id_security(),
    }


def generate_list_operation(obj: KnackObject) -> Dict[str, Any]:
    return {
        "summary": f"List {obj.plural}",
        "description": f"Retrieves a list of {obj.plural}",
        "operationId": build_operation_id(obj.key, "listRecords", obj.name),
        "tags": [obj.name],
        "parameters": pagination_parameter_refs(
            PAGE_PARAM, ROWS_PER_PAGE_PARAM, SORT_FIELD_PARAM, SORT_ORDER_PARAM
        ),
        "responses": {
            "200": {
                "description": f"A list of {obj.plural}",
                "content": _json_content(paginated_response_schema(schema_ref(obj.key))),
            },
            "401": get_unauthorized_response(),
        },
        "security": object_record_security(),
    }


def generate_create_operation(obj: KnackObject) -> Dict[str, Any]:
    return {
        "summary": f"Create {obj.singular}",
        "description": f"Creates a new {obj.singular}",
        "operationId": build_operation_id(obj.key, "createRecord", obj.name),
        "tags": [obj.name],
        "requestBody": {
            "description": f"{obj.singular} to create",
            "required": True,
            "content": _json_content({"$ref": schema_ref(obj.key)}),
        },
        "responses": {
            "201": {
                "description": f"The created {obj.singular}",
                "content": _json_content({"$ref": schema_ref(obj.key)}),
            },
            "400": get_invalid_input_response(),
            "401": get_unauthorized_response(),
        },
        "security": object_record_security(),
    }


def generate_get_operation(obj: KnackObject) -> Dict[str, Any]:
    return {
        "summary": f"Get {obj.singular}",
        "description": f"Retrieves a specific {obj.singular} by ID",
        "operationId": build_operation_id(obj.key, "getRecord", obj.name),
        "tags": [obj.name],
        "parameters": [_id_parameter(obj, "retrieve")],
        "responses": {
            "200": {
                "description": f"The requested {obj.singular}",
                "content": _json_content({"$ref": schema_ref(obj.key)}),
            },
            "401": get_unauthorized_response(),
            "404": get_not_found_response(),
        },
        "security": object_record_security(),
    }


def generate_update_operation(obj: KnackObject) -> Dict[str, Any]:
    return {
        "summary": f"Update {obj.singular}",
        "description": f"Updates an existing {obj.singular}",
        "operationId": build_operation_id(obj.key, "updateRecord", obj.name),
        "tags": [obj.name],
        "parameters": [_id_parameter(obj, "update")],
        "requestBody": {
            "description": f"Updated {obj.singular} data",
            "required": True,
            "content": _json_content({"$ref": schema_ref(obj.key)}),
        },
        "responses": {
            "200": {
                "description": f"The updated {obj.singular}",
                "content": _json_content({"$ref": schema_ref(obj.key)}),
            },
            "400": get_invalid_input_response(),
            "401": get_unauthorized_response(),
            "404": get_not_found_response(),
        },
        "security": object_record_security(),
    }


def generate_delete_operation(obj: KnackObject) -> Dict[str, Any]:
    return {
        "summary": f"Delete {obj.singular}",
        "description": f"Deletes a {obj.singular}",
        "operationId": build_operation_id(obj.key, "deleteRecord", obj.name),
        "tags": [obj.name],
        "parameters": [_id_parameter(obj, "delete")],
        "responses": {
            "204": {"description": "Successfully deleted"},
            "401": get_unauthorized_response(),
            "404": get_not_found_response(),
        },
        "security": object_record_security(),
    }


def generate_paths_for_object(obj: KnackObject) -> Dict[str, Any]:
    """Generate the structure path and the record CRUD paths for one object."""
    base_path = f"/objects/{obj.key}"
    records_path = f"{base_path}/records"
    record_path = f"{records_path}/{{id}}"

    return {
        # GET /objects/{key} - object structure
        base_path: {
            "get": generate_structure_operation(obj),
        },
        # GET/POST /objects/{key}/records - list and create
        records_path: {
            "get": generate_list_operation(obj),
            "post": generate_create_operation(obj),
        },
        # GET/PUT/DELETE /objects/{key}/records/{id} - single record
        record_path: {
            "get": generate_get_operation(obj),
            "put": generate_update_operation(obj),
            "delete": generate_delete_operation(obj),
        },
    }


def generate_object_paths(knack_schema: KnackSchema) -> Dict[str, Any]:
    paths: Dict[str, Any] = {}
    for obj in knack_schema.application.objects:
        paths.update(generate_paths_for_object(obj))
    return paths
