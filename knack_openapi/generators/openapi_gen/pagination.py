"""Reusable pagination parameters and response schemas."""
from typing import Any, Dict, List
from knack_openapi.generators.openapi_gen.utils import parameter_ref

PAGE_PARAM = "page"
ROWS_PER_PAGE_PARAM = "rowsPerPage"
SORT_FIELD_PARAM = "sortField"
SORT_ORDER_PARAM = "sortOrder"

DEFAULT_ROWS_PER_PAGE = 25
MAX_ROWS_PER_PAGE = 1000


def generate_pagination_parameters() -> Dict[str, Dict[str, Any]]:
    return {
        PAGE_PARAM: {
            "name": "page",
            "in": "query",
            "description": "Page number to retrieve",
            "schema": {"type": "integer", "default": 1, "minimum": 1},
            "required": False,
        },
        ROWS_PER_PAGE_PARAM: {
            "name": "rows_per_page",
            "in": "query",
            "description": "Number of records per page",
            "schema": {
                "type": "integer",
                "default": DEFAULT_ROWS_PER_PAGE,
                "minimum": 1,
                "maximum": MAX_ROWS_PER_PAGE,
            },
            "required": False,
        },
        SORT_FIELD_PARAM: {
            "name": "sort_field",
            "in": "query",
            "description": "Field to sort by",
            "schema": {"type": "string"},
            "required": False,
        },
        SORT_ORDER_PARAM: {
            "name": "sort_order",
            "in": "query",
            "description": "Sort direction",
            "schema": {"type": "string", "enum": ["asc", "desc"], "default": "asc"},
            "required": False,
        },
    }


def _page_count_properties() -> Dict[str, Any]:
    return {
        "total_pages": {"type": "integer", "description": "Total number of pages available"},
        "total_records": {"type": "integer", "description": "Total number of records across all pages"},
        "current_page": {"type": "integer", "description": "Current page number"},
    }


def generate_pagination_schemas() -> Dict[str, Dict[str, Any]]:
    return {
        "PaginationMeta": {
            "type": "object",
            "description": "Pagination metadata for list responses",
            "properties": _page_count_properties(),
        },
        "PaginatedResponse": {
            "type": "object",
            "description": "Standard response format for paginated results",
            "properties": {
                "records": {
                    "type": "array",
                    "description": "Array of records for the current page",
                    "items": {"type": "object", "description": "Record data (varies by endpoint)"},
                },
                **_page_count_properties(),
            },
        },
    }


def generate_pagination_components() -> Dict[str, Dict[str, Any]]:
    return {
        "parameters": generate_pagination_parameters(),
        "schemas": generate_pagination_schemas(),
    }


def paginated_response_schema(item_schema_ref: str) -> Dict[str, Any]:
    """Wrap an item schema reference in the paginated list envelope."""
    return {
        "type": "object",
        "properties": {
            "records": {"type": "array", "items": {"$ref": item_schema_ref}},
            "total_pages": {"type": "integer"},
            "total_records": {"type": "integer"},
            "current_page": {"type": "integer"},
        },
    }


def pagination_parameter_refs(*names: str) -> List[Dict[str, str]]:
    return [{"$ref": parameter_ref(name)} for name in names]
