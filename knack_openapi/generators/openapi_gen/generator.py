"""Assemble the OpenAPI document for a Knack application."""
from typing import Any, Dict, List, Optional
from knack_openapi.core.config import Settings, settings as default_settings
from knack_openapi.schemas.knack import KnackSchema
from knack_openapi.generators.openapi_gen.components import (
    generate_object_components,
    generate_view_components,
)
from knack_openapi.generators.openapi_gen.object_paths import generate_object_paths
from knack_openapi.generators.openapi_gen.pagination import generate_pagination_components
from knack_openapi.generators.openapi_gen.security_schemes import generate_security_schemes
from knack_openapi.generators.openapi_gen.view_paths import generate_view_paths

OPENAPI_VERSION = "3.1.0"


def build_server_url(knack_schema: KnackSchema, settings: Settings) -> str:
    subdomain = knack_schema.api_subdomain or settings.default_api_subdomain
    domain = knack_schema.api_domain or settings.default_api_domain
    return f"https://{subdomain}.{domain}/v1"


def build_tags(knack_schema: KnackSchema) -> List[Dict[str, str]]:
    tags = [{
        "name": "Objects",
        "description": "Object-based API endpoints with full access to data",
    }]
    for scene in knack_schema.application.scenes:
        tags.append({
            "name": f"View: {scene.name}",
            "description": f"Endpoints for {scene.name} views",
        })
    return tags


def build_openapi_spec(knack_schema: KnackSchema, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Build the complete OpenAPI 3.1 document.

    Object paths and view paths live under disjoint prefixes (``/objects`` and
    ``/scenes``), so they are merged without collision checks. The result contains
    nothing time-dependent: identical input yields an identical document.
    """
    settings = settings or default_settings
    app_name = knack_schema.application.name

    pagination = generate_pagination_components()
    view_schemas = generate_view_components(knack_schema)

    schemas: Dict[str, Any] = {}
    schemas.update(generate_object_components(knack_schema))
    schemas.update(view_schemas)
    schemas.update(pagination["schemas"])

    paths: Dict[str, Any] = {}
    paths.update(generate_object_paths(knack_schema))
    paths.update(generate_view_paths(knack_schema, view_schemas))

    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": f"{app_name} API",
            "description": f"OpenAPI specification for {app_name}",
            "version": settings.api_version,
        },
        "servers": [
            {"url": build_server_url(knack_schema, settings), "description": "Knack API Server"},
        ],
        "tags": build_tags(knack_schema),
        "paths": paths,
        "components": {
            "schemas": schemas,
            "parameters": pagination["parameters"],
            "securitySchemes": generate_security_schemes(),
        },
    }
