"""Paths for views: one operation per view with a resolvable source object."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from knack_openapi.schemas.knack import KnackObject, KnackSchema, KnackScene, KnackView, KnackViewType
from knack_openapi.generators.openapi_gen.components import generate_view_components, view_schema_name
from knack_openapi.generators.openapi_gen.pages import is_view_in_child_page, parent_param_name
from knack_openapi.generators.openapi_gen.pagination import (
    PAGE_PARAM,
    ROWS_PER_PAGE_PARAM,
    paginated_response_schema,
    pagination_parameter_refs,
)
from knack_openapi.generators.openapi_gen.security import ViewSecurity, classify_view
from knack_openapi.generators.openapi_gen.security_schemes import (
    app_id_security,
    authenticated_view_security,
)
from knack_openapi.generators.openapi_gen.utils import build_operation_id, find_object, schema_ref

log = logging.getLogger(__name__)

UPDATE_ACTION = "update"


@dataclass
class ViewContext:
    """Everything the operation builders need to know about one view."""
    view: KnackView
    scene: KnackScene
    source_object: KnackObject
    security: ViewSecurity
    item_ref: str
    parent_param: Optional[str]

    @property
    def is_child_page(self) -> bool:
        return self.parent_param is not None


def create_parent_id_parameter(parent_param: str, scene_name: str) -> Dict[str, Any]:
    return {
        "name": parent_param,
        "in": "query",
        "description": f"ID of the parent record for this {scene_name} view",
        "schema": {"type": "string"},
        "required": True,
    }


def _parent_parameters(ctx: ViewContext) -> list:
    if ctx.parent_param is None:
        return []
    return [create_parent_id_parameter(ctx.parent_param, ctx.scene.name)]


def _apply_view_security(operation: Dict[str, Any], security: ViewSecurity) -> Dict[str, Any]:
    """All views need the application ID; authenticated views also need a user token."""
    if security == ViewSecurity.AUTHENTICATED:
        operation["responses"]["401"] = {"description": "Unauthorized - Authentication required"}
        operation["security"] = authenticated_view_security()
    else:
        operation["security"] = app_id_security()
    return operation


def generate_view_get_operation(ctx: ViewContext) -> Dict[str, Any]:
    view, scene = ctx.view, ctx.scene
    is_details_view = view.type == KnackViewType.DETAILS.value

    if is_details_view:
        returns = "Returns a single record."
    elif ctx.is_child_page:
        returns = "Returns a list of records filtered by the parent ID."
    else:
        returns = "Returns a list of records."

    parameters = _parent_parameters(ctx)
    if not is_details_view:
        parameters.extend(pagination_parameter_refs(PAGE_PARAM, ROWS_PER_PAGE_PARAM))

    if is_details_view:
        response_schema = {"$ref": ctx.item_ref}
    else:
        response_schema = paginated_response_schema(ctx.item_ref)

    operation = {
        "summary": f"Access {view.name} records",
        "description": f"Retrieves records from {view.name} view in {scene.name}. {returns}",
        "operationId": build_operation_id(view.key, "access", view.name),
        "tags": [ctx.source_object.name],
        "parameters": parameters,
        "responses": {
            "200": {
                "description": f"Records from {view.name}",
                "content": {"application/json": {"schema": response_schema}},
            },
        },
    }
    return _apply_view_security(operation, ctx.security)


def _form_operation(ctx: ViewContext, verb: str, summary: str, description: str,
                    body_description: str, status: str, status_description: str,
                    id_description: str) -> Dict[str, Any]:
    view = ctx.view
    operation = {
        "summary": summary,
        "description": description,
        "operationId": build_operation_id(view.key, verb, view.name),
        "tags": [ctx.source_object.name],
        "parameters": _parent_parameters(ctx),
        "requestBody": {
            "description": body_description,
            "required": True,
            "content": {"application/json": {"schema": {"$ref": ctx.item_ref}}},
        },
        "responses": {
            status: {
                "description": status_description,
                "content": {
                    "application/json": {
                        "schema": {
                            "type": "object",
                            "properties": {
                                "id": {"type": "string", "description": id_description},
                            },
                        },
                    },
                },
            },
            "400": {"description": "Invalid input"},
        },
    }
    return _apply_view_security(operation, ctx.security)


def generate_view_post_operation(ctx: ViewContext) -> Dict[str, Any]:
    view, scene = ctx.view, ctx.scene
    return _form_operation(
        ctx,
        verb="submit",
        summary=f"Submit {view.name}",
        description=f"Submits data to {view.name} form in {scene.name}",
        body_description=f"Data to submit to {view.name}",
        status="201",
        status_description="Successfully submitted",
        id_description="ID of the created record",
    )


def generate_view_put_operation(ctx: ViewContext) -> Dict[str, Any]:
    view, scene = ctx.view, ctx.scene
    return _form_operation(
        ctx,
        verb="update",
        summary=f"Update {view.name}",
        description=f"Updates data through {view.name} form in {scene.name}",
        body_description=f"Data to update in {view.name}",
        status="200",
        status_description="Successfully updated",
        id_description="ID of the updated record",
    )


def generate_paths_for_view(
    view: KnackView,
    scene: KnackScene,
    knack_schema: KnackSchema,
    view_schemas: Dict[str, Any],
) -> Dict[str, Any]:
    """Generate the single records path for one view, or nothing if its source does not resolve."""
    source_object = find_object(view.source_object_key, knack_schema)
    if source_object is None:
        log.debug("View %s in scene %s has no resolvable source object; skipping", view.key, scene.key)
        return {}

    # Views that surface no resolvable fields fall back to the full object schema.
    schema_name = view_schema_name(scene, view)
    if schema_name not in view_schemas:
        schema_name = source_object.key

    ctx = ViewContext(
        view=view,
        scene=scene,
        source_object=source_object,
        security=classify_view(view, scene, knack_schema),
        item_ref=schema_ref(schema_name),
        parent_param=parent_param_name(scene, knack_schema) if is_view_in_child_page(view, scene) else None,
    )

    records_path = f"/scenes/{scene.key}/views/{view.key}/records"

    if view.type == KnackViewType.FORM.value:
        if view.action == UPDATE_ACTION:
            return {records_path: {"put": generate_view_put_operation(ctx)}}
        return {records_path: {"post": generate_view_post_operation(ctx)}}

    return {records_path: {"get": generate_view_get_operation(ctx)}}


def generate_view_paths(knack_schema: KnackSchema, view_schemas: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    if view_schemas is None:
        view_schemas = generate_view_components(knack_schema)

    paths: Dict[str, Any] = {}
    for scene in knack_schema.application.scenes:
        for view in scene.views:
            if not view.source_object_key:
                continue
            paths.update(generate_paths_for_view(view, scene, knack_schema, view_schemas))
    return paths
