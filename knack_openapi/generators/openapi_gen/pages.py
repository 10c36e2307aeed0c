"""Parent/child page helpers."""
from typing import Optional
from knack_openapi.schemas.knack import KnackSchema, KnackScene, KnackView
from knack_openapi.generators.openapi_gen.utils import find_scene_by_slug


def is_child_page(scene: KnackScene) -> bool:
    """A scene with a parent displays data scoped to one parent record."""
    return bool(scene.parent)


def is_view_in_child_page(view: KnackView, scene: KnackScene) -> bool:
    return is_child_page(scene)


def scene_object_key(scene: KnackScene) -> Optional[str]:
    """Source object of the first view in the scene that has one."""
    for view in scene.views:
        if view.source_object_key:
            return view.source_object_key
    return None


def parent_param_name(scene: KnackScene, knack_schema: KnackSchema) -> Optional[str]:
    """
    Name of the query parameter carrying the parent record ID, or None for
    top-level scenes. Falls back to the raw parent reference when the parent
    scene cannot be resolved.
    """
    if not is_child_page(scene):
        return None

    parent_scene = find_scene_by_slug(scene.parent, knack_schema)
    if parent_scene is not None and scene_object_key(parent_scene):
        return f"{parent_scene.slug}_id"

    return f"{scene.parent}_id"
