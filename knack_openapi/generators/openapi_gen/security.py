"""
Classify views as public or authenticated.

Each tier is an ordered list of checks; a check returns a verdict or None when it
has nothing to say, and the first verdict wins. Tiers run in this order: the view
itself, its scene, the scene's ancestors, then a default based on the view type.
"""
from enum import Enum
from typing import Callable, List, Optional, Sequence, TypeVar
from knack_openapi.schemas.knack import KnackSchema, KnackScene, KnackView, KnackViewType
from knack_openapi.generators.openapi_gen.utils import find_scene_by_slug


class ViewSecurity(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


SECURITY_KEYWORDS = ("profile", "account", "dashboard", "admin", "secure", "private")

AUTH_FLOW_VIEW_TYPES = {
    KnackViewType.LOGIN.value,
    KnackViewType.REGISTER.value,
    KnackViewType.PASSWORD_RESET.value,
}

PUBLIC_BY_DEFAULT_VIEW_TYPES = {
    KnackViewType.LANDING.value,
    KnackViewType.MENU.value,
    KnackViewType.SEARCH.value,
    KnackViewType.RICH_TEXT.value,
}

AUTHENTICATION_SCENE_TYPE = "authentication"

T = TypeVar("T")
Check = Callable[[T], Optional[ViewSecurity]]


def _has_keyword(text: str) -> bool:
    text = text.lower()
    return any(keyword in text for keyword in SECURITY_KEYWORDS)


def _view_is_auth_flow(view: KnackView) -> Optional[ViewSecurity]:
    if view.type in AUTH_FLOW_VIEW_TYPES:
        return ViewSecurity.PUBLIC
    return None


def _view_has_allowed_profiles(view: KnackView) -> Optional[ViewSecurity]:
    if view.allowed_profiles:
        return ViewSecurity.AUTHENTICATED
    return None


def _view_limits_profile_access(view: KnackView) -> Optional[ViewSecurity]:
    if view.limit_profile_access is True:
        return ViewSecurity.AUTHENTICATED
    return None


def _view_source_is_authenticated_user(view: KnackView) -> Optional[ViewSecurity]:
    if view.source is not None and view.source.authenticated_user is True:
        return ViewSecurity.AUTHENTICATED
    return None


def _view_text_has_keyword(view: KnackView) -> Optional[ViewSecurity]:
    if _has_keyword(f"{view.name} {view.title or ''} {view.description or ''}"):
        return ViewSecurity.AUTHENTICATED
    return None


VIEW_CHECKS: List[Check[KnackView]] = [
    _view_is_auth_flow,
    _view_has_allowed_profiles,
    _view_limits_profile_access,
    _view_source_is_authenticated_user,
    _view_text_has_keyword,
]


def _scene_is_authenticated(scene: KnackScene) -> Optional[ViewSecurity]:
    if scene.authenticated is True:
        return ViewSecurity.AUTHENTICATED
    return None


def _scene_is_authentication_page(scene: KnackScene) -> Optional[ViewSecurity]:
    if scene.type == AUTHENTICATION_SCENE_TYPE:
        return ViewSecurity.PUBLIC
    return None


def _scene_has_allowed_profiles(scene: KnackScene) -> Optional[ViewSecurity]:
    if scene.allowed_profiles:
        return ViewSecurity.AUTHENTICATED
    return None


def _scene_limits_profile_access(scene: KnackScene) -> Optional[ViewSecurity]:
    if scene.limit_profile_access is True:
        return ViewSecurity.AUTHENTICATED
    return None


def _scene_name_has_keyword(scene: KnackScene) -> Optional[ViewSecurity]:
    if _has_keyword(scene.name):
        return ViewSecurity.AUTHENTICATED
    return None


SCENE_CHECKS: List[Check[KnackScene]] = [
    _scene_is_authenticated,
    _scene_is_authentication_page,
    _scene_has_allowed_profiles,
    _scene_limits_profile_access,
    _scene_name_has_keyword,
]


def first_verdict(checks: Sequence[Check[T]], subject: T) -> Optional[ViewSecurity]:
    for check in checks:
        verdict = check(subject)
        if verdict is not None:
            return verdict
    return None


def check_view_security(view: KnackView) -> Optional[ViewSecurity]:
    """View-level verdict, or None if inconclusive."""
    return first_verdict(VIEW_CHECKS, view)


def check_scene_security(scene: KnackScene) -> Optional[ViewSecurity]:
    """Scene-level verdict, or None if inconclusive."""
    return first_verdict(SCENE_CHECKS, scene)


def check_parent_scenes_security(scene: KnackScene, knack_schema: KnackSchema) -> Optional[ViewSecurity]:
    """
    Walk the parent chain applying the scene checks at each ancestor.

    Returns None when the chain ends, a parent slug does not resolve, or a parent
    slug repeats (malformed, cyclic input).
    """
    visited = set()
    current = scene
    while current.parent and current.parent not in visited:
        visited.add(current.parent)
        parent_scene = find_scene_by_slug(current.parent, knack_schema)
        if parent_scene is None:
            return None
        verdict = check_scene_security(parent_scene)
        if verdict is not None:
            return verdict
        current = parent_scene
    return None


def default_view_security(view: KnackView) -> ViewSecurity:
    if view.type in PUBLIC_BY_DEFAULT_VIEW_TYPES:
        return ViewSecurity.PUBLIC
    # Anything not known to be safe is protected.
    return ViewSecurity.AUTHENTICATED


def classify_view(view: KnackView, scene: KnackScene, knack_schema: KnackSchema) -> ViewSecurity:
    """Decide whether a view requires authentication."""
    tiers: List[Callable[[], Optional[ViewSecurity]]] = [
        lambda: check_view_security(view),
        lambda: check_scene_security(scene),
        lambda: check_parent_scenes_security(scene, knack_schema),
    ]
    for tier in tiers:
        verdict = tier()
        if verdict is not None:
            return verdict
    return default_view_security(view)
