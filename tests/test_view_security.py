"""Tests for the public/authenticated view classifier."""
import pytest
from knack_openapi.schemas.knack import KnackScene, KnackView
from knack_openapi.generators.openapi_gen.security import (
    ViewSecurity,
    check_parent_scenes_security,
    check_scene_security,
    check_view_security,
    classify_view,
    default_view_security,
)
from knack_openapi.generators.openapi_gen.utils import find_scene_by_slug


def make_view(view_type="table", name="Records", **kwargs) -> KnackView:
    return KnackView.model_validate({"key": "view_1", "name": name, "type": view_type, **kwargs})


def make_scene(name="Records Page", slug="records", **kwargs) -> KnackScene:
    return KnackScene.model_validate({"key": "scene_1", "name": name, "slug": slug, **kwargs})


class TestViewChecks:
    @pytest.mark.parametrize("view_type", ["login", "register", "password_reset"])
    def test_auth_flow_views_are_public(self, view_type):
        # Even with every authenticated marker set, auth-flow views stay reachable.
        view = make_view(
            view_type,
            name="Admin Profile",
            allowed_profiles=["profile_1"],
            limit_profile_access=True,
            source={"object": "object_1", "authenticated_user": True},
        )
        assert check_view_security(view) == ViewSecurity.PUBLIC

    def test_allowed_profiles(self):
        assert check_view_security(make_view(allowed_profiles=["profile_1"])) == ViewSecurity.AUTHENTICATED

    def test_empty_allowed_profiles_is_inconclusive(self):
        assert check_view_security(make_view(allowed_profiles=[])) is None

    def test_limit_profile_access(self):
        assert check_view_security(make_view(limit_profile_access=True)) == ViewSecurity.AUTHENTICATED

    def test_authenticated_user_source(self):
        view = make_view(source={"object": "object_1", "authenticated_user": True})
        assert check_view_security(view) == ViewSecurity.AUTHENTICATED

    @pytest.mark.parametrize("kwargs", [
        {"name": "My Account"},
        {"title": "Admin tools"},
        {"description": "Shows PRIVATE notes"},
        {"name": "Sales Dashboard"},
    ])
    def test_keywords_in_view_text(self, kwargs):
        params = {"name": "Records", **kwargs}
        assert check_view_security(make_view(**params)) == ViewSecurity.AUTHENTICATED

    def test_plain_view_is_inconclusive(self):
        assert check_view_security(make_view()) is None


class TestSceneChecks:
    def test_authenticated_scene(self):
        assert check_scene_security(make_scene(authenticated=True)) == ViewSecurity.AUTHENTICATED

    def test_authentication_scene_is_public(self):
        assert check_scene_security(make_scene(type="authentication")) == ViewSecurity.PUBLIC

    def test_authenticated_flag_wins_over_authentication_type(self):
        scene = make_scene(authenticated=True, type="authentication")
        assert check_scene_security(scene) == ViewSecurity.AUTHENTICATED

    def test_profiles_and_limit(self):
        assert check_scene_security(make_scene(allowed_profiles=["p"])) == ViewSecurity.AUTHENTICATED
        assert check_scene_security(make_scene(limit_profile_access=True)) == ViewSecurity.AUTHENTICATED

    def test_keyword_in_scene_name(self):
        assert check_scene_security(make_scene(name="Secure Area")) == ViewSecurity.AUTHENTICATED

    def test_plain_scene_is_inconclusive(self):
        assert check_scene_security(make_scene()) is None


class TestParentScenes:
    def test_authenticated_ancestor(self, make_schema):
        schema = make_schema(scenes=[
            {"key": "scene_1", "name": "Members", "slug": "members", "authenticated": True},
            {"key": "scene_2", "name": "Middle", "slug": "middle", "parent": "members"},
            {"key": "scene_3", "name": "Leaf", "slug": "leaf", "parent": "middle"},
        ])
        leaf = find_scene_by_slug("leaf", schema)
        assert check_parent_scenes_security(leaf, schema) == ViewSecurity.AUTHENTICATED

    def test_top_level_scene(self, make_schema):
        schema = make_schema(scenes=[{"key": "scene_1", "name": "Top", "slug": "top"}])
        assert check_parent_scenes_security(find_scene_by_slug("top", schema), schema) is None

    def test_unresolved_parent(self, make_schema):
        schema = make_schema(scenes=[{"key": "scene_1", "name": "Lost", "slug": "lost", "parent": "nowhere"}])
        assert check_parent_scenes_security(find_scene_by_slug("lost", schema), schema) is None

    def test_cyclic_parents_terminate(self, make_schema):
        schema = make_schema(scenes=[
            {"key": "scene_1", "name": "A", "slug": "a", "parent": "b"},
            {"key": "scene_2", "name": "B", "slug": "b", "parent": "a"},
        ])
        assert check_parent_scenes_security(find_scene_by_slug("a", schema), schema) is None

    def test_self_parent_terminates(self, make_schema):
        schema = make_schema(scenes=[{"key": "scene_1", "name": "Loop", "slug": "loop", "parent": "loop"}])
        assert check_parent_scenes_security(find_scene_by_slug("loop", schema), schema) is None


@pytest.mark.parametrize("view_type,expected", [
    ("landing", ViewSecurity.PUBLIC),
    ("menu", ViewSecurity.PUBLIC),
    ("search", ViewSecurity.PUBLIC),
    ("rich_text", ViewSecurity.PUBLIC),
    ("table", ViewSecurity.AUTHENTICATED),
    ("form", ViewSecurity.AUTHENTICATED),
    ("details", ViewSecurity.AUTHENTICATED),
    ("calendar", ViewSecurity.AUTHENTICATED),
])
def test_default_view_security(view_type, expected):
    assert default_view_security(make_view(view_type)) == expected


class TestClassifyView:
    def test_login_view_is_public_in_authenticated_scene(self, make_schema):
        schema = make_schema(scenes=[
            {"key": "scene_1", "name": "Members", "slug": "members", "authenticated": True,
             "views": [{"key": "view_1", "name": "Sign In", "type": "login"}]},
        ])
        scene = schema.application.scenes[0]
        assert classify_view(scene.views[0], scene, schema) == ViewSecurity.PUBLIC

    def test_authenticated_scene_protects_its_views(self, make_schema):
        schema = make_schema(scenes=[
            {"key": "scene_1", "name": "Members", "slug": "members", "authenticated": True,
             "views": [{"key": "view_1", "name": "News", "type": "rich_text"}]},
        ])
        scene = schema.application.scenes[0]
        assert classify_view(scene.views[0], scene, schema) == ViewSecurity.AUTHENTICATED

    def test_parent_tier_applies_before_default(self, make_schema):
        schema = make_schema(scenes=[
            {"key": "scene_1", "name": "Sign In", "slug": "sign-in", "type": "authentication"},
            {"key": "scene_2", "name": "Records", "slug": "records", "parent": "sign-in",
             "views": [{"key": "view_1", "name": "Records", "type": "table"}]},
        ])
        scene = find_scene_by_slug("records", schema)
        assert classify_view(scene.views[0], scene, schema) == ViewSecurity.PUBLIC

    def test_sample_views(self, sample_schema):
        verdicts = {
            view.key: classify_view(view, scene, sample_schema)
            for scene in sample_schema.application.scenes
            for view in scene.views
        }
        assert verdicts["view_7"] == ViewSecurity.PUBLIC
        assert verdicts["view_8"] == ViewSecurity.AUTHENTICATED
        assert verdicts["view_6"] == ViewSecurity.PUBLIC
        assert verdicts["view_1"] == ViewSecurity.AUTHENTICATED

    def test_classification_is_deterministic(self, sample_schema):
        scene = sample_schema.application.scenes[0]
        view = scene.views[0]
        assert classify_view(view, scene, sample_schema) == classify_view(view, scene, sample_schema)
