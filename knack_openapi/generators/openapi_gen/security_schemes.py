"""Security schemes and requirement helpers for the Knack API."""
from typing import Any, Dict, List

APP_ID_SCHEME = "apiKey"
REST_KEY_SCHEME = "apiKeyRest"
VIEW_AUTH_SCHEME = "viewAuth"


def generate_security_schemes() -> Dict[str, Dict[str, Any]]:
    return {
        APP_ID_SCHEME: {
            "type": "apiKey",
            "in": "header",
            "name": "X-Knack-Application-Id",
            "description": "API key for object-based operations. Required for all object-based endpoints.",
        },
        REST_KEY_SCHEME: {
            "type": "apiKey",
            "in": "header",
            "name": "X-Knack-REST-API-Key",
            "description": "REST API key for authenticated operations. Required along with the Application ID.",
        },
        VIEW_AUTH_SCHEME: {
            "type": "apiKey",
            "in": "header",
            "name": "Authorization",
            "description": (
                "Bearer token for view-based operations when accessing secure views. "
                "Format: 'Bearer {token}'"
            ),
        },
    }


def app_id_security() -> List[Dict[str, List[str]]]:
    return [{APP_ID_SCHEME: []}]


def object_record_security() -> List[Dict[str, List[str]]]:
    return [{APP_ID_SCHEME: [], REST_KEY_SCHEME: []}]


def authenticated_view_security() -> List[Dict[str, List[str]]]:
    return [{APP_ID_SCHEME: [], VIEW_AUTH_SCHEME: []}]
