"""Pydantic models for the Knack application schema document.

Only the parts of the document that drive generation are typed; everything else is
kept as extra data. Models are frozen: the document is read once and never mutated.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class KnackFieldType(str, Enum):
    SHORT_TEXT = "short_text"
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"
    AUTO_INCREMENT = "auto_increment"
    PARAGRAPH_TEXT = "paragraph_text"
    NUMBER = "number"
    CURRENCY = "currency"
    DATE_TIME = "date_time"
    MULTIPLE_CHOICE = "multiple_choice"
    CONNECTION = "connection"
    ADDRESS = "address"
    USER_ROLES = "user_roles"
    FILE = "file"
    IMAGE = "image"
    BOOLEAN = "boolean"
    PHONE = "phone"
    SIGNATURE = "signature"
    EQUATION = "equation"
    TIMER = "timer"


class KnackViewType(str, Enum):
    TABLE = "table"
    FORM = "form"
    DETAILS = "details"
    SEARCH = "search"
    LOGIN = "login"
    REGISTER = "register"
    PASSWORD_RESET = "password_reset"
    LANDING = "landing"
    MENU = "menu"
    RICH_TEXT = "rich_text"


class KnackModel(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)


class KnackRelationship(KnackModel):
    object: Optional[str] = None
    has: Optional[str] = None
    belongs_to: Optional[str] = None


class KnackField(KnackModel):
    key: str
    name: str = ""
    type: str = ""
    required: Optional[bool] = False
    unique: Optional[bool] = False
    format: Optional[Any] = None
    relationship: Optional[KnackRelationship] = None


class KnackInflections(KnackModel):
    singular: Optional[str] = None
    plural: Optional[str] = None


class KnackObject(KnackModel):
    key: str
    name: str = ""
    type: Optional[str] = None
    inflections: Optional[KnackInflections] = None
    fields: List[KnackField] = Field(default_factory=list)
    connections: Optional[Any] = None

    @property
    def singular(self) -> str:
        if self.inflections and self.inflections.singular:
            return self.inflections.singular
        return self.name

    @property
    def plural(self) -> str:
        if self.inflections and self.inflections.plural:
            return self.inflections.plural
        return self.name


class KnackFieldRef(KnackModel):
    key: Optional[str] = None


class KnackColumnField(KnackModel):
    """One field entry inside a details view column group."""
    key: Optional[str] = None
    name: Optional[str] = None


class KnackColumnGroup(KnackModel):
    # Each entry is either a single field or a list of fields.
    columns: Optional[List[Union[KnackColumnField, List[Optional[KnackColumnField]], None]]] = None


class KnackViewColumn(KnackModel):
    type: Optional[str] = None
    field: Optional[KnackFieldRef] = None
    header: Optional[str] = None
    groups: Optional[List[KnackColumnGroup]] = None


class KnackViewInput(KnackModel):
    key: Optional[str] = None
    type: Optional[str] = None
    field: Optional[KnackFieldRef] = None
    label: Optional[str] = None


class KnackViewField(KnackModel):
    """A details-view field entry (``key``) or a search filter entry (``field``)."""
    key: Optional[str] = None
    name: Optional[str] = None
    field: Optional[Any] = None


class KnackViewGroupColumn(KnackModel):
    inputs: Optional[List[KnackViewInput]] = None
    fields: Optional[List[KnackViewField]] = None


class KnackViewGroup(KnackModel):
    columns: Optional[List[KnackViewGroupColumn]] = None


class KnackViewResults(KnackModel):
    type: Optional[str] = None
    columns: Optional[List[KnackViewColumn]] = None


class KnackViewSource(KnackModel):
    object: Optional[str] = None
    authenticated_user: Optional[bool] = None
    connection_key: Optional[str] = None
    relationship_type: Optional[str] = None


class KnackView(KnackModel):
    key: str
    name: str = ""
    type: str = ""
    title: Optional[str] = None
    description: Optional[str] = None
    action: Optional[str] = None
    source: Optional[KnackViewSource] = None
    columns: Optional[List[KnackViewColumn]] = None
    groups: Optional[List[KnackViewGroup]] = None
    inputs: Optional[List[KnackViewInput]] = None
    results: Optional[KnackViewResults] = None
    allowed_profiles: Optional[List[Any]] = None
    limit_profile_access: Optional[bool] = None

    @property
    def source_object_key(self) -> Optional[str]:
        return self.source.object if self.source else None


class KnackScene(KnackModel):
    key: str
    name: str = ""
    slug: str = ""
    parent: Optional[str] = None
    type: Optional[str] = None
    views: List[KnackView] = Field(default_factory=list)
    authenticated: Optional[bool] = None
    allowed_profiles: Optional[List[Any]] = None
    limit_profile_access: Optional[bool] = None


class KnackApplication(KnackModel):
    name: str = ""
    description: Optional[str] = None
    id: Optional[str] = None
    slug: Optional[str] = None
    home_scene: Optional[Dict[str, Any]] = None
    objects: List[KnackObject] = Field(default_factory=list)
    scenes: List[KnackScene] = Field(default_factory=list)


class KnackSchema(KnackModel):
    application: KnackApplication
    api_domain: Optional[str] = None
    api_subdomain: Optional[str] = None
