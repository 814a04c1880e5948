"""
Shared types for the OpenVerb standard library.

Wire payloads use camelCase keys; the dataclasses use snake_case
attributes and convert at the boundary with to_dict()/from_dict().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

TOAST_VARIANTS = ("info", "success", "warning", "error")


@dataclass(frozen=True)
class Route:
    """A page the agent may navigate to. Owned by the host app."""

    id: str
    title: str
    path: str
    tags: List[str] = field(default_factory=list)
    requires_auth: bool = False

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or any tag"""
        q = query.lower()
        return q in self.title.lower() or any(q in tag.lower() for tag in self.tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "path": self.path,
            "tags": list(self.tags),
            "requiresAuth": self.requires_auth,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Route":
        return cls(
            id=data["id"],
            title=data["title"],
            path=data["path"],
            tags=list(data.get("tags", [])),
            requires_auth=bool(data.get("requiresAuth", False)),
        )


@dataclass(frozen=True)
class ModalEntry:
    id: str
    title: str
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "description": self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModalEntry":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description", ""),
        )


@dataclass
class SearchResult:
    id: str
    title: str
    snippet: str
    url: str
    type: str = "page"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "snippet": self.snippet,
            "url": self.url,
            "type": self.type,
        }

    @classmethod
    def from_route(cls, route: Route) -> "SearchResult":
        """Build a page result pointing at a route"""
        return cls(
            id=route.id,
            title=route.title,
            snippet=f"Navigate to {route.title}",
            url=route.path,
            type="page",
        )


@dataclass
class SessionUser:
    id: str
    display_name: str
    email: str
    role: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "email": self.email,
            "role": self.role,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionUser":
        return cls(
            id=data["id"],
            display_name=data.get("displayName", ""),
            email=data.get("email", ""),
            role=data.get("role", ""),
        )


@dataclass
class FormField:
    name: str
    type: str = "text"
    label: str = ""
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "label": self.label or self.name,
            "required": self.required,
        }


@dataclass
class FormEntry:
    id: str
    title: str
    fields: List[FormField] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass
class ToastOptions:
    """
    Options passed to the host's toast callback.

    Attributes:
        message: Text to display
        variant: One of "info", "success", "warning", "error"
        duration: Milliseconds before auto-dismiss (None = host default)
    """

    message: str
    variant: str = "info"
    duration: Optional[int] = None

    def __post_init__(self):
        if self.variant not in TOAST_VARIANTS:
            raise ValueError(f"Invalid toast variant: {self.variant}")

    @classmethod
    def from_input(cls, payload: Dict[str, Any]) -> "ToastOptions":
        return cls(
            message=payload.get("message", ""),
            variant=payload.get("variant") or "info",
            duration=payload.get("duration"),
        )
