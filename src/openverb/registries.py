"""
Registry helpers for routes and modals.

These are conveniences over host-supplied collections; the real registry
lives in the host app. Matching is case-insensitive substring on the title
or any tag.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .types import ModalEntry, Route

logger = logging.getLogger(__name__)


class RouteRegistry:
    """Read-only, queryable view over a list of routes"""

    def __init__(self, routes: Iterable[Route]):
        self._routes: List[Route] = list(routes)

    def all(self) -> List[Route]:
        return list(self._routes)

    def find(self, route_id: str) -> Optional[Route]:
        """Exact id match"""
        for route in self._routes:
            if route.id == route_id:
                return route
        return None

    def search(self, query: str) -> List[Route]:
        return [r for r in self._routes if r.matches(query)]

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self):
        return iter(self._routes)


class ModalRegistry:
    """Read-only view over the modals a host can open"""

    def __init__(self, modals: Iterable[ModalEntry]):
        self._modals: List[ModalEntry] = list(modals)

    def all(self) -> List[ModalEntry]:
        return list(self._modals)

    def find(self, modal_id: str) -> Optional[ModalEntry]:
        for modal in self._modals:
            if modal.id == modal_id:
                return modal
        return None

    def __len__(self) -> int:
        return len(self._modals)


def route_registry(routes: Iterable[Route]) -> RouteRegistry:
    return RouteRegistry(routes)


def find_route_by_intent(routes: Iterable[Route], query: str) -> Optional[Route]:
    """Find the first route whose title or tags match the user's intent"""
    for route in routes:
        if route.matches(query):
            return route
    return None


def get_routes_for_role(
    routes: Iterable[Route], role: str, role_access: Dict[str, Sequence[str]]
) -> List[Route]:
    """
    Filter routes by user role.

    Args:
        routes: Candidate routes
        role: Role name
        role_access: role -> list of allowed route ids

    Returns:
        Routes the role may see, in route order. Unknown roles get [].
    """
    allowed = role_access.get(role)
    if not allowed:
        logger.debug(f"No route access defined for role {role!r}")
        return []
    allowed_ids = set(allowed)
    return [r for r in routes if r.id in allowed_ids]


def build_dynamic_routes(prefix: str, items: Iterable[Dict]) -> List[Route]:
    """
    Generate routes from app data.

    Each item needs "id" and "name" and may carry "labels". Routes get id
    "<prefix>-<id>", path "/<prefix>/<id>" and require auth.
    """
    return [
        Route(
            id=f"{prefix}-{item['id']}",
            title=item["name"],
            path=f"/{prefix}/{item['id']}",
            tags=[prefix, *item.get("labels", [])],
            requires_auth=True,
        )
        for item in items
    ]
