"""Tests for route and modal registries."""

import pytest

from openverb import (
    ModalEntry,
    Route,
    RouteRegistry,
    SearchResult,
    SessionUser,
    build_dynamic_routes,
    find_route_by_intent,
    get_routes_for_role,
    route_registry,
)
from openverb.registries import ModalRegistry


class TestRouteRegistry:
    """Test all / find / search"""

    @pytest.fixture
    def registry(self, test_routes):
        return route_registry(test_routes)

    def test_all(self, registry):
        assert len(registry.all()) == 3

    def test_find_by_id(self, registry):
        route = registry.find("accounting")

        assert route is not None
        assert route.title == "Accounting"

    def test_find_unknown(self, registry):
        assert registry.find("nonexistent") is None

    def test_search_by_title(self, registry):
        results = registry.search("accounting")

        assert [r.id for r in results] == ["accounting"]

    def test_search_by_tag(self, registry):
        results = registry.search("billing")

        assert [r.id for r in results] == ["accounting"]

    def test_search_case_insensitive(self, registry):
        assert [r.id for r in registry.search("ACCOUNTING")] == ["accounting"]

    def test_search_substring(self, registry):
        assert [r.id for r in registry.search("cent")] == ["help"]

    def test_search_no_matches(self, registry):
        assert registry.search("nonexistent") == []


class TestFindRouteByIntent:
    def test_title_keyword(self, test_routes):
        route = find_route_by_intent(test_routes, "accounting")
        assert route.id == "accounting"

    def test_tag(self, test_routes):
        route = find_route_by_intent(test_routes, "invoices")
        assert route.id == "accounting"

    def test_case_insensitive(self, test_routes):
        route = find_route_by_intent(test_routes, "DASHBOARD")
        assert route.id == "dashboard"

    def test_first_match_wins(self, test_routes):
        # "o" appears in several titles/tags; the first route wins
        assert find_route_by_intent(test_routes, "o").id == "dashboard"

    def test_no_match(self, test_routes):
        assert find_route_by_intent(test_routes, "nonexistent") is None


class TestRoutesForRole:
    role_access = {
        "admin": ["dashboard", "accounting", "help"],
        "viewer": ["dashboard", "help"],
    }

    def test_admin_sees_all(self, test_routes):
        assert len(get_routes_for_role(test_routes, "admin", self.role_access)) == 3

    def test_viewer_limited(self, test_routes):
        routes = get_routes_for_role(test_routes, "viewer", self.role_access)
        assert [r.id for r in routes] == ["dashboard", "help"]

    def test_unknown_role_empty(self, test_routes):
        assert get_routes_for_role(test_routes, "unknown", self.role_access) == []

    def test_single_route_by_role(self):
        accounting = Route(
            id="accounting",
            title="Accounting",
            path="/accounting",
            tags=["billing", "invoices"],
        )
        role_access = {"viewer": ["accounting"]}

        assert get_routes_for_role([accounting], "viewer", role_access) == [accounting]
        assert get_routes_for_role([accounting], "guest", role_access) == []


class TestDynamicRoutes:
    def test_build_dynamic_routes(self):
        routes = build_dynamic_routes(
            "projects",
            [{"id": "42", "name": "Apollo", "labels": ["space"]}, {"id": "7", "name": "Gemini"}],
        )

        assert routes[0] == Route(
            id="projects-42",
            title="Apollo",
            path="/projects/42",
            tags=["projects", "space"],
            requires_auth=True,
        )
        assert routes[1].tags == ["projects"]

    def test_dynamic_routes_searchable(self):
        routes = build_dynamic_routes("projects", [{"id": "42", "name": "Apollo"}])

        assert find_route_by_intent(routes, "apollo").id == "projects-42"


class TestRouteWireFormat:
    def test_to_dict_uses_camel_case(self, test_routes):
        data = test_routes[0].to_dict()

        assert data["requiresAuth"] is True
        assert Route.from_dict(data) == test_routes[0]

    def test_registry_iterates_in_order(self, test_routes):
        registry = RouteRegistry(test_routes)

        assert [r.id for r in registry] == ["dashboard", "accounting", "help"]
        assert len(registry) == 3

    def test_search_result_from_route(self, test_routes):
        result = SearchResult.from_route(test_routes[2])

        assert result.to_dict() == {
            "id": "help",
            "title": "Help Center",
            "snippet": "Navigate to Help Center",
            "url": "/help",
            "type": "page",
        }

    def test_session_user_camel_case(self):
        user = SessionUser.from_dict({"id": "u1", "displayName": "Ada", "role": "admin"})

        assert user.display_name == "Ada"
        assert user.to_dict() == {
            "id": "u1",
            "displayName": "Ada",
            "email": "",
            "role": "admin",
        }


class TestModalRegistry:
    def test_find(self):
        registry = ModalRegistry(
            [ModalEntry(id="confirm-delete", title="Confirm Delete", description="Confirm")]
        )

        assert registry.find("confirm-delete").title == "Confirm Delete"
        assert registry.find("missing") is None
        assert len(registry) == 1
