"""
Tests for the application shell: info endpoints, caller resolution, errors.
"""

import asyncio
import json

from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from starlette.requests import Request

from conftest import PREFIX, auth
from itsm_api import ServiceContainer, create_app
from itsm_api.api.error_handlers import request_validation_error_handler


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "ITSM API"
    assert data["endpoints"]["api"] == PREFIX


def test_health(client):
    """Test health check endpoint (no caller needed)."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_missing_token(client, services):
    """A protected route without Authorization is rejected before the handler."""
    response = client.get(f"{PREFIX}/filiales")
    assert response.status_code == 401
    body = response.json()
    assert body == {
        "success": False,
        "message": "Token d'authentification manquant",
        "data": None,
        "error": "Token d'authentification manquant",
    }
    assert services.filiales.calls == []


def test_malformed_token(client):
    """Only the 'Bearer <token>' scheme is accepted."""
    response = client.get(f"{PREFIX}/filiales", headers={"Authorization": "Token admin-token"})
    assert response.status_code == 401
    assert response.json()["message"] == "Format de token invalide. Attendu: Bearer <token>"


def test_unknown_token(client, services):
    """A token the resolver does not know is rejected."""
    response = client.get(f"{PREFIX}/time-entries", headers=auth("expired"))
    assert response.status_code == 401
    assert response.json()["message"] == "Token invalide ou expiré"
    assert services.caller_resolver.tokens == ["expired"]
    assert services.time_entries.calls == []


def test_actor_required_for_mutations(client, services):
    """A resolved caller without user id cannot record an action."""
    response = client.post(
        f"{PREFIX}/knowledge-base/categories",
        json={"name": "Matériel"},
        headers=auth("no-identity-token"),
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Utilisateur non authentifié"
    assert not services.knowledge_categories.called("create")


def test_service_api_error_passes_through(client, services):
    """An error already classified by a service keeps its status."""
    from itsm_api.errors import AuthorizationError

    services.knowledge_categories.errors["get_all"] = AuthorizationError("Accès refusé")
    response = client.get(f"{PREFIX}/knowledge-base/categories", headers=auth("admin-token"))
    assert response.status_code == 403
    assert response.json()["message"] == "Accès refusé"


def test_internal_error_hides_details(client, services):
    """Listing failures are 500 with a generic message and no details."""
    services.knowledge_categories.errors["get_all"] = RuntimeError("connection refused")
    response = client.get(f"{PREFIX}/knowledge-base/categories", headers=auth("admin-token"))
    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Erreur lors de la récupération des catégories"
    assert body["data"] is None
    assert "details" not in body
    assert "connection refused" not in response.text


def test_cors_headers(client):
    """CORS middleware answers preflight requests."""
    response = client.options(
        f"{PREFIX}/filiales/active",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers


def test_unknown_route_uses_envelope(client):
    """Routing failures keep the envelope shape."""
    response = client.get(f"{PREFIX}/nope")
    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Not Found",
        "data": None,
        "error": "Not Found",
    }


def test_wrong_method_uses_envelope(client, services):
    response = client.put(f"{PREFIX}/time-entries/1", json={}, headers=auth("admin-token"))
    assert response.status_code == 405
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Method Not Allowed"
    assert "GET" in response.headers["allow"]
    assert services.time_entries.calls == []


class ExplodingResolver:
    async def resolve(self, token):
        raise RuntimeError("resolver exploded")


def test_unexpected_exception_is_hidden(services, settings):
    """Anything outside the error taxonomy becomes a generic 500 envelope."""
    container = ServiceContainer(
        filiales=services.filiales,
        knowledge_categories=services.knowledge_categories,
        request_sources=services.request_sources,
        service_requests=services.service_requests,
        service_request_types=services.service_request_types,
        permissions=services.permissions,
        statistics=services.statistics,
        time_entries=services.time_entries,
        caller_resolver=ExplodingResolver(),
    )
    client = TestClient(create_app(container, settings), raise_server_exceptions=False)

    response = client.get(f"{PREFIX}/filiales", headers=auth("admin-token"))

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Erreur interne du serveur"
    assert body["data"] is None
    assert "details" not in body
    assert "resolver exploded" not in response.text
    assert services.filiales.calls == []


def test_request_validation_error_is_bad_request():
    request = Request({"type": "http", "method": "GET", "path": "/api/v1/stats", "headers": [], "query_string": b""})
    exc = RequestValidationError([{"loc": ("query", "period"), "msg": "invalid", "type": "value_error"}])

    response = asyncio.run(request_validation_error_handler(request, exc))

    assert response.status_code == 400
    body = json.loads(response.body)
    assert body["success"] is False
    assert body["message"] == "Données invalides"
    assert "period" in body["details"]
