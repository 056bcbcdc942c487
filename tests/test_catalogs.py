"""
Tests for the catalog endpoints: knowledge-base categories, request
sources and service-request types.
"""

import pytest

from conftest import PREFIX, auth

CATEGORIES = f"{PREFIX}/knowledge-base/categories"
SOURCES = f"{PREFIX}/settings/sources"
TYPES = f"{PREFIX}/service-requests/types"


# Knowledge-base categories


def test_list_categories(client):
    response = client.get(CATEGORIES, headers=auth("nobody-token"))
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Catégories récupérées avec succès"
    assert [c["name"] for c in body["data"]] == ["Réseau", "VPN"]


def test_get_category(client):
    response = client.get(f"{CATEGORIES}/2", headers=auth("nobody-token"))
    assert response.status_code == 200
    assert response.json()["data"]["parent_id"] == 1


def test_get_category_not_found(client):
    response = client.get(f"{CATEGORIES}/99", headers=auth("nobody-token"))
    assert response.status_code == 404
    assert response.json()["message"] == "Catégorie introuvable"


def test_create_category_records_actor(client, services):
    """The authenticated caller is passed as created_by."""
    response = client.post(
        CATEGORIES,
        json={"name": "Messagerie", "parent_id": 1},
        headers=auth("viewer-token"),
    )
    assert response.status_code == 201
    assert response.json()["message"] == "Catégorie créée avec succès"
    name, (request, created_by) = services.knowledge_categories.calls[0]
    assert (name, request.name, created_by) == ("create", "Messagerie", 2)


def test_create_category_invalid_parent(client, services):
    response = client.post(
        CATEGORIES,
        json={"name": "Messagerie", "parent_id": 0},
        headers=auth("viewer-token"),
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Données invalides"
    assert services.knowledge_categories.calls == []


def test_update_category(client, services):
    response = client.put(f"{CATEGORIES}/1", json={"name": "Réseaux"}, headers=auth("admin-token"))
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Réseaux"
    name, (category_id, _, updated_by) = services.knowledge_categories.calls[0]
    assert (name, category_id, updated_by) == ("update", 1, 1)


def test_update_category_rejected(client, services):
    services.knowledge_categories.errors["update"] = ValueError("Une catégorie ne peut pas être son propre parent")
    response = client.put(f"{CATEGORIES}/1", json={"parent_id": 1}, headers=auth("admin-token"))
    assert response.status_code == 400
    assert response.json()["message"] == "Une catégorie ne peut pas être son propre parent"


def test_delete_category(client):
    response = client.delete(f"{CATEGORIES}/2", headers=auth("admin-token"))
    assert response.status_code == 200
    assert response.json()["data"] is None


def test_delete_unknown_category(client):
    """A failed category delete is reported as not found."""
    response = client.delete(f"{CATEGORIES}/99", headers=auth("admin-token"))
    assert response.status_code == 404
    assert response.json()["message"] == "Catégorie introuvable"


# Request sources


def test_list_sources(client):
    response = client.get(SOURCES, headers=auth("nobody-token"))
    assert response.status_code == 200
    assert response.json()["message"] == "Sources récupérées avec succès"


def test_get_source_not_found(client):
    response = client.get(f"{SOURCES}/5", headers=auth("nobody-token"))
    assert response.status_code == 404
    assert response.json()["message"] == "Source introuvable"


def test_create_source(client, services):
    response = client.post(
        SOURCES,
        json={"name": "Téléphone", "code": "phone", "is_enabled": True},
        headers=auth("admin-token"),
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Source créée avec succès"
    assert body["data"] == {
        "id": 2,
        "name": "Téléphone",
        "code": "phone",
        "description": None,
        "is_enabled": True,
        "created_at": None,
        "updated_at": None,
    }


def test_create_source_missing_code(client, services):
    response = client.post(SOURCES, json={"name": "Téléphone"}, headers=auth("admin-token"))
    assert response.status_code == 400
    assert services.request_sources.calls == []


def test_update_source(client):
    response = client.put(f"{SOURCES}/1", json={"is_enabled": False}, headers=auth("admin-token"))
    assert response.status_code == 200
    assert response.json()["message"] == "Source mise à jour avec succès"
    assert response.json()["data"]["is_enabled"] is False


def test_delete_source_rejected(client):
    """A rejected source delete keeps the service message."""
    response = client.delete(f"{SOURCES}/1", headers=auth("admin-token"))
    assert response.status_code == 400
    assert response.json()["message"] == "Cette source est utilisée par des tickets"


# Service-request types


def test_list_types(client):
    response = client.get(TYPES, headers=auth("nobody-token"))
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Types récupérés avec succès"
    assert body["data"][0]["default_deadline"] == 48


@pytest.mark.parametrize("path", ["types", "type"])
def test_get_type(client, path):
    """The singular path is an alias of the plural one."""
    response = client.get(f"{PREFIX}/service-requests/{path}/1", headers=auth("nobody-token"))
    assert response.status_code == 200
    assert response.json()["message"] == "Type récupéré avec succès"


def test_create_type(client, services):
    response = client.post(
        TYPES,
        json={"name": "Accès", "default_deadline": 24},
        headers=auth("admin-token"),
    )
    assert response.status_code == 201
    assert response.json()["message"] == "Type créé avec succès"
    assert services.service_request_types.calls[0][1][1] == 1


def test_create_type_invalid_deadline(client, services):
    response = client.post(TYPES, json={"name": "Accès", "default_deadline": 0}, headers=auth("admin-token"))
    assert response.status_code == 400
    assert services.service_request_types.calls == []


def test_update_type(client):
    response = client.put(f"{TYPES}/1", json={"is_active": False}, headers=auth("admin-token"))
    assert response.status_code == 200
    assert response.json()["message"] == "Type mis à jour avec succès"


def test_delete_type(client):
    response = client.delete(f"{PREFIX}/service-requests/type/1", headers=auth("admin-token"))
    assert response.status_code == 200
    assert response.json()["message"] == "Type supprimé avec succès"


def test_delete_unknown_type(client, services):
    """DELETE on the singular path with an unknown id is a 404."""
    response = client.delete(f"{PREFIX}/service-requests/type/999", headers=auth("admin-token"))
    assert response.status_code == 404
    assert response.json()["message"] == "Type introuvable"
    assert services.service_request_types.calls == [("delete", (999,))]


def test_type_invalid_id(client, services):
    response = client.delete(f"{TYPES}/abc", headers=auth("admin-token"))
    assert response.status_code == 400
    assert response.json()["message"] == "ID invalide"
    assert services.service_request_types.calls == []
