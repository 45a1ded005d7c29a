"""Tests for the admin dashboard API"""

import logging

import pytest

logger = logging.getLogger(__name__)

ADMIN_ROUTES = [
    ("get", "/api/admin/registrations"),
    ("delete", "/api/admin/registrations/1"),
    ("get", "/api/admin/contacts"),
    ("delete", "/api/admin/contacts/1"),
    ("patch", "/api/admin/contacts/1/read"),
    ("get", "/api/admin/stats"),
]


class TestAdminGuard:
    @pytest.mark.parametrize("method,path", ADMIN_ROUTES)
    def test_requires_session(self, client, method, path):
        response = getattr(client, method)(path)

        assert response.status_code == 401
        assert response.json()["message"] == "Bu əməliyyat üçün giriş etməlisiniz"

    def test_guard_runs_before_delete(self, client, registration_payload):
        """An anonymous delete must not touch the table"""
        created = client.post("/api/register", json=registration_payload).json()

        response = client.delete(f"/api/admin/registrations/{created['id']}")

        assert response.status_code == 401
        client.post(
            "/api/auth/register", json={"username": "checker", "password": "pa55word"}
        )
        assert len(client.get("/api/admin/registrations").json()) == 1

    @pytest.mark.parametrize("method", ["get", "post", "delete"])
    def test_unknown_admin_path_requires_session(self, client, method):
        response = getattr(client, method)("/api/admin/anything-else")

        assert response.status_code == 401
        assert response.json()["message"] == "Bu əməliyyat üçün giriş etməlisiniz"

    def test_unknown_admin_path_for_admin_is_not_found(self, admin_client):
        response = admin_client.get("/api/admin/anything-else")

        assert response.status_code == 404
        assert response.json()["path"] == "/api/admin/anything-else"


class TestAdminRegistrations:
    def test_list_newest_first(self, admin_client, registration_payload):
        for i in range(3):
            registration_payload["email"] = f"guest{i}@example.com"
            assert admin_client.post("/api/register", json=registration_payload).status_code == 201

        rows = admin_client.get("/api/admin/registrations").json()

        assert [r["email"] for r in rows] == [
            "guest2@example.com",
            "guest1@example.com",
            "guest0@example.com",
        ]

    def test_delete(self, admin_client, registration_payload):
        created = admin_client.post("/api/register", json=registration_payload).json()

        response = admin_client.delete(f"/api/admin/registrations/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Qeydiyyat silindi"}
        assert admin_client.get("/api/admin/registrations").json() == []

    def test_delete_missing_leaves_table_unchanged(self, admin_client, registration_payload):
        admin_client.post("/api/register", json=registration_payload)

        response = admin_client.delete("/api/admin/registrations/999999")

        assert response.status_code == 404
        assert response.json()["message"] == "Qeydiyyat tapılmadı"
        assert len(admin_client.get("/api/admin/registrations").json()) == 1

    def test_non_numeric_id(self, admin_client):
        response = admin_client.delete("/api/admin/registrations/abc")
        assert response.status_code == 400


class TestAdminContacts:
    @pytest.fixture
    def contact_id(self, admin_client, contact_payload):
        return admin_client.post("/api/contact", json=contact_payload).json()["id"]

    def test_mark_read_twice(self, admin_client, contact_id):
        first = admin_client.patch(f"/api/admin/contacts/{contact_id}/read")
        second = admin_client.patch(f"/api/admin/contacts/{contact_id}/read")

        assert first.status_code == 200
        assert second.status_code == 200
        assert first.json()["isRead"] is True
        assert second.json()["isRead"] is True

    def test_mark_read_missing(self, admin_client):
        response = admin_client.patch("/api/admin/contacts/31337/read")

        assert response.status_code == 404
        assert response.json()["message"] == "Əlaqə mesajı tapılmadı"

    def test_delete(self, admin_client, contact_id):
        response = admin_client.delete(f"/api/admin/contacts/{contact_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Əlaqə mesajı silindi"}
        assert admin_client.get("/api/admin/contacts").json() == []

    def test_delete_missing(self, admin_client):
        assert admin_client.delete("/api/admin/contacts/31337").status_code == 404


class TestAdminStats:
    def test_empty(self, admin_client):
        response = admin_client.get("/api/admin/stats")

        assert response.status_code == 200
        assert response.json() == {
            "totalRegistrations": 0,
            "totalContacts": 0,
            "unreadContacts": 0,
            "occupations": {},
        }

    def test_counts(self, admin_client, registration_payload, contact_payload):
        for i, occupation in enumerate(["student", "student", "engineer", ""]):
            registration_payload["email"] = f"s{i}@example.com"
            registration_payload["occupation"] = occupation
            admin_client.post("/api/register", json=registration_payload)
        for _ in range(2):
            contact_id = admin_client.post("/api/contact", json=contact_payload).json()["id"]
        admin_client.patch(f"/api/admin/contacts/{contact_id}/read")

        stats = admin_client.get("/api/admin/stats").json()

        assert stats["totalRegistrations"] == 4
        assert stats["totalContacts"] == 2
        assert stats["unreadContacts"] == 1
        assert stats["occupations"] == {"student": 2, "engineer": 1}
