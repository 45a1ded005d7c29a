"""Tests for the public registration endpoints"""

import logging

import pytest

logger = logging.getLogger(__name__)


class TestEventRegistration:
    @pytest.mark.parametrize("path", ["/api/register", "/api/registration"])
    def test_register_success(self, client, registration_payload, path):
        response = client.post(path, json=registration_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["firstName"] == "Aysel"
        assert data["topics"] == "technology,education"
        assert "createdAt" in data

    def test_duplicate_email(self, client, registration_payload):
        first = client.post("/api/register", json=registration_payload)
        assert first.status_code == 201

        registration_payload["firstName"] = "Someone"
        second = client.post("/api/register", json=registration_payload)

        assert second.status_code == 400
        assert second.json()["message"] == "This email is already registered"

    def test_missing_fields(self, client, registration_payload):
        del registration_payload["phone"]

        response = client.post("/api/register", json=registration_payload)

        assert response.status_code == 400
        assert response.json()["message"] == "All required fields must be provided"

    def test_terms_not_accepted(self, client, registration_payload):
        registration_payload["terms"] = False

        response = client.post("/api/registration", json=registration_payload)

        assert response.status_code == 400

    def test_wrong_types_rejected(self, client, registration_payload):
        registration_payload["topics"] = {"not": "a list"}

        response = client.post("/api/register", json=registration_payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"

    def test_html_is_escaped(self, client, registration_payload):
        registration_payload["firstName"] = "<script>alert(1)</script>"

        response = client.post("/api/register", json=registration_payload)

        assert response.status_code == 201
        assert response.json()["firstName"] == "&lt;script&gt;alert(1)&lt;/script&gt;"

    def test_registration_visible_to_admin(self, admin_client, registration_payload):
        admin_client.post("/api/register", json=registration_payload)

        rows = admin_client.get("/api/admin/registrations").json()

        assert [r["email"] for r in rows] == ["aysel@example.com"]


class TestAccountViaRegister:
    def test_username_body_creates_admin(self, client):
        """A body carrying a username creates an admin account instead"""
        response = client.post(
            "/api/register", json={"username": "volunteer", "password": "pa55word"}
        )

        assert response.status_code == 201
        assert response.json()["username"] == "volunteer"
        assert "password" not in response.json()
        assert client.get("/api/admin/registrations").status_code == 200
