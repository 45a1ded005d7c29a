"""Tests for RegistrationService"""

import pytest

from tedx_ndu.errors import ConflictError, NotFoundError, ValidationError
from tedx_ndu.models.schemas import RegistrationCreate


@pytest.fixture
def registration_data(registration_payload):
    return RegistrationCreate.model_validate(registration_payload)


class TestCreateRegistration:
    def test_creates_row(self, registration_service, registration_data):
        registration = registration_service.create_registration(registration_data)

        assert registration.id is not None
        assert registration.first_name == "Aysel"
        assert registration.email == "aysel@example.com"
        assert registration.topics == "technology,education"
        assert registration.created_at is not None

    def test_optional_fields_stored_as_null(self, registration_service, registration_payload):
        registration_payload.pop("topics")
        registration_payload["occupation"] = ""
        data = RegistrationCreate.model_validate(registration_payload)

        registration = registration_service.create_registration(data)

        assert registration.topics is None
        assert registration.occupation is None

    @pytest.mark.parametrize("field", ["firstName", "lastName", "email", "phone"])
    def test_missing_required_field(self, registration_service, registration_payload, field):
        registration_payload.pop(field)
        data = RegistrationCreate.model_validate(registration_payload)

        with pytest.raises(ValidationError) as exc_info:
            registration_service.create_registration(data)
        assert exc_info.value.message == "All required fields must be provided"

    def test_terms_must_be_accepted(self, registration_service, registration_payload):
        registration_payload["terms"] = False
        data = RegistrationCreate.model_validate(registration_payload)

        with pytest.raises(ValidationError):
            registration_service.create_registration(data)

    def test_duplicate_email(self, registration_service, registration_data):
        registration_service.create_registration(registration_data)

        with pytest.raises(ConflictError) as exc_info:
            registration_service.create_registration(registration_data)
        assert exc_info.value.message == "This email is already registered"
        assert len(registration_service.list_registrations()) == 1

    def test_duplicate_email_caught_by_unique_index(
        self, registration_service, registration_data, monkeypatch
    ):
        """A concurrent insert that slips past the lookup still maps to a conflict"""
        registration_service.create_registration(registration_data)
        monkeypatch.setattr(
            registration_service, "get_registration_by_email", lambda email: None
        )

        with pytest.raises(ConflictError):
            registration_service.create_registration(registration_data)
        assert len(registration_service.list_registrations()) == 1


class TestListAndDelete:
    def test_list_newest_first(self, registration_service, registration_payload):
        for i in range(3):
            registration_payload["email"] = f"person{i}@example.com"
            registration_service.create_registration(
                RegistrationCreate.model_validate(registration_payload)
            )

        emails = [r.email for r in registration_service.list_registrations()]
        assert emails == [
            "person2@example.com",
            "person1@example.com",
            "person0@example.com",
        ]

    def test_delete(self, registration_service, registration_data):
        registration = registration_service.create_registration(registration_data)

        registration_service.delete_registration(registration.id)

        assert registration_service.list_registrations() == []

    def test_delete_missing(self, registration_service):
        with pytest.raises(NotFoundError) as exc_info:
            registration_service.delete_registration(999999)
        assert exc_info.value.message == "Qeydiyyat tapılmadı"
