"""
Tests for CandidateService.

Run: pytest tests/services/test_candidate_service.py -v
"""

import pytest

from services.candidate_service import CandidateService
from utils.exceptions import NotFoundError, UpstreamServiceError, ValidationError


@pytest.fixture
def service(db, reasoning):
    return CandidateService(db, reasoning)


class TestRegistration:

    def test_register_normalizes_email(self, service):
        candidate = service.register_candidate(" Ola Nordmann ", " Ola@Example.NO ")
        assert candidate.name == "Ola Nordmann"
        assert candidate.email == "ola@example.no"

    def test_duplicate_email(self, service, candidate):
        with pytest.raises(ValidationError, match="already exists"):
            service.register_candidate("Kari N.", candidate.email)

    @pytest.mark.parametrize("name,email", [("", "a@b.no"), ("Ola", "ola")])
    def test_invalid(self, service, name, email):
        with pytest.raises(ValidationError):
            service.register_candidate(name, email)


class TestProfile:

    def test_update_profile(self, service, candidate):
        updated = service.update_profile(candidate.id, {"phone": "+47 900 00 000", "skills": "Gerica"})
        assert updated.phone == "+47 900 00 000"
        assert updated.skills == "Gerica"

    def test_cannot_update_email(self, service, candidate):
        with pytest.raises(ValidationError):
            service.update_profile(candidate.id, {"email": "new@example.no"})

    def test_unknown_candidate(self, service):
        with pytest.raises(NotFoundError):
            service.get_candidate("missing")


class TestUploadCV:

    def test_upload_detects_language(self, service, candidate, reasoning):
        reasoning.language = "English"
        updated = service.upload_cv(candidate.id, "Six years of home care.", "https://files/cv.pdf")
        assert updated.language == "English"
        assert updated.cv_url == "https://files/cv.pdf"

    def test_detection_failure_keeps_old_cv(self, service, db, candidate, reasoning):
        reasoning.fail_on = "detect_language"
        with pytest.raises(UpstreamServiceError):
            service.upload_cv(candidate.id, "New CV")
        db.refresh(candidate)
        assert candidate.cv_text == "6 år i hjemmetjenesten."
