"""
Unit tests for outbound email bodies.

Run: pytest tests/unit/test_email_templates.py -v
"""

from datetime import date

from config.settings import settings
from utils import email_templates
from utils.email_templates import (
    offer_email,
    onboarding_email,
    reference_request_email,
    rejection_email,
)


class TestEmailBodies:

    def test_rejection_escapes_generated_text(self):
        email = rejection_email("Nurse", "Acme", "Dear Ola,\n<b>Thanks</b>")
        assert email.subject == "Update on your application for Nurse"
        assert "&lt;b&gt;Thanks&lt;/b&gt;" in email.html
        assert "Dear Ola,<br>" in email.html

    def test_reference_request_contains_form_link(self):
        email = reference_request_email(
            "Per Hansen", "Kari Nordmann", "Nurse", "Acme", "https://app.example/reference/r1"
        )
        assert email.subject == "Reference request for Kari Nordmann"
        assert 'href="https://app.example/reference/r1"' in email.html
        assert "Per Hansen" in email.html

    def test_offer_with_and_without_salary(self):
        with_salary = offer_email("Kari", "Nurse", "Acme", date(2026, 5, 1), "https://x/offers/1", "520 000 NOK")
        without_salary = offer_email("Kari", "Nurse", "Acme", date(2026, 5, 1), "https://x/offers/1")
        assert "2026-05-01" in with_salary.html
        assert "520 000 NOK" in with_salary.html
        assert "Salary" not in without_salary.html

    def test_onboarding(self):
        email = onboarding_email("Acme", "Nurse", "Welcome aboard")
        assert email.subject == "Welcome to Acme!"
        assert "Welcome aboard" in email.html


class TestLinks:

    def test_links_use_app_url(self, monkeypatch):
        monkeypatch.setattr(settings, "APP_URL", "https://jobs.example/")
        assert email_templates.offer_url("o1") == "https://jobs.example/offers/o1"
        assert email_templates.reference_form_url("r1") == "https://jobs.example/reference/r1"
