"""
Tests for CompanyService and JobService.

Run: pytest tests/services/test_job_service.py -v
"""

import pytest

from services.job_service import CompanyService, JobService
from utils.exceptions import NotFoundError, UpstreamServiceError, ValidationError


@pytest.fixture
def companies(db):
    return CompanyService(db)


@pytest.fixture
def jobs(db, reasoning):
    return JobService(db, reasoning)


class TestCompanyApproval:

    def test_new_company_awaits_approval(self, companies):
        company = companies.register_company("Fjord Bygg AS", "post@fjordbygg.no")
        assert not company.approved
        assert [c.id for c in companies.list_companies(pending_only=True)] == [company.id]

    def test_approve(self, companies):
        company = companies.register_company("Fjord Bygg AS", "post@fjordbygg.no")
        assert companies.approve_company(company.id).approved
        assert companies.list_companies(pending_only=True) == []

    def test_reject_deletes(self, companies):
        company = companies.register_company("Fjord Bygg AS", "post@fjordbygg.no")
        companies.reject_company(company.id)
        with pytest.raises(NotFoundError):
            companies.get_company(company.id)

    def test_cannot_reject_approved(self, companies, company):
        with pytest.raises(ValidationError):
            companies.reject_company(company.id)


class TestJobs:

    def test_create_requires_approved_company(self, companies, jobs):
        company = companies.register_company("Fjord Bygg AS", "post@fjordbygg.no")
        with pytest.raises(ValidationError, match="not been approved"):
            jobs.create_job(company.id, "Tømrer")

    @pytest.mark.parametrize("kwargs", [
        {"title": " "},
        {"title": "Tømrer", "percentage": 0},
        {"title": "Tømrer", "camera_required": "always"},
        {"title": "Tømrer", "status": "closed"},
    ])
    def test_create_validation(self, jobs, company, kwargs):
        with pytest.raises(ValidationError):
            jobs.create_job(company.id, **kwargs)

    def test_list_defaults_to_published(self, jobs, company):
        draft = jobs.create_job(company.id, "Tømrer")
        published = jobs.create_job(company.id, "Elektriker", status="published", industry="bygg")

        assert [j.id for j in jobs.list_jobs(company_id=company.id)] == [published.id]
        assert [j.id for j in jobs.list_jobs(company_id=company.id, status="draft")] == [draft.id]
        assert jobs.list_jobs(company_id=company.id, industry="helse") == []

    def test_closed_is_final(self, jobs, company):
        job = jobs.create_job(company.id, "Tømrer", status="published")
        assert jobs.change_status(job.id, "closed").status == "closed"
        with pytest.raises(ValidationError):
            jobs.change_status(job.id, "published")


class TestGenerateDescription:

    def test_uses_company_name(self, jobs, company, reasoning):
        text = jobs.generate_description(
            title=" Helsefagarbeider ",
            industry="helse-og-omsorg",
            percentage=80,
            location="Bergen",
            requirements="Autorisasjon",
            company_id=company.id,
        )

        assert text == reasoning.job_description
        assert reasoning.job_description_args["title"] == "Helsefagarbeider"
        assert reasoning.job_description_args["company_name"] == company.name

    def test_nothing_is_saved(self, jobs, company):
        jobs.generate_description("Tømrer", "bygg", 100, "Oslo", company_id=company.id)
        assert jobs.list_jobs(company_id=company.id, status=None) == []

    @pytest.mark.parametrize("kwargs", [
        {"title": " ", "industry": "bygg", "percentage": 100, "location": "Oslo"},
        {"title": "Tømrer", "industry": "", "percentage": 100, "location": "Oslo"},
        {"title": "Tømrer", "industry": "bygg", "percentage": 0, "location": "Oslo"},
        {"title": "Tømrer", "industry": "bygg", "percentage": 100, "location": ""},
    ])
    def test_required_fields(self, jobs, reasoning, kwargs):
        with pytest.raises(ValidationError):
            jobs.generate_description(**kwargs)
        assert reasoning.calls == []

    def test_unknown_company(self, jobs):
        with pytest.raises(NotFoundError):
            jobs.generate_description("Tømrer", "bygg", 100, "Oslo", company_id="missing")

    def test_generation_failure(self, jobs, reasoning):
        reasoning.fail_on = "generate_job_description"
        with pytest.raises(UpstreamServiceError):
            jobs.generate_description("Tømrer", "bygg", 100, "Oslo")
