"""
Tests for the job repository against an in-memory database.
"""

import pytest

from jobly.core.errors import NotFoundError, ValidationError
from jobly.schemas.job import JobCreateRequest, JobFilterCriteria


NEW_JOB = JobCreateRequest(
    title="dev",
    salary=100000,
    equity="0.5",
    company_handle="c1",
)


class TestCreate:
    def test_create_returns_generated_id(self, job_repo, seed):
        job = job_repo.create(NEW_JOB)

        assert isinstance(job.id, int)
        assert job.title == "dev"
        assert job.salary == 100000
        assert job.equity == "0.5"
        assert job.company_handle == "c1"

    def test_create_persists_row(self, job_repo, store, seed):
        job = job_repo.create(NEW_JOB)

        rows = store.execute(
            "SELECT title, salary, company_handle FROM jobs WHERE id = $1",
            [job.id],
        )
        assert rows == [{"title": "dev", "salary": 100000, "company_handle": "c1"}]

    def test_create_for_unknown_company(self, job_repo, seed):
        with pytest.raises(ValidationError):
            job_repo.create(NEW_JOB.model_copy(update={"company_handle": "nope"}))


class TestFindAll:
    def test_no_filter_ordered_by_title(self, job_repo, seed):
        jobs = job_repo.find_all()

        assert [j.title for j in jobs] == [
            "data analyst",
            "prompt engineer",
            "support lead",
            "technical designer",
        ]

    def test_title_filter_case_insensitive(self, job_repo, seed):
        jobs = job_repo.find_all(JobFilterCriteria(title="ENG"))
        assert [j.title for j in jobs] == ["prompt engineer"]

    def test_min_salary(self, job_repo, seed):
        jobs = job_repo.find_all(JobFilterCriteria(min_salary=110000))
        assert [j.title for j in jobs] == ["prompt engineer", "technical designer"]

    def test_has_equity_excludes_zero_and_null(self, job_repo, seed):
        jobs = job_repo.find_all(JobFilterCriteria(has_equity=True))
        assert [j.title for j in jobs] == ["prompt engineer", "technical designer"]

    def test_has_equity_false_returns_all(self, job_repo, seed):
        assert len(job_repo.find_all(JobFilterCriteria(has_equity=False))) == 4

    def test_zero_min_salary_excludes_null_salary(self, job_repo, seed):
        jobs = job_repo.find_all(JobFilterCriteria(min_salary=0))
        assert "support lead" not in [j.title for j in jobs]
        assert len(jobs) == 3

    def test_all_filters(self, job_repo, seed):
        jobs = job_repo.find_all(
            JobFilterCriteria(title="er", min_salary=115000, has_equity=True)
        )
        assert [j.title for j in jobs] == ["prompt engineer"]

    def test_no_match(self, job_repo, seed):
        assert job_repo.find_all(JobFilterCriteria(title="astronaut")) == []


class TestGet:
    def test_get(self, job_repo, seed):
        job_id = seed["prompt engineer"]

        job = job_repo.get(job_id)

        assert job.id == job_id
        assert job.title == "prompt engineer"
        assert job.equity == "0.55"

    def test_get_missing(self, job_repo, seed):
        with pytest.raises(NotFoundError):
            job_repo.get(0)


class TestUpdate:
    def test_update_single_field(self, job_repo, seed):
        created = job_repo.create(NEW_JOB)

        updated = job_repo.update(created.id, {"salary": 110000})

        assert updated.salary == 110000
        assert updated.model_dump(exclude={"salary"}) == created.model_dump(exclude={"salary"})

    def test_update_all_fields(self, job_repo, seed):
        created = job_repo.create(NEW_JOB)

        updated = job_repo.update(
            created.id,
            {"title": "software engineer", "salary": 120000, "equity": "0.6"},
        )

        assert updated.title == "software engineer"
        assert updated.salary == 120000
        assert updated.equity == "0.6"
        assert updated.company_handle == "c1"
        assert job_repo.get(created.id) == updated

    def test_update_to_null(self, job_repo, seed):
        created = job_repo.create(NEW_JOB)
        updated = job_repo.update(created.id, {"salary": None, "equity": None})
        assert updated.salary is None
        assert updated.equity is None

    def test_update_missing(self, job_repo, seed):
        with pytest.raises(NotFoundError):
            job_repo.update(0, {"title": "x"})

    def test_update_no_data(self, job_repo, seed):
        with pytest.raises(ValidationError):
            job_repo.update(seed["prompt engineer"], {})

    def test_update_immutable_field(self, job_repo, seed):
        with pytest.raises(ValidationError):
            job_repo.update(seed["prompt engineer"], {"companyHandle": "c2"})
        with pytest.raises(ValidationError):
            job_repo.update(seed["prompt engineer"], {"id": 99})


class TestRemove:
    def test_remove(self, job_repo, seed):
        created = job_repo.create(NEW_JOB)

        job_repo.remove(created.id)

        with pytest.raises(NotFoundError):
            job_repo.get(created.id)

    def test_remove_missing(self, job_repo, seed):
        with pytest.raises(NotFoundError):
            job_repo.remove(0)
