"""Seed script to insert an approved Company, a published Job and a Candidate.

Creates a small deterministic dataset for local development: the company
`DEFAULT_COMPANY_ID` (approved), one published job and one candidate with a
CV, so an application can be submitted right away through the API.

Usage:
  python scripts/seed_db.py
  python scripts/seed_db.py --reset
"""
import argparse
import sys
from pathlib import Path

# When running the script directly (e.g. `python scripts/seed_db.py`),
# ensure the repository root is on `sys.path` so local package imports
# like `config.settings` resolve correctly without setting `PYTHONPATH`.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from sqlmodel import Session
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from models.application import Application
from models.candidate import Candidate
from models.company import Company
from models.job import Job, JobStatus, CameraRequired
from utils.database import get_engine, create_db_and_tables


DEFAULT_COMPANY_ID = "5b0f7d1e-3c5a-4f0e-9a51-2f4c8c1d7e10"
DEFAULT_JOB_ID = "a3e9c2b4-6d71-4a8f-8e0b-91f3d5c2b7a4"
DEFAULT_CANDIDATE_ID = "0c6dec64-5292-4293-859f-700411c57e6c"

CV_TEXT = (
    "Kari Nordmann - Helsefagarbeider\n\n"
    "ERFARING:\n"
    "- 6 år i hjemmetjenesten i Bergen kommune, ansvar for medisinhåndtering og dokumentasjon.\n"
    "- 2 år på sykehjem med nattevakter og primærkontaktansvar.\n\n"
    "UTDANNING:\n"
    "- Fagbrev helsefagarbeider, 2016\n\n"
    "FERDIGHETER:\n"
    "- Gerica, legemiddelhåndtering, førerkort klasse B"
)


def perform_reset(db: Session) -> int:
    """Delete seeded rows (and applications to the seeded job). Returns rows deleted."""
    deleted = 0
    statements = [
        delete(Application).where(Application.job_id == DEFAULT_JOB_ID),
        delete(Job).where(Job.id == DEFAULT_JOB_ID),
        delete(Candidate).where(Candidate.id == DEFAULT_CANDIDATE_ID),
        delete(Company).where(Company.id == DEFAULT_COMPANY_ID),
    ]
    for statement in statements:
        res = db.exec(statement)
        deleted += res.rowcount or 0

    db.commit()
    return deleted


def seed(dry_run: bool = False, reset_flag: bool = False) -> bool:
    if dry_run:
        print("DRY RUN: would seed the following:")
        print(f" Company: id={DEFAULT_COMPANY_ID}, name=Bergen Omsorg AS (approved)")
        print(f" Job: id={DEFAULT_JOB_ID}, title=Helsefagarbeider (published)")
        print(f" Candidate: id={DEFAULT_CANDIDATE_ID}, name=Kari Nordmann, cv_text=(len={len(CV_TEXT)})")
        return True

    engine = get_engine()
    # ensure tables exist for local/dev seeding
    create_db_and_tables(engine)

    try:
        with Session(engine) as db:
            if reset_flag:
                deleted = perform_reset(db)
                print(f"Reset removed {deleted} rows")

            if not db.get(Company, DEFAULT_COMPANY_ID):
                db.add(Company(
                    id=DEFAULT_COMPANY_ID,
                    name="Bergen Omsorg AS",
                    email="rekruttering@bergenomsorg.no",
                    website="https://bergenomsorg.no",
                    approved=True,
                ))

            if not db.get(Job, DEFAULT_JOB_ID):
                db.add(Job(
                    id=DEFAULT_JOB_ID,
                    company_id=DEFAULT_COMPANY_ID,
                    title="Helsefagarbeider",
                    description="Vi søker helsefagarbeider til hjemmetjenesten, 80 % fast stilling.",
                    industry="helse-og-omsorg",
                    percentage=80,
                    location="Bergen",
                    status=JobStatus.PUBLISHED.value,
                    camera_required=CameraRequired.OPTIONAL.value,
                ))

            if not db.get(Candidate, DEFAULT_CANDIDATE_ID):
                db.add(Candidate(
                    id=DEFAULT_CANDIDATE_ID,
                    name="Kari Nordmann",
                    email="kari.nordmann@example.no",
                    cv_text=CV_TEXT,
                    language="Norwegian",
                ))

            db.commit()

        print(f"Seeded company={DEFAULT_COMPANY_ID}, job={DEFAULT_JOB_ID}, candidate={DEFAULT_CANDIDATE_ID}")
        return True
    except SQLAlchemyError as exc:
        print(f"ERROR: seeding failed: {exc}", file=sys.stderr)
        return False


def _cli():
    parser = argparse.ArgumentParser(description="Seed the local database with an example company/job/candidate")
    parser.add_argument("--dry-run", action="store_true", help="Print actions without writing to DB")
    parser.add_argument("--reset", action="store_true", help="Remove existing seeded rows before seeding")
    args = parser.parse_args()

    ok = seed(dry_run=args.dry_run, reset_flag=args.reset)
    sys.exit(0 if ok else 2)


if __name__ == '__main__':
    _cli()
