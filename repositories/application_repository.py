"""
Application repository for the hiring pipeline aggregate.

All writes to an existing application go through `save_changes`, which is a
conditional UPDATE on the version that was read. A concurrent writer makes it
fail with ConflictError instead of silently overwriting.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from models.application import Application
from models.application_event import ApplicationEvent
from models.job import Job
from repositories.base_repository import BaseRepository
from utils.exceptions import ConflictError, PersistenceError

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository[Application]):
    """Repository for managing applications."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Application)

    def get_by_job_and_candidate(self, job_id: str, candidate_id: str) -> Optional[Application]:
        query = select(Application).where(
            Application.job_id == job_id,
            Application.candidate_id == candidate_id,
        )
        return self.db.exec(query).first()

    def list_applications(
        self,
        candidate_id: Optional[str] = None,
        job_id: Optional[str] = None,
        company_id: Optional[str] = None,
        status: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Application]:
        """
        List applications with optional filters.

        Ordered by score (highest first, unscored last), then newest first.

        Args:
            candidate_id: Only applications of this candidate
            job_id: Only applications for this job
            company_id: Only applications for jobs of this company
            status: Only applications in this status
            limit: Maximum number of results
            offset: Number of records to skip

        Returns:
            List of applications
        """
        query = select(Application)
        if company_id:
            query = query.join(Job, Job.id == Application.job_id).where(Job.company_id == company_id)
        if candidate_id:
            query = query.where(Application.candidate_id == candidate_id)
        if job_id:
            query = query.where(Application.job_id == job_id)
        if status:
            query = query.where(Application.status == status)

        query = (
            query.order_by(
                Application.score.is_(None),
                Application.score.desc(),
                Application.created_at.desc(),
            )
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.exec(query).all())

    def save_changes(
        self,
        application: Application,
        changes: Dict[str, Any],
        *,
        event: Optional[ApplicationEvent] = None,
        also_add: Iterable[Any] = (),
    ) -> Application:
        """
        Persist field changes on an application in one versioned write.

        The UPDATE only matches the row if its version still equals the
        version of `application`; the version is bumped on success. Entities
        in `also_add` and the audit `event` are committed in the same
        transaction.

        Args:
            application: Application as read at the start of the action
            changes: Column name -> new value
            event: Optional audit event to record
            also_add: Other new or modified entities to commit alongside

        Returns:
            The refreshed application

        Raises:
            ConflictError: If the application was modified concurrently
            PersistenceError: On database failure
        """
        expected_version = application.version
        values = dict(changes)
        values["version"] = expected_version + 1
        values["updated_at"] = datetime.utcnow()

        statement = (
            update(Application)
            .where(Application.id == application.id)
            .where(Application.version == expected_version)
            .values(**values)
        )

        try:
            for entity in also_add:
                self.db.add(entity)
            result = self.db.execute(statement)
            if result.rowcount == 0:
                self.db.rollback()
                logger.warning(
                    f"Version conflict on application {application.id} "
                    f"(expected version {expected_version})"
                )
                raise ConflictError(
                    "Application was modified by another request; reload and try again"
                )
            if event is not None:
                self.db.add(event)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to save application {application.id}: {e}") from e

        self.db.refresh(application)
        return application
