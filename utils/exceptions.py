"""
Error taxonomy for the hiring pipeline.

Every error carries a stable ``kind`` and the HTTP status the API layer
renders it with. Messages are short and safe to show to end users.
"""


class PipelineError(Exception):
    """Base class for all expected pipeline failures."""

    kind = "pipeline_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class NotFoundError(PipelineError):
    """A referenced application, job, candidate, offer or reference is missing."""

    kind = "not_found"
    status_code = 404


class ValidationError(PipelineError):
    """Missing fields, bad values, or an action against an incompatible status."""

    kind = "validation_error"
    status_code = 400


class DuplicateApplicationError(ValidationError):
    """The candidate already applied to this job."""

    kind = "duplicate_application"
    status_code = 409


class ConflictError(PipelineError):
    """The application changed between read and write (stale version)."""

    kind = "conflict"
    status_code = 409


class UpstreamServiceError(PipelineError):
    """The reasoning or notification service failed or returned malformed data."""

    kind = "upstream_error"
    status_code = 502


class PersistenceError(PipelineError):
    """A database write failed."""

    kind = "persistence_error"
    status_code = 500
