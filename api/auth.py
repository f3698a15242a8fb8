import hmac
import logging
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from config.settings import settings

logger = logging.getLogger(__name__)

# Define API Key security schemes for OpenAPI/Swagger
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)
admin_key_header = APIKeyHeader(name="X-Admin-Key", auto_error=False)


def _matches(provided: Optional[str], expected: str) -> bool:
    return provided is not None and hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def verify_api_key(api_key: Optional[str] = Security(api_key_header)) -> None:
    """
    Dependency to verify the API key from the X-API-Key header.

    When API_SECRET_KEY is not configured every request is accepted
    (local development).

    Raises:
        HTTPException: 401 if the key is missing or wrong
    """
    if not settings.API_SECRET_KEY:
        return

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    if not _matches(api_key, settings.API_SECRET_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )


async def verify_admin_key(admin_key: Optional[str] = Security(admin_key_header)) -> str:
    """
    Dependency for privileged routes (raw application updates, company approval).

    Admin routes are closed unless ADMIN_API_KEY is configured.

    Returns:
        Actor name recorded in the audit trail

    Raises:
        HTTPException: 403 if admin access is not configured or the key is wrong
    """
    if not settings.ADMIN_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access is not configured",
        )

    if not _matches(admin_key, settings.ADMIN_API_KEY):
        logger.warning("Rejected admin request with missing or invalid X-Admin-Key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin key",
        )

    return "admin"
