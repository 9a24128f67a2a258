"""Health monitoring endpoints"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_api.db.config import get_async_db_read_only
from feedback_api.schemas.health import HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


async def check_database_available(session: AsyncSession) -> str:
    """Check if database is available.

    Returns:
        str: "OK" if database is available, "NOK" otherwise
    """
    try:
        # SELECT 1 touches no table, it only proves the connection works
        await session.execute(text("SELECT 1"))
        return "OK"
    except Exception as exc:
        logger.warning(f"Database health check failed: {exc}")
        return "NOK"


@router.get(
    "/health",
    response_model=HealthStatus,
    summary="Health check on application (incl. database)",
    description="Health check endpoint to verify if application (incl. database) is available",
    operation_id="health",
    include_in_schema=False,
    responses={
        200: {
            "description": "Health check passed",
            "content": {"application/json": {"example": {"database_available": "OK"}}},
        },
        422: {
            "description": "Health check failed - database NOK",
            "content": {"application/json": {"example": {"database_available": "NOK"}}},
        },
    },
)
async def health(
    response: Response,
    session: AsyncSession = Depends(get_async_db_read_only),
) -> HealthStatus:
    """Health check endpoint to verify if application (incl. database) is available"""
    database_available = await check_database_available(session)

    if database_available == "NOK":
        response.status_code = status.HTTP_422_UNPROCESSABLE_CONTENT
    else:
        response.status_code = status.HTTP_200_OK

    return HealthStatus(database_available=database_available)
