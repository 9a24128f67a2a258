"""The ``/api`` sub-application.

Feedback routes are not served here. The mount only carries the health
endpoint, with the same error translation registered as on the root app.
"""

from fastapi import FastAPI

from feedback_api.config import settings

app_common = FastAPI(
    title=f"{settings.APP_NAME} - Common",
    description="Health monitoring for the feedback backend.",
    version=f"{settings.DTAP}-{settings.IMAGE_TAG}",
    root_path="/api",
)

# Mounted apps keep their own handler table; the root app's does not apply
from feedback_api.api.common.exception_handlers import register_exception_handlers  # noqa: E402

register_exception_handlers(app_common)

# GET /api/health
from feedback_api.api.common.routers import health  # noqa: E402

app_common.include_router(health.router)

__all__ = ["app_common"]
