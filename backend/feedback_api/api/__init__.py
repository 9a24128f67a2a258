"""API configuration for the feedback application.

Version-independent endpoints are served by a FastAPI sub-application
mounted at /api (see feedback_api.api.common_app):
- Health monitoring (see feedback_api.api.common.routers.health)

Every (sub-)application registers the same exception translator
(see feedback_api.api.common.exception_handlers).
"""

__all__ = []
