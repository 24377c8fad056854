"""
API dependencies.

Provides the ``RecordService`` to route handlers.  The repository is
opened once per application (see ``main.create_app``) and kept on
``app.state``; a lightweight service facade is built per request.
"""

from fastapi import Request

from organiks_api.app.services.record_service import RecordService
from organiks_api.app.store.repository import Repository


def get_repository(request: Request) -> Repository:
    return request.app.state.repository


def get_record_service(request: Request) -> RecordService:
    """Get a RecordService bound to the application's repository."""
    return RecordService(get_repository(request))
