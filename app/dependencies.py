from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.content_service import ContentService


def get_content_service(db: AsyncSession = Depends(get_db)) -> ContentService:
    """
    Build a ``ContentService`` bound to the request's session.

    Usage in a router::

        @router.get("/contents")
        async def list_contents(service: ContentService = Depends(get_content_service)):
            ...

    Tests that override ``get_db`` get a service on the test session
    without overriding this dependency as well.
    """
    return ContentService(db)
