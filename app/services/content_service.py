"""
Content service — business logic for the Content aggregate.

Design notes
------------
- ``category_name`` is unique case-insensitively.  Names are folded in
  Python (``fold_category_name``: NFC + ``casefold()``) into the
  ``category_key`` column, so the comparison behaves the same on every
  backend, including SQLite whose ``lower()`` only folds ASCII.
- The existence check is a fast path that yields a friendly error.  The
  unique constraint on ``categoryKey`` is the authoritative guard: an
  ``IntegrityError`` raised on flush (two writers racing past the check)
  is reported as the same ``ConflictError``.
- Writes run inside a SAVEPOINT, so a rejected write rolls back only
  itself and leaves the caller's earlier uncommitted work intact.
- ``slug`` is always recomputed from ``category_name``; callers cannot
  set it.
- Service methods flush but do not commit; the transaction boundary is
  owned by the ``get_db`` dependency in the router layer.
"""
import logging
from contextlib import asynccontextmanager
from typing import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, NotFoundError
from app.models import Content
from app.schemas import ContentCreate, ContentUpdate
from app.slug import fold_category_name, slugify

logger = logging.getLogger(__name__)

CATEGORY_EXISTS_MESSAGE = "Category name already exists"


class ContentService:
    """
    Stateless facade over the ``Contents`` table.

    *db* is the session every query goes through; *normalize* derives the
    slug from a category name and defaults to :func:`app.slug.slugify`.
    """

    def __init__(self, db: AsyncSession, normalize: Callable[[str], str] = slugify) -> None:
        self.db = db
        self.normalize = normalize

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _find_by_category_name(self, category_name: str) -> Content | None:
        q = (
            select(Content)
            .where(Content.category_key == fold_category_name(category_name))
            .limit(1)
        )
        result = await self.db.execute(q)
        return result.scalar_one_or_none()

    async def _get_or_404(self, content_id: int) -> Content:
        content = await self.db.get(Content, content_id)
        if content is None:
            logger.debug("Content id=%s not found", content_id)
            raise NotFoundError(f"Content with id {content_id} not found")
        return content

    @asynccontextmanager
    async def _savepoint(self, category_name: str):
        """
        Run the enclosed mutations inside a SAVEPOINT and flush them on exit.

        Mutations must happen inside the block: ``begin_nested()`` flushes
        pending changes before the SAVEPOINT is emitted.  A unique
        constraint violation rolls back to the SAVEPOINT only and is
        raised as ``ConflictError``.
        """
        try:
            async with self.db.begin_nested():
                yield
        except IntegrityError as exc:
            logger.warning("Unique constraint rejected category_name=%r: %s", category_name, exc.orig)
            raise ConflictError(CATEGORY_EXISTS_MESSAGE) from exc

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create(self, data: ContentCreate) -> Content:
        """
        Create a new content record.

        Raises ``ConflictError`` when another record already uses the
        same category name, ignoring case.
        """
        if await self._find_by_category_name(data.category_name) is not None:
            logger.warning("Create rejected, category_name=%r exists", data.category_name)
            raise ConflictError(CATEGORY_EXISTS_MESSAGE)

        content = Content(
            category_name=data.category_name,
            summarize_content=data.summarize_content,
            content=data.content,
            slug=self.normalize(data.category_name),
        )
        async with self._savepoint(data.category_name):
            self.db.add(content)
        # Load server-generated timestamps so callers never trigger lazy IO.
        await self.db.refresh(content)

        logger.info("Created content id=%s slug=%r", content.id, content.slug)
        return content

    async def update(self, content_id: int, data: ContentUpdate) -> Content:
        """
        Overwrite every editable field of *content_id* and re-derive its slug.

        Raises ``NotFoundError`` when the record does not exist and
        ``ConflictError`` when a *different* record already uses the new
        category name.  Matching the record being updated is not a
        conflict, so renaming only the letter case is allowed.
        """
        content = await self._get_or_404(content_id)

        existing = await self._find_by_category_name(data.category_name)
        if existing is not None and existing.id != content.id:
            logger.warning(
                "Update of id=%s rejected, category_name=%r belongs to id=%s",
                content_id, data.category_name, existing.id,
            )
            raise ConflictError(CATEGORY_EXISTS_MESSAGE)

        async with self._savepoint(data.category_name):
            content.category_name = data.category_name
            content.summarize_content = data.summarize_content
            content.content = data.content
            content.slug = self.normalize(data.category_name)
        await self.db.refresh(content)

        logger.info("Updated content id=%s slug=%r", content.id, content.slug)
        return content

    async def delete(self, content_id: int) -> bool:
        """Permanently remove *content_id*.  Returns True on success."""
        content = await self._get_or_404(content_id)
        await self.db.delete(content)
        await self.db.flush()
        logger.info("Deleted content id=%s", content_id)
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_all(self) -> list[Content]:
        """Return every content record ordered by id."""
        result = await self.db.execute(select(Content).order_by(Content.id))
        return list(result.scalars().all())

    async def get_by_id(self, content_id: int) -> Content:
        return await self._get_or_404(content_id)

    async def get_by_slug(self, slug: str) -> Content:
        """
        Return the record whose slug equals *slug* exactly.

        Slugs are not unique; the lowest id wins when two names normalize
        to the same slug.
        """
        q = select(Content).where(Content.slug == slug).order_by(Content.id).limit(1)
        result = await self.db.execute(q)
        content = result.scalar_one_or_none()
        if content is None:
            logger.debug("Content slug=%r not found", slug)
            raise NotFoundError(f"Content with slug {slug} not found")
        return content
