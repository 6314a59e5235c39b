"""Books Routes — HTTP adapter for the catalog service.

Invariants:
    - One CatalogService per request, bound to the request's DB session
    - InvalidBookError → 400 and BookNotFoundError → 404 via global handlers
    - GET by id maps the service's None to 404 here; the service never raises for it
    - DELETE returns 204 with no body
    - Path ids outside 1..MAX_BOOK_ID fail request validation (400) before the service runs
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.domain_types import BookId
from app.core.errors import BookNotFoundError
from app.core.language_strings import resolve_locale
from app.infrastructure.book_repository import SqlAlchemyBookRepository
from app.infrastructure.database import get_db
from app.models.book import MAX_BOOK_ID
from app.schemas.book import BookBatch, BookPayload, BookResponse
from app.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/books", tags=["books"])

# Ids outside the column range can never be stored: rejected with 400
BookIdPath = Annotated[int, Path(ge=1, le=MAX_BOOK_ID)]


def get_catalog_service(db: AsyncSession = Depends(get_db)) -> CatalogService:
    """FastAPI dependency: service wired to the SQLAlchemy store."""
    locale = resolve_locale(get_settings().catalog_locale)
    return CatalogService(SqlAlchemyBookRepository(db), locale)


@router.post(
    "", response_model=BookResponse, status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookPayload, service: CatalogService = Depends(get_catalog_service),
):
    return await service.create(body.to_domain())


@router.post(
    "/batch", response_model=list[BookResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_books(
    body: BookBatch, service: CatalogService = Depends(get_catalog_service),
):
    """Create several books; nothing is stored if any entry is invalid."""
    return await service.create_many([b.to_domain() for b in body.books])


@router.get("", response_model=list[BookResponse])
async def list_books(service: CatalogService = Depends(get_catalog_service)):
    return await service.get_all()


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: BookIdPath, service: CatalogService = Depends(get_catalog_service),
):
    book = await service.get_by_id(BookId(book_id))
    if book is None:
        raise BookNotFoundError(BookId(book_id), locale=service.locale)
    return book


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: BookIdPath,
    body: BookPayload,
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.update(BookId(book_id), body.to_domain())


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: BookIdPath, service: CatalogService = Depends(get_catalog_service),
):
    await service.delete(BookId(book_id))
