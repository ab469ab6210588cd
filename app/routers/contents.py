from fastapi import APIRouter, Depends, Response

from app.dependencies import get_content_service
from app.schemas import ContentCreate, ContentResponse, ContentUpdate
from app.services.content_service import ContentService

router = APIRouter(prefix="/api/v1/contents", tags=["contents"])

@router.get("", response_model=list[ContentResponse])
async def list_contents(service: ContentService = Depends(get_content_service)):
    return await service.get_all()

@router.get("/slug/{slug}", response_model=ContentResponse)
async def get_content_by_slug(slug: str, service: ContentService = Depends(get_content_service)):
    return await service.get_by_slug(slug)

@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(content_id: int, service: ContentService = Depends(get_content_service)):
    return await service.get_by_id(content_id)

@router.post("", status_code=201, response_model=ContentResponse)
async def create_content(data: ContentCreate, service: ContentService = Depends(get_content_service)):
    return await service.create(data)

@router.put("/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: int, data: ContentUpdate, service: ContentService = Depends(get_content_service)
):
    return await service.update(content_id, data)

@router.delete("/{content_id}", status_code=204)
async def delete_content(content_id: int, service: ContentService = Depends(get_content_service)):
    await service.delete(content_id)
    return Response(status_code=204)
