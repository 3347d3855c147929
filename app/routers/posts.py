from fastapi import APIRouter, Depends, HTTPException
from app.dependencies import CursorParams, get_post_service
from app.schemas import (
    CursorPage,
    PasswordCheckResponse,
    PostCreate,
    PostPasswordCheck,
    PostResponse,
    PostUpdate,
)
from app.services.post_service import PostNotFoundError, PostService

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])

@router.post("", status_code=201, response_model=PostResponse)
async def create_post(data: PostCreate, service: PostService = Depends(get_post_service)):
    return await service.create(data)

@router.get("", response_model=CursorPage)
async def list_posts(
    cursor: CursorParams = Depends(),
    service: PostService = Depends(get_post_service),
):
    return await service.find(cursor.last_id)

@router.post("/{post_id}/password", response_model=PasswordCheckResponse)
async def check_post_password(
    post_id: int,
    data: PostPasswordCheck,
    service: PostService = Depends(get_post_service),
):
    try:
        is_correct = await service.check_password(data, post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    return PasswordCheckResponse(is_correct=is_correct)

@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    data: PostUpdate,
    service: PostService = Depends(get_post_service),
):
    try:
        return await service.update(data, post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")

@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: int, service: PostService = Depends(get_post_service)):
    try:
        await service.remove(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
