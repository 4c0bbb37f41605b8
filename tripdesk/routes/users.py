from fastapi import APIRouter, Body, Depends, HTTPException, status

from tripdesk.routes.deps import get_repository, get_query_service
from tripdesk.repositories.base import CatalogRepository
from tripdesk.schemas.catalog import UserCreate, UserPublic
from tripdesk.services.query_service import QueryService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/users", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate = Body(...), repository: CatalogRepository = Depends(get_repository)):
    # Usernames are not checked for uniqueness; lookups return the first match
    created = repository.create_user(user)
    logger.info(f"Created user {created.id} ({created.username})")
    return created

@router.get("/users/by-username/{username}", response_model=UserPublic)
def get_user_by_username(username: str, queries: QueryService = Depends(get_query_service)):
    user = queries.get_user_by_username(username)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User {username!r} not found")
    return user

@router.get("/users/{user_id}", response_model=UserPublic)
def get_user(user_id: int, queries: QueryService = Depends(get_query_service)):
    user = queries.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return user
