from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routers.deps import get_user_service
from app.schemas.user import ProfileUpdate, UserResponse
from app.services.user_service import UserService


router = APIRouter()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, users: UserService = Depends(get_user_service)):
    """Get a user profile"""
    return await users.get_user(user_id)


@router.post("/{user_id}/profile", response_model=UserResponse)
async def update_profile(
    user_id: str,
    payload: ProfileUpdate,
    users: UserService = Depends(get_user_service),
    db: AsyncSession = Depends(get_db),
):
    """Replace height, age, gender and activity level"""
    user = await users.update_profile(
        user_id,
        height=payload.height,
        age=payload.age,
        gender=payload.gender.value if payload.gender else None,
        activity_level=payload.activity_level.value if payload.activity_level else None,
    )
    await db.commit()
    return user
