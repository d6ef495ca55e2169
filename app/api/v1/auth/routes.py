import logging
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from app.api.deps import get_user_repo
from app.core.config import Settings, get_settings
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.models import User, UserRole
from app.repositories.user_repo import UserRepo
from app.schemas.user import RegisteredUser, Token, UserCreate, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"], prefix="/auth")


@router.post("/register", response_model=RegisteredUser, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    users: UserRepo = Depends(get_user_repo),
    settings: Settings = Depends(get_settings),
):
    # Check if user already exists
    if await users.get_by_email(user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists",
        )

    user = User(
        _id=str(uuid4()),
        email=user_data.email,
        full_name=user_data.full_name,
        hashed_password=get_password_hash(user_data.password),
        role=UserRole.USER,
    )
    await users.insert(user)
    logger.info("Registered user %s", user.id)

    return RegisteredUser(
        access_token=create_access_token(user.id, settings),
        user=UserOut.model_validate(user.model_dump(by_alias=True)),
    )


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    users: UserRepo = Depends(get_user_repo),
    settings: Settings = Depends(get_settings),
):
    user = await users.get_by_email(form_data.username)
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Check if user is active
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )

    return Token(access_token=create_access_token(user.id, settings))
