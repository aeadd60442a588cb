from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from loguru import logger
from sqlmodel import Session, select
from uuid import UUID

from finance_tracker.database import get_session
from finance_tracker.models.user import User
from finance_tracker.schemas.user import Token, UserCreate, UserRead
from finance_tracker.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user,
)

router = APIRouter(prefix="/auth", tags=["auth"])

# Registro
@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    user_exists = session.exec(select(User).where(User.email == user_create.email)).first()
    if user_exists:
        raise HTTPException(status_code=400, detail="Email already registered")

    user = User(
        email=user_create.email,
        hashed_password=get_password_hash(user_create.password),
        full_name=user_create.full_name,
    )
    session.add(user)
    session.commit()
    session.refresh(user)

    logger.info("Registered user {}", user.id)
    return user

# Login
@router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user = session.exec(select(User).where(User.email == form_data.username)).first()
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    access_token = create_access_token(data={"sub": str(user.id)})
    return Token(access_token=access_token)

# Ruta protegida
@router.get("/me", response_model=UserRead)
def read_users_me(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return session.get(User, user_id)
