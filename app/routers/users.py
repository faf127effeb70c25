"""
Users router: traveler accounts referenced by bookings.

Endpoints:
  GET  /users → all travelers, newest first (admin)
  POST /users → register a traveler
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.dependencies import get_current_admin
from app.core.exceptions import ConflictException
from app.core.security import hash_password
from app.models.user import User
from app.schemas.user import UserCreateRequest, UserOut

router = APIRouter()


@router.get("", response_model=List[UserOut])
def list_users(
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    return db.query(User).order_by(User.created_at.desc()).all()


@router.post("", response_model=UserOut, status_code=201)
def create_user(body: UserCreateRequest, db: Session = Depends(get_db)):
    """Emails are stored lowercased and must be unique."""
    email = body.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ConflictException("An account with this email already exists")

    user = User(name=body.name, email=email, hashed_password=hash_password(body.password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
