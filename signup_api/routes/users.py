"""User registration routes."""
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from signup_api.core.i18n import Translator, get_translator
from signup_api.db.sessions import get_db
from signup_api.services.user_service import register_user


router = APIRouter(prefix="/api/1.0", tags=["Users"])


# Request/Response schemas
class RegisterRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


@router.post("/users", response_model=MessageResponse, status_code=status.HTTP_200_OK)
def create_user(
    request: RegisterRequest,
    db: Session = Depends(get_db),
    translate: Translator = Depends(get_translator),
):
    """
    Register a new user.
    
    - Validates username, e-mail and password
    - Stores the user with a hashed password
    """
    register_user(db, request.model_dump())
    return MessageResponse(message=translate("user_create_success"))
