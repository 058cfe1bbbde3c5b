import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from blogsphere.api.serializers import serialize_user
from blogsphere.config import Settings, get_settings
from blogsphere.database import get_db
from blogsphere.models.user import User
from blogsphere.schemas import LoginRequest, SignupRequest
from blogsphere.services.auth import hash_password, issue_token, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/signup")
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    """Register a user. The password is stored only as a bcrypt hash."""
    try:
        user = User(
            name=data.name,
            email=data.email,
            password=hash_password(data.password),
        )
        db.add(user)
        db.commit()
        db.refresh(user)

        logger.info(f"Signed up user {user.email}")
        return {
            "success": True,
            "data": serialize_user(user),
            "message": "Signed up successfully",
        }
    except Exception:
        # Duplicate emails land here too: the unique constraint is the only guard
        logger.exception("Error signing up user")
        db.rollback()
        raise HTTPException(status_code=500, detail="Entry Creation Failed")


@router.post("/login")
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Check credentials and issue a token valid for `jwt_expiry_hours`."""
    try:
        user = db.query(User).filter(User.email == data.email).first()
        if not user:
            raise HTTPException(status_code=404, detail="User not registered")

        if not verify_password(data.password, user.password):
            logger.info(f"Rejected password for {user.email}")
            raise HTTPException(status_code=401, detail="Password Incorrect")

        token = issue_token(user, settings)
        logger.info(f"Logged in user {user.email}")
        return {
            "success": True,
            "data": serialize_user(user),
            "token": token,
            "message": "Logged in successfully",
        }
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error logging in")
        raise HTTPException(status_code=500, detail="Internal Server Error")
