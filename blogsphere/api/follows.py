import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, selectinload

from blogsphere.api.serializers import serialize_follow, serialize_user
from blogsphere.database import get_db
from blogsphere.dependencies import require_user
from blogsphere.models.follow import Follow
from blogsphere.models.user import User
from blogsphere.schemas import FollowRequest, UnfollowRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["follows"])


@router.post("/addfollower", dependencies=[Depends(require_user)])
def add_follower(request: FollowRequest, db: Session = Depends(get_db)):
    """`userId` starts following `toFollowUserId`. Self-follows are not rejected."""
    try:
        db.add(Follow(following_id=request.user_id, followed_by_id=request.to_follow_user_id))
        db.commit()

        return {"success": True, "message": "Successfully added the follower"}
    except Exception:
        # A repeated follow violates the composite primary key
        logger.exception("Error adding the follower")
        db.rollback()
        raise HTTPException(status_code=500, detail="Error adding the follower")


@router.delete("/unfollow", dependencies=[Depends(require_user)])
def unfollow(request: UnfollowRequest, db: Session = Depends(get_db)):
    try:
        follow = db.query(Follow).filter(
            Follow.following_id == request.user_id,
            Follow.followed_by_id == request.to_remove_following_a_user,
        ).one()
        db.delete(follow)
        db.commit()

        return {"success": True, "message": "Successfully unfollowed the user"}
    except Exception:
        logger.exception("Error removing the follower")
        db.rollback()
        raise HTTPException(status_code=500, detail="Error removing the follower")


@router.get("/fetchfollower/{user_id}")
def fetch_followers(user_id: int, db: Session = Depends(get_db)):
    """Who the user follows and who follows them, for the matching user (empty list if none)."""
    try:
        users = db.query(User).options(
            selectinload(User.following),
            selectinload(User.followed_by),
        ).filter(User.id == user_id).all()

        return {
            "success": True,
            "data": [
                {
                    **serialize_user(u),
                    "following": [serialize_follow(f) for f in u.following],
                    "followedBy": [serialize_follow(f) for f in u.followed_by],
                }
                for u in users
            ],
            "message": "Successfully fetched the followers",
        }
    except Exception:
        logger.exception("Error fetching the followers")
        raise HTTPException(status_code=500, detail="Error fetching the followers")
