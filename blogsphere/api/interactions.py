import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from blogsphere.api.serializers import serialize_comment, serialize_like, serialize_saved_blog
from blogsphere.database import get_db
from blogsphere.dependencies import require_user
from blogsphere.models.comment import Comment
from blogsphere.models.like import Like
from blogsphere.models.saved_blog import SavedBlog
from blogsphere.schemas import (
    CommentRequest,
    DeleteCommentRequest,
    DeleteLikeRequest,
    DeleteSaveRequest,
    LikeRequest,
    SaveRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["interactions"], dependencies=[Depends(require_user)])

# Foreign keys and missing ids are left to the database: a bad reference or a
# second delete of the same row surfaces as a 500, never as a 404.


@router.post("/like")
def like_blog(request: LikeRequest, db: Session = Depends(get_db)):
    try:
        new_like = Like(user_id=request.user_id, blog_id=request.blog_id)
        db.add(new_like)
        db.commit()
        db.refresh(new_like)

        return {
            "success": True,
            "data": serialize_like(new_like),
            "message": "Entry Created Successfully",
        }
    except Exception:
        logger.exception("Error liking the post")
        db.rollback()
        raise HTTPException(status_code=500, detail="Error Liking the Post")


@router.post("/comment")
def comment_blog(request: CommentRequest, db: Session = Depends(get_db)):
    try:
        new_comment = Comment(
            user_id=request.user_id,
            blog_id=request.blog_id,
            body=request.body,
        )
        db.add(new_comment)
        db.commit()
        db.refresh(new_comment)

        return {
            "success": True,
            "data": serialize_comment(new_comment),
            "message": "Entry Created Successfully",
        }
    except Exception:
        logger.exception("Error commenting the post")
        db.rollback()
        raise HTTPException(status_code=500, detail="Error Commenting the Post")


@router.post("/saveblog")
def save_blog(request: SaveRequest, db: Session = Depends(get_db)):
    try:
        saved = SavedBlog(user_id=request.user_id, blog_id=request.blog_id)
        db.add(saved)
        db.commit()
        db.refresh(saved)

        return {
            "success": True,
            "data": serialize_saved_blog(saved),
            "message": "Successfully saved the post",
        }
    except Exception:
        logger.exception("Error saving the blog")
        db.rollback()
        raise HTTPException(status_code=500, detail="Error saving the blog")


@router.delete("/deletecomment")
def delete_comment(request: DeleteCommentRequest, db: Session = Depends(get_db)):
    try:
        comment = db.query(Comment).filter(Comment.id == request.comment_id).one()
        deleted = serialize_comment(comment)
        db.delete(comment)
        db.commit()

        return {
            "success": True,
            "data": deleted,
            "message": "Successfully deleted the comment.",
        }
    except Exception:
        logger.exception("Error deleting the comment")
        db.rollback()
        raise HTTPException(status_code=500, detail="Error deleting the comment.")


@router.delete("/deletelike")
def delete_like(request: DeleteLikeRequest, db: Session = Depends(get_db)):
    try:
        like = db.query(Like).filter(Like.id == request.like_id).one()
        deleted = serialize_like(like)
        db.delete(like)
        db.commit()

        return {
            "success": True,
            "data": deleted,
            "message": "Successfully deleted the like.",
        }
    except Exception:
        logger.exception("Error deleting the like")
        db.rollback()
        raise HTTPException(status_code=500, detail="Error deleting the like.")


@router.delete("/deletesave")
def delete_saved_blog(request: DeleteSaveRequest, db: Session = Depends(get_db)):
    try:
        saved = db.query(SavedBlog).filter(SavedBlog.id == request.savedblog_id).one()
        deleted = serialize_saved_blog(saved)
        db.delete(saved)
        db.commit()

        return {
            "success": True,
            "data": deleted,
            "message": "Successfully deleted the saved blog",
        }
    except Exception:
        logger.exception("Error deleting the saved blog")
        db.rollback()
        raise HTTPException(status_code=500, detail="Error deleting the saved blog")
