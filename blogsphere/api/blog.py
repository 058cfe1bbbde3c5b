import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.exceptions import RequestValidationError
from sqlalchemy.orm import Session

from blogsphere.api.serializers import serialize_blog
from blogsphere.config import Settings, get_settings
from blogsphere.database import get_db
from blogsphere.dependencies import require_user
from blogsphere.models.blog import Blog, Category
from blogsphere.schemas import BlogCreate, safe_parse
from blogsphere.services.media import MediaUploader, UploadFailed, get_media_uploader
from blogsphere.services.pagination import page_window

logger = logging.getLogger(__name__)

router = APIRouter(tags=["blogs"])


def blog_form(
    title: Optional[str] = Form(None),
    body: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    userId: Optional[str] = Form(None),
    filePath: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
) -> BlogCreate:
    """Validate the multipart fields of a new blog before anything is uploaded."""
    parsed = safe_parse(
        BlogCreate,
        {"title": title, "body": body, "category": category, "userId": userId, "filePath": filePath},
        context={"body_min_length": settings.blog_body_min_length},
    )
    if not parsed.success:
        raise RequestValidationError(parsed.error["issues"])
    return parsed.data


@router.post("/uploadblog")
def create_blog(
    claims: dict = Depends(require_user),
    data: BlogCreate = Depends(blog_form),
    image: Optional[UploadFile] = File(None),
    uploader: MediaUploader = Depends(get_media_uploader),
    db: Session = Depends(get_db),
):
    """Create a blog post. Media comes from an uploaded `image` or from `filePath`."""
    if image is None and not data.file_path:
        raise RequestValidationError([{
            "type": "missing",
            "loc": ["body", "image"],
            "msg": "Either an image file or filePath is required",
        }])

    try:
        source = image.file if image is not None else data.file_path
        media_url = uploader.upload(source)

        new_blog = Blog(
            user_id=data.user_id if data.user_id is not None else claims["id"],
            title=data.title,
            body=data.body,
            media_url=media_url,
            category=data.category,
        )
        db.add(new_blog)
        db.commit()
        db.refresh(new_blog)

        return {
            "success": True,
            "data": serialize_blog(new_blog),
            "message": "Entry Created Successfully",
        }
    except UploadFailed:
        raise HTTPException(status_code=500, detail="Entry Creation Failed")
    except Exception:
        logger.exception("Error creating blog")
        db.rollback()
        raise HTTPException(status_code=500, detail="Entry Creation Failed")


@router.get("/allblogs")
def get_all_blogs(db: Session = Depends(get_db)):
    try:
        blogs = db.query(Blog).order_by(Blog.id).all()
        return {
            "success": True,
            "data": [serialize_blog(b) for b in blogs],
            "message": "This is entire Blogs List",
        }
    except Exception:
        logger.exception("Error fetching blogs")
        raise HTTPException(status_code=500, detail="Fetching Post Process Failed")


@router.get("/blogpagination")
def get_blogs_paginated(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Page through blogs; `page` and `limit` default to 1 and 5."""
    try:
        offset, limit = page_window(page, limit)
        blogs = db.query(Blog).order_by(Blog.id).offset(offset).limit(limit).all()
        return {
            "success": True,
            "data": [serialize_blog(b) for b in blogs],
            "message": "This is entire Blogs List",
        }
    except Exception:
        logger.exception("Error fetching paginated blogs")
        raise HTTPException(status_code=500, detail="Fetching Post Process Failed")


@router.get("/byname/{search_query}")
def get_blogs_by_name(
    search_query: str,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Case-insensitive substring search. Title and body matches are queried
    separately and returned side by side, without merging.
    """
    try:
        offset, limit = page_window(page, limit)

        by_title = db.query(Blog).filter(
            Blog.title.icontains(search_query, autoescape=True)
        ).order_by(Blog.id).offset(offset).limit(limit).all()

        by_body = db.query(Blog).filter(
            Blog.body.icontains(search_query, autoescape=True)
        ).order_by(Blog.id).offset(offset).limit(limit).all()

        if not by_title and not by_body:
            raise HTTPException(status_code=404, detail="No Data found with the given name")

        return {
            "success": True,
            "data": [serialize_blog(b) for b in by_title],
            "data2": [serialize_blog(b) for b in by_body],
            "message": "Data Fetched Successfully",
        }
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error fetching blogs by name")
        raise HTTPException(status_code=500, detail="Error Fetching Blogs by Name")


@router.get("/bycategory/{category_query}")
def get_blogs_by_category(
    category_query: str,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db),
):
    try:
        try:
            category = Category(category_query)
        except ValueError:
            raise HTTPException(status_code=404, detail="Error fetching the blogs by category")

        offset, limit = page_window(page, limit)
        blogs = db.query(Blog).filter(
            Blog.category == category
        ).order_by(Blog.id).offset(offset).limit(limit).all()

        if not blogs:
            raise HTTPException(status_code=404, detail="Error fetching the blogs by category")

        return {
            "success": True,
            "data": [serialize_blog(b) for b in blogs],
            "message": "Data Fetched Successfully",
        }
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error fetching blogs by category")
        raise HTTPException(status_code=500, detail="Error Fetching Blogs by Category")
