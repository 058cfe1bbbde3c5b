from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from blogsphere.database import Base

class SavedBlog(Base):
    __tablename__ = "saved_blogs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    blog_id = Column(Integer, ForeignKey("blogs.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
