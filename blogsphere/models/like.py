from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from blogsphere.database import Base

class Like(Base):
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    blog_id = Column(Integer, ForeignKey("blogs.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # No uniqueness on (user_id, blog_id): the same user may like a post more than once
