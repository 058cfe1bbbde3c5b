from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from blogsphere.database import Base

class Follow(Base):
    """Directed edge: `following_id` follows `followed_by_id`."""

    __tablename__ = "follows"

    following_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    followed_by_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    follower = relationship("User", foreign_keys=[following_id], back_populates="following")
    followed = relationship("User", foreign_keys=[followed_by_id], back_populates="followed_by")
