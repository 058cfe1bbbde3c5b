from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from blogsphere.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(20), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash, never the plaintext
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    blogs = relationship("Blog", back_populates="author")

    # Edges where this user is the follower / the one being followed
    following = relationship("Follow", foreign_keys="Follow.following_id", back_populates="follower")
    followed_by = relationship("Follow", foreign_keys="Follow.followed_by_id", back_populates="followed")
