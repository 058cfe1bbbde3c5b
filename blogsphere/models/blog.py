import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from blogsphere.database import Base


class Category(str, enum.Enum):
    blockchain = "blockchain"
    technology = "technology"
    programming = "programming"
    science = "science"
    health = "health"
    finance = "finance"
    lifestyle = "lifestyle"
    travel = "travel"


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(500), nullable=False, index=True)
    body = Column(Text, nullable=False)
    media_url = Column(String(500))
    category = Column(Enum(Category), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    author = relationship("User", back_populates="blogs")
