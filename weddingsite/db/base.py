"""
Declarative base and common columns shared by all models.
"""
from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.orm import declarative_base
from weddingsite.core.utils import utcnow

Base = declarative_base()


class BaseModel(Base):
    """Abstract model with id and timestamps."""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
