from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func

from bloglist.db.session import Base

class Author(Base):
    __tablename__ = "authors"

    id = Column(String, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)
    # Ids of owned posts, kept in step with Post.owner_id by the post mutation service
    post_ids = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=func.now())
