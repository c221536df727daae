from sqlalchemy import Column, String, DateTime, Integer, Text
from sqlalchemy.sql import func

from bloglist.db.session import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    author = Column(String, nullable=False, default="unknown")
    url = Column(Text, nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    # Plain reference: authors may disappear without taking their posts along
    owner_id = Column(String, index=True, nullable=False)
    created_at = Column(DateTime, default=func.now())
