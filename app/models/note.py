from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db import Base

class Note(Base):
    __tablename__ = "notes"
    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")
    category = Column(String(80), nullable=False, default="")
    tags = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    author_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True, nullable=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="SET NULL"), index=True, nullable=True)
    sub_topic_id = Column(Integer, ForeignKey("sub_topics.id", ondelete="SET NULL"), index=True, nullable=True)

    author = relationship("User", lazy="joined")
    topic = relationship("Topic", lazy="joined")
    sub_topic = relationship("SubTopic", lazy="joined")
