from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db import Base

class SubTopic(Base):
    __tablename__ = "sub_topics"
    # slug único dentro del topic padre, no global
    __table_args__ = (UniqueConstraint("topic_id", "slug", name="uq_sub_topics_topic_id_slug"),)

    id = Column(Integer, primary_key=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), index=True, nullable=False)
    name = Column(String(160), nullable=False)
    slug = Column(String(80), index=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    icon = Column(String(32), nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)

    topic = relationship("Topic", back_populates="sub_topics")
