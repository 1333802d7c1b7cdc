from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.db import Base

class Topic(Base):
    __tablename__ = "topics"
    id = Column(Integer, primary_key=True)
    name = Column(String(160), nullable=False)
    slug = Column(String(80), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    icon = Column(String(32), nullable=False, default="")       # emoji / glifo, solo display
    order = Column(Integer, nullable=False, default=0)

    sub_topics = relationship(
        "SubTopic",
        back_populates="topic",
        order_by="SubTopic.order",
        cascade="all, delete-orphan",
    )
