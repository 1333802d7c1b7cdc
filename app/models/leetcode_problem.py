from sqlalchemy import Column, Integer, String, Text, Boolean, Float, DateTime, ForeignKey, JSON, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db import Base
from app.core.enums import Difficulty

class LeetcodeProblem(Base):
    __tablename__ = "leetcode_problems"
    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    difficulty = Column(Enum(Difficulty, name="difficulty"), nullable=False, default=Difficulty.EASY)
    category = Column(String(80), nullable=False, default="")
    tags = Column(JSON, nullable=True)
    hints = Column(JSON, nullable=True)
    companies = Column(JSON, nullable=True)
    follow_up = Column(Text, nullable=True)
    frequency = Column(Integer, nullable=True)
    acceptance = Column(Float, nullable=True)
    is_premium = Column(Boolean, nullable=False, default=False)
    leetcode_url = Column(String(512), nullable=True)
    problem_number = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    author_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True, nullable=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="SET NULL"), index=True, nullable=True)
    sub_topic_id = Column(Integer, ForeignKey("sub_topics.id", ondelete="SET NULL"), index=True, nullable=True)

    author = relationship("User", lazy="joined")
    # óptimas primero, igual que el listado público
    solutions = relationship(
        "ProblemSolution",
        order_by="ProblemSolution.is_optimal.desc()",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    resources = relationship(
        "ProblemResource",
        order_by="ProblemResource.created_at",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

class ProblemSolution(Base):
    __tablename__ = "problem_solutions"
    id = Column(Integer, primary_key=True)
    problem_id = Column(Integer, ForeignKey("leetcode_problems.id", ondelete="CASCADE"), index=True, nullable=False)
    language = Column(String(40), nullable=False)
    code = Column(Text, nullable=False)
    explanation = Column(Text, nullable=True)
    time_complexity = Column(String(40), nullable=True)
    space_complexity = Column(String(40), nullable=True)
    is_optimal = Column(Boolean, nullable=False, default=False)

class ProblemResource(Base):
    __tablename__ = "problem_resources"
    id = Column(Integer, primary_key=True)
    problem_id = Column(Integer, ForeignKey("leetcode_problems.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    url = Column(String(512), nullable=False)
    type = Column(String(40), nullable=False, default="ARTICLE")   # ARTICLE | VIDEO | ...
    created_at = Column(DateTime(timezone=True), server_default=func.now())
