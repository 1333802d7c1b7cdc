import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from app.db import Base, get_db, get_session_factory
from app.main import app
from app.core.enums import Difficulty, Role
from app.models.user import User
from app.models.topic import Topic
from app.models.sub_topic import SubTopic
from app.models.blog import Blog
from app.models.note import Note
from app.models.leetcode_problem import LeetcodeProblem, ProblemSolution, ProblemResource


@pytest.fixture
def session_factory(tmp_path):
    # archivo temporal: cada fetch concurrente abre su propia conexión
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def seeded(db):
    """
    java (order 2)             -> 3 blogs (1 sin publicar), 1 note, 1 problem a nivel topic
      collections (order 0)    -> vacío
      spring (order 1)         -> 1 blog, 2 notes, 1 problem
    sql (order 1)              -> vacío, subtopic joins
    css (order 3)              -> vacío, sin subtopics
    """
    alice = User(name="Alice", email="alice@example.com", role=Role.USER.value)
    admin = User(name="Root", email="admin@example.com", role=Role.ADMIN.value)
    db.add_all([alice, admin])

    java = Topic(name="Java", slug="java", description="Core Java and the JVM", icon="☕", order=2)
    sql = Topic(name="SQL Fundamentals", slug="sql", description="Relational database design", icon="🗄️", order=1)
    css = Topic(name="CSS Basics", slug="css", description="Styling web pages", icon="🎨", order=3)
    db.add_all([java, sql, css])
    db.flush()

    spring = SubTopic(topic_id=java.id, name="Spring", slug="spring", description="web framework", order=1)
    collections = SubTopic(topic_id=java.id, name="Collections", slug="collections", description="Lists and maps", order=0)
    joins = SubTopic(topic_id=sql.id, name="Joins", slug="joins", description="Inner and outer joins", order=0)
    db.add_all([spring, collections, joins])
    db.flush()

    db.add_all([
        Blog(title="Java Streams", excerpt="streams", category="java", read_time=7, published=True,
             author_id=alice.id, topic_id=java.id, tags=["java"]),
        Blog(title="JVM Internals", excerpt="jvm", category="java", read_time=12, published=True,
             topic_id=java.id),
        Blog(title="Draft: Records", published=False, author_id=alice.id, topic_id=java.id),
        Blog(title="Spring Boot Intro", published=True, author_id=alice.id, sub_topic_id=spring.id),
        Note(title="Java Memory Model", content="x" * 400, author_id=alice.id, topic_id=java.id),
        Note(title="Spring Beans!", content="Beans are managed objects", sub_topic_id=spring.id),
        Note(title="Spring AOP", content="Aspects", sub_topic_id=spring.id),
    ])
    two_sum = LeetcodeProblem(title="Two Sum", description="Find two numbers", difficulty=Difficulty.EASY,
                              topic_id=java.id, author_id=alice.id, tags=["array"], problem_number=1)
    two_sum.solutions = [
        ProblemSolution(language="java", code="// brute", is_optimal=False),
        ProblemSolution(language="java", code="// hashmap", is_optimal=True),
    ]
    two_sum.resources = [ProblemResource(title="Editorial", url="https://example.com/two-sum")]
    db.add_all([
        two_sum,
        LeetcodeProblem(title="LRU Cache", difficulty=Difficulty.MEDIUM, sub_topic_id=spring.id),
    ])
    db.commit()
    return {
        "alice": alice.id, "admin": admin.id,
        "java": java.id, "sql": sql.id, "css": css.id,
        "spring": spring.id, "collections": collections.id, "joins": joins.id,
    }


@pytest.fixture
def client(session_factory):
    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
