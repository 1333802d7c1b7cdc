import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path: sys.path.insert(0, str(ROOT))

from sqlalchemy import select
from app.db import SessionLocal
from app.models.topic import Topic
from app.models.sub_topic import SubTopic

def _sub(name, slug, description, icon, order):
    return {"name": name, "slug": slug, "description": description, "icon": icon, "order": order}

SEEDS = [
    {
        "name": "Frontend Development", "slug": "frontend", "icon": "🎨", "order": 1,
        "description": "Client-side web development technologies and frameworks",
        "subTopics": [
            _sub("React", "react", "JavaScript library for building user interfaces", "⚛️", 1),
            _sub("Next.js", "nextjs", "Full-stack React framework", "▲", 2),
            _sub("TypeScript", "typescript", "Typed superset of JavaScript", "🔷", 3),
            _sub("CSS/SCSS", "css", "Styling and layout techniques", "🎨", 4),
        ],
    },
    {
        "name": "Backend Development", "slug": "backend", "icon": "⚙️", "order": 2,
        "description": "Server-side development and APIs",
        "subTopics": [
            _sub("Node.js", "nodejs", "JavaScript runtime for server-side development", "💚", 1),
            _sub("Django", "django", "High-level Python web framework", "🐍", 2),
            _sub("Spring Boot", "spring-boot", "Java framework for microservices", "🍃", 3),
            _sub("Go/Golang", "golang", "Modern systems programming language", "🐹", 4),
        ],
    },
    {
        "name": "Database Systems", "slug": "databases", "icon": "🗄️", "order": 3,
        "description": "Data storage and management systems",
        "subTopics": [
            _sub("PostgreSQL", "postgresql", "Advanced open-source relational database", "🐘", 1),
            _sub("MongoDB", "mongodb", "Document-oriented NoSQL database", "🍃", 2),
            _sub("Redis", "redis", "In-memory data structure store", "🔴", 3),
        ],
    },
    {
        "name": "Java", "slug": "java", "icon": "☕", "order": 4,
        "description": "Core Java, collections, concurrency and the JVM",
        "subTopics": [
            _sub("Spring", "spring", "web framework", "🍃", 1),
            _sub("Collections", "collections", "Lists, maps and sets in depth", "📚", 2),
        ],
    },
    {
        "name": "Python", "slug": "python", "icon": "🐍", "order": 5,
        "description": "Python language fundamentals and idioms",
        "subTopics": [],
    },
    {
        "name": "System Design", "slug": "system-design", "icon": "🏗️", "order": 6,
        "description": "High-level design, scalability and distributed systems",
        "subTopics": [
            _sub("Caching", "caching", "Cache strategies and eviction policies", "⚡", 1),
            _sub("Load Balancing", "load-balancing", "Distributing traffic across servers", "⚖️", 2),
        ],
    },
    {
        "name": "Data Structures & Algorithms", "slug": "dsa", "icon": "🧮", "order": 7,
        "description": "Algorithm patterns for coding interviews",
        "subTopics": [
            _sub("Arrays", "arrays", "Two pointers, sliding window, prefix sums", "📊", 1),
            _sub("Graphs", "graphs", "BFS, DFS and shortest paths", "🕸️", 2),
        ],
    },
]

def upsert(db, data):
    subs = data.pop("subTopics", [])
    row = db.execute(select(Topic).where(Topic.slug == data["slug"])).scalar_one_or_none()
    if row:
        for k, v in data.items():
            setattr(row, k, v)
    else:
        row = Topic(**data); db.add(row)
    db.flush()

    for s in subs:
        st = db.execute(
            select(SubTopic).where(SubTopic.topic_id == row.id, SubTopic.slug == s["slug"])
        ).scalar_one_or_none()
        if st:
            for k, v in s.items():
                setattr(st, k, v)
        else:
            db.add(SubTopic(topic_id=row.id, **s))
    db.commit()

def main():
    db = SessionLocal()
    try:
        for d in SEEDS: upsert(db, dict(d))
        print("Topics seed OK")
    finally:
        db.close()

if __name__ == "__main__":
    main()
