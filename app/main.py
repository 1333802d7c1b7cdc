import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.settings import CORS_ORIGINS, DEV_AUTO_CREATE
from app.db import Base, engine

# registra todos los modelos en Base.metadata
from app.models import user, topic, sub_topic, blog, note, leetcode_problem  # noqa: F401

from app.routers import topics as topics_router
from app.routers import blogs as blogs_router
from app.routers import notes as notes_router
from app.routers import leetcode as leetcode_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

if DEV_AUTO_CREATE:
    Base.metadata.create_all(bind=engine)

app = FastAPI(title="DevMastery API")

# ==== CORS ====
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==== Routers ====
app.include_router(topics_router.router)
app.include_router(blogs_router.router)
app.include_router(notes_router.router)
app.include_router(leetcode_router.router)

@app.get("/health")
def health():
    return {"status": "ok"}
