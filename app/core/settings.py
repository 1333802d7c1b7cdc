import os
from dotenv import load_dotenv

load_dotenv()

# Base de datos: Postgres en prod, SQLite en local/tests
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./devmastery.db")

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = "HS256"

# Timeout por fetch (blogs/notes/problems), en segundos
CONTENT_FETCH_TIMEOUT = float(os.getenv("CONTENT_FETCH_TIMEOUT", "10"))

_origins = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = [o.strip() for o in _origins.split(",") if o.strip()] or ["http://localhost:3000"]

DEV_AUTO_CREATE = os.getenv("DEV_AUTO_CREATE", "0") == "1"
