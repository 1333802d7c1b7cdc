# app/client.py
"""
Cliente HTTP de la API de DevMastery.

Implementa ``ContentSource`` (``fetch(scope, kind)``), así que se puede pasar
tal cual a ``ContentAggregator`` para armar una página desde fuera del server.
"""
import logging
from typing import List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from app.core.settings import CONTENT_FETCH_TIMEOUT
from app.schemas.taxonomy import TopicOut, TopicSearchResponse
from app.schemas.content import BlogOut, NoteOut, ProblemOut
from app.domain.taxonomy.scope import ContentKind, Scope

log = logging.getLogger("client")

# kind -> (path, clave de la respuesta, modelo)
ENDPOINTS = {
    ContentKind.BLOGS: ("/api/blogs", "blogs", BlogOut),
    ContentKind.NOTES: ("/api/notes", "notes", NoteOut),
    ContentKind.PROBLEMS: ("/api/leetcode", "problems", ProblemOut),
}

def _retrying_session() -> requests.Session:
    # Session con reintentos (para 429/5xx)
    s = requests.Session()
    adapter = HTTPAdapter(
        max_retries=Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False,
        )
    )
    s.mount("http://", adapter)
    s.mount("https://", adapter)
    return s

class DevMasteryClient:
    def __init__(self, base_url: str, timeout: float = CONTENT_FETCH_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or _retrying_session()

    def _get(self, path: str, params: Optional[dict] = None) -> dict:
        resp = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def list_topics(self) -> List[TopicOut]:
        data = self._get("/api/topics")
        return [TopicOut.model_validate(t) for t in data.get("topics") or []]

    def search_topics(self, term: str = "", category: str = "all") -> TopicSearchResponse:
        data = self._get("/api/topics", params={"q": term, "category": category})
        return TopicSearchResponse.model_validate(data)

    def fetch(self, scope: Scope, kind: ContentKind) -> list:
        path, key, model = ENDPOINTS[ContentKind(kind)]
        # el valor del slug va tal cual en params; requests lo codifica
        data = self._get(path, params=scope.query_params())
        return [model.model_validate(row) for row in data.get(key) or []]
