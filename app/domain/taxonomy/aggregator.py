import asyncio
import logging
from typing import Protocol

from app.core.settings import CONTENT_FETCH_TIMEOUT
from app.schemas.page import PageContent
from app.domain.taxonomy.scope import ContentKind, Scope

log = logging.getLogger("aggregator")


class ContentSource(Protocol):
    def fetch(self, scope: Scope, kind: ContentKind) -> list: ...


class ContentAggregator:
    """
    Junta blogs, notes y problems de un scope en un PageContent.

    Los tres fetch se lanzan a la vez y se esperan todos. Un kind que falla o
    expira queda como lista vacía (y se anota en ``failed``); los otros dos
    se devuelven igual.
    """

    def __init__(self, source: ContentSource, timeout: float | None = None):
        self.source = source
        self.timeout = CONTENT_FETCH_TIMEOUT if timeout is None else timeout

    async def _fetch_kind(self, scope: Scope, kind: ContentKind) -> list | None:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.source.fetch, scope, kind),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            log.warning("fetch %s for %r timed out after %.1fs", kind.value, scope, self.timeout)
        except Exception as e:
            log.warning("fetch %s for %r failed: %s", kind.value, scope, e)
        return None

    async def aggregate(self, scope: Scope) -> PageContent:
        kinds = list(ContentKind)
        results = await asyncio.gather(*(self._fetch_kind(scope, k) for k in kinds))

        data: dict[str, list] = {}
        failed: list[str] = []
        for kind, rows in zip(kinds, results):
            if rows is None:
                failed.append(kind.value)
                rows = []
            data[kind.value] = rows
        return PageContent(failed=failed, **data)
