# seo_doctor/crawler/frontier.py
"""
Breadth-first crawl frontier: FIFO queue, seen-set and page budget.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Set


class CrawlFrontier:
    """
    Owns the to-visit queue and the set of URLs already queued or visited.

    A URL enters the queue at most once, so no URL is handed out twice.  The
    frontier is exhausted when the queue is empty or ``max_pages`` fetches
    were recorded; queued-but-unvisited URLs do not count against the budget.
    """

    def __init__(self, start_url: str, max_pages: int = 10) -> None:
        if max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        self.max_pages = max_pages
        self.fetched = 0
        self._queue: Deque[str] = deque()
        self._seen: Set[str] = set()
        self._visited: Set[str] = set()
        self.push(start_url)

    def push(self, url: str) -> bool:
        """Queue *url* unless it was seen before; True when queued."""
        if url in self._seen:
            return False
        self._seen.add(url)
        self._queue.append(url)
        return True

    def extend(self, urls: Iterable[str]) -> int:
        return sum(1 for url in urls if self.push(url))

    def next(self) -> str:
        """Dequeue the next URL and mark it visited."""
        if self.is_exhausted():
            raise IndexError("frontier is exhausted")
        url = self._queue.popleft()
        self._visited.add(url)
        return url

    def mark_visited(self, url: str) -> bool:
        """Mark *url* visited without queueing it, e.g. the target of a redirect.

        Returns False when *url* had already been visited.
        """
        if url in self._visited:
            return False
        self._seen.add(url)
        self._visited.add(url)
        return True

    def record_fetched(self) -> None:
        """Count one successfully fetched page against the budget."""
        self.fetched += 1

    def is_exhausted(self) -> bool:
        while self._queue and self._queue[0] in self._visited:
            self._queue.popleft()
        return not self._queue or self.fetched >= self.max_pages

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    @property
    def pending(self) -> int:
        return sum(1 for url in self._queue if url not in self._visited)
