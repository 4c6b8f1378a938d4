import threading
import time
from typing import Optional
from urllib.parse import urlencode

import requests

from ..app.constants import USER_AGENT


DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}

PAGE_TIMEOUT = 20
MEDIA_TIMEOUT = (10, 120)


class RateLimiter:
    """
    Fixed pause between two requests sharing this limiter.

    Callers wait() before a request and mark() once it has finished, so the
    pause is measured from the end of one attempt to the start of the next.
    """

    def __init__(self, sleep_seconds: float = 0) -> None:
        self.sleep_seconds = max(0.0, sleep_seconds)
        self.lock = threading.Lock()
        self.last_request_time = 0.0

    def wait(self) -> None:
        if self.sleep_seconds <= 0:
            return
        with self.lock:
            now = time.time()
            elapsed = now - self.last_request_time
            if elapsed < self.sleep_seconds:
                time.sleep(self.sleep_seconds - elapsed)
            self.last_request_time = time.time()

    def mark(self) -> None:
        with self.lock:
            self.last_request_time = time.time()


def create_session(user_agent: str = USER_AGENT) -> requests.Session:
    # No retry adapter: a failed request is reported once and never retried.
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    session.headers["User-Agent"] = user_agent
    return session


def favorites_url(api_base: str, user_id: int, page: int) -> str:
    query = urlencode({"user_id": user_id, "page": page})
    return f"{api_base.rstrip('/')}/favorites.json?{query}"


def fetch_json(session: requests.Session, url: str, rate_limiter: Optional[RateLimiter] = None):
    if rate_limiter:
        rate_limiter.wait()
    try:
        response = session.get(url, timeout=PAGE_TIMEOUT)
        response.raise_for_status()
        return response.json()
    finally:
        if rate_limiter:
            rate_limiter.mark()
