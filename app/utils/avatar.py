# avatar.py
import hashlib
from urllib.parse import urlencode


GRAVATAR_BASE = "https://www.gravatar.com/avatar/"


def gravatar_url(email: str, *, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    digest = hashlib.md5((email or "").strip().lower().encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE}{digest}?{urlencode({'s': size, 'r': rating, 'd': default})}"
