"""GitHub repository lookup for public profiles."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.config import Settings, settings as default_settings


logger = logging.getLogger(__name__)


class GithubLookupError(RuntimeError):
    pass


def _headers(settings: Settings) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": settings.app_name,
    }
    if settings.github_token:
        headers["Authorization"] = f"token {settings.github_token}"
    return headers


def fetch_user_repos(username: str, settings: Settings | None = None) -> Any:
    """Return the upstream repository list for ``username`` unchanged.

    One best-effort request; any transport error or non-200 response raises
    GithubLookupError.
    """
    cfg = settings or default_settings
    # The username is one escaped path segment.
    url = f"{cfg.github_api_base.rstrip('/')}/users/{quote(username, safe='')}/repos"
    params = {"per_page": cfg.github_repos_per_page, "sort": cfg.github_repos_sort}

    try:
        with httpx.Client(timeout=cfg.github_timeout_seconds, follow_redirects=True) as client:
            response = client.get(url, headers=_headers(cfg), params=params)
    except httpx.HTTPError as exc:
        logger.warning("github.repos request failed username=%s error=%s", username, exc)
        raise GithubLookupError(username) from exc

    if response.status_code != 200:
        logger.warning("github.repos username=%s status=%s", username, response.status_code)
        raise GithubLookupError(username)

    try:
        return response.json()
    except ValueError as exc:
        logger.warning("github.repos username=%s returned non-JSON body", username)
        raise GithubLookupError(username) from exc
