"""HTTP client for the PokeAPI with a response cache in front of it."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any, Callable, TypeVar

from .cache import Cache
from .models import LocationArea, LocationPage, Pokemon

API_BASE = "https://pokeapi.co/api/v2/"

_T = TypeVar("_T")


class ApiError(Exception):
    """A request to the API failed or returned something unusable."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class PokeApiClient:
    """Fetches PokeAPI documents, caching raw bodies for ``cache_ttl`` seconds.

    ``http_timeout`` is the per-request timeout in seconds; zero means none.
    """

    base_url: str = API_BASE

    def __init__(self, http_timeout: float, cache_ttl: float) -> None:
        if http_timeout < 0:
            raise ValueError(f"http timeout must not be negative, got {http_timeout!r}")
        self.http_timeout = http_timeout
        self.cache = Cache(cache_ttl)

    def get_locations(self, url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page when ``url`` is None."""
        target = url if url is not None else self.base_url + "location-area/"
        return self._fetch(target, LocationPage.from_dict)

    def get_encounters(self, location: str) -> LocationArea:
        """Return the location area named ``location`` with its encounters."""
        return self._fetch(self.base_url + "location-area/" + location, LocationArea.from_dict)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the Pokemon named ``name``."""
        return self._fetch(self.base_url + "pokemon/" + name, Pokemon.from_dict)

    def close(self) -> None:
        """Release the cache's background sweeper."""
        self.cache.close()

    def __enter__(self) -> PokeApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(self, url: str, parse: Callable[[Any], _T]) -> _T:
        body = self.cache.get(url)
        if body is None:
            body = self._get_response_body(url)
            self.cache.add(url, body)
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise ApiError(f"invalid JSON from {url}: {exc}") from exc
        try:
            return parse(data)
        except (TypeError, ValueError) as exc:
            raise ApiError(f"unexpected document from {url}: {exc}") from exc

    def _get_response_body(self, url: str) -> bytes:
        try:
            request = urllib.request.Request(url, method="GET")
        except ValueError as exc:
            raise ApiError(f"invalid request URL {url!r}: {exc}") from exc
        try:
            with urllib.request.urlopen(request, timeout=self.http_timeout or None) as response:
                status = response.status
                if status > 299:
                    raise ApiError(
                        f"Returned Invalid Status Code: {status} {response.reason}", status
                    )
                return response.read()
        except urllib.error.HTTPError as exc:
            raise ApiError(
                f"Returned Invalid Status Code: {exc.code} {exc.reason}", exc.code
            ) from exc
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise ApiError(f"request to {url} failed: {exc}") from exc