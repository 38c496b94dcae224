"""Remote Maven-layout repository queried over HTTP.

Existence of an artifact is checked with a HEAD request on its POM file. The
httpx client is injected so the caller owns timeouts and connection pooling,
and tests can swap in an httpx.MockTransport.
"""

import logging

import httpx

from buildcfg.core.coordinates import DependencyCoordinate
from buildcfg.core.errors import RepositoryUnreachableError
from buildcfg.core.repositories.abc import ArtifactLocation, RepositorySource

logger = logging.getLogger(__name__)

# Private repositories answer 401/403 for artifacts the caller cannot see
_NOT_FOUND_STATUSES = frozenset({401, 403, 404, 410})


class HttpMavenRepository(RepositorySource):
    """Production implementation backed by an httpx.Client.

    Status mapping:
    - 2xx: artifact found
    - 401, 403, 404, 410: artifact not found in this source
    - anything else, timeouts, transport errors, redirect loops: source unreachable
    """

    def __init__(self, name: str, url: str, client: httpx.Client) -> None:
        self._name = name
        self._url = url if url.endswith("/") else url + "/"
        self._client = client

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return self._url

    def find(self, coordinate: DependencyCoordinate) -> ArtifactLocation | None:
        pom_url = self._url + coordinate.pom_path()
        logger.debug("HEAD %s", pom_url)

        try:
            response = self._client.head(pom_url, follow_redirects=True)
        except httpx.TimeoutException as e:
            raise RepositoryUnreachableError(self._name, f"timed out ({e})") from e
        except httpx.RequestError as e:
            raise RepositoryUnreachableError(self._name, str(e) or type(e).__name__) from e

        status = response.status_code
        logger.debug("HEAD %s -> %d", pom_url, status)

        if response.is_success:
            return ArtifactLocation(coordinate=coordinate, source=self._name, url=pom_url)
        if status in _NOT_FOUND_STATUSES:
            return None
        raise RepositoryUnreachableError(self._name, f"HTTP {status} for {pom_url}")
