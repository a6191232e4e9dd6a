"""Async client for the KVision dependency-version document.

Fetches the JSON document that lists current versions of Kotlin, KVision and
the supported backend frameworks. ``VersionProvider`` wraps the client and
always produces a dataset: when the request fails for any reason it falls back
to the versions bundled with the wizard.

Typical usage::

    provider = VersionProvider(VersionClient())
    versions = await provider.resolve()
    print(versions.kotlin)
"""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.markup import escape

from kvwizard.config import DEFAULT_VERSIONS_URL
from kvwizard.errors import VersionFetchError
from kvwizard.utils import print_warning


# ---------------------------------------------------------------------------
# Version dataset
# ---------------------------------------------------------------------------

class _Versions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TemplateJooby(_Versions):
    jooby: str


class TemplateKtor(_Versions):
    ktor: str


class TemplateMicronaut(_Versions):
    micronaut: str


class TemplateSpring(_Versions):
    spring_boot: str = Field(..., alias="springBoot")
    spring_data_r2dbc: str = Field(..., alias="springDataR2dbc")
    r2dbc_postgres: str = Field(..., alias="r2dbcPostgres")
    r2dbc_h2: str = Field(..., alias="r2dbcH2")


class TemplateVertx(_Versions):
    vertx_plugin: str = Field(..., alias="vertxPlugin")


class VersionData(_Versions):
    """Dependency versions, shaped like the remote JSON document."""

    kvision: str = Field(..., alias="kVision")
    kotlin: str
    serialization: str
    coroutines: str
    template_jooby: TemplateJooby = Field(..., alias="templateJooby")
    template_ktor: TemplateKtor = Field(..., alias="templateKtor")
    template_micronaut: TemplateMicronaut = Field(..., alias="templateMicronaut")
    template_spring: TemplateSpring = Field(..., alias="templateSpring")
    template_vertx: TemplateVertx = Field(..., alias="templateVertx")


DEFAULT_VERSIONS = VersionData(
    kvision="3.16.3",
    kotlin="1.4.10",
    serialization="1.0.1",
    coroutines="1.3.9",
    template_jooby=TemplateJooby(jooby="2.9.2"),
    template_ktor=TemplateKtor(ktor="1.4.2"),
    template_micronaut=TemplateMicronaut(micronaut="2.1.3"),
    template_spring=TemplateSpring(
        spring_boot="2.3.5.RELEASE",
        spring_data_r2dbc="1.1.5.RELEASE",
        r2dbc_postgres="0.8.6.RELEASE",
        r2dbc_h2="0.8.4.RELEASE",
    ),
    template_vertx=TemplateVertx(vertx_plugin="1.1.3"),
)


def default_versions() -> VersionData:
    """Return the versions bundled with the wizard."""
    return DEFAULT_VERSIONS


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

class VersionClient:
    """Async client for the remote version document.

    One GET per ``fetch`` call; no retries and no caching.
    """

    def __init__(
        self,
        url: str = DEFAULT_VERSIONS_URL,
        timeout: float = 10.0,
        connect_timeout: float = 5.0,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.connect_timeout = connect_timeout

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` with a bounded timeout."""
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout, connect=self.connect_timeout),
            follow_redirects=True,
        )

    async def fetch(self) -> VersionData:
        """Download and validate the version document.

        Raises:
            VersionFetchError: On connection failures, timeouts, non-2xx
                responses, or payloads that do not match ``VersionData``.
        """
        try:
            async with self._client() as client:
                response = await client.get(self.url)
                response.raise_for_status()
                data = response.json()
        except httpx.ConnectError as exc:
            raise VersionFetchError(
                f"Cannot connect to version service at {self.url}: {exc}", url=self.url
            ) from exc
        except httpx.TimeoutException as exc:
            raise VersionFetchError(
                f"Version request timed out after {self.timeout}s.", url=self.url
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise VersionFetchError(
                f"Version service returned HTTP {exc.response.status_code}",
                url=self.url,
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise VersionFetchError(
                f"Could not read version document: {exc}", url=self.url
            ) from exc

        try:
            return VersionData.model_validate(data)
        except ValidationError as exc:
            raise VersionFetchError(
                f"Malformed version document: {exc.error_count()} validation error(s)",
                url=self.url,
            ) from exc


# ---------------------------------------------------------------------------
# Provider with static fallback
# ---------------------------------------------------------------------------

class VersionProvider:
    """Resolves a ``VersionData`` and never raises.

    When *client* is ``None`` (offline mode) the bundled defaults are returned
    without any network access.
    """

    def __init__(self, client: Optional[VersionClient] = None) -> None:
        self.client = client

    async def resolve(self) -> VersionData:
        if self.client is None:
            return default_versions()
        try:
            return await self.client.fetch()
        except VersionFetchError as exc:
            print_warning(f"{escape(str(exc))} -- using bundled versions.")
            return default_versions()
        except Exception as exc:  # noqa: BLE001
            print_warning(
                f"Unexpected error fetching versions: {escape(str(exc))} -- using bundled versions."
            )
            return default_versions()
