"""httpx-backed client for the Contentful Content Management API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from contentform.core.contracts.client import (
    ContentfulClient,
    ContentTypeClient,
    EntryClient,
    EnvironmentClient,
    WebhookClient,
)
from contentform.core.contracts.exceptions import ProviderError, TransportError
from contentform.core.contracts.remote import Environment, RemoteContentType, RemoteEntry, RemoteWebhook
from contentform.core.providers.contentful.errors import error_from_response

_LOG = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.contentful.com"
MEDIA_TYPE = "application/vnd.contentful.management.v1+json"

M = TypeVar("M", bound=BaseModel)


class HttpContentfulClient(ContentfulClient):
    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

        self.environments = HttpEnvironmentClient(self)
        self.entries = HttpEntryClient(self)
        self.content_types = HttpContentTypeClient(self)
        self.webhooks = HttpWebhookClient(self)

    async def __aenter__(self) -> HttpContentfulClient:
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            transport=self._transport,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Content-Type": MEDIA_TYPE,
            },
            timeout=httpx.Timeout(self._timeout),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    def _require_http(self) -> httpx.AsyncClient:
        if self._http is None:
            raise ProviderError("Client is not initialized. Use 'async with'.")
        return self._http

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
        version: int | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any] | None:
        """Send one request; return the decoded body, or ``None`` for empty responses."""
        http = self._require_http()
        request_headers = dict(headers or {})
        if version is not None:
            request_headers["X-Contentful-Version"] = str(version)

        _LOG.debug("%s %s (version=%s)", method, path, version)
        try:
            response = await http.request(method, path, json=body, headers=request_headers)
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        if response.is_error:
            raise error_from_response(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"{method} {path} returned a non-JSON body ({response.status_code})",
                detail=response.text[:200],
            ) from exc


def _parse(model: type[M], data: Any) -> M:
    """Validate a response body, reporting shape mismatches as provider errors."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise TransportError(f"unexpected {model.__name__} response from the API", detail=str(exc)) from exc


def _environment_path(env: Environment) -> str:
    return f"/spaces/{env.space_id}/environments/{env.id}"


class HttpEnvironmentClient(EnvironmentClient):
    def __init__(self, api: HttpContentfulClient) -> None:
        self._api = api

    async def get(self, space_id: str, env_id: str) -> Environment:
        data = await self._api.request("GET", f"/spaces/{space_id}/environments/{env_id}")
        return _parse(Environment, data)


class HttpEntryClient(EntryClient):
    def __init__(self, api: HttpContentfulClient) -> None:
        self._api = api

    async def get(self, env: Environment, entry_id: str) -> RemoteEntry:
        data = await self._api.request("GET", f"{_environment_path(env)}/entries/{entry_id}")
        return _parse(RemoteEntry, data)

    async def upsert(self, env: Environment, content_type_id: str, entry: RemoteEntry) -> RemoteEntry:
        headers = {"X-Contentful-Content-Type": content_type_id}
        body = {"fields": entry.fields}
        if entry.sys.id:
            data = await self._api.request(
                "PUT",
                f"{_environment_path(env)}/entries/{entry.sys.id}",
                body=body,
                version=entry.sys.version,
                headers=headers,
            )
        else:
            data = await self._api.request("POST", f"{_environment_path(env)}/entries", body=body, headers=headers)
        return _parse(RemoteEntry, data)

    async def delete(self, env: Environment, entry_id: str) -> None:
        await self._api.request("DELETE", f"{_environment_path(env)}/entries/{entry_id}")

    async def _state(self, method: str, state: str, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        data = await self._api.request(
            method, f"{_environment_path(env)}/entries/{entry.sys.id}/{state}", version=entry.sys.version
        )
        return _parse(RemoteEntry, data)

    async def publish(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        return await self._state("PUT", "published", env, entry)

    async def unpublish(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        return await self._state("DELETE", "published", env, entry)

    async def archive(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        return await self._state("PUT", "archived", env, entry)

    async def unarchive(self, env: Environment, entry: RemoteEntry) -> RemoteEntry:
        return await self._state("DELETE", "archived", env, entry)


class HttpContentTypeClient(ContentTypeClient):
    def __init__(self, api: HttpContentfulClient) -> None:
        self._api = api

    async def get(self, env: Environment, content_type_id: str) -> RemoteContentType:
        data = await self._api.request("GET", f"{_environment_path(env)}/content_types/{content_type_id}")
        return _parse(RemoteContentType, data)

    async def upsert(self, env: Environment, content_type: RemoteContentType) -> RemoteContentType:
        body = content_type.to_wire()
        body.pop("sys", None)
        if content_type.sys.id:
            data = await self._api.request(
                "PUT",
                f"{_environment_path(env)}/content_types/{content_type.sys.id}",
                body=body,
                version=content_type.sys.version,
            )
        else:
            data = await self._api.request("POST", f"{_environment_path(env)}/content_types", body=body)
        return _parse(RemoteContentType, data)

    async def delete(self, env: Environment, content_type_id: str) -> None:
        await self._api.request("DELETE", f"{_environment_path(env)}/content_types/{content_type_id}")

    async def activate(self, env: Environment, content_type: RemoteContentType) -> RemoteContentType:
        data = await self._api.request(
            "PUT",
            f"{_environment_path(env)}/content_types/{content_type.sys.id}/published",
            version=content_type.sys.version,
        )
        return _parse(RemoteContentType, data)

    async def deactivate(self, env: Environment, content_type: RemoteContentType) -> RemoteContentType:
        data = await self._api.request(
            "DELETE", f"{_environment_path(env)}/content_types/{content_type.sys.id}/published"
        )
        return _parse(RemoteContentType, data)


class HttpWebhookClient(WebhookClient):
    def __init__(self, api: HttpContentfulClient) -> None:
        self._api = api

    async def get(self, space_id: str, webhook_id: str) -> RemoteWebhook:
        data = await self._api.request("GET", f"/spaces/{space_id}/webhook_definitions/{webhook_id}")
        return _parse(RemoteWebhook, data)

    async def upsert(self, space_id: str, webhook: RemoteWebhook) -> RemoteWebhook:
        body = webhook.to_wire()
        body.pop("sys", None)
        if webhook.sys.id:
            data = await self._api.request(
                "PUT",
                f"/spaces/{space_id}/webhook_definitions/{webhook.sys.id}",
                body=body,
                version=webhook.sys.version,
            )
        else:
            data = await self._api.request("POST", f"/spaces/{space_id}/webhook_definitions", body=body)
        return _parse(RemoteWebhook, data)

    async def delete(self, space_id: str, webhook: RemoteWebhook) -> None:
        await self._api.request("DELETE", f"/spaces/{space_id}/webhook_definitions/{webhook.sys.id}")
