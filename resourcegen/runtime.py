"""HTTP call-builder used by generated accessor modules.

Generated code never talks to httpx directly. Each accessor attribute is an
ApiMethod built from {path, method, content_type}:

    client = create_client(base_url="https://example.test", token="...")
    tasks = TasksApi(client)
    tasks.getTasksItemApi(params={"id": 42})
    tasks.patchTasksItemApi(params={"id": 42}, body={"done": True})

There is no module-level default client; build one at the composition root.
"""

from __future__ import annotations

import json
import re
from typing import Any

import httpx

from .gen_logging import get_logger

logger = get_logger(__name__)

MERGE_PATCH = "application/merge-patch+json"

_PLACEHOLDER = re.compile(r"\{([^}]+)\}")


class ApiError(Exception):
    """An API call failed.

    status_code is None when no response was received at all.
    """

    def __init__(self, status_code: int | None, message: str, payload: Any = None):
        super().__init__(f"{status_code} {message}" if status_code else message)
        self.status_code = status_code
        self.message = message
        self.payload = payload


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type.endswith("/json") or media_type.endswith("+json")


def _serialize_query(query: dict[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten query params; lists repeat as key[]=a&key[]=b, None is dropped."""
    items: list[tuple[str, str]] = []
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            items.extend((f"{key}[]", _query_value(v)) for v in value)
        else:
            items.append((key, _query_value(value)))
    return items


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _error_message(response: httpx.Response) -> tuple[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return response.reason_phrase or "API Error", response.text
    if isinstance(payload, dict):
        for key in ("message", "detail", "hydra:description", "title"):
            if isinstance(payload.get(key), str):
                return payload[key], payload
    return "API Error", payload


class ApiMethod:
    """A callable bound to one (path, method, content type)."""

    def __init__(self, client: ApiClient, path: str, method: str, content_type: str):
        self.client = client
        self.path = path
        self.method = method
        self.content_type = content_type

    def __call__(
        self,
        params: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return self.client.request(
            self.method,
            self.path,
            params=params,
            query=query,
            body=body,
            content_type=self.content_type,
            headers=headers,
        )

    def __repr__(self) -> str:
        return f"<ApiMethod {self.method.upper()} {self.path} ({self.content_type})>"


class ApiClient:
    """Thin wrapper around httpx.Client that knows the API prefix and token."""

    def __init__(
        self,
        base_url: str,
        api_prefix: str = "",
        token: str | None = None,
        auth_scheme: str = "Bearer",
        headers: dict[str, str] | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_prefix = api_prefix.rstrip("/")
        self.token = token
        self.auth_scheme = auth_scheme
        self._http = httpx.Client(
            base_url=base_url,
            headers=headers or {},
            timeout=timeout,
            transport=transport or httpx.HTTPTransport(retries=1),
        )

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def create_api_method(
        self,
        path: str,
        method: str,
        content_type: str = "application/json",
    ) -> ApiMethod:
        """Bind an operation so it can be called later with params/query/body."""
        return ApiMethod(self, path, method, content_type)

    def build_url(self, path: str, params: dict[str, Any] | None = None) -> str:
        """Fill {placeholders} from params and prepend the API prefix.

        Placeholders without a value are left untouched.
        """
        params = params or {}

        def substitute(match: re.Match) -> str:
            key = match.group(1)
            return str(params[key]) if params.get(key) is not None else match.group(0)

        url = _PLACEHOLDER.sub(substitute, path)
        if self.api_prefix:
            url = f"{self.api_prefix}/{url.lstrip('/')}"
        return url

    def _headers(self, content_type: str, extra: dict[str, str] | None) -> dict[str, str]:
        headers = {
            "Content-Type": content_type,
            # Servers answer a merge-patch with the plain representation.
            "Accept": "application/json" if content_type == MERGE_PATCH else content_type,
        }
        if self.token:
            headers["Authorization"] = f"{self.auth_scheme} {self.token}"
        headers.update(extra or {})
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        body: Any = None,
        content_type: str = "application/json",
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Perform one call and decode the response.

        Returns decoded JSON for JSON responses, text otherwise, and None
        for empty bodies. Raises ApiError on HTTP and transport errors.
        """
        url = self.build_url(path, params)
        content = None
        if body is not None:
            content = json.dumps(body).encode() if _is_json(content_type) else body

        logger.debug(f"{method.upper()} {url}")
        try:
            response = self._http.request(
                method.upper(),
                url,
                params=_serialize_query(query),
                content=content,
                headers=self._headers(content_type, headers),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message, payload = _error_message(exc.response)
            logger.error(f"API Error {exc.response.status_code}: {message}")
            raise ApiError(exc.response.status_code, message, payload) from exc
        except httpx.RequestError as exc:
            logger.error(f"API call failed: {exc}")
            raise ApiError(None, "Network Error") from exc

        if not response.content:
            return None
        if _is_json(response.headers.get("content-type", "")):
            return response.json()
        return response.text


def create_client(base_url: str, **kwargs: Any) -> ApiClient:
    """Build an independent ApiClient; see ApiClient for keyword arguments."""
    return ApiClient(base_url, **kwargs)
