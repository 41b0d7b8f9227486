import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

API_KEY_HEADER = "X-API-Key"


class ArcaneClientError(Exception):
    """Base error for client failures."""


class ArcaneAPIError(ArcaneClientError):
    """Non-2xx response from the Arcane API."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class ArcaneParseError(ArcaneClientError):
    pass


class ArcaneModelValidationError(ArcaneClientError):
    pass


class ArcaneClient:
    """
    Shared HTTP client for the Arcane REST API.
    - Handles the API key header, base URL and timeouts
    - Returns raw dict payloads or envelope models
    - No business logic; resource modules own paths, tools own wording
    """

    def __init__(
        self,
        *,
        host: str,
        api_key: str,
        timeout_seconds: float = 10.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        host = (host or "").rstrip("/")
        api_key = api_key or ""

        if not host:
            raise ValueError("host must be provided.")
        if not api_key:
            raise ValueError("api_key must be provided.")

        self.base_url = host + "/api"
        self._api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("arcane_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(timeout=timeout_seconds)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "ArcaneClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        tool: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Core request method. Exactly one HTTP call per invocation.
        - Raises ArcaneAPIError on non-2xx HTTP responses
        - Raises ArcaneClientError on network/timeout errors (never retried)
        - Raises ArcaneParseError if a success body isn't valid JSON
        - Returns parsed JSON unchanged on success
        """
        method = method.upper()
        url = f"{self.base_url}{path}"

        headers = {API_KEY_HEADER: self._api_key}
        kwargs: Dict[str, Any] = {}
        if body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body

        start = time.perf_counter()
        try:
            resp = await self.http.request(method, url, headers=headers, **kwargs)
        except (httpx.ConnectError, httpx.ReadTimeout, httpx.ConnectTimeout) as exc:
            raise ArcaneClientError(
                f"Network/timeout error calling {method} {path}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ArcaneClientError(f"HTTPX error calling {method} {path}: {exc}") from exc

        duration_ms = int((time.perf_counter() - start) * 1000)

        # structured-ish log without secrets
        self.log.debug(
            "arcane.request",
            extra={
                "tool": tool,
                "method": method,
                "path": path,
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_api_error(resp)

        return self._safe_json(resp)

    def _safe_json(self, resp: httpx.Response) -> Dict[str, Any]:
        # Handle empty responses (204 No Content, etc.)
        if not resp.content:
            return {}

        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise ArcaneParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

    @staticmethod
    def _to_api_error(resp: httpx.Response) -> ArcaneAPIError:
        message = resp.reason_phrase
        try:
            parsed = resp.json()
        except ValueError:
            parsed = None
        if isinstance(parsed, dict) and parsed.get("detail"):
            message = str(parsed["detail"])
        return ArcaneAPIError(resp.status_code, message)

    async def get(self, path: str, *, tool: Optional[str] = None) -> Dict[str, Any]:
        return await self.request("GET", path, tool=tool)

    async def post(
        self, path: str, body: Any = None, *, tool: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.request("POST", path, body, tool=tool)

    async def put(
        self, path: str, body: Any = None, *, tool: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.request("PUT", path, body, tool=tool)

    async def delete(self, path: str, *, tool: Optional[str] = None) -> Dict[str, Any]:
        return await self.request("DELETE", path, tool=tool)

    async def request_model(
        self, model: Type[T], method: str, path: str, body: Any = None, **kwargs: Any
    ) -> T:
        payload = await self.request(method, path, body, **kwargs)
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise ArcaneModelValidationError(
                f"Response did not match model {model.__name__}: {exc}"
            ) from exc
