"""インデックスサービスへのトランスポート実装"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any

import httpx
import structlog

from .config import MsigsClientConfig
from .exceptions import MsigsClientError, MsigsClientErrorCodes

logger = structlog.get_logger(__name__)


class Transport(ABC):
    """パスとパラメータを受け取りデコード済み JSON を返すトランスポート。"""

    @abstractmethod
    async def call(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        """リモート呼び出しを行い、デコード済みレスポンスを返す。"""
        ...


class HttpTransport(Transport):
    """httpx を使った HTTP トランスポート。

    パラメータは JSON ボディとして POST する。
    """

    def __init__(self, config: MsigsClientConfig) -> None:
        self._config = config
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if config.api_key:
            headers["X-API-Key"] = config.api_key
        self._headers = headers

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=self._headers,
            timeout=self._config.timeout_seconds,
        )

    def _handle_error(self, resp: httpx.Response, path: str) -> None:
        if resp.status_code == 404:
            raise MsigsClientError(
                code=MsigsClientErrorCodes.NOT_FOUND,
                message=f"{path}: not found",
            )
        if resp.status_code >= 400:
            raise MsigsClientError(
                code=MsigsClientErrorCodes.HTTP_ERROR,
                message=f"{path}: HTTP {resp.status_code}: {resp.text}",
            )

    def _decode(self, resp: httpx.Response, path: str) -> dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as e:
            raise MsigsClientError(
                code=MsigsClientErrorCodes.DECODE_ERROR,
                message=f"{path}: invalid JSON response",
                cause=e,
            ) from e
        if not isinstance(data, dict):
            raise MsigsClientError(
                code=MsigsClientErrorCodes.DECODE_ERROR,
                message=f"{path}: expected a JSON object, got {type(data).__name__}",
            )
        return data

    async def call(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        logger.debug("msigs request", path=path, params=sorted(params))
        try:
            async with self._make_client() as client:
                resp = await client.post(path, json=params)
            self._handle_error(resp, path)
            return self._decode(resp, path)
        except MsigsClientError:
            raise
        except Exception as e:
            raise MsigsClientError(
                code=MsigsClientErrorCodes.HTTP_ERROR,
                message=f"Failed to call {path}: {e}",
                cause=e,
            ) from e


class InMemoryTransport(Transport):
    """テスト用インメモリトランスポート。呼び出しを記録する。"""

    def __init__(self) -> None:
        self._responses: dict[str, dict[str, Any]] = {}
        self._errors: dict[str, Exception] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def set_response(self, path: str, response: dict[str, Any]) -> None:
        self._responses[path] = response

    def set_error(self, path: str, error: Exception) -> None:
        self._errors[path] = error

    def calls_to(self, path: str) -> list[dict[str, Any]]:
        """指定パスへの呼び出しパラメータ一覧を返す。"""
        return [params for p, params in self.calls if p == path]

    async def call(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((path, dict(params)))
        # 実トランスポート同様にイベントループへ制御を返す
        await asyncio.sleep(0)
        if path in self._errors:
            raise self._errors[path]
        if path not in self._responses:
            raise MsigsClientError(
                code=MsigsClientErrorCodes.NOT_FOUND,
                message=f"{path}: no response registered",
            )
        return self._responses[path]
