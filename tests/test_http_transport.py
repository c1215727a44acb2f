"""HttpTransport のユニットテスト（respx モック）"""

import json

import httpx
import pytest
import respx
from msigs_client.client import MsigsClient
from msigs_client.config import MsigsClientConfig
from msigs_client.exceptions import LimitExceededError, MsigsClientError, MsigsClientErrorCodes
from msigs_client.options import GetProposalsOptions
from msigs_client.transport import HttpTransport

BASE_URL = "http://msigs-server:8080"


def make_transport() -> HttpTransport:
    return HttpTransport(MsigsClientConfig(base_url=BASE_URL))


def make_transport_with_api_key() -> HttpTransport:
    return HttpTransport(MsigsClientConfig(base_url=BASE_URL, api_key="test-key"))


@respx.mock
async def test_call_posts_params_as_json() -> None:
    """パラメータが JSON ボディとして POST されること。"""
    route = respx.post(f"{BASE_URL}/v1/proposals/get_proposals").mock(
        return_value=httpx.Response(200, json={"proposals": [], "more": False, "total": 0})
    )
    transport = make_transport()
    data = await transport.call("/v1/proposals/get_proposals", {"proposer": "alice", "limit": 10})
    assert data == {"proposals": [], "more": False, "total": 0}
    request = route.calls.last.request
    assert json.loads(request.content) == {"proposer": "alice", "limit": 10}
    assert request.headers["Content-Type"] == "application/json"
    assert "X-API-Key" not in request.headers


@respx.mock
async def test_call_with_api_key_sets_header() -> None:
    """api_key が設定された場合に X-API-Key ヘッダーが付与されること。"""
    route = respx.post(f"{BASE_URL}/v1/proposals/get_status").mock(
        return_value=httpx.Response(200, json={})
    )
    transport = make_transport_with_api_key()
    await transport.call("/v1/proposals/get_status", {})
    assert route.calls.last.request.headers["X-API-Key"] == "test-key"


@respx.mock
async def test_call_not_found() -> None:
    """404 で MsigsClientError(NOT_FOUND) が発生すること。"""
    respx.post(f"{BASE_URL}/v1/proposals/get_proposal").mock(
        return_value=httpx.Response(404, text="Not found")
    )
    transport = make_transport()
    with pytest.raises(MsigsClientError) as exc_info:
        await transport.call("/v1/proposals/get_proposal", {"proposer": "nobody"})
    assert exc_info.value.code == MsigsClientErrorCodes.NOT_FOUND


@respx.mock
async def test_call_http_error() -> None:
    """500 エラーで MsigsClientError(HTTP_ERROR) になること。"""
    respx.post(f"{BASE_URL}/v1/proposals/get_active").mock(
        return_value=httpx.Response(500, text="Internal Server Error")
    )
    transport = make_transport()
    with pytest.raises(MsigsClientError) as exc_info:
        await transport.call("/v1/proposals/get_active", {})
    assert exc_info.value.code == MsigsClientErrorCodes.HTTP_ERROR
    assert "HTTP 500" in str(exc_info.value)


@respx.mock
async def test_call_invalid_json() -> None:
    """JSON でないレスポンスで MsigsClientError(DECODE_ERROR) になること。"""
    respx.post(f"{BASE_URL}/v1/proposals/get_status").mock(
        return_value=httpx.Response(200, text="<html>oops</html>")
    )
    transport = make_transport()
    with pytest.raises(MsigsClientError) as exc_info:
        await transport.call("/v1/proposals/get_status", {})
    assert exc_info.value.code == MsigsClientErrorCodes.DECODE_ERROR
    assert exc_info.value.__cause__ is not None


@respx.mock
async def test_call_non_object_json() -> None:
    respx.post(f"{BASE_URL}/v1/proposals/get_status").mock(
        return_value=httpx.Response(200, json=[1, 2, 3])
    )
    transport = make_transport()
    with pytest.raises(MsigsClientError) as exc_info:
        await transport.call("/v1/proposals/get_status", {})
    assert exc_info.value.code == MsigsClientErrorCodes.DECODE_ERROR


async def test_call_network_error() -> None:
    """ネットワークエラーの場合に MsigsClientError(HTTP_ERROR) になること。"""
    with respx.mock:
        respx.post(f"{BASE_URL}/v1/proposals/get_status").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )
        transport = make_transport()
        with pytest.raises(MsigsClientError) as exc_info:
            await transport.call("/v1/proposals/get_status", {})
        assert exc_info.value.code == MsigsClientErrorCodes.HTTP_ERROR
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_client_falls_back_to_defaults_on_network_error() -> None:
    """get_status がネットワークエラーでも既定の上限で動作すること。"""
    with respx.mock:
        respx.post(f"{BASE_URL}/v1/proposals/get_status").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )
        client = MsigsClient(make_transport())
        assert await client.get_max_proposal_limit() == 20
        assert await client.get_max_approval_limit() == 100


@respx.mock(assert_all_called=False)
async def test_client_rejects_limit_without_sending_request() -> None:
    respx.post(f"{BASE_URL}/v1/proposals/get_status").mock(
        return_value=httpx.Response(
            200, json={"max_proposal_results": 20, "max_approval_results": 100}
        )
    )
    proposals = respx.post(f"{BASE_URL}/v1/proposals/get_proposals").mock(
        return_value=httpx.Response(200, json={"proposals": [], "more": False, "total": 0})
    )
    client = MsigsClient(make_transport())
    with pytest.raises(LimitExceededError, match="Limit cannot exceed 20"):
        await client.get_proposals(GetProposalsOptions(limit=50))
    assert not proposals.called
