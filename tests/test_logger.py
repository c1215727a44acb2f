"""ログ出力のユニットテスト"""

from collections.abc import Iterator

import pytest
import structlog
from msigs_client.client import MsigsClient
from msigs_client.config import LogSection, MsigsClientConfig
from msigs_client.logger import configure_logging
from msigs_client.options import MsigsClientOptions
from msigs_client.transport import InMemoryTransport
from structlog.testing import capture_logs

STATUS_PATH = "/v1/proposals/get_status"


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


def resolved_events(logs: list[dict]) -> list[dict]:
    return [e for e in logs if e["event"] == "resolved result limits"]


async def test_discovery_failure_logs_warning() -> None:
    """get_status の失敗時に warning を出し、source=default で確定すること。"""
    transport = InMemoryTransport()
    transport.set_error(STATUS_PATH, ConnectionError("Network error"))
    client = MsigsClient(transport)
    with capture_logs() as logs:
        await client.get_max_proposal_limit()

    warnings = [e for e in logs if e["log_level"] == "warning"]
    assert len(warnings) == 1
    assert warnings[0]["event"] == "failed to fetch service limits, using defaults"
    assert warnings[0]["error"] == "Network error"
    [resolved] = resolved_events(logs)
    assert resolved["source"] == "default"
    assert resolved["proposal_limit"] == 20
    assert resolved["approval_limit"] == 100


async def test_discovery_from_service_logs_source() -> None:
    transport = InMemoryTransport()
    transport.set_response(STATUS_PATH, {"max_proposal_results": 30, "max_approval_results": 150})
    client = MsigsClient(transport)
    with capture_logs() as logs:
        await client.get_max_approval_limit()

    assert not [e for e in logs if e["log_level"] == "warning"]
    [resolved] = resolved_events(logs)
    assert resolved["log_level"] == "debug"
    assert resolved["source"] == "service"
    assert resolved["approval_limit"] == 150


async def test_configured_limits_log_source() -> None:
    client = MsigsClient(
        InMemoryTransport(), MsigsClientOptions(max_proposal_limit=50, max_approval_limit=200)
    )
    with capture_logs() as logs:
        await client.get_max_proposal_limit()
        await client.get_max_proposal_limit()

    # 確定は 1 回だけ
    [resolved] = resolved_events(logs)
    assert resolved["source"] == "configured"


def test_from_config_applies_log_section() -> None:
    """from_config が log セクションを structlog に適用すること。"""
    assert not structlog.is_configured()
    MsigsClient.from_config(
        MsigsClientConfig(base_url="http://msigs", log=LogSection(level="DEBUG", format="text"))
    )
    assert structlog.is_configured()
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_configure_logging_json_renderer() -> None:
    configure_logging(level="INFO", format="json")
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
