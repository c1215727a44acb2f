"""msigs インデックスサービスクライアント"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from .config import MsigsClientConfig
from .exceptions import LimitExceededError
from .logger import configure_logging
from .models import (
    DebugProposalResponse,
    GetActivityResponse,
    GetApprovalsResponse,
    GetApproverProposalsResponse,
    GetProposalHistoryResponse,
    GetProposalResponse,
    GetProposalsResponse,
    SearchProposalsResponse,
    ServiceStatus,
)
from .options import (
    DebugProposalOptions,
    GetActiveOptions,
    GetActivityOptions,
    GetApprovalsOptions,
    GetApproverProposalsOptions,
    GetProposalHistoryOptions,
    GetProposalOptions,
    GetProposalsOptions,
    MsigsClientOptions,
    SearchProposalsOptions,
)
from .transport import HttpTransport, Transport
from .wire import encode_int32, encode_name, encode_uint64

logger = structlog.get_logger(__name__)

API_PREFIX = "/v1/proposals"

DEFAULT_MAX_PROPOSAL_LIMIT = 20
DEFAULT_MAX_APPROVAL_LIMIT = 100


@dataclass(frozen=True)
class ResolvedLimits:
    """確定済みの結果件数上限。"""

    proposal_limit: int
    approval_limit: int


class MsigsClient:
    """multisig 提案インデックスサービスの非同期クライアント。

    結果件数の上限は初回の limit 指定時 (または get_max_*_limit 呼び出し時) に
    get_status から取得する。取得に失敗した場合はデフォルト値 (20 / 100) を使う。
    一度確定した上限はクライアントの生存期間中変わらない。
    """

    def __init__(self, transport: Transport, options: MsigsClientOptions | None = None) -> None:
        self._transport = transport
        self._options = options or MsigsClientOptions()
        self._limits: ResolvedLimits | None = None

    @classmethod
    def from_config(cls, config: MsigsClientConfig) -> MsigsClient:
        """設定から HttpTransport を使うクライアントを生成し、ログ設定を適用する。"""
        configure_logging(config.log.level, config.log.format)
        return cls(HttpTransport(config), config.client_options())

    async def _call(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        return await self._transport.call(f"{API_PREFIX}/{endpoint}", params)

    async def _ensure_limits_initialized(self) -> ResolvedLimits:
        if self._limits is not None:
            return self._limits

        configured_proposal = self._options.max_proposal_limit
        configured_approval = self._options.max_approval_limit

        if configured_proposal is not None and configured_approval is not None:
            source = "configured"
            limits = ResolvedLimits(configured_proposal, configured_approval)
        else:
            proposal_results: int | None = None
            approval_results: int | None = None
            try:
                status = await self.get_status()
            except Exception as e:
                logger.warning("failed to fetch service limits, using defaults", error=str(e))
                source = "default"
            else:
                source = "service"
                proposal_results = status.max_proposal_results
                approval_results = status.max_approval_results

            # 並行する初回呼び出しが先に確定させていればそちらを使う
            if self._limits is not None:
                return self._limits

            limits = ResolvedLimits(
                proposal_limit=(
                    configured_proposal
                    if configured_proposal is not None
                    else proposal_results or DEFAULT_MAX_PROPOSAL_LIMIT
                ),
                approval_limit=(
                    configured_approval
                    if configured_approval is not None
                    else approval_results or DEFAULT_MAX_APPROVAL_LIMIT
                ),
            )

        self._limits = limits
        logger.debug(
            "resolved result limits",
            source=source,
            proposal_limit=limits.proposal_limit,
            approval_limit=limits.approval_limit,
        )
        return limits

    async def get_max_proposal_limit(self) -> int:
        """提案系エンドポイントの limit 上限を返す。"""
        limits = await self._ensure_limits_initialized()
        return limits.proposal_limit

    async def get_max_approval_limit(self) -> int:
        """承認タイムラインの limit 上限を返す。"""
        limits = await self._ensure_limits_initialized()
        return limits.approval_limit

    async def _proposal_limit(self, limit: int) -> int:
        max_limit = await self.get_max_proposal_limit()
        if limit > max_limit:
            raise LimitExceededError(limit, max_limit)
        return encode_int32(limit)

    async def _approval_limit(self, limit: int) -> int:
        max_limit = await self.get_max_approval_limit()
        if limit > max_limit:
            raise LimitExceededError(limit, max_limit)
        return encode_int32(limit)

    async def get_proposal(
        self,
        proposer: str,
        proposal_name: str,
        options: GetProposalOptions | None = None,
    ) -> GetProposalResponse:
        """提案を取得する。globalseq 指定時はそのバージョンを返す。"""
        options = options or GetProposalOptions()
        params: dict[str, Any] = {
            "proposer": encode_name(proposer),
            "proposal_name": encode_name(proposal_name),
        }
        if options.globalseq is not None:
            params["globalseq"] = encode_uint64(options.globalseq)
        if options.version_history is not None:
            params["version_history"] = options.version_history

        data = await self._call("get_proposal", params)
        return GetProposalResponse.from_dict(data)

    async def get_proposal_history(
        self,
        proposer: str,
        proposal_name: str,
        options: GetProposalHistoryOptions | None = None,
    ) -> GetProposalHistoryResponse:
        """提案のバージョン履歴を取得する。"""
        options = options or GetProposalHistoryOptions()
        params: dict[str, Any] = {
            "proposer": encode_name(proposer),
            "proposal_name": encode_name(proposal_name),
        }
        if options.status is not None:
            params["status"] = options.status
        if options.limit is not None:
            params["limit"] = await self._proposal_limit(options.limit)
        if options.offset is not None:
            params["offset"] = encode_int32(options.offset)

        data = await self._call("get_proposal_history", params)
        return GetProposalHistoryResponse.from_dict(data)

    async def get_proposals(self, options: GetProposalsOptions | None = None) -> GetProposalsResponse:
        """提案一覧を取得する。"""
        options = options or GetProposalsOptions()
        params: dict[str, Any] = {}
        if options.proposer is not None:
            params["proposer"] = encode_name(options.proposer)
        if options.status is not None:
            params["status"] = options.status
        if options.limit is not None:
            params["limit"] = await self._proposal_limit(options.limit)
        if options.offset is not None:
            params["offset"] = encode_int32(options.offset)

        data = await self._call("get_proposals", params)
        return GetProposalsResponse.from_dict(data)

    async def get_active(self, options: GetActiveOptions | None = None) -> GetProposalsResponse:
        """承認待ちの有効な提案一覧を取得する。"""
        options = options or GetActiveOptions()
        params: dict[str, Any] = {}
        if options.limit is not None:
            params["limit"] = await self._proposal_limit(options.limit)
        if options.offset is not None:
            params["offset"] = encode_int32(options.offset)
        if options.sort_by is not None:
            params["sort_by"] = options.sort_by

        data = await self._call("get_active", params)
        return GetProposalsResponse.from_dict(data)

    async def get_approvals(
        self,
        proposer: str,
        proposal_name: str,
        options: GetApprovalsOptions | None = None,
    ) -> GetApprovalsResponse:
        """承認タイムラインを取得する。limit は承認用の上限で検証する。"""
        options = options or GetApprovalsOptions()
        params: dict[str, Any] = {
            "proposer": encode_name(proposer),
            "proposal_name": encode_name(proposal_name),
        }
        if options.globalseq is not None:
            params["globalseq"] = encode_uint64(options.globalseq)
        if options.limit is not None:
            params["limit"] = await self._approval_limit(options.limit)
        if options.offset is not None:
            params["offset"] = encode_int32(options.offset)

        data = await self._call("get_approvals", params)
        return GetApprovalsResponse.from_dict(data)

    async def get_activity(
        self,
        account: str,
        options: GetActivityOptions | None = None,
    ) -> GetActivityResponse:
        """アカウントのアクティビティを取得する。"""
        options = options or GetActivityOptions()
        params: dict[str, Any] = {"account": encode_name(account)}
        if options.limit is not None:
            params["limit"] = await self._proposal_limit(options.limit)
        if options.offset is not None:
            params["offset"] = encode_int32(options.offset)
        if options.action_type is not None:
            params["action_type"] = options.action_type

        data = await self._call("get_activity", params)
        return GetActivityResponse.from_dict(data)

    async def get_approver_proposals(
        self,
        approver: str,
        options: GetApproverProposalsOptions | None = None,
    ) -> GetApproverProposalsResponse:
        """指定アカウントの承認を要求している提案一覧を取得する。"""
        options = options or GetApproverProposalsOptions()
        params: dict[str, Any] = {"approver": encode_name(approver)}
        if options.status is not None:
            params["status"] = options.status
        if options.include_approved is not None:
            params["include_approved"] = options.include_approved
        if options.limit is not None:
            params["limit"] = await self._proposal_limit(options.limit)
        if options.offset is not None:
            params["offset"] = encode_int32(options.offset)

        data = await self._call("get_approver_proposals", params)
        return GetApproverProposalsResponse.from_dict(data)

    async def search_proposals(
        self,
        query: str,
        options: SearchProposalsOptions | None = None,
    ) -> SearchProposalsResponse:
        """提案名をテキスト検索する。"""
        options = options or SearchProposalsOptions()
        params: dict[str, Any] = {"query": query}
        if options.status is not None:
            params["status"] = options.status
        if options.limit is not None:
            params["limit"] = await self._proposal_limit(options.limit)
        if options.offset is not None:
            params["offset"] = encode_int32(options.offset)

        data = await self._call("search_proposals", params)
        return SearchProposalsResponse.from_dict(data)

    async def get_status(self) -> ServiceStatus:
        """サービスの同期状態と上限値を取得する。"""
        data = await self._call("get_status", {})
        return ServiceStatus.from_dict(data)

    async def debug_proposal(
        self,
        proposer: str,
        proposal_name: str,
        options: DebugProposalOptions | None = None,
    ) -> DebugProposalResponse:
        """提案ステータス計算の診断情報を取得する。"""
        options = options or DebugProposalOptions()
        params: dict[str, Any] = {
            "proposer": encode_name(proposer),
            "proposal_name": encode_name(proposal_name),
        }
        if options.globalseq is not None:
            params["globalseq"] = encode_uint64(options.globalseq)

        data = await self._call("debug_proposal", params)
        return DebugProposalResponse.from_dict(data)
