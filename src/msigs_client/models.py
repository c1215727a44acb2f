"""multisig 提案インデックスサービスのレスポンスモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .pagination import PaginationInfo, get_pagination_info


class ProposalStatus(StrEnum):
    """提案ステータス。"""

    PROPOSED = "proposed"
    EXECUTED = "executed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class ActivityAction(StrEnum):
    """アカウントアクティビティの種別。"""

    PROPOSED = "proposed"
    APPROVED = "approved"
    UNAPPROVED = "unapproved"
    EXECUTED = "executed"
    CANCELLED = "cancelled"


class ApprovalAction(StrEnum):
    """承認タイムラインのイベント種別。"""

    APPROVE = "approve"
    UNAPPROVE = "unapprove"
    INVALIDATE = "invalidate"


@dataclass
class PermissionLevel:
    """actor@permission の組。"""

    actor: str
    permission: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PermissionLevel:
        return cls(actor=data.get("actor", ""), permission=data.get("permission", ""))


def _permission_levels(raw: list[dict[str, Any]] | None) -> list[PermissionLevel] | None:
    if raw is None:
        return None
    return [PermissionLevel.from_dict(p) for p in raw]


@dataclass
class Transaction:
    """提案に含まれるトランザクション本体。"""

    expiration: str
    ref_block_num: int = 0
    ref_block_prefix: int = 0
    max_net_usage_words: int = 0
    max_cpu_usage_ms: int = 0
    delay_sec: int = 0
    context_free_actions: list[Any] = field(default_factory=list)
    actions: list[Any] = field(default_factory=list)
    transaction_extensions: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transaction:
        return cls(
            expiration=data.get("expiration", ""),
            ref_block_num=data.get("ref_block_num", 0),
            ref_block_prefix=data.get("ref_block_prefix", 0),
            max_net_usage_words=data.get("max_net_usage_words", 0),
            max_cpu_usage_ms=data.get("max_cpu_usage_ms", 0),
            delay_sec=data.get("delay_sec", 0),
            context_free_actions=data.get("context_free_actions", []),
            actions=data.get("actions", []),
            transaction_extensions=data.get("transaction_extensions", []),
        )


@dataclass
class Proposal:
    """提案の 1 バージョン。

    サマリー項目 (approvals_required など) は一覧系エンドポイントでのみ返される。
    status はサービスが返した文字列をそのまま保持する。
    """

    proposer: str
    proposal_name: str
    status: str
    created_at: str = ""
    created_block: int = 0
    created_trx_id: str = ""
    globalseq: int = 0
    expiration: str = ""
    actions_count: int = 0
    requested_approvals: list[PermissionLevel] | None = None
    provided_approvals: list[PermissionLevel] | None = None
    approvals_required: int | None = None
    approvals_received: int | None = None
    approval_ratio: float | None = None
    time_remaining_seconds: int | None = None
    transaction: Transaction | None = None
    executed_at: str | None = None
    executed_by: str | None = None
    executed_trx_id: str | None = None
    cancelled_at: str | None = None
    cancelled_by: str | None = None
    cancelled_trx_id: str | None = None

    @classmethod
    def _fields_from_dict(cls, data: dict[str, Any]) -> dict[str, Any]:
        transaction = data.get("transaction")
        return {
            "proposer": data.get("proposer", ""),
            "proposal_name": data.get("proposal_name", ""),
            "status": data.get("status", ""),
            "created_at": data.get("created_at", ""),
            "created_block": data.get("created_block", 0),
            "created_trx_id": data.get("created_trx_id", ""),
            "globalseq": data.get("globalseq", 0),
            "expiration": data.get("expiration", ""),
            "actions_count": data.get("actions_count", 0),
            "requested_approvals": _permission_levels(data.get("requested_approvals")),
            "provided_approvals": _permission_levels(data.get("provided_approvals")),
            "approvals_required": data.get("approvals_required"),
            "approvals_received": data.get("approvals_received"),
            "approval_ratio": data.get("approval_ratio"),
            "time_remaining_seconds": data.get("time_remaining_seconds"),
            "transaction": Transaction.from_dict(transaction) if transaction else None,
            "executed_at": data.get("executed_at"),
            "executed_by": data.get("executed_by"),
            "executed_trx_id": data.get("executed_trx_id"),
            "cancelled_at": data.get("cancelled_at"),
            "cancelled_by": data.get("cancelled_by"),
            "cancelled_trx_id": data.get("cancelled_trx_id"),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Proposal:
        """API レスポンス辞書から Proposal を生成する。"""
        return cls(**cls._fields_from_dict(data))


@dataclass
class ProposalVersion:
    """提案のバージョン履歴エントリ。"""

    globalseq: int
    status: str
    timestamp: str
    block_num: int
    trx_id: str
    proposal: Proposal

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProposalVersion:
        return cls(
            globalseq=data.get("globalseq", 0),
            status=data.get("status", ""),
            timestamp=data.get("timestamp", ""),
            block_num=data.get("block_num", 0),
            trx_id=data.get("trx_id", ""),
            proposal=Proposal.from_dict(data.get("proposal", {})),
        )


@dataclass
class ApprovalEvent:
    """承認タイムラインのイベント。"""

    action: str
    actor: str
    permission: str
    timestamp: str
    block_num: int
    globalseq: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApprovalEvent:
        return cls(
            action=data.get("action", ""),
            actor=data.get("actor", ""),
            permission=data.get("permission", ""),
            timestamp=data.get("timestamp", ""),
            block_num=data.get("block_num", 0),
            globalseq=data.get("globalseq", 0),
        )


@dataclass
class ActivityEvent:
    """アカウントアクティビティのイベント。"""

    action: str
    timestamp: str
    proposer: str
    proposal_name: str
    globalseq: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ActivityEvent:
        return cls(
            action=data.get("action", ""),
            timestamp=data.get("timestamp", ""),
            proposer=data.get("proposer", ""),
            proposal_name=data.get("proposal_name", ""),
            globalseq=data.get("globalseq", 0),
        )


@dataclass
class ServiceStatus:
    """サービスの同期状態と結果件数の上限。"""

    head_block_num: int | None = None
    last_irreversible_block_num: int | None = None
    chain_id: str | None = None
    server_version: str | None = None
    accepting_http: bool | None = None
    database_size: int | None = None
    database_size_mb: float | None = None
    last_account_action_seq: int | None = None
    synced: bool | None = None
    max_proposal_results: int | None = None
    max_approval_results: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceStatus:
        return cls(
            head_block_num=data.get("head_block_num"),
            last_irreversible_block_num=data.get("last_irreversible_block_num"),
            chain_id=data.get("chain_id"),
            server_version=data.get("server_version"),
            accepting_http=data.get("accepting_http"),
            database_size=data.get("database_size"),
            database_size_mb=data.get("database_size_mb"),
            last_account_action_seq=data.get("last_account_action_seq"),
            synced=data.get("synced"),
            max_proposal_results=data.get("max_proposal_results"),
            max_approval_results=data.get("max_approval_results"),
        )


class _Paged:
    total: int
    more: bool

    def pagination(self, offset: int, limit: int) -> PaginationInfo:
        """このページのページネーション情報を返す。"""
        return get_pagination_info(offset, limit, self.total, self.more)


@dataclass
class GetProposalResponse(Proposal):
    """get_proposal レスポンス。最新 (または指定) バージョンと履歴。"""

    version_history: list[ProposalVersion] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetProposalResponse:
        history = data.get("version_history")
        return cls(
            **cls._fields_from_dict(data),
            version_history=(
                [ProposalVersion.from_dict(v) for v in history] if history is not None else None
            ),
        )


@dataclass
class GetProposalHistoryResponse(_Paged):
    """get_proposal_history レスポンス。"""

    proposer: str
    proposal_name: str
    versions: list[ProposalVersion]
    more: bool
    total: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetProposalHistoryResponse:
        return cls(
            proposer=data.get("proposer", ""),
            proposal_name=data.get("proposal_name", ""),
            versions=[ProposalVersion.from_dict(v) for v in data.get("versions", [])],
            more=data.get("more", False),
            total=data.get("total", 0),
        )


@dataclass
class GetProposalsResponse(_Paged):
    """get_proposals / get_active レスポンス。"""

    proposals: list[Proposal]
    more: bool
    total: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetProposalsResponse:
        return cls(
            proposals=[Proposal.from_dict(p) for p in data.get("proposals", [])],
            more=data.get("more", False),
            total=data.get("total", 0),
        )


@dataclass
class GetApprovalsResponse(_Paged):
    """get_approvals レスポンス。"""

    proposer: str
    proposal_name: str
    globalseq: int
    timeline: list[ApprovalEvent]
    total: int
    more: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetApprovalsResponse:
        return cls(
            proposer=data.get("proposer", ""),
            proposal_name=data.get("proposal_name", ""),
            globalseq=data.get("globalseq", 0),
            timeline=[ApprovalEvent.from_dict(e) for e in data.get("timeline", [])],
            total=data.get("total", 0),
            more=data.get("more", False),
        )


@dataclass
class GetActivityResponse(_Paged):
    """get_activity レスポンス。"""

    account: str
    activity: list[ActivityEvent]
    more: bool
    total: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetActivityResponse:
        return cls(
            account=data.get("account", ""),
            activity=[ActivityEvent.from_dict(a) for a in data.get("activity", [])],
            more=data.get("more", False),
            total=data.get("total", 0),
        )


@dataclass
class GetApproverProposalsResponse(_Paged):
    """get_approver_proposals レスポンス。"""

    approver: str
    proposals: list[Proposal]
    more: bool
    total: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetApproverProposalsResponse:
        return cls(
            approver=data.get("approver", ""),
            proposals=[Proposal.from_dict(p) for p in data.get("proposals", [])],
            more=data.get("more", False),
            total=data.get("total", 0),
        )


@dataclass
class SearchProposalsResponse(_Paged):
    """search_proposals レスポンス。"""

    query: str
    proposals: list[Proposal]
    more: bool
    total: int
    status: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchProposalsResponse:
        return cls(
            query=data.get("query", ""),
            proposals=[Proposal.from_dict(p) for p in data.get("proposals", [])],
            more=data.get("more", False),
            total=data.get("total", 0),
            status=data.get("status"),
        )


@dataclass
class DebugProposalResponse:
    """提案ステータス計算の診断情報。"""

    proposer: str
    proposal_name: str
    globalseq: int
    actions_count: int
    stored_status_byte: int
    stored_status_string: str
    computed_status_byte: int
    computed_status_string: str
    status_changed: bool
    stored_proposed_at: int
    stored_executed_at: int
    stored_cancelled_at: int
    stored_expiration_unix: int
    stored_expiration_iso: str
    current_time_unix: int
    current_time_iso: str
    is_expiration_past: bool
    time_until_expiration: int
    approvals_requested: int
    approvals_provided: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DebugProposalResponse:
        return cls(
            proposer=data.get("proposer", ""),
            proposal_name=data.get("proposal_name", ""),
            globalseq=data.get("globalseq", 0),
            actions_count=data.get("actions_count", 0),
            stored_status_byte=data.get("stored_status_byte", 0),
            stored_status_string=data.get("stored_status_string", ""),
            computed_status_byte=data.get("computed_status_byte", 0),
            computed_status_string=data.get("computed_status_string", ""),
            status_changed=data.get("status_changed", False),
            stored_proposed_at=data.get("stored_proposed_at", 0),
            stored_executed_at=data.get("stored_executed_at", 0),
            stored_cancelled_at=data.get("stored_cancelled_at", 0),
            stored_expiration_unix=data.get("stored_expiration_unix", 0),
            stored_expiration_iso=data.get("stored_expiration_iso", ""),
            current_time_unix=data.get("current_time_unix", 0),
            current_time_iso=data.get("current_time_iso", ""),
            is_expiration_past=data.get("is_expiration_past", False),
            time_until_expiration=data.get("time_until_expiration", 0),
            approvals_requested=data.get("approvals_requested", 0),
            approvals_provided=data.get("approvals_provided", 0),
        )
