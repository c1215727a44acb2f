"""Per-operation request options.

Every field defaults to ``None``; a ``None`` option is left out of the
request instead of being sent as null.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MsigsClientOptions:
    """Result-size ceilings supplied up front.

    When both are set the client never asks the service for them.
    """

    max_proposal_limit: int | None = None
    max_approval_limit: int | None = None


@dataclass
class GetProposalOptions:
    globalseq: int | None = None
    version_history: bool | None = None


@dataclass
class GetProposalHistoryOptions:
    status: str | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass
class GetProposalsOptions:
    proposer: str | None = None
    status: str | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass
class GetActiveOptions:
    limit: int | None = None
    offset: int | None = None
    sort_by: str | None = None


@dataclass
class GetApprovalsOptions:
    globalseq: int | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass
class GetActivityOptions:
    limit: int | None = None
    offset: int | None = None
    action_type: str | None = None


@dataclass
class GetApproverProposalsOptions:
    status: str | None = None
    include_approved: bool | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass
class SearchProposalsOptions:
    status: str | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass
class DebugProposalOptions:
    globalseq: int | None = None
