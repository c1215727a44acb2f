"""msigs proposal index client library."""

from .client import (
    DEFAULT_MAX_APPROVAL_LIMIT,
    DEFAULT_MAX_PROPOSAL_LIMIT,
    MsigsClient,
    ResolvedLimits,
)
from .config import LogSection, MsigsClientConfig, load_config
from .exceptions import LimitExceededError, MsigsClientError, MsigsClientErrorCodes
from .logger import configure_logging
from .models import (
    ActivityAction,
    ActivityEvent,
    ApprovalAction,
    ApprovalEvent,
    DebugProposalResponse,
    GetActivityResponse,
    GetApprovalsResponse,
    GetApproverProposalsResponse,
    GetProposalHistoryResponse,
    GetProposalResponse,
    GetProposalsResponse,
    PermissionLevel,
    Proposal,
    ProposalStatus,
    ProposalVersion,
    SearchProposalsResponse,
    ServiceStatus,
    Transaction,
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
from .pagination import PaginationInfo, get_pagination_info
from .transport import HttpTransport, InMemoryTransport, Transport

__all__ = [
    "MsigsClient",
    "MsigsClientOptions",
    "ResolvedLimits",
    "DEFAULT_MAX_PROPOSAL_LIMIT",
    "DEFAULT_MAX_APPROVAL_LIMIT",
    "Transport",
    "HttpTransport",
    "InMemoryTransport",
    "MsigsClientConfig",
    "LogSection",
    "load_config",
    "configure_logging",
    "MsigsClientError",
    "MsigsClientErrorCodes",
    "LimitExceededError",
    "PaginationInfo",
    "get_pagination_info",
    "GetProposalOptions",
    "GetProposalHistoryOptions",
    "GetProposalsOptions",
    "GetActiveOptions",
    "GetApprovalsOptions",
    "GetActivityOptions",
    "GetApproverProposalsOptions",
    "SearchProposalsOptions",
    "DebugProposalOptions",
    "ProposalStatus",
    "ActivityAction",
    "ApprovalAction",
    "PermissionLevel",
    "Transaction",
    "Proposal",
    "ProposalVersion",
    "ApprovalEvent",
    "ActivityEvent",
    "ServiceStatus",
    "GetProposalResponse",
    "GetProposalHistoryResponse",
    "GetProposalsResponse",
    "GetApprovalsResponse",
    "GetActivityResponse",
    "GetApproverProposalsResponse",
    "SearchProposalsResponse",
    "DebugProposalResponse",
]
