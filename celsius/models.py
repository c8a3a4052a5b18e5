"""Value types exchanged with the API."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class KycStatus(str, Enum):
    """KYC state of a user. Transitions are owned by the server.

    PENDING: waiting on the user to provide documents
    COMPLETED: documents provided, awaiting verification
    PASSED: user was successfully verified
    REJECTED: user failed verification
    """
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    PASSED = "PASSED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class Pagination:
    """Which page of results to fetch and how many results per page.

    Bounds are enforced by the server, not locally.
    """
    page: int = 1
    per_page: int = 20

    def to_params(self) -> dict[str, int]:
        return {"page": self.page, "perPage": self.per_page}


@dataclass(frozen=True)
class TransactionPage:
    """One page of transactions plus the server's pagination header."""
    pagination: dict[str, Any] = field(default_factory=dict)
    record: list[dict[str, Any]] = field(default_factory=list)

    def __iter__(self):
        return iter(self.record)

    def __len__(self) -> int:
        return len(self.record)
