"""
types shared by the folder operations and the entry points

listing pages and transfer results are plain dataclasses, the direct
invocation contract is a set of TypedDicts like the lambda payloads they model.
"""

from dataclasses import dataclass, field
from typing import Any, Literal, TypedDict

TransferStatus = Literal["success", "partial_failure", "failure"]


@dataclass
class ListingPage:
    """one list_objects_v2 response reduced to what the operations need"""

    keys: list[str]
    is_truncated: bool = False
    next_continuation_token: str | None = None


@dataclass
class TransferFailure:
    key: str | None  # None when the listing itself failed
    error: str


@dataclass
class TransferResult:
    """outcome of a folder operation - callers check status instead of reading logs"""

    transferred: list[str] = field(default_factory=list)
    failures: list[TransferFailure] = field(default_factory=list)

    @property
    def status(self) -> TransferStatus:
        if not self.failures:
            return "success"
        if self.transferred:
            return "partial_failure"
        return "failure"

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def record_failure(self, key: str | None, error: Exception) -> None:
        self.failures.append(TransferFailure(key=key, error=f"{type(error).__name__}: {error}"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "transferred": len(self.transferred),
            "failed": len(self.failures),
            "failures": [{"key": f.key, "error": f.error} for f in self.failures],
        }


class DirectInvocationRequest(TypedDict, total=False):
    """payload contract for direct lambda calls"""

    operation: Literal["fetch_folder", "copy_folder", "save_object"]
    prefix: str
    local_dir: str
    source_prefix: str
    destination_prefix: str
    continuation_token: str | None
    relative_path: str
    content: str


class DirectInvocationResponse(TypedDict):
    """complete lambda response envelope - status code + payload"""

    statusCode: int
    response: dict[str, Any]


STATUS_CODES: dict[TransferStatus, int] = {"success": 200, "partial_failure": 207, "failure": 500}


def create_result_response(operation: str, result: TransferResult) -> DirectInvocationResponse:
    return {"statusCode": STATUS_CODES[result.status], "response": {"operation": operation, **result.to_dict()}}


def create_error_response(status_code: int, error_message: str) -> DirectInvocationResponse:
    return {"statusCode": status_code, "response": {"error": error_message}}
