"""EmailListVerify SDK Types."""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, TypedDict


# Provider vocabulary. Unrecognised values are passed through as-is.
VerificationStatus = Literal[
    "ok",
    "invalid",
    "invalid_mx",
    "accept_all",
    "ok_for_all",
    "disposable",
    "role",
    "email_disabled",
    "dead_server",
    "unknown",
]
ResultType = Literal["all", "clean"]
JobState = Literal["processing", "completed"]

BulkStatus = Dict[str, Any]


class VerificationResult(TypedDict):
    """Result of a single verification answered in plain text."""

    email: str
    status: str
    timestamp: str


class BatchErrorEntry(TypedDict):
    """Batch entry for an address whose request failed."""

    email: str
    status: Literal["error"]
    error: str
    timestamp: str


@dataclass
class BulkJob:
    """Bulk verification job tracked by a BulkVerificationManager."""

    file_id: str
    input_file: str
    output_file: str
    start_time: str
    status: JobState = "processing"
    end_time: Optional[str] = None
    final_status: Optional[BulkStatus] = None
    last_status: Optional[BulkStatus] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the job as a plain mapping, leaving out optional keys never set."""
        data: Dict[str, Any] = {
            "file_id": self.file_id,
            "input_file": self.input_file,
            "output_file": self.output_file,
            "start_time": self.start_time,
            "status": self.status,
        }
        if self.end_time is not None:
            data["end_time"] = self.end_time
        if self.final_status is not None:
            data["final_status"] = self.final_status
        if self.last_status is not None:
            data["last_status"] = self.last_status
        return data
