"""EmailListVerify SDK Client."""

import json
import logging
import os
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

import httpx

from .exceptions import (
    ConfigurationError,
    NotFoundError,
    ProtocolError,
    RequestError,
    TimeoutError,
    ValidationError,
)
from .types import BatchErrorEntry, BulkStatus, ResultType, VerificationResult

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
USER_AGENT = f"emaillistverify-python/{VERSION}"

DEFAULT_BASE_URL = "https://apps.emaillistverify.com/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_BATCH_SIZE = 100
DEFAULT_CHECK_INTERVAL = 10
DEFAULT_MAX_WAIT = 3600
RATE_LIMIT_DELAY = 0.1

RESULT_ENDPOINTS = {
    "all": "downloadApiFile",
    "clean": "downloadCleanFile",
}


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _chunked(items: List[str], size: int) -> Iterator[List[str]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def decode_body(text: str) -> Union[Dict[str, Any], List[Any], str]:
    """Decode a response body.

    JSON objects and arrays are returned decoded. Anything else, including
    bare JSON scalars such as a numeric file id, comes back as trimmed text.
    A JSON string is unwrapped before trimming.
    """
    try:
        decoded = json.loads(text)
    except ValueError:
        return text.strip()
    if isinstance(decoded, (dict, list)):
        return decoded
    if isinstance(decoded, str):
        return decoded.strip()
    return text.strip()


class EmailListVerify:
    """EmailListVerify API Client."""

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the EmailListVerify client.

        Args:
            api_key: Your EmailListVerify API secret.
            timeout: Request timeout in seconds (default: 30).
            base_url: API base URL (default: https://apps.emaillistverify.com/api).
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
        """
        if not api_key:
            raise ConfigurationError("API key is required")
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}")
        if not base_url.startswith("https://"):
            raise ConfigurationError(f"Base URL must use HTTPS: {base_url}")

        self.api_key = api_key
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            params={"secret": self.api_key},
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def from_env(cls, transport: Optional[httpx.BaseTransport] = None) -> "EmailListVerify":
        """Build a client from ``EMAILLISTVERIFY_*`` environment variables."""
        api_key = os.getenv("EMAILLISTVERIFY_API_KEY", "")
        raw_timeout = os.getenv("EMAILLISTVERIFY_TIMEOUT")
        base_url = os.getenv("EMAILLISTVERIFY_BASE_URL", DEFAULT_BASE_URL)

        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(f"Invalid EMAILLISTVERIFY_TIMEOUT: {raw_timeout!r}")

        return cls(api_key, timeout=timeout, base_url=base_url, transport=transport)

    def __enter__(self) -> "EmailListVerify":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _send(
        self,
        endpoint: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Issue one request and return the successful response."""
        logger.debug("%s %s", method, endpoint)
        try:
            response = self._client.request(
                method=method,
                url=f"/{endpoint}",
                params=params,
                files=files,
            )
        except httpx.TimeoutException as e:
            raise RequestError(f"Request timed out: {e}", "TIMEOUT")
        except httpx.RequestError as e:
            raise RequestError(f"Request failed: {e}", "NETWORK_ERROR")

        if not response.is_success:
            raise RequestError(
                f"HTTP error {response.status_code}: {response.text}",
                "HTTP_ERROR",
                response.status_code,
            )

        return response

    def _request(
        self,
        endpoint: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make an HTTP request to the API and decode the body."""
        response = self._send(endpoint, method, params, files)
        return decode_body(response.text)

    def _request_mapping(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        data = self._request(endpoint, params=params)
        if not isinstance(data, dict):
            raise ProtocolError(f"Unexpected response from {endpoint}", data)
        return data

    def verify_email(self, email: str) -> Union[Dict[str, Any], List[Any]]:
        """Verify a single email address.

        Args:
            email: The email address to verify.

        Returns:
            ``{email, status, timestamp}`` when the API answers with a plain
            status token (ok, invalid, invalid_mx, accept_all, ok_for_all,
            disposable, role, email_disabled, dead_server, unknown), or the
            decoded JSON response unmodified.
        """
        if not email:
            raise ValidationError("Email address is required")

        result = self._request("verifyEmail", params={"email": email})

        if isinstance(result, str):
            return VerificationResult(email=email, status=result, timestamp=now_iso())

        return result

    def verify_email_detailed(self, email: str) -> Dict[str, Any]:
        """Verify an email address and return every field the API reports.

        Args:
            email: The email address to verify.

        Returns:
            The decoded JSON response (domain, mx_found, score, ...).
        """
        if not email:
            raise ValidationError("Email address is required")

        return self._request_mapping("verifyEmailDetailed", params={"email": email})

    def get_credits(self) -> Dict[str, Any]:
        """Get account credits information."""
        return self._request_mapping("getCredits")

    def bulk_upload(self, file_path: Union[str, Path], filename: Optional[str] = None) -> str:
        """Upload a CSV file for bulk verification.

        Args:
            file_path: Path to the CSV file with emails.
            filename: Name reported to the API (default: bulk_verify_<timestamp>.csv).

        Returns:
            The file ID used to track the bulk job.
        """
        path = Path(file_path)
        if not path.exists():
            raise NotFoundError(f"File not found: {file_path}")

        if filename is None:
            filename = f"bulk_verify_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"

        with open(path, "rb") as f:
            files = {"file_contents": (filename, f, "text/csv")}
            result = self._request("verifApiFile", "POST", params={"filename": filename}, files=files)

        if isinstance(result, str) and result:
            file_id = result
        elif isinstance(result, dict) and result.get("file_id"):
            file_id = str(result["file_id"])
        else:
            raise ProtocolError("Failed to get file ID from response", result)

        logger.info("Uploaded %s as bulk file %s", path.name, file_id)
        return file_id

    def get_bulk_status(self, file_id: str) -> BulkStatus:
        """Get bulk verification status.

        Args:
            file_id: File ID returned by bulk_upload().

        Returns:
            Status mapping with at least ``status`` plus progress fields.
        """
        if not file_id:
            raise ValidationError("File ID is required")

        return self._request_mapping("getApiFileInfo", params={"file_id": file_id})

    def download_bulk_result(self, file_id: str, result_type: ResultType = "all") -> str:
        """Download bulk verification results.

        Args:
            file_id: File ID returned by bulk_upload().
            result_type: 'all' for every row or 'clean' for deliverable rows only.

        Returns:
            The CSV content decoded as text.
        """
        return self._download(file_id, result_type).text

    def download_bulk_content(self, file_id: str, result_type: ResultType = "all") -> bytes:
        """Download bulk verification results as the raw bytes served."""
        return self._download(file_id, result_type).content

    def _download(self, file_id: str, result_type: str) -> httpx.Response:
        if not file_id:
            raise ValidationError("File ID is required")

        if result_type not in RESULT_ENDPOINTS:
            raise ValidationError("result_type must be 'all' or 'clean'", result_type)

        return self._send(RESULT_ENDPOINTS[result_type], params={"file_id": file_id})

    def verify_batch(self, emails: List[str], max_batch_size: int = DEFAULT_BATCH_SIZE) -> List[Any]:
        """Verify multiple emails one at a time, in order.

        Failed requests become ``{email, status: "error", error, timestamp}``
        entries instead of aborting the run.

        Args:
            emails: List of email addresses.
            max_batch_size: Emails per chunk (default: 100).

        Returns:
            One entry per input email, in input order.
        """
        if max_batch_size < 1:
            raise ValidationError("max_batch_size must be at least 1")

        results: List[Any] = []

        for batch in _chunked(list(emails), max_batch_size):
            logger.debug("Verifying batch of %d emails", len(batch))
            for email in batch:
                try:
                    results.append(self.verify_email(email))
                except RequestError as e:
                    logger.warning("Verification of %s failed: %s", email, e)
                    results.append(BatchErrorEntry(
                        email=email,
                        status="error",
                        error=e.message,
                        timestamp=now_iso(),
                    ))
                    continue
                time.sleep(RATE_LIMIT_DELAY)

        return results

    def verify_emails(self, emails: List[str]) -> Dict[str, str]:
        """Verify multiple emails and map each one to its status token.

        Addresses whose request failed map to ``"error: <message>"``.
        """
        results: Dict[str, str] = {}

        for email in emails:
            try:
                result = self.verify_email(email)
            except RequestError as e:
                results[email] = f"error: {e.message}"
                continue
            status = result.get("status", "unknown") if isinstance(result, dict) else "unknown"
            results[email] = str(status)
            time.sleep(RATE_LIMIT_DELAY)

        return results

    def wait_for_bulk_completion(
        self,
        file_id: str,
        check_interval: float = DEFAULT_CHECK_INTERVAL,
        max_wait: float = DEFAULT_MAX_WAIT,
    ) -> BulkStatus:
        """Poll for bulk job completion.

        The elapsed time is checked before each poll, so a slow final poll can
        finish after ``max_wait`` has passed.

        Args:
            file_id: File ID returned by bulk_upload().
            check_interval: Time between polls in seconds (default: 10).
            max_wait: Maximum wait time in seconds (default: 3600).

        Returns:
            The first status payload reporting ``completed``.

        Raises:
            RequestError: If the job reports ``failed``.
            TimeoutError: If the job doesn't complete within max_wait.
        """
        start_time = time.time()

        while time.time() - start_time < max_wait:
            status = self.get_bulk_status(file_id)
            state = status.get("status")

            if state == "completed":
                return status

            if state == "failed":
                error = status.get("error")
                if error is None:
                    error = "Unknown error"
                raise RequestError(f"Bulk verification failed: {error}", "BULK_FAILED", 0, status)

            logger.debug("Bulk file %s is %s, next check in %ss", file_id, state, check_interval)
            time.sleep(check_interval)

        raise TimeoutError(f"Timeout waiting for bulk verification (waited {max_wait}s)")
