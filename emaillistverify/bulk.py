"""Bulk verification workflow: upload, wait, download, save."""

import copy
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .client import DEFAULT_CHECK_INTERVAL, DEFAULT_MAX_WAIT, EmailListVerify, now_iso
from .exceptions import NotFoundError
from .types import BulkJob

logger = logging.getLogger(__name__)


class BulkVerificationManager:
    """Track bulk verification jobs started through one client.

    Jobs live in memory for the lifetime of the manager. Callers always get
    copies of the stored records. The job map is not guarded by a lock, so
    share a manager between threads only behind your own synchronisation.
    """

    def __init__(self, client: EmailListVerify) -> None:
        self.client = client
        self._jobs: Dict[str, BulkJob] = {}

    def process_csv_file(
        self,
        input_file: Union[str, Path],
        output_file: Union[str, Path],
        wait_for_completion: bool = True,
        check_interval: Optional[float] = None,
        max_wait: Optional[float] = None,
    ) -> BulkJob:
        """Upload a CSV file and optionally wait for and save its results.

        Args:
            input_file: Path to the CSV file with emails.
            output_file: Path the result CSV is written to (overwritten).
            wait_for_completion: Block until the job completes (default: True).
            check_interval: Seconds between status checks (default: 10).
            max_wait: Maximum seconds to wait (default: 3600).

        Returns:
            A copy of the job record.
        """
        file_id = self.client.bulk_upload(str(input_file))

        job = BulkJob(
            file_id=file_id,
            input_file=str(input_file),
            output_file=str(output_file),
            start_time=now_iso(),
        )
        self._jobs[file_id] = job
        logger.info("Bulk job %s started for %s", file_id, input_file)

        if wait_for_completion:
            final_status = self.client.wait_for_bulk_completion(
                file_id,
                check_interval=DEFAULT_CHECK_INTERVAL if check_interval is None else check_interval,
                max_wait=DEFAULT_MAX_WAIT if max_wait is None else max_wait,
            )

            results = self.client.download_bulk_content(file_id, "all")

            with open(output_file, "wb") as f:
                f.write(results)

            job.status = "completed"
            job.end_time = now_iso()
            job.final_status = final_status
            logger.info("Bulk job %s completed, results saved to %s", file_id, output_file)

        return copy.deepcopy(job)

    def get_job_status(self, file_id: str) -> BulkJob:
        """Refresh and return a tracked job with the latest API status."""
        job = self._jobs.get(file_id)
        if job is None:
            raise NotFoundError(f"Unknown job ID: {file_id}")

        job.last_status = self.client.get_bulk_status(file_id)

        return copy.deepcopy(job)

    def get_active_jobs(self) -> Dict[str, BulkJob]:
        """Return a snapshot of every tracked job keyed by file ID."""
        return copy.deepcopy(self._jobs)
