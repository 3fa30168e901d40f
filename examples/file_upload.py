"""Bulk file verification example for EmailListVerify SDK.

This example demonstrates:
- File upload using bulk_upload()
- Polling with get_bulk_status() and wait_for_bulk_completion()
- Downloading results with download_bulk_result()
- The full upload/wait/download workflow with BulkVerificationManager
"""

import logging
import os
import tempfile

from emaillistverify import (
    BulkVerificationManager,
    EmailListVerify,
    NotFoundError,
    RequestError,
    TimeoutError,
)

# Get API key from environment variable
API_KEY = os.getenv("EMAILLISTVERIFY_API_KEY", "your-api-key")


def create_sample_csv() -> str:
    """Create a sample CSV file for testing."""
    csv_content = """email
user1@example.com
user2@example.com
test@gmail.com
info@company.com
support@business.com
"""
    fd, path = tempfile.mkstemp(suffix=".csv")
    with os.fdopen(fd, "w") as f:
        f.write(csv_content)
    return path


def step_by_step_example():
    """Upload, poll and download by hand."""
    print("=" * 50)
    print("Bulk Verification Step by Step")
    print("=" * 50)

    csv_path = create_sample_csv()
    print(f"Created sample CSV at: {csv_path}")

    with EmailListVerify(api_key=API_KEY) as client:
        try:
            file_id = client.bulk_upload(csv_path, filename="sample_list.csv")
            print(f"File ID: {file_id}")

            status = client.get_bulk_status(file_id)
            print(f"Status: {status.get('status')} ({status.get('progress', 0)}%)")

            final = client.wait_for_bulk_completion(file_id, check_interval=5, max_wait=600)
            print(f"Finished: {final}")

            clean_csv = client.download_bulk_result(file_id, "clean")
            print("Clean results:")
            print(clean_csv)

        except NotFoundError as e:
            print(f"Error: {e.message}")
        except TimeoutError as e:
            print(f"Timeout waiting for job: {e}")
        except RequestError as e:
            print(f"Error: {e.message}")

        finally:
            os.unlink(csv_path)


def manager_example():
    """Run the whole workflow through BulkVerificationManager."""
    print("\n" + "=" * 50)
    print("Bulk Verification Manager")
    print("=" * 50)

    csv_path = create_sample_csv()
    output_path = csv_path.replace(".csv", "_verified.csv")

    with EmailListVerify(api_key=API_KEY) as client:
        manager = BulkVerificationManager(client)
        try:
            job = manager.process_csv_file(csv_path, output_path, wait_for_completion=False)
            print(f"Started job {job.file_id}")

            job = manager.get_job_status(job.file_id)
            print(f"Last status: {job.last_status}")

            job = manager.process_csv_file(csv_path, output_path)
            print(f"Job {job.file_id} {job.status} at {job.end_time}")
            print(f"Results saved to {job.output_file}")

            for file_id, tracked in manager.get_active_jobs().items():
                print(f"  {file_id}: {tracked.status}")

        except (RequestError, TimeoutError) as e:
            print(f"Error: {e}")

        finally:
            os.unlink(csv_path)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    step_by_step_example()
    manager_example()
