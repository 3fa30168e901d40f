"""Basic usage examples for EmailListVerify SDK.

This example demonstrates:
- Single email verification using verify_email()
- Detailed verification using verify_email_detailed()
- Batch verification using verify_batch()
- Getting credits with get_credits()
- Offline checks with EmailValidator
"""

import logging
import os

from emaillistverify import (
    ConfigurationError,
    EmailListVerify,
    EmailValidator,
    RequestError,
    ValidationError,
)

# Get API key from environment variable
API_KEY = os.getenv("EMAILLISTVERIFY_API_KEY", "your-api-key")


def single_email_verification():
    """Verify a single email address."""
    print("=" * 50)
    print("Single Email Verification")
    print("=" * 50)

    client = EmailListVerify(api_key=API_KEY)

    try:
        result = client.verify_email("test@example.com")

        print(f"Email: {result['email']}")
        print(f"Status: {result['status']}")  # ok, invalid, accept_all, disposable, role, ...
        print(f"Timestamp: {result.get('timestamp')}")

        detailed = client.verify_email_detailed("test@example.com")
        for key, value in detailed.items():
            print(f"  {key}: {value}")

    except ValidationError as e:
        print(f"Error: Invalid input - {e.message}")
    except RequestError as e:
        print(f"Error: Request failed - {e.message}")

    finally:
        client.close()


def batch_verification():
    """Verify a list of emails one by one."""
    print("\n" + "=" * 50)
    print("Batch Verification")
    print("=" * 50)

    emails = [
        "valid@example.com",
        "invalid@fake-domain-123456.com",
        "test@gmail.com",
        "info@company.com",
    ]

    # Using context manager for automatic cleanup
    with EmailListVerify(api_key=API_KEY) as client:
        results = client.verify_batch(emails, max_batch_size=50)

        for result in results:
            line = f"{result.get('email', '')}: {result.get('status', 'unknown')}"
            if result.get("status") == "error":
                line += f" ({result['error']})"
            print(line)


def credits_example():
    """Show remaining account credits."""
    print("\n" + "=" * 50)
    print("Account Credits")
    print("=" * 50)

    try:
        with EmailListVerify.from_env() as client:
            credits = client.get_credits()
            print(f"Credits: {credits}")
    except ConfigurationError as e:
        print(f"Set EMAILLISTVERIFY_API_KEY first: {e.message}")
    except RequestError as e:
        print(f"Error: {e.message}")


def offline_checks():
    """Syntax and domain checks that need no API call."""
    print("\n" + "=" * 50)
    print("Offline Checks")
    print("=" * 50)

    for email in ["user@example.com", "bad..email@example.com", "someone@MAILINATOR.COM"]:
        domain = EmailValidator.extract_domain(email)
        print(
            f"{email}: syntax={EmailValidator.is_valid_syntax(email)} "
            f"domain={domain} "
            f"disposable={bool(domain) and EmailValidator.is_disposable_domain(domain)}"
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    offline_checks()
    single_email_verification()
    batch_verification()
    credits_example()
