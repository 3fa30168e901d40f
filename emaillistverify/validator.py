"""Offline email address helpers."""

from typing import Optional

from email_validator import EmailNotValidError, validate_email

LOCAL_PART_MAX_LENGTH = 64

DISPOSABLE_DOMAINS = frozenset({
    "tempmail.com",
    "throwaway.email",
    "guerrillamail.com",
    "mailinator.com",
    "10minutemail.com",
    "trashmail.com",
    "yopmail.com",
    "temp-mail.org",
    "fakeinbox.com",
})


class EmailValidator:
    """Syntax and domain checks that never touch the network."""

    @staticmethod
    def is_valid_syntax(email: str) -> bool:
        """Check if an email address has valid syntax."""
        try:
            validated = validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return len(validated.local_part.encode("utf-8")) <= LOCAL_PART_MAX_LENGTH

    @staticmethod
    def extract_domain(email: str) -> Optional[str]:
        """Return everything after the first ``@``, lower-cased, or None without one.

        No validation happens here: ``user@middle@example.com`` gives
        ``middle@example.com``.
        """
        if "@" not in email:
            return None
        return email.split("@", 1)[1].lower()

    @staticmethod
    def is_disposable_domain(domain: str) -> bool:
        """Check if a domain belongs to a known throwaway mailbox service."""
        return domain.lower() in DISPOSABLE_DOMAINS
