import pytest

from emaillistverify import EmailValidator


@pytest.mark.parametrize(
    "email",
    [
        "test@example.com",
        "user.name@example.com",
        "user+tag@example.co.uk",
        "firstname.lastname@subdomain.example.org",
        "1234567890@example.com",
        "email@example-one.com",
        "_______@example.com",
        "email@example.name",
        "email@example.museum",
        "email@example.co.jp",
        "a" * 64 + "@example.com",
        "user@" + "a" * 63 + ".com",
    ],
)
def test_is_valid_syntax_accepts(email) -> None:
    assert EmailValidator.is_valid_syntax(email) is True


@pytest.mark.parametrize(
    "email",
    [
        "plainaddress",
        "@no-local.org",
        "missing-at-sign.org",
        "missing.domain@.com",
        "two@@example.com",
        "dotdot..@example.com",
        "dot..dot@example.com",
        "spaces in@example.com",
        "user@",
        "user@.com",
        "user@.",
        "",
        "user name@example.com",
        "user@exam ple.com",
        "a" * 65 + "@example.com",
    ],
)
def test_is_valid_syntax_rejects(email) -> None:
    assert EmailValidator.is_valid_syntax(email) is False


@pytest.mark.parametrize(
    "email",
    ["test@例え.jp", "user@παράδειγμα.gr", "mail@пример.ru", "contact@مثال.ae"],
)
def test_is_valid_syntax_international_domains_return_bool(email) -> None:
    assert isinstance(EmailValidator.is_valid_syntax(email), bool)


@pytest.mark.parametrize(
    "email, expected",
    [
        ("test@example.com", "example.com"),
        ("user@EXAMPLE.COM", "example.com"),
        ("user@MiXeDcAsE.OrG", "mixedcase.org"),
        ("admin@subdomain.example.org", "subdomain.example.org"),
        ("user+tag@domain.co.uk", "domain.co.uk"),
        ("noreply@localhost", "localhost"),
        ("support@192.168.1.1", "192.168.1.1"),
        ('"user name"@example.com', "example.com"),
        ("user@middle@example.com", "middle@example.com"),
        ("user@example.com ", "example.com "),
        ("@nodomain", "nodomain"),
        ("user@", ""),
        ("invalidemailwithoutatsign", None),
        ("plain", None),
        ("", None),
    ],
)
def test_extract_domain(email, expected) -> None:
    assert EmailValidator.extract_domain(email) == expected


@pytest.mark.parametrize(
    "domain",
    [
        "tempmail.com",
        "throwaway.email",
        "guerrillamail.com",
        "mailinator.com",
        "10minutemail.com",
        "trashmail.com",
        "yopmail.com",
        "temp-mail.org",
        "fakeinbox.com",
        "MAILINATOR.COM",
        "MaIlInAtOr.CoM",
        "TeMpMaIl.CoM",
    ],
)
def test_is_disposable_domain(domain) -> None:
    assert EmailValidator.is_disposable_domain(domain) is True


@pytest.mark.parametrize(
    "domain",
    ["gmail.com", "yahoo.com", "outlook.com", "company.com", "example.org", "", "nonexistent-disposable.xyz"],
)
def test_is_not_disposable_domain(domain) -> None:
    assert EmailValidator.is_disposable_domain(domain) is False


def test_is_valid_syntax_local_part_length_limit() -> None:
    assert EmailValidator.is_valid_syntax("a" * 64 + "@example.com") is True
    assert EmailValidator.is_valid_syntax("a" * 65 + "@example.com") is False
