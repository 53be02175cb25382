"""
Sign-up form validation: ordered (field, predicate, message) rules plus sanitizers.

Every rule runs, so one field can report several messages (e.g. an empty first
name is both missing and not alphabetic). Sanitized values are only produced
when no rule failed.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from clubhouse.schemas.auth import FieldError, SignUpData

SIGN_UP_FIELDS = (
    "first_name",
    "last_name",
    "username",
    "email",
    "password",
    "confirm-password",
)

# Trimmed before any rule runs; password is only trimmed after validation.
TRIMMED_FIELDS = ("first_name", "last_name", "username", "email")

PASSWORD_MIN_LEN = 8
PASSWORD_SPECIAL_CHARS = "@$!%*?&"
COMMON_PASSWORDS = frozenset({"password", "123456", "qwerty"})

GMAIL_DOMAINS = ("gmail.com", "googlemail.com")
ICLOUD_DOMAINS = ("icloud.com", "me.com")
OUTLOOK_DOMAINS = (
    "hotmail.at", "hotmail.be", "hotmail.ca", "hotmail.cl", "hotmail.co.il",
    "hotmail.co.nz", "hotmail.co.th", "hotmail.co.uk", "hotmail.com",
    "hotmail.com.ar", "hotmail.com.mx", "hotmail.de", "hotmail.es", "hotmail.fr",
    "hotmail.it", "hotmail.se", "live.co.uk", "live.com", "live.com.ar",
    "live.com.mx", "live.de", "live.fr", "live.it", "live.nl", "msn.com",
    "outlook.at", "outlook.be", "outlook.cl", "outlook.co.il", "outlook.co.nz",
    "outlook.co.th", "outlook.com", "outlook.com.ar", "outlook.com.au",
    "outlook.de", "outlook.es", "outlook.fr", "outlook.ie", "outlook.in",
    "outlook.it", "outlook.jp", "outlook.kr", "outlook.lv", "outlook.my",
    "outlook.ph", "outlook.pt", "outlook.sa", "outlook.sg", "outlook.sk",
    "passport.com",
)
YAHOO_DOMAINS = (
    "rocketmail.com", "yahoo.ca", "yahoo.co.uk", "yahoo.com", "yahoo.de",
    "yahoo.fr", "yahoo.in", "yahoo.it", "ymail.com",
)
YANDEX_DOMAINS = ("yandex.ru", "yandex.ua", "yandex.kz", "yandex.com", "yandex.by", "ya.ru")

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
        "\\": "&#x5C;",
        "`": "&#96;",
    }
)

_ALPHA_RE = re.compile(r"^[A-Za-z]+$")

# predicate(value, all_values) -> True when the value passes
Predicate = Callable[[str, Mapping[str, str]], bool]
Rule = tuple[str, Predicate, str]


def _not_empty(value: str, _values: Mapping[str, str]) -> bool:
    return value != ""


def _is_alpha(value: str, _values: Mapping[str, str]) -> bool:
    return bool(_ALPHA_RE.match(value))


def _is_email(value: str, _values: Mapping[str, str]) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _min_length(n: int) -> Predicate:
    return lambda value, _values: len(value) >= n


def _matches(pattern: str) -> Predicate:
    compiled = re.compile(pattern)
    return lambda value, _values: compiled.search(value) is not None


def _not_common(value: str, _values: Mapping[str, str]) -> bool:
    return value not in COMMON_PASSWORDS


def _same_as_password(value: str, values: Mapping[str, str]) -> bool:
    return value == values["password"]


SIGN_UP_RULES: list[Rule] = [
    ("first_name", _not_empty, "First name is required"),
    ("first_name", _is_alpha, "First name must only contain letters"),
    ("last_name", _not_empty, "Last name is required"),
    ("last_name", _is_alpha, "Last name must only contain letters"),
    ("username", _not_empty, "Username is required"),
    ("email", _is_email, "Must be a valid email"),
    (
        "password",
        _min_length(PASSWORD_MIN_LEN),
        f"Password must be at least {PASSWORD_MIN_LEN} characters long",
    ),
    ("password", _matches(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    ("password", _matches(r"[a-z]"), "Password must contain at least one lowercase letter"),
    ("password", _matches(r"[0-9]"), "Password must contain at least one number"),
    (
        "password",
        _matches("[" + re.escape(PASSWORD_SPECIAL_CHARS) + "]"),
        f"Password must contain at least one special character ({PASSWORD_SPECIAL_CHARS})",
    ),
    ("password", _not_common, "Password is too common"),
    ("confirm-password", _same_as_password, "Password confirmation does not match password"),
]


@dataclass
class ValidationResult:
    """Outcome of validate_sign_up: either errors or sanitized data, never both."""

    errors: list[FieldError] = field(default_factory=list)
    data: SignUpData | None = None

    @property
    def ok(self) -> bool:
        return not self.errors


def escape_html(value: str) -> str:
    """Replace &, <, >, quotes, slashes and backticks with HTML entities."""
    return value.translate(_HTML_ESCAPES)


def sanitize_password(password: str) -> str:
    """Trim and HTML-escape a password before it is hashed at sign-up."""
    return escape_html(password.strip())


def normalize_email(address: str) -> str:
    """
    Canonicalize a valid address. Everything is lower-cased, then per provider:

    - Gmail: drop dots and +subaddress; googlemail.com becomes gmail.com
    - iCloud, Outlook/Hotmail/Live: drop +subaddress
    - Yahoo: drop the last -subaddress
    - Yandex: every Yandex domain becomes yandex.ru
    """
    normalized = validate_email(address, check_deliverability=False).normalized
    local, _, domain = normalized.rpartition("@")
    local = local.lower()
    domain = domain.lower()
    if domain in GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "")
        domain = "gmail.com"
    elif domain in ICLOUD_DOMAINS or domain in OUTLOOK_DOMAINS:
        local = local.split("+", 1)[0]
    elif domain in YAHOO_DOMAINS:
        parts = local.split("-")
        local = "-".join(parts[:-1]) if len(parts) > 1 else parts[0]
    elif domain in YANDEX_DOMAINS:
        domain = "yandex.ru"
    return f"{local}@{domain}"


def validate_sign_up(form: Mapping[str, str]) -> ValidationResult:
    """Apply rules in order to the submitted form; missing fields count as empty strings."""
    values = {name: str(form.get(name) or "") for name in SIGN_UP_FIELDS}
    for name in TRIMMED_FIELDS:
        values[name] = values[name].strip()

    errors = [
        FieldError(msg=message, param=name)
        for name, check, message in SIGN_UP_RULES
        if not check(values[name], values)
    ]
    if errors:
        return ValidationResult(errors=errors)

    data = SignUpData(
        first_name=values["first_name"],
        last_name=values["last_name"],
        username=values["username"],
        email=normalize_email(values["email"]),
        password=sanitize_password(values["password"]),
    )
    return ValidationResult(data=data)
