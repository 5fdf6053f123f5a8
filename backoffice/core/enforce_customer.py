"""Customer Enforcement — field rules for customer create/update.

Invariants:
    - Rules run in fixed order and fail fast on the first violation:
      name, email, phone, birthDate present; birthDate not after today (UTC);
      email grammatically valid
    - Email uniqueness is a separate, later check against the store, and a
      customer never conflicts with itself
    - Pure: "today" is injectable, no IO

Design Decisions:
    - email-validator for grammar (same engine as pydantic's EmailStr), with
      deliverability (DNS) checks disabled so validation stays offline
"""

from datetime import date, datetime, timezone
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from backoffice.core.errors import ConflictError, RequestValidationFailedError


def check_customer_fields(
    name: str | None,
    email: str | None,
    phone: str | None,
    birth_date: date | None,
    today: date | None = None,
) -> None:
    """Validate a customer payload. Raises on the first violated rule."""
    if _is_blank(name):
        raise RequestValidationFailedError("Name is required", field="name")
    if _is_blank(email):
        raise RequestValidationFailedError("Email is required", field="email")
    if _is_blank(phone):
        raise RequestValidationFailedError("Phone is required", field="phone")
    if birth_date is None or birth_date == date.min:
        raise RequestValidationFailedError(
            "BirthDate is required", field="birthDate",
        )
    today = today or datetime.now(timezone.utc).date()
    if birth_date > today:
        raise RequestValidationFailedError(
            "BirthDate cannot be in the future", field="birthDate",
        )
    if not is_valid_email(email):
        raise RequestValidationFailedError("Email is invalid", field="email")


def check_email_available(owner_id: UUID | None, customer_id: UUID | None = None) -> None:
    """owner_id is the id of the customer already holding the email, if any."""
    if owner_id is not None and owner_id != customer_id:
        raise ConflictError("Email already in use")


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
