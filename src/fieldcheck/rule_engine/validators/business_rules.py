"""Fixed catalogue of named business rules evaluated against a whole record."""

from __future__ import annotations

from collections.abc import Callable

from fieldcheck.rule_engine.coercion import is_truthy, to_number
from fieldcheck.rule_engine.models import Outcome, Record

EMPLOYMENT_STATUSES = frozenset({"employed", "self-employed", "retired", "unemployed", "student"})
ADULT_AGE = 18
SALARY_VERIFICATION_THRESHOLD = 100_000


def check_age_verification(record: Record) -> Outcome:
    if to_number(record.get("age")) >= ADULT_AGE:
        if not is_truthy(record.get("idType")) or not is_truthy(record.get("verificationDocument")):
            return Outcome.fail(
                "For users 18 or older, ID type and verification document are required"
            )
    return Outcome.ok()


def check_email_or_phone(record: Record) -> Outcome:
    if not is_truthy(record.get("email")) and not is_truthy(record.get("phone")):
        return Outcome.fail("Either email or phone must be provided")
    return Outcome.ok()


def check_minors_consent(record: Record) -> Outcome:
    if to_number(record.get("age")) < ADULT_AGE:
        if not is_truthy(record.get("guardianConsent")):
            return Outcome.fail("Guardian consent is required for users under 18")
        if not is_truthy(record.get("guardianEmail")):
            return Outcome.fail("Guardian email is required for users under 18")
    return Outcome.ok()


def check_salary_verification(record: Record) -> Outcome:
    salary = to_number(record.get("salary"))
    if salary > SALARY_VERIFICATION_THRESHOLD and not is_truthy(record.get("salaryVerification")):
        return Outcome.fail("Salary verification is required for salaries above 100,000")
    status = record.get("employmentStatus")
    if salary > 0 and not (isinstance(status, str) and status in EMPLOYMENT_STATUSES):
        return Outcome.fail("Valid employment status must be provided when salary is specified")
    return Outcome.ok()


BUSINESS_RULES: dict[str, Callable[[Record], Outcome]] = {
    "age-verification": check_age_verification,
    "email-phone-required": check_email_or_phone,
    "minors-consent": check_minors_consent,
    "salary-verification": check_salary_verification,
}


def apply_business_rule(name: str, record: Record) -> Outcome:
    """Unknown rule names pass."""
    check = BUSINESS_RULES.get(name)
    if check is None:
        return Outcome.ok()
    return check(record)
