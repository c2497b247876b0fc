"""Tests for the named business rule catalogue."""

from __future__ import annotations

from fieldcheck.rule_engine.validators.business_rules import BUSINESS_RULES, apply_business_rule


class TestCatalogue:
    def test_has_four_rules(self):
        assert set(BUSINESS_RULES) == {
            "age-verification",
            "email-phone-required",
            "minors-consent",
            "salary-verification",
        }

    def test_unknown_rule_passes(self):
        assert apply_business_rule("unknown", {}).passed is True


class TestAgeVerification:
    def test_adult_without_documents_fails(self):
        outcome = apply_business_rule("age-verification", {"age": 30, "idType": "passport"})
        assert outcome.message == (
            "For users 18 or older, ID type and verification document are required"
        )

    def test_adult_with_documents_passes(self):
        record = {"age": "18", "idType": "passport", "verificationDocument": "doc.pdf"}
        assert apply_business_rule("age-verification", record).passed is True

    def test_minor_passes(self):
        assert apply_business_rule("age-verification", {"age": 17}).passed is True

    def test_missing_age_passes(self):
        assert apply_business_rule("age-verification", {}).passed is True


class TestEmailOrPhone:
    def test_neither_fails(self):
        outcome = apply_business_rule("email-phone-required", {"email": "", "phone": None})
        assert outcome.message == "Either email or phone must be provided"

    def test_phone_only_passes(self):
        assert apply_business_rule("email-phone-required", {"phone": "555-1234"}).passed


class TestMinorsConsent:
    def test_minor_without_consent_fails(self):
        outcome = apply_business_rule("minors-consent", {"age": 15})
        assert outcome.passed is False
        assert outcome.message == "Guardian consent is required for users under 18"

    def test_minor_with_consent_but_no_email(self):
        outcome = apply_business_rule("minors-consent", {"age": 15, "guardianConsent": True})
        assert outcome.message == "Guardian email is required for users under 18"

    def test_minor_with_both_passes(self):
        record = {"age": 15, "guardianConsent": True, "guardianEmail": "parent@example.com"}
        assert apply_business_rule("minors-consent", record).passed is True

    def test_adult_passes(self):
        assert apply_business_rule("minors-consent", {"age": 40}).passed is True


class TestSalaryVerification:
    def test_high_salary_needs_verification(self):
        record = {"salary": 150000, "employmentStatus": "employed"}
        outcome = apply_business_rule("salary-verification", record)
        assert outcome.message == "Salary verification is required for salaries above 100,000"

    def test_salary_needs_known_employment_status(self):
        outcome = apply_business_rule(
            "salary-verification", {"salary": 50000, "employmentStatus": "freelance"}
        )
        assert outcome.message == (
            "Valid employment status must be provided when salary is specified"
        )

    def test_verified_high_salary_passes(self):
        record = {"salary": 150000, "salaryVerification": "W2", "employmentStatus": "self-employed"}
        assert apply_business_rule("salary-verification", record).passed is True

    def test_zero_salary_passes(self):
        assert apply_business_rule("salary-verification", {"salary": 0}).passed is True
