"""Tests for the built-in validators.

Each validator is created through the factory, the way hosting models
use them, and run against a SampleUser.
"""

from typing import Any

import pytest

from scenario_validation.exceptions import InvalidParamError
from scenario_validation.validators.factory import create_validator
from tests.fixtures.sample_data import SampleUser


def run(name: str, attribute: str, value: Any, **params: Any) -> list[str]:
    """Validate a single attribute value and return its error messages."""
    user = SampleUser(**{attribute: value})
    create_validator(name, user, attribute, params).validate(user)
    return user.errors.get(attribute, [])


class TestRequiredValidator:
    """Tests for the required alias."""

    @pytest.mark.parametrize("value", [None, "", "   ", []])
    def test_blank_values_fail(self, value: Any) -> None:
        assert run("required", "name", value) == ["Full Name cannot be blank."]

    @pytest.mark.parametrize("value", ["Ada", 0, False])
    def test_present_values_pass(self, value: Any) -> None:
        assert run("required", "name", value) == []

    def test_required_value(self) -> None:
        assert run("required", "age", "18", required_value=18) == []
        assert run("required", "age", 17, required_value=18) == ["Age must be 18."]

    def test_required_value_strict(self) -> None:
        assert run("required", "age", "18", required_value=18, strict=True) == ["Age must be 18."]


class TestSafeValidators:
    """Tests for the safe/unsafe markers."""

    def test_flags_and_no_errors(self) -> None:
        user = SampleUser()
        safe = create_validator("safe", user, "name")
        unsafe = create_validator("unsafe", user, "name")

        safe.validate(user)
        unsafe.validate(user)

        assert safe.safe is True
        assert unsafe.safe is False
        assert user.errors == {}


class TestDefaultValueValidator:
    """Tests for the default alias."""

    def test_sets_value_when_empty(self) -> None:
        user = SampleUser(name="")
        create_validator("default", user, "name, email", {"value": "n/a"}).validate(user)
        assert user.name == "n/a"
        assert user.email == "n/a"

    def test_keeps_existing_value(self) -> None:
        user = SampleUser(name="Ada")
        create_validator("default", user, "name", {"value": "n/a"}).validate(user)
        assert user.name == "Ada"

    def test_always_overwrites_when_not_set_on_empty(self) -> None:
        user = SampleUser(name="Ada")
        create_validator("default", user, "name", {"value": "n/a", "set_on_empty": False}).validate(user)
        assert user.name == "n/a"


class TestFilterValidator:
    """Tests for the filter alias."""

    def test_applies_callable(self) -> None:
        user = SampleUser(email="  ADA@EXAMPLE.COM ")
        create_validator("filter", user, "email", {"filter": lambda v: v.strip().lower()}).validate(user)
        assert user.email == "ada@example.com"

    def test_missing_filter(self) -> None:
        user = SampleUser()
        validator = create_validator("filter", user, "email")
        with pytest.raises(InvalidParamError):
            validator.validate(user)


class TestRegularExpressionValidator:
    """Tests for the match alias."""

    def test_match(self) -> None:
        assert run("match", "name", "abc123", pattern=r"^[a-z0-9]+$") == []
        assert run("match", "name", "abc 123", pattern=r"^[a-z0-9]+$") == ["Full Name is invalid."]

    def test_not(self) -> None:
        assert run("match", "name", "admin", pattern=r"admin", not_=True) == ["Full Name is invalid."]
        assert run("match", "name", "ada", pattern=r"admin", not_=True) == []

    def test_non_scalar_always_fails(self) -> None:
        assert run("match", "name", ["x"], pattern=r"x", not_=True) == ["Full Name is invalid."]

    def test_empty_allowed(self) -> None:
        assert run("match", "name", "", pattern=r"^x$") == []
        assert run("match", "name", "", pattern=r"^x$", allow_empty=False) == ["Full Name is invalid."]


class TestEmailValidator:
    """Tests for the email alias."""

    @pytest.mark.parametrize("value", ["ada@example.com", "first.last+tag@sub.example.org"])
    def test_valid(self, value: str) -> None:
        assert run("email", "email", value) == []

    @pytest.mark.parametrize("value", ["ada", "ada@", "@example.com", "ada@exa mple.com", 42])
    def test_invalid(self, value: Any) -> None:
        assert run("email", "email", value) == ["Email Address is not a valid email address."]

    def test_allow_name(self) -> None:
        assert run("email", "email", "Ada <ada@example.com>", allow_name=True) == []
        assert run("email", "email", "Ada <ada@example.com>") != []


class TestUrlValidator:
    """Tests for the url alias."""

    @pytest.mark.parametrize("value", ["http://example.com", "https://www.example.com:8080/path?q=1"])
    def test_valid(self, value: str) -> None:
        assert run("url", "email", value) == []

    @pytest.mark.parametrize("value", ["example.com", "ftp://example.com", "http://localhost"])
    def test_invalid(self, value: str) -> None:
        assert run("url", "email", value) == ["Email Address is not a valid URL."]

    def test_default_scheme_is_written_back(self) -> None:
        user = SampleUser(email="example.com/page")
        create_validator("url", user, "email", {"default_scheme": "https"}).validate(user)
        assert user.errors == {}
        assert user.email == "https://example.com/page"

    def test_configured_schemes_do_not_leak(self) -> None:
        user = SampleUser()
        ftp_only = create_validator("url", user, "email", {"valid_schemes": ["ftp"]})
        default = create_validator("url", user, "email")

        assert ftp_only.valid_schemes == ("ftp",)
        assert default.valid_schemes == ("http", "https")
        assert run("url", "email", "ftp://example.com", valid_schemes=["ftp"]) == []


class TestCompareValidator:
    """Tests for the compare alias."""

    def test_repeat_attribute(self) -> None:
        user = SampleUser(password="secret", password_repeat="secret")
        create_validator("compare", user, "password").validate(user)
        assert user.errors == {}

        user = SampleUser(password="secret", password_repeat="other")
        create_validator("compare", user, "password").validate(user)
        assert user.errors == {"password": ["Password must be repeated exactly."]}

    def test_compare_value_operators(self) -> None:
        assert run("compare", "age", 20, compare_value=18, operator=">=") == []
        assert run("compare", "age", 17, compare_value=18, operator=">=") == [
            'Age must be greater than or equal to "18".'
        ]
        assert run("compare", "age", 18, compare_value=18, operator="!=") == [
            'Age must not be equal to "18".'
        ]

    def test_incomparable_values_fail(self) -> None:
        assert run("compare", "age", "x", compare_value=18, operator="<") == [
            'Age must be less than "18".'
        ]

    def test_invalid_operator(self) -> None:
        with pytest.raises(InvalidParamError):
            run("compare", "age", 1, compare_value=1, operator="<>")


class TestStringValidator:
    """Tests for the length alias."""

    def test_bounds(self) -> None:
        assert run("length", "name", "Al", min=3) == ["Full Name is too short (minimum is 3 characters)."]
        assert run("length", "name", "Alexander", max=5) == ["Full Name is too long (maximum is 5 characters)."]
        assert run("length", "name", "Ada", min=3, max=5) == []

    def test_exact_length(self) -> None:
        assert run("length", "name", "Ada", is_=4) == [
            "Full Name is of the wrong length (should be 4 characters)."
        ]

    def test_custom_messages(self) -> None:
        assert run("length", "name", "A", min=2, too_short="{attribute} needs {min}+") == [
            "Full Name needs 2+"
        ]

    def test_non_string(self) -> None:
        assert run("length", "name", 12345, max=3) == ["Full Name is invalid."]


class TestRangeValidator:
    """Tests for the in alias."""

    def test_in_range(self) -> None:
        assert run("in", "name", "b", range=["a", "b"]) == []
        assert run("in", "name", "c", range=["a", "b"]) == ["Full Name is not in the list."]

    def test_loose_and_strict(self) -> None:
        assert run("in", "age", "1", range=[1, 2]) == []
        assert run("in", "age", "1", range=[1, 2], strict=True) == ["Age is not in the list."]

    def test_not(self) -> None:
        assert run("in", "name", "root", range=["root"], not_=True) == ["Full Name is in the list."]

    def test_missing_range(self) -> None:
        with pytest.raises(InvalidParamError):
            run("in", "name", "a")


class TestNumberValidator:
    """Tests for the numerical alias."""

    @pytest.mark.parametrize("value", [5, 5.5, "5", " 1.5e3 ", "-2"])
    def test_numbers(self, value: Any) -> None:
        assert run("numerical", "age", value) == []

    @pytest.mark.parametrize("value", ["five", True, [1]])
    def test_not_numbers(self, value: Any) -> None:
        assert run("numerical", "age", value) == ["Age must be a number."]

    def test_integer_only(self) -> None:
        assert run("numerical", "age", "5.5", integer_only=True) == ["Age must be an integer."]
        assert run("numerical", "age", "5", integer_only=True) == []

    def test_bounds(self) -> None:
        assert run("numerical", "age", 150, max=120) == ["Age is too big (maximum is 120)."]
        assert run("numerical", "age", 0, min=1) == ["Age is too small (minimum is 1)."]

    def test_blank_allowed(self) -> None:
        assert run("numerical", "age", "  ") == []


class TestTypeValidator:
    """Tests for the type alias."""

    @pytest.mark.parametrize(
        ("kind", "value"),
        [("integer", 3), ("integer", "3"), ("float", "3.5"), ("string", "x"),
         ("date", "2024-02-29"), ("time", "12:30:00"), ("array", [1])],
    )
    def test_valid(self, kind: str, value: Any) -> None:
        assert run("type", "age", value, type=kind) == []

    @pytest.mark.parametrize(
        ("kind", "value"),
        [("integer", "3.5"), ("integer", True), ("string", 3), ("date", "2023-02-29"),
         ("array", "x")],
    )
    def test_invalid(self, kind: str, value: Any) -> None:
        assert run("type", "age", value, type=kind) == [f"Age must be {kind}."]

    def test_unsupported_type(self) -> None:
        with pytest.raises(InvalidParamError):
            run("type", "age", 1, type="complex")


class TestBooleanValidator:
    """Tests for the boolean alias."""

    @pytest.mark.parametrize("value", ["1", "0", 1, 0, True, False])
    def test_loose(self, value: Any) -> None:
        assert run("boolean", "age", value) == []

    def test_invalid(self) -> None:
        assert run("boolean", "age", "yes") == ["Age must be either 1 or 0."]

    def test_strict(self) -> None:
        assert run("boolean", "age", 1, strict=True) == ["Age must be either 1 or 0."]


class TestDateValidator:
    """Tests for the date alias."""

    def test_formats(self) -> None:
        assert run("date", "name", "2024-01-31") == []
        assert run("date", "name", "31/01/2024") == ["The format of Full Name is invalid."]
        assert run("date", "name", "31/01/2024", format=["%Y-%m-%d", "%d/%m/%Y"]) == []

    def test_timestamp_attribute(self) -> None:
        user = SampleUser(name="2024-01-31")
        create_validator("date", user, "name", {"timestamp_attribute": "age"}).validate(user)
        assert isinstance(user.age, float)
