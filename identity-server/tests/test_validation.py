import pytest

from identity.modules.accounts import (
    InvalidPayloadError,
    WeakCredentialError,
    normalize_email,
    validate_credentials,
)


class TestValidateCredentials:
    def test_normalizes_email(self):
        credentials = validate_credentials({"email": "  User@Example.COM ", "password": "hunter22"})
        assert credentials.email == "user@example.com"
        assert credentials.password == "hunter22"

    def test_password_is_not_trimmed(self):
        credentials = validate_credentials({"email": "a@b.com", "password": " pass  "})
        assert credentials.password == " pass  "

    def test_password_hidden_from_repr(self):
        credentials = validate_credentials({"email": "a@b.com", "password": "hunter22"})
        assert "hunter22" not in repr(credentials)

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            "email=a@b.com",
            ["a@b.com", "hunter22"],
            {},
            {"email": "a@b.com"},
            {"password": "hunter22"},
            {"email": 42, "password": "hunter22"},
            {"email": "a@b.com", "password": 123456},
            {"email": None, "password": "hunter22"},
            {"email": "   ", "password": "hunter22"},
        ],
    )
    def test_invalid_payload(self, payload):
        with pytest.raises(InvalidPayloadError):
            validate_credentials(payload)

    @pytest.mark.parametrize("password", ["", "12345", "abcde"])
    def test_weak_credential(self, password):
        with pytest.raises(WeakCredentialError):
            validate_credentials({"email": "x@y.com", "password": password})

    def test_minimum_length_accepted(self):
        assert validate_credentials({"email": "x@y.com", "password": "123456"}).password == "123456"

    def test_blank_email_reported_before_weak_password(self):
        with pytest.raises(InvalidPayloadError):
            validate_credentials({"email": "", "password": "1"})


def test_normalize_email():
    assert normalize_email(" A@B.com ") == normalize_email("a@b.com") == "a@b.com"
