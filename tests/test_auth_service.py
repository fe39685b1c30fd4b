"""Tests for AuthService over the in-memory credential store."""

import pytest

from app.errors import AuthError, ConflictError, ValidationError
from app.services.auth_service import AuthService

from tests.fakes import InMemoryCredentialStore


@pytest.fixture
def store():
    return InMemoryCredentialStore()


@pytest.fixture
def service(store, hasher, tokens):
    return AuthService(store, hasher, tokens)


class TestRegister:
    def test_register_then_login_yields_token_for_user(self, service, store, tokens):
        """A registered user can log in and the token names them."""
        service.register("a@x.com", "secret1")
        token = service.login("a@x.com", "secret1")

        assert tokens.verify(token) == store.users["a@x.com"].id

    def test_password_is_stored_hashed(self, service, store, hasher):
        service.register("a@x.com", "secret1")

        stored = store.users["a@x.com"].password_hash
        assert stored != "secret1"
        assert hasher.verify("secret1", stored)

    def test_duplicate_email_conflicts(self, service, store):
        service.register("a@x.com", "secret1")

        with pytest.raises(ConflictError) as exc:
            service.register("a@x.com", "another1")

        assert exc.value.message == "Email already in use"
        assert len(store.users) == 1

    def test_email_is_case_sensitive(self, service, store):
        service.register("a@x.com", "secret1")
        service.register("A@x.com", "secret1")
        assert len(store.users) == 2

    @pytest.mark.parametrize(
        "email",
        ["notanemail", "@example.com", "test@", "test@example", "", None, "a b@x.com"],
    )
    def test_malformed_email_rejected(self, service, store, email):
        with pytest.raises(ValidationError) as exc:
            service.register(email, "password123")
        assert exc.value.message == "Invalid email or password"
        assert store.users == {}

    @pytest.mark.parametrize("password", ["", None, "12345"])
    def test_short_password_rejected(self, service, store, password):
        with pytest.raises(ValidationError) as exc:
            service.register("a@x.com", password)
        assert exc.value.message == "Invalid email or password"
        assert store.users == {}

    def test_six_character_password_accepted(self, service, store):
        service.register("a@x.com", "123456")
        assert "a@x.com" in store.users


class TestLogin:
    def test_wrong_password_and_unknown_email_are_indistinguishable(self, service):
        service.register("a@x.com", "secret1")

        with pytest.raises(AuthError) as wrong_password:
            service.login("a@x.com", "wrongpassword")
        with pytest.raises(AuthError) as unknown_email:
            service.login("nobody@x.com", "secret1")

        assert wrong_password.value.message == "Invalid credentials"
        assert unknown_email.value.message == wrong_password.value.message

    @pytest.mark.parametrize(
        "email,password",
        [(None, "secret1"), ("a@x.com", None), (None, None), ("", "")],
    )
    def test_missing_credentials(self, service, email, password):
        service.register("a@x.com", "secret1")
        with pytest.raises(AuthError) as exc:
            service.login(email, password)
        assert exc.value.message == "Invalid credentials"

    def test_error_does_not_echo_password(self, service):
        service.register("a@x.com", "secret1")
        with pytest.raises(AuthError) as exc:
            service.login("a@x.com", "wrongpassword")
        assert "wrongpassword" not in str(exc.value)
        assert "secret1" not in str(exc.value)


class TestRefusedPasswords:
    def test_register_nul_password_is_validation_error(self, service, store):
        with pytest.raises(ValidationError) as exc:
            service.register("b@x.com", "abc\u0000def")
        assert exc.value.message == "Invalid email or password"
        assert store.users == {}

    def test_login_nul_password_same_error_for_known_and_unknown(self, service):
        service.register("a@x.com", "secret1")

        with pytest.raises(AuthError) as known:
            service.login("a@x.com", "bad\u0000pass")
        with pytest.raises(AuthError) as unknown:
            service.login("nobody@x.com", "bad\u0000pass")

        assert known.value.message == unknown.value.message == "Invalid credentials"
