from __future__ import annotations

import pytest

import actions
from services import auth


@pytest.fixture()
def owner(db, monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("OWNER_EMAIL", "Owner@Example.com")
    monkeypatch.setenv("OWNER_PASSWORD", "s3cret-pass")
    auth.ensure_owner_user()
    return "owner@example.com"


def test_authenticate_success_records_session(owner) -> None:
    session_store: dict = {}

    result = actions.authenticate(
        None, {"email": "owner@example.com", "password": "s3cret-pass"}, session_store
    )

    assert result is None
    assert session_store[auth.SESSION_KEY] == owner


def test_authenticate_normalizes_email(owner) -> None:
    session_store: dict = {}

    result = actions.authenticate(
        None, {"email": "  OWNER@example.com ", "password": "s3cret-pass"}, session_store
    )

    assert result is None
    assert session_store[auth.SESSION_KEY] == owner


@pytest.mark.parametrize(
    "form",
    [
        {"email": "owner@example.com", "password": "wrong-pass"},
        {"email": "nobody@example.com", "password": "s3cret-pass"},
        {"email": "not-an-email", "password": "s3cret-pass"},
        {"email": "owner@example.com", "password": "123"},
        {},
    ],
)
def test_authenticate_invalid_credentials(owner, form) -> None:
    session_store: dict = {}

    assert actions.authenticate(None, form, session_store) == "Invalid credentials."
    assert auth.SESSION_KEY not in session_store


def test_authenticate_maps_other_auth_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(provider, form_data, session_store=None):
        raise auth.AuthError("boom", type="CallbackRouteError")

    monkeypatch.setattr(actions, "sign_in", _fail)

    assert actions.authenticate(None, {}) == "Something went wrong."


def test_authenticate_reraises_unknown_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(provider, form_data, session_store=None):
        raise RuntimeError("provider exploded")

    monkeypatch.setattr(actions, "sign_in", _fail)

    with pytest.raises(RuntimeError, match="provider exploded"):
        actions.authenticate(None, {})


def test_sign_in_rejects_unknown_provider(db) -> None:
    with pytest.raises(auth.InvalidProvider) as excinfo:
        auth.sign_in("github", {})

    assert excinfo.value.type == "InvalidProvider"


def test_ensure_owner_user_resets_changed_password(owner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OWNER_PASSWORD", "another-pass")
    auth.ensure_owner_user()

    assert actions.authenticate(None, {"email": owner, "password": "another-pass"}) is None
    assert actions.authenticate(None, {"email": owner, "password": "s3cret-pass"}) == "Invalid credentials."


def test_sign_out_clears_session(owner) -> None:
    session_store: dict = {}
    auth.sign_in("credentials", {"email": owner, "password": "s3cret-pass"}, session_store)

    auth.sign_out(session_store)

    assert session_store == {}
    assert auth.is_identifier_allowed(owner)
    assert not auth.is_identifier_allowed("nobody@example.com")


@pytest.mark.parametrize(
    ("callback_url", "expected"),
    [
        ("/dashboard/invoices/create", "/dashboard/invoices/create"),
        ("/dashboard/invoices?query=amy&page=2", "/dashboard/invoices?query=amy&page=2"),
        ("", "/dashboard/invoices"),
        (None, "/dashboard/invoices"),
        ("https://evil.example", "/dashboard/invoices"),
        ("//evil.example", "/dashboard/invoices"),
        ("/\\evil.example", "/dashboard/invoices"),
        ("/\t/evil.example", "/dashboard/invoices"),
        ("dashboard", "/dashboard/invoices"),
    ],
)
def test_safe_callback_url_only_allows_local_paths(callback_url, expected) -> None:
    assert auth.safe_callback_url(callback_url, "/dashboard/invoices") == expected
