import re

import pytest

from medinotes.blueprints.landing.landing import (
    ACCOUNT,
    LINK,
    PLACEHOLDER,
    SIGN_IN,
    branch_for,
    render_landing,
)
from medinotes.content import load_landing_content
from medinotes.utils.auth import AuthState

HERO_RE = re.compile(rb'<section class="hero">(.*?)<div class="cta"', re.S)


def _hero(body: bytes) -> bytes:
    match = HERO_RE.search(body)
    assert match, "hero section not rendered"
    return match.group(1)


def test_anonymous_visitor_sees_sign_in_controls(client):
    response = client.get("/")

    assert response.status_code == 200
    assert b"Sign In" in response.data
    assert b"Start Free Trial" in response.data
    assert b'data-identity-sign-in="modal"' in response.data
    assert b"/product" not in response.data
    assert b"data-identity-user-button" not in response.data
    assert b'data-auth-state="anonymous"' in response.data
    assert b'data-auth-branch="authenticated"' not in response.data
    assert b" hidden>" not in response.data


def test_signed_in_visitor_sees_product_links(signed_in):
    response = signed_in.get("/")

    assert response.status_code == 200
    assert b'href="/product"' in response.data
    assert b"Go to App" in response.data
    assert b"Open Consultation Assistant" in response.data
    assert b'data-identity-user-button data-show-name="true"' in response.data
    assert b"Sign In" not in response.data
    assert b"Start Free Trial" not in response.data


def test_static_content_is_identical_for_both_states(app):
    anonymous = app.test_client().get("/").data

    signed = app.test_client()
    with signed.session_transaction() as session:
        session["user"] = {"id": "user_123"}
    authenticated = signed.get("/").data

    assert _hero(anonymous) == _hero(authenticated)

    hero = _hero(anonymous).decode("utf-8")
    for title in ("Professional Summaries", "Action Items", "Patient Emails"):
        assert hero.count(title) == 2  # feature card and pricing list
    assert "$10" in hero
    assert "/month" in hero
    assert "Premium Subscription" in hero
    assert "Transform Your<br>Consultation Notes" in hero


def test_malformed_session_renders_unknown_state(client):
    with client.session_transaction() as session:
        session["user"] = "not-a-user-record"

    response = client.get("/")

    assert response.status_code == 200
    assert b'data-auth-state="unknown"' in response.data
    assert "Loading…".encode("utf-8") in response.data
    assert b'aria-busy="true"' in response.data
    assert b"Sign In" not in response.data
    assert b"/product" not in response.data


def test_product_url_is_configurable(app_factory):
    app = app_factory(PRODUCT_URL="/app/consultations")
    client = app.test_client()
    with client.session_transaction() as session:
        session["user"] = {"id": "user_123"}

    response = client.get("/")

    assert b'href="/app/consultations"' in response.data


@pytest.mark.parametrize("state", [AuthState.ANONYMOUS, AuthState.AUTHENTICATED])
def test_exactly_one_branch_renders(state):
    branch = branch_for(state, "/product")
    kinds = {control.kind for control in branch.nav} | {branch.cta.kind}

    shows_sign_in = SIGN_IN in kinds
    shows_product = LINK in kinds
    assert shows_sign_in != shows_product
    assert (ACCOUNT in kinds) == shows_product


def test_unknown_branch_shows_only_placeholders():
    branch = branch_for(AuthState.UNKNOWN, "/product")

    assert {control.kind for control in branch.nav} == {PLACEHOLDER}
    assert branch.cta.kind == PLACEHOLDER


def test_branch_for_rejects_unhandled_state():
    with pytest.raises(ValueError):
        branch_for("authenticated", "/product")


def test_render_landing_is_driven_by_state_alone(app):
    content = load_landing_content()

    with app.test_request_context("/"):
        anonymous = render_landing(AuthState.ANONYMOUS, content)
        authenticated = render_landing(AuthState.AUTHENTICATED, content, product_url="/product")

    assert "Sign In" in anonymous and "/product" not in anonymous
    assert "Go to App" in authenticated and "Sign In" not in authenticated
