"""Public landing blueprint: marketing page with auth-gated calls to action."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Blueprint, current_app, render_template

from medinotes.content import LandingContent, load_landing_content
from medinotes.utils.auth import AuthState, read_auth_state

landing_bp = Blueprint("landing", __name__, template_folder="templates")

SIGN_IN = "sign_in"
LINK = "link"
ACCOUNT = "account"
PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class Control:
    """One navigation or call-to-action control on the page."""

    kind: str
    label: str = ""
    href: str | None = None


@dataclass(frozen=True)
class LandingBranch:
    state: AuthState
    nav: tuple[Control, ...]
    cta: Control


def branch_for(state: AuthState, product_url: str) -> LandingBranch:
    """Select the navigation and call-to-action controls for an auth state."""
    if state is AuthState.ANONYMOUS:
        return LandingBranch(
            state=state,
            nav=(Control(SIGN_IN, "Sign In"),),
            cta=Control(SIGN_IN, "Start Free Trial"),
        )
    if state is AuthState.AUTHENTICATED:
        return LandingBranch(
            state=state,
            nav=(Control(LINK, "Go to App", product_url), Control(ACCOUNT)),
            cta=Control(LINK, "Open Consultation Assistant", product_url),
        )
    if state is AuthState.UNKNOWN:
        return LandingBranch(
            state=state,
            nav=(Control(PLACEHOLDER, "Loading…"),),
            cta=Control(PLACEHOLDER, "Loading…"),
        )
    raise ValueError(f"Unhandled auth state: {state!r}")


def render_landing(
    state: AuthState,
    content: LandingContent,
    product_url: str = "/product",
    alternates: tuple[AuthState, ...] = (),
) -> str:
    """Render the landing page for the given auth state.

    States in ``alternates`` are rendered too, marked hidden, so a client-side
    widget can switch branches without a server round trip.
    """
    states = (state,) + tuple(alt for alt in alternates if alt is not state)
    branches = tuple(branch_for(item, product_url) for item in states)
    return render_template("landing.html", content=content, active=state, branches=branches)


@landing_bp.get("/")
def index() -> str:
    """Serve the landing page for the current visitor."""
    state = read_auth_state()
    current_app.logger.debug("Rendering landing page in %s state", state.value)
    return render_landing(
        state,
        load_landing_content(),
        product_url=current_app.config["PRODUCT_URL"],
    )
