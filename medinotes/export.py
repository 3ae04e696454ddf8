"""Static export: render the site once and write it as self-contained files."""

from __future__ import annotations

import shutil
from pathlib import Path

from flask import Flask

from .blueprints.landing.landing import render_landing
from .build import get_build_config
from .content import load_landing_content
from .utils.auth import AuthState

# Any path without a route renders the 404 page.
NOT_FOUND_PROBE = "/404.html"

# Both branches ship in the bundle; identity.js shows the one matching the visitor.
CLIENT_SWITCHED_STATES = (AuthState.ANONYMOUS, AuthState.AUTHENTICATED)


class ExportError(RuntimeError):
    """Raised when the site cannot be exported as a static bundle."""


def _render(client, path: str, expected_status: int) -> bytes:
    response = client.get(path)
    if response.status_code != expected_status:
        raise ExportError(
            f"Rendering {path} returned {response.status_code}, expected {expected_status}."
        )
    return response.get_data()


def render_index(app: Flask, state: AuthState) -> bytes:
    """Render the landing page with every branch, ``state`` visible and the rest hidden."""
    with app.test_request_context("/"):
        html = render_landing(
            state,
            load_landing_content(),
            product_url=app.config["PRODUCT_URL"],
            alternates=CLIENT_SWITCHED_STATES,
        )
    return html.encode("utf-8")


def export_site(
    app: Flask,
    out_dir: str | Path,
    state: AuthState = AuthState.ANONYMOUS,
) -> list[Path]:
    """Write index.html, 404.html and the static assets into ``out_dir``.

    ``state`` only picks the branch visible before the identity widget loads.
    """
    build = get_build_config(app)
    if not build.is_static_export:
        raise ExportError(f"Static export requires BUILD_OUTPUT='export' (got {build.output!r}).")
    if state not in CLIENT_SWITCHED_STATES:
        raise ExportError(f"Cannot export the page in the {state.value} auth state.")

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    pages = {
        "index.html": render_index(app, state),
        "404.html": _render(app.test_client(), NOT_FOUND_PROBE, 404),
    }

    for name, body in pages.items():
        target = out / name
        target.write_bytes(body)
        written.append(target)

    if app.static_folder and Path(app.static_folder).is_dir():
        static_out = out / (app.static_url_path or "/static").lstrip("/")
        shutil.copytree(app.static_folder, static_out, dirs_exist_ok=True)
        written.extend(sorted(path for path in static_out.rglob("*") if path.is_file()))

    app.logger.info("Exported %d file(s) to %s (initial state=%s)", len(written), out, state.value)
    return written
