"""Core application factory and shared setup utilities."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

import click
from flask import Flask, render_template

from .build import BuildConfigError, apply_build_config
from .utils.auth import AuthState, AuthStateProvider, install_auth_provider

DEFAULT_PRODUCT_URL = "/product"
DEFAULT_LOCALE = "en_US"


def create_app(
    config_object: str | object = "config.Config",
    auth_provider: AuthStateProvider | None = None,
) -> Flask:
    """Create, configure, and return the Flask application instance."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    app.config.setdefault("PRODUCT_URL", DEFAULT_PRODUCT_URL)
    app.config.setdefault("LOCALE", os.getenv("LOCALE", DEFAULT_LOCALE))
    app.config.setdefault("EXPORT_DIR", "out")
    app.config.setdefault("IDENTITY_PUBLISHABLE_KEY", "")
    app.config.setdefault("IDENTITY_SCRIPT_URL", "")

    apply_build_config(app)
    install_auth_provider(app, auth_provider)

    if not app.config["IDENTITY_SCRIPT_URL"]:
        app.logger.warning("IDENTITY_SCRIPT_URL not set: sign-in controls will be inert")

    _register_blueprints(app)
    _register_context_processors(app)
    _register_filters(app)
    _register_error_handlers(app)
    _register_commands(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register the application's blueprints."""
    from .blueprints.landing.landing import landing_bp

    app.register_blueprint(landing_bp)


def _register_context_processors(app: Flask) -> None:
    """Expose global template variables."""
    from babel.dates import format_date

    from .content import load_landing_content

    @app.context_processor
    def inject_template_globals() -> dict[str, object]:
        """Make brand, identity widget settings, and year available."""
        return {
            "brand": load_landing_content().brand,
            "identity_publishable_key": app.config["IDENTITY_PUBLISHABLE_KEY"],
            "identity_script_url": app.config["IDENTITY_SCRIPT_URL"],
            "current_year": format_date(date.today(), "yyyy", locale=app.config["LOCALE"]),
        }


def _register_filters(app: Flask) -> None:
    """Register custom Jinja filters used across the application."""
    from babel.numbers import format_currency

    def format_price(amount: int | float, currency: str) -> str:
        # Whole amounts are shown without decimals ("$10", not "$10.00").
        if float(amount).is_integer():
            return format_currency(
                int(amount),
                currency,
                format="¤#,##0",
                locale=app.config["LOCALE"],
                currency_digits=False,
            )
        return format_currency(amount, currency, locale=app.config["LOCALE"])

    app.jinja_env.filters["format_price"] = format_price


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def page_not_found(_error):
        return render_template("404.html"), 404


def _register_commands(app: Flask) -> None:
    """Attach the static export command to the Flask CLI."""
    from .export import ExportError, export_site

    @app.cli.command("export")
    @click.option(
        "--out",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Output directory (default: EXPORT_DIR).",
    )
    @click.option(
        "--state",
        type=click.Choice([AuthState.ANONYMOUS.value, AuthState.AUTHENTICATED.value]),
        default=AuthState.ANONYMOUS.value,
        show_default=True,
        help="Auth state the exported page is rendered in.",
    )
    def export_command(out: Path | None, state: str) -> None:
        """Write the landing page as a static bundle."""
        out_dir = out or Path(app.config["EXPORT_DIR"])
        try:
            written = export_site(app, out_dir, state=AuthState(state))
        except (ExportError, BuildConfigError) as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"Exported {len(written)} file(s) to {out_dir}")
