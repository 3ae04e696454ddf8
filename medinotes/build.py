"""Build options: static export target, image handling, and strict rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import Flask, url_for
from jinja2 import StrictUndefined

OUTPUT_EXPORT = "export"
OUTPUT_SERVER = "server"
SUPPORTED_OUTPUTS = (OUTPUT_EXPORT, OUTPUT_SERVER)


class BuildConfigError(ValueError):
    """Raised when the build options are inconsistent or unknown."""


@dataclass(frozen=True)
class BuildConfig:
    """The fixed set of recognized build options."""

    output: str = OUTPUT_EXPORT
    images_unoptimized: bool = True
    strict_mode: bool = True

    @property
    def is_static_export(self) -> bool:
        return self.output == OUTPUT_EXPORT

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "BuildConfig":
        """Read and validate BUILD_OUTPUT, IMAGES_UNOPTIMIZED and STRICT_MODE."""
        output = config.get("BUILD_OUTPUT", OUTPUT_EXPORT)
        images_unoptimized = config.get("IMAGES_UNOPTIMIZED", True)
        strict_mode = config.get("STRICT_MODE", True)

        if output not in SUPPORTED_OUTPUTS:
            raise BuildConfigError(
                f"Unknown build output {output!r}; expected one of {', '.join(SUPPORTED_OUTPUTS)}."
            )
        for name, value in (("IMAGES_UNOPTIMIZED", images_unoptimized), ("STRICT_MODE", strict_mode)):
            if not isinstance(value, bool):
                raise BuildConfigError(f"{name} must be a boolean, got {value!r}.")

        # A static bundle has no image server behind it.
        if output == OUTPUT_EXPORT and not images_unoptimized:
            raise BuildConfigError(
                "Image optimization is not available with a static export; set IMAGES_UNOPTIMIZED."
            )

        return cls(output=output, images_unoptimized=images_unoptimized, strict_mode=strict_mode)


def apply_build_config(app: Flask) -> BuildConfig:
    """Validate the build options and wire them into the application."""
    build = BuildConfig.from_mapping(app.config)
    app.extensions["build_config"] = build

    if build.strict_mode:
        app.jinja_env.undefined = StrictUndefined

    def image_url(filename: str, width: int | None = None) -> str:
        """Return the URL of a static image, sized by the image server when enabled."""
        if build.images_unoptimized or width is None:
            return url_for("static", filename=filename)
        return url_for("static", filename=filename, w=width)

    app.jinja_env.globals["image_url"] = image_url

    app.logger.info(
        "Build options: output=%s images_unoptimized=%s strict_mode=%s",
        build.output,
        build.images_unoptimized,
        build.strict_mode,
    )
    return build


def get_build_config(app: Flask) -> BuildConfig:
    return app.extensions["build_config"]
