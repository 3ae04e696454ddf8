"""Static marketing copy for the landing page, loaded from ``data/landing.json``."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from medinotes.utils.utils_json import load_json_file, require_keys

LANDING_CONTENT_FILE = "data/landing.json"
FEATURE_ACCENTS = ("blue", "emerald", "purple")


@dataclass(frozen=True)
class Feature:
    icon: str
    title: str
    description: str
    accent: str = "blue"


@dataclass(frozen=True)
class PricingPlan:
    name: str
    amount: int
    currency: str
    period: str
    included: tuple[str, ...]


@dataclass(frozen=True)
class LandingContent:
    brand: str
    headline: tuple[str, ...]
    tagline: str
    features: tuple[Feature, ...]
    pricing: PricingPlan


def _parse_feature(raw: Any, position: int) -> Feature:
    record = require_keys(raw, ("icon", "title", "description"), f"features[{position}]")
    accent = record.get("accent", "blue")
    if accent not in FEATURE_ACCENTS:
        raise ValueError(f"features[{position}]: unknown accent {accent!r}.")
    return Feature(
        icon=record["icon"],
        title=record["title"],
        description=record["description"],
        accent=accent,
    )


def _parse_pricing(raw: Any) -> PricingPlan:
    record = require_keys(raw, ("name", "amount", "currency", "period", "included"), "pricing")
    return PricingPlan(
        name=record["name"],
        amount=record["amount"],
        currency=record["currency"],
        period=record["period"],
        included=tuple(record["included"]),
    )


def parse_landing_content(data: Any) -> LandingContent:
    """Build a LandingContent from decoded JSON, raising ValueError on bad shape."""
    record = require_keys(data, ("brand", "headline", "tagline", "features", "pricing"), "landing")
    headline = record["headline"]
    if isinstance(headline, str):
        headline = [headline]

    return LandingContent(
        brand=record["brand"],
        headline=tuple(headline),
        tagline=record["tagline"],
        features=tuple(_parse_feature(item, index) for index, item in enumerate(record["features"])),
        pricing=_parse_pricing(record["pricing"]),
    )


@lru_cache(maxsize=None)
def load_landing_content(filepath: str = LANDING_CONTENT_FILE) -> LandingContent:
    return parse_landing_content(load_json_file(filepath))
