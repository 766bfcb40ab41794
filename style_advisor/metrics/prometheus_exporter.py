"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, generate_latest


outfit_generation_total = Counter(
    "outfit_generation_total",
    "Total number of outfit generation requests served.",
    ["gender", "occasion"],
)

custom_outfit_saves_total = Counter(
    "custom_outfit_saves_total",
    "Total number of custom outfits saved by users.",
)

active_sessions = Gauge(
    "active_sessions",
    "Number of currently issued session tokens.",
)


def render_latest() -> tuple[bytes, str]:
    """Return the text exposition of the default registry and its content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
