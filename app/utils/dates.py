"""Site timezone helpers."""

from __future__ import annotations

import os

import pendulum

SITE_TZ = "America/Los_Angeles"


def now_in_tz() -> pendulum.DateTime:
    """Current time on the campus clock; ``TIMEZONE`` overrides it."""
    return pendulum.now(pendulum.timezone(os.environ.get("TIMEZONE", SITE_TZ)))


def current_year() -> int:
    return now_in_tz().year
