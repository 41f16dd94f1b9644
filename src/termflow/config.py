"""Render settings, with environment-variable overrides.

Recognised variables:

* ``TERMFLOW_NEAR_FULL_MARGIN`` -- rows of slack under which tail-scrolled
  content already reports ``overflowed`` (default 2).
* ``TERMFLOW_OVERFLOW_CHAR`` -- glyph drawn on rows scrolled past the oldest
  line (default: none).
* ``TERMFLOW_TAB_WIDTH`` -- columns a tab expands to (default 3).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from termflow.scroll import DEFAULT_NEAR_FULL_MARGIN
from termflow.utils import graphemes

logger = logging.getLogger(__name__)

DEFAULT_TAB_WIDTH = 3


@dataclass
class RenderSettings:
    """Tunables shared by every paragraph a view renders."""

    near_full_margin: int = DEFAULT_NEAR_FULL_MARGIN
    scroll_overflow_char: str | None = None
    tab_width: int = DEFAULT_TAB_WIDTH


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative", name, raw)
        return default
    return value


def load_settings(env: Mapping[str, str] | None = None) -> RenderSettings:
    """Build ``RenderSettings`` from *env* (``os.environ`` by default)."""
    if env is None:
        env = os.environ
    overflow_char = env.get("TERMFLOW_OVERFLOW_CHAR") or None
    if overflow_char is not None and len(list(graphemes(overflow_char))) != 1:
        logger.warning(
            "Ignoring TERMFLOW_OVERFLOW_CHAR=%r: not a single character", overflow_char
        )
        overflow_char = None
    return RenderSettings(
        near_full_margin=_int_setting(
            env, "TERMFLOW_NEAR_FULL_MARGIN", DEFAULT_NEAR_FULL_MARGIN
        ),
        scroll_overflow_char=overflow_char,
        tab_width=_int_setting(env, "TERMFLOW_TAB_WIDTH", DEFAULT_TAB_WIDTH),
    )
