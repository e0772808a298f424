"""
Jinja2 integration.

Exposes a ``koson`` filter that admits a value through classify() and
renders it, so templates (request bodies, fixtures) can embed JSON
literals without hand-written quoting.
"""

from __future__ import annotations

from typing import Any

import jinja2

from .config import KosonConfig
from .renderer import render
from .type_gate import classify


def koson_filter(raw: Any, config: KosonConfig | None = None) -> str:
    """Classify ``raw`` and render it as compact JSON."""
    return render(classify(raw, config), config)


def create_environment(
    loader: jinja2.BaseLoader | None = None, config: KosonConfig | None = None
) -> jinja2.Environment:
    """
    Create a Jinja2 environment with the ``koson`` filter registered.

    Args:
        loader: Optional template loader
        config: Options used by the filter

    Returns:
        A configured environment; undefined variables raise
    """
    env = jinja2.Environment(
        loader=loader,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )
    env.filters["koson"] = lambda raw: koson_filter(raw, config)
    return env


def render_template(source: str, context: dict[str, Any], config: KosonConfig | None = None) -> str:
    """Render template text with ``context``."""
    env = create_environment(config=config)
    return env.from_string(source).render(**context)
