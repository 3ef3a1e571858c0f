"""Jinja2 rendering for generated JavaScript sources."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

GENERATOR = "addons_pull"

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render(template_name: str, **context: Any) -> str:
    """Render ``template_name`` with the generator banner filled in."""
    context.setdefault("generator", GENERATOR)
    return _environment().get_template(template_name).render(**context)


def js_string(value: str) -> str:
    """Quote ``value`` as a JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


__all__ = ["GENERATOR", "js_string", "render"]
