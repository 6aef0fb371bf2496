"""Jinja2 environment used to render HTML e-mail bodies."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, select_autoescape

# Templates live in ``petdoc/templates/email``
TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates" / "email"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_email_template(template_id: str, context: Mapping[str, Any]) -> str:
    """Render the template named ``template_id`` with ``context``."""

    template = env.get_template(template_id)
    return template.render(**context)


__all__ = ["TEMPLATE_DIR", "env", "render_email_template"]
