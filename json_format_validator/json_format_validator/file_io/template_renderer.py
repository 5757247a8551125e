"""Template rendering utilities for report output."""

from __future__ import annotations

import json
import os

from jinja2 import Environment, FileSystemLoader


def _get_template_directories() -> list[str]:
    """Resolve template search paths.

    Templates ship inside the package, so the same path works for a source
    checkout and an installed site-packages layout.
    """

    # Base dir is .../json_format_validator/file_io
    base_dir = os.path.dirname(os.path.abspath(__file__))
    template_dir = os.path.abspath(os.path.join(base_dir, "../templates"))
    return [template_dir] if os.path.exists(template_dir) else []


def custom_serializer(obj):
    """Custom JSON serializer for report objects."""

    if hasattr(obj, "as_dict"):
        return obj.as_dict()
    return str(obj)


def tojson_filter(value):
    """Jinja2 filter to serialize objects to JSON."""

    return json.dumps(value, default=custom_serializer)


class TemplateRenderer:
    """Unified template rendering utility."""

    def __init__(self, template_dir: str | list[str] | None = None):
        if template_dir is None:
            template_dirs = _get_template_directories()
        elif isinstance(template_dir, str):
            template_dirs = [template_dir]
        else:
            template_dirs = list(template_dir)

        self.template_dirs = template_dirs
        self.env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence="\n",
            autoescape=False,
        )
        self.env.filters["tojson"] = tojson_filter

    def render_template(self, template_name: str, **kwargs) -> str:
        template = self.env.get_template(template_name)
        return template.render(**kwargs)
