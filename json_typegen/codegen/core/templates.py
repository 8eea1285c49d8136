"""
Jinja2 environment shared by the target generators.

Each generator ships a ``templates/`` directory next to its module; the
engine loads declarations from it with block trimming on and undefined
variables treated as errors.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)


class TemplateError(Exception):
    """A template is missing or failed to render."""

    pass


class TemplateEngine:
    """Renders one target's declaration templates."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir
        self._env = self._build_environment()

    def _build_environment(self) -> Environment:
        if self.template_dir is not None and self.template_dir.is_dir():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Nothing to load; every lookup misses
            loader = DictLoader({})

        env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        env.filters["comment"] = line_comment
        return env

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render template_name with context.

        Raises:
            TemplateError: If the template does not exist or rendering fails
                (including references to undefined variables)
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {e.name}") from e
        except Exception as e:
            raise TemplateError(f"Cannot render {template_name}: {e}") from e


def line_comment(value: Any, marker: str = "//") -> str:
    """Prefix every non-blank line of value with a line-comment marker."""
    return "\n".join(
        f"{marker} {line}" if line.strip() else line for line in str(value).split("\n")
    )


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, reading templates from template_dir if given."""
    return TemplateEngine(template_dir)
