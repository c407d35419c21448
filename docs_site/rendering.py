"""Jinja rendering for docs pages.

Templates receive the route's view-model merged with the request context
(``config`` and ``versions``), so nothing is stored as a mutable environment
global between requests.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from docs_site.content.renderer import PageRenderer

if typ.TYPE_CHECKING:
    from docs_site.context import RequestContext

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Render named templates with a view-model and request context."""

    def __init__(
        self, *, templates_dir: Path | None = None, pygments_style: str = "monokai"
    ) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``docs_site/templates`` directory when ``None``.
        pygments_style : str, optional
            Pygments style whose CSS is exposed to templates as
            ``pygments_css``.

        Notes
        -----
        The environment uses ``StrictUndefined`` so a template reading a key
        the route did not supply fails loudly instead of rendering blank.
        """
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.pygments_css = PageRenderer(pygments_style).stylesheet

    def render(
        self,
        template_name: str,
        context: RequestContext,
        view_model: typ.Mapping[str, typ.Any],
    ) -> str:
        """Render ``template_name`` and return the HTML text."""
        template = self.env.get_template(template_name)
        variables = {
            **context.template_globals(),
            "pygments_css": self.pygments_css,
            **view_model,
        }
        html = template.render(**variables)
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["DEFAULT_TEMPLATES_DIR", "TemplateRenderer"]
