"""
Template renderer.

``render`` is the single entry point shared by the live preview and every
export format. It is a pure function of the portfolio data.
"""
import logging
from typing import Dict

from pydantic import BaseModel, ConfigDict

from ..portfolio.models import PortfolioData
from ..styles.registry import get_css_variables, get_style, resolve_template
from .html import to_html
from .layouts.lookup import get_layout
from .stylesheet import build_stylesheet
from .tree import Node

logger = logging.getLogger(__name__)


class RenderedTree(BaseModel):
    """A rendered portfolio: visual tree plus the CSS it needs."""
    model_config = ConfigDict(frozen=True)

    template: str
    color_scheme: str
    root: Node
    stylesheet: str
    css_variables: Dict[str, str]

    def to_dict(self) -> dict:
        """Preview payload."""
        return {
            "template": self.template,
            "colorScheme": self.color_scheme,
            "root": self.root.to_dict(),
            "stylesheet": self.stylesheet,
            "cssVariables": dict(self.css_variables),
        }

    def to_html(self) -> str:
        """Markup of the tree, without the document shell."""
        return to_html(self.root)


def render(data: PortfolioData) -> RenderedTree:
    """Render portfolio data with the template and colour scheme in its theme.

    Unknown template ids render with the minimal layout and unknown colour
    schemes with the blue palette. Never raises for well-formed data.
    """
    theme = data.theme
    if resolve_template(theme.template) != theme.template:
        logger.debug(f"Unknown template {theme.template!r}, falling back to minimal")
    style = get_style(theme.template, theme.color_scheme)
    layout = get_layout(style.template)
    return RenderedTree(
        template=style.template,
        color_scheme=style.color_scheme,
        root=layout.render(data, style),
        stylesheet=build_stylesheet(style.template, style),
        css_variables=get_css_variables(style.template, style.color_scheme),
    )
