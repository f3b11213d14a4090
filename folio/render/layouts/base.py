"""
Layout base class and helpers shared by the six templates.

A layout arranges the same logical sections (nav, hero, skills, projects,
contact, footer) in its own structure. Sections whose data is empty are
left out, and index-based decoration is always a pure function of the index.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ...portfolio.models import PortfolioData, Project
from ...styles.registry import TemplateStyle, get_template_classes
from ..tree import Node, el, section

PLACEHOLDER_MESSAGE = "Start filling out the form to see your portfolio preview"
VIEW_PROJECT = "View project"
ARROW = "→"


def pick(items: Sequence, index: int):
    """Cycle through a fixed sequence by item index."""
    return items[index % len(items)]


def project_tags(data: PortfolioData, index: int, limit: int = 3) -> List[str]:
    """Tags shown on a project card, drawn from the portfolio's skills.

    Each project starts at a different offset into the skill list so cards do
    not all repeat the same tags.
    """
    skills = data.skills
    if not skills:
        return []
    count = min(limit, len(skills))
    return [skills[(index + offset) % len(skills)] for offset in range(count)]


def photo(src: str, alt: str, cls: str = "avatar") -> Optional[Node]:
    if not src:
        return None
    return el("img", cls=cls, src=src, alt=alt)


def project_image(project: Project, cls: str = "project-image") -> Optional[Node]:
    if not project.image:
        return None
    return el("img", cls=cls, src=project.image, alt=project.title)


def external_link(href: str, *children, cls: str = "project-link") -> Optional[Node]:
    if not href:
        return None
    return el("a", *children, cls=cls, href=href, target="_blank", rel="noopener noreferrer")


class Layout(ABC):
    """One template's structural arrangement.

    Subclasses provide the section builders; ``render`` assembles them and
    applies the omit-when-empty rules. Layouts whose shell differs from the
    nav / main / footer stack override ``compose``.
    """

    template: str = ""
    css: str = ""
    nav_items = ("About", "Work", "Contact")
    default_name = "Your Name"
    default_job_title = "Your Job Title"
    brand_fallback = "Portfolio"
    footer_tagline = ""

    def render(self, data: PortfolioData, style: TemplateStyle) -> Node:
        classes = f"portfolio {get_template_classes(self.template, style.color_scheme)}"
        if data.is_empty():
            return el("div", self.placeholder(data, style), cls=classes)
        return el("div", *self.compose(data, style), cls=classes)

    def compose(self, data: PortfolioData, style: TemplateStyle) -> List[Optional[Node]]:
        return [
            self.nav(data, style),
            el(
                "main",
                self.hero(data, style),
                self.skills(data, style) if data.skills else None,
                self.projects(data, style) if data.projects else None,
                self.contact(data, style),
                cls="container",
            ),
            self.footer(data, style),
        ]

    # Text helpers

    def name(self, data: PortfolioData) -> str:
        return data.personal_info.name or self.default_name

    def job_title(self, data: PortfolioData) -> str:
        return data.personal_info.job_title or self.default_job_title

    def brand(self, data: PortfolioData) -> str:
        return data.personal_info.name or self.brand_fallback

    # Sections

    def placeholder(self, data: PortfolioData, style: TemplateStyle) -> Node:
        return section(
            "placeholder",
            el("p", PLACEHOLDER_MESSAGE, cls="placeholder-message"),
            cls="section placeholder",
        )

    def nav(self, data: PortfolioData, style: TemplateStyle) -> Optional[Node]:
        return section(
            "nav",
            el("div", self.brand(data), cls="nav-brand"),
            el("div", [el("span", item, cls="nav-item") for item in self.nav_items], cls="nav-items"),
            cls="site-nav",
            tag="nav",
        )

    @abstractmethod
    def hero(self, data: PortfolioData, style: TemplateStyle) -> Node:
        """Build the hero section."""

    @abstractmethod
    def skills(self, data: PortfolioData, style: TemplateStyle) -> Node:
        """Build the skills section."""

    @abstractmethod
    def projects(self, data: PortfolioData, style: TemplateStyle) -> Node:
        """Build the projects section."""

    def contact(self, data: PortfolioData, style: TemplateStyle) -> Optional[Node]:
        return None

    def footer(self, data: PortfolioData, style: TemplateStyle) -> Node:
        text = f"© {self.brand(data)}"
        if self.footer_tagline:
            text = f"{text}. {self.footer_tagline}"
        return section("footer", el("p", text), cls="site-footer", tag="footer")
