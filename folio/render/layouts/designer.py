"""
Designer layout: editorial typography, icon tiles and a masonry project grid.
"""
from ...portfolio.models import PortfolioData
from ...styles.registry import TemplateStyle
from ..tree import Node, el, section
from .base import ARROW, Layout, external_link, photo, pick, project_image, project_tags

TILE_GRADIENTS = (
    ("#F472B6", "#EC4899"),
    ("#A78BFA", "#8B5CF6"),
    ("#60A5FA", "#3B82F6"),
    ("#34D399", "#10B981"),
    ("#FBBF24", "#F59E0B"),
    ("#F87171", "#EF4444"),
)

SKILL_ICONS = (("UI", "🎨"), ("UX", "🧭"), ("Web", "🌐"), ("Mobile", "📱"), ("Brand", "🏷️"))
DEFAULT_ICON = "✨"

CONCEPTS = ("Visual identity", "Interaction", "Storytelling")


def skill_icon(skill: str) -> str:
    """Icon for a skill, chosen by keyword."""
    for keyword, icon in SKILL_ICONS:
        if keyword.lower() in skill.lower():
            return icon
    return DEFAULT_ICON


def mastery(index: int) -> str:
    return f"{min(100, 80 + index * 5)}%"


def gradient(index: int) -> str:
    start, end = pick(TILE_GRADIENTS, index)
    return f"linear-gradient(135deg, {start}, {end})"


class DesignerLayout(Layout):
    template = "designer"
    nav_items = ("Work", "About", "Contact")
    footer_tagline = "Designed with care"

    css = """
.template-designer .site-nav { display: flex; justify-content: space-between; align-items: center;
  max-width: 80rem; margin: 0 auto; padding: 2rem 1.5rem; }
.template-designer .nav-brand { font-family: Georgia, serif; font-size: 1.5rem; font-style: italic; }
.template-designer .nav-items { display: flex; gap: 2.5rem; font-size: 0.75rem; letter-spacing: 0.2em; text-transform: uppercase; }
.template-designer .container { max-width: 80rem; margin: 0 auto; padding: 0 1.5rem 4rem; }
.template-designer .hero { display: grid; grid-template-columns: minmax(0, 1fr) auto; gap: 4rem; align-items: end; padding: 6rem 0; }
.template-designer .eyebrow { font-size: 0.75rem; letter-spacing: 0.3em; text-transform: uppercase; color: var(--template-primary); }
.template-designer .hero h1 { font-family: Georgia, serif; font-weight: 400; font-size: 5rem; line-height: 1; margin: 1.5rem 0; }
.template-designer .job-title { font-size: 1.5rem; font-style: italic; color: #6B7280; }
.template-designer .bio { max-width: 36rem; margin-top: 2rem; font-size: 1.125rem; line-height: 1.9; }
.template-designer .concepts { display: flex; flex-wrap: wrap; gap: 0.75rem; margin-top: 2rem; }
.template-designer .concept { padding: 0.375rem 1rem; border: 1px solid currentColor; border-radius: 9999px; font-size: 0.8125rem; }
.template-designer .avatar { width: 16rem; height: 20rem; object-fit: cover; border-radius: 10rem 10rem 1rem 1rem; }
.template-designer .section-title { font-family: Georgia, serif; font-weight: 400; font-size: 2.5rem; margin-bottom: 3rem; }
.template-designer .icon-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(10rem, 1fr)); gap: 1.5rem; }
.template-designer .icon-tile { padding: 1.5rem; background: var(--template-surface); border-radius: 1rem;
  box-shadow: var(--template-shadow); }
.template-designer .icon { width: 3rem; height: 3rem; display: flex; align-items: center; justify-content: center;
  border-radius: 0.75rem; font-size: 1.5rem; margin-bottom: 1rem; }
.template-designer .mastery { height: 0.25rem; background: #F3F4F6; border-radius: 9999px; margin-top: 0.75rem; overflow: hidden; }
.template-designer .mastery-fill { height: 100%; border-radius: 9999px; }
.template-designer .masonry { column-count: 3; column-gap: 1.5rem; }
.template-designer .masonry-item { break-inside: avoid; margin-bottom: 1.5rem; overflow: hidden;
  background: var(--template-surface); border-radius: 1rem; box-shadow: var(--template-shadow); }
.template-designer .masonry-media { position: relative; overflow: hidden; }
.template-designer .masonry-media img { display: block; width: 100%; height: auto; }
.template-designer .overlay { position: absolute; inset: 0; display: flex; flex-direction: column; justify-content: flex-end;
  padding: 1.5rem; color: #FFFFFF; background: linear-gradient(to top, rgba(0, 0, 0, 0.8), transparent);
  opacity: 0; transition: opacity var(--template-transition-speed) ease; }
.template-designer .masonry-item:hover .overlay { opacity: 1; }
.template-designer .info { padding: 1.5rem; }
.template-designer .info h3 { font-family: Georgia, serif; font-weight: 400; font-size: 1.5rem; }
.template-designer .tag-row { display: flex; flex-wrap: wrap; gap: 0.5rem; margin-top: 0.75rem; }
.template-designer .tag { font-size: 0.75rem; letter-spacing: 0.1em; text-transform: uppercase; }
.template-designer .project-link { display: inline-block; margin-top: 1rem; font-size: 0.875rem; border-bottom: 1px solid currentColor; }
.template-designer .contact-grid { display: grid; grid-template-columns: repeat(3, minmax(0, 1fr)); gap: 1.5rem; }
.template-designer .contact-card { padding: 2rem; text-align: center; background: var(--template-surface); border-radius: 1rem; }
.template-designer .contact-label { font-size: 0.75rem; letter-spacing: 0.2em; text-transform: uppercase; color: #6B7280; }
.template-designer .site-footer { text-align: center; padding: 3rem; font-family: Georgia, serif; font-style: italic; color: #6B7280; }
"""

    def hero(self, data: PortfolioData, style: TemplateStyle) -> Node:
        info = data.personal_info
        return section(
            "hero",
            el(
                "div",
                el("p", "Portfolio", cls="eyebrow"),
                el("h1", self.name(data)),
                el("p", self.job_title(data), cls="job-title"),
                el("p", info.bio, cls="bio") if info.bio else None,
                el("div", [el("span", concept, cls="concept") for concept in CONCEPTS], cls="concepts"),
                cls="hero-text",
            ),
            photo(info.profile_photo, info.name),
            cls="section hero",
        )

    def skills(self, data: PortfolioData, style: TemplateStyle) -> Node:
        tiles = [
            el(
                "div",
                el("div", skill_icon(skill), cls="icon", style={"background": gradient(index)}),
                el("h3", skill),
                el(
                    "div",
                    el("div", cls="mastery-fill", style={"width": mastery(index), "background": gradient(index)}),
                    cls="mastery",
                ),
                cls="icon-tile card",
            )
            for index, skill in enumerate(data.skills)
        ]
        return section(
            "skills",
            el("h2", "Capabilities", cls="section-title"),
            el("div", tiles, cls="icon-grid"),
            cls="section skills",
        )

    def projects(self, data: PortfolioData, style: TemplateStyle) -> Node:
        items = []
        for index, project in enumerate(data.projects):
            tags = project_tags(data, index)
            tag_row = el("div", [el("span", tag, cls="tag") for tag in tags], cls="tag-row") if tags else None
            media = None
            if project.image:
                media = el(
                    "div",
                    project_image(project),
                    el(
                        "div",
                        el("h3", project.title),
                        el("p", project.description),
                        tag_row,
                        external_link(project.link, f"Open {ARROW}"),
                        cls="overlay",
                    ),
                    cls="masonry-media",
                )
            items.append(el(
                "article",
                media,
                el(
                    "div",
                    el("h3", project.title),
                    el("p", project.description, cls="project-description"),
                    tag_row,
                    external_link(project.link, f"View case study {ARROW}"),
                    cls="info",
                ),
                cls="masonry-item project-card card",
                data_project=project.id,
            ))
        return section(
            "projects",
            el("h2", "Selected work", cls="section-title"),
            el("div", items, cls="masonry"),
            cls="section projects",
        )

    def contact(self, data: PortfolioData, style: TemplateStyle) -> Node:
        cards = [
            el("div", el("p", label, cls="contact-label"), el("p", value), cls="contact-card")
            for label, value in (
                ("Email", "hello@example.com"),
                ("Studio", "Brooklyn, NY"),
                ("Availability", "Open to new projects"),
            )
        ]
        return section(
            "contact",
            el("h2", "Let's talk", cls="section-title"),
            el("div", cards, cls="contact-grid"),
            cls="section contact",
        )
