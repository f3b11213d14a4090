"""
Minimal layout: one centered column, lots of white space.
"""
from ...portfolio.models import PortfolioData
from ...styles.registry import TemplateStyle
from ..tree import Node, el, section
from .base import ARROW, VIEW_PROJECT, Layout, external_link, photo, project_image


class MinimalLayout(Layout):
    template = "minimal"
    footer_tagline = "Simple design, focused on content"

    css = """
.template-minimal .site-nav { display: flex; justify-content: space-between; align-items: center;
  max-width: 56rem; margin: 0 auto; padding: 1.5rem; border-bottom: 1px solid var(--template-border); }
.template-minimal .nav-items { display: flex; gap: 2rem; font-size: 0.875rem; opacity: 0.7; }
.template-minimal .container { max-width: 56rem; margin: 0 auto; padding: 0 1.5rem; }
.template-minimal .hero { text-align: center; padding: 8rem 0; }
.template-minimal .hero h1 { font-weight: 300; letter-spacing: -0.02em; margin: 1.5rem 0 1rem; }
.template-minimal .hero .job-title { font-size: 1.25rem; opacity: 0.7; }
.template-minimal .hero .bio { max-width: 42rem; margin: 2rem auto 0; font-size: 1.125rem; line-height: 1.8; }
.template-minimal .avatar { width: 8rem; height: 8rem; border-radius: 50%; object-fit: cover; }
.template-minimal .rule { width: 6rem; height: 1px; background: var(--template-border); margin: 3rem auto 0; }
.template-minimal .section-title { text-align: center; font-weight: 300; margin-bottom: 4rem; }
.template-minimal .skill-list { display: flex; flex-wrap: wrap; justify-content: center; gap: 0.75rem;
  max-width: 42rem; margin: 0 auto; }
.template-minimal .skill-tag { padding: 0.5rem 1rem; border: 1px solid var(--template-border); font-size: 0.875rem; }
.template-minimal .project-stack { max-width: 48rem; margin: 0 auto; }
.template-minimal .project { padding: 2rem 0; }
.template-minimal .project h3 { font-weight: 400; font-size: 1.5rem; margin-bottom: 0.75rem; }
.template-minimal .project-image { width: 100%; height: auto; border: 1px solid var(--template-border); margin-top: 1.5rem; }
.template-minimal .project-link { display: inline-block; margin-top: 1rem; font-size: 0.875rem; text-decoration: underline; }
.template-minimal .divider { height: 1px; background: var(--template-border); margin-top: 2rem; }
.template-minimal .contact { text-align: center; }
.template-minimal .contact-items { display: flex; justify-content: center; gap: 2rem; font-size: 0.875rem; opacity: 0.7; }
.template-minimal .site-footer { text-align: center; padding: 2rem; font-size: 0.875rem;
  border-top: 1px solid var(--template-border); opacity: 0.6; }
"""

    def hero(self, data: PortfolioData, style: TemplateStyle) -> Node:
        info = data.personal_info
        return section(
            "hero",
            photo(info.profile_photo, info.name),
            el("h1", self.name(data)),
            el("p", self.job_title(data), cls="job-title"),
            el("p", info.bio, cls="bio") if info.bio else None,
            el("div", cls="rule"),
            cls="section hero",
        )

    def skills(self, data: PortfolioData, style: TemplateStyle) -> Node:
        return section(
            "skills",
            el("h2", "Skills", cls="section-title"),
            el("div", [el("span", skill, cls="skill-tag") for skill in data.skills], cls="skill-list"),
            cls="section skills",
        )

    def projects(self, data: PortfolioData, style: TemplateStyle) -> Node:
        items = [
            el(
                "article",
                el("h3", project.title),
                el("p", project.description, cls="project-description"),
                project_image(project),
                external_link(project.link, f"{VIEW_PROJECT} {ARROW}"),
                el("div", cls="divider"),
                cls="project project-card card",
                data_project=project.id,
            )
            for project in data.projects
        ]
        return section(
            "projects",
            el("h2", "Projects", cls="section-title"),
            el("div", items, cls="project-stack"),
            cls="section projects",
        )

    def contact(self, data: PortfolioData, style: TemplateStyle) -> Node:
        return section(
            "contact",
            el("h2", "Contact", cls="section-title"),
            el("p", "Open to collaboration. Feel free to get in touch."),
            el(
                "div",
                el("span", "Email: hello@example.com"),
                el("span", "Phone: +1 555 0100"),
                cls="contact-items",
            ),
            cls="section contact",
        )
