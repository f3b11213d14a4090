"""
Professional layout: fixed sidebar plus a scrolling main column.

The sidebar carries identity, contact, skill bars and languages; the main
column carries the bio, an experience timeline, education and the projects.
"""
from typing import List, Optional

from ...portfolio.models import PortfolioData
from ...styles.registry import TemplateStyle
from ..tree import Node, el, section
from .base import ARROW, Layout, external_link, photo, project_tags

DEFAULT_BIO = (
    "Experienced professional with a track record of delivering high quality "
    "work and dependable results."
)

LANGUAGES = (("English", "Native"), ("Spanish", "Fluent"))

EXPERIENCE = (
    ("Senior Project Manager", "2020 - Present", "Technology company",
     "Plans and delivers large projects, leading cross-functional teams through complex launches."),
    ("Project Consultant", "2018 - 2020", "International consultancy",
     "Advised enterprise clients on strategy and digital transformation."),
)

EDUCATION = (
    ("Master of Business Administration", "Business school", "2016 - 2018"),
    ("Bachelor of Computer Science", "University", "2012 - 2016"),
)


def skill_level(index: int) -> str:
    return f"{max(60, 95 - index * 5)}%"


class ProfessionalLayout(Layout):
    template = "professional"
    nav_items = ("Home", "Experience", "Contact")
    footer_tagline = "Professional and dependable"

    css = """
.template-professional .site-nav { display: flex; justify-content: space-between; padding: 1.25rem 2rem;
  background: var(--template-surface); border-bottom: 1px solid var(--template-border); }
.template-professional .nav-brand { font-weight: 600; font-size: 1.25rem; }
.template-professional .nav-items { display: flex; gap: 2rem; font-size: 0.875rem; }
.template-professional .shell { display: grid; grid-template-columns: 20rem minmax(0, 1fr); gap: 2.5rem;
  max-width: 80rem; margin: 0 auto; padding: 3rem 2rem; align-items: start; }
.template-professional .sidebar { position: sticky; top: 2rem; padding: 2rem; background: var(--template-surface);
  border: 1px solid var(--template-border); border-radius: var(--template-border-radius); box-shadow: var(--template-shadow); }
.template-professional .identity { text-align: center; padding-bottom: 1.5rem; border-bottom: 1px solid var(--template-border); }
.template-professional .avatar { width: 8rem; height: 8rem; border-radius: 50%; object-fit: cover; margin-bottom: 1rem; }
.template-professional .identity h1 { font-size: 1.75rem; }
.template-professional .job-title { color: var(--template-primary); font-style: italic; margin-top: 0.5rem; }
.template-professional .sidebar h3 { font-size: 1rem; text-transform: uppercase; letter-spacing: 0.08em; margin: 1.5rem 0 1rem; }
.template-professional .contact-list li { list-style: none; margin-bottom: 0.5rem; font-size: 0.875rem; }
.template-professional .skill-row { margin-bottom: 0.75rem; font-size: 0.875rem; }
.template-professional .skill-bar { height: 0.375rem; background: var(--template-border); border-radius: 9999px; margin-top: 0.25rem; }
.template-professional .skill-bar-fill { height: 100%; background: var(--template-primary); border-radius: 9999px; }
.template-professional .language { display: flex; justify-content: space-between; font-size: 0.875rem; margin-bottom: 0.5rem; }
.template-professional .main-column .section { padding-top: 0; }
.template-professional .main-column h2 { padding-bottom: 0.5rem; margin-bottom: 1.5rem;
  border-bottom: 2px solid var(--template-primary); font-size: 1.5rem; }
.template-professional .timeline { border-left: 2px solid var(--template-border); padding-left: 1.5rem; }
.template-professional .timeline-entry { position: relative; margin-bottom: 2rem; }
.template-professional .timeline-entry::before { content: ""; position: absolute; left: -1.95rem; top: 0.4rem;
  width: 0.75rem; height: 0.75rem; border-radius: 50%; background: var(--template-primary); }
.template-professional .entry-head { display: flex; justify-content: space-between; gap: 1rem; }
.template-professional .entry-period { font-size: 0.875rem; color: #64748B; white-space: nowrap; }
.template-professional .entry-org { color: var(--template-primary); margin: 0.25rem 0 0.5rem; }
.template-professional .education-entry { display: flex; justify-content: space-between; margin-bottom: 1rem; }
.template-professional .project-list { display: flex; flex-direction: column; gap: 1.25rem; }
.template-professional .project-item { padding: 1.5rem; background: var(--template-surface);
  border: 1px solid var(--template-border); border-radius: var(--template-border-radius); }
.template-professional .project-head { display: flex; justify-content: space-between; gap: 1rem; }
.template-professional .tag-row { display: flex; flex-wrap: wrap; gap: 0.5rem; margin-top: 1rem; }
.template-professional .tag { padding: 0.125rem 0.625rem; font-size: 0.75rem; background: var(--template-border);
  border-radius: var(--template-border-radius); font-family: system-ui, sans-serif; }
.template-professional .site-footer { text-align: center; padding: 2rem; font-size: 0.875rem; color: #64748B;
  border-top: 1px solid var(--template-border); }
"""

    def compose(self, data: PortfolioData, style: TemplateStyle) -> List[Optional[Node]]:
        return [
            self.nav(data, style),
            el(
                "div",
                el(
                    "aside",
                    self.hero(data, style),
                    self.contact(data, style),
                    self.skills(data, style) if data.skills else None,
                    self.languages(),
                    cls="sidebar",
                ),
                el(
                    "main",
                    self.about(data),
                    self.experience(),
                    self.education(),
                    self.projects(data, style) if data.projects else None,
                    cls="main-column",
                ),
                cls="shell",
            ),
            self.footer(data, style),
        ]

    def hero(self, data: PortfolioData, style: TemplateStyle) -> Node:
        info = data.personal_info
        return section(
            "hero",
            photo(info.profile_photo, info.name),
            el("h1", self.name(data)),
            el("p", self.job_title(data), cls="job-title"),
            cls="identity",
            tag="div",
        )

    def contact(self, data: PortfolioData, style: TemplateStyle) -> Node:
        return section(
            "contact",
            el("h3", "Contact"),
            el(
                "ul",
                el("li", "✉️ contact@example.com"),
                el("li", "📱 +1 555 0100"),
                el("li", "📍 New York, NY"),
                cls="contact-list",
            ),
            tag="div",
        )

    def skills(self, data: PortfolioData, style: TemplateStyle) -> Node:
        rows = [
            el(
                "div",
                el("span", skill),
                el("div", el("div", cls="skill-bar-fill", style={"width": skill_level(index)}), cls="skill-bar"),
                cls="skill-row",
            )
            for index, skill in enumerate(data.skills)
        ]
        return section("skills", el("h3", "Skills"), rows, tag="div")

    def languages(self) -> Node:
        return el(
            "div",
            el("h3", "Languages"),
            [
                el("div", el("span", language), el("span", level, cls="language-level"), cls="language")
                for language, level in LANGUAGES
            ],
            cls="languages",
        )

    def about(self, data: PortfolioData) -> Node:
        bio = data.personal_info.bio
        return section(
            "about",
            el("h2", "Profile"),
            el("p", bio, cls="bio") if bio else el("p", DEFAULT_BIO, cls="bio placeholder-content"),
            cls="section",
        )

    def experience(self) -> Node:
        entries = [
            el(
                "div",
                el("div", el("h3", role), el("span", period, cls="entry-period"), cls="entry-head"),
                el("p", org, cls="entry-org"),
                el("p", summary),
                cls="timeline-entry",
            )
            for role, period, org, summary in EXPERIENCE
        ]
        return section(
            "experience",
            el("h2", "Experience"),
            el("div", entries, cls="timeline placeholder-content"),
            cls="section",
        )

    def education(self) -> Node:
        entries = [
            el(
                "div",
                el("div", el("h3", degree), el("p", school)),
                el("span", period, cls="entry-period"),
                cls="education-entry",
            )
            for degree, school, period in EDUCATION
        ]
        return section(
            "education",
            el("h2", "Education"),
            el("div", entries, cls="placeholder-content"),
            cls="section",
        )

    def projects(self, data: PortfolioData, style: TemplateStyle) -> Node:
        items = []
        for index, project in enumerate(data.projects):
            tags = project_tags(data, index, limit=4)
            items.append(el(
                "article",
                el(
                    "div",
                    el("h3", project.title),
                    external_link(project.link, f"Details {ARROW}"),
                    cls="project-head",
                ),
                el("p", project.description, cls="project-description"),
                el("div", [el("span", tag, cls="tag") for tag in tags], cls="tag-row") if tags else None,
                cls="project-item project-card card",
                data_project=project.id,
            ))
        return section(
            "projects",
            el("h2", "Projects"),
            el("div", items, cls="project-list"),
            cls="section",
        )
