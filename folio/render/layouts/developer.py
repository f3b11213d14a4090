"""
Developer layout: a monospace IDE window.

The hero reads as a snippet of code, skills are printed as a JSON array,
projects are repository cards and contact is a terminal session.
"""
from typing import List, Optional

from ...portfolio.models import PortfolioData
from ...styles.registry import TemplateStyle
from ..tree import Node, el, section
from .base import Layout, external_link, photo, pick, project_tags

TOKEN_COLORS = ("token-string", "token-number", "token-keyword", "token-function")
TABS = ("portfolio.tsx", "skills.json", "projects.md")


def token(text: str, kind: str) -> Node:
    return el("span", text, cls=f"token {kind}")


def quote() -> Node:
    return el("span", "\"", cls="token token-quote")


class DeveloperLayout(Layout):
    template = "developer"
    nav_items = TABS
    brand_fallback = "developer"
    footer_tagline = "Built with code"

    css = """
.template-developer { font-family: "JetBrains Mono", "Fira Code", Consolas, monospace; }
.template-developer .ide { max-width: 72rem; margin: 2rem auto; overflow: hidden; border: 1px solid var(--template-border);
  border-radius: var(--template-border-radius); box-shadow: var(--template-shadow); background: var(--template-surface); }
.template-developer .title-bar { display: flex; align-items: center; gap: 0.5rem; padding: 0.75rem 1rem;
  background: #1E293B; border-bottom: 1px solid var(--template-border); font-size: 0.8125rem; color: #94A3B8; }
.template-developer .window-dot { width: 0.75rem; height: 0.75rem; border-radius: 50%; }
.template-developer .dot-close { background: #EF4444; }
.template-developer .dot-minimize { background: #EAB308; }
.template-developer .dot-zoom { background: #22C55E; }
.template-developer .window-title { margin-left: 1rem; }
.template-developer .site-nav { display: flex; background: #0F172A; border-bottom: 1px solid var(--template-border); }
.template-developer .nav-brand { display: none; }
.template-developer .nav-items { display: flex; }
.template-developer .nav-item { padding: 0.5rem 1.25rem; font-size: 0.8125rem; color: #64748B;
  border-right: 1px solid var(--template-border); }
.template-developer .nav-item:first-child { color: #E2E8F0; background: var(--template-surface);
  border-top: 2px solid var(--template-primary); }
.template-developer .editor { padding: 2.5rem 2rem; }
.template-developer .comment { color: #64748B; font-style: italic; }
.template-developer .token-keyword { color: #C084FC; }
.template-developer .token-string { color: #4ADE80; }
.template-developer .token-number { color: #FBBF24; }
.template-developer .token-function { color: #60A5FA; }
.template-developer .token-quote { color: #94A3B8; }
.template-developer .code-line { white-space: pre-wrap; line-height: 1.8; }
.template-developer .indent { padding-left: 2rem; }
.template-developer .hero { display: flex; gap: 2rem; align-items: flex-start; }
.template-developer .avatar { width: 6rem; height: 6rem; border-radius: var(--template-border-radius);
  object-fit: cover; border: 2px solid var(--template-primary); }
.template-developer .hero-name { font-size: 2.25rem; font-weight: 700; color: #F8FAFC; }
.template-developer .json-block { padding: 1.5rem; background: #0F172A; border: 1px solid var(--template-border);
  border-radius: var(--template-border-radius); }
.template-developer .section-title { font-size: 1rem; color: #64748B; margin-bottom: 1.5rem; }
.template-developer .repo-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(20rem, 1fr)); gap: 1.5rem; }
.template-developer .repo-card { padding: 1.5rem; background: #0F172A; border: 1px solid var(--template-border);
  border-radius: var(--template-border-radius); }
.template-developer .repo-head { display: flex; justify-content: space-between; align-items: center; gap: 1rem; }
.template-developer .repo-name { color: #60A5FA; font-size: 1.125rem; }
.template-developer .repo-visibility { padding: 0.125rem 0.5rem; border: 1px solid var(--template-border);
  border-radius: 9999px; font-size: 0.75rem; color: #94A3B8; }
.template-developer .project-description { color: #94A3B8; margin: 0.75rem 0; font-size: 0.875rem; }
.template-developer .tag-row { display: flex; flex-wrap: wrap; gap: 0.75rem; font-size: 0.75rem; color: #94A3B8; }
.template-developer .tag::before { content: "● "; color: var(--template-primary); }
.template-developer .project-link { display: inline-block; margin-top: 1rem; font-size: 0.875rem; color: #4ADE80; }
.template-developer .terminal { padding: 1.5rem; background: #020617; border: 1px solid var(--template-border);
  border-radius: var(--template-border-radius); font-size: 0.875rem; }
.template-developer .prompt { color: #4ADE80; }
.template-developer .terminal-output { color: #CBD5E1; padding-left: 1rem; }
.template-developer .cursor { display: inline-block; width: 0.5rem; height: 1rem; background: #E2E8F0;
  animation: blink 1s step-end infinite; vertical-align: middle; }
@keyframes blink { 50% { opacity: 0; } }
.template-developer .site-footer { padding: 0.5rem 1rem; font-size: 0.75rem; color: #E2E8F0;
  background: var(--template-primary); }
"""

    def compose(self, data: PortfolioData, style: TemplateStyle) -> List[Optional[Node]]:
        return [
            el(
                "div",
                self.title_bar(data),
                self.nav(data, style),
                el(
                    "main",
                    self.hero(data, style),
                    self.skills(data, style) if data.skills else None,
                    self.projects(data, style) if data.projects else None,
                    self.contact(data, style),
                    cls="editor",
                ),
                self.footer(data, style),
                cls="ide",
            ),
        ]

    def title_bar(self, data: PortfolioData) -> Node:
        return el(
            "div",
            el("span", cls="window-dot dot-close"),
            el("span", cls="window-dot dot-minimize"),
            el("span", cls="window-dot dot-zoom"),
            el("span", f"{TABS[0]} - {self.name(data)}", cls="window-title"),
            cls="title-bar",
        )

    def hero(self, data: PortfolioData, style: TemplateStyle) -> Node:
        info = data.personal_info
        lines = [
            el("div", "// Hello, World!", cls="code-line comment"),
            el(
                "div",
                token("const", "token-keyword"), " developer = {",
                cls="code-line",
            ),
            el(
                "div",
                "name: ", el("span", self.name(data), cls="hero-name token-string"), ",",
                cls="code-line indent",
            ),
            el(
                "div",
                "role: ", el("span", self.job_title(data), cls="job-title token-string"), ",",
                cls="code-line indent",
            ),
        ]
        if info.bio:
            lines.append(el(
                "div",
                "about: ", el("span", info.bio, cls="bio token-string"),
                cls="code-line indent",
            ))
        lines.append(el("div", "};", cls="code-line"))
        return section(
            "hero",
            photo(info.profile_photo, info.name),
            el("div", lines, cls="code"),
            cls="section hero",
        )

    def skills(self, data: PortfolioData, style: TemplateStyle) -> Node:
        last = len(data.skills) - 1
        items = [
            el(
                "div",
                quote(), token(skill, pick(TOKEN_COLORS, index)), quote(),
                "," if index < last else None,
                cls="code-line indent skill",
            )
            for index, skill in enumerate(data.skills)
        ]
        return section(
            "skills",
            el("h2", "// skills.json", cls="section-title"),
            el(
                "div",
                el("div", "{", cls="code-line"),
                el("div", token("\"skills\"", "token-keyword"), ": [", cls="code-line indent"),
                el("div", items, cls="indent"),
                el("div", "]", cls="code-line indent"),
                el("div", "}", cls="code-line"),
                cls="json-block",
            ),
            cls="section skills",
        )

    def projects(self, data: PortfolioData, style: TemplateStyle) -> Node:
        cards = []
        for index, project in enumerate(data.projects):
            tags = project_tags(data, index)
            cards.append(el(
                "article",
                el(
                    "div",
                    el("h3", project.title, cls="repo-name"),
                    el("span", "public", cls="repo-visibility"),
                    cls="repo-head",
                ),
                el("p", project.description, cls="project-description"),
                el("div", [el("span", tag, cls="tag") for tag in tags], cls="tag-row") if tags else None,
                external_link(project.link, "View code"),
                cls="repo-card project-card card",
                data_project=project.id,
            ))
        return section(
            "projects",
            el("h2", "// projects.md", cls="section-title"),
            el("div", cards, cls="repo-grid"),
            cls="section projects",
        )

    def contact(self, data: PortfolioData, style: TemplateStyle) -> Node:
        handle = (data.personal_info.name or "developer").lower().replace(" ", "")
        return section(
            "contact",
            el("h2", "// contact.sh", cls="section-title"),
            el(
                "div",
                el("div", el("span", "$", cls="prompt"), " contact --email", cls="code-line"),
                el("div", f"{handle}@example.com", cls="code-line terminal-output"),
                el("div", el("span", "$", cls="prompt"), " contact --github", cls="code-line"),
                el("div", f"github.com/{handle}", cls="code-line terminal-output"),
                el("div", el("span", "$", cls="prompt"), " ", el("span", cls="cursor"), cls="code-line"),
                cls="terminal",
            ),
            cls="section contact",
        )
