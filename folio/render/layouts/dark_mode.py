"""
Dark mode layout: numbered skill cards and large image-forward project blocks.
"""
from ...portfolio.models import PortfolioData
from ...styles.registry import TemplateStyle
from ..tree import Node, el, section
from .base import VIEW_PROJECT, Layout, external_link, photo, project_image, project_tags


class DarkModeLayout(Layout):
    template = "dark-mode"
    footer_tagline = "Dark theme, modern design"

    css = """
.template-dark-mode .site-nav { position: sticky; top: 0; z-index: 50; display: flex; justify-content: space-between;
  padding: 1.5rem max(1.5rem, calc((100% - 72rem) / 2)); background: rgba(10, 15, 28, 0.8);
  backdrop-filter: blur(8px); border-bottom: 1px solid var(--template-border); }
.template-dark-mode .nav-brand { font-weight: 600; font-size: 1.25rem; }
.template-dark-mode .nav-items { display: flex; gap: 2rem; font-size: 0.875rem; color: #94A3B8; }
.template-dark-mode .container { max-width: 72rem; margin: 0 auto; padding: 4rem 1.5rem; }
.template-dark-mode .hero { text-align: center; }
.template-dark-mode .avatar { width: 8rem; height: 8rem; border-radius: 50%; object-fit: cover;
  border: 4px solid #374151; box-shadow: var(--template-shadow); }
.template-dark-mode .hero h1 { font-weight: 700; margin: 2rem 0 1rem; }
.template-dark-mode .job-title { font-size: 1.25rem; color: #94A3B8; }
.template-dark-mode .bio { max-width: 42rem; margin: 2rem auto 0; color: #CBD5E1; line-height: 1.8; }
.template-dark-mode .cta-row { display: flex; justify-content: center; gap: 1.5rem; margin-top: 2.5rem; }
.template-dark-mode .button { padding: 0.75rem 2rem; border-radius: var(--template-border-radius); font-weight: 500; }
.template-dark-mode .button-primary { background: var(--template-primary); color: #FFFFFF; }
.template-dark-mode .button-ghost { border: 1px solid #4B5563; color: #D1D5DB; }
.template-dark-mode .section-title { text-align: center; font-weight: 700; margin-bottom: 4rem; }
.template-dark-mode .skill-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(16rem, 1fr)); gap: 1.5rem; }
.template-dark-mode .skill-card { display: flex; align-items: center; gap: 1rem; padding: 1.5rem;
  background: #1F2937; border: 1px solid #374151; }
.template-dark-mode .skill-index { width: 3rem; height: 3rem; display: flex; align-items: center; justify-content: center;
  border-radius: var(--template-border-radius); font-weight: 700; color: #FFFFFF;
  background: linear-gradient(135deg, #06B6D4, var(--template-primary)); }
.template-dark-mode .skill-caption { font-size: 0.875rem; color: #94A3B8; }
.template-dark-mode .project-blocks { display: flex; flex-direction: column; gap: 3rem; }
.template-dark-mode .project-block { overflow: hidden; background: #1F2937; border: 1px solid #374151; border-radius: 1rem; }
.template-dark-mode .project-media { position: relative; height: 16rem; overflow: hidden; }
.template-dark-mode .project-media img { width: 100%; height: 100%; object-fit: cover; }
.template-dark-mode .project-media::after { content: ""; position: absolute; inset: 0;
  background: linear-gradient(to top, rgba(17, 24, 39, 0.8), transparent); }
.template-dark-mode .project-body { padding: 2rem; }
.template-dark-mode .project-head { display: flex; justify-content: space-between; align-items: flex-start; gap: 1.5rem; }
.template-dark-mode .project-description { color: #9CA3AF; }
.template-dark-mode .project-link { padding: 0.5rem 1rem; border-radius: var(--template-border-radius);
  background: #16A34A; color: #FFFFFF; white-space: nowrap; }
.template-dark-mode .tag-row { display: flex; flex-wrap: wrap; gap: 0.5rem; margin-top: 1.5rem; }
.template-dark-mode .tag { padding: 0.25rem 0.75rem; border-radius: 9999px; background: #374151; color: #22D3EE;
  border: 1px solid #4B5563; font-size: 0.875rem; }
.template-dark-mode .contact-panel { text-align: center; padding: 3rem; background: #1F2937;
  border: 1px solid #374151; border-radius: 1rem; }
.template-dark-mode .contact-items { display: flex; justify-content: center; gap: 1.5rem; margin-top: 2rem; color: #D1D5DB; }
.template-dark-mode .site-footer { text-align: center; padding: 2rem; color: #6B7280;
  border-top: 1px solid #1F2937; font-size: 0.875rem; }
"""

    def hero(self, data: PortfolioData, style: TemplateStyle) -> Node:
        info = data.personal_info
        return section(
            "hero",
            photo(info.profile_photo, info.name),
            el("h1", self.name(data)),
            el("p", self.job_title(data), cls="job-title"),
            el("p", info.bio, cls="bio") if info.bio else None,
            el(
                "div",
                el("span", "Contact me", cls="button button-primary"),
                el("span", "See my work", cls="button button-ghost"),
                cls="cta-row",
            ),
            cls="section hero",
        )

    def skills(self, data: PortfolioData, style: TemplateStyle) -> Node:
        cards = [
            el(
                "div",
                el("div", str(index + 1), cls="skill-index"),
                el("div", el("h3", skill), el("p", "Proficient", cls="skill-caption")),
                cls="skill-card card",
            )
            for index, skill in enumerate(data.skills)
        ]
        return section(
            "skills",
            el("h2", "Expertise", cls="section-title"),
            el("div", cards, cls="skill-grid"),
            cls="section skills",
        )

    def projects(self, data: PortfolioData, style: TemplateStyle) -> Node:
        blocks = []
        for index, project in enumerate(data.projects):
            media = None
            if project.image:
                media = el("div", project_image(project), cls="project-media")
            tags = project_tags(data, index, limit=4)
            blocks.append(el(
                "article",
                media,
                el(
                    "div",
                    el(
                        "div",
                        el("div", el("h3", project.title), el("p", project.description, cls="project-description")),
                        external_link(project.link, VIEW_PROJECT),
                        cls="project-head",
                    ),
                    el("div", [el("span", tag, cls="tag") for tag in tags], cls="tag-row") if tags else None,
                    cls="project-body",
                ),
                cls="project-block project-card card",
                data_project=project.id,
            ))
        return section(
            "projects",
            el("h2", "Projects", cls="section-title"),
            el("div", blocks, cls="project-blocks"),
            cls="section projects",
        )

    def contact(self, data: PortfolioData, style: TemplateStyle) -> Node:
        return section(
            "contact",
            el(
                "div",
                el("h2", "Let's work together", cls="section-title"),
                el("p", "Have a project or an idea? I'd love to hear about it."),
                el(
                    "div",
                    el("span", "✉️ hello@example.com"),
                    el("span", "📱 +1 555 0100"),
                    cls="contact-items",
                ),
                cls="contact-panel",
            ),
            cls="section contact",
        )
