"""
Creative layout: asymmetric hero, tilted skill tiles and a two-column project grid.
"""
from ...portfolio.models import PortfolioData
from ...styles.registry import TemplateStyle
from ..tree import Node, el, section
from .base import ARROW, Layout, external_link, pick, project_image, project_tags

TILE_COLORS = ("purple", "pink", "orange", "yellow")
TAG_PALETTE = (("#F3E8FF", "#7C3AED"), ("#FFE4E6", "#EC4899"), ("#FFEDD5", "#F59E0B"))


def tilt(index: int, degrees: float) -> str:
    """Alternate the rotation direction by index."""
    sign = 1 if index % 2 == 0 else -1
    return f"rotate({sign * degrees:g}deg)"


def progress(index: int) -> str:
    return f"{min(100, 70 + index * 10)}%"


class CreativeLayout(Layout):
    template = "creative"
    footer_tagline = "Endless creativity, personal style"

    css = """
.template-creative { overflow: hidden; }
.template-creative .site-nav { position: sticky; top: 0; z-index: 50; display: flex; justify-content: space-between;
  padding: 1.5rem max(1.5rem, calc((100% - 80rem) / 2)); background: rgba(255, 255, 255, 0.8); backdrop-filter: blur(12px); }
.template-creative .nav-brand { font-size: 1.5rem; font-weight: 700;
  background: linear-gradient(90deg, #9333EA, #DB2777); -webkit-background-clip: text; -webkit-text-fill-color: transparent; }
.template-creative .nav-items { display: flex; gap: 2rem; font-size: 0.875rem; font-weight: 500; }
.template-creative .container { max-width: 80rem; margin: 0 auto; padding: 4rem 1.5rem; }
.template-creative .hero { position: relative; display: grid; grid-template-columns: 3fr 2fr; gap: 3rem; align-items: center; }
.template-creative .hero h1 { font-weight: 800;
  background: linear-gradient(135deg, #7C3AED, #EC4899); -webkit-background-clip: text; -webkit-text-fill-color: transparent; }
.template-creative .job-title { font-size: 1.5rem; color: #4B5563; margin-top: 1rem; }
.template-creative .bio { margin-top: 2rem; font-size: 1.125rem; line-height: 1.9; }
.template-creative .cta-row { display: flex; gap: 1rem; margin-top: 2.5rem; }
.template-creative .button { padding: 1rem 2rem; border-radius: 9999px; font-weight: 600; }
.template-creative .button-primary { color: #FFFFFF; background: linear-gradient(90deg, #9333EA, #DB2777); }
.template-creative .button-ghost { border: 2px solid #9333EA; color: #9333EA; }
.template-creative .hero-art { position: relative; height: 24rem; }
.template-creative .hero-art-backdrop { position: absolute; inset: 0; border-radius: 1.5rem; transform: rotate(6deg);
  background: linear-gradient(135deg, #C084FC, #F472B6); }
.template-creative .hero-art-frame { position: absolute; inset: 0; overflow: hidden; border-radius: 1.5rem;
  transform: rotate(-3deg); background: #FFFFFF; box-shadow: var(--template-shadow);
  display: flex; align-items: center; justify-content: center; font-size: 4rem; }
.template-creative .hero-art-frame img { width: 100%; height: 100%; object-fit: cover; }
.template-creative .section-title { text-align: center; font-weight: 800; margin-bottom: 4rem; }
.template-creative .tile-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(12rem, 1fr)); gap: 1.5rem; }
.template-creative .skill-tile { padding: 1.5rem; text-align: center; background: var(--template-surface);
  border-radius: var(--template-border-radius); box-shadow: var(--template-shadow); }
.template-creative .skill-initial { width: 4rem; height: 4rem; margin: 0 auto 1rem; border-radius: 50%;
  display: flex; align-items: center; justify-content: center; font-size: 1.5rem; font-weight: 700; }
.template-creative .progress { height: 0.5rem; border-radius: 9999px; background: #E5E7EB; margin-top: 1rem; overflow: hidden; }
.template-creative .progress-bar { height: 100%; border-radius: 9999px; }
.template-creative .tone-purple .skill-initial { background: #F3E8FF; color: #9333EA; }
.template-creative .tone-purple .progress-bar { background: #A855F7; }
.template-creative .tone-pink .skill-initial { background: #FCE7F3; color: #DB2777; }
.template-creative .tone-pink .progress-bar { background: #EC4899; }
.template-creative .tone-orange .skill-initial { background: #FFEDD5; color: #EA580C; }
.template-creative .tone-orange .progress-bar { background: #F97316; }
.template-creative .tone-yellow .skill-initial { background: #FEF9C3; color: #CA8A04; }
.template-creative .tone-yellow .progress-bar { background: #EAB308; }
.template-creative .project-grid { display: grid; grid-template-columns: repeat(2, minmax(0, 1fr)); gap: 2rem; }
.template-creative .project-tile { overflow: hidden; background: var(--template-surface);
  border-radius: 1.5rem; box-shadow: var(--template-shadow); }
.template-creative .project-media { position: relative; height: 14rem; overflow: hidden; }
.template-creative .project-media img { width: 100%; height: 100%; object-fit: cover; }
.template-creative .badge { position: absolute; top: 1rem; left: 1rem; padding: 0.25rem 0.75rem; border-radius: 9999px;
  background: rgba(255, 255, 255, 0.9); color: #9333EA; font-size: 0.75rem; font-weight: 600; }
.template-creative .project-body { padding: 1.5rem; }
.template-creative .tag-row { display: flex; flex-wrap: wrap; gap: 0.5rem; margin-top: 1rem;
  opacity: 0; transform: translateY(0.5rem); transition: all var(--template-transition-speed) ease; }
.template-creative .project-tile:hover .tag-row { opacity: 1; transform: none; }
.template-creative .tag { padding: 0.25rem 0.75rem; border-radius: 9999px; font-size: 0.75rem; font-weight: 500; }
.template-creative .project-link { display: inline-block; margin-top: 1rem; font-weight: 600; }
.template-creative .contact { text-align: center; }
.template-creative .contact-items { display: flex; justify-content: center; gap: 2rem; margin-top: 2rem; }
.template-creative .site-footer { text-align: center; padding: 2rem; font-size: 0.875rem; color: #6B7280; }
"""

    def hero(self, data: PortfolioData, style: TemplateStyle) -> Node:
        info = data.personal_info
        if info.profile_photo:
            art = el("img", src=info.profile_photo, alt=info.name)
        else:
            art = "✨"
        return section(
            "hero",
            el(
                "div",
                el("h1", self.name(data)),
                el("p", self.job_title(data), cls="job-title"),
                el("p", info.bio, cls="bio") if info.bio else None,
                el(
                    "div",
                    el("span", "See my work", cls="button button-primary"),
                    el("span", "Let's collaborate", cls="button button-ghost"),
                    cls="cta-row",
                ),
                cls="hero-text",
            ),
            el(
                "div",
                el("div", cls="hero-art-backdrop"),
                el("div", art, cls="hero-art-frame"),
                cls="hero-art",
            ),
            cls="section hero",
        )

    def skills(self, data: PortfolioData, style: TemplateStyle) -> Node:
        tiles = [
            el(
                "div",
                el("div", skill[:1].upper(), cls="skill-initial"),
                el("h3", skill),
                el(
                    "div",
                    el("div", cls="progress-bar", style={"width": progress(index)}),
                    cls="progress",
                ),
                cls=f"skill-tile card tone-{pick(TILE_COLORS, index)}",
                style={"transform": tilt(index, 1)},
            )
            for index, skill in enumerate(data.skills)
        ]
        return section(
            "skills",
            el("h2", "Skills", cls="section-title"),
            el("div", tiles, cls="tile-grid"),
            cls="section skills",
        )

    def projects(self, data: PortfolioData, style: TemplateStyle) -> Node:
        tiles = []
        for index, project in enumerate(data.projects):
            media = None
            if project.image:
                media = el("div", project_image(project), el("span", "New", cls="badge"), cls="project-media")
            tags = [
                el(
                    "span",
                    tag,
                    cls="tag",
                    style={
                        "background-color": pick(TAG_PALETTE, tag_index)[0],
                        "color": pick(TAG_PALETTE, tag_index)[1],
                        "transform": tilt(tag_index, 1),
                    },
                )
                for tag_index, tag in enumerate(project_tags(data, index, limit=4))
            ]
            tiles.append(el(
                "article",
                media,
                el(
                    "div",
                    el("h3", project.title),
                    el("p", project.description, cls="project-description"),
                    el("div", tags, cls="tag-row") if tags else None,
                    external_link(project.link, f"See details {ARROW}"),
                    cls="project-body",
                ),
                cls="project-tile project-card card",
                style={"transform": tilt(index, 0.5)},
                data_project=project.id,
            ))
        return section(
            "projects",
            el("h2", "Creative Projects", cls="section-title"),
            el("div", tiles, cls="project-grid"),
            cls="section projects",
        )

    def contact(self, data: PortfolioData, style: TemplateStyle) -> Node:
        return section(
            "contact",
            el("h2", "Let's create together", cls="section-title"),
            el("p", "Let's make something amazing."),
            el(
                "div",
                el("span", "✉️ hello@example.com"),
                el("span", "📱 +1 555 0100"),
                cls="contact-items",
            ),
            cls="section contact",
        )
