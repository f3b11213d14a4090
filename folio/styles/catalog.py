"""
Template catalog shown in the template picker.
"""
from typing import List

from pydantic import BaseModel, ConfigDict

from .registry import resolve_template


class TemplateInfo(BaseModel):
    """Picker entry for a template."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    layout: str  # simple | modern | grid | split | card | showcase
    features: List[str]
    recommended_for: List[str]


TEMPLATES: List[TemplateInfo] = [
    TemplateInfo(
        id="minimal",
        name="Minimal",
        description="Pared-back design that keeps the focus on the content itself.",
        layout="simple",
        features=["Minimal layout", "Fast loading", "Responsive", "Easy to customise", "Modern look"],
        recommended_for=["Developers", "Engineers", "Minimalists", "Content creators"],
    ),
    TemplateInfo(
        id="dark-mode",
        name="Dark Mode",
        description="Dark, tech-flavoured theme that is easy on the eyes.",
        layout="modern",
        features=["Dark theme", "Modern design", "Comfortable reading", "Professional feel", "Glassmorphism"],
        recommended_for=["Designers", "Creatives", "Night owls", "Tech enthusiasts"],
    ),
    TemplateInfo(
        id="creative",
        name="Creative",
        description="Bold, colourful layout that shows off personality and artistry.",
        layout="grid",
        features=["Colourful design", "Asymmetric layout", "Animations", "Personal flair", "Visual impact"],
        recommended_for=["Artists", "Designers", "Creative talent", "Brand strategists"],
    ),
    TemplateInfo(
        id="professional",
        name="Professional",
        description="Polished business layout for a dependable professional image.",
        layout="split",
        features=["Business design", "Two-column layout", "Enterprise ready", "Trustworthy", "Elegant type"],
        recommended_for=["Business owners", "Professionals", "Executives", "Consultants"],
    ),
    TemplateInfo(
        id="developer",
        name="Developer",
        description="Code-oriented layout that shows technical depth and engineering mindset.",
        layout="card",
        features=["Code styling", "Tech showcase", "Function first", "Developer friendly", "Terminal UI"],
        recommended_for=["Programmers", "Engineers", "Technical experts", "Open source contributors"],
    ),
    TemplateInfo(
        id="designer",
        name="Designer",
        description="Visual showcase that puts design sense and aesthetics first.",
        layout="showcase",
        features=["Visual design", "Editorial layout", "Work showcase", "Creative expression", "Gallery effects"],
        recommended_for=["Designers", "Artists", "Visual creators", "Photographers"],
    ),
]

_BY_ID = {info.id: info for info in TEMPLATES}


def list_templates() -> List[TemplateInfo]:
    return list(TEMPLATES)


def get_template_info(template: str) -> TemplateInfo:
    """Catalog entry for a template id; unknown ids get the minimal entry."""
    return _BY_ID[resolve_template(template)]
