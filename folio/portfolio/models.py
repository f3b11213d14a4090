"""
Portfolio data models.

Every model is frozen: an edit produces a new snapshot through
``model_copy(update=...)`` and never changes an existing one in place.
On the wire the fields use camelCase names (``personalInfo``, ``jobTitle``...).
"""
from enum import Enum
from typing import Tuple
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_NAME_LENGTH = 50
MAX_JOB_TITLE_LENGTH = 100
MAX_BIO_LENGTH = 500
MAX_SKILL_LENGTH = 50
MAX_SKILLS = 20
MAX_PROJECT_TITLE_LENGTH = 100
MAX_PROJECT_DESCRIPTION_LENGTH = 500
MAX_PROJECTS = 10


class TemplateType(str, Enum):
    """Recognised layout templates."""
    MINIMAL = "minimal"
    DARK_MODE = "dark-mode"
    CREATIVE = "creative"
    PROFESSIONAL = "professional"
    DEVELOPER = "developer"
    DESIGNER = "designer"


class ColorScheme(str, Enum):
    """Recognised color palettes."""
    BLUE = "blue"
    PURPLE = "purple"
    DARK = "dark"


DEFAULT_TEMPLATE = TemplateType.MINIMAL.value
DEFAULT_COLOR_SCHEME = ColorScheme.BLUE.value


def new_project_id() -> str:
    """Generate a unique, stable project id."""
    return uuid4().hex


class _Snapshot(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PersonalInfo(_Snapshot):
    """Identity block shown in every template's hero."""
    name: str = ""
    job_title: str = ""
    bio: str = ""
    profile_photo: str = ""  # "", http(s) URL or data: URI


class Project(_Snapshot):
    """A single portfolio project."""
    id: str = Field(default_factory=new_project_id)
    title: str = ""
    description: str = ""
    link: str = ""
    image: str = ""


class Theme(_Snapshot):
    """Template and palette choice.

    Unknown values are kept as-is; they fall back to the defaults when styled
    or rendered.
    """
    template: str = DEFAULT_TEMPLATE
    color_scheme: str = DEFAULT_COLOR_SCHEME


class PortfolioData(_Snapshot):
    """Root aggregate owned by an editing session."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    skills: Tuple[str, ...] = ()
    projects: Tuple[Project, ...] = ()
    theme: Theme = Field(default_factory=Theme)

    @classmethod
    def empty(
        cls,
        template: str = DEFAULT_TEMPLATE,
        color_scheme: str = DEFAULT_COLOR_SCHEME
    ) -> "PortfolioData":
        """Blank snapshot used when a new editing session starts."""
        return cls(theme=Theme(template=template, color_scheme=color_scheme))

    def is_empty(self) -> bool:
        """True when nothing has been filled in yet."""
        info = self.personal_info
        has_info = any(
            value.strip() for value in (info.name, info.job_title, info.bio, info.profile_photo)
        )
        return not has_info and not self.skills and not self.projects

    def get_project(self, project_id: str):
        for project in self.projects:
            if project.id == project_id:
                return project
        return None

    def to_wire(self) -> dict:
        """Plain dict in the camelCase wire format."""
        return self.model_dump(by_alias=True, mode="json")
