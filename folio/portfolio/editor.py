"""
Editing session state.

The form layer changes the portfolio only through ``PortfolioEditor``. Each
change swaps in a new immutable snapshot and re-runs validation.
"""
import logging
from typing import Iterable, Optional

from .models import PortfolioData, Project
from .validation import ValidationResult, validate

logger = logging.getLogger(__name__)


class PortfolioEditor:
    """Holds the current snapshot for one editing session."""

    def __init__(self, data: Optional[PortfolioData] = None):
        self._data = data or PortfolioData.empty()
        self._validation = validate(self._data)

    @property
    def data(self) -> PortfolioData:
        return self._data

    @property
    def validation(self) -> ValidationResult:
        return self._validation

    def replace(self, data: PortfolioData) -> PortfolioData:
        """Swap in a new snapshot. Every mutation goes through here."""
        self._data = data
        self._validation = validate(data)
        if not self._validation.success:
            logger.debug(f"Portfolio has {len(self._validation.errors)} validation errors")
        return data

    def update_personal_info(self, **fields) -> PortfolioData:
        info = self._data.personal_info.model_copy(update=fields)
        return self.replace(self._data.model_copy(update={"personal_info": info}))

    def update_theme(self, **fields) -> PortfolioData:
        theme = self._data.theme.model_copy(update=fields)
        return self.replace(self._data.model_copy(update={"theme": theme}))

    def set_skills(self, skills: Iterable[str]) -> PortfolioData:
        return self.replace(self._data.model_copy(update={"skills": tuple(skills)}))

    def add_skill(self, skill: str) -> bool:
        """Add a skill unless it is blank or already present.

        Returns:
            True if the skill was added
        """
        skill = skill.strip()
        if not skill or skill in self._data.skills:
            return False
        self.set_skills(self._data.skills + (skill,))
        return True

    def remove_skill(self, skill: str) -> PortfolioData:
        return self.set_skills(s for s in self._data.skills if s != skill)

    def add_project(self, **fields) -> Project:
        """Append a project with a freshly generated id."""
        fields.pop("id", None)
        project = Project(**fields)
        self.replace(self._data.model_copy(update={"projects": self._data.projects + (project,)}))
        return project

    def update_project(self, project_id: str, **fields) -> PortfolioData:
        fields.pop("id", None)
        if self._data.get_project(project_id) is None:
            raise KeyError(f"No project with id {project_id}")
        projects = tuple(
            p.model_copy(update=fields) if p.id == project_id else p
            for p in self._data.projects
        )
        return self.replace(self._data.model_copy(update={"projects": projects}))

    def remove_project(self, project_id: str) -> PortfolioData:
        projects = tuple(p for p in self._data.projects if p.id != project_id)
        return self.replace(self._data.model_copy(update={"projects": projects}))
