"""
Portfolio validation.

All rules run independently and every violation is reported, so the form
layer can attach each message to its field. Paths use the wire names, and
project rows are addressed by id: ``projects.<id>.<field>``.
"""
import re
from typing import Any, Dict, Mapping, Union
from urllib.parse import urlparse

from pydantic import BaseModel, Field, ValidationError

from .images import is_persistent_reference
from .models import (
    MAX_BIO_LENGTH,
    MAX_JOB_TITLE_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PROJECT_DESCRIPTION_LENGTH,
    MAX_PROJECT_TITLE_LENGTH,
    MAX_PROJECTS,
    MAX_SKILL_LENGTH,
    MAX_SKILLS,
    ColorScheme,
    PortfolioData,
)

LINK_PATTERN = re.compile(r"^https?://\S+$")

IMAGE_REFERENCE_MESSAGE = "Image must be an http(s) URL or an embedded data URI"


class ValidationResult(BaseModel):
    """Outcome of validating a portfolio."""
    success: bool
    errors: Dict[str, str] = Field(default_factory=dict)


def is_valid_link(link: str) -> bool:
    """Empty links are allowed; anything else must be an absolute http(s) URL."""
    if not link:
        return True
    if not LINK_PATTERN.match(link):
        return False
    return bool(urlparse(link).netloc)


def _check_length(errors: Dict[str, str], path: str, value: str, label: str,
                  max_length: int, required: bool = False):
    if required and not value.strip():
        errors[path] = f"{label} is required"
    elif len(value) > max_length:
        errors[path] = f"{label} must be at most {max_length} characters"


def _parse_errors(exc: ValidationError) -> Dict[str, str]:
    errors = {}
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"]) or "general"
        errors.setdefault(path, err["msg"])
    return errors


def validate(data: Union[PortfolioData, Mapping[str, Any]]) -> ValidationResult:
    """Validate a portfolio snapshot.

    Args:
        data: A PortfolioData, or a raw mapping in wire format

    Returns:
        ValidationResult with every violation found
    """
    if not isinstance(data, PortfolioData):
        try:
            data = PortfolioData.model_validate(data)
        except ValidationError as e:
            return ValidationResult(success=False, errors=_parse_errors(e))

    errors: Dict[str, str] = {}

    # Personal info
    info = data.personal_info
    _check_length(errors, "personalInfo.name", info.name, "Name",
                  MAX_NAME_LENGTH, required=True)
    _check_length(errors, "personalInfo.jobTitle", info.job_title, "Job title",
                  MAX_JOB_TITLE_LENGTH, required=True)
    _check_length(errors, "personalInfo.bio", info.bio, "Bio", MAX_BIO_LENGTH)
    if not is_persistent_reference(info.profile_photo):
        errors["personalInfo.profilePhoto"] = IMAGE_REFERENCE_MESSAGE

    # Skills
    if len(data.skills) > MAX_SKILLS:
        errors["skills"] = f"At most {MAX_SKILLS} skills are allowed"
    seen_skills = set()
    for index, skill in enumerate(data.skills):
        path = f"skills.{index}"
        _check_length(errors, path, skill, "Skill", MAX_SKILL_LENGTH, required=True)
        key = skill.strip()
        if key and key in seen_skills:
            errors.setdefault(path, f"Duplicate skill: {key}")
        seen_skills.add(key)

    # Projects
    if len(data.projects) > MAX_PROJECTS:
        errors["projects"] = f"At most {MAX_PROJECTS} projects are allowed"
    seen_ids = set()
    for index, project in enumerate(data.projects):
        prefix = f"projects.{project.id or index}"
        if not project.id:
            errors[f"{prefix}.id"] = "Project id is required"
        elif project.id in seen_ids:
            errors[f"{prefix}.id"] = "Project id must be unique"
        seen_ids.add(project.id)

        _check_length(errors, f"{prefix}.title", project.title, "Project title",
                      MAX_PROJECT_TITLE_LENGTH, required=True)
        _check_length(errors, f"{prefix}.description", project.description,
                      "Project description", MAX_PROJECT_DESCRIPTION_LENGTH, required=True)
        if not is_valid_link(project.link):
            errors[f"{prefix}.link"] = "Link must be a URL starting with http:// or https://"
        if not is_persistent_reference(project.image):
            errors[f"{prefix}.image"] = IMAGE_REFERENCE_MESSAGE

    # Theme
    valid_schemes = {scheme.value for scheme in ColorScheme}
    if data.theme.color_scheme not in valid_schemes:
        errors["theme.colorScheme"] = (
            f"Color scheme must be one of: {', '.join(sorted(valid_schemes))}"
        )

    return ValidationResult(success=not errors, errors=errors)
