"""
Tests for portfolio validation.
"""
import pytest

from folio.portfolio.models import MAX_PROJECTS, MAX_SKILLS, PersonalInfo, PortfolioData, Project, Theme
from folio.portfolio.validation import is_valid_link, validate


def with_info(data, **fields):
    return data.model_copy(update={"personal_info": data.personal_info.model_copy(update=fields)})


def test_valid_portfolio(sample_data):
    result = validate(sample_data)
    assert result.success
    assert result.errors == {}


def test_maximal_compliant_portfolio():
    """Test that data at every limit still validates."""
    data = PortfolioData(
        personal_info=PersonalInfo(name="n" * 50, job_title="j" * 100, bio="b" * 500),
        skills=tuple(f"skill-{i}".ljust(50, "x") for i in range(MAX_SKILLS)),
        projects=tuple(
            Project(title="t" * 100, description="d" * 500, link=f"https://example.com/{i}")
            for i in range(MAX_PROJECTS)
        ),
        theme=Theme(template="designer", color_scheme="purple"),
    )
    result = validate(data)
    assert result.success, result.errors


def test_empty_name_and_job_title(sample_data):
    result = validate(with_info(sample_data, name="", job_title="   "))
    assert not result.success
    assert "personalInfo.name" in result.errors
    assert "personalInfo.jobTitle" in result.errors


def test_length_limits(sample_data):
    result = validate(with_info(sample_data, name="n" * 51, job_title="j" * 101, bio="b" * 501))
    assert set(result.errors) == {"personalInfo.name", "personalInfo.jobTitle", "personalInfo.bio"}


def test_errors_are_collected_not_fail_fast(sample_data):
    """Test that independent problems are all reported at once."""
    data = with_info(sample_data, name="", job_title="")
    data = data.model_copy(update={
        "skills": ("", "Python"),
        "projects": (Project(id="p1", title="", description="", link="ftp://example.com"),),
    })
    result = validate(data)
    assert set(result.errors) == {
        "personalInfo.name",
        "personalInfo.jobTitle",
        "skills.0",
        "projects.p1.title",
        "projects.p1.description",
        "projects.p1.link",
    }


def test_too_many_skills(sample_data):
    data = sample_data.model_copy(update={"skills": tuple(f"skill {i}" for i in range(MAX_SKILLS + 1))})
    result = validate(data)
    assert not result.success
    assert "skills" in result.errors


def test_skill_length_and_duplicates(sample_data):
    data = sample_data.model_copy(update={"skills": ("Python", "x" * 51, "Python")})
    result = validate(data)
    assert "skills.1" in result.errors
    assert "skills.2" in result.errors
    assert "skills.0" not in result.errors


def test_too_many_projects(sample_data):
    projects = tuple(Project(title=f"P{i}", description="desc") for i in range(MAX_PROJECTS + 1))
    result = validate(sample_data.model_copy(update={"projects": projects}))
    assert not result.success
    assert "projects" in result.errors


def test_project_errors_addressed_by_id(sample_data):
    bad = Project(id="abc", title="Ok", description="Ok", link="example.com")
    result = validate(sample_data.model_copy(update={"projects": (bad,)}))
    assert result.errors == {"projects.abc.link": result.errors["projects.abc.link"]}


def test_duplicate_project_ids(sample_data):
    projects = (
        Project(id="same", title="A", description="a"),
        Project(id="same", title="B", description="b"),
    )
    result = validate(sample_data.model_copy(update={"projects": projects}))
    assert "projects.same.id" in result.errors


@pytest.mark.parametrize("link,expected", [
    ("", True),
    ("https://example.com", True),
    ("http://example.com/path?q=1", True),
    ("example.com", False),
    ("ftp://example.com", False),
    ("https://", False),
    ("https://exa mple.com", False),
    ("javascript:alert(1)", False),
])
def test_is_valid_link(link, expected):
    assert is_valid_link(link) is expected


def test_transient_image_references_rejected(sample_data):
    data = with_info(sample_data, profile_photo="blob:https://example.com/123")
    data = data.model_copy(update={
        "projects": (Project(id="p1", title="T", description="D", image="blob:xyz"),)
    })
    result = validate(data)
    assert "personalInfo.profilePhoto" in result.errors
    assert "projects.p1.image" in result.errors


def test_color_scheme_must_be_known(sample_data):
    data = sample_data.model_copy(update={"theme": Theme(template="unknown", color_scheme="neon")})
    result = validate(data)
    assert list(result.errors) == ["theme.colorScheme"]


def test_validate_raw_mapping(sample_data):
    assert validate(sample_data.to_wire()).success

    result = validate({"personalInfo": {"name": 42}, "skills": "not-a-list"})
    assert not result.success
    assert any(path.startswith("personalInfo") for path in result.errors)


def test_validate_never_raises():
    result = validate({"projects": [{"title": None}]})
    assert not result.success
