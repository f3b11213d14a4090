"""
Shared fixtures.
"""
import pytest

from folio.portfolio.models import PersonalInfo, PortfolioData, Project, Theme

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)
PNG_DATA_URI = "data:image/png;base64,iVBORw0KGgo="


@pytest.fixture
def sample_data():
    """A complete, valid portfolio."""
    return PortfolioData(
        personal_info=PersonalInfo(
            name="Grace Hopper",
            job_title="Computer Scientist",
            bio="Pioneer of machine-independent programming languages.",
            profile_photo=PNG_DATA_URI,
        ),
        skills=("COBOL", "Compilers", "Mathematics"),
        projects=(
            Project(
                id="proj-1",
                title="A-0 System",
                description="One of the first compilers.",
                link="https://example.com/a0",
                image=PNG_DATA_URI,
            ),
            Project(
                id="proj-2",
                title="FLOW-MATIC",
                description="English-like data processing language.",
                link="",
            ),
        ),
        theme=Theme(template="minimal", color_scheme="blue"),
    )


@pytest.fixture
def ada_data():
    """Developer template with skills and no projects."""
    return PortfolioData(
        personal_info=PersonalInfo(name="Ada Lovelace", job_title="Engineer"),
        skills=("Math", "Programming"),
        theme=Theme(template="developer", color_scheme="dark"),
    )


@pytest.fixture
def empty_data():
    return PortfolioData.empty()


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "photo.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def png_bytes():
    return PNG_BYTES
