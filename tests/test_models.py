"""
Tests for the portfolio data model, editor and image encoding.
"""
import base64

import pytest
from pydantic import ValidationError

from folio.errors import ImageEncodingError
from folio.portfolio.editor import PortfolioEditor
from folio.portfolio.images import encode_image_bytes, encode_image_file, is_persistent_reference
from folio.portfolio.models import PortfolioData, Project


def test_empty_portfolio():
    """Test the blank starting snapshot."""
    data = PortfolioData.empty()
    assert data.is_empty()
    assert data.skills == ()
    assert data.projects == ()
    assert data.theme.template == "minimal"
    assert data.theme.color_scheme == "blue"


def test_whitespace_only_counts_as_empty():
    data = PortfolioData.empty().model_copy(update={
        "personal_info": PortfolioData.empty().personal_info.model_copy(update={"name": "   "})
    })
    assert data.is_empty()


def test_snapshots_are_frozen(sample_data):
    """Test that a snapshot cannot be changed in place."""
    with pytest.raises(ValidationError):
        sample_data.personal_info.name = "Someone else"
    with pytest.raises(ValidationError):
        sample_data.skills = ()


def test_wire_format_uses_camel_case(sample_data):
    wire = sample_data.to_wire()
    assert set(wire) == {"personalInfo", "skills", "projects", "theme"}
    assert wire["personalInfo"]["jobTitle"] == "Computer Scientist"
    assert "profilePhoto" in wire["personalInfo"]
    assert wire["theme"] == {"template": "minimal", "colorScheme": "blue"}


def test_accepts_both_field_name_styles():
    camel = PortfolioData.model_validate({"personalInfo": {"jobTitle": "Engineer"}})
    snake = PortfolioData.model_validate({"personal_info": {"job_title": "Engineer"}})
    assert camel == snake


def test_unknown_theme_values_are_kept():
    data = PortfolioData.model_validate({"theme": {"template": "brutalist", "colorScheme": "neon"}})
    assert data.theme.template == "brutalist"
    assert data.theme.color_scheme == "neon"


def test_project_ids_are_unique():
    ids = {Project().id for _ in range(50)}
    assert len(ids) == 50


def test_editor_produces_new_snapshots():
    """Test that each edit swaps in a new snapshot and re-validates."""
    editor = PortfolioEditor()
    before = editor.data
    assert not editor.validation.success

    editor.update_personal_info(name="Ada", job_title="Engineer")

    assert editor.data is not before
    assert before.personal_info.name == ""
    assert editor.data.personal_info.name == "Ada"
    assert editor.validation.success


def test_editor_add_skill_trims_and_rejects_duplicates():
    editor = PortfolioEditor()
    assert editor.add_skill("  Python ")
    assert not editor.add_skill("Python")
    assert not editor.add_skill("   ")
    assert editor.data.skills == ("Python",)

    editor.remove_skill("Python")
    assert editor.data.skills == ()


def test_editor_projects():
    """Test adding, updating and removing projects by id."""
    editor = PortfolioEditor()
    first = editor.add_project(title="One", description="First")
    second = editor.add_project(title="Two", description="Second", id="ignored")

    assert second.id != "ignored"
    assert [p.id for p in editor.data.projects] == [first.id, second.id]

    editor.update_project(first.id, title="Uno")
    assert editor.data.get_project(first.id).title == "Uno"
    assert editor.data.get_project(first.id).id == first.id

    editor.remove_project(first.id)
    assert [p.id for p in editor.data.projects] == [second.id]

    with pytest.raises(KeyError):
        editor.update_project("missing", title="x")


def test_editor_theme_change_keeps_content(sample_data):
    editor = PortfolioEditor(sample_data)
    editor.update_theme(template="designer")
    assert editor.data.theme.template == "designer"
    assert editor.data.projects == sample_data.projects


@pytest.mark.parametrize("ref,expected", [
    ("", True),
    ("https://example.com/me.png", True),
    ("http://example.com/me.png", True),
    ("data:image/png;base64,AAAA", True),
    ("blob:https://example.com/1234", False),
    ("data:text/html;base64,AAAA", False),
    ("file:///tmp/me.png", False),
])
def test_is_persistent_reference(ref, expected):
    assert is_persistent_reference(ref) is expected


def test_encode_image_bytes(png_bytes):
    uri = encode_image_bytes(png_bytes, "image/png")
    assert uri.startswith("data:image/png;base64,")
    assert base64.b64decode(uri.split(",", 1)[1]) == png_bytes
    assert is_persistent_reference(uri)


def test_encode_image_rejects_bad_input(png_bytes):
    with pytest.raises(ImageEncodingError):
        encode_image_bytes(b"hello", "text/plain")
    with pytest.raises(ImageEncodingError):
        encode_image_bytes(b"", "image/png")
    with pytest.raises(ImageEncodingError):
        encode_image_bytes(png_bytes, "image/png", max_bytes=10)


def test_encode_image_file(png_file, tmp_path):
    assert encode_image_file(png_file).startswith("data:image/png;base64,")

    with pytest.raises(ImageEncodingError):
        encode_image_file(tmp_path / "missing.png")

    notes = tmp_path / "notes.txt"
    notes.write_text("not an image")
    with pytest.raises(ImageEncodingError):
        encode_image_file(notes)
