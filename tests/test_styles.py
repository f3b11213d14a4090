"""
Tests for the style registry and template catalog.
"""
import pytest

from folio.styles.catalog import get_template_info, list_templates
from folio.styles.registry import (
    BASE_PALETTES,
    get_css_variables,
    get_style,
    get_template_classes,
    resolve_color_scheme,
    resolve_template,
)
from folio.portfolio.models import ColorScheme, TemplateType

TEMPLATE_IDS = [template.value for template in TemplateType]


@pytest.mark.parametrize("template", TEMPLATE_IDS)
@pytest.mark.parametrize("color_scheme", ["blue", "purple", "dark"])
def test_every_pair_has_a_style(template, color_scheme):
    style = get_style(template, color_scheme)
    assert style.template == template
    assert style.color_scheme == color_scheme
    assert style.colors.primary == BASE_PALETTES[color_scheme]["primary"]


def test_template_overrides_layer_on_palette():
    style = get_style("dark-mode", "purple")
    assert style.colors.primary == "#9333EA"
    assert style.colors.background == "#0A0F1C"


@pytest.mark.parametrize("template,color_scheme", [
    ("brutalist", "neon"),
    ("", ""),
    (None, None),
    (42, ["blue"]),
])
def test_unknown_values_fall_back(template, color_scheme):
    """Test that lookup never raises and falls back to minimal / blue."""
    assert get_style(template, color_scheme) == get_style("minimal", "blue")
    assert get_css_variables(template, color_scheme) == get_css_variables("minimal", "blue")


def test_resolvers_accept_enums():
    assert resolve_template(TemplateType.DEVELOPER) == "developer"
    assert resolve_color_scheme(ColorScheme.DARK) == "dark"
    assert resolve_template("nope") == "minimal"
    assert resolve_color_scheme("nope") == "blue"


def test_css_variables_resolve_tokens():
    variables = get_css_variables("creative", "blue")
    assert variables["--template-border-radius"] == "16px"
    assert variables["--template-transition-speed"] == "0.5s"
    assert variables["--template-shadow"].startswith("0 8px 32px")
    assert all(name.startswith("--template-") for name in variables)


def test_template_classes():
    classes = get_template_classes("developer", "dark").split()
    assert classes[0] == "template-developer"
    assert "scheme-dark" in classes
    assert "layout-full-width" in classes
    assert "cards-flat" in classes
    assert get_template_classes("unknown", "unknown").startswith("template-minimal scheme-blue")


def test_style_is_deterministic():
    assert get_style("designer", "purple") == get_style("designer", "purple")


def test_catalog_lists_every_template():
    ids = [info.id for info in list_templates()]
    assert ids == TEMPLATE_IDS
    assert all(info.features and info.recommended_for for info in list_templates())


def test_catalog_fallback():
    assert get_template_info("professional").name == "Professional"
    assert get_template_info("nope").id == "minimal"
