"""
Template style registry.

Pure lookup from (template, color scheme) to a style descriptor. The
descriptor only holds tokens; the renderer and the stylesheet builder turn
them into concrete CSS.
"""
from typing import Dict

from pydantic import BaseModel, ConfigDict

from ..portfolio.models import DEFAULT_COLOR_SCHEME, DEFAULT_TEMPLATE, ColorScheme, TemplateType


class _Tokens(BaseModel):
    model_config = ConfigDict(frozen=True)


class LayoutTokens(_Tokens):
    hero_layout: str       # centered | split | asymmetric | full-width | modern | classic
    section_spacing: str   # compact | normal | generous | spacious
    card_style: str        # flat | elevated | minimal | bordered | gradient | glass
    navigation: str        # top | side | floating | hidden


class TypographyTokens(_Tokens):
    font_family: str
    heading_size: str      # small | medium | large | xlarge
    line_height: str       # tight | normal | loose
    font_weight: str       # light | normal | bold


class ColorTokens(_Tokens):
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    surface: str
    border: str


class AnimationTokens(_Tokens):
    hover_effect: str         # scale | shadow | slide | glow | rotate | float | pulse
    transition_speed: str     # fast | normal | slow
    entrance_animation: str   # fade | slide | zoom | bounce | none


class EffectTokens(_Tokens):
    background_pattern: str   # none | dots | grid | waves | geometric
    shadow_intensity: str     # none | subtle | medium | strong
    border_radius: str        # none | small | medium | large


class TemplateStyle(_Tokens):
    """Style descriptor for one (template, color scheme) pair."""
    template: str
    color_scheme: str
    layout: LayoutTokens
    typography: TypographyTokens
    colors: ColorTokens
    animations: AnimationTokens
    effects: EffectTokens


BASE_PALETTES: Dict[str, Dict[str, str]] = {
    ColorScheme.BLUE.value: {
        "primary": "#3B82F6", "secondary": "#60A5FA", "accent": "#1D4ED8",
        "surface": "#F0F9FF", "border": "#E1E8EF",
    },
    ColorScheme.PURPLE.value: {
        "primary": "#9333EA", "secondary": "#A855F7", "accent": "#7C3AED",
        "surface": "#FAF5FF", "border": "#E9D8FD",
    },
    ColorScheme.DARK.value: {
        "primary": "#1F2937", "secondary": "#374151", "accent": "#111827",
        "surface": "#1E293B", "border": "#334155",
    },
}

# Per-template presets; "colors" holds the overrides layered on the palette.
TEMPLATE_PRESETS: Dict[str, dict] = {
    TemplateType.MINIMAL.value: {
        "layout": {"hero_layout": "centered", "section_spacing": "compact",
                   "card_style": "minimal", "navigation": "top"},
        "typography": {"font_family": "system-ui, -apple-system, 'Segoe UI', sans-serif",
                       "heading_size": "medium", "line_height": "normal", "font_weight": "normal"},
        "colors": {"background": "#FFFFFF", "text": "#1F2937",
                   "surface": "#F8FAFC", "border": "#E2E8F0"},
        "animations": {"hover_effect": "float", "transition_speed": "normal",
                       "entrance_animation": "fade"},
        "effects": {"background_pattern": "none", "shadow_intensity": "subtle",
                    "border_radius": "medium"},
    },
    TemplateType.DARK_MODE.value: {
        "layout": {"hero_layout": "modern", "section_spacing": "normal",
                   "card_style": "glass", "navigation": "floating"},
        "typography": {"font_family": "'Inter', 'SF Pro Display', system-ui, sans-serif",
                       "heading_size": "large", "line_height": "normal", "font_weight": "normal"},
        "colors": {"background": "#0A0F1C", "text": "#F8FAFC",
                   "surface": "rgba(255, 255, 255, 0.05)", "border": "rgba(255, 255, 255, 0.1)"},
        "animations": {"hover_effect": "glow", "transition_speed": "normal",
                       "entrance_animation": "slide"},
        "effects": {"background_pattern": "dots", "shadow_intensity": "medium",
                    "border_radius": "medium"},
    },
    TemplateType.CREATIVE.value: {
        "layout": {"hero_layout": "asymmetric", "section_spacing": "generous",
                   "card_style": "gradient", "navigation": "side"},
        "typography": {"font_family": "'Poppins', 'Inter', system-ui, sans-serif",
                       "heading_size": "xlarge", "line_height": "loose", "font_weight": "bold"},
        "colors": {"background": "linear-gradient(135deg, #FEF7FF 0%, #F3E8FF 100%)",
                   "text": "#1F2937", "surface": "rgba(255, 255, 255, 0.9)",
                   "border": "rgba(168, 85, 247, 0.2)"},
        "animations": {"hover_effect": "pulse", "transition_speed": "slow",
                       "entrance_animation": "bounce"},
        "effects": {"background_pattern": "waves", "shadow_intensity": "strong",
                    "border_radius": "large"},
    },
    TemplateType.PROFESSIONAL.value: {
        "layout": {"hero_layout": "classic", "section_spacing": "spacious",
                   "card_style": "minimal", "navigation": "top"},
        "typography": {"font_family": "'Georgia', 'Times New Roman', 'Noto Serif', serif",
                       "heading_size": "medium", "line_height": "tight", "font_weight": "normal"},
        "colors": {"background": "#F8FAFC", "text": "#1E293B",
                   "surface": "#FFFFFF", "border": "#E2E8F0"},
        "animations": {"hover_effect": "scale", "transition_speed": "normal",
                       "entrance_animation": "fade"},
        "effects": {"background_pattern": "grid", "shadow_intensity": "subtle",
                    "border_radius": "small"},
    },
    TemplateType.DEVELOPER.value: {
        "layout": {"hero_layout": "full-width", "section_spacing": "compact",
                   "card_style": "flat", "navigation": "hidden"},
        "typography": {"font_family": "'Fira Code', 'JetBrains Mono', 'Cascadia Code', monospace",
                       "heading_size": "small", "line_height": "tight", "font_weight": "normal"},
        "colors": {"background": "#0A0C10", "text": "#E6EDF3",
                   "surface": "#161B22", "border": "#30363D"},
        "animations": {"hover_effect": "glow", "transition_speed": "normal",
                       "entrance_animation": "zoom"},
        "effects": {"background_pattern": "geometric", "shadow_intensity": "none",
                    "border_radius": "small"},
    },
    TemplateType.DESIGNER.value: {
        "layout": {"hero_layout": "modern", "section_spacing": "spacious",
                   "card_style": "glass", "navigation": "floating"},
        "typography": {"font_family": "'Helvetica Neue', 'SF Pro Display', 'Inter', system-ui, sans-serif",
                       "heading_size": "xlarge", "line_height": "normal", "font_weight": "light"},
        "colors": {"background": "#FFFFFF", "text": "#111827",
                   "surface": "rgba(255, 255, 255, 0.95)", "border": "rgba(0, 0, 0, 0.08)"},
        "animations": {"hover_effect": "float", "transition_speed": "normal",
                       "entrance_animation": "slide"},
        "effects": {"background_pattern": "none", "shadow_intensity": "subtle",
                    "border_radius": "medium"},
    },
}

BORDER_RADIUS_VALUES = {"none": "0px", "small": "4px", "medium": "8px", "large": "16px"}

SHADOW_VALUES = {
    "none": "0 0 0 rgba(0,0,0,0)",
    "subtle": "0 2px 8px rgba(0,0,0,0.1)",
    "medium": "0 4px 16px rgba(0,0,0,0.15)",
    "strong": "0 8px 32px rgba(0,0,0,0.2)",
}

TRANSITION_SPEED_VALUES = {"fast": "0.2s", "normal": "0.3s", "slow": "0.5s"}


def resolve_template(template) -> str:
    """Map any value to a known template id, falling back to minimal."""
    template = getattr(template, "value", template)
    if isinstance(template, str) and template in TEMPLATE_PRESETS:
        return template
    return DEFAULT_TEMPLATE


def resolve_color_scheme(color_scheme) -> str:
    """Map any value to a known palette, falling back to blue."""
    color_scheme = getattr(color_scheme, "value", color_scheme)
    if isinstance(color_scheme, str) and color_scheme in BASE_PALETTES:
        return color_scheme
    return DEFAULT_COLOR_SCHEME


def get_style(template, color_scheme) -> TemplateStyle:
    """Look up the style descriptor for a template and color scheme.

    Never raises: unrecognised values resolve to minimal / blue.
    """
    template = resolve_template(template)
    color_scheme = resolve_color_scheme(color_scheme)
    preset = TEMPLATE_PRESETS[template]
    colors = {**BASE_PALETTES[color_scheme], **preset["colors"]}
    return TemplateStyle(
        template=template,
        color_scheme=color_scheme,
        layout=LayoutTokens(**preset["layout"]),
        typography=TypographyTokens(**preset["typography"]),
        colors=ColorTokens(**colors),
        animations=AnimationTokens(**preset["animations"]),
        effects=EffectTokens(**preset["effects"]),
    )


def get_css_variables(template, color_scheme) -> Dict[str, str]:
    """CSS custom properties for a template and color scheme."""
    style = get_style(template, color_scheme)
    return {
        "--template-primary": style.colors.primary,
        "--template-secondary": style.colors.secondary,
        "--template-accent": style.colors.accent,
        "--template-background": style.colors.background,
        "--template-text": style.colors.text,
        "--template-surface": style.colors.surface,
        "--template-border": style.colors.border,
        "--template-font-family": style.typography.font_family,
        "--template-font-weight": style.typography.font_weight,
        "--template-border-radius": BORDER_RADIUS_VALUES[style.effects.border_radius],
        "--template-shadow": SHADOW_VALUES[style.effects.shadow_intensity],
        "--template-transition-speed": TRANSITION_SPEED_VALUES[style.animations.transition_speed],
        "--template-pattern": style.effects.background_pattern,
    }


def get_template_classes(template, color_scheme) -> str:
    """Class list describing the style tokens, applied to the layout root."""
    style = get_style(template, color_scheme)
    return " ".join([
        f"template-{style.template}",
        f"scheme-{style.color_scheme}",
        f"layout-{style.layout.hero_layout}",
        f"spacing-{style.layout.section_spacing}",
        f"cards-{style.layout.card_style}",
        f"typography-{style.typography.heading_size}",
        f"animation-{style.animations.hover_effect}",
        f"entrance-{style.animations.entrance_animation}",
        f"pattern-{style.effects.background_pattern}",
    ])
