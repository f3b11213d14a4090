"""
Stylesheet builder.

Turns a style descriptor into CSS: the ``:root`` custom properties, shared
rules driven by the tokens (spacing, heading scale, card style, hover and
entrance animation, background pattern) and the layout's own rules. Preview
and export embed the exact same text.
"""
from typing import Dict

from ..styles.registry import TemplateStyle, get_css_variables
from .layouts.lookup import get_layout

SECTION_SPACING = {"compact": "3rem", "normal": "4rem", "generous": "5rem", "spacious": "6rem"}
HEADING_SIZES = {"small": "2rem", "medium": "2.5rem", "large": "3rem", "xlarge": "3.75rem"}
LINE_HEIGHTS = {"tight": "1.4", "normal": "1.6", "loose": "1.8"}
FONT_WEIGHTS = {"light": "300", "normal": "400", "bold": "700"}

CARD_STYLES = {
    "flat": "background: var(--template-surface);",
    "elevated": "background: var(--template-surface); box-shadow: var(--template-shadow);",
    "minimal": "background: transparent;",
    "bordered": "border: 1px solid var(--template-border);",
    "gradient": "background: linear-gradient(135deg, var(--template-surface), transparent);",
    "glass": "background: var(--template-surface); backdrop-filter: blur(10px);",
}

HOVER_EFFECTS = {
    "scale": "transform: scale(1.02);",
    "shadow": "box-shadow: 0 12px 32px rgba(0, 0, 0, 0.18);",
    "slide": "transform: translateX(4px);",
    "glow": "box-shadow: 0 0 24px var(--template-primary);",
    "rotate": "transform: rotate(-1deg);",
    "float": "transform: translateY(-4px);",
    "pulse": "transform: scale(1.04);",
}

ENTRANCE_KEYFRAMES = {
    "fade": "from { opacity: 0; } to { opacity: 1; }",
    "slide": "from { opacity: 0; transform: translateY(24px); } to { opacity: 1; transform: none; }",
    "zoom": "from { opacity: 0; transform: scale(0.96); } to { opacity: 1; transform: none; }",
    "bounce": ("0% { opacity: 0; transform: translateY(24px); } 60% { opacity: 1; transform: translateY(-6px); } "
               "100% { transform: none; }"),
}

BACKGROUND_PATTERNS = {
    "none": "",
    "dots": "radial-gradient(circle, var(--template-border) 1px, transparent 1px) 0 0 / 24px 24px",
    "grid": ("linear-gradient(var(--template-border) 1px, transparent 1px) 0 0 / 32px 32px, "
             "linear-gradient(90deg, var(--template-border) 1px, transparent 1px) 0 0 / 32px 32px"),
    "waves": "radial-gradient(ellipse at top, var(--template-border), transparent 60%)",
    "geometric": "repeating-linear-gradient(45deg, var(--template-border) 0 1px, transparent 1px 24px)",
}

RESET = """
*, *::before, *::after { box-sizing: border-box; margin: 0; padding: 0; }
img { max-width: 100%; }
a { color: inherit; text-decoration: none; }
"""


def root_block(variables: Dict[str, str]) -> str:
    lines = "\n".join(f"  {name}: {value};" for name, value in variables.items())
    return ":root {\n" + lines + "\n}\n"


def base_rules(style: TemplateStyle) -> str:
    """Rules shared by every layout, parameterised by the style tokens."""
    rules = [
        ".portfolio { min-height: 100vh; background: var(--template-background); color: var(--template-text);"
        f" font-family: var(--template-font-family); font-weight: {FONT_WEIGHTS[style.typography.font_weight]};"
        f" line-height: {LINE_HEIGHTS[style.typography.line_height]}; }}",
        f".portfolio .section {{ padding: {SECTION_SPACING[style.layout.section_spacing]} 0; }}",
        f".portfolio h1 {{ font-size: {HEADING_SIZES[style.typography.heading_size]}; line-height: 1.1; }}",
        ".portfolio h2 { font-size: 2rem; }",
        ".portfolio a { color: var(--template-primary); }",
        f".portfolio .card {{ border-radius: var(--template-border-radius); {CARD_STYLES[style.layout.card_style]}"
        " transition: all var(--template-transition-speed) ease; }",
        f".portfolio .card:hover {{ {HOVER_EFFECTS[style.animations.hover_effect]} }}",
        ".placeholder { display: flex; align-items: center; justify-content: center; min-height: 60vh;"
        " text-align: center; opacity: 0.6; }",
    ]
    entrance = ENTRANCE_KEYFRAMES.get(style.animations.entrance_animation)
    if entrance:
        rules.append(f"@keyframes folio-entrance {{ {entrance} }}")
        rules.append(".portfolio .section { animation: folio-entrance 0.6s ease both; }")
    pattern = BACKGROUND_PATTERNS[style.effects.background_pattern]
    if pattern:
        rules.append(f".portfolio.pattern-{style.effects.background_pattern} {{ background: {pattern},"
                     " var(--template-background); }")
    return "\n".join(rules) + "\n"


def build_stylesheet(template, style: TemplateStyle) -> str:
    """Complete stylesheet for one render."""
    variables = get_css_variables(style.template, style.color_scheme)
    return RESET + root_block(variables) + base_rules(style) + get_layout(template).css
