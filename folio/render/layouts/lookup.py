"""
Lookup table from template id to layout.
"""
from typing import Dict

from ...styles.registry import resolve_template
from .base import Layout
from .creative import CreativeLayout
from .dark_mode import DarkModeLayout
from .designer import DesignerLayout
from .developer import DeveloperLayout
from .minimal import MinimalLayout
from .professional import ProfessionalLayout

LAYOUTS: Dict[str, Layout] = {
    layout.template: layout
    for layout in (
        MinimalLayout(),
        DarkModeLayout(),
        CreativeLayout(),
        ProfessionalLayout(),
        DeveloperLayout(),
        DesignerLayout(),
    )
}


def get_layout(template) -> Layout:
    """Layout for a template id; unknown ids get the minimal layout."""
    return LAYOUTS[resolve_template(template)]
