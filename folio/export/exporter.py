"""
Portfolio exporter.

Every export goes through ``folio.render.renderer.render``, the same call the
live preview makes, so an exported document has exactly the structure and
content of the preview for the same data.
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from jinja2 import BaseLoader, Environment
from markupsafe import Markup
from playwright.async_api import async_playwright
from pydantic import ValidationError
from tqdm import tqdm

from ..errors import ExportError, PortfolioImportError
from ..portfolio.models import PortfolioData
from ..render.renderer import render
from ..styles.catalog import list_templates
from ..utils.files import atomic_write

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("personalInfo", "skills", "projects", "theme")
DEFAULT_FILENAME = "portfolio"

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{ title }}</title>
  <style>
{{ stylesheet }}
{%- if print_css %}
{{ print_css }}
{%- endif %}
  </style>
</head>
<body>
{{ body }}
</body>
</html>
"""

PRINT_CSS = """@media print {
  @page { margin: 12mm; }
  body { margin: 0; -webkit-print-color-adjust: exact; print-color-adjust: exact; }
  .portfolio .container, .portfolio .shell, .portfolio .ide, .portfolio .site-nav { max-width: 100% !important; }
  .portfolio .section { animation: none !important; }
  .project-card { break-inside: avoid; page-break-inside: avoid; }
  .site-nav { position: static !important; }
}
body { margin: 0; }
"""

PDF_MARGIN = {"top": "0mm", "bottom": "0mm", "left": "0mm", "right": "0mm"}

_env = Environment(loader=BaseLoader(), autoescape=True)
_document = _env.from_string(DOCUMENT_TEMPLATE)


def _document_title(data: PortfolioData) -> str:
    name = data.personal_info.name.strip()
    return f"{name} - Portfolio" if name else "Portfolio"


def _build_document(data: PortfolioData, print_css: str = "") -> str:
    rendered = render(data)
    try:
        body = rendered.to_html()
    except (TypeError, ValueError) as e:
        raise ExportError(f"Could not serialize portfolio: {e}") from e
    return _document.render(
        title=_document_title(data),
        stylesheet=Markup(rendered.stylesheet),
        print_css=Markup(print_css),
        body=Markup(body),
    )


def to_standalone_document(data: PortfolioData) -> str:
    """Complete HTML document with the stylesheet inlined."""
    return _build_document(data)


def to_printable_document(data: PortfolioData) -> str:
    """Standalone document plus print rules."""
    return _build_document(data, print_css=PRINT_CSS)


def to_json(data: PortfolioData) -> str:
    """Canonical JSON snapshot: camelCase keys, 2-space indent."""
    try:
        return json.dumps(data.to_wire(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ExportError(f"Could not serialize portfolio to JSON: {e}") from e


def parse_json(text: str) -> PortfolioData:
    """Inverse of ``to_json``."""
    return PortfolioData.model_validate_json(text)


def import_json(source: Union[str, Path]) -> PortfolioData:
    """Read a portfolio from JSON text or a JSON file.

    Strings that look like JSON are parsed directly; anything else is
    treated as a path.

    Raises:
        PortfolioImportError: If the file cannot be read, is not valid JSON, is
            missing one of the top-level sections or does not describe a
            portfolio
    """
    if isinstance(source, Path) or not source.lstrip().startswith(("{", "[")):
        try:
            text = Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PortfolioImportError(f"Could not read {source}: {e}") from e
    else:
        text = source

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise PortfolioImportError(f"Not a valid JSON file: {e}") from e

    if not isinstance(document, dict):
        raise PortfolioImportError("Portfolio file must contain a JSON object")

    missing = [key for key in REQUIRED_KEYS if key not in document]
    if missing:
        raise PortfolioImportError(f"Portfolio file is missing required fields: {', '.join(missing)}")

    try:
        return PortfolioData.model_validate(document)
    except ValidationError as e:
        raise PortfolioImportError(f"Portfolio file has an invalid structure: {e}") from e


def export_filename(data: PortfolioData, ext: str) -> str:
    """File name for a download: ``<name or "portfolio">.<ext>``."""
    stem = data.personal_info.name.strip()
    for separator in ("/", "\\", "\0"):
        stem = stem.replace(separator, "")
    stem = stem.strip(". ") or DEFAULT_FILENAME
    return f"{stem}.{ext}"


def _atomic_write(path: Path, content: Union[str, bytes]):
    try:
        atomic_write(path, content)
    except OSError as e:
        raise ExportError(f"Could not write {path}: {e}") from e


def write_html(data: PortfolioData, out_dir: Union[str, Path]) -> Path:
    """Write the standalone document into ``out_dir``."""
    path = Path(out_dir) / export_filename(data, "html")
    _atomic_write(path, to_standalone_document(data))
    logger.info(f"Exported HTML to {path}")
    return path


def write_json(data: PortfolioData, out_dir: Union[str, Path]) -> Path:
    """Write the JSON snapshot into ``out_dir``."""
    path = Path(out_dir) / export_filename(data, "json")
    _atomic_write(path, to_json(data))
    logger.info(f"Exported JSON to {path}")
    return path


async def print_to_pdf(data: PortfolioData, path: Union[str, Path]) -> Path:
    """Print the printable document to PDF with headless Chromium.

    Raises:
        ExportError: If the browser cannot be started or printing fails. No
            file is left at ``path`` in that case.
    """
    path = Path(path)
    html = to_printable_document(data)
    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch()
            try:
                page = await browser.new_page()
                await page.set_content(html, wait_until="networkidle")
                await page.emulate_media(media="print")
                pdf_bytes = await page.pdf(
                    format="A4",
                    print_background=True,
                    prefer_css_page_size=True,
                    margin=PDF_MARGIN,
                )
            finally:
                await browser.close()
    except Exception as e:
        logger.error(f"PDF export failed: {e}")
        raise ExportError(f"PDF export failed: {e}") from e

    _atomic_write(path, pdf_bytes)
    logger.info(f"Exported PDF to {path}")
    return path


def export_gallery(data: PortfolioData, out_dir: Union[str, Path]) -> List[Path]:
    """Write the portfolio once per template, for side-by-side comparison."""
    out_dir = Path(out_dir)
    stem = export_filename(data, "html")[:-len(".html")]
    paths = []
    for info in tqdm(list_templates(), desc="Rendering templates"):
        snapshot = data.model_copy(update={"theme": data.theme.model_copy(update={"template": info.id})})
        path = out_dir / f"{stem}-{info.id}.html"
        _atomic_write(path, to_standalone_document(snapshot))
        paths.append(path)
    logger.info(f"Exported {len(paths)} templates to {out_dir}")
    return paths
