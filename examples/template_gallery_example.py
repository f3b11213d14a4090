"""
Example script: render one portfolio JSON file with every template.

Usage:
    python examples/template_gallery_example.py path/to/portfolio.json [out_dir]
"""
import sys
from pathlib import Path

from dotenv import load_dotenv

from folio.errors import PortfolioImportError
from folio.export.exporter import export_gallery, import_json
from folio.styles.catalog import list_templates


def main():
    load_dotenv()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    try:
        data = import_json(Path(sys.argv[1]))
    except PortfolioImportError as e:
        print(f"✗ {e}")
        sys.exit(1)

    out_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else Path("data/gallery")
    paths = export_gallery(data, out_dir)

    print("\nTemplates:")
    for info, path in zip(list_templates(), paths):
        print(f"- {info.name}: {path}")


if __name__ == "__main__":
    main()
