"""
Example script: build a portfolio, save it and export it in every format.

Optional environment variables in .env:
- FOLIO_STORAGE_DIR: Where the local store lives (default: data/local)
- FOLIO_REMOTE_PATH: Record table file; enables the remote store
- FOLIO_USER_ID: Owner id to save under (anonymous when unset)
- FOLIO_LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import os
from pathlib import Path

from dotenv import load_dotenv

from folio.errors import ExportError
from folio.interfaces.interface import Folio
from folio.utils.config import Config


async def main():
    # Load environment variables
    load_dotenv()

    folio = Folio.from_config(Config(), current_user=lambda: os.getenv("FOLIO_USER_ID"))

    folio.update_personal_info(
        name="Ada Lovelace",
        job_title="Engineer",
        bio="Writes programs for machines that do not exist yet.",
    )
    for skill in ("Math", "Programming", "Analytical Engines"):
        folio.add_skill(skill)
    folio.add_project(
        title="Note G",
        description="An algorithm for computing Bernoulli numbers.",
        link="https://en.wikipedia.org/wiki/Note_G",
    )
    folio.update_theme(template="developer", color_scheme="dark")

    if not folio.validation.success:
        for path, message in folio.validation.errors.items():
            print(f"✗ {path}: {message}")
        return

    outcome = await folio.save()
    print(f"\nSaved (remote={outcome.remote_saved}, local={outcome.local_saved})")
    if outcome.warning:
        print(f"Warning: {outcome.warning}")

    out_dir = Path(__file__).parent.parent / "data" / "exports"
    print(f"✓ HTML: {folio.export_html(out_dir)}")
    print(f"✓ JSON: {folio.export_json(out_dir)}")

    try:
        print(f"✓ PDF: {await folio.export_pdf(out_dir)}")
    except ExportError as e:
        print(f"✗ PDF export failed: {e}")
        print(f"  {e.suggestion}")


if __name__ == "__main__":
    asyncio.run(main())
