"""Erzeugt den Visual-Tag-Index (``data/icon_visual_tags.json``) aus dem Icon-Katalog.

Aufruf: ``python build_visual_tags.py [--catalog PFAD] [--output PFAD]``
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from icon_search.catalog import load_catalog
from icon_search.visual_tags import TAG_DICTIONARY, write_visual_tags

# ── Konfiguration ──────────────────────────────────────────────────────────────
DATA_DIR = Path(__file__).resolve().parent / "data"
CATALOG_PATH = DATA_DIR / "icon_names.json"
OUTPUT_PATH = DATA_DIR / "icon_visual_tags.json"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build the visual tag index")
    parser.add_argument("--catalog", type=Path, default=CATALOG_PATH)
    parser.add_argument("--output", type=Path, default=OUTPUT_PATH)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    catalog = load_catalog(args.catalog)
    index = write_visual_tags(catalog.names, args.output)

    # ── Statistik ──────────────────────────────────────────────────────────────
    untagged = len(catalog.base_names) - len(index)
    print(f"Tags: {len(TAG_DICTIONARY)}")
    print(f"Basisnamen mit Tags: {len(index)} (ohne Tags: {untagged})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
