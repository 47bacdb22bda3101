"""Command line interface: ``python -m icon_search``."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from runtime_config import config_main_path, load_merged_config

from .catalog import load_catalog
from .concepts import ConceptMapping
from .engine import create_engine
from .errors import CatalogError, InputError
from .formatting import format_text_results
from .log_setup import configure_logging
from .settings import SearchSettings
from .visual_tags import TAG_DICTIONARY, tags_for_name, write_visual_tags

EXIT_INPUT_ERROR = 2


def search(args: argparse.Namespace, settings: SearchSettings) -> int:
    """Run a query and print the ranked icons."""

    engine = create_engine(settings)
    query = " ".join(args.query)
    results = engine.search(query, args.max_results, args.threshold)
    if args.json:
        payload = [r.to_dict(settings.icon_package, explain=args.explain) for r in results]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(format_text_results(query, results, explain=args.explain))
    return 0


def tags(args: argparse.Namespace, settings: SearchSettings) -> int:
    """Show the visual tags the name rules assign to an icon."""

    names = [TAG_DICTIONARY[i] for i in tags_for_name(args.name)]
    print(f"{args.name}: {', '.join(names) if names else '(no tags)'}")
    return 0


def concepts(args: argparse.Namespace, settings: SearchSettings) -> int:
    """Show the name fragments a concept word expands to."""

    word = args.word.strip().lower()
    fragments = ConceptMapping().fragments(word)
    if not fragments:
        print(f'No concept "{word}"')
        return 1
    print(f"{word}: {', '.join(fragments)}")
    return 0


def build_tags(args: argparse.Namespace, settings: SearchSettings) -> int:
    """Write the visual tag artifact for the configured catalog."""

    output = args.output or settings.visual_tags_path
    if output is None:
        raise SystemExit("no output path: pass --output or set [SEARCH] visual_tags_path")
    if settings.catalog_path is None:
        raise CatalogError("No catalog_path configured in [SEARCH]")
    catalog = load_catalog(settings.catalog_path)
    index = write_visual_tags(catalog.names, output)
    print(f"Wrote {len(index)} base names to {output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="icon_search", description="Icon search")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("search", help="search icons")
    p.add_argument("query", nargs="+")
    p.add_argument("--max-results", type=int, default=None, help="number of results (default from config)")
    p.add_argument("--threshold", type=float, default=None, help="fuzzy strictness 0..1 (default from config)")
    p.add_argument("--json", action="store_true", help="print results as JSON")
    p.add_argument("--explain", action="store_true", help="include score breakdown and match reasons")
    p.set_defaults(func=search)

    p = sub.add_parser("tags", help="show visual tags of an icon name")
    p.add_argument("name")
    p.set_defaults(func=tags)

    p = sub.add_parser("concepts", help="show the fragments of a concept word")
    p.add_argument("word")
    p.set_defaults(func=concepts)

    p = sub.add_parser("build-tags", help="write the visual tag index artifact")
    p.add_argument("--output", type=Path, default=None, help="target file (default from config)")
    p.set_defaults(func=build_tags)

    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="write logs to this file")
    parser.add_argument("--config", type=Path, default=None, help="alternative config.ini")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    config_path = args.config.resolve() if args.config else config_main_path()
    cfg = load_merged_config(config_path)
    configure_logging(
        cfg,
        console_level=level,
        log_file=args.log_file,
        search_details=True if args.verbose >= 2 else None,
        stream=sys.stderr,
    )
    settings = SearchSettings.from_config(cfg, config_path.parent)

    try:
        return args.func(args, settings)
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except CatalogError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
