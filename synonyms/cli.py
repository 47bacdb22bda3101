import argparse
import sys
from pathlib import Path
from typing import List
import logging

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
    __package__ = "synonyms"

from . import storage
from .cache import SynonymCache
from .provider import ThesaurusProvider, TwoTierSynonymProvider, WordNetProvider

from icon_search.errors import SynonymLookupError


def validate(args: argparse.Namespace) -> None:
    """Validate thesaurus data from a JSON file."""

    catalog = storage.load_synonyms(args.input)
    try:
        storage.validate_catalog(catalog)
    except ValueError as e:
        raise SystemExit(f"invalid catalog: {e}")

    print(f"Catalog '{args.input}' OK")


def stats(args: argparse.Namespace) -> None:
    """Show statistics about the thesaurus."""

    catalog = storage.load_synonyms(args.input)
    total_entries = len(catalog.entries)
    total_synonyms = sum(len(e.synonyms) for e in catalog.entries.values())
    pos_counts: dict[str, int] = {}
    for entry in catalog.entries.values():
        for pos in entry.by_pos:
            pos_counts[pos] = pos_counts.get(pos, 0) + 1

    print(f"Entries: {total_entries}")
    print(f"Synonyms: {total_synonyms}")
    for pos in sorted(pos_counts):
        print(f"  {pos}: {pos_counts[pos]}")


def export(args: argparse.Namespace) -> None:
    """Export thesaurus data as a plain text file."""

    catalog = storage.load_synonyms(args.input)
    lines = []
    for base, entry in catalog.entries.items():
        if entry.synonyms:
            line = f"{base}: {', '.join(entry.synonyms)}"
            lines.append(line)
        else:
            lines.append(base)

    path = args.output or Path("-")
    if path == Path("-"):
        for line in lines:
            print(line)
    else:
        Path(path).write_text("\n".join(lines), encoding="utf-8")


def lookup(args: argparse.Namespace) -> None:
    """Show what the two-tier provider returns for a word."""

    thesaurus = ThesaurusProvider(storage.load_synonyms(args.input))
    wordnet = None if args.no_wordnet else WordNetProvider()
    provider = TwoTierSynonymProvider(thesaurus, wordnet, SynonymCache())
    try:
        found = provider.lookup(args.word)
    except SynonymLookupError as e:
        raise SystemExit(f"lookup failed: {e}")
    print(f"{args.word}: {', '.join(found) if found else '(no synonyms)'}")


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Thesaurus utility")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("validate", help="validate thesaurus data")
    p.add_argument("input", type=Path)
    p.set_defaults(func=validate)

    p = sub.add_parser("stats", help="show statistics")
    p.add_argument("input", type=Path)
    p.set_defaults(func=stats)

    p = sub.add_parser("export", help="export thesaurus data")
    p.add_argument("input", type=Path)
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="output file (defaults to stdout)",
    )
    p.set_defaults(func=export)

    p = sub.add_parser("lookup", help="look up synonyms for a word")
    p.add_argument("input", type=Path, help="thesaurus JSON")
    p.add_argument("word")
    p.add_argument("--no-wordnet", action="store_true", help="skip the WordNet tier")
    p.set_defaults(func=lookup)

    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="write logs to this file")

    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=handlers)

    args.func(args)


if __name__ == "__main__":
    main()
