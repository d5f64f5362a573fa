"""CLI interface with subcommand routing for the page builders."""

import argparse
import logging
import os
import sys

from waddy_site.constants import VERSION
from waddy_site.diary import build_diary_page, build_hina_diary_page
from waddy_site.exporter import build_video_scripts
from waddy_site.galge import build_galge_page
from waddy_site.transcript import build_dialogue_page

logger = logging.getLogger(__name__)

# Subcommand name -> builder, in the order "all" runs them
BUILDERS = {
    "dialogue": build_dialogue_page,
    "video-scripts": build_video_scripts,
    "diary": build_diary_page,
    "diary-hina": build_hina_diary_page,
    "galge": build_galge_page,
}


def _check_root(root: str) -> str:
    """Verify the site root exists."""
    if not os.path.isdir(root):
        print(f"Error: Site root not found: {root}", file=sys.stderr)
        raise SystemExit(1)
    return root


def cmd_build(args):
    """Run one builder."""
    root = _check_root(args.root)
    BUILDERS[args.command](root)


def cmd_all(args):
    """Run every builder in order; the first failure stops the run."""
    root = _check_root(args.root)
    for builder in BUILDERS.values():
        builder(root)


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="waddy-site",
        description="Build the generated pages of the guesthouse site from Markdown",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--root", default=".", help="Site root containing the source directories")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    help_texts = {
        "dialogue": "Build dialogue.html from dialogue/*.md",
        "video-scripts": "Regenerate video-scripts/*.yaml from dialogue/*.md",
        "diary": "Build diary.html from diary/*.md",
        "diary-hina": "Build diary-hina.html from diary-hina/*.md",
        "galge": "Build galge-guide.html from galge/*.md",
    }
    for name in BUILDERS:
        sub = subparsers.add_parser(name, help=help_texts[name])
        sub.set_defaults(func=cmd_build)

    all_parser = subparsers.add_parser("all", help="Run every builder")
    all_parser.set_defaults(func=cmd_all)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except Exception:
        logger.exception("Build '%s' failed", args.command)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
