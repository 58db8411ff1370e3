"""CLI interface for Slipbox - query the tags of a notes directory."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from slipbox.config import Settings, get_settings
from slipbox.errors import SlipboxError
from slipbox.indexer import generate_compact_summary, generate_tag_summary
from slipbox.vault import Vault


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    RED = "\033[31m"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        format="%(message)s",
        level=level,
    )


def print_tags(vault: Vault) -> None:
    counts = vault.state.tag_counts()
    for tag in sorted(counts):
        print(f"{tag} ({counts[tag]})")


def print_notes(vault: Vault, tag: str) -> None:
    for note in vault.notes_from_tag(tag):
        print(note.name)


def print_vault(vault: Vault) -> None:
    print(yaml.safe_dump(vault.to_dict(), sort_keys=False, allow_unicode=True), end="")


def print_summary(vault: Vault, compact: bool) -> None:
    if compact:
        print(generate_compact_summary(vault.state))
    else:
        print(generate_tag_summary(vault.state))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slipbox",
        description="Index the tags of a directory of markdown notes.",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        help="Vault directory (defaults to SLIPBOX_VAULT_PATH)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("tags", help="List every tag with its note count")

    notes_parser = subparsers.add_parser("notes", help="List notes carrying a tag")
    notes_parser.add_argument("tag", help="Exact tag to look for")

    subparsers.add_parser("show", help="Dump the vault index as YAML")

    summary_parser = subparsers.add_parser("summary", help="Summarize the vault's tags")
    summary_parser.add_argument(
        "--compact",
        action="store_true",
        help="Print a single line",
    )

    return parser


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)
    logger = logging.getLogger(__name__)

    vault_path = _resolve_vault_path(args.vault, settings)
    if vault_path is None:
        print(
            f"{Colors.RED}No vault given. Pass --vault or set SLIPBOX_VAULT_PATH.{Colors.RESET}",
            file=sys.stderr,
        )
        return 2

    logger.debug(f"{Colors.DIM}Vault: {vault_path}{Colors.RESET}")

    try:
        vault = Vault.new(vault_path)
    except SlipboxError as e:
        print(f"{Colors.RED}Error: {e}{Colors.RESET}", file=sys.stderr)
        return 1

    if args.command == "tags":
        print_tags(vault)
    elif args.command == "notes":
        print_notes(vault, args.tag)
    elif args.command == "show":
        print_vault(vault)
    elif args.command == "summary":
        print_summary(vault, args.compact)

    return 0


def _resolve_vault_path(arg: Path | None, settings: Settings) -> Path | None:
    if arg is not None:
        return arg
    return settings.vault_path


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
