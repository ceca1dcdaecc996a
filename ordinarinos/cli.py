"""Command-line interface for browsing and selecting rare sats.

The CLI is a thin façade over :mod:`ordinarinos.rarity`: it reads the held
sats a wallet export lists, reconciles them against the catalog, and prints
the filtered entries so an operator can pick a satoshi for inscription.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Iterable, Sequence

from .config import ConfigurationError, SelectorConfig, load_selector_config, set_default_config_path
from .holdings import HoldingsError, load_held_satoshis, parse_held_satoshis
from .rarity import (
    CatalogEntry,
    InvalidInputError,
    RarityTier,
    build_catalog,
    classify,
    filter_entries,
    matching_categories,
    rarity_label,
    reconcile,
    tier_counts,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    """Raised when CLI arguments are invalid."""


def _add_held_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--held",
        help="Comma-separated satoshi numbers held by the wallet",
    )
    parser.add_argument(
        "--held-file",
        help="File listing held satoshis (JSON, YAML, or plain text)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ordinarinos rare-sat selector")
    parser.add_argument("--config", help="Path to a selector YAML config file")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser(
        "classify", help="Classify one or more satoshi numbers"
    )
    classify_parser.add_argument("satoshis", nargs="+", help="Satoshi numbers to classify")
    classify_parser.add_argument(
        "--explain",
        action="store_true",
        help="List every matching category in priority order",
    )
    classify_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Emit the classifications as JSON",
    )

    catalog_parser = subparsers.add_parser(
        "catalog", help="Show one representative satoshi per rare category"
    )
    catalog_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Emit the catalog as JSON",
    )

    select_parser = subparsers.add_parser(
        "select", help="Reconcile held sats against the catalog and filter the result"
    )
    _add_held_arguments(select_parser)
    select_parser.add_argument("--search", help="Case-insensitive text to match")
    select_parser.add_argument(
        "--tier",
        help="Rarity tier (legendary, epic, very-rare, rare, uncommon, common)",
    )
    select_parser.add_argument(
        "--available-only",
        dest="available_only",
        action="store_const",
        const=True,
        help="Show only categories present in the held sats",
    )
    select_parser.add_argument(
        "--show-all",
        dest="available_only",
        action="store_const",
        const=False,
        help="Show unavailable categories too (default)",
    )
    select_parser.set_defaults(available_only=None)
    select_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Emit the selected entries as JSON",
    )

    tiers_parser = subparsers.add_parser(
        "tiers", help="Count catalog entries per rarity tier"
    )
    _add_held_arguments(tiers_parser)
    tiers_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Emit the counts as JSON",
    )

    return parser


def _load_held(args: argparse.Namespace, config: SelectorConfig | None = None) -> list[int]:
    held: list[int] = []
    if getattr(args, "held", None):
        held.extend(parse_held_satoshis(args.held, fmt="text"))
    held_file = getattr(args, "held_file", None) or (config.held_file if config else None)
    if held_file:
        held.extend(load_held_satoshis(held_file))
    return held


def _selector_config(args: argparse.Namespace) -> SelectorConfig:
    overrides = {
        "search": args.search,
        "tier": args.tier,
        "available_only": args.available_only,
        "held_file": args.held_file,
    }
    return load_selector_config(overrides=overrides)


def _print_entries(entries: Iterable[CatalogEntry]) -> None:
    rows = list(entries)
    if not rows:
        print("No satoshis match your search.")
        return
    print(" avail | rarity | label             | category     | satoshi")
    print("-------+--------+-------------------+--------------+-" + "-" * 20)
    for entry in rows:
        marker = "Y" if entry.available else "-"
        print(
            f"{marker:^6} | {entry.rarity:>6} | {rarity_label(entry.rarity):<17} | "
            f"{entry.label:<12} | {entry.satoshi}"
        )


def cmd_classify(args: argparse.Namespace) -> None:
    results: list[dict[str, Any]] = []
    for raw in args.satoshis:
        sat = classify(raw)
        record: dict[str, Any] = {
            "satoshi": str(sat.satoshi),
            "category": sat.label,
            "rarity": sat.rarity,
            "description": sat.description,
        }
        if args.explain:
            record["matches"] = [category.label for category in matching_categories(sat.satoshi)]
        results.append(record)

    if args.as_json:
        print(json.dumps(results, indent=2))
        return

    for record in results:
        print(
            f"{record['satoshi']}: {record['category']} "
            f"(rarity {record['rarity']}, {rarity_label(record['rarity'])})"
        )
        print(f"  {record['description']}")
        if args.explain:
            matches = ", ".join(record["matches"]) or "-"
            print(f"  matches: {matches}")


def cmd_catalog(args: argparse.Namespace) -> None:
    catalog = build_catalog()
    if args.as_json:
        print(json.dumps([entry.to_dict() for entry in catalog], indent=2))
        return
    _print_entries(catalog)


def cmd_select(args: argparse.Namespace) -> None:
    config = _selector_config(args)
    held = _load_held(args, config)
    entries = reconcile(held, build_catalog())
    selected = filter_entries(
        entries,
        search_text=config.search,
        tier=config.tier,
        available_only=config.available_only,
    )
    logger.debug("Selected %d of %d catalog entries", len(selected), len(entries))

    if args.as_json:
        print(json.dumps([entry.to_dict() for entry in selected], indent=2))
        return
    if held and not any(entry.available for entry in entries):
        print("No rare sats found among the held satoshis.")
    _print_entries(selected)


def cmd_tiers(args: argparse.Namespace) -> None:
    config = load_selector_config(overrides={"held_file": args.held_file})
    entries = reconcile(_load_held(args, config), build_catalog())
    counts = tier_counts(entries)
    available = tier_counts(filter_entries(entries, available_only=True))

    if args.as_json:
        print(
            json.dumps(
                {
                    tier.label: {"total": counts[tier], "available": available[tier]}
                    for tier in RarityTier
                },
                indent=2,
            )
        )
        return

    print(f"All ({len(entries)})")
    for tier in RarityTier:
        print(
            f"{tier.label:<10} [{tier.minimum}-{tier.maximum}]: "
            f"{counts[tier]} ({available[tier]} available)"
        )


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger("ordinarinos").setLevel(logging.DEBUG)
    set_default_config_path(args.config)
    try:
        if args.command == "classify":
            cmd_classify(args)
        elif args.command == "catalog":
            cmd_catalog(args)
        elif args.command == "select":
            cmd_select(args)
        elif args.command == "tiers":
            cmd_tiers(args)
        else:  # pragma: no cover - argparse enforces choices
            raise CLIError(f"Unknown command: {args.command}")
    except KeyboardInterrupt:  # pragma: no cover - interactive use
        logger.info("Interrupted by user")
    except (
        CLIError,
        ConfigurationError,
        HoldingsError,
        InvalidInputError,
    ) as exc:
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
