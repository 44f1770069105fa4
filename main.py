"""Model CLI - Build and inspect the schema model of a parsed raw bundle

Usage:
    python main.py                              # interactive menu of sample bundles
    python main.py bundle.json [summary|export|normalize|repl]
"""
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

sys.path.insert(0, str(Path(__file__).parent))

from config import LOG_FORMAT, LOG_LEVEL, SAMPLE_BUNDLES
from core import build_database, dump_export, dump_normalized, load_bundle, summarize
from model_structure import Database, SemanticError

# ANSI Colors
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RED = "\033[91m"
BOLD = "\033[1m"
RESET = "\033[0m"

ACTIONS = ("summary", "export", "normalize", "repl")


def status(message: str) -> None:
    # stderr keeps export/normalize output valid JSON
    print(message, file=sys.stderr)


def print_summary(summary: Dict) -> None:
    """Print entity counts per schema as a table."""
    print(f"\n{BOLD}{'=' * 60}")
    print(f" DATABASE: {summary['name'] or '<unnamed>'} ({summary['databaseType'] or 'unknown type'})")
    print(f"{'=' * 60}{RESET}")

    header = f"  {'schema':<16}{'tables':>8}{'fields':>8}{'enums':>7}{'refs':>6}{'tags':>6}{'groups':>8}"
    print(header)
    print("  " + "-" * (len(header) - 2))
    for name, counts in summary["schemas"].items():
        print(f"  {name:<16}{counts['tables']:>8}{counts['fields']:>8}{counts['enums']:>7}"
              f"{counts['refs']:>6}{counts['tags']:>6}{counts['tableGroups']:>8}")
    totals = summary["totals"]
    print("  " + "-" * (len(header) - 2))
    print(f"  {'total':<16}{totals['tables']:>8}{totals['fields']:>8}{totals['enums']:>7}"
          f"{totals['refs']:>6}{totals['tags']:>6}{totals['tableGroups']:>8}")

    if summary["hasDefaultSchema"]:
        print(f"\n  {CYAN}Default schema in use{RESET}")


def run_action(database: Database, action: str) -> int:
    if action == "summary":
        print_summary(summarize(database))
    elif action == "export":
        print(dump_export(database))
    elif action == "normalize":
        print(dump_normalized(database))
    elif action == "repl":
        from model_repl import run_repl
        run_repl(database)
    else:
        print(f"{RED}[ERROR] Unknown action: {action}. Expected one of {', '.join(ACTIONS)}{RESET}")
        return 1
    return 0


def choose_bundle() -> Optional[Path]:
    """Ask for a sample bundle; returns None when the user exits."""
    print(f"\n{BOLD}{'=' * 60}")
    print(" Schema Model - Sample Bundles")
    print(f"{'=' * 60}{RESET}")
    for key, sample in SAMPLE_BUNDLES.items():
        print(f"  [{key}] {sample['name']}")
    print("\n  [0] Exit")

    try:
        choice = input("\nChoice: ").strip()
    except (KeyboardInterrupt, EOFError):
        return None

    if choice == "0" or choice not in SAMPLE_BUNDLES:
        if choice != "0":
            print("Invalid choice")
        return None
    return SAMPLE_BUNDLES[choice]["bundle_file"]


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    if argv:
        bundle_file = Path(argv[0])
        action = argv[1] if len(argv) > 1 else "summary"
    else:
        bundle_file = choose_bundle()
        if bundle_file is None:
            return 0
        action = "summary"

    if not bundle_file.exists():
        print(f"{RED}[ERROR] File not found: {bundle_file}{RESET}")
        return 1

    status(f"\n{CYAN}[Step 1] Loading raw bundle: {bundle_file.name}{RESET}")
    try:
        bundle = load_bundle(bundle_file)
    except ValueError as e:
        print(f"{RED}[ERROR] Invalid bundle: {e}{RESET}")
        return 1

    status(f"{CYAN}[Step 2] Building schema model{RESET}")
    try:
        database = build_database(bundle)
    except SemanticError as e:
        print(f"{RED}[ERROR] {e.kind.value}: {e}{RESET}")
        return 1
    status(f"         {GREEN}[OK]{RESET} {len(database.schemas)} schema(s)")

    return run_action(database, action)


if __name__ == "__main__":
    sys.exit(main())
