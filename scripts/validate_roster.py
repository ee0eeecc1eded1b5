#!/usr/bin/env python3
"""
Validar um arquivo de roster sem altera-lo.

Uso:
  python scripts/validate_roster.py [--file data/roster.json] [--verbose]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rosterbook.core.config import get_settings
from rosterbook.core.logging import configure_logging
from rosterbook.repositories.json_storage import DataLoadingError, JsonRosterStorage


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Validate a roster JSON file")
    ap.add_argument("--file", default=str(settings.roster_file_path), help="Roster file (default: ROSTER_FILE_PATH)")
    ap.add_argument("--verbose", action="store_true", help="Print every record")
    args = ap.parse_args(argv)
    configure_logging(settings.log_level)

    path = Path(args.file)
    try:
        roster = JsonRosterStorage(path).read()
    except DataLoadingError as exc:
        sys.stderr.write(f"ERROR: {exc.message}\n")
        return 1
    if roster is None:
        sys.stderr.write(f"ERROR: {path} does not exist\n")
        return 1

    students = sum(1 for p in roster if p.record_type == "student")
    print(f"OK: {path}")
    print(f"  Persons: {len(roster) - students}")
    print(f"  Students: {students}")
    if args.verbose:
        for position, person in enumerate(roster, start=1):
            print(f"  {position}. {person.describe()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
