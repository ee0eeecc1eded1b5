#!/usr/bin/env python3
"""
Gravar o roster de exemplo num arquivo JSON.

Uso:
  python scripts/seed_roster.py [--file data/roster.json] [--force]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rosterbook.core.config import get_settings
from rosterbook.repositories.json_storage import JsonRosterStorage
from rosterbook.services.sample_data import sample_roster


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Write the sample roster to a file")
    ap.add_argument("--file", default=str(settings.roster_file_path), help="Roster file (default: ROSTER_FILE_PATH)")
    ap.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = ap.parse_args(argv)

    path = Path(args.file)
    if path.exists() and not args.force:
        sys.stderr.write(f"ERROR: {path} already exists (use --force to overwrite)\n")
        return 1
    roster = sample_roster()
    JsonRosterStorage(path).save(roster)
    print(f"OK: {len(roster)} records written to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
