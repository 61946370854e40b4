#!/usr/bin/env python3
"""Print matchday standings for a plain-text list of results."""
from __future__ import annotations

import argparse
import sys
import zipfile
from pathlib import Path
from typing import Iterable, Iterator

import pandas as pd

from match_parser import Match, MatchLineError, parse_match_line
from standings import (
    DEFAULT_DRAW_POINTS,
    DEFAULT_TOP,
    DEFAULT_WIN_POINTS,
    Standings,
    StandingsConfig,
)

INVISIBLE_CHARACTERS = "\ufeff\u200b\u200c\u200d\u2060"
_REMOVE_INVISIBLE = str.maketrans("", "", INVISIBLE_CHARACTERS)
DEFAULT_SHEET_NAME = "Standings"
EXPORT_SUFFIXES = {".csv", ".xlsx"}


class StandingsExportError(Exception):
    """Raised when the final table cannot be written."""


def _clean_line(raw: str) -> str:
    return raw.rstrip("\r\n").translate(_REMOVE_INVISIBLE)


def _iter_match_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (line number, text) for lines that should hold a match."""
    for idx, raw in enumerate(lines, start=1):
        line = _clean_line(raw)
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        yield idx, line


def _export(standings: Standings, output: Path, sheet_name: str) -> None:
    """Write the full table to CSV, or to an Excel sheet that replaces any old one."""
    suffix = output.suffix.lower()
    if suffix not in EXPORT_SUFFIXES:
        raise StandingsExportError(f"Unsupported file type: {output.suffix}")
    table = standings.to_frame()
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        if suffix == ".csv":
            table.to_csv(output, index=False)
            return
        if output.exists():
            writer = pd.ExcelWriter(
                output, engine="openpyxl", mode="a", if_sheet_exists="replace"
            )
        else:
            writer = pd.ExcelWriter(output, engine="openpyxl")
        with writer:
            table.to_excel(writer, sheet_name=sheet_name, index=False)
    except (OSError, ValueError, zipfile.BadZipFile) as exc:
        raise StandingsExportError(f"Cannot write {output}: {exc}") from exc


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"value must not be negative: {number}")
    return number


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Read match results ('Home 1, Away 2' per line) and print the top of "
            "the standings after every matchday."
        )
    )
    parser.add_argument(
        "matches_file",
        type=Path,
        help="Plain-text file with one result per line, in matchday order.",
    )
    parser.add_argument(
        "--win-points",
        type=_non_negative_int,
        default=DEFAULT_WIN_POINTS,
        help=f"Points for a win (default: {DEFAULT_WIN_POINTS}).",
    )
    parser.add_argument(
        "--draw-points",
        type=_non_negative_int,
        default=DEFAULT_DRAW_POINTS,
        help=f"Points for each team in a draw (default: {DEFAULT_DRAW_POINTS}).",
    )
    parser.add_argument(
        "--top",
        type=_non_negative_int,
        default=DEFAULT_TOP,
        help=f"Number of teams shown per matchday (default: {DEFAULT_TOP}).",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Report malformed lines and keep going instead of aborting.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional CSV/XLSX file that receives the full final table.",
    )
    parser.add_argument(
        "--sheet",
        default=DEFAULT_SHEET_NAME,
        help=f"Sheet name used for Excel output (default: {DEFAULT_SHEET_NAME}).",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _ingest_lines(
    standings: Standings, lines: Iterable[str], skip_invalid: bool
) -> int:
    """Feed every match line into ``standings``; return the number skipped."""
    skipped = 0
    for idx, line in _iter_match_lines(lines):
        try:
            match: Match = parse_match_line(line)
        except MatchLineError as exc:
            if not skip_invalid:
                raise MatchLineError(f"line {idx}: {exc}", exc.line) from exc
            skipped += 1
            print(f"[WARNING] Skipping line {idx}: {exc}", file=sys.stderr)
            continue
        standings.ingest(match)
    return skipped


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    config = StandingsConfig(
        win_points=args.win_points, draw_points=args.draw_points, top=args.top
    )
    standings = Standings(config)

    try:
        fp = args.matches_file.open("r", encoding="utf-8")
    except OSError as exc:
        print(f"[ERROR] Cannot open file {args.matches_file}: {exc}", file=sys.stderr)
        return 1

    try:
        with fp:
            skipped = _ingest_lines(standings, fp, args.skip_invalid)
    except MatchLineError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"[ERROR] Cannot read file {args.matches_file}: {exc}", file=sys.stderr)
        return 1
    standings.print_rankings()

    if skipped:
        print(f"[INFO] Skipped {skipped} malformed line(s).", file=sys.stderr)

    if args.output:
        try:
            _export(standings, args.output, args.sheet)
        except StandingsExportError as exc:
            print(f"[ERROR] {exc}", file=sys.stderr)
            return 1
        print(
            f"[INFO] Wrote standings for {len(standings.points)} teams to {args.output}",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
