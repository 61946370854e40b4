#!/usr/bin/env python3
"""Running points table that prints a ranked snapshot at every new matchday."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

import pandas as pd

from match_parser import Match, OutcomeKind

DEFAULT_WIN_POINTS = 3
DEFAULT_DRAW_POINTS = 1
DEFAULT_TOP = 3

RANKING_COLUMNS = ("Place", "Team", "Points")


@dataclass(frozen=True)
class StandingsConfig:
    win_points: int = DEFAULT_WIN_POINTS
    draw_points: int = DEFAULT_DRAW_POINTS
    top: int = DEFAULT_TOP

    def __post_init__(self) -> None:
        for field_name in ("win_points", "draw_points", "top"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must not be negative")


def format_points(points: int) -> str:
    return f"{points} pt" if points == 1 else f"{points} pts"


class Standings:
    """Accumulate match results into a points table.

    Matchdays are not labelled in the input. A new matchday is assumed to
    start as soon as a team that already played in the current one shows up
    again, so matches must arrive in round order, one round after the other,
    with every team playing once per round. Byes or interleaved rounds are
    detected as extra matchdays.
    """

    def __init__(
        self, config: StandingsConfig | None = None, stream: TextIO | None = None
    ) -> None:
        self.config = config or StandingsConfig()
        self._stream = stream
        self._points: dict[str, int] = {}
        self._round_teams: set[str] = set()
        self._matchday = 1

    @property
    def matchday(self) -> int:
        return self._matchday

    @property
    def points(self) -> dict[str, int]:
        return dict(self._points)

    @property
    def round_teams(self) -> frozenset[str]:
        return frozenset(self._round_teams)

    def _write(self, text: str = "") -> None:
        print(text, file=self._stream or sys.stdout)

    def ingest(self, match: Match) -> None:
        if match.home_team in self._round_teams or match.away_team in self._round_teams:
            self.print_rankings()
            self._write()
            self._round_teams.clear()
            self._matchday += 1

        outcome = match.outcome()
        if outcome.kind is OutcomeKind.WIN_LOSS:
            self._add_points(outcome.first, self.config.win_points)
            # Losers are registered too so they can show up in the ranking.
            self._add_points(outcome.second, 0)
        else:
            self._add_points(outcome.first, self.config.draw_points)
            self._add_points(outcome.second, self.config.draw_points)

        self._round_teams.add(match.home_team)
        self._round_teams.add(match.away_team)

    def _add_points(self, team: str, points: int) -> None:
        self._points[team] = self._points.get(team, 0) + points

    def ranking(self) -> list[tuple[str, int]]:
        """Return every team ordered by points, then by name."""
        return sorted(self._points.items(), key=lambda item: (-item[1], item[0]))

    def snapshot(self) -> list[tuple[str, int]]:
        return self.ranking()[: self.config.top]

    def print_rankings(self) -> None:
        if not self._points:
            return
        self._write(f"Matchday {self._matchday}")
        for team, points in self.snapshot():
            self._write(f"{team}, {format_points(points)}")

    def to_frame(self) -> pd.DataFrame:
        """Return the full ranking as a table with a 1-based place column."""
        ranking = self.ranking()
        table = pd.DataFrame(ranking, columns=list(RANKING_COLUMNS[1:]))
        table.insert(0, RANKING_COLUMNS[0], range(1, len(ranking) + 1))
        return table
