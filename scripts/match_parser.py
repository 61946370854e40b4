#!/usr/bin/env python3
"""Parse result lines like 'San Jose Earthquakes 3, Santa Cruz Slugs 3'."""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass

SEGMENT_SEPARATOR = ", "
MAX_SCORE = 255
SCORE_PATTERN = re.compile(r"[0-9]+")


class MatchLineError(ValueError):
    """Raised when a line cannot be turned into a match."""

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.line = line


class NoGameDataError(MatchLineError):
    """Raised when a line does not hold exactly two team/score segments."""

    def __init__(self, line: str) -> None:
        super().__init__(f"No game data found in line {line}", line)


class ScoreParseError(MatchLineError):
    """Raised when a segment has no usable team name or score."""


class ScoreRangeError(ScoreParseError):
    """Raised when a score is larger than MAX_SCORE."""


class OutcomeKind(enum.Enum):
    WIN_LOSS = "win_loss"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of a match.

    For WIN_LOSS, ``first`` is the winner and ``second`` the loser.
    For DRAW, ``first`` is the home team and ``second`` the away team.
    """

    kind: OutcomeKind
    first: str
    second: str


@dataclass(frozen=True)
class Match:
    home_team: str
    home_score: int
    away_team: str
    away_score: int

    def __post_init__(self) -> None:
        if not self.home_team or not self.away_team:
            raise ValueError("Team names must not be empty")
        for score in (self.home_score, self.away_score):
            if not 0 <= score <= MAX_SCORE:
                raise ValueError(f"Score {score} is out of range (0-{MAX_SCORE})")

    def outcome(self) -> Outcome:
        return classify(self)


def classify(match: Match) -> Outcome:
    if match.home_score > match.away_score:
        return Outcome(OutcomeKind.WIN_LOSS, match.home_team, match.away_team)
    if match.away_score > match.home_score:
        return Outcome(OutcomeKind.WIN_LOSS, match.away_team, match.home_team)
    return Outcome(OutcomeKind.DRAW, match.home_team, match.away_team)


def _parse_segment(segment: str, line: str) -> tuple[str, int]:
    # Split on the last space so names may contain spaces.
    parts = segment.rsplit(" ", 1)
    if len(parts) != 2:
        raise ScoreParseError(f"Missing team name or score in '{segment}'", line)
    name, token = parts
    if not name:
        raise ScoreParseError(f"Missing team name in '{segment}'", line)
    if not SCORE_PATTERN.fullmatch(token):
        raise ScoreParseError(f"Invalid score '{token}' in '{segment}'", line)
    score = int(token)
    if score > MAX_SCORE:
        raise ScoreRangeError(
            f"Score {score} for '{name}' is out of range (max {MAX_SCORE})", line
        )
    return name, score


def parse_match_line(line: str) -> Match:
    """Return the match described by ``line`` or raise a MatchLineError."""
    segments = line.split(SEGMENT_SEPARATOR)
    if len(segments) != 2:
        raise NoGameDataError(line)
    home_team, home_score = _parse_segment(segments[0], line)
    away_team, away_score = _parse_segment(segments[1], line)
    return Match(home_team, home_score, away_team, away_score)


def format_match_line(match: Match) -> str:
    """Render a match back into the 'Home 1, Away 2' input format."""
    return (
        f"{match.home_team} {match.home_score}{SEGMENT_SEPARATOR}"
        f"{match.away_team} {match.away_score}"
    )
