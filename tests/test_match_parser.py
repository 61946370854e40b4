from __future__ import annotations

import pytest

from match_parser import (
    MAX_SCORE,
    Match,
    MatchLineError,
    NoGameDataError,
    Outcome,
    OutcomeKind,
    ScoreParseError,
    ScoreRangeError,
    classify,
    format_match_line,
    parse_match_line,
)


def test_parses_multi_word_team_names():
    game = parse_match_line("San Jose Earthquakes 3, Santa Cruz Slugs 3")
    assert game == Match("San Jose Earthquakes", 3, "Santa Cruz Slugs", 3)


@pytest.mark.parametrize(
    "home, home_score, away, away_score",
    [
        ("Aptos FC", 0, "Capitola Seahorses", 1),
        ("FC St. Pauli", 12, "Hamburger SV", 0),
        ("A", MAX_SCORE, "B", 0),
    ],
)
def test_fields_match_the_tokens_of_the_line(home, home_score, away, away_score):
    line = f"{home} {home_score}, {away} {away_score}"
    game = parse_match_line(line)
    assert (game.home_team, game.home_score, game.away_team, game.away_score) == (
        home,
        home_score,
        away,
        away_score,
    )
    assert format_match_line(game) == line


@pytest.mark.parametrize(
    "line",
    ["", "Aptos FC 1 Monterey United 0", "A 1, B 2, C 3", "Aptos FC 1,Monterey United 0"],
)
def test_wrong_segment_count_reports_no_game_data(line):
    with pytest.raises(NoGameDataError) as excinfo:
        parse_match_line(line)
    assert excinfo.value.line == line
    assert str(excinfo.value) == f"No game data found in line {line}"


@pytest.mark.parametrize(
    "line",
    [
        "Aptos FC x, Monterey United 0",
        "Aptos FC 1, Monterey United -2",
        "Aptos FC 1, Monterey United",
        "3, Monterey United 0",
        " 3, Monterey United 0",
        "Aptos FC 1, Monterey United ",
        "Aptos FC 1.5, Monterey United 0",
    ],
)
def test_bad_name_or_score_is_a_parse_error(line):
    with pytest.raises(ScoreParseError) as excinfo:
        parse_match_line(line)
    assert excinfo.value.line == line


def test_score_above_range_is_rejected():
    line = f"Aptos FC {MAX_SCORE + 1}, Monterey United 0"
    with pytest.raises(ScoreRangeError):
        parse_match_line(line)


def test_parse_errors_share_a_base_class():
    assert issubclass(NoGameDataError, MatchLineError)
    assert issubclass(ScoreRangeError, ScoreParseError)
    assert issubclass(MatchLineError, ValueError)


def test_draw_lists_home_team_first():
    game = parse_match_line("San Jose Earthquakes 3, Santa Cruz Slugs 3")
    assert game.outcome() == Outcome(
        OutcomeKind.DRAW, "San Jose Earthquakes", "Santa Cruz Slugs"
    )


def test_home_win():
    game = parse_match_line("Capitola Seahorses 1, Aptos FC 0")
    assert game.outcome() == Outcome(
        OutcomeKind.WIN_LOSS, "Capitola Seahorses", "Aptos FC"
    )


def test_away_win():
    game = parse_match_line("San Jose Earthquakes 1, Felton Lumberjacks 4")
    assert game.outcome() == Outcome(
        OutcomeKind.WIN_LOSS, "Felton Lumberjacks", "San Jose Earthquakes"
    )


def test_classification_covers_every_score_pair():
    for home_score in range(4):
        for away_score in range(4):
            outcome = classify(Match("Home", home_score, "Away", away_score))
            if home_score > away_score:
                assert outcome == Outcome(OutcomeKind.WIN_LOSS, "Home", "Away")
            elif away_score > home_score:
                assert outcome == Outcome(OutcomeKind.WIN_LOSS, "Away", "Home")
            else:
                assert outcome == Outcome(OutcomeKind.DRAW, "Home", "Away")


@pytest.mark.parametrize(
    "home, home_score, away, away_score",
    [
        ("", 1, "B", 0),
        ("A", 1, "", 0),
        ("A", -1, "B", 0),
        ("A", 0, "B", MAX_SCORE + 1),
    ],
)
def test_match_rejects_empty_names_and_out_of_range_scores(
    home, home_score, away, away_score
):
    with pytest.raises(ValueError):
        Match(home, home_score, away, away_score)


def test_match_accepts_the_score_limits():
    assert Match("A", 0, "B", MAX_SCORE).away_score == MAX_SCORE
