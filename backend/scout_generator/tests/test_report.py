from __future__ import annotations

import pytest

from scout_generator.factory import PlayerFactory
from scout_generator.models import Attributes, Confidence, Player, Position, ScoutSkillProfile
from scout_generator.random_source import SeededRandomSource
from scout_generator.report import (
    ScoutingReportEngine,
    age_comment,
    attribute_accuracy,
    attribute_comment,
    build_report_text,
    confidence_percent,
    max_error,
    perceive,
    position_comment,
    potential_accuracy,
    potential_comment,
)


def _player(position: Position = Position.GK, age: int = 18, attrs=(5, 5, 5), potential: int = 7) -> Player:
    technical, physical, mental = attrs
    return Player(
        name="Harry Smith",
        region_id="england",
        age=age,
        position=position,
        attributes=Attributes(technical=technical, physical=physical, mental=mental),
        potential=potential,
    )


def test_accuracy_without_skills() -> None:
    skills = ScoutSkillProfile()
    assert attribute_accuracy(skills, Position.GK) == pytest.approx(0.70)
    assert potential_accuracy(skills) == pytest.approx(0.70)
    assert max_error(0.70) == 3
    assert confidence_percent(0.70) == 70


def test_accuracy_is_capped() -> None:
    skills = ScoutSkillProfile.from_mapping({name: 10 for name in ScoutSkillProfile().as_dict()})
    assert attribute_accuracy(skills, Position.ST) == pytest.approx(0.95)
    assert potential_accuracy(skills) == pytest.approx(0.95)
    assert max_error(0.95) == 1
    assert confidence_percent(0.95) == 95


def test_only_matching_role_knowledge_counts() -> None:
    skills = ScoutSkillProfile(defender_knowledge=10)
    assert attribute_accuracy(skills, Position.CB) == pytest.approx(0.85)
    assert attribute_accuracy(skills, Position.ST) == pytest.approx(0.70)


def test_talent_spotting_weight_in_attribute_accuracy() -> None:
    skills = ScoutSkillProfile(talent_spotting=10)
    assert attribute_accuracy(skills, Position.ST) == pytest.approx(0.85)
    assert attribute_accuracy(ScoutSkillProfile(talent_spotting=4), Position.GK) == pytest.approx(0.76)


def test_potential_accuracy_weights() -> None:
    assert potential_accuracy(ScoutSkillProfile(player_potential=5)) == pytest.approx(0.80)
    assert potential_accuracy(ScoutSkillProfile(player_potential=10)) == pytest.approx(0.90)
    assert potential_accuracy(ScoutSkillProfile(talent_spotting=10)) == pytest.approx(0.80)
    assert potential_accuracy(ScoutSkillProfile(talent_spotting=5)) == pytest.approx(0.75)


@pytest.mark.parametrize(
    "skills, expected",
    [
        ({"player_potential": 5}, Confidence(attributes=70, potential=80)),
        ({"talent_spotting": 10}, Confidence(attributes=85, potential=80)),
    ],
)
def test_confidence_uses_separate_weights(skills, expected: Confidence) -> None:
    report = ScoutingReportEngine(SeededRandomSource(3)).generate(_player(position=Position.CM), skills)
    assert report.confidence == expected


def test_potential_noise_uses_potential_accuracy(scripted) -> None:
    # forward knowledge narrows attribute error to 2 while potential error stays at 3
    player = _player(position=Position.ST, attrs=(5, 5, 5), potential=5)
    source = scripted([0.9999, 0.9] * 4)
    report = ScoutingReportEngine(source).generate(player, {"forward_knowledge": 10})
    assert report.perceived_attributes == Attributes(technical=7, physical=7, mental=7)
    assert report.perceived_potential == 8
    assert report.confidence == Confidence(attributes=85, potential=70)


def test_attribute_noise_uses_attribute_accuracy(scripted) -> None:
    # attribute error capped at 2, potential error at 1
    player = _player(position=Position.ST, attrs=(5, 5, 5), potential=5)
    source = scripted([0.9999, 0.1] * 4)
    report = ScoutingReportEngine(source).generate(player, {"talent_spotting": 10, "player_potential": 10})
    assert report.perceived_attributes == Attributes(technical=3, physical=3, mental=3)
    assert report.perceived_potential == 4
    assert report.confidence == Confidence(attributes=85, potential=95)


def test_profile_passes_through_from_mapping() -> None:
    skills = ScoutSkillProfile(talent_spotting=3)
    assert ScoutSkillProfile.from_mapping(skills) is skills


@pytest.mark.parametrize("skill", ["talent_spotting", "forward_knowledge"])
def test_attribute_confidence_never_drops_as_skill_rises(skill: str) -> None:
    player = _player(position=Position.ST)
    previous = -1
    for level in range(11):
        report = ScoutingReportEngine(SeededRandomSource(42)).generate(player, {skill: level})
        assert report.confidence.attributes >= previous
        previous = report.confidence.attributes
    assert previous > 70


def test_perceive_adds_signed_error(scripted) -> None:
    assert perceive(scripted([0.9999, 0.7]), 5, 0.70) == 8
    assert perceive(scripted([0.9999, 0.1]), 5, 0.70) == 2
    assert perceive(scripted([0.0, 0.1]), 5, 0.70) == 5


def test_perceive_clamps(scripted) -> None:
    assert perceive(scripted([0.9999, 0.9]), 9, 0.70) == 10
    assert perceive(scripted([0.9999, 0.1]), 2, 0.70) == 1


def test_engine_with_scripted_draws(scripted) -> None:
    source = scripted([0.0, 0.9, 0.9999, 0.9, 0.5, 0.1, 0.3, 0.9])
    report = ScoutingReportEngine(source).generate(_player(), {})
    assert report.perceived_attributes == Attributes(technical=5, physical=8, mental=3)
    assert report.perceived_potential == 8
    assert report.confidence == Confidence(attributes=70, potential=70)
    assert report.report_text == (
        "Very young player with time to develop. Physically dominant. Mental aspects need work. "
        "Good physical presence in goal. Could develop into an elite player."
    )
    assert source.calls == 8


def test_report_does_not_change_player() -> None:
    player = _player()
    ScoutingReportEngine(SeededRandomSource(1)).generate(player, {"talent_spotting": 5})
    assert player == _player()


@pytest.mark.parametrize("seed", range(50))
def test_perceived_values_stay_in_bounds(seed: int) -> None:
    source = SeededRandomSource(seed)
    skills = {"talent_spotting": seed % 11, "midfielder_knowledge": (seed * 7) % 11}
    player = PlayerFactory(source).create("italy", skills)
    report = ScoutingReportEngine(source).generate(player, skills)
    for value in report.perceived_attributes.as_dict().values():
        assert 1 <= value <= 10
    assert 1 <= report.perceived_potential <= 10
    assert 0 <= report.confidence.attributes <= 95
    assert 0 <= report.confidence.potential <= 95


@pytest.mark.parametrize(
    "age, expected",
    [
        (16, "Very young player with time to develop."),
        (19, "Very young player with time to develop."),
        (20, "Young player entering their development prime."),
        (23, "Young player entering their development prime."),
        (24, "Player in their prime years."),
        (27, "Player in their prime years."),
        (28, "Experienced player with limited development potential."),
        (35, "Experienced player with limited development potential."),
    ],
)
def test_age_comments(age: int, expected: str) -> None:
    assert age_comment(age) == expected


@pytest.mark.parametrize(
    "attribute, value, expected",
    [
        ("technical", 10, "Technically exceptional."),
        ("technical", 8, "Technically exceptional."),
        ("technical", 7, "Good technical ability."),
        ("technical", 6, "Good technical ability."),
        ("technical", 5, ""),
        ("technical", 4, "Limited technical skills."),
        ("physical", 8, "Physically dominant."),
        ("physical", 6, "Physically capable."),
        ("physical", 5, ""),
        ("physical", 1, "Physically needs development."),
        ("mental", 8, "Exceptional mental attributes."),
        ("mental", 7, "Good mental approach."),
        ("mental", 5, ""),
        ("mental", 4, "Mental aspects need work."),
    ],
)
def test_attribute_comments(attribute: str, value: int, expected: str) -> None:
    assert attribute_comment(attribute, value) == expected


@pytest.mark.parametrize(
    "position, attrs, expected",
    [
        (Position.GK, (1, 7, 1), "Good physical presence in goal."),
        (Position.GK, (10, 6, 10), "Could improve physical presence in goal."),
        (Position.CB, (1, 7, 1), "Strong defensive attributes."),
        (Position.LB, (10, 6, 10), "Has room to improve defensively."),
        (Position.CM, (7, 1, 1), "Technically gifted midfielder."),
        (Position.CDM, (6, 10, 10), "Midfield fundamentals could improve."),
        (Position.ST, (7, 1, 1), "Shows good attacking qualities."),
        (Position.CF, (6, 10, 10), "Attacking skills need development."),
    ],
)
def test_position_comments(position: Position, attrs, expected: str) -> None:
    technical, physical, mental = attrs
    assert position_comment(position, Attributes(technical, physical, mental)) == expected


@pytest.mark.parametrize(
    "potential, expected",
    [
        (10, "Has world-class potential."),
        (9, "Has world-class potential."),
        (8, "Could develop into an elite player."),
        (7, "Has the potential to be a very good player."),
        (6, "Decent potential to develop further."),
        (5, "Limited potential for future growth."),
        (1, "Limited potential for future growth."),
    ],
)
def test_potential_comments(potential: int, expected: str) -> None:
    assert potential_comment(potential) == expected


def test_report_text_skips_neutral_attributes() -> None:
    text = build_report_text(25, Position.CAM, Attributes(5, 5, 5), 6)
    assert text == "Player in their prime years. Midfield fundamentals could improve. Decent potential to develop further."


def test_report_text_full_ordering() -> None:
    text = build_report_text(30, Position.RW, Attributes(9, 6, 2), 9)
    assert text == (
        "Experienced player with limited development potential. Technically exceptional. "
        "Physically capable. Mental aspects need work. Shows good attacking qualities. "
        "Has world-class potential."
    )


def test_report_text_is_repeatable() -> None:
    args = (21, Position.LB, Attributes(6, 8, 4), 7)
    assert build_report_text(*args) == build_report_text(*args)
