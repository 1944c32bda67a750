"""Unit tests for src/replay/view_models.py"""

import json
from typing import Any

import pytest
from pydantic import ValidationError

from src.replay.view_models import (
    ViewCoord,
    ViewFrame,
    ViewGame,
    ViewGameResponse,
    ViewRuleset,
    ViewSnake,
    ViewTurn,
)
from tests.documents import frame_document, snake_document


# --- RULESET: numbers encoded as strings ---
def test_ruleset_numbers_decoded_from_strings() -> None:
    """The engine writes foodSpawnChance / minimumFood as strings holding digits."""
    ruleset = ViewRuleset.model_validate_json(
        '{"foodSpawnChance":"25","minimumFood":"1"}'
    )
    assert ruleset.food_spawn_chance == 25
    assert ruleset.minimum_food == 1
    assert ruleset.damage_per_turn == 0


def test_ruleset_numbers_encoded_back_to_strings() -> None:
    """Re-encoding a decoded ruleset should reproduce the same string values."""
    ruleset = ViewRuleset.model_validate_json(
        '{"foodSpawnChance":"25","minimumFood":"1"}'
    )
    document = json.loads(ruleset.to_json())
    assert document["foodSpawnChance"] == "25"
    assert document["minimumFood"] == "1"
    assert document["damagePerTurn"] == "0"


def test_ruleset_accepts_ints_from_python() -> None:
    """Only the JSON side is string encoded, Python callers construct it with ints."""
    ruleset = ViewRuleset(food_spawn_chance=15, minimum_food=3, damage_per_turn=-2)
    assert json.loads(ruleset.to_json())["damagePerTurn"] == "-2"


@pytest.mark.parametrize(
    "raw",
    [
        '{"foodSpawnChance": 25}',  # plain JSON number
        '{"foodSpawnChance": "twenty"}',
        '{"foodSpawnChance": "2.5"}',
        '{"foodSpawnChance": " 25"}',
        '{"foodSpawnChance": ""}',
    ],
)
def test_ruleset_rejects_other_encodings(raw: str) -> None:
    with pytest.raises(ValidationError):
        _ = ViewRuleset.model_validate_json(raw)


@pytest.mark.parametrize("value", ["2147483647", "-2147483648"])
def test_ruleset_numbers_int32_limits(value: str) -> None:
    ruleset = ViewRuleset.model_validate_json(f'{{"minimumFood": "{value}"}}')
    assert json.loads(ruleset.to_json())["minimumFood"] == value


@pytest.mark.parametrize("value", ["2147483648", "-2147483649", "99999999999"])
def test_ruleset_numbers_beyond_int32(value: str) -> None:
    """The engine could not read these back."""
    with pytest.raises(ValidationError):
        _ = ViewRuleset.model_validate_json(f'{{"minimumFood": "{value}"}}')
    with pytest.raises(ValidationError):
        _ = ViewRuleset(minimum_food=int(value))


def test_other_ruleset_fields_are_plain_strings() -> None:
    ruleset = ViewRuleset.model_validate_json(
        '{"name":"royale","map":"arcade_maze","map_author":"someone"}'
    )
    assert (ruleset.name, ruleset.map, ruleset.map_author) == (
        "royale",
        "arcade_maze",
        "someone",
    )


# --- WIRE NAMES ---
def test_record_fields_read_from_engine_names(record_document: dict[str, Any]) -> None:
    record = ViewGame.model_validate(record_document)
    assert record.game.id == "game-1"
    assert record.game.timeout == 500
    assert record.game.status == "complete"
    assert (record.game.width, record.game.height) == (11, 11)
    assert len(record.frames) == 3
    assert record.last_turn == 2
    assert record.first_frame == record.frames[0]

    snake = record.frames[1].snakes[1]
    assert snake.id == "b"
    assert snake.url == "https://b.example.com"
    assert snake.head_type == "default"
    assert snake.api_version == "1"
    assert snake.body[0] == ViewCoord(x=9, y=2)


def test_record_written_with_engine_names(record_document: dict[str, Any]) -> None:
    """Dumping the record should give back the document it was read from."""
    record = ViewGame.model_validate(record_document)
    assert json.loads(record.to_json()) == record_document


def test_missing_keys_take_zero_values() -> None:
    snake = ViewSnake.model_validate_json('{"ID": "a"}')
    assert snake.name == ""
    assert snake.body == []
    assert snake.health == 0
    assert snake.death.cause == ""


def test_null_lists_become_empty() -> None:
    frame = ViewFrame.model_validate_json(
        '{"Turn": 4, "Snakes": null, "Food": null, "Hazards": null}'
    )
    assert frame.turn == 4
    assert frame.snakes == []
    assert frame.food == []
    assert frame.hazards == []


def test_unknown_keys_are_ignored() -> None:
    coord = ViewCoord.model_validate_json('{"X": 1, "Y": 2, "Z": 3}')
    assert coord == ViewCoord(x=1, y=2)


def test_records_are_read_only(sample_record: ViewGame) -> None:
    with pytest.raises(ValidationError):
        sample_record.last_turn = 10  # type: ignore[misc]


# --- ASSEMBLING FROM ENGINE RESPONSES ---
def test_from_engine_concatenates_pages() -> None:
    """Frames arrive in pages; the record holds them in the order they were fetched."""
    response = ViewGameResponse.model_validate(
        {"Game": {"ID": "paged", "Width": 7, "Height": 7, "Status": "complete"}}
    )
    snakes = [snake_document("a", [(0, 0)])]
    pages = [
        ViewTurn.model_validate(
            {
                "Frames": [frame_document(0, snakes), frame_document(1, snakes)],
                "Count": 2,
            }
        ),
        ViewTurn.model_validate({"Frames": [frame_document(2, snakes)], "Count": 1}),
    ]
    record = ViewGame.from_engine(response, pages)

    assert record.game.id == "paged"
    assert [frame.turn for frame in record.frames] == [0, 1, 2]
    assert record.first_frame == record.frames[0]
    assert record.last_turn == 2


def test_from_engine_without_frames() -> None:
    response = ViewGameResponse.model_validate({"Game": {"ID": "empty"}})
    record = ViewGame.from_engine(response, [])
    assert record.frames == []
    assert record.first_frame == ViewFrame()
    assert record.last_turn == 0


def test_game_response_ignores_last_frame() -> None:
    response = ViewGameResponse.model_validate_json(
        '{"Game": {"ID": "g"}, "LastFrame": {"Turn": 99}}'
    )
    assert response.game.id == "g"
