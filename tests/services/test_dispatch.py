"""Command Dispatch — explicit handler/validator registration.

Tests cover:
    - All five use cases registered
    - Only write commands carry validators
    - validate() never raises and treats rule-less commands as valid
"""

from datetime import date

from videogame_api.features.video_games.create_game import CreateGameCommand
from videogame_api.features.video_games.delete_game import DeleteGameCommand
from videogame_api.features.video_games.get_all_games import GetAllGamesQuery
from videogame_api.features.video_games.get_game_by_id import GetGameByIdQuery
from videogame_api.features.video_games.update_game import UpdateGameCommand
from videogame_api.services.dispatch import HANDLERS, VALIDATORS, validate


def test_dispatch_has_all_five_use_cases():
    assert set(HANDLERS) == {
        CreateGameCommand, GetGameByIdQuery, GetAllGamesQuery,
        UpdateGameCommand, DeleteGameCommand,
    }


def test_only_write_commands_have_validators():
    assert set(VALIDATORS) == {CreateGameCommand, UpdateGameCommand}


def test_validate_create_reports_every_field():
    result = validate(CreateGameCommand("", "", 1900), date(2024, 1, 1))
    assert set(result.grouped()) == {"Title", "Genre", "ReleaseYear"}


def test_validate_update_checks_same_rules():
    result = validate(UpdateGameCommand(7, "t" * 101, "RPG", 2020), date(2024, 1, 1))
    assert set(result.grouped()) == {"Title"}


def test_validate_reads_and_deletes_are_always_valid():
    assert validate(GetGameByIdQuery(-1)).is_valid
    assert validate(DeleteGameCommand(0)).is_valid
    assert validate(GetAllGamesQuery()).is_valid
    assert validate(object()).is_valid
