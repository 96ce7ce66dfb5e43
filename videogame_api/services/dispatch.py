"""Command Dispatch — explicit wiring from command type to validator and handler.

Invariants:
    - Every command->handler and command->validator mapping is visible here
    - Commands without a validator (reads, delete) pass validation trivially
    - validate() is the single validation entry point; ValidationStage calls it
    - build_pipeline is called once at startup; the result is stateless and shared

Design Decisions:
    - Explicit dicts over registration decorators: adding a use case requires
      editing this file (ADR: ExMA no convention-over-config)
"""

import logging
from datetime import date

from videogame_api.core.validation import ValidationResult
from videogame_api.features.video_games import (
    create_game, delete_game, get_all_games, get_game_by_id, update_game,
)
from videogame_api.services.pipeline import (
    Handler, LoggingStage, Pipeline, ValidationStage, Validator,
)

HANDLERS: dict[type, Handler] = {
    create_game.CreateGameCommand: create_game.handle,
    get_game_by_id.GetGameByIdQuery: get_game_by_id.handle,
    get_all_games.GetAllGamesQuery: get_all_games.handle,
    update_game.UpdateGameCommand: update_game.handle,
    delete_game.DeleteGameCommand: delete_game.handle,
}

VALIDATORS: dict[type, Validator] = {
    create_game.CreateGameCommand: create_game.validate,
    update_game.UpdateGameCommand: update_game.validate,
}


def validate(command: object, today: date | None = None) -> ValidationResult:
    """Validate any command. Never raises; unknown or rule-less commands are valid."""
    validator = VALIDATORS.get(type(command))
    if validator is None:
        return ValidationResult()
    return validator(command, today or date.today())


def build_pipeline(logger: logging.Logger) -> Pipeline:
    """Logging -> validation -> handler."""
    return Pipeline(
        stages=[LoggingStage(logger), ValidationStage(validate)],
        handlers=HANDLERS,
    )
