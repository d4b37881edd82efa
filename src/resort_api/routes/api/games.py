"""
Games API - the game zone price list.
"""

from http import HTTPStatus

from flask import Blueprint, jsonify

from resort_api.extensions import get_services
from resort_api.routes.api.helpers import found, json_body
from resort_shared.serializers import success_response

games_bp = Blueprint("games", __name__)


@games_bp.get("/games")
def list_games():
    return jsonify(success_response(get_services().games.list_all())), HTTPStatus.OK


@games_bp.post("/games")
def create_game():
    """
    Add a game.

    Body:
        {"name": str, "rate": number, "coins": str (optional), "minutes": number (optional)}
    """
    game = get_services().games.create(json_body())
    return jsonify(success_response(game)), HTTPStatus.CREATED


@games_bp.post("/games/init")
def initialize_games():
    games = get_services().games.initialize_defaults()
    return jsonify(
        success_response(games, message=f"Initialized {len(games)} games")
    ), HTTPStatus.OK


@games_bp.get("/games/<game_id>")
def get_game(game_id: str):
    game = found(get_services().games.get(game_id), "Game", gameId=game_id)
    return jsonify(success_response(game)), HTTPStatus.OK


@games_bp.put("/games/<game_id>")
def update_game(game_id: str):
    game = found(get_services().games.update(game_id, json_body()), "Game", gameId=game_id)
    return jsonify(success_response(game)), HTTPStatus.OK


@games_bp.delete("/games/<game_id>")
def delete_game(game_id: str):
    get_services().games.delete(game_id)
    return jsonify(success_response({"gameId": game_id}, message="Game deleted")), HTTPStatus.OK
