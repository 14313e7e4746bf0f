"""
Games app services layer.
"""

from .exceptions import (
    GamesServiceError,
    GameNotFoundError,
    PartyGameNotFoundError,
    NotAttendeeError,
    NotPartyHostError,
)

from .game_catalog import (
    get_university_games,
    get_popular_games,
    get_game_by_id,
    create_custom_game,
    get_user_created_games,
)

from .party_games import (
    add_game_to_party,
    get_party_games,
    join_party_game,
    remove_party_game,
)

__all__ = [
    # Exceptions
    'GamesServiceError',
    'GameNotFoundError',
    'PartyGameNotFoundError',
    'NotAttendeeError',
    'NotPartyHostError',
    # Catalog
    'get_university_games',
    'get_popular_games',
    'get_game_by_id',
    'create_custom_game',
    'get_user_created_games',
    # Party games
    'add_game_to_party',
    'get_party_games',
    'join_party_game',
    'remove_party_game',
]
