"""
Game catalog service.

University membership lives in a JSON list, so the per-university listing
is filtered in Python; JSON containment lookups are not portable across
database backends.
"""

from typing import List, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.games.models import Game, GameCategory
from config.logging import get_logger

from .exceptions import GameNotFoundError

logger = get_logger(__name__)


def get_university_games(*, university: str) -> List[Game]:
    """Games played at ``university``, most popular first."""
    games = Game.objects.order_by('-popularity', 'name')
    return [g for g in games if university in (g.universities or [])]


def get_popular_games() -> List[Game]:
    """Public games, most popular first."""
    return list(Game.objects.filter(is_public=True).order_by('-popularity', 'name'))


def get_game_by_id(*, game_id: UUID) -> Game:
    """
    Raises:
        GameNotFoundError: If game doesn't exist
    """
    try:
        return Game.objects.get(id=game_id)
    except Game.DoesNotExist:
        raise GameNotFoundError(f"Game with ID {game_id} not found")


@transaction.atomic
def create_custom_game(
    *,
    creator: User,
    name: str,
    description: str = "",
    rules: str = "",
    category: str = GameCategory.OTHER,
    universities: Optional[List[str]] = None,
    is_public: bool = False,
) -> Game:
    """
    Create a user-defined game.

    ``universities`` defaults to the creator's university.
    """
    if universities is None:
        universities = [creator.university] if creator.university else []

    game = Game.objects.create(
        creator=creator,
        name=name,
        description=description,
        rules=rules,
        category=category or GameCategory.OTHER,
        universities=universities,
        is_public=is_public,
    )

    logger.info("game_created", game_id=str(game.id), is_public=is_public)
    return game


def get_user_created_games(*, user: User) -> List[Game]:
    """Games ``user`` created, newest first."""
    return list(Game.objects.filter(creator=user).order_by('-created_at'))
