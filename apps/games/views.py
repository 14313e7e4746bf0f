from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import GameSerializer, PartyGameSerializer, AddPartyGameSerializer

from apps.parties.services import PartyNotFoundError
from apps.games.services import (
    get_university_games,
    get_popular_games,
    get_game_by_id,
    create_custom_game,
    get_user_created_games,
    add_game_to_party,
    get_party_games,
    join_party_game,
    remove_party_game,
    # Exceptions
    GameNotFoundError,
    PartyGameNotFoundError,
    NotAttendeeError,
    NotPartyHostError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(methods=['GET'], responses={200: GameSerializer(many=True)}, tags=['games'])
@extend_schema(
    methods=['POST'],
    request=GameSerializer,
    responses={201: GameSerializer, 400: ErrorResponseSerializer},
    tags=['games'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def games(request):
    """List public games by popularity or create a custom game."""
    if request.method == 'GET':
        return Response(GameSerializer(get_popular_games(), many=True).data)

    serializer = GameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    game = create_custom_game(creator=request.user, **serializer.validated_data)
    return Response(GameSerializer(game).data, status=status.HTTP_201_CREATED)


@extend_schema(responses={200: GameSerializer(many=True)}, tags=['games'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def university_games(request):
    """Games played at the caller's university."""
    return Response(
        GameSerializer(get_university_games(university=request.user.university), many=True).data
    )


@extend_schema(responses={200: GameSerializer(many=True)}, tags=['games'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_games(request):
    """Games the caller created."""
    return Response(GameSerializer(get_user_created_games(user=request.user), many=True).data)


@extend_schema(responses={200: GameSerializer, 404: ErrorResponseSerializer}, tags=['games'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def game_detail(request, game_id):
    try:
        game = get_game_by_id(game_id=game_id)
    except GameNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(GameSerializer(game).data)


@extend_schema(methods=['GET'], responses={200: PartyGameSerializer(many=True)}, tags=['games'])
@extend_schema(
    methods=['POST'],
    request=AddPartyGameSerializer,
    responses={201: PartyGameSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    tags=['games'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def party_games(request, party_id):
    """List a party's active games or add one."""
    if request.method == 'GET':
        return Response(PartyGameSerializer(get_party_games(party_id=party_id), many=True).data)

    serializer = AddPartyGameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        party_game = add_game_to_party(
            party_id=party_id,
            game_id=serializer.validated_data['game_id'],
            user=request.user,
        )
    except (PartyNotFoundError, GameNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(PartyGameSerializer(party_game).data, status=status.HTTP_201_CREATED)


@extend_schema(request=None, responses={200: PartyGameSerializer}, tags=['games'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def join_game(request, party_game_id):
    """Join a game at a party."""
    try:
        party_game = join_party_game(party_game_id=party_game_id, user=request.user)
    except PartyGameNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(PartyGameSerializer(party_game).data)


@extend_schema(request=None, responses={204: None}, tags=['games'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def remove_game(request, party_game_id):
    """Remove a game from a party (host only)."""
    try:
        remove_party_game(party_game_id=party_game_id, user=request.user)
    except PartyGameNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotPartyHostError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(status=status.HTTP_204_NO_CONTENT)
