from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import PlaylistSerializer, SongSerializer

from apps.parties.services import PartyNotFoundError
from apps.playlists.services import (
    create_playlist,
    get_party_playlists,
    add_song,
    get_playlist_songs,
    toggle_song_vote,
    mark_song_played,
    get_current_song,
    # Exceptions
    PlaylistNotFoundError,
    SongNotFoundError,
    NotAttendeeError,
    InsufficientPermissionsError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(methods=['GET'], responses={200: PlaylistSerializer(many=True)}, tags=['playlists'])
@extend_schema(
    methods=['POST'],
    request=PlaylistSerializer,
    responses={201: PlaylistSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    tags=['playlists'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def party_playlists(request, party_id):
    """List a party's playlists or create one."""
    if request.method == 'GET':
        return Response(PlaylistSerializer(get_party_playlists(party_id=party_id), many=True).data)

    serializer = PlaylistSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        playlist = create_playlist(
            party_id=party_id,
            creator=request.user,
            name=serializer.validated_data['name'],
            description=serializer.validated_data.get('description', ''),
            vote_required=serializer.validated_data.get('vote_required', False),
            min_votes=serializer.validated_data.get('min_votes', 1),
        )
    except PartyNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(PlaylistSerializer(playlist).data, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    parameters=[OpenApiParameter('include_played', bool)],
    responses={200: SongSerializer(many=True)},
    tags=['playlists'],
)
@extend_schema(
    methods=['POST'],
    request=SongSerializer,
    responses={201: SongSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    tags=['playlists'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def playlist_songs(request, playlist_id):
    """List queued songs or add one."""
    if request.method == 'GET':
        include_played = request.query_params.get('include_played', '').lower() in ('1', 'true', 'yes')
        try:
            songs = get_playlist_songs(playlist_id=playlist_id, include_played=include_played)
        except PlaylistNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(SongSerializer(songs, many=True).data)

    serializer = SongSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        song = add_song(playlist_id=playlist_id, user=request.user, **serializer.validated_data)
    except PlaylistNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(SongSerializer(song).data, status=status.HTTP_201_CREATED)


@extend_schema(responses={200: SongSerializer}, tags=['playlists'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def current_song(request, playlist_id):
    """The song now playing, or null."""
    try:
        song = get_current_song(playlist_id=playlist_id)
    except PlaylistNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(SongSerializer(song).data if song else None)


@extend_schema(
    request=None,
    responses={200: SongSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    tags=['playlists'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def vote_song(request, song_id):
    """Toggle the caller's vote on a song."""
    try:
        song, voted = toggle_song_vote(song_id=song_id, user=request.user)
    except SongNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    data = SongSerializer(song).data
    data['voted'] = voted
    return Response(data)


@extend_schema(request=None, responses={200: SongSerializer}, tags=['playlists'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def song_played(request, song_id):
    """Mark a song as played (host or playlist creator)."""
    try:
        song = mark_song_played(song_id=song_id, user=request.user)
    except SongNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InsufficientPermissionsError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(SongSerializer(song).data)
