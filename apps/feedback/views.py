from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer

from .serializers import (
    PartyFeedbackSerializer,
    SubmitFeedbackSerializer,
    FeedbackStatsSerializer,
)

from apps.parties.services import PartyNotFoundError
from apps.feedback.services import (
    submit_feedback,
    get_party_feedback,
    get_feedback_stats,
    has_user_submitted_feedback,
    get_host_feedback,
    # Exceptions
    NotAttendeeError,
    PartyNotOverError,
    DuplicateFeedbackError,
    InvalidRatingError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    methods=['GET'],
    responses={200: PartyFeedbackSerializer(many=True)},
    tags=['feedback'],
)
@extend_schema(
    methods=['POST'],
    request=SubmitFeedbackSerializer,
    responses={
        201: PartyFeedbackSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Rate a party you attended, once, after it happened.",
    tags=['feedback'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def party_feedback(request, party_id):
    """List or submit feedback for a party."""
    if request.method == 'GET':
        return Response(PartyFeedbackSerializer(get_party_feedback(party_id=party_id), many=True).data)

    serializer = SubmitFeedbackSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        feedback = submit_feedback(
            party_id=party_id,
            user=request.user,
            **serializer.validated_data
        )
    except PartyNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except (PartyNotOverError, DuplicateFeedbackError, InvalidRatingError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(PartyFeedbackSerializer(feedback).data, status=status.HTTP_201_CREATED)


@extend_schema(responses={200: FeedbackStatsSerializer}, tags=['feedback'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def feedback_stats(request, party_id):
    """Rating summary for a party."""
    return Response(get_feedback_stats(party_id=party_id))


@extend_schema(
    responses={200: inline_serializer('FeedbackSubmitted', {'submitted': serializers.BooleanField()})},
    tags=['feedback'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_feedback_status(request, party_id):
    """Whether the caller already rated this party."""
    return Response({'submitted': has_user_submitted_feedback(party_id=party_id, user=request.user)})


@extend_schema(tags=['feedback'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def hosted_feedback(request):
    """Feedback for every party the caller hosted."""
    grouped = get_host_feedback(host=request.user)
    return Response({
        str(party_id): {
            'party_title': entry['party_title'],
            'feedback': PartyFeedbackSerializer(entry['feedback'], many=True).data,
        }
        for party_id, entry in grouped.items()
    })
