"""
Party feedback service.

Attendees rate a party once, after it has happened.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Avg, Count

from apps.accounts.models import User
from apps.feedback.models import PartyFeedback
from apps.parties.models import Party
from apps.parties.services import get_party_by_id, is_attendee, is_party_over
from config.logging import get_logger

from .exceptions import (
    NotAttendeeError,
    PartyNotOverError,
    DuplicateFeedbackError,
    InvalidRatingError,
)

logger = get_logger(__name__)

RATING_VALUES = range(1, 6)


@transaction.atomic
def submit_feedback(
    *,
    party_id: UUID,
    user: User,
    rating: int,
    comment: str = "",
    is_anonymous: bool = True,
) -> PartyFeedback:
    """
    Rate a party.

    Args:
        party_id: UUID of the party
        user: Attendee submitting feedback
        rating: Integer 1-5
        comment: Optional comment
        is_anonymous: Hide the author from other users

    Returns:
        Created PartyFeedback

    Raises:
        PartyNotFoundError: If party doesn't exist
        InvalidRatingError: If rating is not 1-5
        NotAttendeeError: If user did not attend
        PartyNotOverError: If the party has not started yet
        DuplicateFeedbackError: If user already rated this party
    """
    if rating not in RATING_VALUES:
        raise InvalidRatingError("Rating must be between 1 and 5")

    party = get_party_by_id(party_id=party_id)

    if not is_attendee(party=party, user=user):
        raise NotAttendeeError("Only attendees can leave feedback")

    if not is_party_over(party):
        raise PartyNotOverError("Feedback opens once the party has happened")

    if PartyFeedback.objects.filter(party=party, user=user).exists():
        raise DuplicateFeedbackError("You have already left feedback for this party")

    try:
        with transaction.atomic():
            feedback = PartyFeedback.objects.create(
                party=party,
                user=user,
                rating=rating,
                comment=comment,
                is_anonymous=is_anonymous,
            )
    except IntegrityError:
        raise DuplicateFeedbackError("You have already left feedback for this party")

    logger.info("feedback_submitted", party_id=str(party.id), rating=rating)
    return feedback


def get_party_feedback(*, party_id: UUID) -> List[PartyFeedback]:
    """Feedback for a party, newest first."""
    return list(
        PartyFeedback.objects
        .filter(party_id=party_id)
        .select_related('user')
        .order_by('-created_at')
    )


def get_feedback_stats(*, party_id: UUID) -> dict:
    """
    Summarize a party's ratings.

    Returns:
        Dict with ``average_rating`` (two decimals, 0 when empty),
        ``total_feedback`` and ``rating_distribution`` keyed 1 through 5
    """
    qs = PartyFeedback.objects.filter(party_id=party_id)

    summary = qs.aggregate(average=Avg('rating'), total=Count('id'))
    distribution = {value: 0 for value in RATING_VALUES}
    for row in qs.order_by().values('rating').annotate(count=Count('id')):
        distribution[row['rating']] = row['count']

    average = summary['average'] or 0
    average = float(Decimal(str(average)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))

    return {
        'average_rating': average,
        'total_feedback': summary['total'],
        'rating_distribution': distribution,
    }


def has_user_submitted_feedback(*, party_id: UUID, user: User) -> bool:
    return PartyFeedback.objects.filter(party_id=party_id, user=user).exists()


def get_host_feedback(*, host: User) -> Dict[UUID, dict]:
    """
    Feedback for every party ``host`` has hosted.

    Returns:
        ``{party_id: {"party_title": str, "feedback": [PartyFeedback]}}``
    """
    result = {}
    parties = Party.objects.filter(host=host).prefetch_related('feedback__user').order_by('date_time')
    for party in parties:
        result[party.id] = {
            'party_title': party.title,
            'feedback': sorted(party.feedback.all(), key=lambda f: f.created_at, reverse=True),
        }
    return result
