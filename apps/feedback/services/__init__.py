"""
Feedback app services layer.
"""

from .exceptions import (
    FeedbackServiceError,
    NotAttendeeError,
    PartyNotOverError,
    DuplicateFeedbackError,
    InvalidRatingError,
)

from .feedback_management import (
    submit_feedback,
    get_party_feedback,
    get_feedback_stats,
    has_user_submitted_feedback,
    get_host_feedback,
)

__all__ = [
    # Exceptions
    'FeedbackServiceError',
    'NotAttendeeError',
    'PartyNotOverError',
    'DuplicateFeedbackError',
    'InvalidRatingError',
    # Services
    'submit_feedback',
    'get_party_feedback',
    'get_feedback_stats',
    'has_user_submitted_feedback',
    'get_host_feedback',
]
