"""Viewer-relative flags for a party."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from django.utils import timezone

from apps.parties.models import Party


@dataclass(frozen=True)
class PartyView:
    is_host: bool
    is_joined: bool
    is_party_over: bool


def is_party_over(party: Party, now: Optional[datetime] = None) -> bool:
    """A party is over once its start time is strictly in the past."""
    now = now or timezone.now()
    return party.date_time < now


def compose_party_view(party: Party, viewer=None, now: Optional[datetime] = None) -> PartyView:
    """
    Compute the flags a client needs to render ``party`` for ``viewer``.

    Anonymous or missing viewers are neither host nor attendee.
    """
    authenticated = viewer is not None and getattr(viewer, 'is_authenticated', False)

    return PartyView(
        is_host=authenticated and party.host_id == viewer.id,
        is_joined=authenticated and party.has_attendee(viewer),
        is_party_over=is_party_over(party, now),
    )
