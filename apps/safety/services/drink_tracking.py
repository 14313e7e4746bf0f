"""
Drink tracking and BAC estimation.

The BAC estimate uses the Widmark formula and is a rough guide only.
"""

from datetime import date as date_type, datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import User
from apps.safety.models import DrinkLog, DrinkEntry, DrinkType

from .exceptions import InvalidBACInputError

LBS_TO_KG = 0.453592
GRAMS_PER_STANDARD_DRINK = 0.6
METABOLISM_PER_HOUR = 0.015
FEMALE_BODY_WATER = 0.55
DEFAULT_BODY_WATER = 0.68

LEGAL_LIMIT = 0.08
CAUTION_LIMIT = 0.05

# Estimates taken right after a first drink are unrealistically high
MIN_ELAPSED_HOURS = 0.5


class BACLevel:
    OK = 'ok'
    CAUTION = 'caution'
    OVER_LIMIT = 'over_limit'


@transaction.atomic
def track_drink(
    *,
    user: User,
    drink_type: str = DrinkType.OTHER,
    alcohol_content: Decimal = Decimal('5'),
    ounces: Decimal = Decimal('12'),
    consumed_at: Optional[datetime] = None,
) -> DrinkEntry:
    """
    Record a drink in the user's log for today.

    Returns:
        Created DrinkEntry
    """
    consumed_at = consumed_at or timezone.now()
    log, _ = DrinkLog.objects.get_or_create(user=user, date=timezone.localdate(consumed_at))

    entry = DrinkEntry.objects.create(
        log=log,
        drink_type=drink_type,
        alcohol_content=alcohol_content,
        ounces=ounces,
        consumed_at=consumed_at,
    )
    DrinkLog.objects.filter(id=log.id).update(total_drinks=F('total_drinks') + 1)
    return entry


def get_drink_history(*, user: User, date: Optional[date_type] = None) -> List[DrinkLog]:
    """
    Get a user's drink logs, newest first, or only the log for ``date``.
    """
    qs = DrinkLog.objects.filter(user=user).prefetch_related('entries')
    if date is not None:
        qs = qs.filter(date=date)
    return list(qs.order_by('-date'))


def calculate_bac(gender: str, weight_lbs: float, drinks: float, hours: float) -> float:
    """
    Estimate blood alcohol content with the Widmark formula.

    ``(drinks * 0.6 * 100) / (weight_kg * r) - 0.015 * hours``, where r is
    0.55 for female and 0.68 otherwise. Clamped at zero.

    Args:
        gender: ``"female"`` selects the female body water ratio
        weight_lbs: Body weight in pounds
        drinks: Number of standard drinks
        hours: Hours since drinking started

    Returns:
        BAC rounded to three decimals

    Raises:
        InvalidBACInputError: If weight is not positive or drinks/hours are negative
    """
    if weight_lbs is None or weight_lbs <= 0:
        raise InvalidBACInputError("Weight must be greater than zero")
    if drinks < 0 or hours < 0:
        raise InvalidBACInputError("Drinks and hours cannot be negative")

    r = FEMALE_BODY_WATER if (gender or '').lower() == 'female' else DEFAULT_BODY_WATER
    weight_kg = weight_lbs * LBS_TO_KG

    bac = (drinks * GRAMS_PER_STANDARD_DRINK * 100) / (weight_kg * r) - METABOLISM_PER_HOUR * hours
    return round(max(0.0, bac), 3)


def classify_bac(bac: float) -> Tuple[str, str]:
    """Return ``(level, warning)`` for a BAC value."""
    if bac >= LEGAL_LIMIT:
        return BACLevel.OVER_LIMIT, "You are likely over the legal limit to drive"
    if bac >= CAUTION_LIMIT:
        return BACLevel.CAUTION, "You are approaching the legal limit to drive"
    return BACLevel.OK, "You are likely under the legal limit to drive"


def estimate_current_bac(
    *,
    user: User,
    gender: str,
    weight_lbs: float,
    now: Optional[datetime] = None,
) -> dict:
    """
    Estimate the user's BAC from today's logged drinks.

    Elapsed time is measured from the first drink, never less than half an
    hour.

    Returns:
        Dict with bac, level, warning, drinks and hours
    """
    now = now or timezone.now()
    entries = list(
        DrinkEntry.objects
        .filter(log__user=user, log__date=timezone.localdate(now), consumed_at__lte=now)
        .order_by('consumed_at')
    )

    drinks = len(entries)
    if drinks:
        elapsed = (now - entries[0].consumed_at).total_seconds() / 3600
        hours = max(MIN_ELAPSED_HOURS, elapsed)
    else:
        hours = 0.0

    bac = calculate_bac(gender, weight_lbs, drinks, hours)
    level, warning = classify_bac(bac)

    return {
        'bac': bac,
        'level': level,
        'warning': warning,
        'drinks': drinks,
        'hours': round(hours, 2),
    }
