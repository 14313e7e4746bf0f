"""Cent-exact splitting of an amount among participants."""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence, Tuple, TypeVar

from .exceptions import InvalidSplitError

T = TypeVar('T')

CENT = Decimal('0.01')


def calculate_splits(total: Decimal, participants: Sequence[T]) -> List[Tuple[T, Decimal]]:
    """
    Split ``total`` among participants with cent precision.

    Algorithm:
        1. Convert to cents: ``total_cents = total * 100``
        2. Base share: ``base = total_cents // N``
        3. Remainder: ``remainder = total_cents % N``
        4. First 'remainder' participants get ``(base + 1)`` cents
        5. Rest get 'base' cents

    Example:
        10.00 split among 3 people gives 3.34, 3.33, 3.33.

    Args:
        total: Amount to split
        participants: Participants in priority order

    Returns:
        List of (participant, share) tuples whose shares sum to ``total``

    Raises:
        InvalidSplitError: If there are no participants, or the shares do
            not add up (safety check)
    """
    if not participants:
        raise InvalidSplitError("At least one participant required")

    total = Decimal(total).quantize(CENT, rounding=ROUND_HALF_UP)
    total_cents = int(total * 100)
    count = len(participants)

    base_cents, remainder_cents = divmod(total_cents, count)

    shares = []
    for i, participant in enumerate(participants):
        cents = base_cents + 1 if i < remainder_cents else base_cents
        shares.append((participant, Decimal(cents) / Decimal(100)))

    # Verification (safety check)
    total_check = sum((amount for _, amount in shares), Decimal('0'))
    if total_check != total:
        raise InvalidSplitError(f"Split calculation error: {total_check} != {total}")

    return shares
