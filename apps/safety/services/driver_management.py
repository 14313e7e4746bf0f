"""
Designated driver and ride request services.
"""

from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.parties.services import get_party_by_id, is_attendee
from apps.safety.models import DesignatedDriver, RideRequest, RideStatus
from config.logging import get_logger

from .exceptions import (
    NotAttendeeError,
    NotRegisteredAsDriverError,
    DriverUnavailableError,
    DuplicateRideRequestError,
)

logger = get_logger(__name__)

DRIVER_FIELDS = ('name', 'phone', 'vehicle', 'seats', 'departure_time', 'destination')

OPEN_RIDE_STATUSES = [RideStatus.PENDING, RideStatus.ACCEPTED]


@transaction.atomic
def register_as_dd(*, party_id: UUID, user: User, **info) -> Tuple[DesignatedDriver, bool]:
    """
    Register a party attendee as a designated driver.

    An active registration is returned unchanged. An inactive one is
    reactivated with the new details.

    Args:
        party_id: UUID of the party
        user: Attendee volunteering to drive
        **info: Optional name, phone, vehicle, seats, departure_time, destination

    Returns:
        Tuple of (DesignatedDriver, created)

    Raises:
        PartyNotFoundError: If party doesn't exist
        NotAttendeeError: If user is not attending the party
    """
    party = get_party_by_id(party_id=party_id)

    if not is_attendee(party=party, user=user):
        raise NotAttendeeError("Only party attendees can register as a designated driver")

    details = {k: v for k, v in info.items() if k in DRIVER_FIELDS and v is not None}
    details.setdefault('name', user.get_display_name())

    driver = (
        DesignatedDriver.objects
        .select_for_update()
        .filter(party=party, user=user)
        .first()
    )

    if driver is not None and driver.active:
        return driver, False

    if driver is not None:
        for field, value in details.items():
            setattr(driver, field, value)
        driver.active = True
        driver.save()
    else:
        driver = DesignatedDriver.objects.create(party=party, user=user, **details)

    logger.info("driver_registered", party_id=str(party.id), user_id=str(user.id))
    return driver, True


@transaction.atomic
def unregister_as_dd(*, party_id: UUID, user: User) -> None:
    """
    Deactivate a user's driver registration for a party.

    Raises:
        NotRegisteredAsDriverError: If the user is not an active driver
    """
    updated = (
        DesignatedDriver.objects
        .filter(party_id=party_id, user=user, active=True)
        .update(active=False)
    )
    if not updated:
        raise NotRegisteredAsDriverError("You are not registered as a designated driver")

    logger.info("driver_unregistered", party_id=str(party_id), user_id=str(user.id))


def get_designated_drivers(*, party_id: UUID) -> List[DesignatedDriver]:
    """Get active drivers for a party with their users loaded."""
    return list(
        DesignatedDriver.objects
        .filter(party_id=party_id, active=True)
        .select_related('user')
    )


@transaction.atomic
def request_ride(
    *,
    driver_id: UUID,
    user: User,
    pickup_location: str = "",
    pickup_time: Optional[datetime] = None,
    destination: str = "",
    passengers: int = 1,
) -> RideRequest:
    """
    Ask a designated driver for a ride.

    Args:
        driver_id: UUID of the DesignatedDriver
        user: User requesting the ride
        pickup_location: Where to pick up
        pickup_time: When to pick up
        destination: Where to go
        passengers: Number of riders

    Returns:
        Created RideRequest in pending status

    Raises:
        DriverUnavailableError: If the driver is missing or inactive
        DuplicateRideRequestError: If the user already has an open request
    """
    try:
        driver = DesignatedDriver.objects.select_for_update().get(id=driver_id, active=True)
    except DesignatedDriver.DoesNotExist:
        raise DriverUnavailableError("This driver is not available")

    if RideRequest.objects.filter(driver=driver, user=user, status__in=OPEN_RIDE_STATUSES).exists():
        raise DuplicateRideRequestError("You already have an open ride request with this driver")

    ride = RideRequest.objects.create(
        driver=driver,
        user=user,
        pickup_location=pickup_location,
        pickup_time=pickup_time,
        destination=destination,
        passengers=passengers,
    )

    logger.info("ride_requested", driver_id=str(driver.id), user_id=str(user.id))
    return ride
