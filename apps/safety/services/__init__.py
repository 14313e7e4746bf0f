"""
Safety app services layer.

Designated drivers, ride requests, drink tracking and BAC estimates.
"""

from .exceptions import (
    SafetyServiceError,
    NotAttendeeError,
    NotRegisteredAsDriverError,
    DriverUnavailableError,
    DuplicateRideRequestError,
    InvalidBACInputError,
)

from .driver_management import (
    register_as_dd,
    unregister_as_dd,
    get_designated_drivers,
    request_ride,
)

from .drink_tracking import (
    BACLevel,
    track_drink,
    get_drink_history,
    calculate_bac,
    classify_bac,
    estimate_current_bac,
)

__all__ = [
    # Exceptions
    'SafetyServiceError',
    'NotAttendeeError',
    'NotRegisteredAsDriverError',
    'DriverUnavailableError',
    'DuplicateRideRequestError',
    'InvalidBACInputError',
    # Drivers and rides
    'register_as_dd',
    'unregister_as_dd',
    'get_designated_drivers',
    'request_ride',
    # Drinks and BAC
    'BACLevel',
    'track_drink',
    'get_drink_history',
    'calculate_bac',
    'classify_bac',
    'estimate_current_bac',
]
