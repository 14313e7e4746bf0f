"""
Parties app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    PartiesServiceError,
    PartyNotFoundError,
    InvalidPartyError,
    NotPartyHostError,
    PartyFullError,
    HostCannotLeaveError,
    PaymentNotRequiredError,
    InvalidPaymentReferenceError,
)

from .query_fallback import run_with_fallback

from .party_management import (
    create_party,
    get_party_by_id,
    list_parties,
    list_hosted_parties,
    list_joined_parties,
    update_party,
)

from .membership_management import (
    join_party,
    leave_party,
    get_party_attendees,
    is_attendee,
)

from .payment_gate import (
    JoinOutcome,
    JoinResult,
    check_payment_status,
    submit_payment_reference,
    request_join,
    build_payment_instructions,
)

from .party_view import (
    PartyView,
    compose_party_view,
    is_party_over,
)

__all__ = [
    # Exceptions
    'PartiesServiceError',
    'PartyNotFoundError',
    'InvalidPartyError',
    'NotPartyHostError',
    'PartyFullError',
    'HostCannotLeaveError',
    'PaymentNotRequiredError',
    'InvalidPaymentReferenceError',
    # Query fallback
    'run_with_fallback',
    # Party management
    'create_party',
    'get_party_by_id',
    'list_parties',
    'list_hosted_parties',
    'list_joined_parties',
    'update_party',
    # Membership
    'join_party',
    'leave_party',
    'get_party_attendees',
    'is_attendee',
    # Payment gate
    'JoinOutcome',
    'JoinResult',
    'check_payment_status',
    'submit_payment_reference',
    'request_join',
    'build_payment_instructions',
    # Derived view
    'PartyView',
    'compose_party_view',
    'is_party_over',
]
