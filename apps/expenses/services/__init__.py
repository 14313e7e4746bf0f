"""
Expenses app services layer.

Expense pools, individual expenses and cent-exact balance splitting.
"""

from .exceptions import (
    ExpensesServiceError,
    ExpensePoolNotFoundError,
    ExpenseNotFoundError,
    NotAttendeeError,
    CreatorCannotLeaveError,
    NotPoolCreatorError,
    InvalidExpenseError,
    InvalidSplitError,
)

from .splitting import calculate_splits

from .pool_management import (
    create_expense_pool,
    get_party_expense_pools,
    join_expense_pool,
    leave_expense_pool,
    get_pool_participants,
    calculate_balances,
    settle_expense_pool,
)

from .expense_management import (
    add_expense,
    get_party_expenses,
    get_user_expenses_to_settle,
    get_user_paid_expenses,
    settle_expense,
)

__all__ = [
    # Exceptions
    'ExpensesServiceError',
    'ExpensePoolNotFoundError',
    'ExpenseNotFoundError',
    'NotAttendeeError',
    'CreatorCannotLeaveError',
    'NotPoolCreatorError',
    'InvalidExpenseError',
    'InvalidSplitError',
    # Splitting
    'calculate_splits',
    # Pools
    'create_expense_pool',
    'get_party_expense_pools',
    'join_expense_pool',
    'leave_expense_pool',
    'get_pool_participants',
    'calculate_balances',
    'settle_expense_pool',
    # Expenses
    'add_expense',
    'get_party_expenses',
    'get_user_expenses_to_settle',
    'get_user_paid_expenses',
    'settle_expense',
]
