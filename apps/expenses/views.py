from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    ExpensePoolSerializer,
    ExpensePoolCreateSerializer,
    ExpenseSerializer,
    ExpenseCreateSerializer,
    BalanceSerializer,
)

from apps.parties.services import PartyNotFoundError
from apps.expenses.services import (
    create_expense_pool,
    get_party_expense_pools,
    join_expense_pool,
    leave_expense_pool,
    calculate_balances,
    settle_expense_pool,
    add_expense,
    get_party_expenses,
    get_user_expenses_to_settle,
    get_user_paid_expenses,
    settle_expense,
    # Exceptions
    ExpensePoolNotFoundError,
    ExpenseNotFoundError,
    NotAttendeeError,
    CreatorCannotLeaveError,
    NotPoolCreatorError,
    InvalidExpenseError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


# =============================================================================
# Pools
# =============================================================================

@extend_schema(
    methods=['GET'],
    responses={200: ExpensePoolSerializer(many=True)},
    tags=['expenses'],
)
@extend_schema(
    methods=['POST'],
    request=ExpensePoolCreateSerializer,
    responses={201: ExpensePoolSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    tags=['expenses'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def party_pools(request, party_id):
    """List a party's active expense pools or create one."""
    if request.method == 'GET':
        pools = get_party_expense_pools(party_id=party_id)
        return Response(ExpensePoolSerializer(pools, many=True).data)

    serializer = ExpensePoolCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        pool = create_expense_pool(
            party_id=party_id,
            creator=request.user,
            **serializer.validated_data
        )
    except PartyNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(ExpensePoolSerializer(pool).data, status=status.HTTP_201_CREATED)


@extend_schema(request=None, responses={200: ExpensePoolSerializer}, tags=['expenses'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def join_pool(request, pool_id):
    """Join an expense pool."""
    try:
        pool = join_expense_pool(pool_id=pool_id, user=request.user)
    except ExpensePoolNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(ExpensePoolSerializer(pool).data)


@extend_schema(request=None, responses={200: ExpensePoolSerializer}, tags=['expenses'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def leave_pool(request, pool_id):
    """Leave an expense pool."""
    try:
        pool = leave_expense_pool(pool_id=pool_id, user=request.user)
    except ExpensePoolNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except CreatorCannotLeaveError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ExpensePoolSerializer(pool).data)


@extend_schema(responses={200: BalanceSerializer(many=True)}, tags=['expenses'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pool_balances(request, pool_id):
    """Per-participant balances for a pool."""
    try:
        balances = calculate_balances(pool_id=pool_id)
    except ExpensePoolNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(BalanceSerializer(balances, many=True).data)


@extend_schema(request=None, responses={200: ExpensePoolSerializer}, tags=['expenses'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def settle_pool(request, pool_id):
    """Mark a pool settled (creator only)."""
    try:
        pool = settle_expense_pool(pool_id=pool_id, user=request.user)
    except ExpensePoolNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotPoolCreatorError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(ExpensePoolSerializer(pool).data)


# =============================================================================
# Expenses
# =============================================================================

@extend_schema(
    methods=['GET'],
    responses={200: ExpenseSerializer(many=True)},
    tags=['expenses'],
)
@extend_schema(
    methods=['POST'],
    request=ExpenseCreateSerializer,
    responses={201: ExpenseSerializer, 400: ErrorResponseSerializer, 403: ErrorResponseSerializer},
    tags=['expenses'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def party_expenses(request, party_id):
    """List a party's expenses or add one."""
    if request.method == 'GET':
        return Response(ExpenseSerializer(get_party_expenses(party_id=party_id), many=True).data)

    serializer = ExpenseCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        expense = add_expense(
            party_id=party_id,
            paid_by=request.user,
            amount=serializer.validated_data['amount'],
            description=serializer.validated_data.get('description', ''),
            split_with=serializer.validated_data.get('split_with'),
        )
    except PartyNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidExpenseError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)


@extend_schema(request=None, responses={200: ExpenseSerializer}, tags=['expenses'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def settle(request, expense_id):
    """Mark the caller's part of an expense as settled."""
    try:
        expense = settle_expense(expense_id=expense_id, user=request.user)
    except ExpenseNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(ExpenseSerializer(expense).data)


@extend_schema(responses={200: ExpenseSerializer(many=True)}, tags=['expenses'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def to_settle(request):
    """Expenses the caller still owes on."""
    return Response(ExpenseSerializer(get_user_expenses_to_settle(user=request.user), many=True).data)


@extend_schema(responses={200: ExpenseSerializer(many=True)}, tags=['expenses'])
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def paid(request):
    """Expenses the caller paid."""
    return Response(ExpenseSerializer(get_user_paid_expenses(user=request.user), many=True).data)
