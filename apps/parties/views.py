from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .serializers import (
    PartySerializer,
    PartyCreateSerializer,
    PartyAttendanceSerializer,
    PartyPaymentSerializer,
    SubmitPaymentSerializer,
    PaymentInstructionsSerializer,
    PaymentRequiredSerializer,
)

from apps.parties.services import (
    create_party,
    get_party_by_id,
    list_parties,
    list_hosted_parties,
    list_joined_parties,
    update_party,
    leave_party,
    get_party_attendees,
    request_join,
    check_payment_status,
    submit_payment_reference,
    build_payment_instructions,
    is_party_over,
    JoinOutcome,
    # Exceptions
    PartyNotFoundError,
    InvalidPartyError,
    NotPartyHostError,
    PartyFullError,
    HostCannotLeaveError,
    PaymentNotRequiredError,
    InvalidPaymentReferenceError,
)


class PartyPagination(PageNumberPagination):
    """Custom pagination for parties."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class PartyViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for parties.

    All business logic is handled by services.
    Views are thin HTTP handlers only. Parties are never deleted.

    list: Upcoming and past parties at the caller's university
    create: Host a new party
    retrieve: Get a party with the caller's flags
    update / partial_update: Edit a party (host only)
    """

    serializer_class = PartySerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PartyPagination
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return PartyCreateSerializer
        return PartySerializer

    def _output(self, data, many=False):
        return PartySerializer(data, many=many, context={'request': self.request}).data

    def _paginated(self, parties):
        page = self.paginate_queryset(parties)
        if page is not None:
            return self.get_paginated_response(self._output(page, many=True))
        return Response(self._output(parties, many=True))

    def list(self, request, *args, **kwargs):
        """List parties at the caller's university."""
        return self._paginated(list_parties(university=request.user.university))

    def retrieve(self, request, pk=None, *args, **kwargs):
        try:
            party = get_party_by_id(party_id=pk)
        except PartyNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(self._output(party))

    def create(self, request, *args, **kwargs):
        """Host a new party."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            party = create_party(host=request.user, **serializer.validated_data)
        except InvalidPartyError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(self._output(party), status=status.HTTP_201_CREATED)

    def update(self, request, pk=None, *args, **kwargs):
        """Update a party (host only)."""
        serializer = self.get_serializer(data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)

        try:
            party = update_party(party_id=pk, user=request.user, **serializer.validated_data)
        except PartyNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotPartyHostError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidPartyError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(self._output(party))

    @extend_schema(
        request=None,
        responses={
            200: PartyAttendanceSerializer,
            201: PartyAttendanceSerializer,
            402: PaymentRequiredSerializer,
        },
    )
    @action(detail=True, methods=['post'])
    def join(self, request, pk=None):
        """
        Join a party.

        201 when newly joined, 200 when already an attendee, 402 with
        payment instructions when the party is paid and the caller has not
        paid yet.
        """
        try:
            party = get_party_by_id(party_id=pk)
        except PartyNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        if is_party_over(party):
            return Response(
                {'error': 'This party has already happened'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            result = request_join(party_id=party.id, user=request.user)
        except PartyFullError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        if result.outcome == JoinOutcome.PAYMENT_REQUIRED:
            return Response({
                'error': 'Payment required to join this party',
                'payment': PaymentInstructionsSerializer(build_payment_instructions(party)).data,
            }, status=status.HTTP_402_PAYMENT_REQUIRED)

        data = PartyAttendanceSerializer(result.attendance).data
        if result.outcome == JoinOutcome.ALREADY_JOINED:
            return Response(data, status=status.HTTP_200_OK)
        return Response(data, status=status.HTTP_201_CREATED)

    @extend_schema(request=None)
    @action(detail=True, methods=['post'])
    def leave(self, request, pk=None):
        """Leave a party."""
        try:
            leave_party(party_id=pk, user=request.user)
        except PartyNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except HostCannotLeaveError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'message': 'Successfully left the party'})

    @extend_schema(request=SubmitPaymentSerializer, responses={200: PartyPaymentSerializer})
    @action(detail=True, methods=['get', 'post'])
    def payment(self, request, pk=None):
        """GET payment status, or POST a Venmo transaction reference."""
        if request.method == 'GET':
            try:
                get_party_by_id(party_id=pk)
            except PartyNotFoundError as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
            return Response(check_payment_status(party_id=pk, user=request.user))

        serializer = SubmitPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            payment = submit_payment_reference(
                party_id=pk,
                user=request.user,
                reference=serializer.validated_data['transaction_reference'],
            )
        except PartyNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (PaymentNotRequiredError, InvalidPaymentReferenceError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(PartyPaymentSerializer(payment).data)

    @action(detail=True, methods=['get'])
    def attendees(self, request, pk=None):
        """List a party's attendees in join order."""
        try:
            attendances = get_party_attendees(party_id=pk)
        except PartyNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(PartyAttendanceSerializer(attendances, many=True).data)

    @action(detail=False, methods=['get'])
    def hosted(self, request):
        """Parties the caller hosts."""
        return self._paginated(list_hosted_parties(user=request.user))

    @action(detail=False, methods=['get'])
    def joined(self, request):
        """Parties the caller attends."""
        return self._paginated(list_joined_parties(user=request.user))
