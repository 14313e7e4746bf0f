from django.utils.dateparse import parse_date
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import (
    DesignatedDriverSerializer,
    RegisterDriverSerializer,
    RideRequestSerializer,
    DrinkEntrySerializer,
    TrackDrinkSerializer,
    DrinkLogSerializer,
    BACEstimateRequestSerializer,
    BACEstimateSerializer,
)

from apps.parties.services import PartyNotFoundError
from apps.safety.services import (
    register_as_dd,
    unregister_as_dd,
    get_designated_drivers,
    request_ride,
    track_drink,
    get_drink_history,
    estimate_current_bac,
    # Exceptions
    NotAttendeeError,
    NotRegisteredAsDriverError,
    DriverUnavailableError,
    DuplicateRideRequestError,
    InvalidBACInputError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    methods=['GET'],
    responses={200: DesignatedDriverSerializer(many=True)},
    description="List active designated drivers for a party.",
    tags=['safety'],
)
@extend_schema(
    methods=['POST'],
    request=RegisterDriverSerializer,
    responses={201: DesignatedDriverSerializer, 200: DesignatedDriverSerializer, 403: ErrorResponseSerializer},
    description="Volunteer as a designated driver (attendees only).",
    tags=['safety'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None, 400: ErrorResponseSerializer},
    description="Stop being a designated driver.",
    tags=['safety'],
)
@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([IsAuthenticated])
def party_drivers(request, party_id):
    """List, register or unregister designated drivers for a party."""
    if request.method == 'GET':
        drivers = get_designated_drivers(party_id=party_id)
        return Response(DesignatedDriverSerializer(drivers, many=True).data)

    if request.method == 'DELETE':
        try:
            unregister_as_dd(party_id=party_id, user=request.user)
        except NotRegisteredAsDriverError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)

    serializer = RegisterDriverSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        driver, created = register_as_dd(
            party_id=party_id,
            user=request.user,
            **serializer.validated_data
        )
    except PartyNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAttendeeError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(
        DesignatedDriverSerializer(driver).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
    )


@extend_schema(
    request=RideRequestSerializer,
    responses={201: RideRequestSerializer, 400: ErrorResponseSerializer},
    description="Request a ride from a designated driver.",
    tags=['safety'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def driver_rides(request, driver_id):
    """Request a ride."""
    serializer = RideRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        ride = request_ride(
            driver_id=driver_id,
            user=request.user,
            **serializer.validated_data
        )
    except (DriverUnavailableError, DuplicateRideRequestError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(RideRequestSerializer(ride).data, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    parameters=[OpenApiParameter('date', str, description='Only this day (YYYY-MM-DD)')],
    responses={200: DrinkLogSerializer(many=True)},
    description="Drink history, newest day first.",
    tags=['safety'],
)
@extend_schema(
    methods=['POST'],
    request=TrackDrinkSerializer,
    responses={201: DrinkEntrySerializer},
    description="Log a drink for today.",
    tags=['safety'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def drinks(request):
    """Get drink history or log a drink."""
    if request.method == 'GET':
        day = None
        raw_date = request.query_params.get('date')
        if raw_date:
            day = parse_date(raw_date)
            if day is None:
                return Response(
                    {'error': 'date must be YYYY-MM-DD'},
                    status=status.HTTP_400_BAD_REQUEST
                )
        logs = get_drink_history(user=request.user, date=day)
        return Response(DrinkLogSerializer(logs, many=True).data)

    serializer = TrackDrinkSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    entry = track_drink(user=request.user, **serializer.validated_data)
    return Response(DrinkEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=BACEstimateRequestSerializer,
    responses={200: BACEstimateSerializer, 400: ErrorResponseSerializer},
    description="Estimate current BAC from today's logged drinks.",
    tags=['safety'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def bac_estimate(request):
    """Estimate BAC."""
    serializer = BACEstimateRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        estimate = estimate_current_bac(
            user=request.user,
            gender=serializer.validated_data['gender'],
            weight_lbs=serializer.validated_data['weight_lbs'],
        )
    except InvalidBACInputError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(estimate)
