from rest_framework import serializers
from .models import DesignatedDriver, RideRequest, DrinkLog, DrinkEntry, DrinkType
from apps.accounts.serializers import UserPublicSerializer


class DesignatedDriverSerializer(serializers.ModelSerializer):
    """Serializer for designated drivers."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = DesignatedDriver
        fields = [
            'id',
            'party',
            'user',
            'name',
            'phone',
            'vehicle',
            'seats',
            'departure_time',
            'destination',
            'active',
            'created_at',
        ]
        read_only_fields = ['id', 'party', 'user', 'active', 'created_at']


class RegisterDriverSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, required=False, allow_blank=False)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    vehicle = serializers.CharField(max_length=100, required=False, allow_blank=True)
    seats = serializers.IntegerField(min_value=1, max_value=15, required=False)
    departure_time = serializers.DateTimeField(required=False, allow_null=True)
    destination = serializers.CharField(max_length=300, required=False, allow_blank=True)


class RideRequestSerializer(serializers.ModelSerializer):
    """Serializer for ride requests."""

    class Meta:
        model = RideRequest
        fields = [
            'id',
            'driver',
            'user',
            'pickup_location',
            'pickup_time',
            'destination',
            'passengers',
            'status',
            'created_at',
        ]
        read_only_fields = ['id', 'driver', 'user', 'status', 'created_at']


class DrinkEntrySerializer(serializers.ModelSerializer):

    class Meta:
        model = DrinkEntry
        fields = ['id', 'drink_type', 'alcohol_content', 'ounces', 'consumed_at']
        read_only_fields = ['id', 'consumed_at']


class TrackDrinkSerializer(serializers.Serializer):
    drink_type = serializers.ChoiceField(choices=DrinkType.choices, default=DrinkType.OTHER)
    alcohol_content = serializers.DecimalField(
        max_digits=4, decimal_places=1, min_value=0, max_value=100, default=5
    )
    ounces = serializers.DecimalField(max_digits=5, decimal_places=1, min_value=0, default=12)


class DrinkLogSerializer(serializers.ModelSerializer):
    """A day's drink log with its entries."""

    entries = DrinkEntrySerializer(many=True, read_only=True)

    class Meta:
        model = DrinkLog
        fields = ['id', 'date', 'total_drinks', 'entries']
        read_only_fields = fields


class BACEstimateRequestSerializer(serializers.Serializer):
    gender = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    weight_lbs = serializers.FloatField(min_value=1)


class BACEstimateSerializer(serializers.Serializer):
    bac = serializers.FloatField()
    level = serializers.CharField()
    warning = serializers.CharField()
    drinks = serializers.IntegerField()
    hours = serializers.FloatField()
