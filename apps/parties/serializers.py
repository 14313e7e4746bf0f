from rest_framework import serializers
from .models import Party, PartyAttendance, PartyPayment
from apps.accounts.serializers import UserPublicSerializer
from .services import compose_party_view


class PartySerializer(serializers.ModelSerializer):
    """Party with the requesting user's host/joined/over flags."""

    host = UserPublicSerializer(read_only=True)
    attendee_count = serializers.SerializerMethodField()
    is_host = serializers.SerializerMethodField()
    is_joined = serializers.SerializerMethodField()
    is_party_over = serializers.SerializerMethodField()

    class Meta:
        model = Party
        fields = [
            'id',
            'title',
            'description',
            'location',
            'date_time',
            'max_attendees',
            'requires_payment',
            'payment_amount',
            'venmo_username',
            'payment_description',
            'host',
            'university',
            'attendee_count',
            'is_host',
            'is_joined',
            'is_party_over',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'host', 'university', 'created_at', 'updated_at']

    def _view(self, obj):
        # Cache per object; the three flag fields share one computation
        cache = self.context.setdefault('_party_views', {})
        if obj.id not in cache:
            request = self.context.get('request')
            viewer = request.user if request else None
            cache[obj.id] = compose_party_view(obj, viewer)
        return cache[obj.id]

    def get_attendee_count(self, obj):
        return obj.attendee_count

    def get_is_host(self, obj):
        return self._view(obj).is_host

    def get_is_joined(self, obj):
        return self._view(obj).is_joined

    def get_is_party_over(self, obj):
        return self._view(obj).is_party_over


class PartyCreateSerializer(serializers.ModelSerializer):
    """Input for creating or updating a party."""

    class Meta:
        model = Party
        fields = [
            'title',
            'description',
            'location',
            'date_time',
            'max_attendees',
            'requires_payment',
            'payment_amount',
            'venmo_username',
            'payment_description',
        ]


class PartyAttendanceSerializer(serializers.ModelSerializer):
    """Serializer for party attendees."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = PartyAttendance
        fields = ['id', 'user', 'joined_at']
        read_only_fields = fields


class PartyPaymentSerializer(serializers.ModelSerializer):

    class Meta:
        model = PartyPayment
        fields = ['id', 'party', 'transaction_reference', 'is_paid', 'paid_at', 'created_at']
        read_only_fields = fields


class SubmitPaymentSerializer(serializers.Serializer):
    """Serializer for submitting a Venmo transaction reference."""

    transaction_reference = serializers.CharField(max_length=200)


class PaymentInstructionsSerializer(serializers.Serializer):
    amount = serializers.CharField()
    recipient = serializers.CharField()
    note = serializers.CharField()
    app_url = serializers.CharField()
    web_url = serializers.CharField()


class PaymentRequiredSerializer(serializers.Serializer):
    """Body of a 402 join response."""

    error = serializers.CharField()
    payment = PaymentInstructionsSerializer()
