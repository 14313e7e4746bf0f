from rest_framework import serializers
from .models import ExpensePool, Expense
from apps.accounts.models import User
from apps.accounts.serializers import UserPublicSerializer


class ExpensePoolSerializer(serializers.ModelSerializer):
    """Serializer for expense pools."""

    creator = UserPublicSerializer(read_only=True)
    participants = UserPublicSerializer(many=True, read_only=True)

    class Meta:
        model = ExpensePool
        fields = [
            'id',
            'party',
            'name',
            'description',
            'total_amount',
            'creator',
            'venmo_username',
            'is_active',
            'is_settled',
            'participants',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id', 'party', 'creator', 'is_active', 'is_settled',
            'participants', 'created_at', 'updated_at',
        ]


class ExpensePoolCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    total_amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, default=0)
    venmo_username = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')


class ExpenseSerializer(serializers.ModelSerializer):
    """Serializer for expenses."""

    paid_by = UserPublicSerializer(read_only=True)
    split_with = UserPublicSerializer(many=True, read_only=True)
    settled_by = UserPublicSerializer(many=True, read_only=True)

    class Meta:
        model = Expense
        fields = [
            'id',
            'party',
            'description',
            'amount',
            'paid_by',
            'split_with',
            'settled_by',
            'created_at',
        ]
        read_only_fields = fields


class ExpenseCreateSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    description = serializers.CharField(max_length=300, required=False, allow_blank=True, default='')
    split_with = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(is_active=True),
        many=True,
        required=False,
    )


class BalanceSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    username = serializers.CharField()
    paid = serializers.DecimalField(max_digits=10, decimal_places=2)
    share = serializers.DecimalField(max_digits=10, decimal_places=2)
    owes = serializers.DecimalField(max_digits=10, decimal_places=2)
    owed = serializers.DecimalField(max_digits=10, decimal_places=2)
    net_balance = serializers.DecimalField(max_digits=10, decimal_places=2)
