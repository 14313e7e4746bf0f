from rest_framework import serializers
from .models import Game, PartyGame
from apps.accounts.serializers import UserPublicSerializer


class GameSerializer(serializers.ModelSerializer):
    """Serializer for catalog games."""

    creator = UserPublicSerializer(read_only=True)
    universities = serializers.ListField(
        child=serializers.CharField(max_length=200),
        required=False,
    )

    class Meta:
        model = Game
        fields = [
            'id',
            'name',
            'description',
            'rules',
            'category',
            'universities',
            'popularity',
            'is_public',
            'creator',
            'created_at',
        ]
        read_only_fields = ['id', 'popularity', 'creator', 'created_at']


class PartyGameSerializer(serializers.ModelSerializer):
    """Serializer for a game scheduled at a party."""

    game = GameSerializer(read_only=True)
    added_by = UserPublicSerializer(read_only=True)
    participants = UserPublicSerializer(many=True, read_only=True)

    class Meta:
        model = PartyGame
        fields = ['id', 'party', 'game', 'added_by', 'added_at', 'is_active', 'participants']
        read_only_fields = fields


class AddPartyGameSerializer(serializers.Serializer):
    game_id = serializers.UUIDField()
