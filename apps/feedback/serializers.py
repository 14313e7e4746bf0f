from rest_framework import serializers
from .models import PartyFeedback
from apps.accounts.serializers import UserPublicSerializer


class PartyFeedbackSerializer(serializers.ModelSerializer):
    """Feedback entry; the author is hidden when anonymous."""

    user = serializers.SerializerMethodField()

    class Meta:
        model = PartyFeedback
        fields = ['id', 'party', 'user', 'rating', 'comment', 'is_anonymous', 'created_at']
        read_only_fields = fields

    def get_user(self, obj):
        if obj.is_anonymous:
            return None
        return UserPublicSerializer(obj.user).data


class SubmitFeedbackSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(required=False, allow_blank=True, default='')
    is_anonymous = serializers.BooleanField(required=False, default=True)


class FeedbackStatsSerializer(serializers.Serializer):
    average_rating = serializers.FloatField()
    total_feedback = serializers.IntegerField()
    rating_distribution = serializers.DictField(child=serializers.IntegerField())
