from rest_framework import serializers

from ..data.models import ReviewItem


class ReviewInSerializer(serializers.Serializer):
    item_id = serializers.UUIDField()
    rating = serializers.IntegerField(min_value=1, max_value=4)


class DueQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False)


class ReviewItemSerializer(serializers.ModelSerializer):
    speaker_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = ReviewItem
        fields = [
            "id",
            "speaker_id",
            "item_type",
            "item_key",
            "display_data",
            "stability",
            "difficulty",
            "elapsed_days",
            "scheduled_days",
            "reps",
            "lapses",
            "state",
            "last_review",
            "next_review",
        ]


class DueItemSerializer(ReviewItemSerializer):
    schedule_preview = serializers.SerializerMethodField()

    class Meta(ReviewItemSerializer.Meta):
        fields = ReviewItemSerializer.Meta.fields + ["schedule_preview"]

    def get_schedule_preview(self, item):
        return {str(k): v for k, v in item.schedule_preview.items()}
