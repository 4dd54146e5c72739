from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..services.reviews import get_due_items, get_review_stats, record_review
from ..services.sync import sync_review_items
from ..domain.enums import RATING_LABELS
from ..utils.time import to_cst_iso, to_utc_iso
from .serializers import (
    DueItemSerializer,
    DueQuerySerializer,
    ReviewInSerializer,
    ReviewItemSerializer,
)

base_logger = structlog.get_logger()


class ReviewView(views.APIView):
    def post(self, request):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        item_id = s.validated_data["item_id"]
        rating = s.validated_data["rating"]

        item = record_review(item_id, rating)

        logger.info(
            "review_api_response",
            item_id=str(item_id),
            rating=rating,
            state=item.state,
            scheduled_days=item.scheduled_days,
            next_review_utc=to_utc_iso(item.next_review),
            next_review_cst=to_cst_iso(item.next_review),
            status=status.HTTP_201_CREATED,
        )

        data = ReviewItemSerializer(item).data
        data["rating_label"] = RATING_LABELS[rating]
        return Response(data, status=status.HTTP_201_CREATED)


class DueItemsView(views.APIView):
    def get(self, request, speaker_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        limit = qs.validated_data.get("limit")

        items = get_due_items(speaker_id, limit=limit)

        logger.info(
            "due_items_api_response",
            speaker_id=str(speaker_id),
            item_count=len(items),
        )

        return Response(
            {
                "speaker_id": str(speaker_id),
                "items": DueItemSerializer(items, many=True).data,
            }
        )


class ReviewStatsView(views.APIView):
    def get(self, request, speaker_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        stats = get_review_stats(speaker_id)
        next_at = stats["next_review_at"]

        logger.info(
            "review_stats_api_response",
            speaker_id=str(speaker_id),
            due_count=stats["due_count"],
            total_items=stats["total_items"],
        )

        return Response(
            {
                "due_count": stats["due_count"],
                "total_items": stats["total_items"],
                "next_review_at": to_utc_iso(next_at),
                "next_review_local": to_cst_iso(next_at),
            }
        )


class SyncView(views.APIView):
    def post(self, request, speaker_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        summary = sync_review_items(speaker_id)

        logger.info(
            "sync_api_response",
            speaker_id=str(speaker_id),
            **summary,
        )
        return Response(summary, status=status.HTTP_200_OK)
