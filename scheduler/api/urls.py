from django.urls import path
from .views import DueItemsView, ReviewStatsView, ReviewView, SyncView

urlpatterns = [
    path("review", ReviewView.as_view(), name="review"),
    path("speakers/<uuid:speaker_id>/review", DueItemsView.as_view(), name="due-items"),
    path("speakers/<uuid:speaker_id>/review/stats", ReviewStatsView.as_view(), name="review-stats"),
    path("speakers/<uuid:speaker_id>/review/sync", SyncView.as_view(), name="review-sync"),
]
