"""URL routing for the reviews domain."""

from django.urls import path  # type: ignore

from .views import (
    CurrentReviewsView,
    ReviewDetailView,
    ReviewImageDestroyView,
    ReviewImagesView,
    SpotReviewsView,
)

urlpatterns = [
    path('reviews/current/', CurrentReviewsView.as_view(), name='review-current'),
    path('reviews/<int:pk>/', ReviewDetailView.as_view(), name='review-detail'),
    path('reviews/<int:pk>/images/', ReviewImagesView.as_view(), name='review-images'),
    path('review-images/<int:pk>/', ReviewImageDestroyView.as_view(), name='review-image-detail'),
    path('spots/<int:spot_id>/reviews/', SpotReviewsView.as_view(), name='spot-reviews'),
]
