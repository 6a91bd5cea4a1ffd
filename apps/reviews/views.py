"""API views for managing reviews."""

from __future__ import annotations

import structlog
from rest_framework import exceptions, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.spots.mixins import SpotNestedMixin
from apps.spots.selectors import prefetch_spot_summary

from .models import Review, ReviewImage
from .serializers import (
    CurrentUserReviewSerializer,
    ReviewImageSerializer,
    ReviewSerializer,
    ReviewWriteSerializer,
    SpotReviewSerializer,
)
from .services import DuplicateReviewError, ReviewImageLimitError, add_review_image, create_review

logger = structlog.get_logger(__name__)

REVIEW_NOT_FOUND = "Review couldn't be found"


def _ensure_author(request, review: Review) -> None:
    if review.user_id != request.user.id:
        raise exceptions.PermissionDenied('Forbidden')


def _get_review(pk) -> Review:
    try:
        return Review.objects.get(pk=pk)
    except Review.DoesNotExist:
        raise exceptions.NotFound(REVIEW_NOT_FOUND)


class CurrentReviewsView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        reviews = (
            Review.objects.filter(user=request.user)
            .select_related('user')
            .prefetch_related('images', prefetch_spot_summary())
        )
        if not reviews:
            raise exceptions.NotFound('No reviews found for the current user')
        return Response({'Reviews': CurrentUserReviewSerializer(reviews, many=True).data})


class SpotReviewsView(SpotNestedMixin, APIView):
    """``/api/spots/<spot_id>/reviews/``: read a spot's reviews or add one."""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request, spot_id):  # type: ignore
        reviews = (
            Review.objects.filter(spot=self.get_spot())
            .select_related('user')
            .prefetch_related('images')
        )
        return Response({'Reviews': SpotReviewSerializer(reviews, many=True).data})

    def post(self, request, spot_id):  # type: ignore
        serializer = ReviewWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            review = create_review(spot=self.get_spot(), user=request.user, **serializer.validated_data)
        except DuplicateReviewError as exc:
            raise exceptions.PermissionDenied(str(exc))
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class ReviewDetailView(APIView):
    """``/api/reviews/<pk>/``: the author edits or deletes a review."""

    permission_classes = [permissions.IsAuthenticated]

    def put(self, request, pk):  # type: ignore
        review = _get_review(pk)
        _ensure_author(request, review)
        serializer = ReviewWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review.review = serializer.validated_data['review']
        review.stars = serializer.validated_data['stars']
        review.save(update_fields=['review', 'stars', 'updated_at'])
        logger.info('review.updated', review_id=review.pk, stars=review.stars)
        return Response(ReviewSerializer(review).data)

    def delete(self, request, pk):  # type: ignore
        review = _get_review(pk)
        _ensure_author(request, review)
        review.delete()
        logger.info('review.deleted', review_id=pk, user_id=request.user.id)
        return Response({'message': 'Successfully deleted'})


class ReviewImagesView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, pk):  # type: ignore
        review = _get_review(pk)
        _ensure_author(request, review)
        serializer = ReviewImageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            image = add_review_image(review, url=serializer.validated_data['url'])
        except ReviewImageLimitError as exc:
            raise exceptions.PermissionDenied(str(exc))
        return Response(ReviewImageSerializer(image).data, status=status.HTTP_201_CREATED)


class ReviewImageDestroyView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def delete(self, request, pk):  # type: ignore
        try:
            image = ReviewImage.objects.select_related('review').get(pk=pk)
        except ReviewImage.DoesNotExist:
            raise exceptions.NotFound("Review Image couldn't be found")
        _ensure_author(request, image.review)
        image.delete()
        logger.info('review.image_deleted', review_id=image.review_id, image_id=pk)
        return Response({'message': 'Successfully deleted'})
