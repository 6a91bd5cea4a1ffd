"""Serializers for reviews.

Provide both read and write serializers for the ``Review`` model. The
reviewing user and the spot are taken from the request and URL in the
view, never from the payload.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.spots.serializers import SpotSummarySerializer
from apps.users.serializers import UserSummarySerializer

from .models import Review, ReviewImage

REVIEW_REQUIRED = 'Review text is required'
STARS_INVALID = 'Stars must be an integer from 1 to 5'


class ReviewWriteSerializer(serializers.Serializer):
    """Validates ``review`` and ``stars`` for create and update."""

    review = serializers.CharField(
        max_length=1000,
        error_messages={
            'required': REVIEW_REQUIRED,
            'blank': REVIEW_REQUIRED,
            'null': REVIEW_REQUIRED,
            'max_length': 'Review text must be at most 1000 characters',
        },
    )
    stars = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages={
            key: STARS_INVALID
            for key in ('required', 'null', 'invalid', 'min_value', 'max_value', 'max_string_length')
        },
    )


class ReviewImageSerializer(serializers.ModelSerializer):
    """Serializer for review images."""

    url = serializers.URLField(
        max_length=500,
        error_messages={
            'required': 'Image url is required',
            'blank': 'Image url is required',
            'invalid': 'Image url must be a valid URL',
        },
    )

    class Meta:
        model = ReviewImage
        fields = ['id', 'url']


class ReviewSerializer(serializers.ModelSerializer):
    """Read serializer for a review record."""

    userId = serializers.IntegerField(source='user_id', read_only=True)
    spotId = serializers.IntegerField(source='spot_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Review
        fields = ['id', 'userId', 'spotId', 'review', 'stars', 'createdAt', 'updatedAt']
        read_only_fields = fields


class SpotReviewSerializer(ReviewSerializer):
    User = UserSummarySerializer(source='user', read_only=True)
    ReviewImages = ReviewImageSerializer(source='images', many=True, read_only=True)

    class Meta(ReviewSerializer.Meta):
        fields = ReviewSerializer.Meta.fields + ['User', 'ReviewImages']
        read_only_fields = fields


class CurrentUserReviewSerializer(SpotReviewSerializer):
    Spot = SpotSummarySerializer(source='spot', read_only=True)

    class Meta(SpotReviewSerializer.Meta):
        fields = ReviewSerializer.Meta.fields + ['User', 'Spot', 'ReviewImages']
        read_only_fields = fields
