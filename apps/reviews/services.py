"""Domain services for reviews and review images."""

from __future__ import annotations

import structlog
from django.db import IntegrityError, transaction  # type: ignore

from .models import MAX_IMAGES_PER_REVIEW, Review, ReviewImage

logger = structlog.get_logger(__name__)


class DuplicateReviewError(Exception):
    """Raised when a user already reviewed the spot."""

    def __init__(self, message: str = 'User already has a review for this spot') -> None:
        super().__init__(message)


class ReviewImageLimitError(Exception):
    """Raised when a review already carries the maximum number of images."""

    def __init__(self, message: str = 'Maximum number of images for this resource was reached') -> None:
        super().__init__(message)


def create_review(*, spot, user, review: str, stars: int) -> Review:
    if Review.objects.filter(spot=spot, user=user).exists():
        raise DuplicateReviewError()
    try:
        with transaction.atomic():
            instance = Review.objects.create(spot=spot, user=user, review=review, stars=stars)
    except IntegrityError:
        raise DuplicateReviewError()
    logger.info('review.created', review_id=instance.pk, spot_id=spot.pk, user_id=user.pk, stars=stars)
    return instance


def add_review_image(review: Review, *, url: str) -> ReviewImage:
    with transaction.atomic():
        # One upload at a time per review.
        Review.objects.select_for_update().filter(pk=review.pk).exists()
        if review.images.count() >= MAX_IMAGES_PER_REVIEW:
            raise ReviewImageLimitError()
        image = ReviewImage.objects.create(review=review, url=url)
    logger.info('review.image_added', review_id=review.pk, image_id=image.pk)
    return image
