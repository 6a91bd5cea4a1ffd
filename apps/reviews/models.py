"""Models for the review domain.

Defines the ``Review`` entity holding a guest's star rating and written
review of a spot, and ``ReviewImage`` for photos attached to a review.
One user can leave at most one review per spot.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

MAX_IMAGES_PER_REVIEW = 10


class Review(models.Model):
    """Represents a review left by a user for a spot."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews'
    )
    spot = models.ForeignKey(
        'spots.Spot', on_delete=models.CASCADE, related_name='reviews'
    )
    review = models.CharField(max_length=1000)
    stars = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        help_text=_('Rating from 1 to 5')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Review')
        verbose_name_plural = _('Reviews')
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'spot'], name='review_one_per_user_and_spot'),
            models.CheckConstraint(
                condition=models.Q(stars__gte=1) & models.Q(stars__lte=5),
                name='review_stars_between_1_and_5',
            ),
        ]

    def __str__(self) -> str:
        return f'Review {self.stars}/5 by {self.user_id} on spot {self.spot_id}'


class ReviewImage(models.Model):
    """Photo attached to a review."""

    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='images')
    url = models.URLField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Review image')
        verbose_name_plural = _('Review images')
        ordering = ['id']

    def __str__(self) -> str:
        return f'{self.review_id}: {self.url}'
