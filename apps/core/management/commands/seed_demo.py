"""Load a small demo dataset: users, spots, images, reviews and bookings.

Running the command twice leaves the database unchanged; existing rows are
matched by username, spot name, image URL, review author and booking dates.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import structlog
from django.core.management.base import BaseCommand  # type: ignore
from django.db import transaction  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.services import BookingConflictError, create_booking
from apps.reviews.models import Review, ReviewImage
from apps.spots.models import Spot, SpotImage
from apps.users.models import User

logger = structlog.get_logger(__name__)

DEMO_USERS = [
    {"username": "Demo-lition", "email": "demo@user.io", "first_name": "Demo", "last_name": "User", "password": "password"},
    {"username": "FakeUser1", "email": "user1@user.io", "first_name": "User", "last_name": "One", "password": "password2"},
    {"username": "FakeUser2", "email": "user2@user.io", "first_name": "User", "last_name": "Two", "password": "password3"},
]

DEMO_SPOTS = [
    ("1600 Pennsylvania Ave NW", "Washington", "DC", "United States of America", "38.897957", "-77.03656",
     "The White House", "The official residence and workplace of the President of the United States.", 500),
    ("Eiffel Tower", "Paris", "Ile-de-France", "France", "48.858844", "2.294351",
     "Eiffel Tower", "A wrought-iron lattice tower on the Champ de Mars in Paris.", 750),
    ("Colosseum", "Rome", "Lazio", "Italy", "41.89021", "12.492231",
     "The Colosseum", "An ancient amphitheater in the center of Rome.", 600),
    ("Great Wall of China", "Beijing", "Beijing", "China", "40.431908", "116.570374",
     "Great Wall of China", "An ancient series of walls and fortifications.", 1000),
    ("Statue of Liberty", "New York", "New York", "United States of America", "40.689247", "-74.044502",
     "Statue of Liberty", "A colossal neoclassical sculpture on Liberty Island in New York Harbor.", 450),
    ("Taj Mahal", "Agra", "Uttar Pradesh", "India", "27.175015", "78.042155",
     "Taj Mahal", "An ivory-white marble mausoleum on the south bank of the Yamuna river.", 800),
    ("Big Ben", "London", "England", "United Kingdom", "51.500729", "-0.124625",
     "Big Ben", "The Great Bell of the clock at the north end of the Palace of Westminster.", 550),
    ("Christ the Redeemer", "Rio de Janeiro", "Rio de Janeiro", "Brazil", "-22.951916", "-43.210487",
     "Christ the Redeemer", "An iconic statue of Jesus Christ in Rio de Janeiro.", 700),
    ("Sydney Opera House", "Sydney", "New South Wales", "Australia", "-33.856784", "151.215297",
     "Sydney Opera House", "A multi-venue performing arts centre in Sydney.", 900),
    ("Machu Picchu", "Cusco Region", "Urubamba Province", "Peru", "-13.163141", "-72.544963",
     "Machu Picchu", "A 15th-century Inca citadel located in the Eastern Cordillera of southern Peru.", 950),
]

DEMO_STARS = [5, 4, 5, 3, 4, 5, 4, 5, 3, 4]

DEMO_BOOKING_DATES = [
    (date(2024, 10, 1), date(2024, 10, 5)),
    (date(2024, 11, 10), date(2024, 11, 15)),
    (date(2024, 12, 5), date(2024, 12, 10)),
    (date(2024, 12, 15), date(2024, 12, 20)),
    (date(2024, 12, 22), date(2024, 12, 28)),
]


class Command(BaseCommand):
    help = "Load demo users, spots, images, reviews and bookings"

    @transaction.atomic
    def handle(self, *args, **options):  # type: ignore
        users = [self._user(data) for data in DEMO_USERS]
        spots = [self._spot(users[index % len(users)], row) for index, row in enumerate(DEMO_SPOTS)]

        for index, spot in enumerate(spots, start=1):
            SpotImage.objects.get_or_create(
                spot=spot, url=f"https://example.com/image{index}.jpg", defaults={"preview": True}
            )
            reviewer = users[index % len(users)]
            review, _ = Review.objects.get_or_create(
                spot=spot,
                user=reviewer,
                defaults={"review": f"Example review {index}", "stars": DEMO_STARS[index - 1]},
            )
            ReviewImage.objects.get_or_create(review=review, url=f"https://example.com/review-image{index}.jpg")

        booked = 0
        for index, (start_date, end_date) in enumerate(DEMO_BOOKING_DATES):
            spot = spots[index]
            guest = users[(index + 1) % len(users)]
            if Booking.objects.filter(spot=spot, user=guest, start_date=start_date, end_date=end_date).exists():
                continue
            try:
                create_booking(spot=spot, user=guest, start_date=start_date, end_date=end_date)
            except BookingConflictError as exc:
                logger.warning("seed_demo.booking_skipped", spot_id=spot.pk, reason=str(exc))
                continue
            booked += 1

        logger.info("seed_demo.done", users=len(users), spots=len(spots), bookings_created=booked)
        self.stdout.write(self.style.SUCCESS(f"Demo data ready: {len(users)} users, {len(spots)} spots"))

    def _user(self, data: dict) -> User:
        data = dict(data)
        password = data.pop("password")
        user, created = User.objects.get_or_create(username=data["username"], defaults=data)
        if created:
            user.set_password(password)
            user.save(update_fields=["password"])
        return user

    def _spot(self, owner: User, row: tuple) -> Spot:
        address, city, state, country, lat, lng, name, description, price = row
        spot, _ = Spot.objects.get_or_create(
            name=name,
            defaults={
                "owner": owner,
                "address": address,
                "city": city,
                "state": state,
                "country": country,
                "lat": Decimal(lat),
                "lng": Decimal(lng),
                "description": description,
                "price": Decimal(price),
            },
        )
        return spot
