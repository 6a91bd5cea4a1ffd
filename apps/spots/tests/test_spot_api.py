"""Integration tests for spot API endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.reviews.models import Review
from apps.spots.models import Spot, SpotImage
from apps.users.models import User


def make_user(username: str, **extra) -> User:
    return User.objects.create_user(
        username=username,
        email=f"{username.lower()}@user.io",
        password="password",
        first_name=extra.pop("first_name", "Test"),
        last_name=extra.pop("last_name", "User"),
        **extra,
    )


def make_spot(owner: User, **overrides) -> Spot:
    data = {
        "address": "123 Disney Lane",
        "city": "San Francisco",
        "state": "California",
        "country": "United States of America",
        "lat": Decimal("37.7645358"),
        "lng": Decimal("-122.4730327"),
        "name": "App Academy",
        "description": "Place where web developers are created",
        "price": Decimal("123.00"),
    }
    data.update(overrides)
    return Spot.objects.create(owner=owner, **data)


class SpotListAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_user("Owner")
        self.guest = make_user("Guest")
        self.cheap = make_spot(self.owner, name="Cheap", price=Decimal("50.00"), lat=Decimal("10"), lng=Decimal("10"))
        self.pricey = make_spot(self.owner, name="Pricey", price=Decimal("500.00"), lat=Decimal("40"), lng=Decimal("-70"))
        SpotImage.objects.create(spot=self.cheap, url="https://example.com/a.png", preview=False)
        SpotImage.objects.create(spot=self.cheap, url="https://example.com/b.png", preview=True)
        Review.objects.create(user=self.guest, spot=self.cheap, review="Great", stars=5)
        Review.objects.create(user=self.owner, spot=self.cheap, review="Fine", stars=2)
        self.url = reverse("spots:spot-list")

    def test_list_is_public_and_annotated(self) -> None:
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["page"], 1)
        self.assertEqual(response.data["size"], 20)
        rows = {row["name"]: row for row in response.data["Spots"]}
        self.assertEqual(rows["Cheap"]["avgRating"], 3.5)
        self.assertEqual(rows["Cheap"]["previewImage"], "https://example.com/b.png")
        self.assertIsNone(rows["Pricey"]["avgRating"])
        self.assertIsNone(rows["Pricey"]["previewImage"])

    def test_price_and_bounding_box_filters(self) -> None:
        response = self.client.get(self.url, {"minPrice": 100})
        self.assertEqual([row["name"] for row in response.data["Spots"]], ["Pricey"])

        response = self.client.get(self.url, {"maxLat": 20, "minLng": 0})
        self.assertEqual([row["name"] for row in response.data["Spots"]], ["Cheap"])

    def test_negative_price_filter_is_rejected(self) -> None:
        response = self.client.get(self.url, {"minPrice": -1})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Bad Request")
        self.assertEqual(
            response.data["errors"]["minPrice"],
            "Minimum price must be greater than or equal to 0",
        )

    def test_pagination_bounds(self) -> None:
        response = self.client.get(self.url, {"page": 1, "size": 1})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["Spots"]), 1)
        self.assertEqual(response.data["size"], 1)

        response = self.client.get(self.url, {"page": 0, "size": 21})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("page", response.data["errors"])
        self.assertIn("size", response.data["errors"])

    def test_pages_follow_id_order(self) -> None:
        first = self.client.get(self.url, {"page": 1, "size": 1})
        second = self.client.get(self.url, {"page": 2, "size": 1})

        self.assertEqual(
            [first.data["Spots"][0]["id"], second.data["Spots"][0]["id"]],
            [self.cheap.id, self.pricey.id],
        )


class SpotDetailAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_user("Owner", first_name="Demo", last_name="Lition")
        self.other = make_user("Other")
        self.spot = make_spot(self.owner)
        SpotImage.objects.create(spot=self.spot, url="https://example.com/p.png", preview=True)
        Review.objects.create(user=self.other, spot=self.spot, review="Nice", stars=4)

    def _detail(self, spot_id: int) -> str:
        return reverse("spots:spot-detail", args=[spot_id])

    def test_detail_includes_aggregates_images_and_owner(self) -> None:
        response = self.client.get(self._detail(self.spot.id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["numReviews"], 1)
        self.assertEqual(response.data["avgStarRating"], 4.0)
        self.assertEqual(len(response.data["SpotImages"]), 1)
        self.assertEqual(
            dict(response.data["Owner"]),
            {"id": self.owner.id, "firstName": "Demo", "lastName": "Lition"},
        )

    def test_missing_spot_returns_404_message(self) -> None:
        response = self.client.get(self._detail(9999))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": "Spot couldn't be found"})

    def test_owner_can_update(self) -> None:
        self.client.force_authenticate(self.owner)
        payload = {
            "address": "1 New St",
            "city": "Austin",
            "state": "Texas",
            "country": "USA",
            "lat": 30.2,
            "lng": -97.7,
            "name": "Renamed",
            "description": "Updated",
            "price": 99.5,
        }

        response = self.client.put(self._detail(self.spot.id), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.spot.refresh_from_db()
        self.assertEqual(self.spot.name, "Renamed")
        self.assertEqual(self.spot.price, Decimal("99.50"))

    def test_non_owner_cannot_update_or_delete(self) -> None:
        self.client.force_authenticate(self.other)

        response = self.client.delete(self._detail(self.spot.id))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data, {"message": "Forbidden"})
        self.assertTrue(Spot.objects.filter(pk=self.spot.pk).exists())

    def test_owner_can_delete(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.delete(self._detail(self.spot.id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"message": "Successfully deleted"})
        self.assertFalse(Spot.objects.filter(pk=self.spot.pk).exists())

    def test_anonymous_delete_requires_authentication(self) -> None:
        response = self.client.delete(self._detail(self.spot.id))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {"message": "Authentication required"})


class SpotCreateAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = make_user("Creator")
        self.url = reverse("spots:spot-list")

    def test_create_spot(self) -> None:
        self.client.force_authenticate(self.user)
        payload = {
            "address": "123 Disney Lane",
            "city": "San Francisco",
            "state": "California",
            "country": "United States of America",
            "lat": 37.7645358,
            "lng": -122.4730327,
            "name": "App Academy",
            "description": "Place where web developers are created",
            "price": 123,
        }

        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["ownerId"], self.user.id)
        self.assertEqual(Spot.objects.get().owner, self.user)

    def test_create_reports_field_messages(self) -> None:
        self.client.force_authenticate(self.user)
        payload = {"lat": 100, "lng": 0, "name": "x" * 51, "price": -5}

        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        errors = response.data["errors"]
        self.assertEqual(errors["address"], "Street address is required")
        self.assertEqual(errors["city"], "City is required")
        self.assertEqual(errors["lat"], "Latitude must be within -90 and 90")
        self.assertEqual(errors["name"], "Name must be less than 50 characters")
        self.assertEqual(errors["description"], "Description is required")
        self.assertEqual(errors["price"], "Price per day must be a positive number")

    def test_create_requires_authentication(self) -> None:
        response = self.client.post(self.url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_current_lists_only_own_spots(self) -> None:
        make_spot(self.user, name="Mine")
        make_spot(make_user("Someone"), name="Theirs")
        self.client.force_authenticate(self.user)

        response = self.client.get(reverse("spots:spot-current"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["name"] for row in response.data["Spots"]], ["Mine"])


class SpotImageAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_user("Owner")
        self.other = make_user("Other")
        self.spot = make_spot(self.owner)
        self.images_url = reverse("spots:spot-images", args=[self.spot.id])

    def test_owner_adds_image(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            self.images_url, {"url": "https://example.com/x.png", "preview": True}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(set(response.data), {"id", "url", "preview"})
        self.assertTrue(response.data["preview"])

    def test_non_owner_cannot_add_image(self) -> None:
        self.client.force_authenticate(self.other)

        response = self.client.post(self.images_url, {"url": "https://example.com/x.png"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_image(self) -> None:
        image = SpotImage.objects.create(spot=self.spot, url="https://example.com/x.png")
        url = reverse("spots:spot-image-detail", args=[image.id])

        self.client.force_authenticate(self.other)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.owner)
        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(SpotImage.objects.filter(pk=image.pk).exists())

    def test_delete_missing_image(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.delete(reverse("spots:spot-image-detail", args=[424242]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": "Spot Image couldn't be found"})
