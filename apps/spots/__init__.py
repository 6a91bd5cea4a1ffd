"""Spots app package.

A spot is a bookable listing owned by a user. This app holds the spot and
spot image models, the rating/preview aggregation selectors and the spot
endpoints. Bookings and reviews nested under a spot live in their own apps.
"""
