"""Users app package.

Defines the custom user model used as AUTH_USER_MODEL, the JWT
authentication class that reads the access token from the Authorization
header or the ``token`` cookie, and the signup and session endpoints.
"""
