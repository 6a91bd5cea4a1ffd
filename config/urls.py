"""URL configuration for SpotBnB project.

The `urlpatterns` list routes URLs to views. Every resource lives under
`/api/`; nested spot routes (images, reviews, bookings) are declared by
the app that owns the nested resource.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('apps.core.urls')),
    path('api/session/', include(('apps.users.auth_urls', 'session'), namespace='session')),
    path('api/users/', include(('apps.users.urls', 'users'), namespace='users')),
    path('api/', include(('apps.spots.urls', 'spots'), namespace='spots')),
    path('api/', include(('apps.bookings.urls', 'bookings'), namespace='bookings')),
    path('api/', include(('apps.reviews.urls', 'reviews'), namespace='reviews')),
    # API schema and docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
]
