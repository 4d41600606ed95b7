"""URL routing for notifications."""

from django.urls import path  # type: ignore

from .views import WelcomeEmailView

urlpatterns = [
    path('welcome/', WelcomeEmailView.as_view(), name='notification-welcome'),
]
