"""URL routing for payments."""

from django.urls import path  # type: ignore

from .views import MpesaStkPushView

urlpatterns = [
    path('mpesa/stk-push/', MpesaStkPushView.as_view(), name='mpesa-stk-push'),
]
