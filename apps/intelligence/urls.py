"""
URL configuration for the intelligence app.
"""

from django.urls import path

from apps.intelligence.views import ProvidersListView

app_name = "intelligence"

urlpatterns = [
    path("providers/", ProvidersListView.as_view(), name="providers"),
]
