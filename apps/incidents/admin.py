"""Admin configuration for incidents app."""

from django.contrib import admin
from django.db import models as db_models
from django_json_widget.widgets import JSONEditorWidget

from apps.incidents.models import StoredValue


@admin.register(StoredValue)
class StoredValueAdmin(admin.ModelAdmin):
    """Admin for the raw stored incident collection."""

    list_display = ["key", "item_count", "updated_at"]
    search_fields = ["key"]
    readonly_fields = ["updated_at"]
    formfield_overrides = {db_models.JSONField: {"widget": JSONEditorWidget}}

    @admin.display(description="Items")
    def item_count(self, obj):
        return obj.item_count
