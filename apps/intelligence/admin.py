"""Admin configuration for intelligence app."""

import logging

from django.contrib import admin, messages
from django.db import models as db_models
from django_json_widget.widgets import JSONEditorWidget
from django_object_actions import DjangoObjectActions
from django_object_actions import action as object_action

from apps.intelligence.models import IntelligenceProvider

logger = logging.getLogger(__name__)

SMOKE_TEST_PROMPT = "Reply with one short sentence confirming you can draft incident updates."


@admin.register(IntelligenceProvider)
class IntelligenceProviderAdmin(DjangoObjectActions, admin.ModelAdmin):
    """Admin for the text-generation providers used for incident artifacts."""

    list_display = ["name", "provider", "is_active", "config_summary", "updated_at"]
    list_filter = ["provider", "is_active"]
    search_fields = ["name", "description"]
    readonly_fields = ["redacted_config", "created_at", "updated_at"]
    formfield_overrides = {db_models.JSONField: {"widget": JSONEditorWidget}}
    actions = ["activate_selected"]
    change_actions = ["activate", "test_generation"]
    fieldsets = [
        (None, {"fields": ["name", "provider", "is_active", "description"]}),
        ("Configuration", {"fields": ["config", "redacted_config"], "classes": ["collapse"]}),
        ("Timestamps", {"fields": ["created_at", "updated_at"]}),
    ]

    @admin.display(description="Config")
    def config_summary(self, obj):
        return ", ".join(f"{k}={v}" for k, v in obj.redacted_config.items()) or "-"

    @admin.action(description="Use selected provider for artifact generation")
    def activate_selected(self, request, queryset):
        if queryset.count() != 1:
            self.message_user(request, "Select exactly one provider.", level=messages.ERROR)
            return
        self.activate(request, queryset.get())

    @object_action(label="Activate", description="Use this provider for artifact generation")
    def activate(self, request, obj):
        obj.is_active = True
        obj.save()
        self.message_user(request, f"{obj.name} is now the active provider.")

    @object_action(label="Test generation", description="Send a short prompt to this provider")
    def test_generation(self, request, obj):
        try:
            text = obj.build_provider().generate(SMOKE_TEST_PROMPT, max_tokens=60)
        except Exception as e:
            logger.warning("Test generation failed for provider %s: %s", obj.name, e)
            self.message_user(request, f"{obj.name} failed: {e}", level=messages.ERROR)
            return
        self.message_user(request, f"{obj.name} replied: {text[:200]}")
