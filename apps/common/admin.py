from __future__ import annotations

from django import forms
from django.contrib import admin

from .models import StoreConfig


class StoreConfigAdminForm(forms.ModelForm):
    class Meta:
        model = StoreConfig
        fields = "__all__"

    def clean(self):
        cleaned = super().clean()
        scope = cleaned.get("scope")
        scope_code = (cleaned.get("scope_code") or "").strip()

        # El scope "default" no lleva código; "store" lo exige.
        if scope == StoreConfig.Scope.DEFAULT:
            cleaned["scope_code"] = ""
        elif not scope_code:
            raise forms.ValidationError({"scope_code": "Indica el código de la tienda."})
        else:
            cleaned["scope_code"] = scope_code

        cleaned["path"] = (cleaned.get("path") or "").strip().strip("/")
        return cleaned


@admin.register(StoreConfig)
class StoreConfigAdmin(admin.ModelAdmin):
    form = StoreConfigAdminForm
    list_display = ("id", "path", "scope", "scope_code", "value", "updated_at")
    list_filter = ("scope",)
    search_fields = ("path", "value")
    readonly_fields = ("created_at", "updated_at")
