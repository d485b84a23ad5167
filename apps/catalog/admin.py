# apps/catalog/admin.py
from django.contrib import admin
from .models import Cake


@admin.register(Cake)
class CakeAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "category",
        "price",
        "is_available",
        "updated_at",
    )
    search_fields = ("name", "description", "category")
    list_filter = ("category", "is_available")
    list_editable = ("price", "is_available")
    readonly_fields = ("created_at", "updated_at")
