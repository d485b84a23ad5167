from django.contrib import admin
from .models import CustomCakeRequest


@admin.register(CustomCakeRequest)
class CustomCakeRequestAdmin(admin.ModelAdmin):
    list_display = ('id', 'customer_name', 'occasion', 'required_date', 'status', 'quoted_price', 'created_at')
    list_filter = ('status', 'occasion')
    list_editable = ('status', 'quoted_price')
    search_fields = ('customer_name', 'customer_email', 'cake_description')
    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        ('Customer', {
            'fields': ('customer_name', 'customer_email', 'customer_phone')
        }),
        ('Request', {
            'fields': (
                'cake_description', 'occasion', 'size', 'flavor_preferences',
                'design_preferences', 'budget_range', 'required_date'
            )
        }),
        ('Quote', {
            'fields': ('status', 'admin_notes', 'quoted_price')
        }),
        ('System Data', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
