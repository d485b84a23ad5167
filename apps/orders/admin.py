from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ('cake', 'quantity', 'unit_price', 'total_price')

    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Orders are created by checkout only; the admin moves the status.
    """
    list_display = (
        'id',
        'customer_name',
        'customer_email',
        'status',
        'total_amount',
        'created_at'
    )
    list_filter = ('status', 'created_at')
    list_editable = ('status',)
    search_fields = ('id', 'customer_name', 'customer_email', 'customer_phone')

    inlines = [OrderItemInline]

    readonly_fields = (
        'id',
        'customer_name',
        'customer_email',
        'customer_phone',
        'delivery_address',
        'total_amount',
        'notes',
        'created_at',
        'updated_at',
    )

    fieldsets = (
        ('Order Details', {
            'fields': ('id', 'status', 'total_amount', 'notes')
        }),
        ('Customer', {
            'fields': ('customer_name', 'customer_email', 'customer_phone', 'delivery_address')
        }),
        ('System Data', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
