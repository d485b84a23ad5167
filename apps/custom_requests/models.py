# apps/custom_requests/models.py
from django.db import models

from apps.utils.models import TimestampedModel


class CustomCakeRequest(TimestampedModel):
    """
    Free-form quote request for a cake that is not in the catalog.
    Independent of Cake and Order.

    quoted_price stays null until an admin quotes it (normally while the
    request is 'reviewed'); nothing enforces that ordering.
    """
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        REVIEWED = "reviewed", "Reviewed"
        QUOTED = "quoted", "Quoted"
        APPROVED = "approved", "Approved"
        IN_PROGRESS = "in_progress", "In Progress"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"

    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField()
    customer_phone = models.CharField(max_length=50)

    cake_description = models.TextField()
    occasion = models.CharField(max_length=255, null=True, blank=True)
    size = models.CharField(max_length=255, null=True, blank=True)
    flavor_preferences = models.TextField(null=True, blank=True)
    design_preferences = models.TextField(null=True, blank=True)
    budget_range = models.CharField(max_length=255, null=True, blank=True)
    required_date = models.DateTimeField(null=True, blank=True)

    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING, db_index=True)
    admin_notes = models.TextField(null=True, blank=True)
    quoted_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Request #{self.pk} from {self.customer_name} [{self.status}]"
