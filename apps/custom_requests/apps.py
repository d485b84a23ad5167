# apps/custom_requests/apps.py

from django.apps import AppConfig


class CustomRequestsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.custom_requests"
    verbose_name = "Custom Cake Requests"
