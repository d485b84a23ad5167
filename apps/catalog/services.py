import logging

from django.db import transaction

from apps.utils.exceptions import NotFoundError
from .models import Cake

logger = logging.getLogger(__name__)


class CakeService:
    """
    Catalog reads and admin mutations.

    Reads never raise for a missing cake; get_cake() returns None and the
    caller decides whether absence is an error.
    """

    @staticmethod
    def list_cakes():
        return Cake.objects.all()

    @staticmethod
    def list_available_cakes():
        return Cake.objects.filter(is_available=True)

    @staticmethod
    def list_cakes_by_category(category: str):
        # Exact, case-sensitive match
        return Cake.objects.filter(category=category)

    @staticmethod
    def list_categories() -> list:
        return list(
            Cake.objects.order_by("category")
            .values_list("category", flat=True)
            .distinct()
        )

    @staticmethod
    def get_cake(cake_id):
        return Cake.objects.filter(pk=cake_id).first()

    @staticmethod
    def create_cake(data: dict) -> Cake:
        cake = Cake.objects.create(**data)
        logger.info(f"Cake {cake.pk} created in category '{cake.category}'")
        return cake

    @staticmethod
    @transaction.atomic
    def update_cake(cake_id, changes: dict) -> Cake:
        """
        Partial patch: only keys present in `changes` are written.
        updated_at is refreshed even when `changes` is empty.
        """
        cake = Cake.objects.select_for_update().filter(pk=cake_id).first()
        if cake is None:
            raise NotFoundError(f"Cake with id {cake_id} not found")

        for field, value in changes.items():
            setattr(cake, field, value)
        cake.save(update_fields=[*changes.keys(), "updated_at"])
        logger.info(f"Cake {cake.pk} updated: {', '.join(changes) or 'timestamp only'}", extra={"cake_id": cake.pk})
        return cake

    @staticmethod
    def delete_cake(cake_id) -> None:
        # Idempotent: a missing id is not an error
        deleted, _ = Cake.objects.filter(pk=cake_id).delete()
        if deleted:
            logger.info(f"Cake {cake_id} deleted")
