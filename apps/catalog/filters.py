import django_filters

from .models import Cake
from .services import CakeService


class CakeFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(method="filter_category")

    class Meta:
        model = Cake
        fields = ["category"]

    def filter_category(self, queryset, name, value):
        return queryset & CakeService.list_cakes_by_category(value)
