import django_filters

from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    status = django_filters.NumberFilter(field_name="status", lookup_expr="exact")
    number = django_filters.NumberFilter(field_name="number", lookup_expr="exact")
    min_total = django_filters.NumberFilter(
        field_name="total_price", lookup_expr="gte"
    )
    max_total = django_filters.NumberFilter(
        field_name="total_price", lookup_expr="lte"
    )

    class Meta:
        model = Order
        fields = ["status", "number", "min_total", "max_total"]
