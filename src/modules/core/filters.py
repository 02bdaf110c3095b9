"""Helpers that turn list query parameters into repository arguments.

Views keep ``django-filter`` FilterSets and DRF's ``OrderingFilter`` as
the description of what may be filtered and sorted, but hand the result
to the service layer as plain look-ups and an ordering tuple instead of
filtering a QuerySet themselves.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

import django_filters
from rest_framework.exceptions import ValidationError
from rest_framework.filters import OrderingFilter
from rest_framework.request import Request


def lookups_from_request(
    filterset_class: Type[django_filters.FilterSet], request: Request
) -> Dict[str, Any]:
    """Validate ``request.query_params`` against ``filterset_class``.

    Returns a dict of Django ORM look-ups for the supplied parameters.
    Raises ``ValidationError`` (400) when a parameter has a bad value.
    """
    model = filterset_class._meta.model
    filterset = filterset_class(
        request.query_params, queryset=model.objects.none(), request=request
    )
    if not filterset.is_valid():
        raise ValidationError(
            {
                field: [error["message"] for error in errors]
                for field, errors in filterset.errors.get_json_data().items()
            }
        )

    lookups: Dict[str, Any] = {}
    for name, value in filterset.form.cleaned_data.items():
        if value in (None, ""):
            continue
        declared = filterset.filters[name]
        lookups[f"{declared.field_name}__{declared.lookup_expr}"] = value
    return lookups


def ordering_from_request(request: Request, view: Any) -> Optional[List[str]]:
    """Return the ordering requested via ``?sort=a,-b`` or the view default.

    Unknown fields are dropped, following ``OrderingFilter`` semantics.
    """
    model = view.filterset_class._meta.model
    ordering = OrderingFilter().get_ordering(request, model.objects.none(), view)
    return list(ordering) if ordering else None
