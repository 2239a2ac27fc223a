"""FilterSet definitions for the admin and public listing catalogues."""

from __future__ import annotations

import json

import django_filters  # type: ignore
from django.db import connections  # type: ignore
from django.db.models import Q  # type: ignore
from django_filters.constants import EMPTY_VALUES  # type: ignore

from .registry import ListingFamily


class ListMembershipFilter(django_filters.CharFilter):
    """Keeps rows whose JSON list field contains the given value."""

    def filter(self, qs, value):  # type: ignore
        if value in EMPTY_VALUES:
            return qs
        value = value.strip()
        if connections[qs.db].features.supports_json_field_contains:
            return qs.filter(**{f"{self.field_name}__contains": [value]})
        # SQLite: match the quoted element inside the stored JSON text
        return qs.filter(**{f"{self.field_name}__icontains": json.dumps(value)})


class ListingFilterSet(django_filters.FilterSet):
    """Filters shared by every family on the public catalogue."""

    search_fields: tuple[str, ...] = (
        "horoo_id",
        "property_name",
        "horoo_name",
        "nearby_areas",
        "pincode",
    )

    state = django_filters.NumberFilter(field_name="state_id")
    city = django_filters.NumberFilter(field_name="city_id")
    area = django_filters.NumberFilter(field_name="area_id")
    available_for = ListMembershipFilter(field_name="available_for")
    search = django_filters.CharFilter(method="filter_search")

    def filter_search(self, queryset, name, value):  # type: ignore
        term = (value or "").strip()
        if not term:
            return queryset
        query = Q()
        for field in self.search_fields:
            query |= Q(**{f"{field}__icontains": term})
        return queryset.filter(query)


class AdminListingFilterSet(ListingFilterSet):
    """Admin catalogue: owner contact search and visibility flags."""

    search_fields = (
        "horoo_id",
        "owner_name",
        "owner_mobile",
        "pincode",
        "property_name",
        "horoo_name",
        "nearby_areas",
    )

    availability = django_filters.BooleanFilter(field_name="availability")
    is_verified = django_filters.BooleanFilter(field_name="is_verified")
    is_show = django_filters.BooleanFilter(field_name="is_show")


def build_filterset(family: ListingFamily, base: type[ListingFilterSet]) -> type[ListingFilterSet]:
    """FilterSet of ``base`` bound to ``family`` plus its type-list filters."""

    attrs: dict = {name: ListMembershipFilter(field_name=name) for name in family.type_fields}
    attrs["Meta"] = type("Meta", (), {"model": family.model, "fields": []})
    return type(f"{family.model.__name__}{base.__name__}", (base,), attrs)
