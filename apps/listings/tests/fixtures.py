"""Test data shared by the listing, review and enquiry test suites."""

from __future__ import annotations

from decimal import Decimal

from apps.listings.models import Room
from apps.locations.models import Location


def create_locations(state: str = "Maharashtra", city: str = "Pune", area: str = "Kothrud"):
    state_obj = Location.objects.create(kind=Location.Kind.STATE, name=state)
    city_obj = Location.objects.create(kind=Location.Kind.CITY, name=city, parent=state_obj)
    area_obj = Location.objects.create(kind=Location.Kind.AREA, name=area, parent=city_obj)
    return state_obj, city_obj, area_obj


def create_room(state, city, area, **overrides) -> Room:
    fields = {
        "owner_name": "Ravi Kumar",
        "owner_mobile": "9123456780",
        "state": state,
        "city": city,
        "area": area,
        "pincode": "411038",
        "owner_price": Decimal("4500.00"),
        "horoo_price": Decimal("5000.00"),
        "property_name": "Ravi Residency",
        "horoo_name": "Cozy Room",
        "room_type": ["Single"],
        "available_for": ["Boys"],
        "is_show": True,
    }
    fields.update(overrides)
    return Room.objects.create(**fields)
