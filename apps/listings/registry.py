"""Catalogue of listing families.

Maps each family to its model, its URL segment and the list fields its
filters match on. Reviews use the family ``key`` as their property type.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import Commercial, Flat, Hostel, HotelRoom, House, Listing, Mess, Room


@dataclass(frozen=True)
class ListingFamily:
    key: str
    model: type[Listing]
    url_segment: str
    type_fields: tuple[str, ...] = field(default_factory=tuple)
    # Room listings may omit names and the Horoo price; they get defaults.
    names_required: bool = True

    @property
    def label(self) -> str:
        return str(self.model._meta.verbose_name).capitalize()

    @property
    def prefix(self) -> str:
        return self.model.HOROO_ID_PREFIX

    @property
    def media_folder(self) -> str:
        return f"horoo-properties/{self.url_segment}"


ROOM = ListingFamily("Room", Room, "rooms", ("room_type",), names_required=False)
FLAT = ListingFamily("Flat", Flat, "flats", ("room_type", "flat_type"))
HOSTEL = ListingFamily("Hostel", Hostel, "hostels", ("room_type",))
HOTEL_ROOM = ListingFamily("HotelRoom", HotelRoom, "hotel-rooms", ("room_type",))
HOUSE = ListingFamily("House", House, "houses", ("house_type",))
COMMERCIAL = ListingFamily("Commercial", Commercial, "commercials", ("commercial_type",))
MESS = ListingFamily("Mess", Mess, "messes")

FAMILIES: tuple[ListingFamily, ...] = (ROOM, FLAT, HOSTEL, HOTEL_ROOM, HOUSE, COMMERCIAL, MESS)

_BY_KEY = {family.key: family for family in FAMILIES}
_BY_MODEL = {family.model: family for family in FAMILIES}

PROPERTY_TYPE_CHOICES = [(family.key, family.key) for family in FAMILIES]


def get_family(key: str) -> ListingFamily | None:
    return _BY_KEY.get(key)


def family_for_model(model: type[Listing]) -> ListingFamily:
    return _BY_MODEL[model]


def find_by_horoo_id(horoo_id: str) -> Listing | None:
    """Look a Horoo ID up across every family."""

    for family in FAMILIES:
        if horoo_id.upper().startswith(family.prefix):
            return family.model.objects.filter(horoo_id=horoo_id.upper()).first()
    return None
