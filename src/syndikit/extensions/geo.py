"""W3C Basic Geo (WGS84 lat/long) vocabulary."""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from syndikit.coercion import as_float
from syndikit.extensions.base import ExtensionIdentity, SyndicationExtension


@dataclass(slots=True)
class GeoContext:
    latitude: float | None = None
    longitude: float | None = None


class BasicGeocodingExtension(SyndicationExtension):
    identity = ExtensionIdentity(
        prefix="geo",
        namespace="http://www.w3.org/2003/01/geo/wgs84_pos#",
        version="1.0",
        documentation="https://www.w3.org/2003/01/geo/",
        name="Basic Geocoding",
        description="Latitude and longitude of the described resource.",
    )
    context_type = GeoContext

    def load(self, element: etree._Element) -> bool:
        context: GeoContext = self.context
        latitude = as_float(self._child_text(element, "lat"))
        longitude = as_float(self._child_text(element, "long"))
        if latitude is not None and -90.0 <= latitude <= 90.0:
            context.latitude = latitude
        if longitude is not None and -180.0 <= longitude <= 180.0:
            context.longitude = longitude
        return context.latitude is not None or context.longitude is not None

    def write_to(self, parent: etree._Element) -> None:
        if self.context.latitude is not None:
            self._append(parent, "lat", self.context.latitude)
        if self.context.longitude is not None:
            self._append(parent, "long", self.context.longitude)
