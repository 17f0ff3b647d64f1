"""Really Simple Discovery adapters (0.6 and 1.0)."""

from __future__ import annotations

import logging

from lxml import etree

from syndikit import namespaces as ns
from syndikit.adapters.base import DialectAdapter, Field
from syndikit.coercion import as_bool, as_text, as_uri
from syndikit.detection import ContentFormat, parse_version
from syndikit.models.rsd import RsdApplicationInterface, RsdDocument
from syndikit.navigation import string_value

logger = logging.getLogger(__name__)

_SERVICE_FIELDS = (
    Field("rsd:engineName", "engine_name"),
    Field("rsd:engineLink", "engine_link", as_uri),
    Field("rsd:homePageLink", "homepage", as_uri),
)
_API_FIELDS = (
    Field("@name", "name"),
    Field("@preferred", "is_preferred", as_bool),
    Field("@apiLink", "link", as_uri),
    Field("@blogID", "blog_id"),
)
_SETTINGS_FIELDS = (
    Field("rsd:docs", "documentation", as_uri),
    Field("rsd:notes", "notes"),
)


def _strip_prefix(path: str) -> str:
    return path.replace("rsd:", "")


class _RsdAdapter(DialectAdapter):
    """Every path is tried with the RSD namespace first, then without it."""

    format = ContentFormat.RSD
    namespaces = {"rsd": ns.RSD}
    native_namespaces = frozenset({ns.RSD})
    target_types = (RsdDocument,)

    def _select(self, element: etree._Element, path: str) -> etree._Element | None:
        found = super()._select(element, path)
        if found is None and "rsd:" in path:
            found = super()._select(element, _strip_prefix(path))
        return found

    def _select_all(self, element: etree._Element, path: str) -> list[etree._Element]:
        found = super()._select_all(element, path)
        if not found and "rsd:" in path:
            found = super()._select_all(element, _strip_prefix(path))
        return found

    def _raw(self, element: etree._Element, path: str) -> str | None:
        value = super()._raw(element, path)
        if value is None and "rsd:" in path:
            value = super()._raw(element, _strip_prefix(path))
        return value

    def _locate(self, path: str) -> etree._Element | None:
        found = super()._locate(path)
        if found is None and "rsd:" in path:
            found = super()._locate(_strip_prefix(path))
        return found

    def _fill(self, document: RsdDocument) -> bool:
        root = self._locate("rsd:rsd")
        if root is None:
            return False
        document.version = parse_version(root.get("version"))

        service = self._select(root, "rsd:service")
        if service is not None:
            self._fill_fields(document, service, _SERVICE_FIELDS)
            self._fill_collection(document.interfaces, self._select_all(service, "rsd:apis/rsd:api"), self._build_api)

        self._fill_extensions(document, root)
        return True

    def _build_api(self, element: etree._Element) -> RsdApplicationInterface | None:
        api = RsdApplicationInterface()
        # Older engines publish the endpoint as rpcLink; apiLink wins when both exist.
        rpc_link = as_uri(element.get("rpcLink"))
        if rpc_link is not None:
            api.link = self._resolve(element, rpc_link)
        loaded = self._fill_fields(api, element, _API_FIELDS)

        settings = self._select(element, "rsd:settings")
        if settings is not None:
            loaded |= self._fill_fields(api, settings, _SETTINGS_FIELDS)
            for setting in self._select_all(settings, "rsd:setting"):
                name = as_text(setting.get("name"))
                value = as_text(string_value(setting))
                if name is None or value is None or name in api.settings:
                    continue
                api.settings[name] = value
                loaded = True

        self._fill_extensions(api, element)
        return api if loaded or api.link is not None or api.has_extensions else None


class Rsd06Adapter(_RsdAdapter):
    versions = ((0, 6),)


class Rsd10Adapter(_RsdAdapter):
    versions = ((1, 0),)
