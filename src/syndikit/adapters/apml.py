"""APML 0.6 adapter."""

from __future__ import annotations

from decimal import Decimal
import logging

from lxml import etree

from syndikit import namespaces as ns
from syndikit.adapters.base import DialectAdapter, Field
from syndikit.coercion import as_decimal, as_text, parse_rfc3339
from syndikit.detection import ContentFormat, parse_version
from syndikit.models.apml import (
    ApmlApplication,
    ApmlAuthor,
    ApmlConcept,
    ApmlDocument,
    ApmlHead,
    ApmlProfile,
    ApmlSource,
)

logger = logging.getLogger(__name__)


def _attention(raw: str | None) -> Decimal | None:
    """Attention values are normalised to the closed range -1..1."""

    value = as_decimal(raw)
    if value is None:
        return None
    if not Decimal(-1) <= value <= Decimal(1):
        logger.debug("Ignoring attention value %s outside -1..1", value)
        return None
    return value


_HEAD_FIELDS = (
    Field("apml:Title", "title"),
    Field("apml:Generator", "generator"),
    Field("apml:UserEmail", "email_address"),
    Field("apml:DateCreated", "created_on", parse_rfc3339),
)
_CONCEPT_FIELDS = (
    Field("@key", "key"),
    Field("@value", "value", _attention),
    Field("@from", "from_"),
    Field("@updated", "updated_on", parse_rfc3339),
)
_SOURCE_FIELDS = (
    Field("@key", "key"),
    Field("@name", "name"),
    Field("@value", "value", _attention),
    Field("@type", "mime_type"),
    Field("@from", "from_"),
    Field("@updated", "updated_on", parse_rfc3339),
)


class Apml06Adapter(DialectAdapter):
    format = ContentFormat.APML
    versions = ((0, 6),)
    namespaces = {"apml": ns.APML_06}
    native_namespaces = frozenset({ns.APML_06})
    target_types = (ApmlDocument,)

    def _fill(self, document: ApmlDocument) -> bool:
        root = self._locate("apml:APML")
        if root is None:
            return False
        document.version = parse_version(root.get("version"))

        head = self._select(root, "apml:Head")
        if head is not None:
            self._load_head(document.head, head)

        body = self._select(root, "apml:Body")
        if body is not None:
            default_profile = as_text(body.get("defaultprofile"))
            if default_profile is not None:
                document.default_profile_name = default_profile
            self._fill_collection(document.profiles, self._select_all(body, "apml:Profile"), self._build_profile)
            self._fill_collection(
                document.applications,
                self._select_all(body, "apml:Applications/apml:Application"),
                self._build_application,
            )

        self._fill_extensions(document, root)
        return True

    def _load_head(self, head: ApmlHead, element: etree._Element) -> None:
        self._fill_fields(head, element, _HEAD_FIELDS)
        self._fill_extensions(head, element)

    def _build_profile(self, element: etree._Element) -> ApmlProfile | None:
        profile = ApmlProfile(name=as_text(element.get("name")))
        loaded = profile.name is not None
        for section, concepts, sources in (
            ("apml:ImplicitData", profile.implicit_concepts, profile.implicit_sources),
            ("apml:ExplicitData", profile.explicit_concepts, profile.explicit_sources),
        ):
            data = self._select(element, section)
            if data is None:
                continue
            loaded |= self._fill_collection(
                concepts, self._select_all(data, "apml:Concepts/apml:Concept"), self._build_concept, limited=False
            )
            loaded |= self._fill_collection(
                sources, self._select_all(data, "apml:Sources/apml:Source"), self._build_source, limited=False
            )
        self._fill_extensions(profile, element)
        return profile if loaded or profile.has_extensions else None

    def _build_concept(self, element: etree._Element) -> ApmlConcept | None:
        concept = ApmlConcept()
        loaded = self._fill_fields(concept, element, _CONCEPT_FIELDS)
        self._fill_extensions(concept, element)
        return concept if loaded or concept.has_extensions else None

    def _build_author(self, element: etree._Element) -> ApmlAuthor | None:
        author = ApmlAuthor()
        loaded = self._fill_fields(author, element, _CONCEPT_FIELDS)
        self._fill_extensions(author, element)
        return author if loaded or author.has_extensions else None

    def _build_source(self, element: etree._Element) -> ApmlSource | None:
        source = ApmlSource()
        loaded = self._fill_fields(source, element, _SOURCE_FIELDS)
        loaded |= self._fill_collection(
            source.authors, self._select_all(element, "apml:Author"), self._build_author, limited=False
        )
        self._fill_extensions(source, element)
        return source if loaded or source.has_extensions else None

    def _build_application(self, element: etree._Element) -> ApmlApplication | None:
        application = ApmlApplication(name=as_text(element.get("name")))
        inner = (element.text or "") + "".join(
            etree.tostring(child, encoding="unicode") for child in element
        )
        application.data = as_text(inner)
        if application.name is None and application.data is None:
            return None
        return application
