"""BlogML 2.0 adapter."""

from __future__ import annotations

from typing import Any

from lxml import etree

from syndikit import namespaces as ns
from syndikit.adapters.base import DialectAdapter, Field
from syndikit.coercion import as_bool, as_int, as_text, as_uri, enum_by_value, parse_rfc3339
from syndikit.detection import ContentFormat, parse_version
from syndikit.models.blogml import (
    BlogMLApprovalStatus,
    BlogMLAttachment,
    BlogMLAuthor,
    BlogMLCategory,
    BlogMLComment,
    BlogMLCommonObject,
    BlogMLContentType,
    BlogMLDocument,
    BlogMLPost,
    BlogMLPostType,
    BlogMLTextConstruct,
    BlogMLTrackback,
)
from syndikit.navigation import string_value

_COMMON_FIELDS = (
    Field("@id", "id"),
    Field("@date-created", "created_on", parse_rfc3339),
    Field("@date-modified", "modified_on", parse_rfc3339),
    Field("@approved", "approval_status", lambda raw: enum_by_value(BlogMLApprovalStatus, raw)),
)
_AUTHOR_FIELDS = (Field("@email", "email_address"),)
_CATEGORY_FIELDS = (
    Field("@description", "description"),
    Field("@parentref", "parent_id"),
)
_COMMENT_FIELDS = (
    Field("@user-name", "user_name"),
    Field("@user-email", "user_email_address"),
    Field("@user-url", "user_url", as_uri),
)
_TRACKBACK_FIELDS = (Field("@url", "url", as_uri),)
_ATTACHMENT_FIELDS = (
    Field("@embedded", "is_embedded", as_bool),
    Field("@mime-type", "mime_type"),
    Field("@size", "size", as_int),
    Field("@external-uri", "external_uri", as_uri),
    Field("@url", "url", as_uri),
)
_POST_FIELDS = (
    Field("@post-url", "url", as_uri),
    Field("@type", "post_type", lambda raw: enum_by_value(BlogMLPostType, raw)),
    Field("@views", "views", as_int),
)


class BlogML20Adapter(DialectAdapter):
    format = ContentFormat.BLOGML
    versions = ((2, 0),)
    namespaces = {"blog": ns.BLOGML_20}
    native_namespaces = frozenset({ns.BLOGML_20})
    target_types = (BlogMLDocument,)

    def _fill(self, document: BlogMLDocument) -> bool:
        root = self._locate("blog:blog")
        if root is None:
            return False
        document.version = parse_version(root.get("version")) or self.versions[0]

        created_on = self._value(root, "@date-created", parse_rfc3339)
        if created_on is not None:
            document.created_on = created_on
        root_url = self._value(root, "@root-url", as_uri)
        if root_url is not None:
            document.root_url = root_url

        document.title = self._text(root, "blog:title") or document.title
        document.subtitle = self._text(root, "blog:sub-title") or document.subtitle

        self._fill_collection(
            document.authors,
            self._select_all(root, "blog:authors/blog:author"),
            lambda element: self._build(BlogMLAuthor(), element, _AUTHOR_FIELDS),
            limited=False,
        )
        for prop in self._select_all(root, "blog:extended-properties/blog:property"):
            name = as_text(prop.get("name"))
            value = as_text(prop.get("value"))
            if name is not None and value is not None and name not in document.extended_properties:
                document.extended_properties[name] = value
        self._fill_collection(
            document.categories,
            self._select_all(root, "blog:categories/blog:category"),
            lambda element: self._build(BlogMLCategory(), element, _CATEGORY_FIELDS),
            limited=False,
        )
        self._fill_collection(document.posts, self._select_all(root, "blog:posts/blog:post"), self._build_post)

        self._fill_extensions(document, root)
        return True

    def _text(self, element: etree._Element, path: str) -> BlogMLTextConstruct | None:
        child = self._select(element, path)
        if child is None:
            return None
        construct = BlogMLTextConstruct(content=as_text(string_value(child)))
        content_type = enum_by_value(BlogMLContentType, child.get("type"))
        if content_type is not None:
            construct.content_type = content_type
        self._fill_extensions(construct, child)
        return construct if construct.content is not None or construct.has_extensions else None

    def _load_common(self, target: BlogMLCommonObject, element: etree._Element) -> bool:
        loaded = self._fill_fields(target, element, _COMMON_FIELDS)
        title = self._text(element, "blog:title")
        if title is not None:
            target.title = title
            loaded = True
        return loaded

    def _build(self, target: Any, element: etree._Element, fields: tuple[Field, ...]) -> Any:
        loaded = self._load_common(target, element)
        loaded |= self._fill_fields(target, element, fields)
        if isinstance(target, BlogMLComment):
            content = self._text(element, "blog:content")
            if content is not None:
                target.content = content
                loaded = True
        self._fill_extensions(target, element)
        return target if loaded or target.has_extensions else None

    def _build_attachment(self, element: etree._Element) -> BlogMLAttachment | None:
        attachment = BlogMLAttachment()
        loaded = self._fill_fields(attachment, element, _ATTACHMENT_FIELDS)
        content = as_text(string_value(element))
        if content is not None:
            attachment.content = content
            loaded = True
        self._fill_extensions(attachment, element)
        return attachment if loaded or attachment.has_extensions else None

    def _build_post(self, element: etree._Element) -> BlogMLPost | None:
        post = BlogMLPost()
        loaded = self._load_common(post, element)
        loaded |= self._fill_fields(post, element, _POST_FIELDS)

        for path, attr in (("blog:content", "content"), ("blog:post-name", "name"), ("blog:excerpt", "excerpt")):
            construct = self._text(element, path)
            if construct is not None:
                setattr(post, attr, construct)
                loaded = True

        for path, references in (
            ("blog:categories/blog:category", post.categories),
            ("blog:authors/blog:author", post.authors),
        ):
            for reference in self._select_all(element, path):
                ref = as_text(reference.get("ref"))
                if ref is not None:
                    references.append(ref)
                    loaded = True

        loaded |= self._fill_collection(
            post.comments,
            self._select_all(element, "blog:comments/blog:comment"),
            lambda child: self._build(BlogMLComment(), child, _COMMENT_FIELDS),
            limited=False,
        )
        loaded |= self._fill_collection(
            post.trackbacks,
            self._select_all(element, "blog:trackbacks/blog:trackback"),
            lambda child: self._build(BlogMLTrackback(), child, _TRACKBACK_FIELDS),
            limited=False,
        )
        loaded |= self._fill_collection(
            post.attachments,
            self._select_all(element, "blog:attachments/blog:attachment"),
            self._build_attachment,
            limited=False,
        )

        self._fill_extensions(post, element)
        return post if loaded or post.has_extensions else None
