# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag - base class for the attributed tag DSL."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Iterable

from ..element import INDENT_SIZE
from ..exceptions import InvalidShapeError, OwnershipError, TagRegistrationError

logger = logging.getLogger(__name__)


class Tag:
    """Base class for typed markup tags.

    A tag kind is a subclass declaring its tag name as a class keyword.
    The kind's constructor signature fixes which shapes are legal for it
    (text only, children only, attributes only...):

        >>> class Heading(Tag, tag='h1'):
        ...     def __init__(self, text: str) -> None:
        ...         super().__init__(text=text)

    Every kind is registered in Tag.kinds (tag name -> class) when the
    class is created, so the set of kinds is closed over what has been
    imported. Rendering is shared by all kinds: attributes go inside the
    opening tag in insertion order, and a tag with neither text nor
    children is rendered self-closing.
    """

    __slots__ = ('text', 'children', 'attributes', 'parent')

    # Class-level dict mapping tag name -> kind
    kinds: ClassVar[dict[str, type[Tag]]] = {}

    name: ClassVar[str | None] = None

    def __init_subclass__(cls, tag: str | None = None, **kwargs: Any) -> None:
        """Register the subclass as the kind for tag."""
        super().__init_subclass__(**kwargs)
        if tag is None:
            return

        existing = Tag.kinds.get(tag)
        if existing is not None:
            raise TagRegistrationError(
                f"Tag '{tag}' is already defined by {existing.__name__}"
            )

        cls.name = tag
        Tag.kinds[tag] = cls
        logger.debug("Registered tag kind %s for <%s>", cls.__name__, tag)

    def __init__(
        self,
        text: str = '',
        children: Iterable[Tag] = (),
        attributes: Iterable[tuple[str, str]] = (),
    ) -> None:
        """Initialize a Tag.

        Only meant to be called by the kinds' own constructors.

        Args:
            text: Text content.
            children: Child tags, in order.
            attributes: (key, value) pairs, in order. Duplicates are kept.

        Raises:
            InvalidShapeError: If the class is not a registered kind or a
                child is not a Tag.
            OwnershipError: If a child already has a parent or is passed
                twice.
        """
        if self.name is None:
            raise InvalidShapeError(
                f"{type(self).__name__} is not a tag kind; "
                f"use one of: {', '.join(sorted(Tag.kinds))}"
            )

        children = list(children)
        for position, child in enumerate(children):
            if not isinstance(child, Tag):
                raise InvalidShapeError(
                    f"<{self.name}> children must be tags, "
                    f"got {type(child).__name__}"
                )
            if child.parent is not None:
                raise OwnershipError(
                    f"<{child.name}> already belongs to <{child.parent.name}>"
                )
            if any(other is child for other in children[:position]):
                raise OwnershipError(
                    f"<{child.name}> is passed to <{self.name}> more than once"
                )

        # Children are adopted only once all of them are known to be valid.
        for child in children:
            child.parent = self

        self.text = text
        self.children: list[Tag] = children
        self.parent: Tag | None = None
        self.attributes: list[tuple[str, str]] = list(attributes)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(text={self.text!r}, "
            f"children={len(self.children)}, attributes={self.attributes!r})"
        )

    def __str__(self) -> str:
        return self.render()

    @property
    def is_self_closing(self) -> bool:
        """True if the tag has neither text nor children."""
        return not self.children and not self.text

    def with_attribute(self, key: str, value: str) -> Tag:
        """Append an attribute pair and return this tag."""
        self.attributes.append((key, value))
        return self

    def render(self, indent: int = 0) -> str:
        """Render this tag and its subtree as indented text.

        Attribute values are emitted as given, without escaping.
        """
        spaces = ' ' * (INDENT_SIZE * indent)
        attrs = ''.join(f' {key}="{value}"' for key, value in self.attributes)

        if self.is_self_closing:
            return f"{spaces}<{self.name}{attrs}/>\n"

        lines = [f"{spaces}<{self.name}{attrs}>\n"]
        if self.text:
            lines.append(f"{' ' * (INDENT_SIZE * (indent + 1))}{self.text}\n")
        for child in self.children:
            lines.append(child.render(indent + 1))
        lines.append(f"{spaces}</{self.name}>\n")
        return ''.join(lines)
