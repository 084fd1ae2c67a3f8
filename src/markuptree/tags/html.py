# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML tag kinds for the tag DSL.

Each kind fixes its tag name and the construction shapes it accepts.
Shapes are part of the constructor signatures, so a type checker rejects
e.g. Image('a', 'b') and Python raises TypeError when it is called.

Example:
    Building a fragment::

        from markuptree.tags import Div, Image, Paragraph

        page = Div(
            Paragraph('Hello'),
            Image('http://pokemon.com/pikachu.png'),
        )
        print(page)

    renders as::

        <div>
          <p>
            Hello
          </p>
          <img src="http://pokemon.com/pikachu.png"/>
        </div>
"""

from __future__ import annotations

from typing import overload

from ..exceptions import InvalidShapeError
from .base import Tag


class Paragraph(Tag, tag='p'):
    """Paragraph: either a text paragraph or a container of tags.

        >>> Paragraph('Hello')
        >>> Paragraph(Paragraph('a'), Image('x.png'))
    """

    __slots__ = ()

    @overload
    def __init__(self, text: str, /) -> None: ...

    @overload
    def __init__(self, *children: Tag) -> None: ...

    def __init__(self, *content: str | Tag) -> None:
        if len(content) == 1 and isinstance(content[0], str):
            super().__init__(text=content[0])
            return
        if any(isinstance(item, str) for item in content):
            raise InvalidShapeError(
                "<p> takes either one text argument or child tags, not both"
            )
        super().__init__(children=content)


class Image(Tag, tag='img'):
    """Image: attribute-only leaf, always self-closing."""

    __slots__ = ()

    def __init__(self, url: str) -> None:
        super().__init__(attributes=[('src', url)])


class Anchor(Tag, tag='a'):
    """Link with text content and an href attribute."""

    __slots__ = ()

    def __init__(self, text: str, href: str) -> None:
        super().__init__(text=text, attributes=[('href', href)])


class Div(Tag, tag='div'):
    """Generic container, children only."""

    __slots__ = ()

    def __init__(self, *children: Tag) -> None:
        super().__init__(children=children)


class ListItem(Tag, tag='li'):
    """List item with text content."""

    __slots__ = ()

    def __init__(self, text: str) -> None:
        super().__init__(text=text)


class UnorderedList(Tag, tag='ul'):
    """Unordered list, children must be ListItem tags."""

    __slots__ = ()

    def __init__(self, *items: ListItem) -> None:
        for item in items:
            if not isinstance(item, ListItem):
                raise InvalidShapeError(
                    f"<ul> children must be <li> tags, got {type(item).__name__}"
                )
        super().__init__(children=items)
