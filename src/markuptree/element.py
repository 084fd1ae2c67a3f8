# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element - a named node in an ordered markup tree.

An Element has a tag name, optional text and an ordered list of child
Elements it owns. Rendering walks the subtree depth-first, pre-order and
indents every nesting level by INDENT_SIZE spaces.

Example:
    >>> ul = Element('ul')
    >>> _ = ul.add_child('li', 'Hello').add_child('li', 'World')
    >>> print(ul.render(), end='')
    <ul>
      <li>
        Hello
      </li>
      <li>
        World
      </li>
    </ul>
"""

from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

from .exceptions import OwnershipError

if TYPE_CHECKING:
    from .builder import ElementBuilder


# Spaces per nesting level, shared by every node.
INDENT_SIZE = 2


class Element:
    """A node in an Element tree.

    Each node has:
    - name: The tag name (not validated, empty names pass through)
    - text: Leaf content, rendered on its own line when non-empty
    - children: Child Elements in insertion order
    - parent: The Element owning this one, or None for a root

    A node may carry both text and children: the text line is rendered
    first, then the child blocks.
    """

    __slots__ = ('name', 'text', 'children', 'parent')

    def __init__(self, name: str = '', text: str = '') -> None:
        """Initialize an Element.

        Args:
            name: The tag name.
            text: Optional text content.
        """
        self.name = name
        self.text = text
        self.children: list[Element] = []
        self.parent: Element | None = None

    def __repr__(self) -> str:
        return (
            f"Element({self.name!r}, text={self.text!r}, "
            f"children={len(self.children)})"
        )

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def build(root_name: str) -> ElementBuilder:
        """Return a new ElementBuilder for a root named root_name.

        Allows a single fluent expression starting from the tree type:

            >>> ul = Element.build('ul').add_child('li', 'First').build()
        """
        # Import here to avoid circular dependency
        from .builder import ElementBuilder

        return ElementBuilder(root_name)

    def add_child(self, name: str, text: str = '') -> Element:
        """Create a child and append it after the existing children.

        Returns:
            This element, so calls can be chained.
        """
        return self.append(Element(name, text))

    def append(self, element: Element) -> Element:
        """Append an already built element as the last child.

        The element becomes owned by this one: it must not have a parent
        yet and must not be this element or one of its ancestors.

        Returns:
            This element, so calls can be chained.

        Raises:
            OwnershipError: If element already has a parent or appending it
                would create a cycle.
        """
        if element.parent is not None:
            raise OwnershipError(
                f"<{element.name}> already belongs to <{element.parent.name}>"
            )
        ancestor: Element | None = self
        while ancestor is not None:
            if ancestor is element:
                raise OwnershipError(
                    f"<{element.name}> cannot be appended to itself "
                    f"or to one of its descendants"
                )
            ancestor = ancestor.parent

        element.parent = self
        self.children.append(element)
        return self

    def walk(self, depth: int = 0) -> Iterator[tuple[int, Element]]:
        """Yield (depth, element) pairs depth-first, pre-order."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def render(self, indent: int = 0) -> str:
        """Render this element and its subtree as indented text.

        Args:
            indent: Nesting level of this element.

        Returns:
            The rendered fragment, one newline after every line.
        """
        spaces = ' ' * (INDENT_SIZE * indent)
        lines = [f"{spaces}<{self.name}>\n"]

        if self.text:
            lines.append(f"{' ' * (INDENT_SIZE * (indent + 1))}{self.text}\n")

        for child in self.children:
            lines.append(child.render(indent + 1))

        lines.append(f"{spaces}</{self.name}>\n")
        return ''.join(lines)
