# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementBuilder - Builder pattern for Element trees."""

from __future__ import annotations

import logging

from .element import Element
from .exceptions import BuilderConsumedError

logger = logging.getLogger(__name__)


class ElementBuilder:
    """Accretive builder owning a single root Element.

    The same API serves three call styles:

    1. Sequential calls on a builder variable:

        >>> builder = ElementBuilder('ul')
        >>> builder.add_child('li', 'Hello')
        >>> builder.add_child('li', 'World')
        >>> print(builder.render())

    2. Chained calls (add_child returns the builder):

        >>> builder = ElementBuilder('ul')
        >>> builder.add_child('li', 'hello').add_child('li', 'world')

    3. Factory entry point on the tree type:

        >>> ul = Element.build('ul').add_child('li', 'First').build()

    build() hands the root over to the caller. After that the builder is
    spent and every further call raises BuilderConsumedError.
    """

    __slots__ = ('_root',)

    def __init__(self, root_name: str) -> None:
        """Initialize an ElementBuilder.

        Args:
            root_name: Name of the root element, fixed for the builder's life.
        """
        self._root: Element | None = Element(root_name)

    def __repr__(self) -> str:
        if self._root is None:
            return "ElementBuilder(<consumed>)"
        return (
            f"ElementBuilder({self._root.name!r}, "
            f"children={len(self._root.children)})"
        )

    def __str__(self) -> str:
        return self.render()

    @property
    def consumed(self) -> bool:
        """True once build() has returned the root."""
        return self._root is None

    @property
    def root_name(self) -> str:
        """Name of the root element, fixed at construction."""
        return self._require_root().name

    @property
    def child_count(self) -> int:
        """Number of children added to the root so far."""
        return len(self._require_root().children)

    def _require_root(self) -> Element:
        if self._root is None:
            raise BuilderConsumedError(
                "ElementBuilder already built; create a new builder"
            )
        return self._root

    def add_child(self, name: str, text: str = '') -> ElementBuilder:
        """Append a child to the root.

        Args:
            name: Tag name of the child.
            text: Optional text content of the child.

        Returns:
            This builder, for chaining.

        Raises:
            BuilderConsumedError: If build() was already called.
        """
        self._require_root().add_child(name, text)
        return self

    def render(self) -> str:
        """Render the root built so far."""
        return self._require_root().render()

    def build(self) -> Element:
        """Return the finished root and consume the builder.

        Raises:
            BuilderConsumedError: If build() was already called.
        """
        root = self._require_root()
        self._root = None
        logger.debug(
            "Built element %r with %d children", root.name, len(root.children)
        )
        return root
