# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MarkupTree - Hierarchical markup trees built with several builder styles.

A lightweight, zero-dependency library showing construction patterns over
one in-memory element tree: a plain accretive builder, fluent chaining,
a factory entry point, a typed tag DSL and a faceted builder.
"""

__version__ = "0.1.0"

from .builder import ElementBuilder
from .element import INDENT_SIZE, Element
from .exceptions import (
    BuilderConsumedError,
    ConstructionError,
    InvalidShapeError,
    MarkupTreeError,
    OwnershipError,
    TagRegistrationError,
)
from .journal import Journal, PersistenceManager
from .person import (
    Person,
    PersonAddressBuilder,
    PersonBuilder,
    PersonJobBuilder,
)
from .tags import (
    Anchor,
    Div,
    Image,
    ListItem,
    Paragraph,
    Tag,
    UnorderedList,
)

__all__ = [
    # Tree
    "Element",
    "ElementBuilder",
    "INDENT_SIZE",
    # Tag DSL
    "Tag",
    "Paragraph",
    "Image",
    "Anchor",
    "Div",
    "UnorderedList",
    "ListItem",
    # Faceted builder
    "Person",
    "PersonBuilder",
    "PersonAddressBuilder",
    "PersonJobBuilder",
    # Single responsibility
    "Journal",
    "PersistenceManager",
    # Exceptions
    "MarkupTreeError",
    "BuilderConsumedError",
    "InvalidShapeError",
    "OwnershipError",
    "TagRegistrationError",
    "ConstructionError",
]
