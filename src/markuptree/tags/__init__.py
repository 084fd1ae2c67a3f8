# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag DSL - typed tag kinds with attributes and self-closing rendering."""

from .base import Tag
from .html import Anchor, Div, Image, ListItem, Paragraph, UnorderedList

__all__ = [
    'Tag',
    'Paragraph',
    'Image',
    'Anchor',
    'Div',
    'ListItem',
    'UnorderedList',
]
