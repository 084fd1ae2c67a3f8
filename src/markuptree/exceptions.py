# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MarkupTree exceptions."""

from __future__ import annotations


class MarkupTreeError(Exception):
    """Base exception for MarkupTree errors."""

    pass


class BuilderConsumedError(MarkupTreeError):
    """Raised when a builder is used after build() handed out its result."""

    pass


class InvalidShapeError(MarkupTreeError, TypeError):
    """Raised when a tag kind is constructed with a shape it does not allow."""

    pass


class TagRegistrationError(MarkupTreeError):
    """Raised when two tag kinds claim the same tag name."""

    pass


class ConstructionError(MarkupTreeError, TypeError):
    """Raised when an aggregate is instantiated outside its builder."""

    pass


class OwnershipError(MarkupTreeError):
    """Raised when a node would get a second parent or become its own ancestor."""

    pass
