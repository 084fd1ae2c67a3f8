# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Person - faceted builder example.

A Person has two independent groups of fields: where they live and where
they work. Each group has its own builder (a facet) and all facets write
into one shared draft, so a single fluent chain can jump between them:

    >>> person = (
    ...     Person.create()
    ...     .lives().at('123 London Road').with_postcode('SW1 1GB').in_city('London')
    ...     .works().at('PragmaSoft').as_a('Consultant').earning(10_000_000)
    ...     .build()
    ... )
    >>> person.city
    'London'

build() moves the draft out of the chain as an immutable Person. The chain
is then spent: every facet derived from the same create() call raises
BuilderConsumedError on further use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any

from .exceptions import BuilderConsumedError, ConstructionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, init=False)
class Person:
    """A finished person, produced by Person.create()...build()."""

    # address
    street_address: str = ''
    post_code: str = ''
    city: str = ''

    # employment
    company_name: str = ''
    position: str = ''
    annual_income: int = 0

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise ConstructionError(
            "Person cannot be instantiated directly; "
            "use Person.create()...build()"
        )

    @classmethod
    def _from_draft(cls, draft: _PersonDraft) -> Person:
        """Create a Person holding the values of draft."""
        person = object.__new__(cls)
        for f in fields(cls):
            object.__setattr__(person, f.name, getattr(draft, f.name))
        return person

    @staticmethod
    def create() -> PersonBuilder:
        """Start building a new Person."""
        return PersonBuilder()

    def __str__(self) -> str:
        return (
            f"street_address: {self.street_address} "
            f"post_code: {self.post_code} "
            f"city: {self.city} "
            f"company_name: {self.company_name} "
            f"position: {self.position} "
            f"annual_income: {self.annual_income}"
        )


@dataclass
class _PersonDraft:
    """Mutable Person under construction, shared by all facets of a chain."""

    street_address: str = ''
    post_code: str = ''
    city: str = ''
    company_name: str = ''
    position: str = ''
    annual_income: int = 0
    consumed: bool = False


class PersonBuilder:
    """Entry builder of a Person chain.

    Facet builders are subclasses, so lives(), works() and build() are
    available from any point of the chain.
    """

    __slots__ = ('_person',)

    def __init__(self, draft: _PersonDraft | None = None) -> None:
        """Initialize a PersonBuilder.

        Args:
            draft: Draft shared with the builder this facet was switched
                from. None starts a new Person.
        """
        self._person = draft if draft is not None else _PersonDraft()

    def __repr__(self) -> str:
        state = 'consumed' if self._person.consumed else 'building'
        return f"{type(self).__name__}(<{state}>)"

    @property
    def consumed(self) -> bool:
        """True once build() has been called anywhere on this chain."""
        return self._person.consumed

    def _draft(self) -> _PersonDraft:
        if self._person.consumed:
            raise BuilderConsumedError(
                "Person already built; start a new chain with Person.create()"
            )
        return self._person

    def lives(self) -> PersonAddressBuilder:
        """Switch to the address facet."""
        return PersonAddressBuilder(self._draft())

    def works(self) -> PersonJobBuilder:
        """Switch to the employment facet."""
        return PersonJobBuilder(self._draft())

    def build(self) -> Person:
        """Move the draft out as a Person and consume the chain.

        Raises:
            BuilderConsumedError: If the chain was already built.
        """
        draft = self._draft()
        draft.consumed = True
        logger.debug("Built Person from %s", type(self).__name__)
        return Person._from_draft(draft)


class PersonAddressBuilder(PersonBuilder):
    """Facet for the address fields."""

    __slots__ = ()

    def at(self, street_address: str) -> PersonAddressBuilder:
        self._draft().street_address = street_address
        return self

    def with_postcode(self, post_code: str) -> PersonAddressBuilder:
        self._draft().post_code = post_code
        return self

    def in_city(self, city: str) -> PersonAddressBuilder:
        self._draft().city = city
        return self


class PersonJobBuilder(PersonBuilder):
    """Facet for the employment fields."""

    __slots__ = ()

    def at(self, company_name: str) -> PersonJobBuilder:
        self._draft().company_name = company_name
        return self

    def as_a(self, position: str) -> PersonJobBuilder:
        self._draft().position = position
        return self

    def earning(self, annual_income: int) -> PersonJobBuilder:
        self._draft().annual_income = annual_income
        return self
