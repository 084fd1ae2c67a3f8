# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line demos of the construction patterns.

Usage:
    markuptree                    # builder, tags and person demos
    markuptree builder tags       # selected demos
    markuptree journal --output journal.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from .builder import ElementBuilder
from .element import Element
from .journal import Journal, PersistenceManager
from .person import Person
from .tags import Div, Image, Paragraph

DEFAULT_DEMOS = ('builder', 'tags', 'person')


def demo_builder(parsed: argparse.Namespace) -> None:
    """Print the three ways of driving an ElementBuilder."""
    print("=== Approach 1: Traditional Builder ===")
    builder = ElementBuilder('ul')
    builder.add_child('li', 'Hello')
    builder.add_child('li', 'World')
    print(builder.render())

    print("=== Approach 2: Fluent Interface ===")
    fluent_builder = ElementBuilder('ul')
    fluent_builder.add_child('li', 'hello').add_child('li', 'world')
    print(fluent_builder.render())

    print("=== Approach 3: Static Factory + Fluent ===")
    element = (
        Element.build('ul')
        .add_child('li', 'First')
        .add_child('li', 'Second')
        .build()
    )
    print(element.render())


def demo_tags(parsed: argparse.Namespace) -> None:
    """Print a fragment built with the tag DSL."""
    print("=== Tag DSL ===")
    fragment = Div(
        Paragraph('Hello'),
        Image('http://pokemon.com/pikachu.png'),
    )
    print(fragment.render())


def demo_person(parsed: argparse.Namespace) -> None:
    """Print a Person built through its facets."""
    print("=== Faceted Builder ===")
    person = (
        Person.create()
        .lives().at('123 London Road').with_postcode('SW1 1GB').in_city('London')
        .works().at('PragmaSoft').as_a('Consultant').earning(10_000_000)
        .build()
    )
    print(person)
    print()


def demo_journal(parsed: argparse.Namespace) -> None:
    """Save a small journal to the --output file."""
    print("=== Single Responsibility ===")
    journal = Journal('My Journal')
    journal.add_entry('I cried today.')
    journal.add_entry('I ate a bug.')
    path = PersistenceManager.save(journal, parsed.output)
    print(f"Saved {len(journal.entries)} entries to {path}")
    print()


DEMOS = {
    'builder': demo_builder,
    'tags': demo_tags,
    'person': demo_person,
    'journal': demo_journal,
}


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='markuptree',
        description='Demonstrate builder patterns over a markup tree',
    )

    parser.add_argument(
        'demos',
        nargs='*',
        metavar='DEMO',
        help=f"Demos to run: {', '.join(sorted(DEMOS))} "
             f"(default: {' '.join(DEFAULT_DEMOS)})",
    )

    parser.add_argument(
        '--output',
        '-o',
        default='journal.txt',
        help='File written by the journal demo (default: journal.txt)',
    )

    parser.add_argument(
        '--verbose',
        '-v',
        action='store_true',
        help='Log construction events to stderr',
    )

    parsed = parser.parse_args(args)

    unknown = [name for name in parsed.demos if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")

    return parsed


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    if parsed.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(levelname)s %(name)s: %(message)s',
            stream=sys.stderr,
        )

    for name in parsed.demos or DEFAULT_DEMOS:
        DEMOS[name](parsed)

    return 0
