# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Journal, PersistenceManager and the demo command line."""

import pytest

from markuptree import Journal, PersistenceManager
from markuptree.cli import DEMOS, main, parse_args


class TestJournal:
    """Tests for Journal."""

    def test_entries_numbered_from_one(self):
        """Test entries get a running number."""
        journal = Journal('My Journal')
        journal.add_entry('I cried today.')
        journal.add_entry('I ate a bug.')
        assert journal.entries == ['1: I cried today.', '2: I ate a bug.']

    def test_numbering_is_per_journal(self):
        """Test each journal counts its own entries."""
        Journal('a').add_entry('x')
        other = Journal('b')
        other.add_entry('y')
        assert other.entries == ['1: y']

    def test_repr(self):
        """Test string representation."""
        assert 'My Journal' in repr(Journal('My Journal'))


class TestPersistenceManager:
    """Tests for PersistenceManager."""

    def test_save_writes_one_line_per_entry(self, tmp_path):
        """Test each entry becomes one line."""
        journal = Journal('My Journal')
        journal.add_entry('I cried today.')
        journal.add_entry('I ate a bug.')

        path = PersistenceManager.save(journal, tmp_path / 'journal.txt')

        assert path == tmp_path / 'journal.txt'
        assert path.read_text() == "1: I cried today.\n2: I ate a bug.\n"

    def test_save_creates_parent_directories(self, tmp_path):
        """Test missing directories are created."""
        journal = Journal('j')
        journal.add_entry('x')
        path = PersistenceManager.save(journal, str(tmp_path / 'a' / 'b.txt'))
        assert path.read_text() == "1: x\n"

    def test_save_empty_journal(self, tmp_path):
        """Test an empty journal writes an empty file."""
        path = PersistenceManager.save(Journal('j'), tmp_path / 'empty.txt')
        assert path.read_text() == ''


class TestCli:
    """Tests for the demo command line."""

    def test_default_demos(self, capsys):
        """Test no argument runs the builder, tags and person demos."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "=== Approach 1: Traditional Builder ===" in out
        assert "=== Approach 3: Static Factory + Fluent ===" in out
        assert '<img src="http://pokemon.com/pikachu.png"/>' in out
        assert "city: London" in out
        assert "Single Responsibility" not in out

    def test_builder_demo_output(self, capsys):
        """Test the builder demo prints the rendered lists."""
        main(['builder'])
        out = capsys.readouterr().out
        assert "<ul>\n  <li>\n    Hello\n  </li>\n" in out
        assert "    Second\n" in out

    def test_journal_demo(self, tmp_path, capsys):
        """Test the journal demo writes the output file."""
        output = tmp_path / 'journal.txt'
        assert main(['journal', '--output', str(output)]) == 0
        assert output.read_text() == "1: I cried today.\n2: I ate a bug.\n"
        assert "Saved 2 entries" in capsys.readouterr().out

    def test_unknown_demo(self):
        """Test unknown demo names are rejected."""
        with pytest.raises(SystemExit):
            parse_args(['nope'])

    def test_verbose_flag(self):
        """Test --verbose is parsed."""
        assert parse_args(['-v', 'tags']).verbose is True

    def test_every_demo_takes_parsed_args(self, tmp_path, capsys):
        """Test all demos are called the same way from the dispatch table."""
        parsed = parse_args(['--output', str(tmp_path / 'out.txt')])
        for demo in DEMOS.values():
            demo(parsed)
        assert (tmp_path / 'out.txt').exists()
        assert "=== Tag DSL ===" in capsys.readouterr().out
