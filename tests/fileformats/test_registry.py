"""Tests for file format handlers and their registry."""

import tempfile
from pathlib import Path

import pytest

from hornlog.core.exception import ParseError
from hornlog.core.logic import Fact, Rule
from hornlog.fileformats import FileFormat, HornFormat, FileFormatRegistry, get_format_handler


KNOWLEDGE = """% family
parent(john, mary).
parent(mary, ann).
grandparent(X, Z) :- parent(X, Y), parent(Y, Z).
"""


class TestHornFormat:

    def test_properties(self):
        handler = HornFormat()
        assert isinstance(handler, FileFormat)
        assert handler.name == 'horn'
        assert '.pl' in handler.extensions

    def test_parse_string(self):
        clauses = HornFormat().parse_string(KNOWLEDGE)
        assert [type(c) for c in clauses] == [Fact, Fact, Rule]

    def test_format_knowledge(self):
        handler = HornFormat()
        clauses = handler.parse_string(KNOWLEDGE)
        assert handler.format_knowledge(clauses) == (
            "parent(john, mary).\n"
            "parent(mary, ann).\n"
            "grandparent(X, Z) :- parent(X, Y), parent(Y, Z).\n"
        )
        assert handler.format_knowledge([]) == ''

    def test_write_then_parse_file(self):
        handler = HornFormat()
        clauses = handler.parse_string(KNOWLEDGE)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "family.pl"
            handler.write_file(clauses, path)
            assert handler.parse_file(path) == clauses

    def test_empty_body_rule_survives_round_trip(self):
        handler = HornFormat()
        clauses = handler.parse_string("truth(X) :- .\ntruth(a).\n")
        assert [type(c) for c in clauses] == [Rule, Fact]
        assert handler.parse_string(handler.format_knowledge(clauses)) == clauses

    def test_parse_file_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.pl"
            path.write_text("parent(a, b).\nparent a\n")
            with pytest.raises(ParseError):
                HornFormat().parse_file(path)

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            HornFormat().parse_file(Path("/nonexistent/knowledge.pl"))


class TestRegistry:

    def test_get_by_name(self):
        assert isinstance(get_format_handler('horn'), HornFormat)
        assert isinstance(get_format_handler('HORN'), HornFormat)

    def test_get_by_extension(self):
        assert isinstance(get_format_handler(file_path=Path("family.kb")), HornFormat)
        assert isinstance(get_format_handler(file_path=Path("family.horn")), HornFormat)

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown file format"):
            get_format_handler('tptp')

    def test_unknown_extension(self):
        with pytest.raises(ValueError, match="No handler found"):
            get_format_handler(file_path=Path("family.json"))

    def test_requires_argument(self):
        with pytest.raises(ValueError):
            get_format_handler()

    def test_register_custom_format(self):
        class UpperHorn(HornFormat):
            @property
            def name(self):
                return 'upper'

            @property
            def extensions(self):
                return ['.up']

        registry = FileFormatRegistry()
        registry.register('Upper', UpperHorn)
        assert registry.list_formats() == ['horn', 'upper']
        assert isinstance(registry.get_handler_for_file(Path("x.up")), UpperHorn)
