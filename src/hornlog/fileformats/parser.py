import logging

from lark import Transformer
from lark.exceptions import LarkError

from hornlog.core.exception import ParseError
from hornlog.core.logic import Predicate, Fact, Rule, make_term
from hornlog.fileformats.lexer import hornlexer


logger = logging.getLogger(__name__)

COMMENT_PREFIX = "%"


class HornConverter(Transformer):
    def arguments(self, children):
        return [make_term(str(token)) for token in children]

    def predicate(self, children):
        name = str(children[0])
        args = children[1] if len(children) > 1 else []
        return Predicate(name, args)

    def body(self, children):
        return list(children)

    def fact(self, children):
        return Fact(children[0])

    def rule(self, children):
        body = children[1] if len(children) > 1 else ()
        return Rule(children[0], body)

    def query(self, children):
        return children[0]


def _parse(text, start):
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {text!r}")
    try:
        tree = hornlexer.parse(text, start=start)
    except LarkError as e:
        raise ParseError(text.strip()) from e
    return HornConverter().transform(tree)


def parse_statement(text):
    """Parse a fact `p(a, b).` or a rule `h(X) :- b1(X), b2(X).`"""
    return _parse(text, "statement")


def parse_predicate(text):
    """Parse a single predicate, as used for queries."""
    return _parse(text, "query")


def iter_knowledge_text(text):
    """Yield one clause per non-blank, non-comment line.

    A line that fails to parse raises ParseError carrying its line number;
    clauses from earlier lines have already been yielded by then.
    """
    for number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        try:
            clause = parse_statement(line)
        except ParseError as e:
            raise ParseError(line, line=number) from e
        logger.debug("Parsed line %d: %s", number, clause)
        yield clause


def parse_knowledge_text(text):
    return list(iter_knowledge_text(text))
