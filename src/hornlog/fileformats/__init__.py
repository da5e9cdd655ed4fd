"""
Parsing and writing of facts, rules and queries.
"""

from .base import FileFormat
from .horn import HornFormat
from .parser import (
    parse_statement, parse_predicate,
    parse_knowledge_text, iter_knowledge_text
)
from .registry import FileFormatRegistry, get_format_handler

__all__ = [
    'FileFormat', 'HornFormat', 'FileFormatRegistry', 'get_format_handler',
    'parse_statement', 'parse_predicate',
    'parse_knowledge_text', 'iter_knowledge_text'
]
