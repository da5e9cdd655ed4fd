"""Handler for line-oriented Horn clause knowledge files."""

from typing import Iterable, List

from hornlog.core.logic import Clause
from .base import FileFormat
from .parser import parse_knowledge_text


class HornFormat(FileFormat):
    """One fact or rule per line, `%` starts a comment line."""

    def parse_string(self, content: str) -> List[Clause]:
        return parse_knowledge_text(content)

    def format_knowledge(self, clauses: Iterable[Clause]) -> str:
        lines = [str(clause) for clause in clauses]
        return '\n'.join(lines) + '\n' if lines else ''

    @property
    def name(self) -> str:
        return 'horn'

    @property
    def extensions(self) -> List[str]:
        return ['.pl', '.horn', '.kb']
