"""Base class for knowledge file format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List

from hornlog.core.logic import Clause


class FileFormat(ABC):
    """Abstract base class for file format handlers.

    File format handlers are responsible for:
    1. Parsing knowledge text into Fact and Rule objects
    2. Writing clauses back out in the same format
    """

    def parse_file(self, file_path: Path, **kwargs) -> List[Clause]:
        """Parse a file and return its clauses in file order.

        Raises:
            FileNotFoundError: If file doesn't exist
            ParseError: If any statement is invalid
        """
        with open(file_path, 'r') as f:
            return self.parse_string(f.read(), **kwargs)

    @abstractmethod
    def parse_string(self, content: str, **kwargs) -> List[Clause]:
        """Parse a string and return its clauses in order.

        Raises:
            ParseError: If content is invalid
        """
        pass

    def write_file(self, clauses: Iterable[Clause], file_path: Path, **kwargs) -> None:
        """Write clauses to a file."""
        with open(file_path, 'w') as f:
            f.write(self.format_knowledge(clauses, **kwargs))

    @abstractmethod
    def format_knowledge(self, clauses: Iterable[Clause], **kwargs) -> str:
        """Format clauses as a string."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this file format."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> List[str]:
        """Return list of file extensions this format handles."""
        pass
