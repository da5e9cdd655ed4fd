"""High-level entry points: knowledge ingestion and query answering."""

import logging
from pathlib import Path
from typing import Optional, Union

from hornlog.core.knowledge import KnowledgeBase
from hornlog.fileformats.parser import iter_knowledge_text, parse_knowledge_text, parse_predicate
from hornlog.fileformats.registry import get_format_handler
from hornlog.proofs.result import QueryResult
from hornlog.resolution.base import Strategy
from hornlog.resolution.resolver import Resolver, DEFAULT_STRATEGY
from hornlog.utils.config import Config, get_config


logger = logging.getLogger(__name__)


class Engine:
    """A knowledge base together with the resolver that answers queries on it.

    The knowledge base is injected (or created empty) and owned by the
    engine instance; separate engines never share state.
    """

    def __init__(self,
                 knowledge_base: Optional[KnowledgeBase] = None,
                 strategy: Union[str, Strategy] = DEFAULT_STRATEGY,
                 max_depth: Optional[int] = None,
                 atomic: bool = True):
        """
        Args:
            knowledge_base: Store to ingest into and query against
            strategy: Resolution strategy name or instance
            max_depth: Optional recursion limit for proof search
            atomic: If True a submission with any bad line adds nothing,
                otherwise the lines before the bad one are kept
        """
        self.knowledge_base = knowledge_base if knowledge_base is not None else KnowledgeBase()
        self.resolver = Resolver(strategy, max_depth)
        self.atomic = atomic

    @classmethod
    def from_config(cls,
                    config: Optional[Config] = None,
                    knowledge_base: Optional[KnowledgeBase] = None) -> 'Engine':
        config = config or get_config()
        return cls(
            knowledge_base=knowledge_base,
            strategy=config.get('resolution.strategy') or DEFAULT_STRATEGY,
            max_depth=config.get('resolution.max_depth'),
            atomic=bool(config.get('ingest.atomic', True)),
        )

    def add_knowledge(self, raw_text: str) -> int:
        """Parse facts and rules, one per line, and append them.

        Returns:
            Number of clauses added

        Raises:
            ParseError: If a non-blank line is not a valid statement
        """
        if self.atomic:
            clauses = parse_knowledge_text(raw_text)
            self.knowledge_base.extend(clauses)
            added = len(clauses)
        else:
            added = 0
            for clause in iter_knowledge_text(raw_text):
                self.knowledge_base.add(clause)
                added += 1
        logger.info("Knowledge added successfully! (%d clause(s), %d total)",
                    added, len(self.knowledge_base))
        return added

    def consult(self, file_path: Union[str, Path], format_name: Optional[str] = None) -> int:
        """Ingest a knowledge file, picking the handler by name or extension.

        Files are always ingested all-or-nothing.
        """
        file_path = Path(file_path)
        if format_name:
            handler = get_format_handler(format_name=format_name)
        else:
            handler = get_format_handler(file_path=file_path)
        clauses = handler.parse_file(file_path)
        self.knowledge_base.extend(clauses)
        logger.info("Consulted %s (%d clause(s))", file_path, len(clauses))
        return len(clauses)

    def resolve_query(self, raw_text: str) -> QueryResult:
        """Parse a query and prove it.

        Raises:
            ParseError: If the query is not a valid predicate. A query with
                no solutions is not an error; it yields an empty result.
        """
        query = parse_predicate(raw_text)
        return self.resolver.resolve_with_trace(query, self.knowledge_base)


def resolve_query(raw_text: str,
                  knowledge_base: KnowledgeBase,
                  strategy: str = DEFAULT_STRATEGY,
                  max_depth: Optional[int] = None) -> QueryResult:
    """Answer one query against an existing knowledge base."""
    return Engine(knowledge_base, strategy=strategy, max_depth=max_depth).resolve_query(raw_text)
