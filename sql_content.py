# sql_content.py
"""
Content model for the SQL cheat sheet: examples, sections and the catalog.

Everything here is immutable once built. Identifiers are small in-process
integers handed out at construction time; they only need to be unique inside
one running app (set membership for expand/collapse), never across processes.
"""
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

_example_ids = itertools.count(1)
_section_ids = itertools.count(1)


class CatalogError(ValueError):
    """Raised when a catalog is assembled from invalid sections."""


@dataclass(frozen=True)
class SQLExample:
    code: str
    explanation: Optional[str] = None
    is_multiline: bool = True
    id: int = field(default_factory=lambda: next(_example_ids), compare=False)


@dataclass(frozen=True)
class SQLSection:
    title: str
    examples: Tuple[SQLExample, ...]
    keywords: Tuple[str, ...] = ()
    description: Optional[str] = None
    id: int = field(default_factory=lambda: next(_section_ids), compare=False)

    def __post_init__(self):
        # accept lists from callers but store tuples so nothing mutates later
        object.__setattr__(self, "examples", tuple(self.examples))
        object.__setattr__(self, "keywords", tuple(self.keywords))

    @property
    def example_count(self) -> int:
        return len(self.examples)


class Catalog:
    """
    Ordered, read-only collection of sections.

    Built once at startup and handed to the search view model. Order is
    display order and is never changed.
    """

    def __init__(self, sections: Iterable[SQLSection]):
        items = tuple(sections)
        by_id: Dict[int, SQLSection] = {}
        for s in items:
            if not isinstance(s, SQLSection):
                raise CatalogError(f"catalog entries must be SQLSection, got {type(s).__name__}")
            if s.id in by_id:
                raise CatalogError(f"duplicate section id {s.id} ({s.title!r})")
            by_id[s.id] = s
        self._sections = items
        self._by_id = by_id
        self._examples = {ex.id: ex for s in items for ex in s.examples}
        logger.debug("Catalog built: %d sections, %d examples", len(items), len(self._examples))

    def __iter__(self) -> Iterator[SQLSection]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __getitem__(self, index):
        return self._sections[index]

    def __repr__(self) -> str:
        return f"Catalog({len(self._sections)} sections)"

    @property
    def sections(self) -> Tuple[SQLSection, ...]:
        return self._sections

    @property
    def section_ids(self) -> List[int]:
        return [s.id for s in self._sections]

    @property
    def example_count(self) -> int:
        return len(self._examples)

    def find(self, section_id: int) -> Optional[SQLSection]:
        return self._by_id.get(section_id)

    def find_example(self, example_id: int) -> Optional[SQLExample]:
        return self._examples.get(example_id)

    def is_subsequence(self, sections: Sequence[SQLSection]) -> bool:
        """True when `sections` appear in this catalog in the same relative order."""
        it = iter(self._sections)
        return all(any(s is c for c in it) for s in sections)
