# sql_search.py
"""
Search core for the SQL cheat sheet popover.

- filter_sections / matches_section: case-insensitive substring filter over the catalog
- highlight_spans: split a string into (substring, is_match) runs for display
- ExpansionState: which sections are shown expanded
- Debouncer: coalesce rapid query edits (last edit wins)
- SearchViewModel: explicit state object the menubar shell talks to

Nothing in here touches AppKit; the shell injects a scheduler for the debounce timer.
"""
import logging
from typing import Any, Callable, Iterable, List, Optional, Set, Tuple

from sql_content import Catalog, SQLSection

logger = logging.getLogger(__name__)

Span = Tuple[str, bool]

DEFAULT_DEBOUNCE_SECONDS = 0.1


# ---------------- Search engine ----------------
def matches_section(section: SQLSection, lower_query: str) -> bool:
    # first hit wins: title > description > keywords > code > explanation
    if lower_query in section.title.lower():
        return True
    if section.description and lower_query in section.description.lower():
        return True
    if any(lower_query in kw.lower() for kw in section.keywords):
        return True
    if any(lower_query in ex.code.lower() for ex in section.examples):
        return True
    if any(ex.explanation and lower_query in ex.explanation.lower() for ex in section.examples):
        return True
    return False


def filter_sections(catalog: Iterable[SQLSection], query: str) -> List[SQLSection]:
    """
    Return the sections matching `query`, in catalog order.

    Whitespace-only or empty queries return every section.
    """
    sections = list(catalog)
    q = (query or "").strip()
    if not q:
        return sections
    lower_query = q.lower()
    out = [s for s in sections if matches_section(s, lower_query)]
    logger.debug("filter %r -> %d/%d sections", q, len(out), len(sections))
    return out


def highlight_spans(text: str, query: str) -> List[Span]:
    """
    Split `text` into runs of (substring, is_match) for the trimmed `query`.

    Matching ignores case but the returned substrings keep the casing of `text`,
    and joining them gives back `text` unchanged. Never returns an empty list.
    """
    q = (query or "").strip()
    if not q or not text:
        return [(text, False)]

    needle = q.lower()
    # lower-case one character at a time; str.lower() can grow a character
    # (e.g. "İ"), so keep a map from lowered offsets back to text offsets
    pieces = [ch.lower() for ch in text]
    haystack = "".join(pieces)
    to_text = {0: 0}
    offset = 0
    for i, piece in enumerate(pieces, start=1):
        offset += len(piece)
        to_text[offset] = i

    spans: List[Span] = []
    last = 0
    pos = haystack.find(needle)
    while pos != -1:
        end = pos + len(needle)
        if pos in to_text and end in to_text:
            start_i, end_i = to_text[pos], to_text[end]
            if start_i > last:
                spans.append((text[last:start_i], False))
            spans.append((text[start_i:end_i], True))
            last = end_i
            pos = haystack.find(needle, end)
        else:
            # match splits a lowered character, it can't be shown as a span
            pos = haystack.find(needle, pos + 1)

    if not spans:
        return [(text, False)]
    if last < len(text):
        spans.append((text[last:], False))
    return spans


# ---------------- Expansion state ----------------
class ExpansionState:
    """Set of section ids currently shown expanded."""

    def __init__(self, expanded: Optional[Iterable[Any]] = None):
        self._expanded: Set[Any] = set(expanded or ())

    def toggle(self, section_id) -> bool:
        # unknown ids are fine, this is just set membership
        if section_id in self._expanded:
            self._expanded.discard(section_id)
            return False
        self._expanded.add(section_id)
        return True

    def is_expanded(self, section_id) -> bool:
        return section_id in self._expanded

    def on_query_changed(self, trimmed_query_empty: bool, new_filtered_ids: Iterable[Any]):
        if trimmed_query_empty:
            self._expanded.clear()
        else:
            # auto-expand every match, manual toggles are dropped
            self._expanded = set(new_filtered_ids)

    def clear(self):
        self._expanded.clear()

    @property
    def expanded_ids(self) -> frozenset:
        return frozenset(self._expanded)

    def __len__(self) -> int:
        return len(self._expanded)

    def __contains__(self, section_id) -> bool:
        return section_id in self._expanded


# ---------------- Debounce ----------------
Scheduler = Callable[[float, Callable[[], None]], Any]


class Debouncer:
    """
    Delay `callback(value)` until `delay` seconds pass without another submit.

    `scheduler(delay, fn)` arms a one-shot timer and may return a handle with a
    `cancel()` method. Without a scheduler the callback runs immediately.
    A generation counter drops superseded calls even when the handle can't be
    cancelled.
    """

    def __init__(self, delay: float, callback: Callable[[Any], None],
                 scheduler: Optional[Scheduler] = None):
        self.delay = delay
        self.callback = callback
        self.scheduler = scheduler
        self._generation = 0
        self._handle = None
        self._pending_value = None
        self._has_pending = False

    @property
    def pending(self) -> bool:
        return self._has_pending

    def submit(self, value):
        self.cancel()
        if self.scheduler is None:
            self.callback(value)
            return
        self._generation += 1
        gen = self._generation
        self._pending_value = value
        self._has_pending = True
        self._handle = self.scheduler(self.delay, lambda: self._fire(gen))

    def _fire(self, gen: int):
        if gen != self._generation or not self._has_pending:
            logger.debug("debounce: dropping superseded call (gen %d, current %d)", gen, self._generation)
            return
        value = self._pending_value
        self._reset()
        self.callback(value)

    def flush(self):
        """Run the pending call right away, if there is one."""
        if not self._has_pending:
            return
        value = self._pending_value
        self.cancel()
        self.callback(value)

    def cancel(self):
        if self._handle is not None:
            cancel = getattr(self._handle, "cancel", None)
            if callable(cancel):
                try:
                    cancel()
                except Exception:
                    logger.exception("debounce: timer cancel failed")
        if self._has_pending:
            # invalidate whatever is still armed
            self._generation += 1
        self._reset()

    def _reset(self):
        self._handle = None
        self._pending_value = None
        self._has_pending = False


class DelayedCall:
    """
    One-shot `fn()` after `delay` seconds, armed through `call_later(delay, cb)`.

    `call_later` is the run loop's delayed dispatch (AppHelper.callLater in the
    app); it can't be cancelled, so cancel() just disarms the callback.
    """

    def __init__(self, delay: float, fn: Callable[[], None],
                 call_later: Callable[[float, Callable[[], None]], Any]):
        self.delay = delay
        self._fn = fn
        self.cancelled = False
        self.fired = False
        call_later(delay, self._fire)

    def _fire(self):
        if self.cancelled or self.fired:
            return
        self.fired = True
        self._fn()

    def cancel(self):
        self.cancelled = True


def delayed_scheduler(call_later: Callable[[float, Callable[[], None]], Any]) -> Scheduler:
    """Adapt a run-loop `call_later` into a Debouncer scheduler."""
    def schedule(delay: float, fn: Callable[[], None]) -> DelayedCall:
        return DelayedCall(delay, fn, call_later)
    return schedule


# ---------------- View model ----------------
class SearchViewModel:
    """
    State behind the popover: query, filtered sections and expanded ids.

    The shell forwards events (query_changed / section_toggled / search_cleared)
    and re-reads state afterwards; listeners registered with add_listener are
    called after every change so it knows when to redraw.
    """

    def __init__(self, catalog: Catalog, debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
                 scheduler: Optional[Scheduler] = None):
        self.catalog = catalog
        self.query = ""
        self._applied_query = ""
        self._filtered: List[SQLSection] = list(catalog)
        self.expansion = ExpansionState()
        self._debouncer = Debouncer(debounce_seconds, self.apply_query, scheduler)
        self._listeners: List[Callable[["SearchViewModel"], None]] = []

    # ---- listeners ----
    def add_listener(self, fn: Callable[["SearchViewModel"], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in list(self._listeners):
            try:
                fn(self)
            except Exception:
                logger.exception("search listener failed")

    # ---- input events ----
    def query_changed(self, new_text: str):
        self.query = new_text or ""
        self._debouncer.submit(self.query)

    def section_toggled(self, section_id):
        if self.catalog.find(section_id) is None:
            logger.debug("toggle ignored for unknown section %s", section_id)
            return
        expanded = self.expansion.toggle(section_id)
        logger.debug("section %s %s", section_id, "expanded" if expanded else "collapsed")
        self._notify()

    def search_cleared(self):
        self._debouncer.cancel()
        self.query = ""
        logger.info("search cleared")
        self.apply_query("")

    def apply_query(self, text: str):
        """Recompute results for `text` now, skipping the debounce."""
        trimmed = (text or "").strip()
        self._applied_query = text or ""
        self._filtered = filter_sections(self.catalog, trimmed)
        self.expansion.on_query_changed(not trimmed, (s.id for s in self._filtered))
        self._notify()

    def flush(self):
        self._debouncer.flush()

    # ---- derived state ----
    def get_filtered_sections(self) -> List[SQLSection]:
        return list(self._filtered)

    @property
    def filtered_sections(self) -> List[SQLSection]:
        return self.get_filtered_sections()

    @property
    def expanded_section_ids(self) -> frozenset:
        return self.expansion.expanded_ids

    @property
    def has_results(self) -> bool:
        return bool(self._filtered)

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    def is_expanded(self, section_id) -> bool:
        return self.expansion.is_expanded(section_id)

    def highlight(self, text: str) -> List[Span]:
        # highlight against what was last applied so text and results agree
        return highlight_spans(text, self._applied_query)

    def results_label(self) -> str:
        if not self.query:
            return ""
        n = len(self._filtered)
        return f"{n} result{'' if n == 1 else 's'}"

    def footer_label(self) -> str:
        return f"{len(self.catalog)} sections • {self.catalog.example_count} examples"
