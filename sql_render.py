# sql_render.py
"""
Turn SearchViewModel state into styled text runs for the popover text view.

The shell maps each Run onto an attributed-string fragment (font by style,
yellow background when highlighted, link attribute when clickable). Keeping
this free of AppKit means the layout logic can be tested anywhere.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from sql_search import SearchViewModel

CHEVRON_EXPANDED = "▾"
CHEVRON_COLLAPSED = "▸"
INFO_MARK = "ⓘ"
COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"

TOGGLE = "toggle"
COPY = "copy"


@dataclass(frozen=True)
class Run:
    text: str
    style: str = "plain"
    highlight: bool = False
    link: Optional[str] = None


def toggle_link(section_id) -> str:
    return f"{TOGGLE}:{section_id}"


def copy_link(example_id) -> str:
    return f"{COPY}:{example_id}"


def parse_link(link) -> Tuple[Optional[str], Optional[int]]:
    """'toggle:3' -> ('toggle', 3). Anything unrecognised -> (None, None)."""
    if not link:
        return None, None
    action, _, raw_id = str(link).partition(":")
    if action not in (TOGGLE, COPY):
        return None, None
    try:
        return action, int(raw_id)
    except ValueError:
        return None, None


def _highlighted(vm: SearchViewModel, text: str, style: str, link: Optional[str] = None) -> List[Run]:
    return [Run(part, style, is_match, link) for part, is_match in vm.highlight(text) if part]


def render_section_header(vm: SearchViewModel, section) -> List[Run]:
    link = toggle_link(section.id)
    chevron = CHEVRON_EXPANDED if vm.is_expanded(section.id) else CHEVRON_COLLAPSED
    runs = [Run(chevron + " ", "title", False, link)]
    runs.extend(_highlighted(vm, section.title, "title", link))
    runs.append(Run(f"  {section.example_count}", "count", False, link))
    runs.append(Run("\n"))
    return runs


def render_section_body(vm: SearchViewModel, section, copied: Iterable[int] = ()) -> List[Run]:
    copied = set(copied)
    runs: List[Run] = []
    if section.description:
        runs.append(Run(section.description + "\n", "description"))
    for ex in section.examples:
        runs.append(Run(ex.code + "\n", "code"))
        label = COPIED_LABEL if ex.id in copied else COPY_LABEL
        runs.append(Run(label, "action", False, copy_link(ex.id)))
        runs.append(Run("\n"))
        if ex.explanation:
            runs.append(Run(INFO_MARK + " ", "explanation"))
            runs.extend(_highlighted(vm, ex.explanation, "explanation"))
            runs.append(Run("\n"))
    return runs


def render_sections(vm: SearchViewModel, copied: Iterable[int] = ()) -> List[Run]:
    """
    Full popover body: one header per filtered section, bodies for the expanded
    ones, or the no-results message. `copied` holds example ids currently
    showing copy feedback.
    """
    sections = vm.get_filtered_sections()
    if not sections:
        return [
            Run("No results found\n", "empty"),
            Run("Try a different search term\n", "plain"),
        ]

    copied = set(copied)
    runs: List[Run] = []
    for section in sections:
        runs.extend(render_section_header(vm, section))
        if vm.is_expanded(section.id):
            runs.extend(render_section_body(vm, section, copied))
        runs.append(Run("\n"))
    return runs


def runs_to_text(runs: Iterable[Run]) -> str:
    return "".join(r.text for r in runs)
