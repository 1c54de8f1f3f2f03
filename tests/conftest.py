import pytest

from sql_content import Catalog, SQLExample, SQLSection
from sql_data import build_catalog


class ManualScheduler:
    """Stands in for the run-loop timer: nothing fires until advance()."""

    class Handle:
        def __init__(self, due, fn):
            self.due = due
            self.fn = fn
            self.cancelled = False

        def cancel(self):
            self.cancelled = True

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def __call__(self, delay, fn):
        h = self.Handle(self.now + delay, fn)
        self.handles.append(h)
        return h

    def advance(self, seconds):
        self.now += seconds
        due = [h for h in self.handles if h.due <= self.now and not h.cancelled]
        self.handles = [h for h in self.handles if h not in due and not h.cancelled]
        for h in due:
            h.fn()

    @property
    def armed(self):
        return [h for h in self.handles if not h.cancelled]


@pytest.fixture(scope="session")
def catalog():
    return build_catalog()


@pytest.fixture
def small_catalog():
    return Catalog([
        SQLSection(
            title="Joins",
            description="Combine tables",
            examples=[SQLExample(code="SELECT * FROM a JOIN b ON a.id = b.a_id;", explanation="Inner join")],
            keywords=["join", "inner join"],
        ),
        SQLSection(
            title="Aggregates",
            examples=[SQLExample(code="SELECT COUNT(*) FROM t;", explanation="Count rows")],
            keywords=["count", "sum"],
        ),
        SQLSection(
            title="Windows",
            description=None,
            examples=[
                SQLExample(code="SELECT ROW_NUMBER() OVER (ORDER BY x) FROM t;"),
                SQLExample(code="SELECT 1;", explanation="Partition rows into frames"),
            ],
            keywords=["over"],
        ),
    ])


@pytest.fixture
def scheduler():
    return ManualScheduler()
