"""SQL Functions — dialect-aware expressions used inside aggregate queries.

Invariants:
    - week_day(x) evaluates to an INTEGER in 0..6 with Sunday = 0 on every
      supported dialect, matching core.calendar.week_day_of()

Design Decisions:
    - Custom FunctionElement + @compiles over raw SQL strings: the summary
      query stays a composable Core statement on SQLite and PostgreSQL alike
    - The SQLite format string is a bound literal, so no paramstyle escaping
"""

from sqlalchemy import Integer, cast, extract, func, literal
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement


class week_day(FunctionElement):
    """Day of week of a date/timestamp column, Sunday = 0."""
    type = Integer()
    name = "week_day"
    inherit_cache = True


def _argument(element: week_day):
    return list(element.clauses)[0]


@compiles(week_day)
def _compile_week_day(element, compiler, **kw):
    # PostgreSQL and most server dialects: EXTRACT(DOW) is already Sunday = 0
    return compiler.process(cast(extract("dow", _argument(element)), Integer), **kw)


@compiles(week_day, "sqlite")
def _compile_week_day_sqlite(element, compiler, **kw):
    return compiler.process(
        cast(func.strftime(literal("%w"), _argument(element)), Integer), **kw,
    )
