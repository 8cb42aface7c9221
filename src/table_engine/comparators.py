"""Comparator registry and built-in orderings.

Every column carries its own ordering rule: nothing (natural order), the
name of a registered comparator, or a custom ``(value_a, value_b) -> int``
function. ``ComparatorRegistry.resolve`` turns that into a row comparator
operating on the column's resolved values.

``NO_VALUE`` is handled before the column's comparator ever runs: it
compares greater than any present value (or smaller, when
``settings.NO_VALUE_LAST`` is disabled), so custom comparators only ever see
real values.
"""

from __future__ import annotations

import locale
import logging
import re
from datetime import date, datetime, time, timezone
from numbers import Number, Real
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from config import settings

from .columns import NO_VALUE, ColumnDef, resolve_value
from .errors import ComparatorFault, ConfigurationError

log = logging.getLogger(__name__)

__all__ = [
    "ValueComparator",
    "RowComparator",
    "basic",
    "datetime_compare",
    "text",
    "text_case_sensitive",
    "alphanumeric",
    "fixed_order",
    "nested_field",
    "use_host_collation",
    "ComparatorRegistry",
    "default_registry",
]

ValueComparator = Callable[[Any, Any], int]
RowComparator = Callable[[Any, Any], int]


def _sign(result: Any) -> int:
    return (result > 0) - (result < 0)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _locale_compare(a: str, b: str, *, case_sensitive: bool = True) -> int:
    # Letters order by collation of the case-folded text first, so "apple" < "Banana"
    # even under the C locale; case only breaks ties
    result = _sign(locale.strcoll(a.casefold(), b.casefold()))
    if result == 0 and case_sensitive:
        result = _sign(locale.strcoll(a, b))
    if result == 0:
        # strcoll may collapse distinct strings; code points keep the order total
        result = _cmp(a.casefold(), b.casefold()) or _cmp(a, b)
    return result


def use_host_collation() -> None:
    """Adopt the host's ``LC_COLLATE`` for locale-aware string ordering.

    Python starts in the "C" locale; entry points call this once at startup.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        log.warning("Host collation locale unavailable (%s); using code point order", exc)


def _compare_missing(a: Any, b: Any) -> Optional[int]:
    a_missing = a is NO_VALUE
    b_missing = b is NO_VALUE
    if not (a_missing or b_missing):
        return None
    if a_missing and b_missing:
        return 0
    greater = 1 if settings.NO_VALUE_LAST else -1
    return greater if a_missing else -greater


# ----------------------------------------------------------------------
# Built-in value comparators
# ----------------------------------------------------------------------
def _to_instant(value: Any) -> float:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp()
    if isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        return _to_instant(datetime.fromisoformat(raw))
    if isinstance(value, Real) and not isinstance(value, bool):
        return float(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a point in time")


def datetime_compare(a: Any, b: Any) -> int:
    """Chronological order by instant; naive datetimes are taken as UTC."""
    return _cmp(_to_instant(a), _to_instant(b))


def basic(a: Any, b: Any) -> int:
    """Natural order: numeric, chronological, locale-aware lexical, else ``<``."""
    if isinstance(a, Number) and isinstance(b, Number):
        return _cmp(a, b)
    if isinstance(a, (date, datetime)) and isinstance(b, (date, datetime)):
        return datetime_compare(a, b)
    if isinstance(a, str) and isinstance(b, str):
        return _locale_compare(a, b)
    try:
        return _cmp(a, b)
    except TypeError:
        # Mixed types: numbers first, then grouped by type name
        fa = (0 if isinstance(a, Number) else 1, type(a).__name__)
        fb = (0 if isinstance(b, Number) else 1, type(b).__name__)
        return _cmp(fa, fb)


def text(a: Any, b: Any) -> int:
    return _locale_compare(str(a), str(b), case_sensitive=False)


def text_case_sensitive(a: Any, b: Any) -> int:
    return _locale_compare(str(a), str(b))


_DIGITS = re.compile(r"(\d+)")


def _alnum_chunks(value: Any) -> List[tuple]:
    chunks = []
    for part in _DIGITS.split(str(value).lower()):
        if not part:
            continue
        chunks.append((0, int(part), part) if part.isdigit() else (1, 0, part))
    return chunks


def alphanumeric(a: Any, b: Any) -> int:
    """Natural string order where digit runs compare numerically (``item2 < item10``)."""
    return _cmp(_alnum_chunks(a), _alnum_chunks(b))


def fixed_order(priority: Sequence[Any]) -> ValueComparator:
    """Order categorical values by their position in ``priority``.

    Values absent from the list compare greater than every listed value and
    equal to each other.
    """
    positions: Dict[Any, int] = {}
    for idx, item in enumerate(priority):
        positions.setdefault(item, idx)
    unlisted = len(positions)

    def compare(a: Any, b: Any) -> int:
        return _cmp(positions.get(a, unlisted), positions.get(b, unlisted))

    compare.__name__ = "fixed_order"
    return compare


def nested_field(path: str, *, case_sensitive: bool = True) -> ValueComparator:
    """Compare structured values by the string at ``path`` inside them.

    A missing sub-field follows the same rule as a missing cell value.
    """
    probe = ColumnDef(path)

    def compare(a: Any, b: Any) -> int:
        va = resolve_value(probe, a)
        vb = resolve_value(probe, b)
        missing = _compare_missing(va, vb)
        if missing is not None:
            return missing
        return _locale_compare(str(va), str(vb), case_sensitive=case_sensitive)

    compare.__name__ = f"nested_field[{path}]"
    return compare


# ----------------------------------------------------------------------
# Registry
# ----------------------------------------------------------------------
class ComparatorRegistry:
    """Maps columns to their ordering rule.

    The registry never needs editing to support a new ordering: columns may
    embed a callable directly, or callers may ``register`` a named rule.
    """

    BUILTINS: Dict[str, ValueComparator] = {
        "basic": basic,
        "datetime": datetime_compare,
        "text": text,
        "text_case_sensitive": text_case_sensitive,
        "alphanumeric": alphanumeric,
    }

    def __init__(self, extra: Iterable[tuple[str, ValueComparator]] = ()) -> None:
        self._named: Dict[str, ValueComparator] = dict(self.BUILTINS)
        for name, fn in extra:
            self.register(name, fn)

    def register(self, name: str, fn: ValueComparator, *, replace: bool = False) -> None:
        if not callable(fn):
            raise ConfigurationError(f"Comparator '{name}' is not callable")
        if name in self._named and not replace:
            raise ConfigurationError(f"Comparator '{name}' already registered")
        self._named[name] = fn

    def names(self) -> List[str]:
        return sorted(self._named)

    def get(self, name: str) -> ValueComparator:
        try:
            return self._named[name]
        except KeyError:
            raise ConfigurationError(f"Unknown comparator '{name}'") from None

    def value_comparator(self, col: ColumnDef) -> ValueComparator:
        spec = col.comparator
        if spec is None:
            return basic
        if isinstance(spec, str):
            return self.get(spec)
        if callable(spec):
            return spec
        raise ConfigurationError(f"Column '{col.id}': invalid comparator {spec!r}")

    def resolve(self, col: ColumnDef) -> RowComparator:
        """Return ``(row_a, row_b) -> -1|0|1`` over ``col``'s resolved values."""
        column_id = str(col.id)
        fn = self.value_comparator(col)

        def compare_rows(row_a: Any, row_b: Any) -> int:
            va = row_a.get_value(column_id)
            vb = row_b.get_value(column_id)
            missing = _compare_missing(va, vb)
            if missing is not None:
                return missing
            try:
                return _sign(fn(va, vb))
            except Exception as exc:
                log.error("Comparator for column %s raised %s", column_id, exc)
                raise ComparatorFault(column_id, exc) from exc

        return compare_rows


default_registry = ComparatorRegistry()
