"""
Tabular container for the KWIC search system.

A Table is an ordered list of column names plus a list of row dicts. It is
used both for document tables and for match tables, so an empty result still
carries its column schema.
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

class Table:
    """Ordered columns with one dict per row."""

    def __init__(self, columns: Iterable[str], rows: Optional[Iterable[Mapping[str, Any]]] = None):
        self.columns = list(columns)
        self.rows = [dict(row) for row in rows] if rows is not None else []

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "Table":
        """Build a table from mappings; columns follow first-seen key order."""
        columns = []
        seen = set()
        rows = []
        for record in records:
            for key in record:
                if key not in seen:
                    seen.add(key)
                    columns.append(key)
            rows.append(record)
        return cls(columns, rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self.columns == other.columns and self.rows == other.rows

    def __repr__(self) -> str:
        return f"Table(columns={self.columns!r}, rows={len(self.rows)})"

    def column(self, name: str) -> List[Any]:
        """Return the values of one column, in row order."""
        if name not in self.columns:
            raise KeyError(name)
        return [row.get(name) for row in self.rows]

    def to_records(self) -> List[Dict[str, Any]]:
        """Return fresh row dicts with keys in column order."""
        return [{col: row.get(col) for col in self.columns} for row in self.rows]

    def to_lines(self, columns: Optional[List[str]] = None, sep: str = " ") -> List[str]:
        """Render each row as a single display string."""
        columns = columns or self.columns
        lines = []
        for row in self.rows:
            values = ["" if row.get(col) is None else str(row.get(col)) for col in columns]
            lines.append(sep.join(values))
        return lines
