"""
Batching utilities for the KWIC search system.

Splits a table into consecutive groups of rows, e.g. to keep each request to
a downstream annotation service small.
"""

from typing import List
from ..config.settings import DEFAULT_BATCH_SIZE, GROUP_COLUMN
from ..core.errors import InvalidArgumentError
from ..core.table import Table

def split_into_batches(table: Table, n_per_group: int = DEFAULT_BATCH_SIZE) -> List[Table]:
    """Split rows into groups of n_per_group; the remainder forms a last, shorter group."""
    if isinstance(n_per_group, bool) or not isinstance(n_per_group, int) or n_per_group <= 0:
        raise InvalidArgumentError(f"n_per_group must be a positive integer, got {n_per_group!r}")

    columns = list(table.columns)
    if GROUP_COLUMN not in columns:
        columns.append(GROUP_COLUMN)

    batches = []
    for start in range(0, len(table), n_per_group):
        group = start // n_per_group + 1
        rows = [{**row, GROUP_COLUMN: group} for row in table.rows[start:start + n_per_group]]
        batches.append(Table(columns, rows))
    return batches
