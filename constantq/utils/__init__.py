"""constantq.utils — Thread-pool helpers for row-parallel loops."""

from constantq.utils.parallel import (
    parallel_for_rows,
    resolve_workers,
    row_blocks,
)

__all__: list[str] = [
    "parallel_for_rows",
    "resolve_workers",
    "row_blocks",
]
