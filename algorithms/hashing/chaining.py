"""
chaining.py — Hash Table with Separate Chaining
================================================
Each bucket is a list; collisions append to the chain.  `active_node` is
(bucket, position in chain).
"""

from typing import Iterator, List, Optional, Sequence

from algorithms.step import ChainingStep


OPERATIONS = ("insert", "search", "delete")

DEFAULT_TABLE_SIZE = 7

PSEUDOCODE: List[str] = [
    "def chain_op(table, key):",                     # 0
    "    b ← key mod size",                          # 1
    "    for node in table[b]:",                     # 2
    "        if node == key: found (delete: unlink)",# 3
    "    insert: table[b].append(key)",              # 4
    "    else: not found",                           # 5
]


def chaining(
    operation: str,
    key: int,
    buckets: Optional[Sequence[Sequence[int]]] = None,
    table_size: int = DEFAULT_TABLE_SIZE,
) -> Iterator[ChainingStep]:
    op = str(operation).lower()
    if buckets is not None:
        table: List[List[int]] = [list(chain) for chain in buckets]
    elif isinstance(table_size, int) and table_size > 0:
        table = [[] for _ in range(table_size)]
    else:
        table = []
    size = len(table)

    if op not in OPERATIONS:
        yield ChainingStep(buckets=table, message=f"Unknown operation {operation!r}; use insert, search or delete.", line_number=0)
        return
    if size <= 0:
        yield ChainingStep(message="The table size must be positive.", line_number=0)
        return
    if isinstance(key, bool) or not isinstance(key, int) or key < 0:
        yield ChainingStep(buckets=table, message=f"Keys must be non-negative integers (got {key!r}).", line_number=0)
        return

    b = key % size
    yield ChainingStep(
        buckets=table, active_bucket=b, line_number=1,
        message=f"Hash({key}) = {key} mod {size} = {b}.",
    )

    chain = table[b]
    if op == "insert":
        if chain:
            yield ChainingStep(
                buckets=table, active_bucket=b, line_number=2,
                message=f"Collision: bucket {b} already holds {chain}. Append to the chain.",
            )
        chain.append(key)
        yield ChainingStep(
            buckets=table, active_bucket=b, active_node=(b, len(chain) - 1), line_number=4,
            message=f"Inserted {key} into bucket {b}.",
        )
        return

    if not chain:
        yield ChainingStep(
            buckets=table, active_bucket=b, line_number=5,
            message=f"Bucket {b} is empty: key {key} not found.",
        )
        return

    for pos, value in enumerate(chain):
        yield ChainingStep(
            buckets=table, active_bucket=b, active_node=(b, pos), line_number=2,
            message=f"Compare node {pos} ({value}) with {key}.",
        )
        if value == key:
            if op == "delete":
                del chain[pos]
                yield ChainingStep(
                    buckets=table, active_bucket=b, line_number=3,
                    message=f"Found {key}: unlink it from bucket {b}.",
                )
            else:
                yield ChainingStep(
                    buckets=table, active_bucket=b, active_node=(b, pos), line_number=3,
                    message=f"Found {key} in bucket {b} at position {pos}.",
                )
            return

    yield ChainingStep(
        buckets=table, active_bucket=b, line_number=5,
        message=f"Reached the end of bucket {b}: key {key} not found.",
    )
