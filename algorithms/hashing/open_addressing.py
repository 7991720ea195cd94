"""
open_addressing.py — Hash Table with Linear Probing
====================================================
insert / search / delete on an open-addressing table, h(k) = k mod size.

Slot markers:
    EMPTY     (-1)  never used: a search or delete stops here
    TOMBSTONE (-2)  deleted: searches continue past it, inserts reuse it

Every operation probes at most `size` slots; after that it ends with a
terminal "table full" / "not found" Step.
"""

from typing import Iterator, List, Optional, Sequence

from algorithms.step import ProbingStep


EMPTY     = -1
TOMBSTONE = -2

OPERATIONS = ("insert", "search", "delete")

DEFAULT_TABLE_SIZE = 10

PSEUDOCODE: List[str] = [
    "def probe(table, key):",                            # 0
    "    i ← key mod size",                              # 1
    "    for attempt in 0..size-1:",                     # 2
    "        if table[i] is EMPTY: stop (insert here)",  # 3
    "        if table[i] == key: found",                 # 4
    "        if insert and table[i] is TOMBSTONE: reuse",# 5
    "        i ← (i + 1) mod size",                      # 6
    "    table full / not found",                        # 7
]


def _label(slot: int) -> str:
    if slot == EMPTY:
        return "empty"
    if slot == TOMBSTONE:
        return "a tombstone"
    return str(slot)


def open_addressing(
    operation: str,
    key: int,
    table: Optional[Sequence[int]] = None,
    table_size: int = DEFAULT_TABLE_SIZE,
) -> Iterator[ProbingStep]:
    op    = str(operation).lower()
    slots = list(table) if table is not None else (
        [EMPTY] * table_size if isinstance(table_size, int) and table_size > 0 else []
    )
    size  = len(slots)

    if op not in OPERATIONS:
        yield ProbingStep(slots=slots, message=f"Unknown operation {operation!r}; use insert, search or delete.", line_number=0)
        return
    if size <= 0:
        yield ProbingStep(message="The table size must be positive.", line_number=0)
        return
    if isinstance(key, bool) or not isinstance(key, int) or key < 0:
        yield ProbingStep(slots=slots, message=f"Keys must be non-negative integers (got {key!r}).", line_number=0)
        return
    if any(isinstance(s, bool) or not isinstance(s, int) or s < TOMBSTONE for s in slots):
        yield ProbingStep(slots=slots, message="Table slots must be keys ≥ 0, EMPTY (-1) or TOMBSTONE (-2).", line_number=0)
        return

    home = key % size
    yield ProbingStep(
        slots=slots, hash_index=home, probe_index=home, line_number=1,
        message=f"Hash({key}) = {key} mod {size} = {home}.",
    )

    index = home
    for attempt in range(1, size + 1):
        slot = slots[index]

        if op == "insert" and slot in (EMPTY, TOMBSTONE):
            slots[index] = key
            yield ProbingStep(
                slots=slots, hash_index=home, probe_index=index, active_index=index, attempts=attempt,
                line_number=5 if slot == TOMBSTONE else 3,
                message=f"Slot {index} is {_label(slot)}. Insert {key} there.",
            )
            return

        if op != "insert" and slot == EMPTY:
            yield ProbingStep(
                slots=slots, hash_index=home, probe_index=index, attempts=attempt, line_number=3,
                message=f"Slot {index} is empty: key {key} not found.",
            )
            return

        if op != "insert" and slot == key:
            if op == "delete":
                slots[index] = TOMBSTONE
                message = f"Found {key} at slot {index}. Mark it as a tombstone (-2)."
            else:
                message = f"Found {key} at slot {index}."
            yield ProbingStep(
                slots=slots, hash_index=home, probe_index=index, active_index=index, attempts=attempt,
                line_number=4, message=message,
            )
            return

        nxt = (index + 1) % size
        yield ProbingStep(
            slots=slots, hash_index=home, probe_index=index, attempts=attempt, line_number=6,
            message=f"Slot {index} holds {_label(slot)}. Probe slot {nxt}.",
        )
        index = nxt

    if op == "insert":
        message = f"Table full! Could not insert {key}."
    else:
        message = f"Probed all {size} slots: key {key} not found."
    yield ProbingStep(slots=slots, hash_index=home, attempts=size, line_number=7, message=message)
