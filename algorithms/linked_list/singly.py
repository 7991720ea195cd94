"""
singly.py — Singly Linked List
===============================
insert at head / tail, search, delete by value and in-place reversal.

Nodes get deterministic ids ("n0", "n1", …) in the order they were
allocated, so two runs on the same input draw identical lists.
`pointers` carries the Head / Curr / Prev / Next badges.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Set

from algorithms.step import LinkedListStep, ListNode


OPERATIONS = ("insert_head", "insert_tail", "search", "delete", "reverse")

PSEUDOCODE: List[str] = [
    "insert_head(v): node.next ← head; head ← node",         # 0
    "insert_tail(v): walk to last; last.next ← node",        # 1
    "search(v): curr ← head",                                # 2
    "    while curr: if curr.val == v: return curr",         # 3
    "delete(v): find prev of v; prev.next ← curr.next",      # 4
    "reverse(): prev ← None; curr ← head",                   # 5
    "    while curr: next ← curr.next; curr.next ← prev",    # 6
    "        prev ← curr; curr ← next",                      # 7
    "    head ← prev",                                       # 8
]


class _Chain:
    """Mutable working list; snap() copies it into a LinkedListStep."""

    def __init__(self, values: Sequence[int]):
        self.nodes: List[ListNode] = [ListNode(f"n{i}", v) for i, v in enumerate(values)]
        self.links: Dict[str, Optional[str]] = {
            node.id: (self.nodes[i + 1].id if i + 1 < len(self.nodes) else None)
            for i, node in enumerate(self.nodes)
        }
        self.head: Optional[str] = self.nodes[0].id if self.nodes else None
        self.deleted: Set[str] = set()
        self._by_id = {node.id: node for node in self.nodes}

    def allocate(self, value: int) -> ListNode:
        node = ListNode(f"n{len(self.nodes)}", value)
        self.nodes.append(node)
        self.links[node.id] = None
        self._by_id[node.id] = node
        return node

    def value(self, node_id: str) -> int:
        return self._by_id[node_id].value

    def walk(self) -> Iterator[str]:
        cur = self.head
        while cur is not None:
            yield cur
            cur = self.links[cur]

    def values(self) -> List[int]:
        return [self.value(nid) for nid in self.walk()]

    def snap(self, message: str, line_number: int, highlighted=(), **pointers: Optional[str]) -> LinkedListStep:
        badges: Dict[str, str] = {}
        if self.head is not None:
            badges[self.head] = "Head"
        for label, node_id in pointers.items():
            if node_id is None:
                continue
            label = label.capitalize()
            badges[node_id] = f"{badges[node_id]}/{label}" if node_id in badges else label
        return LinkedListStep(
            nodes=[n for n in self.nodes if n.id not in self.deleted],
            links={k: v for k, v in self.links.items() if k not in self.deleted},
            head=self.head,
            highlighted=highlighted,
            pointers=badges,
            message=message,
            line_number=line_number,
        )


def linked_list(operation: str, values: Sequence[int] = (), value: Optional[int] = None) -> Iterator[LinkedListStep]:
    op = str(operation).lower()
    chain = _Chain(list(values or []))

    if op not in OPERATIONS:
        yield chain.snap(f"Unknown operation {operation!r}; choose one of {', '.join(OPERATIONS)}.", 0)
        return
    if op != "reverse" and value is None:
        yield chain.snap(f"Operation '{op}' needs a value.", 0)
        return

    if op == "insert_head":
        yield from _insert_head(chain, value)
    elif op == "insert_tail":
        yield from _insert_tail(chain, value)
    elif op == "search":
        yield from _search(chain, value)
    elif op == "delete":
        yield from _delete(chain, value)
    else:
        yield from _reverse(chain)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------
def _insert_head(chain: _Chain, value: int) -> Iterator[LinkedListStep]:
    yield chain.snap(f"Insert {value} at the head.", 0)
    node = chain.allocate(value)
    yield chain.snap(f"Allocate node {node.id} holding {value}.", 0, highlighted=[node.id], new=node.id)
    chain.links[node.id] = chain.head
    yield chain.snap("Point the new node at the old head.", 0, highlighted=[node.id], new=node.id)
    chain.head = node.id
    yield chain.snap(f"Head now points to {value}. List: {chain.values()}.", 0, highlighted=[node.id])


def _insert_tail(chain: _Chain, value: int) -> Iterator[LinkedListStep]:
    yield chain.snap(f"Insert {value} at the tail.", 1)
    node = chain.allocate(value)
    if chain.head is None:
        chain.head = node.id
        yield chain.snap(f"The list was empty: {value} becomes the head.", 1, highlighted=[node.id])
        return

    cur = chain.head
    while chain.links[cur] is not None:
        yield chain.snap(f"{chain.value(cur)} is not the last node, move on.", 1, highlighted=[cur], curr=cur, new=node.id)
        cur = chain.links[cur]
    yield chain.snap(f"{chain.value(cur)} is the last node.", 1, highlighted=[cur], curr=cur, new=node.id)
    chain.links[cur] = node.id
    yield chain.snap(f"Link {chain.value(cur)} → {value}. List: {chain.values()}.", 1, highlighted=[node.id])


def _search(chain: _Chain, value: int) -> Iterator[LinkedListStep]:
    yield chain.snap(f"Search for {value} starting at the head.", 2)
    for index, cur in enumerate(chain.walk()):
        yield chain.snap(f"Node {index}: {chain.value(cur)} == {value}?", 3, highlighted=[cur], curr=cur)
        if chain.value(cur) == value:
            yield chain.snap(f"Found {value} at position {index}.", 3, highlighted=[cur], curr=cur)
            return
    yield chain.snap(f"Reached the end: {value} is not in the list.", 3)


def _delete(chain: _Chain, value: int) -> Iterator[LinkedListStep]:
    yield chain.snap(f"Delete the first node holding {value}.", 4)
    prev: Optional[str] = None
    for cur in list(chain.walk()):
        yield chain.snap(f"{chain.value(cur)} == {value}?", 4, highlighted=[cur], curr=cur, prev=prev)
        if chain.value(cur) == value:
            nxt = chain.links[cur]
            if prev is None:
                chain.head = nxt
                message = f"{value} was the head: head now points to the next node."
            else:
                chain.links[prev] = nxt
                message = f"Bypass {value}: {chain.value(prev)} now links past it."
            chain.links[cur] = None
            yield chain.snap(message, 4, highlighted=[prev] if prev else [], curr=cur)
            chain.deleted.add(cur)
            yield chain.snap(f"Deleted {value}. List: {chain.values()}.", 4)
            return
        prev = cur
    yield chain.snap(f"{value} is not in the list: nothing to delete.", 4)


def _reverse(chain: _Chain) -> Iterator[LinkedListStep]:
    if chain.head is None:
        yield chain.snap("The list is empty: nothing to reverse.", 5)
        return

    prev: Optional[str] = None
    cur:  Optional[str] = chain.head
    yield chain.snap("Reverse in place: prev = None, curr = head.", 5, curr=cur)

    while cur is not None:
        nxt = chain.links[cur]
        yield chain.snap(f"Save next = {chain.value(nxt) if nxt else 'None'}.", 6, highlighted=[cur], curr=cur, prev=prev, next=nxt)
        chain.links[cur] = prev
        yield chain.snap(f"Point {chain.value(cur)} back to {chain.value(prev) if prev else 'None'}.",
                         6, highlighted=[cur], curr=cur, prev=prev, next=nxt)
        prev, cur = cur, nxt
        yield chain.snap("Advance prev and curr.", 7, curr=cur, prev=prev)

    chain.head = prev
    yield chain.snap(f"Head ← prev. Reversed list: {chain.values()}.", 8)
