import pytest

from algorithms.hashing.chaining import chaining
from algorithms.hashing.open_addressing import EMPTY, TOMBSTONE, open_addressing
from algorithms.linked_list.singly import linked_list
from engine import materialize


# ---------------------------------------------------------------------------
# Open addressing
# ---------------------------------------------------------------------------
class TestOpenAddressing:
    def test_absent_key_in_full_table(self):
        seq = materialize(open_addressing("search", 4, table=[1, 2, 3]))
        not_found = [s for s in seq if "not found" in s.message]
        probes = [s for s in seq if s.line_number == 6]
        assert len(not_found) == 1
        assert not_found[0] is seq.last
        assert len(probes) <= 3
        assert seq.last.message == "Probed all 3 slots: key 4 not found."

    def test_absent_key_stops_at_empty_slot(self):
        seq = materialize(open_addressing("search", 23, table_size=10))
        assert len(seq) == 2
        assert seq.last.message == "Slot 3 is empty: key 23 not found."

    def test_insert_linear_probe(self):
        table = [EMPTY, 11, 21, EMPTY, EMPTY]
        last = materialize(open_addressing("insert", 31, table=table)).last
        assert last.slots == (EMPTY, 11, 21, 31, EMPTY)
        assert last.attempts == 3
        assert table[3] == EMPTY

    def test_delete_leaves_tombstone_that_search_skips(self):
        table = [EMPTY, 11, 21, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY]
        after_delete = list(materialize(open_addressing("delete", 11, table=table)).last.slots)
        assert after_delete[1] == TOMBSTONE

        last = materialize(open_addressing("search", 21, table=after_delete)).last
        assert last.message == "Found 21 at slot 2."

    def test_insert_reuses_tombstone(self):
        table = [EMPTY, TOMBSTONE, 21, EMPTY, EMPTY]
        last = materialize(open_addressing("insert", 6, table=table)).last
        assert last.slots[1] == 6
        assert last.line_number == 5

    def test_full_table_insert(self):
        last = materialize(open_addressing("insert", 9, table=[1, 2, 3])).last
        assert last.message == "Table full! Could not insert 9."

    @pytest.mark.parametrize("kwargs", [
        {"operation": "insert", "key": -3},
        {"operation": "insert", "key": 3, "table_size": 0},
        {"operation": "upsert", "key": 3},
    ])
    def test_invalid_requests(self, kwargs):
        assert len(materialize(open_addressing(**kwargs))) == 1


# ---------------------------------------------------------------------------
# Separate chaining
# ---------------------------------------------------------------------------
class TestChaining:
    BUCKETS = [[7], [8], [], [], [], [], []]

    def test_insert_appends_to_chain(self):
        last = materialize(chaining("insert", 15, buckets=self.BUCKETS)).last
        assert last.buckets[1] == (8, 15)
        assert last.active_node == (1, 1)
        assert self.BUCKETS[1] == [8]

    def test_search_missing(self):
        last = materialize(chaining("search", 22, buckets=self.BUCKETS)).last
        assert last.message == "Reached the end of bucket 1: key 22 not found."

    def test_delete(self):
        last = materialize(chaining("delete", 8, buckets=self.BUCKETS)).last
        assert last.buckets[1] == ()

    def test_empty_bucket(self):
        last = materialize(chaining("search", 3, table_size=7)).last
        assert last.message == "Bucket 3 is empty: key 3 not found."


# ---------------------------------------------------------------------------
# Singly linked list
# ---------------------------------------------------------------------------
def values_of(step):
    by_id = {node.id: node.value for node in step.nodes}
    out, cur = [], step.head
    while cur is not None:
        out.append(by_id[cur])
        cur = step.links[cur]
    return out


class TestLinkedList:
    def test_reverse(self):
        seq = materialize(linked_list("reverse", [1, 2, 3, 4]))
        assert values_of(seq.first) == [1, 2, 3, 4]
        assert values_of(seq.last) == [4, 3, 2, 1]
        assert seq.last.pointers[seq.last.head] == "Head"

    def test_insert_head(self):
        last = materialize(linked_list("insert_head", [1, 2], value=0)).last
        assert values_of(last) == [0, 1, 2]

    def test_insert_tail(self):
        last = materialize(linked_list("insert_tail", [1, 2], value=9)).last
        assert values_of(last) == [1, 2, 9]

    def test_insert_tail_into_empty_list(self):
        last = materialize(linked_list("insert_tail", [], value=5)).last
        assert values_of(last) == [5]

    def test_delete_removes_node(self):
        last = materialize(linked_list("delete", [1, 2, 3], value=2)).last
        assert values_of(last) == [1, 3]
        assert [n.value for n in last.nodes] == [1, 3]

    def test_delete_head(self):
        last = materialize(linked_list("delete", [1, 2], value=1)).last
        assert values_of(last) == [2]

    def test_search(self):
        seq = materialize(linked_list("search", [5, 6, 7], value=7))
        assert seq.last.message == "Found 7 at position 2."
        assert "Curr" in seq.last.pointers.values()

    def test_node_ids_are_deterministic(self):
        a = materialize(linked_list("reverse", [3, 1]))
        b = materialize(linked_list("reverse", [3, 1]))
        assert a == b
        assert [n.id for n in a.first.nodes] == ["n0", "n1"]

    def test_missing_value(self):
        seq = materialize(linked_list("search", [1], value=None))
        assert len(seq) == 1
