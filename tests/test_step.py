import dataclasses

import pytest

from algorithms.step import (
    STEP_FAMILIES,
    ArrayStep,
    BitRow,
    GraphStep,
    GridStep,
    LinkedListStep,
    ListNode,
)


class TestSnapshotIsolation:
    def test_mutating_the_source_list_does_not_change_the_step(self):
        buf = [3, 1, 2]
        step = ArrayStep(array=buf, comparing=[0, 1])
        buf[0] = 99
        assert step.array == (3, 1, 2)
        assert step.comparing == (0, 1)

    def test_nested_grid_is_deep_copied(self):
        grid = [[0, 0], [0, 0]]
        step = GridStep(grid=grid)
        grid[1][1] = 5
        assert step.grid == ((0, 0), (0, 0))

    def test_sets_become_sorted_tuples(self):
        step = GraphStep(visited={"C", "A", "B"})
        assert step.visited == ("A", "B", "C")

    def test_dict_fields_are_copied(self):
        dist = {"A": 0, "B": None}
        step = GraphStep(distances=dist)
        dist["B"] = 7
        assert step.distances == {"A": 0, "B": None}

    def test_range_is_frozen_to_tuple(self):
        assert ArrayStep(sorted=range(3)).sorted == (0, 1, 2)

    def test_steps_are_frozen(self):
        step = ArrayStep(array=[1])
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.message = "changed"

    @pytest.mark.parametrize("step,name", [
        (ArrayStep(labels={0: "L"}), "labels"),
        (GraphStep(distances={"A": 0}), "distances"),
        (GraphStep(adjacency={"A": ["B"]}), "adjacency"),
        (LinkedListStep(links={"n0": None}, pointers={"n0": "Head"}), "pointers"),
    ])
    def test_dict_fields_are_read_only(self, step, name):
        value = getattr(step, name)
        with pytest.raises(TypeError):
            value["x"] = "changed"
        assert "x" not in value

    def test_steps_are_hashable(self):
        a = GraphStep(adjacency={"A": ["B"]}, distances={"A": 0, "B": None})
        b = GraphStep(adjacency={"A": ["B"]}, distances={"A": 0, "B": None})
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1


class TestSerialisation:
    def test_to_dict_carries_family_and_lists(self):
        data = ArrayStep(array=[2, 1], labels={0: "L"}, message="m", line_number=3).to_dict()
        assert data["family"] == "array"
        assert data["array"] == [2, 1]
        assert data["labels"] == {"0": "L"}
        assert data["line_number"] == 3

    def test_linked_list_nodes_serialise(self):
        step = LinkedListStep(nodes=[ListNode("n0", 4)], links={"n0": None}, head="n0")
        data = step.to_dict()
        assert data["nodes"] == [{"id": "n0", "value": 4}]
        assert data["links"] == {"n0": None}

    def test_bit_row_renders_fixed_width(self):
        row = BitRow("a", "A", 5, 8, (0, 2))
        assert row.bits == "00000101"
        assert row.to_dict()["highlight"] == [0, 2]

    def test_every_family_is_registered(self):
        assert set(STEP_FAMILIES) == {
            "array", "linked_list", "grid", "graph", "string", "bit", "probing", "chaining",
        }
