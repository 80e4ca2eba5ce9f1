"""
Unit tests for GraphStore.
"""

import pytest

from wikipath.graph import DuplicateNodeError, GraphStore, NameNotFoundError


class TestNodes:
    """Test name <-> id registration."""

    def test_ids_assigned_in_order(self):
        """Ids should be dense and follow insertion order."""
        store = GraphStore()
        assert [store.add_node(n) for n in ("X", "Y", "Z")] == [0, 1, 2]
        assert store.vertex_count() == 3
        assert len(store) == 3

    def test_name_and_id_roundtrip(self, directed_chain):
        """name_of and id_of should be inverse."""
        for idx in range(directed_chain.vertex_count()):
            assert directed_chain.id_of(directed_chain.name_of(idx)) == idx

    def test_names_in_id_order(self, directed_chain, chain_names):
        assert directed_chain.names() == chain_names

    def test_duplicate_name_rejected(self):
        """Re-adding a name should raise instead of orphaning an id."""
        store = GraphStore()
        store.add_node("Physics")
        with pytest.raises(DuplicateNodeError) as exc_info:
            store.add_node("Physics")
        assert exc_info.value.name == "Physics"
        assert store.vertex_count() == 1
        assert store.id_of("Physics") == 0

    def test_id_of_unknown_raises(self, directed_chain):
        """Unknown names should raise NameNotFoundError."""
        with pytest.raises(NameNotFoundError) as exc_info:
            directed_chain.id_of("Zzz")
        assert exc_info.value.name == "Zzz"

    def test_name_not_found_is_key_error(self, directed_chain):
        """Callers catching KeyError should still see the failure."""
        with pytest.raises(KeyError):
            directed_chain.id_of("Zzz")

    def test_name_of_invalid_index_raises(self, directed_chain):
        with pytest.raises(IndexError):
            directed_chain.name_of(-1)
        with pytest.raises(IndexError):
            directed_chain.name_of(5)

    def test_membership(self, directed_chain):
        assert directed_chain.has_node("A") is True
        assert "A" in directed_chain
        assert directed_chain.has_node("Zzz") is False
        assert "Zzz" not in directed_chain

    def test_unicode_and_special_names(self):
        """Names are opaque strings."""
        store = GraphStore()
        for name in ("日本", "Москва", "C++", "AC/DC", "Python (programming language)"):
            store.add_node(name)
        assert store.id_of("AC/DC") == 3
        assert store.name_of(1) == "Москва"


class TestEdges:
    """Test edge registration and neighbor enumeration."""

    def test_directed_edge_one_way(self, directed_chain):
        """A directed edge should only appear on its source."""
        a, b = directed_chain.id_of("A"), directed_chain.id_of("B")
        assert directed_chain.neighbors(a) == (b,)
        assert a not in directed_chain.neighbors(b)

    def test_undirected_edge_both_ways(self, undirected_chain):
        """An undirected store should register the reverse link."""
        a, b, c = (undirected_chain.id_of(n) for n in "ABC")
        assert undirected_chain.neighbors(a) == (b,)
        assert undirected_chain.neighbors(b) == (a, c)

    def test_neighbors_insertion_order(self):
        store = GraphStore()
        for name in "ABCD":
            store.add_node(name)
        store.add_edge(0, 3)
        store.add_edge(0, 1)
        store.add_edge(0, 2)
        assert store.neighbors(0) == (3, 1, 2)

    def test_neighbors_restartable(self, directed_chain):
        """Enumerating neighbors twice should give the same result."""
        b = directed_chain.id_of("B")
        assert list(directed_chain.neighbors(b)) == list(directed_chain.neighbors(b))

    def test_isolated_vertex_has_no_neighbors(self, undirected_chain):
        assert undirected_chain.neighbors(undirected_chain.id_of("E")) == ()

    def test_duplicate_edges_kept(self):
        store = GraphStore()
        store.add_node("A")
        store.add_node("B")
        store.add_edge(0, 1)
        store.add_edge(0, 1)
        assert store.neighbors(0) == (1, 1)
        assert store.edge_count() == 2

    def test_undirected_self_loop_added_once(self):
        store = GraphStore(undirected=True)
        store.add_node("A")
        store.add_edge(0, 0)
        assert store.neighbors(0) == (0,)

    def test_add_edge_invalid_index_raises(self, directed_chain):
        with pytest.raises(IndexError):
            directed_chain.add_edge(0, 99)
        with pytest.raises(IndexError):
            directed_chain.add_edge(-1, 0)

    def test_neighbors_invalid_index_raises(self, directed_chain):
        with pytest.raises(IndexError):
            directed_chain.neighbors(99)

    def test_edge_count_ignores_reverse_links(self, directed_chain, undirected_chain):
        assert directed_chain.edge_count() == 3
        assert undirected_chain.edge_count() == 3


class TestFromAdjacency:
    """Test rebuilding a store from complete adjacency lists."""

    def test_adjacency_taken_as_is(self):
        store = GraphStore.from_adjacency(["A", "B"], [[1], [0]], undirected=True, edge_count=1)
        assert store.neighbors(0) == (1,)
        assert store.neighbors(1) == (0,)
        assert store.undirected is True
        assert store.edge_count() == 1

    def test_edge_count_defaults_to_link_total(self):
        store = GraphStore.from_adjacency(["A", "B", "C"], [[1, 2], [], [0]])
        assert store.edge_count() == 3

    def test_size_mismatch_raises(self):
        with pytest.raises(ValueError):
            GraphStore.from_adjacency(["A", "B"], [[1]])

    def test_out_of_range_neighbor_raises(self):
        with pytest.raises(IndexError):
            GraphStore.from_adjacency(["A"], [[3]])


class TestValidation:
    """Test validation and stats methods."""

    def test_validate_all_pass(self, undirected_chain):
        validation = undirected_chain.validate()
        assert all(validation.values()), f"Failed checks: {validation}"

    def test_validate_empty_store(self):
        assert all(GraphStore().validate().values())

    def test_stats_directed(self, directed_chain):
        stats = directed_chain.stats()
        assert stats["vertices"] == 5
        assert stats["edges"] == 3
        assert stats["undirected"] is False
        assert stats["max_out_degree"] == 1
        assert stats["mean_out_degree"] == pytest.approx(3 / 5)
        # D and E have no outgoing links
        assert stats["sink_vertices"] == 2

    def test_stats_undirected(self, undirected_chain):
        stats = undirected_chain.stats()
        assert stats["max_out_degree"] == 2
        assert stats["mean_out_degree"] == pytest.approx(6 / 5)
        assert stats["sink_vertices"] == 1

    def test_stats_empty_store(self):
        stats = GraphStore().stats()
        assert stats["vertices"] == 0
        assert stats["max_out_degree"] == 0
        assert stats["mean_out_degree"] == 0.0
        assert stats["sink_vertices"] == 0

    def test_repr(self, undirected_chain):
        assert repr(undirected_chain) == "GraphStore(undirected, vertices=5, edges=3)"
