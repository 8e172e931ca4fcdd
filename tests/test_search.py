"""
Tests for the BreadthFirst and BestFirst ("A*") search algorithms.
"""

from collections import OrderedDict

import pytest

from bucketsearch.core.methods.path_utils import append, path_states
from bucketsearch.search import ALGORITHMS, AStar, BestFirst, BreadthFirst, SearchAlgorithm

from search_helpers import assert_valid_path, make_node, shortest_length


ALL_STATES_4_3 = [(a, b) for a in range(5) for b in range(4)]


@pytest.fixture(params=[BreadthFirst, BestFirst], ids=['BFS', 'AS'])
def algorithm(request):
    return request.param()


def test_algorithm_registry():
    assert ALGORITHMS == {'BFS': BreadthFirst, 'AS': BestFirst}
    assert AStar is BestFirst
    assert isinstance(BreadthFirst(), SearchAlgorithm)
    with pytest.raises(TypeError):
        SearchAlgorithm()


def test_reaches_two_gallons(algorithm, caps):
    path = algorithm.execute(make_node(caps, (0, 0)), make_node(caps, (2, 0)))
    assert path is not None
    assert_valid_path(caps, path, (0, 0), (2, 0))


def test_breadth_first_path_is_shortest(caps):
    path = BreadthFirst().execute(make_node(caps, (0, 0)), make_node(caps, (2, 0)))
    assert path_states(path) == [(0, 0), (0, 3), (3, 0), (3, 3), (4, 2), (0, 2), (2, 0)]


def test_breadth_first_never_longer_than_best_first(caps):
    root, target = make_node(caps, (0, 0)), make_node(caps, (2, 0))
    bfs_path = BreadthFirst().execute(root, target)
    astar_path = BestFirst().execute(root, target)
    assert len(bfs_path) <= len(astar_path)


def test_unreachable_target(algorithm):
    caps = (2, 2)
    assert algorithm.execute(make_node(caps, (0, 0)), make_node(caps, (1, 1))) is None


def test_root_is_target(algorithm, caps):
    root = make_node(caps, (0, 0))
    path = algorithm.execute(root, make_node(caps, (0, 0)))
    assert path == [root]
    assert path[0] is root
    assert algorithm.nodes_expanded == 1


def test_root_is_target_breeds_nothing(caps):
    bfs = BreadthFirst()
    bfs.execute(make_node(caps, (1, 1)), make_node(caps, (1, 1)))
    assert len(bfs.discovered) == 1

    astar = BestFirst()
    astar.execute(make_node(caps, (1, 1)), make_node(caps, (1, 1)))
    assert len(astar.frontier) == 0


def test_target_compared_by_state_only(algorithm):
    root = make_node((4, 3), (0, 0))
    target = make_node((9, 9), (2, 0))
    path = algorithm.execute(root, target)
    assert path[-1].state == (2, 0)
    assert (path[-1].a.capacity, path[-1].b.capacity) == (4, 3)


@pytest.mark.parametrize("caps", [(4, 3), (2, 2), (5, 3)])
def test_strategies_agree_on_reachability(caps):
    bfs, astar = BreadthFirst(), BestFirst()
    for a in range(caps[0] + 1):
        for b in range(caps[1] + 1):
            root, target = make_node(caps, (0, 0)), make_node(caps, (a, b))
            bfs_path = bfs.execute(root, target)
            astar_path = astar.execute(root, target)
            assert (bfs_path is None) == (astar_path is None), (a, b)


@pytest.mark.parametrize("target", ALL_STATES_4_3)
def test_breadth_first_matches_independent_distance(caps, target):
    path = BreadthFirst().execute(make_node(caps, (0, 0)), make_node(caps, target))
    expected = shortest_length(caps, (0, 0), target)
    if expected is None:
        assert path is None
    else:
        assert len(path) == expected
        assert_valid_path(caps, path, (0, 0), target)


@pytest.mark.parametrize("target", ALL_STATES_4_3)
def test_best_first_paths_are_valid(caps, target):
    path = BestFirst().execute(make_node(caps, (0, 0)), make_node(caps, target))
    if path is not None:
        assert_valid_path(caps, path, (0, 0), target)
        assert len(path) >= shortest_length(caps, (0, 0), target)


def test_execute_is_repeatable(algorithm, caps):
    root, target = make_node(caps, (0, 0)), make_node(caps, (2, 0))
    first = path_states(algorithm.execute(root, target))
    first_expanded = algorithm.nodes_expanded
    algorithm.execute(make_node(caps, (0, 0)), make_node(caps, (1, 1)))
    second = path_states(algorithm.execute(root, target))
    assert first == second
    assert algorithm.nodes_expanded == first_expanded


def test_breadth_first_parents_form_tree(caps):
    bfs = BreadthFirst()
    bfs.execute(make_node(caps, (0, 0)), make_node(caps, (2, 0)))
    assert bfs.parents[0] is None
    for index, parent_index in enumerate(bfs.parents[1:], start=1):
        assert parent_index < index
        assert bfs.discovered[index].depth == bfs.discovered[parent_index].depth + 1
    states = [node.state for node in bfs.discovered]
    assert len(states) == len(set(states))


def test_breadth_first_visits_in_depth_order(caps):
    bfs = BreadthFirst()
    bfs.execute(make_node(caps, (0, 0)), make_node(caps, (2, 0)))
    depths = [node.depth for node in bfs.discovered]
    assert depths == sorted(depths)


def test_breadth_first_exhausts_state_space():
    caps = (2, 2)
    bfs = BreadthFirst()
    assert bfs.execute(make_node(caps, (0, 0)), make_node(caps, (1, 1))) is None
    assert sorted(node.state for node in bfs.discovered) == [(0, 0), (0, 2), (2, 0), (2, 2)]
    depths = [node.depth for node in bfs.discovered]
    assert depths == sorted(depths)


def _frontier_states(astar):
    return list(astar.frontier)


def test_best_first_replaces_longer_path(caps):
    astar = BestFirst()
    root = make_node(caps, (0, 0))
    long_path = (root, make_node(caps, (0, 3)), make_node(caps, (4, 3)), make_node(caps, (4, 0)))
    astar.frontier = OrderedDict([((4, 0), long_path), ((0, 3), (root, make_node(caps, (0, 3))))])

    astar._merge([make_node(caps, (4, 0))], (root,))

    assert _frontier_states(astar) == [(0, 3), (4, 0)]
    assert path_states(astar.frontier[(4, 0)]) == [(0, 0), (4, 0)]


def test_best_first_keeps_stored_path_on_tie(caps):
    astar = BestFirst()
    root = make_node(caps, (0, 0))
    stored = (root, make_node(caps, (0, 3)), make_node(caps, (4, 3)))
    astar.frontier = OrderedDict([((4, 3), stored), ((0, 3), (root, make_node(caps, (0, 3))))])

    current = (root, make_node(caps, (4, 0)))
    astar._merge([make_node(caps, (4, 3))], current)

    assert astar.frontier[(4, 3)] is stored
    assert _frontier_states(astar) == [(0, 3), (4, 3)]


def test_best_first_drops_longer_new_path(caps):
    astar = BestFirst()
    root = make_node(caps, (0, 0))
    stored = (root, make_node(caps, (4, 0)))
    astar.frontier = OrderedDict([((4, 0), stored)])

    current = (root, make_node(caps, (0, 3)), make_node(caps, (4, 3)))
    astar._merge([make_node(caps, (4, 0))], current)

    assert astar.frontier[(4, 0)] is stored
    assert len(astar.frontier) == 1


def test_best_first_adds_new_state_at_back(caps):
    astar = BestFirst()
    root = make_node(caps, (0, 0))
    astar.frontier = OrderedDict([((0, 3), (root, make_node(caps, (0, 3))))])

    child = make_node(caps, (4, 0))
    astar._merge([child], (root,))

    assert _frontier_states(astar) == [(0, 3), (4, 0)]
    assert astar.frontier[(4, 0)] == append((root,), child)


def test_best_first_frontier_holds_one_path_per_state(caps):
    astar = BestFirst()
    root = make_node(caps, (0, 0))
    astar.frontier = OrderedDict()
    astar._merge(root.breed(), (root,))
    # (0, 0) is bred four times
    assert sorted(astar.frontier) == [(0, 0), (0, 3), (4, 0)]
