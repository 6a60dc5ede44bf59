from procmine.activity_projection import ActivityProjectionDFG
from procmine.candidate_building import build_candidates, satisfies_cnd_condition


def _dfg(edges, n):
    return ActivityProjectionDFG(nodes=list(range(n)), edges=dict(edges))


def test_condition_holds_for_simple_sequence():
    assert satisfies_cnd_condition({(0, 1)}, [0], [1])


def test_condition_fails_for_two_way_relation():
    assert not satisfies_cnd_condition({(0, 1), (1, 0)}, [0], [1])


def test_single_edge_gives_single_candidate():
    assert build_candidates(_dfg({(0, 1): 1}, 2)) == {((0,), (1,))}


def test_zero_weight_edges_are_ignored():
    assert build_candidates(_dfg({(0, 1): 0}, 2)) == set()


def test_choice_is_merged():
    edges = {(0, 1): 1, (0, 2): 1, (1, 3): 1, (2, 3): 1}
    cnds = build_candidates(_dfg(edges, 4))
    assert ((0,), (1, 2)) in cnds
    assert ((1, 2), (3,)) in cnds
    assert cnds == {
        ((0,), (1,)),
        ((0,), (2,)),
        ((1,), (3,)),
        ((2,), (3,)),
        ((0,), (1, 2)),
        ((1, 2), (3,)),
    }


def test_all_candidates_satisfy_condition():
    edges = {(0, 1): 3, (0, 2): 1, (1, 3): 2, (2, 3): 1, (3, 4): 1, (1, 2): 1}
    df_rel = set(edges)
    for a, b in build_candidates(_dfg(edges, 5)):
        assert list(a) == sorted(set(a))
        assert list(b) == sorted(set(b))
        assert satisfies_cnd_condition(df_rel, a, b)


def test_self_loop_blocks_pair_candidate():
    cnds = build_candidates(_dfg({(0, 1): 1, (1, 1): 1}, 2))
    assert ((0,), (1,)) not in cnds