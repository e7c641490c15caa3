"""Layout solver checks: ranking, bounds, rounding and the worked examples."""
import pytest

from services.deck_layout import (
    Candidate,
    InvalidLayoutInput,
    LayoutInput,
    compute_layout,
    compute_layout_for,
    enumerate_candidates,
    joint_count,
    rank_candidates,
    round_half,
    validate_layout_input,
)

DECK = dict(install_width=3000, board_width=150, joint_width=5, min_board_width=80)


def _is_half_step(x):
    return (x * 2) == int(x * 2)


# ---------- Rounding ----------

def test_round_half_snaps_to_half_units():
    assert round_half(97.5) == 97.5
    assert round_half(97.24) == 97.0
    assert round_half(97.26) == 97.5
    assert round_half(97.8) == 98.0


def test_round_half_ties_go_away_from_zero():
    assert round_half(123.75) == 124.0
    assert round_half(0.25) == 0.5
    assert round_half(-0.25) == -0.5
    assert round_half(-123.75) == -124.0


# ---------- Worked examples ----------

def test_default_deck_ranks_two_trim_boards_first():
    result = compute_layout(**DECK, edge_joints=True)

    # One trim board would need 45 or 200, so the best plan uses two
    best = result[0]
    assert best == Candidate(
        total_boards=20, standard_boards=18, adjusted_boards=2,
        adjusted_width=97.5, width_diff=52.5, total_width=3000.0,
    )
    assert abs(best.total_width - 3000) <= 0.5


def test_default_deck_full_result_set():
    result = compute_layout(**DECK, edge_joints=True)
    assert [(c.adjusted_boards, c.adjusted_width) for c in result] == [
        (2, 97.5), (3, 115.0), (4, 124.0), (5, 129.0), (6, 132.5),
    ]
    # 4 x 123.75 rounds up to 124 so the realized width overshoots by 1
    assert result[2].total_width == 3001.0


def test_widest_trim_kept_per_trim_count():
    # With 4 trim boards both 20 boards (123.75 -> 124) and 21 boards (85) fit
    feasible = enumerate_candidates(**DECK, edge_joints=True)
    four = sorted(c.adjusted_width for c in feasible if c.adjusted_boards == 4)
    assert four == [85.0, 124.0]

    result = compute_layout(**DECK, edge_joints=True)
    assert [c.adjusted_width for c in result if c.adjusted_boards == 4] == [124.0]


def test_too_narrow_install_gives_empty_result():
    assert compute_layout(50, 150, 5, 80, True) == []


def test_edge_joints_change_joint_count_by_two():
    for n in range(1, 31):
        assert joint_count(n, True) - joint_count(n, False) == 2
    assert joint_count(1, False) == 0


def test_edge_joints_shift_feasible_plans():
    with_edges = compute_layout(**DECK, edge_joints=True)
    without = compute_layout(**DECK, edge_joints=False)
    assert with_edges != without
    # Two fewer joints leave 10 more to share between the two trim boards
    assert without[0].adjusted_boards == 2
    assert without[0].adjusted_width == 102.5
    assert without[0].total_width == 3000.0


def test_exact_single_board_fit_is_accepted():
    result = compute_layout(150, 150, 0, 80, False)
    assert result[0] == Candidate(1, 0, 1, 150.0, 0.0, 150.0)


def test_zero_trim_boards_never_offered():
    # 20 x 150 fits exactly but every plan must still contain a trim board
    result = compute_layout(3000, 150, 0, 80, False)
    assert result
    assert all(c.adjusted_boards >= 1 for c in result)


# ---------- Invariants ----------

@pytest.mark.parametrize("params", [
    (3000, 150, 5, 80, True),
    (3000, 150, 5, 80, False),
    (2400, 105, 3, 50, True),
    (1234.5, 120, 4.5, 60, False),
    (4560, 140, 6, 140, True),
])
def test_result_invariants(params):
    install, board, joint, min_board, edge = params
    result = compute_layout(install, board, joint, min_board, edge)

    assert len(result) <= 5
    counts = [c.adjusted_boards for c in result]
    assert counts == sorted(counts)
    assert len(set(counts)) == len(counts)
    for c in result:
        assert c.standard_boards + c.adjusted_boards == c.total_boards
        assert 1 <= c.total_boards <= 30
        assert c.adjusted_boards >= 1
        assert min_board <= c.adjusted_width <= board
        assert _is_half_step(c.adjusted_width)
        assert _is_half_step(c.width_diff)
        assert _is_half_step(c.total_width)


def test_same_input_same_result():
    assert compute_layout(**DECK) == compute_layout(**DECK)


def test_search_cap_is_configurable():
    # 6000 needs more than 30 boards of 150
    assert compute_layout(6000, 150, 5, 80, True) == []
    wider = compute_layout(6000, 150, 5, 80, True, max_total_boards=60)
    assert wider
    assert max(c.total_boards for c in wider) > 30


def test_max_results_limits_length():
    assert len(compute_layout(**DECK, max_results=2)) == 2


def test_rank_prefers_fewer_then_wider_trim():
    a = Candidate(10, 8, 2, 90.0, 60.0, 1000.0)
    b = Candidate(11, 9, 2, 120.0, 30.0, 1000.0)
    c = Candidate(9, 8, 1, 85.0, 65.0, 1000.0)
    assert rank_candidates([a, b, c]) == [c, b]


# ---------- Validation ----------

def test_validate_returns_floats():
    assert validate_layout_input("3000", 150, 0, 80) == (3000.0, 150.0, 0.0, 80.0)


@pytest.mark.parametrize("args, field", [
    ((0, 150, 5, 80), "install_width"),
    ((3000, -1, 5, 80), "board_width"),
    ((3000, 150, -5, 80), "joint_width"),
    ((3000, 150, 5, 0), "min_board_width"),
    ((3000, 150, 5, 200), "min_board_width"),
    ((None, 150, 5, 80), "install_width"),
    ((3000, "wide", 5, 80), "board_width"),
    ((3000, 150, float("nan"), 80), "joint_width"),
])
def test_validate_rejects_bad_values(args, field):
    with pytest.raises(InvalidLayoutInput) as exc:
        validate_layout_input(*args)
    assert exc.value.field == field


def test_layout_input_round_trip_through_solver():
    layout = LayoutInput.from_values(3000, 150, 5, 80, True)
    assert compute_layout_for(layout) == compute_layout(**DECK, edge_joints=True)


def test_candidate_dict_uses_form_keys():
    d = Candidate(20, 18, 2, 97.5, 52.5, 3000.0).to_dict()
    assert d == {
        "totalBoards": 20, "standardBoards": 18, "adjustedBoards": 2,
        "adjustedWidth": 97.5, "widthDiff": 52.5, "totalWidth": 3000.0,
    }
