import pytest

from algobox.contests_b import (
    OVERFLOW_LIMIT,
    arrange_circle,
    can_transform,
    candy_counts,
    chip_game_winner,
    choose_dominating_vertices,
    max_divisible_by_three,
    max_test_score,
    min_paint_for_cross,
    moves_to_one,
    remaining_number,
    run_loop_program,
    split_unbalanced,
    steps_to_zero,
)


@pytest.mark.parametrize("s", ["1", "0", "10011", "000"])
def test_split_unbalanced_keeps_unbalanced_string(s):
    assert split_unbalanced(s) == [s]


@pytest.mark.parametrize("s", ["01", "1100", "101010"])
def test_split_unbalanced_splits_balanced_string(s):
    pieces = split_unbalanced(s)
    assert len(pieces) == 2
    assert "".join(pieces) == s
    for piece in pieces:
        assert piece.count("0") != piece.count("1")


def test_split_unbalanced_rejects_other_characters():
    with pytest.raises(ValueError):
        split_unbalanced("012")


@pytest.mark.parametrize(
    "values", [[2, 4, 3], [1, 2, 3, 4, 4], [5, 5, 5, 5], [10, 11, 12, 13, 14, 15]]
)
def test_arrange_circle_invariant(values):
    result = arrange_circle(values)
    assert sorted(result) == sorted(values)
    size = len(result)
    for index, value in enumerate(result):
        assert value < result[index - 1] + result[(index + 1) % size]


def test_arrange_circle_impossible():
    assert arrange_circle([1, 4, 1]) is None


def test_arrange_circle_too_short():
    with pytest.raises(ValueError):
        arrange_circle([1, 2])


def test_candy_counts_worked_example():
    digits = [8, 7, 3, 1, 7, 0, 9, 4]
    assert candy_counts(digits, [(1, 8), (2, 5), (7, 7)]) == [3, 1, 0]


def test_candy_counts_single_digits_earn_nothing():
    digits = [9, 9, 9]
    assert candy_counts(digits, [(1, 1), (2, 2), (3, 3)]) == [0, 0, 0]


def test_candy_counts_rejects_bad_length():
    with pytest.raises(ValueError):
        candy_counts([1, 2, 3], [(1, 3)])


def test_max_test_score_all_agree():
    answers = ["ABC", "ABC", "ABC"]
    points = [4, 7, 9]
    assert max_test_score(answers, points) == len(answers) * sum(points)


def test_max_test_score_single_student():
    points = [2, 5]
    assert max_test_score(["AE"], points) == sum(points)


@pytest.mark.parametrize("exponent", [0, 1, 5, 10])
def test_moves_to_one_powers_of_two(exponent):
    assert moves_to_one(2**exponent) == exponent


def test_moves_to_one_impossible():
    assert moves_to_one(7) == -1


def test_moves_to_one_rejects_zero():
    with pytest.raises(ValueError):
        moves_to_one(0)


def test_max_divisible_by_three_all_multiples():
    values = [3, 6, 9, 12]
    assert max_divisible_by_three(values) == len(values)


def test_max_divisible_by_three_pairs():
    values = [1, 2, 4, 5]
    assert max_divisible_by_three(values) == len(values) // 2


@pytest.mark.parametrize(
    "n, edges",
    [
        (4, [(1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]),
        (6, [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6)]),
        (5, [(1, 2), (1, 3), (1, 4), (1, 5)]),
        (3, [(1, 2), (2, 3), (1, 3)]),
    ],
)
def test_choose_dominating_vertices_invariant(n, edges):
    chosen = choose_dominating_vertices(n, edges)
    assert len(chosen) <= n // 2
    chosen_set = set(chosen)
    neighbours = {vertex: set() for vertex in range(1, n + 1)}
    for u, v in edges:
        neighbours[u].add(v)
        neighbours[v].add(u)
    for vertex in range(1, n + 1):
        assert vertex in chosen_set or neighbours[vertex] & chosen_set


@pytest.mark.parametrize("n, k", [(5, 7), (59, 3), (1000, 10), (13, 2)])
def test_steps_to_zero_division_adds_one_step(n, k):
    assert steps_to_zero(n * k, k) == steps_to_zero(n, k) + 1


def test_steps_to_zero_below_k_only_decrements():
    assert steps_to_zero(4, 9) == 4


def test_steps_to_zero_rejects_small_k():
    with pytest.raises(ValueError):
        steps_to_zero(5, 1)


def test_run_loop_program_loop_multiplies():
    assert run_loop_program(["for 10", "add", "end", "add"]) == 11


def test_run_loop_program_without_add():
    assert run_loop_program(["for 100", "for 100", "end", "end"]) == 0


def test_run_loop_program_overflow():
    lines = ["for 100"] * 5 + ["add"] + ["end"] * 5
    with pytest.raises(OverflowError):
        run_loop_program(lines)


def test_run_loop_program_at_limit_is_fine():
    lines = ["for 65535", "for 65537", "add", "end", "end"]
    assert run_loop_program(lines) == OVERFLOW_LIMIT


def test_run_loop_program_unmatched_end():
    with pytest.raises(ValueError):
        run_loop_program(["end"])


def test_remaining_number_example():
    assert remaining_number(69, 6) == 12


def test_remaining_number_rejects_out_of_range():
    with pytest.raises(ValueError):
        remaining_number(3, 3)


def test_min_paint_for_cross_all_black():
    assert min_paint_for_cross(["***", "***"]) == 0


def test_min_paint_for_cross_all_white():
    picture = ["....", "....", "...."]
    assert min_paint_for_cross(picture) == len(picture) + len(picture[0]) - 1


def test_min_paint_for_cross_existing_cross():
    assert min_paint_for_cross(["***", "*..", "*.."]) == 0


@pytest.mark.parametrize(
    "s, t, p, expected",
    [
        ("ab", "acxb", "cax", True),
        ("a", "aaaa", "aaabbcc", True),
        ("a", "aaaa", "aabbcc", False),
        ("ab", "baaa", "aaaaa", False),
        ("abc", "abc", "", True),
    ],
)
def test_can_transform(s, t, p, expected):
    assert can_transform(s, t, p) is expected


@pytest.mark.parametrize(
    "position, k, expected",
    [
        (0, 3, "Bob"),
        (1, 3, "Alice"),
        (2, 5, "Alice"),
        (3, 5, "Bob"),
        (4, 5, "Alice"),
        (5, 5, "Alice"),
        (7, 4, "Bob"),
        (8, 4, "Alice"),
    ],
)
def test_chip_game_winner(position, k, expected):
    assert chip_game_winner(position, k) == expected