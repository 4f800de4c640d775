import pytest

from dynprog.grids import (
    cherry_pickup,
    count_squares,
    max_points,
    maximal_square,
    min_falling_path_sum,
    min_path_sum,
    minimum_total,
    minimum_total_bottom_up,
    ninja_training,
    unique_paths,
)


def transpose(matrix):
    return [list(col) for col in zip(*matrix)]


def test_cherry_pickup_single_cell_returns_its_content():
    grid = [[1]]
    assert cherry_pickup(grid) == grid[0][0]


def test_cherry_pickup_blocked_grid_collects_nothing():
    assert cherry_pickup([[1, -1], [-1, 1]]) == cherry_pickup([[0]])


def test_cherry_pickup_all_ones_bounds():
    n = 3
    grid = [[1] * n for _ in range(n)]
    result = cherry_pickup(grid)
    assert 2 * n - 1 <= result <= n * n


def test_cherry_pickup_thorn_never_helps():
    open_grid = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    thorny = [[1, 1, 1], [1, -1, 1], [1, 1, 1]]
    assert cherry_pickup(thorny) <= cherry_pickup(open_grid)


def test_count_squares_worked_example():
    matrix = [[0, 1, 1, 1], [1, 1, 1, 1], [0, 1, 1, 1]]
    assert count_squares(matrix) == 15


def test_count_squares_single_row_counts_ones():
    row = [1, 0, 1, 1]
    assert count_squares([row]) == sum(row)


def test_count_squares_transpose_invariant():
    matrix = [[1, 0, 1], [1, 1, 1], [1, 1, 0], [0, 1, 1]]
    assert count_squares(transpose(matrix)) == count_squares(matrix)
    assert count_squares(matrix) >= sum(map(sum, matrix))


def test_count_squares_empty_raises():
    with pytest.raises(ValueError):
        count_squares([])


def test_unique_paths_symmetry_and_recurrence():
    assert unique_paths(3, 7) == unique_paths(7, 3)
    assert unique_paths(4, 5) == unique_paths(3, 5) + unique_paths(4, 4)
    assert unique_paths(1, 9) == unique_paths(1, 1)


@pytest.mark.parametrize("m, n", [(0, 3), (3, 0), (-1, 2)])
def test_unique_paths_rejects_empty_grid(m, n):
    with pytest.raises(ValueError):
        unique_paths(m, n)


def test_maximal_square_full_block():
    k = 3
    matrix = [["1"] * k for _ in range(k)]
    assert maximal_square(matrix) == k * k


def test_maximal_square_single_row():
    assert maximal_square([["1", "0", "1", "0", "0"]]) == count_squares([[1]])


def test_maximal_square_no_ones():
    assert maximal_square([["0", "0"], ["0", "0"]]) == maximal_square([["0"]])
    assert maximal_square([["0"]]) < maximal_square([["1"]])


def test_maximal_square_bounded_by_ones():
    matrix = [["1", "1", "0"], ["1", "1", "1"], ["0", "1", "1"]]
    ones = sum(row.count("1") for row in matrix)
    assert maximal_square(matrix) <= ones


def test_maximal_square_empty_raises():
    with pytest.raises(ValueError):
        maximal_square([])


def test_max_points_single_column_sums():
    points = [[3], [4], [5]]
    assert max_points(points) == sum(row[0] for row in points)


def test_max_points_first_row_charged_from_column_zero():
    assert max_points([[5, 0]]) == 5
    assert max_points([[0, 5]]) < 5


def test_max_points_bounded_by_row_maxima():
    points = [[1, 2, 3], [1, 5, 1], [3, 1, 1]]
    assert max_points(points) <= sum(max(row) for row in points)


def test_max_points_empty_raises():
    with pytest.raises(ValueError):
        max_points([])


def test_min_falling_path_single_row():
    row = [4, -2, 7]
    assert min_falling_path_sum([row]) == min(row)


def test_min_falling_path_mirror_invariant():
    matrix = [[2, 1, 3], [6, 5, 4], [7, 8, 9]]
    mirrored = [list(reversed(row)) for row in matrix]
    assert min_falling_path_sum(mirrored) == min_falling_path_sum(matrix)
    assert min_falling_path_sum(matrix) <= sum(row[0] for row in matrix)


def test_min_falling_path_empty_raises():
    with pytest.raises(ValueError):
        min_falling_path_sum([])


def test_minimum_total_worked_example():
    assert minimum_total([[2], [3, 4], [6, 5, 7]]) == 10


@pytest.mark.parametrize(
    "triangle",
    [
        [[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]],
        [[-1], [2, 3], [1, -1, -3]],
        [[5], [9, 6], [4, 6, 8], [0, 7, 1, 5]],
    ],
)
def test_minimum_total_matches_bottom_up(triangle):
    assert minimum_total(triangle) == minimum_total_bottom_up(triangle)


def test_minimum_total_single_row():
    triangle = [[-7]]
    assert minimum_total(triangle) == triangle[0][0]
    assert minimum_total_bottom_up(triangle) == triangle[0][0]


def test_minimum_total_caps_large_sums():
    big = 2**40
    assert minimum_total_bottom_up([[big]]) == big
    assert minimum_total([[big]]) < big


def test_minimum_total_empty_raises():
    with pytest.raises(ValueError):
        minimum_total([])
    with pytest.raises(ValueError):
        minimum_total_bottom_up([])


def test_min_path_sum_worked_example():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7


def test_min_path_sum_single_row_and_column():
    row = [1, 2, 3]
    assert min_path_sum([row]) == sum(row)
    assert min_path_sum([[v] for v in row]) == sum(row)


def test_min_path_sum_transpose_invariant():
    grid = [[1, 2, 5], [3, 2, 1], [4, 1, 1], [2, 2, 2]]
    assert min_path_sum(transpose(grid)) == min_path_sum(grid)


def test_min_path_sum_empty_raises():
    with pytest.raises(ValueError):
        min_path_sum([[]])


def test_ninja_training_single_day_takes_best():
    points = [[10, 40, 70]]
    assert ninja_training(points) == max(points[0])


def test_ninja_training_bounds():
    points = [[10, 40, 70], [20, 50, 80], [30, 60, 90]]
    result = ninja_training(points)
    assert result <= sum(max(day) for day in points)
    assert result >= max(points[0])


def test_ninja_training_column_permutation_invariant():
    points = [[1, 2, 5], [3, 1, 1], [3, 3, 3]]
    permuted = [[day[2], day[0], day[1]] for day in points]
    assert ninja_training(permuted) == ninja_training(points)


def test_ninja_training_empty_raises():
    with pytest.raises(ValueError):
        ninja_training([])