import math
import re

import pytest

from dendritic.ndarray import NDArray, NDArrayError
from dendritic.ops.unary import (
    apply,
    argmax,
    argmin,
    nonzero,
    norm,
    permute,
    select_axis,
    signum,
    sum_axis,
    transpose,
)


def _sample():
    return NDArray.array(
        [4, 3], [1.0, 2.0, 3.0, 1.0, 2.0, 3.0, 0.0, 0.0, 2.0, 0.0, 0.0, 0.0]
    )


def test_transpose_ndarray():
    result = transpose(_sample())
    assert result.shape.values == [3, 4]
    assert result.rank == 2
    assert result.size == 12
    assert result.values == [1.0, 1.0, 0.0, 0.0, 2.0, 2.0, 0.0, 0.0, 3.0, 3.0, 2.0, 0.0]


def test_transpose_rejects_rank_three():
    y = NDArray.array([2, 2, 2], [1.0, 1.0, 2.0, 2.0, 3.0, 3.0, 4.0, 4.0])
    assert y.rank == 3
    assert y.values == [1.0, 1.0, 2.0, 2.0, 3.0, 3.0, 4.0, 4.0]
    assert y.shape.values == [2, 2, 2]
    with pytest.raises(NDArrayError, match="Transpose must contain on rank 2 values"):
        transpose(y)


def test_transpose_twice_round_trip():
    x = _sample()
    assert transpose(transpose(x)) == x


def test_permute_ndarray():
    result = permute(_sample(), [1, 0])
    assert result.shape.values == [3, 4]
    assert result.rank == 2
    assert result.size == 12
    assert result.values == [1.0, 1.0, 0.0, 0.0, 2.0, 2.0, 0.0, 0.0, 3.0, 3.0, 2.0, 0.0]


def test_permute_rank_mismatch():
    with pytest.raises(NDArrayError, match="Indice order must be same length as rank"):
        permute(_sample(), [1])


def test_permute_matches_transpose_on_rank_two():
    x = _sample()
    assert permute(x, [1, 0]) == transpose(x)


def test_permute_identity_on_rank_three():
    cube = NDArray.array([2, 2, 2], [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])
    assert permute(cube, [0, 1, 2]).values == cube.values


def test_sum_axis():
    x = NDArray.array([3, 3], [2.0, 4.0, 5.0, 5.0, 7.0, 8.0, 8.0, 10.0, 11.0])
    y = NDArray.array([5, 1], [10.0, 12.0, 14.0, 16.0, 18.0])

    x_sum = sum_axis(x, 1)
    assert x_sum.values == [11.0, 20.0, 29.0]
    assert x_sum.shape.values == [1, 3]
    assert x_sum.rank == 2

    y_sum = sum_axis(y, 1)
    assert y_sum.shape.values == [1, 1]
    assert y_sum.values == [70.0]

    y_zero = sum_axis(y, 0)
    assert y_zero.shape.values == [1, 1]
    assert y_zero.values == [70.0]


def test_sum_axis_errors():
    x = NDArray.array([2, 2], [1.0, 2.0, 3.0, 4.0])
    with pytest.raises(NDArrayError, match="Sum Axis: Axis greater than rank"):
        sum_axis(x, 2)
    cube = NDArray.array([2, 2, 2], [1.0] * 8)
    with pytest.raises(NDArrayError, match="Sum Axis: Not supported"):
        sum_axis(cube, 1)


def test_signum_ndarray():
    x = NDArray.array([3, 3], [2.0, -2.0, 3.0, -4.0, 0.0, -6.0, 7.0, -8.0, 9.0])
    result = signum(x)
    assert result.rank == 2
    assert result.shape.values == [3, 3]
    assert result.values == [1.0, -1.0, 1.0, -1.0, 0.0, -1.0, 1.0, -1.0, 1.0]


def test_norm_squares_values():
    x = NDArray.array([2, 2], [1.0, -2.0, 3.0, -4.0])
    result = norm(x, 2)
    assert result.values == [1.0, 4.0, 9.0, 16.0]
    assert result.shape.values == [2, 2]


def test_argmax():
    x = NDArray.array(
        [3, 4], [1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 3.0, 4.0, 1.0, 2.0, 1.0, 0.0]
    )
    assert argmax(x, 0).values == [0.0, 3.0, 1.0]


def test_argmin():
    x = NDArray.array([3, 3], [1.0, 2.0, 0.0, 0.0, 2.0, 1.0, 1.0, 0.0, 2.0])

    rows = argmin(x, 0)
    assert rows.shape.values == [3, 1]
    assert rows.values == [2.0, 0.0, 1.0]

    cols = argmin(x, 1)
    assert cols.shape.values == [3, 1]
    assert cols.values == [1.0, 2.0, 0.0]

    with pytest.raises(NDArrayError, match="Argmin: Selected axis larger than rank"):
        argmin(x, 10)


def test_select_axis():
    x = NDArray.array(
        [4, 4],
        [
            1.0, 1.0, 1.0, 0.0,
            2.0, 2.0, 2.0, 1.0,
            3.0, 3.0, 3.0, 0.0,
            4.0, 4.0, 4.0, 1.0,
        ],
    )
    expected_x_cols = [[1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 3.0, 4.0], [0.0, 1.0, 0.0, 1.0]]
    expected_y_cols = [[0.0, 1.0, 0.0, 1.0], [1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 3.0, 4.0]]
    expected_z_rows = [[2.0, 2.0, 2.0, 1.0], [1.0, 1.0, 1.0, 0.0], [4.0, 4.0, 4.0, 1.0]]

    x_cols = select_axis(x, 1, [0, 1, 3])
    y_cols = select_axis(x, 1, [3, 1, 0])
    z_rows = select_axis(x, 0, [1, 0, 3])

    assert x_cols.values == [
        1.0, 1.0, 0.0, 2.0, 2.0, 1.0, 3.0, 3.0, 0.0, 4.0, 4.0, 1.0
    ]
    assert x_cols.shape.values == [4, 3]
    assert y_cols.shape.values == [4, 3]
    assert z_rows.shape.values == [3, 4]

    for position in range(3):
        assert x_cols.axis(1, position).values == expected_x_cols[position]
        assert y_cols.axis(1, position).values == expected_y_cols[position]
        assert z_rows.axis(0, position).values == expected_z_rows[position]


def test_select_axis_errors():
    x = NDArray.array([2, 2], [1.0, 2.0, 3.0, 4.0])
    with pytest.raises(NDArrayError, match=re.escape("Axis Indices: Selected axis larger than rank")):
        select_axis(x, 5, [0])
    cube = NDArray.array([2, 2, 2], [1.0] * 8)
    with pytest.raises(NDArrayError, match="Select Axis: Only works on rank 2 values and lower"):
        select_axis(cube, 0, [0])


def test_apply_runs_function_on_each_value():
    x = NDArray.array([2, 1], [1.5, -0.5])
    result = apply(x, math.floor)
    assert result.values == [1, -1]
    assert result.shape.values == [2, 1]


def test_nonzero():
    x = NDArray.array([2, 2], [0.0, 1.5, 0.0, -2.0])
    result = nonzero(x)
    assert result.values == [1.5, -2.0]
    assert result.shape.values == [2, 1]