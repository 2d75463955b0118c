import pytest

from heatgrid.multiarray import MultiArray
from heatgrid.shape import MultiArrayShape


def test_new_array_is_zero_filled():
    array = MultiArray((2, 3))
    assert len(array) == 6
    assert list(array) == [0.0] * 6


def test_accepts_shape_object_by_value():
    shape = MultiArrayShape(2, 2)
    array = MultiArray(shape)
    shape[0] = 5
    assert len(array) == 4
    assert array.shape.dims == (2, 2)


def test_multi_index_matches_flat_index():
    array = MultiArray((2, 3, 4))
    for value, index in enumerate([(0, 0, 0), (1, 2, 3), (0, 1, 2), (1, 0, 1)]):
        array[index] = value + 10
        flat = array.flat_index(index)
        assert array[flat] == value + 10


def test_flat_index_is_row_major():
    array = MultiArray((2, 3, 4))
    positions = [array.flat_index((i, j, k))
                 for i in range(2) for j in range(3) for k in range(4)]
    assert positions == list(range(len(array)))


def test_wrong_number_of_indices():
    array = MultiArray((2, 3))
    with pytest.raises(IndexError):
        array[1, 1, 1]
    with pytest.raises(IndexError):
        array.flat_index((1,))


def test_negative_indices_rejected():
    array = MultiArray((2, 3))
    with pytest.raises(ValueError):
        array[-1]
    with pytest.raises(ValueError):
        array[0, -1]
    with pytest.raises(ValueError):
        array.flat_index((0, -1))


def test_out_of_range():
    array = MultiArray((2, 3))
    array[5] = 3.0
    assert array[5] == 3.0
    assert array[1, 2] == 3.0
    with pytest.raises(IndexError):
        array[6]
    with pytest.raises(IndexError):
        array[2, 0]


def test_fill_and_assign():
    array = MultiArray((3, 2))
    array.fill(2.5)
    assert all(value == 2.5 for value in array)
    array.assign(-1.0)
    assert list(array) == [-1.0] * 6


def test_swap_exchanges_data_and_shape():
    a = MultiArray((2, 2))
    b = MultiArray((3,))
    a.fill(1.0)
    b.fill(7.0)
    a.swap(b)
    assert a.shape.dims == (3,)
    assert list(a) == [7.0] * 3
    assert b.shape.dims == (2, 2)
    assert list(b) == [1.0] * 4


def test_copy_is_independent():
    array = MultiArray((2, 2))
    array[1, 1] = 4.0
    duplicate = array.copy()
    assert list(duplicate) == list(array)
    assert duplicate.shape == array.shape
    duplicate[0] = 9.0
    assert array[0] == 0.0


def test_str_one_row():
    array = MultiArray((1, 2))
    array.fill(1.5)
    assert str(array) == "|     1.50000     1.50000 |\n\n"


def test_str_structure_3d():
    array = MultiArray((2, 2, 3))
    text = str(array)
    rows = [line for line in text.split("\n") if line]
    assert len(rows) == 4
    for row in rows:
        assert row.startswith("|")
        assert row.endswith(" |")
        assert len(row) == 1 + 12 * 3 + 2


def test_str_order_follows_memory():
    array = MultiArray((2, 2))
    for position in range(len(array)):
        array[position] = float(position)
    rows = [line for line in str(array).split("\n") if line]
    values = [float(tok) for row in rows for tok in row.strip("| ").split()]
    assert values == list(array)