import math

import pytest

from heatgrid.shape import MultiArrayShape, check_and_cast


def test_check_and_cast_accepts_non_negative():
    assert check_and_cast(7) == 7
    assert check_and_cast(0) == 0


def test_check_and_cast_rejects_negative():
    with pytest.raises(ValueError):
        check_and_cast(-1)


def test_check_and_cast_rejects_float():
    with pytest.raises(TypeError):
        check_and_cast(1.5)


def test_worked_example_strides():
    shape = MultiArrayShape(2, 3, 4)
    assert shape.strides == (12, 4, 1)


@pytest.mark.parametrize("dims", [(5,), (3, 7), (2, 3, 4), (4, 1, 6, 2)])
def test_stride_invariants(dims):
    shape = MultiArrayShape(*dims)
    assert shape.dims == dims
    assert shape.strides[-1] == 1
    for i in range(1, len(dims)):
        assert shape.strides[i - 1] == shape.strides[i] * dims[i]
    assert shape.size() == math.prod(dims)
    assert len(shape) == len(dims)


def test_iterable_and_varargs_agree():
    assert MultiArrayShape([3, 5]) == MultiArrayShape(3, 5)


def test_copy_from_shape_is_equal_and_independent():
    original = MultiArrayShape(3, 5)
    duplicate = MultiArrayShape(original)
    assert duplicate == original
    duplicate[0] = 9
    assert original[0] == 3


def test_empty_shape():
    shape = MultiArrayShape()
    assert len(shape) == 0
    assert shape.dims == ()
    assert shape.strides == ()


def test_negative_extent_rejected():
    with pytest.raises(ValueError):
        MultiArrayShape(3, -2)


def test_inequality():
    assert not (MultiArrayShape(2, 3) == MultiArrayShape(3, 2))
    assert MultiArrayShape(2, 3) != MultiArrayShape(2, 4)


def test_getitem_and_setitem_updates_strides():
    shape = MultiArrayShape(2, 3)
    assert shape[1] == 3
    shape[1] = 6
    assert shape.dims == (2, 6)
    assert shape.strides == (6, 1)
    with pytest.raises(ValueError):
        shape[0] = -4


def test_swap():
    a = MultiArrayShape(2, 3)
    b = MultiArrayShape(4, 5)
    a.swap(b)
    assert a.dims == (4, 5)
    assert b.dims == (2, 3)
    assert a == MultiArrayShape(4, 5)