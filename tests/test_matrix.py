import pytest

from linregress.matrix import Matrix


def _a():
    return Matrix.from_rows([[1, 2], [3, 4]])


def _b():
    return Matrix.from_rows([[5, 6], [7, 8]])


def test_construction_and_element_access():
    m = Matrix(2, 3)
    assert m.rows == 2
    assert m.cols == 3
    for i in range(1, 3):
        for j in range(1, 4):
            assert m[i, j] == pytest.approx(0.0)
    with pytest.raises(IndexError):
        m[0, 1]
    with pytest.raises(IndexError):
        m[1, 0]
    with pytest.raises(IndexError):
        m[3, 1]


def test_element_assignment():
    m = Matrix(2, 2)
    m[2, 1] = 7.5
    assert m[2, 1] == 7.5
    assert m[1, 2] == 0.0


def test_arithmetic():
    c = _a() + _b()
    assert c[1, 1] == 6
    assert c[2, 2] == 12

    d = _a() * _b()
    assert d[1, 1] == 19
    assert d[1, 2] == 22
    assert d[2, 1] == 43
    assert d[2, 2] == 50


def test_scalar_multiplication():
    m = Matrix.from_rows([[2, 3], [4, 5]])
    s = m * 2.0
    assert s[1, 1] == 4
    assert s[1, 2] == 6
    assert s[2, 1] == 8
    assert s[2, 2] == 10
    assert 2.0 * m == s


def test_copy_copies_values():
    b = _b()
    a = b.copy()
    assert a.rows == 2
    assert a.cols == 2
    for i in range(1, 3):
        for j in range(1, 3):
            assert a[i, j] == pytest.approx(b[i, j])
    a[1, 1] = 100.0
    assert b[1, 1] == 5


def test_copy_takes_shape_of_source():
    b = Matrix.from_rows([[1], [2], [3]])
    a = Matrix(2, 3)
    a = b.copy()
    assert a.rows == 3
    assert a.cols == 1
    for i in range(1, 4):
        assert a[i, 1] == pytest.approx(b[i, 1])


def test_addition_size_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(2, 3)


def test_multiplication_inner_dimension_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 3) * Matrix(2, 3)


def test_rectangular_product_shape():
    product = Matrix(2, 3) * Matrix(3, 4)
    assert (product.rows, product.cols) == (2, 4)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_equality():
    assert _a() == Matrix.from_rows([[1, 2], [3, 4]])
    assert not (_a() == _b())