import numpy as np
import pytest

from data.loaders import load_labels, load_matrix, save_labels, save_matrix


def test_load_matrix_transposes_points_to_columns(tmp_path):
    path = tmp_path / 'X.csv'
    path.write_text('1,2,3\n4,5,6\n7,8,9\n10,11,12\n')
    matrix = load_matrix(str(path))
    assert matrix.shape == (3, 4)
    assert matrix.dtype == np.float64
    np.testing.assert_array_equal(matrix[:, 1], [4, 5, 6])


def test_load_matrix_by_extension(tmp_path):
    tsv = tmp_path / 'X.tsv'
    tsv.write_text('1\t2\n3\t4\n')
    txt = tmp_path / 'X.txt'
    txt.write_text('1 2\n3   4\n')
    expected = np.array([[1.0, 3.0], [2.0, 4.0]])
    np.testing.assert_array_equal(load_matrix(str(tsv)), expected)
    np.testing.assert_array_equal(load_matrix(str(txt)), expected)


def test_save_and_load_matrix(tmp_path):
    matrix = np.arange(12, dtype=float).reshape(3, 4) / 7.0
    for name in ('out.csv', 'out.npy'):
        path = str(tmp_path / name)
        save_matrix(matrix, path)
        np.testing.assert_allclose(load_matrix(path), matrix)
    # One point per line on disk
    assert len((tmp_path / 'out.csv').read_text().splitlines()) == 4


def test_load_matrix_empty_file(tmp_path):
    path = tmp_path / 'empty.csv'
    path.write_text('')
    assert load_matrix(str(path)).shape == (0, 0)


def test_load_matrix_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrix(str(tmp_path / 'missing.csv'))


def test_load_matrix_rejects_bad_values(tmp_path):
    path = tmp_path / 'bad.csv'
    path.write_text('1,2\n3,abc\n')
    with pytest.raises(ValueError):
        load_matrix(str(path))
    path.write_text('1,2\n3,\n')
    with pytest.raises(ValueError):
        load_matrix(str(path))


def test_load_labels_column_and_row(tmp_path):
    column = tmp_path / 'y_col.csv'
    column.write_text('0\n2\n1\n')
    row = tmp_path / 'y_row.csv'
    row.write_text('0,2,1\n')
    for path in (column, row):
        labels = load_labels(str(path))
        assert labels.dtype == np.uint64
        np.testing.assert_array_equal(labels, [0, 2, 1])


def test_load_labels_uses_first_column(tmp_path):
    path = tmp_path / 'y.csv'
    path.write_text('1,9\n2,9\n3,9\n')
    np.testing.assert_array_equal(load_labels(str(path)), [1, 2, 3])


def test_load_labels_rejects_bad_labels(tmp_path):
    path = tmp_path / 'y.csv'
    path.write_text('0\n-1\n')
    with pytest.raises(ValueError):
        load_labels(str(path))
    path.write_text('0\n1.5\n')
    with pytest.raises(ValueError):
        load_labels(str(path))


def test_save_labels(tmp_path):
    path = tmp_path / 'y.csv'
    save_labels(np.array([3, 1, 2], dtype=np.uint64), str(path))
    assert path.read_text().split() == ['3', '1', '2']
    np.testing.assert_array_equal(load_labels(str(path)), [3, 1, 2])


def test_other_extension_uses_delimiter(tmp_path):
    path = tmp_path / 'X.dat'
    path.write_text('1;2\n3;4\n5;6\n')
    matrix = load_matrix(str(path), delimiter=';')
    np.testing.assert_array_equal(matrix, [[1, 3, 5], [2, 4, 6]])
    out = tmp_path / 'out.dat'
    save_matrix(matrix, str(out), delimiter=';')
    assert out.read_text().splitlines()[0] == '1.0;2.0'
    np.testing.assert_array_equal(load_matrix(str(out), delimiter=';'), matrix)


def test_load_labels_keeps_large_integers(tmp_path):
    big = 2 ** 60 + 1
    path = tmp_path / 'y.csv'
    path.write_text(f'{big}\n0\n')
    labels = load_labels(str(path))
    assert labels.dtype == np.uint64
    assert int(labels[0]) == big


def test_save_matrix_without_points(tmp_path):
    empty = np.empty((3, 0))
    csv_path = str(tmp_path / 'empty.csv')
    save_matrix(empty, csv_path)
    # Text files cannot record the feature count of an empty matrix.
    assert load_matrix(csv_path).shape == (0, 0)
    npy_path = str(tmp_path / 'empty.npy')
    save_matrix(empty, npy_path)
    assert load_matrix(npy_path).shape == (3, 0)
