"""
data.loaders
------------
Functions for loading and saving data matrices and label vectors.

Files hold one point per row; in memory a dataset is column-oriented, one point
per column, so loading and saving transpose. The format follows the file
extension:

    .csv  comma separated
    .tsv  tab separated
    .txt  whitespace separated
    .npy  NumPy binary

Any other extension is read and written with the delimiter passed in
(DEFAULT_DELIMITER from the config when called by the split pipeline).

Functions:
    - load_matrix: Load a data matrix of shape (d, n).
    - load_labels: Load a label vector of length n.
    - save_matrix: Save a data matrix, one point per row.
    - save_labels: Save a label vector, one label per line.
"""

import os

import numpy as np
import pandas as pd
from sklearn.utils import check_array

from core.log_utils import get_logger

logger = get_logger(__name__)

_SEPARATORS = {
    '.csv': ',',
    '.tsv': '\t',
    '.txt': r'\s+',
}


def _extension(path):
    return os.path.splitext(str(path))[1].lower()


def _separator(path, delimiter):
    return _SEPARATORS.get(_extension(path), delimiter)


def _read_table(path, delimiter):
    """
    Read a headerless table into a 2D array, rows as stored in the file.
    Empty text files give an array of shape (0, 0).
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"The file '{path}' was not found.")
    if _extension(path) == '.npy':
        values = np.load(path, allow_pickle=False)
        if values.ndim == 1:
            values = values.reshape(-1, 1)
        return values
    try:
        df = pd.read_csv(path, sep=_separator(path, delimiter), header=None, engine='python')
    except pd.errors.EmptyDataError:
        logger.warning(f"File '{path}' is empty.")
        return np.empty((0, 0))
    return df.to_numpy()


def load_matrix(path, delimiter=','):
    """
    Load a data matrix.

    Parameters
    ----------
    path : str
        Path to the file, one point per row.
    delimiter : str, optional
        Field separator for extensions other than .csv, .tsv, .txt and .npy.

    Returns
    -------
    np.ndarray
        float64 matrix of shape (d, n), one point per column.
    """
    logger.info(f"Loading data matrix from {path}")
    table = _read_table(path, delimiter)
    if table.size == 0:
        # An empty .npy still knows its feature count.
        return np.empty((table.shape[1], 0))
    # Rejects non-numeric cells, NaN and inf.
    table = check_array(table, dtype=np.float64)
    matrix = np.ascontiguousarray(table.T)
    logger.info(f"Loaded {matrix.shape[0]}x{matrix.shape[1]} matrix from {path}")
    return matrix


def _as_label_values(values, path):
    if values.dtype.kind in 'iu':
        if np.any(values < 0):
            raise ValueError(f"Labels in '{path}' must be non-negative.")
        return values.astype(np.uint64)
    try:
        floats = values.astype(np.float64)
    except ValueError as e:
        raise ValueError(f"Labels in '{path}' must be numeric: {e}") from e
    if not np.all(np.isfinite(floats)) or np.any(floats != np.floor(floats)):
        raise ValueError(f"Labels in '{path}' must be integers.")
    if np.any(floats < 0):
        raise ValueError(f"Labels in '{path}' must be non-negative.")
    return floats.astype(np.uint64)


def load_labels(path, delimiter=','):
    """
    Load a label vector.

    A single row or a single column is read as is. For a larger table only the
    first column is used. Integer columns are converted without passing through
    floating point, so large labels keep every digit.

    Parameters
    ----------
    path : str
        Path to the label file.
    delimiter : str, optional
        Field separator for extensions other than .csv, .tsv, .txt and .npy.

    Returns
    -------
    np.ndarray
        uint64 array of length n.

    Raises
    ------
    ValueError
        If a label is negative or not an integer.
    """
    logger.info(f"Loading labels from {path}")
    table = _read_table(path, delimiter)
    if table.size == 0:
        return np.empty((0,), dtype=np.uint64)
    if table.shape[0] == 1 or table.shape[1] == 1:
        values = table.ravel()
    else:
        logger.warning(f"Labels file '{path}' has {table.shape[1]} columns; using the first one.")
        values = table[:, 0]
    labels = _as_label_values(values, path)
    logger.info(f"Loaded {labels.shape[0]} labels from {path}")
    return labels


def _save_with_logging(write, path):
    try:
        write()
        logger.info(f"Successfully saved {path}")
    except Exception as e:
        logger.error(f"Error saving {path}: {e}")
        raise


def save_matrix(matrix, path, delimiter=','):
    """
    Save a column-oriented matrix to a file, one point per row.

    A matrix with no points, shape (d, 0), is written as an empty text file;
    loading that file gives shape (0, 0), so the feature count d is not kept.
    The .npy format keeps it.

    Parameters
    ----------
    matrix : np.ndarray
        Matrix of shape (d, n).
    path : str
        Destination file.
    delimiter : str, optional
        Field separator for extensions other than .csv, .tsv, .txt and .npy.
    """
    points = np.asarray(matrix).T
    if _extension(path) == '.npy':
        _save_with_logging(lambda: np.save(path, points), path)
        return
    sep = _separator(path, delimiter)
    if sep == r'\s+':
        sep = ' '
    _save_with_logging(
        lambda: pd.DataFrame(points).to_csv(path, sep=sep, header=False, index=False), path
    )


def save_labels(labels, path, delimiter=','):
    """
    Save a label vector to a file, one label per line.

    Parameters
    ----------
    labels : np.ndarray
        Labels of shape (n,).
    path : str
        Destination file.
    delimiter : str, optional
        Accepted for symmetry with save_matrix; one label per line needs no separator.
    """
    labels = np.asarray(labels)
    if _extension(path) == '.npy':
        _save_with_logging(lambda: np.save(path, labels), path)
        return
    _save_with_logging(
        lambda: pd.Series(labels).to_csv(path, header=False, index=False), path
    )
