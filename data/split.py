"""
data.split
----------
Functions for splitting a column-oriented dataset into training and test sets.

Points are the columns of the data matrix and features are its rows, so a
dataset of n points with d features has shape (d, n). Labels, when given,
are a 1D array with one entry per column.

Functions:
    - check_ratio: Reject a test ratio outside [0.0, 1.0].
    - num_test_points: Number of points routed to the test set.
    - split_indices: Random train/test partition of the column indices.
    - split: Split a dataset (and optionally its labels) into train and test sets.
"""
import math

import numpy as np

from core.errors import InvalidRatioError, LabelLengthMismatchError


def check_ratio(test_ratio):
    """Raise InvalidRatioError unless 0.0 <= test_ratio <= 1.0."""
    # NaN fails both comparisons
    if not 0.0 <= test_ratio <= 1.0:
        raise InvalidRatioError(test_ratio)


def num_test_points(n_points, test_ratio):
    """
    Number of points that go to the test set.

    The floating product n_points * test_ratio is truncated, never rounded,
    so for instance 100 points at a ratio of 0.29 give 28 test points.

    Parameters
    ----------
    n_points : int
        Total number of points.
    test_ratio : float
        Fraction of points to use as test set, between 0.0 and 1.0.

    Returns
    -------
    int
        Size of the test set; the training set gets the remaining points.
    """
    check_ratio(test_ratio)
    return int(math.floor(n_points * test_ratio))


def split_indices(n_points, test_ratio, rng):
    """
    Randomly partition the indices 0..n_points-1 into train and test indices.

    The indices are shuffled with a uniform permutation; the first
    n_points - num_test_points(...) of them form the training set and the
    rest form the test set. Both keep the shuffled order.

    Parameters
    ----------
    n_points : int
        Total number of points.
    test_ratio : float
        Fraction of points to use as test set, between 0.0 and 1.0.
    rng : np.random.Generator
        Source of randomness. It is advanced by one permutation.

    Returns
    -------
    train_idx : np.ndarray
        Indices of the training points.
    test_idx : np.ndarray
        Indices of the test points.
    """
    n_test = num_test_points(n_points, test_ratio)
    n_train = n_points - n_test
    order = rng.permutation(n_points)
    return order[:n_train], order[n_train:]


def split(data, test_ratio, rng, labels=None):
    """
    Split a dataset, and optionally its labels, into training and test sets.

    Data and labels are permuted with the same shuffle, so every point keeps
    its label. The outputs are new arrays; the inputs are left untouched.

    Parameters
    ----------
    data : np.ndarray
        Matrix of shape (d, n), one point per column.
    test_ratio : float
        Fraction of points to use as test set, between 0.0 and 1.0.
    rng : np.random.Generator
        Source of randomness.
    labels : np.ndarray, optional
        One label per point, shape (n,).

    Returns
    -------
    tuple
        (train, test) without labels, or
        (train, test, train_labels, test_labels) with labels.

    Raises
    ------
    InvalidRatioError
        If test_ratio is outside [0.0, 1.0].
    LabelLengthMismatchError
        If the number of labels differs from the number of columns.
    """
    data = np.asarray(data)
    if data.ndim != 2:
        raise ValueError(f"Data must be a 2D matrix, got {data.ndim} dimension(s).")
    n_points = data.shape[1]
    if labels is not None:
        labels = np.asarray(labels)
        if labels.ndim != 1 or labels.shape[0] != n_points:
            raise LabelLengthMismatchError(labels.size, n_points)

    train_idx, test_idx = split_indices(n_points, test_ratio, rng)
    # Fancy indexing always copies.
    train = data[:, train_idx]
    test = data[:, test_idx]
    if labels is None:
        return train, test
    return train, test, labels[train_idx], labels[test_idx]
