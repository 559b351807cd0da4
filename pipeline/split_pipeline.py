"""
Split Pipeline Module
=====================
Runs one dataset split end to end: checks the requested outputs, validates
the test ratio, seeds the generator, loads the data (and labels), splits them
and saves whichever outputs were asked for.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

import config as default_config
from core.errors import InvalidRatioError, LabelLengthMismatchError
from core.log_utils import get_logger
from core.rng import make_rng
from data.loaders import load_labels, load_matrix, save_labels, save_matrix
from data.split import check_ratio, split

logger = get_logger(__name__)


@dataclass
class SplitOutcome:
    """Everything a split run produced. Arrays are kept even when not saved."""
    seed: int
    test_ratio: float
    train: np.ndarray
    test: np.ndarray
    train_labels: Optional[np.ndarray] = None
    test_labels: Optional[np.ndarray] = None
    saved: Dict[str, str] = field(default_factory=dict)


def _config_value(cfg, name):
    return getattr(cfg, name, getattr(default_config, name))


def check_outputs(training=None, test=None, input_labels=None, training_labels=None, test_labels=None):
    """
    Warn about outputs that will not be written.

    Returns:
        List[str]: The warnings that were logged.
    """
    warnings = []
    if not training:
        warnings.append("--training (-t) is not specified; no training set will be saved!")
    if not test:
        warnings.append("--test (-T) is not specified; no test set will be saved!")
    if input_labels:
        if not training_labels:
            warnings.append("--training_labels (-l) is not specified; no training set labels will be saved!")
        if not test_labels:
            warnings.append("--test_labels (-L) is not specified; no test set labels will be saved!")
    else:
        if training_labels:
            warnings.append("--training_labels ignored because --input_labels is not specified.")
        if test_labels:
            warnings.append("--test_labels ignored because --input_labels is not specified.")
    for message in warnings:
        logger.warning(message)
    return warnings


def resolve_test_ratio(test_ratio=None, cfg=default_config):
    """
    Validate the requested test ratio, falling back to the configured default.

    Raises:
        InvalidRatioError: If the ratio (given or configured) is outside [0.0, 1.0].
    """
    if test_ratio is None:
        test_ratio = _config_value(cfg, 'DEFAULT_TEST_RATIO')
        logger.warning(f"You did not specify --test_ratio, so it will be automatically set to {test_ratio}.")
    try:
        check_ratio(test_ratio)
    except InvalidRatioError as e:
        logger.error(str(e))
        raise
    return test_ratio


def run_split(input_path, training=None, test=None, input_labels=None,
              training_labels=None, test_labels=None, test_ratio=None,
              seed=None, cfg=default_config):
    """
    Split a dataset file into training and test files.

    Args:
        input_path (str): Data matrix file, one point per row.
        training (str, optional): Where to save the training data.
        test (str, optional): Where to save the test data.
        input_labels (str, optional): Labels file aligned with the data.
        training_labels (str, optional): Where to save the training labels.
        test_labels (str, optional): Where to save the test labels.
        test_ratio (float, optional): Fraction of points for the test set.
        seed (int, optional): Random seed; 0 seeds from the current time.
        cfg (module): Configuration module supplying defaults.
    Returns:
        SplitOutcome: The split arrays, the seed used and the files written.
    """
    if seed is None:
        seed = _config_value(cfg, 'DEFAULT_SEED')
    rng, used_seed = make_rng(seed)
    logger.info(f"[Split] Using random seed {used_seed}.")

    check_outputs(training, test, input_labels, training_labels, test_labels)
    ratio = resolve_test_ratio(test_ratio, cfg)

    delimiter = _config_value(cfg, 'DEFAULT_DELIMITER')
    data = load_matrix(input_path, delimiter=delimiter)
    labels = None
    if input_labels:
        labels = load_labels(input_labels, delimiter=delimiter)
        if labels.shape[0] != data.shape[1]:
            error = LabelLengthMismatchError(labels.shape[0], data.shape[1])
            logger.error(str(error))
            raise error

    if labels is None:
        train, test_data = split(data, ratio, rng)
        outcome = SplitOutcome(seed=used_seed, test_ratio=ratio, train=train, test=test_data)
    else:
        train, test_data, train_lab, test_lab = split(data, ratio, rng, labels=labels)
        outcome = SplitOutcome(seed=used_seed, test_ratio=ratio, train=train, test=test_data,
                               train_labels=train_lab, test_labels=test_lab)
    logger.info(f"Training data contains {outcome.train.shape[1]} points.")
    logger.info(f"Test data contains {outcome.test.shape[1]} points.")

    if training:
        save_matrix(outcome.train, training, delimiter=delimiter)
        outcome.saved['training'] = training
    if test:
        save_matrix(outcome.test, test, delimiter=delimiter)
        outcome.saved['test'] = test
    if labels is not None:
        if training_labels:
            save_labels(outcome.train_labels, training_labels, delimiter=delimiter)
            outcome.saved['training_labels'] = training_labels
        if test_labels:
            save_labels(outcome.test_labels, test_labels, delimiter=delimiter)
            outcome.saved['test_labels'] = test_labels
    logger.info("[Split] Split complete.")
    return outcome
