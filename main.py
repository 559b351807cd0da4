"""
Command line entry point for DataSplit.

This utility takes a dataset and optionally labels and splits them into a
training set and a test set. Before the split, the points in the dataset are
randomly reordered.

Example, 60% training and 40% test:

    python main.py -i X.csv -t X_train.csv -T X_test.csv -r 0.4

Example with labels and 30% test:

    python main.py -i X.csv -I y.csv -r 0.3 -t X_train.csv -l y_train.csv -T X_test.csv -L y_test.csv
"""
import argparse
import importlib.util
import logging
import sys

import config as default_config
from core.errors import SplitError
from core.log_utils import get_logger, setup_logging
from pipeline.split_pipeline import run_split


def build_parser():
    parser = argparse.ArgumentParser(
        description='Split a dataset (and optionally its labels) into a training set and a test set.'
    )
    parser.add_argument('-i', '--input', required=True, help='Matrix containing data.')
    parser.add_argument('-t', '--training', help='Matrix to save training data to.')
    parser.add_argument('-T', '--test', help='Matrix to save test data to.')
    parser.add_argument('-I', '--input_labels', help='Matrix containing labels.')
    parser.add_argument('-l', '--training_labels', help='Matrix to save train labels to.')
    parser.add_argument('-L', '--test_labels', help='Matrix to save test labels to.')
    parser.add_argument('-r', '--test_ratio', type=float, default=None,
                        help='Ratio of test set; if not set, the ratio defaults to 0.2')
    parser.add_argument('-s', '--seed', type=int, default=None,
                        help='Random seed (0 for the current time).')
    parser.add_argument('--config', type=str, default=None, help='Path to config file')
    parser.add_argument('--log_file', type=str, default=None, help='Write the log to this file.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages too.')
    return parser


def load_config(path=None):
    """
    Load a config module from a file path; None gives the bundled config.py.
    """
    if path is None:
        return default_config
    spec = importlib.util.spec_from_file_location('config', path)
    if spec is None:
        raise FileNotFoundError(f"Cannot load config file '{path}'.")
    cfg = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(cfg)
    return cfg


def main(argv=None):
    args = build_parser().parse_args(argv)
    config_error = None
    try:
        cfg = load_config(args.config)
    except (OSError, SyntaxError) as e:
        # Log with the bundled defaults, then stop.
        cfg, config_error = default_config, e
    level = logging.DEBUG if args.verbose else getattr(cfg, 'LOG_LEVEL', default_config.LOG_LEVEL)
    setup_logging(
        args.log_file,
        console=getattr(cfg, 'LOG_TO_CONSOLE', default_config.LOG_TO_CONSOLE),
        level=level,
        log_dir=getattr(cfg, 'LOG_DIR', default_config.LOG_DIR),
    )
    logger = get_logger(__name__)
    if config_error is not None:
        logger.error(f"[Config] Cannot load config file '{args.config}': {config_error}")
        return 1
    try:
        run_split(
            args.input,
            training=args.training,
            test=args.test,
            input_labels=args.input_labels,
            training_labels=args.training_labels,
            test_labels=args.test_labels,
            test_ratio=args.test_ratio,
            seed=args.seed,
            cfg=cfg,
        )
    except (SplitError, OSError, ValueError) as e:
        logger.error(f"[Split] Failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
