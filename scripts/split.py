"""
Split CLI entry point for DataSplit.

Takes the same options as main.py, for example:

    python -m scripts.split -i X.csv -t X_train.csv -T X_test.csv -r 0.4
"""
import sys

from main import main

if __name__ == '__main__':
    sys.exit(main())
