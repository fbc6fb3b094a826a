"""
Result Checker command line tools.

Usage:
    result-checker init-db
    result-checker seed --total 20000 --batch-size 100
    result-checker lookup S101
"""
