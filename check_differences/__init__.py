"""
Check Differences - Cross-File Contradiction Checker
====================================================

A small batch tool for:
1. Sending a set of files (code + documentation) to a reasoning backend
2. Normalizing the backend's free-form answer into contradiction lines

Output format: one ``file1,file2:description`` line per contradiction.
Exit code 0 when nothing was found, 1 otherwise.
"""

__version__ = "1.0.0"
