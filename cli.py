#!/usr/bin/env python3
"""
FilterGram Command Line Interface

Script entry point; the installed `filtergram` console script runs the same
command group.

Usage:
    ./cli.py <filter> <input> [output]
    ./cli.py list
"""

from filtergram.cli import main


if __name__ == '__main__':
    main()
