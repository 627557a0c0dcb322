#!/usr/bin/env python3
"""Summarize a CSV file."""

import csv
import sys


def main():
    with open(sys.argv[1], newline="") as f:
        rows = [row for row in csv.DictReader(f) if any(row.values())]
    print(f"{len(rows)} non-empty rows")


if __name__ == "__main__":
    main()
