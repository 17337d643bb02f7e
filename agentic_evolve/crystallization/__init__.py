"""Extraction of reusable patterns from successfully executed code."""