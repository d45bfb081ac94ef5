"""
EVALs Suite for PyCWS - Edge Cases Designed to Break the Index

Philosophy:
    These tests target degenerate and extreme tables: minimal shapes,
    vanishing denominators, exotic label types and large tables where
    float arithmetic would drift.

Run tests:
    pytest tests/evals/ -v                    # Run all evals
    pytest tests/ --ignore=tests/evals/      # Run regular tests only
"""
