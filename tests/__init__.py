"""Test suite for Go Struct Analyzer.

Test Structure:
- domain/: Tests for the declaration parser, type sizing and layout engine
- application/: Tests for the analysis facade and report rendering
- config/: Tests for configuration management
- infrastructure/: Tests for logging setup and progress tracking
- test_main.py: Command line entry point
- resources/: Sample Go sources used by integration tests

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run tests over the sample Go file
"""

# This file intentionally kept minimal to avoid import issues with pytest
# Individual test modules are discovered automatically by pytest
__version__ = "0.1.0"
