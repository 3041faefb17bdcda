"""
Unit Tests for CoverageBot

This package contains unit tests for all bot components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_scanner.py

    # Run with coverage
    pytest tests/ --cov=coverage_bot --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
