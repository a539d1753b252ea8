"""
Unit Tests for Draughts Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_moves.py

    # Run with coverage
    pytest tests/ --cov=draughts_engine --cov-report=html

    # Run specific test
    pytest tests/test_moves.py::TestForcedCapture::test_capture_is_mandatory

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
