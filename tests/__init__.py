# KeyLock Test Suite
"""
Test suite including:
- Unit tests per codec
- Failure-path tests (malformed and blank input)
- CLI integration tests

Run with: pytest
"""
