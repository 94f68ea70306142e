"""
Test Suite for Shapecheck.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end validation of realistic payloads
    - performance/: Throughput and copy-on-write benchmarks
    - fixtures/: Shared test data and configurations

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/shapecheck             # With coverage
"""
