"""
Integration Tests - End-to-End Validation Tests.

These tests verify that schema construction, compilation, union dispatch
and the error surface work together on realistic payloads.

Test Files:
    - test_payload_validation.py: API-style payloads through the public API
"""
