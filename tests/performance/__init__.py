"""
Performance Tests.

Benchmarks for Shapecheck performance requirements:
    - 20000 valid records parsed without copying < 5 seconds
    - Discriminated unions invoke exactly one alternative per value
    - Concurrent parsing from many threads on shared schemas
"""
