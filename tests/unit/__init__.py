"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_primitives.py: Primitive and literal schemas
    - test_object_schema.py: Object validation and parse modes
    - test_array_schema.py: Array validation
    - test_combinators.py: optional / assert_ / apply / chain
    - test_union_dispatch.py: Discriminated union dispatcher
    - test_schema_node.py: Terminals, memoization, construction errors
    - test_issue_tree.py: Issue tree flattening and error surface
    - test_config_loader.py: Configuration loading/validation
    - test_schema_parser.py: Configured parsing and logging
"""
