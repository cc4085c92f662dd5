# tests/property/__init__.py
"""Property-based tests for wrangler.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific examples we think of.

Test categories:
- test_extract_xpath_properties: row handling of the extract-xpath directive
- test_directive_lifecycle_state_machine: lifecycle transitions
"""
