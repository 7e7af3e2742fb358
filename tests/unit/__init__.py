"""
Unit tests for the rule pipeline.

Test individual components in isolation:
- Outcome models (merge laws, edge cases, immutability)
- Pipeline execution (halt semantics, fatal errors, metrics)
- Builder
- Built-in stages
"""
