"""
nhlstreams Test Suite

Test Categories:
- unit/: Fast, isolated unit tests
- e2e/: Full playlist runs against mocked services
- fixtures/: Shared test data and mocks
"""
