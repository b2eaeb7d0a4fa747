"""
Test suite for PyCoherent package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for the noise kernels, modules, noise maps, builder and CLI
- Integration tests for complete module-tree workflows

Run with: pytest
"""
