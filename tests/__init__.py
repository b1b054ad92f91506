"""
Test suite for pixscale.

This test suite covers:
- Unit tests for the buffer, mapping, kernels, validator and resamplers
- Integration tests for the Pillow boundary and the CLI

Run with: pytest
"""
