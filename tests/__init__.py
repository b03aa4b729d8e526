"""
Test suite for FilterZoom.

Layout:
- unit/: kernels, accessors, contribution tables, resampler, CLI
- integration/: file round-trips through Pillow
"""
