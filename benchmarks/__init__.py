"""Performance benchmarks for iirkit.

This package contains microbenchmarks for the filtering hot paths: the
direct form, the linear and circular delay lines, and the FFT block modes.
"""
