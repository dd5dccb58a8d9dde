"""Core conversion modules for SizeConv.

This package contains:
- config: In-memory converter settings
- resolution: Display resolution detection and caching
- converter: Millimeter / point / pixel arithmetic
- print_size: Print font size to on-screen pixel size
"""
