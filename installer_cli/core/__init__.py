"""
Core application engine.

This package contains the `InstallController`, which walks the user through
the menus and drives the downloader and launcher for each selected product.
"""
