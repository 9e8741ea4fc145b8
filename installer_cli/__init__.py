"""
installer-cli: fetch and launch a fixed set of third-party installers.
"""

__version__ = "1.0.0"
