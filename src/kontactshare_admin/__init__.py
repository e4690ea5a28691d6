# ABOUTME: Main package initialization for the KontactShare admin client.
# ABOUTME: Exports version information from pyproject.toml.

from importlib.metadata import version

__version__ = version("kontactshare-admin")
