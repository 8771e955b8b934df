"""
Toss the Remote movie recommendation application package.

This package contains the recommendation API, the title resolution and
metadata enrichment logic, the Streamlit client, and shared utilities.
"""

__version__ = "1.0.0"
