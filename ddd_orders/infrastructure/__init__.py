"""
Infrastructure Layer
====================

Configuration and logging setup.
"""
