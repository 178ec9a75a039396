"""
Cross-cutting pieces: settings, logging setup and error handling.
"""
