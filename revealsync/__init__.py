"""
revealsync - Live reveal.js preview synchronization

Keeps an editor's cursor, a reveal.js presentation's current slide and the
preview surface that embeds it in step, and coordinates HTML export.
"""

__version__ = "1.0.0"
__author__ = "revealsync Team"
