"""
Cross-cutting infrastructure: settings, logging, SQLite access and the
domain exceptions.
"""
