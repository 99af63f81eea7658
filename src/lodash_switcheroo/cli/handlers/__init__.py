"""
Implementation modules for the CLI commands (convert, audit, snapshot).
"""
