"""
Built in unsplashed subcommands. Each module defines a click command named 'cli'.
"""
