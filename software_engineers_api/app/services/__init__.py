"""
Service layer.

Query services only read; command services mutate and always check
that the target exists first.  Both work on a repository handed to
them at construction time.
"""
