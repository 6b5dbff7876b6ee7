"""
entitykit: a generic entity-lifecycle pipeline.

controller -> service -> mapper -> repository, implemented once and reused
by every resource type.
"""

__version__ = "0.1.0"
