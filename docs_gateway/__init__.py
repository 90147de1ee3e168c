"""Document Store Gateway.

A small FastAPI backend that lets a documentation-editing frontend read and
write JSON documents, the site configuration file, and uploaded assets
beneath a configured documents root.
"""

__version__ = "1.0.0"
