"""Route groups for the Document Store Gateway.

This module collects logically-related endpoints:
- health: service status and resolved paths
- docs: document index, single-document read and save
- site_config: the global configuration file
- files: base64 uploads and document renames
"""
