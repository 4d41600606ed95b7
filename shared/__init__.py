"""
Shared Kernel

Building blocks used by every domain app: the error taxonomy raised by
services and the DRF glue that renders it.
"""
