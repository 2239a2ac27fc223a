"""
Shared Kernel

Building blocks used across the Horoo apps: the JSON response envelope and
exception handler, identifier generation for listings, and the media host
client.
"""
