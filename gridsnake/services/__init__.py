"""
Host-side services: board rendering and replay storage.
"""
