"""Course domain services: hole detection and outbound payloads.

This package contains pure domain logic imported by the socket handlers,
keeping transport concerns separated from the course rules.
"""
