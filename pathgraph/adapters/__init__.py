"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the query service to graph storage (text files) and to
the path-finding engine.
"""
