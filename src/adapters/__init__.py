"""Adaptadores de I/O (HTTP, sistema de ficheros)."""
