"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos estrictas (Pydantic v2) y la jerarquía
  de errores.
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""
