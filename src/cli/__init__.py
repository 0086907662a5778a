"""Capa CLI (Typer + Rich).

Por qué:
- Parseo de flags y presentación; no contiene lógica de paginación ni de
  validación.
"""
