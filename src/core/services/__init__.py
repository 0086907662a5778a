"""Servicios del Core: paginación de orbs y validación/expansión."""
