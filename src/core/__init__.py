"""Core: configuración, dominio, queries y servicios.

El Core no conoce la CLI; recibe el transporte inyectado.
"""
