"""Modelos y lógica pura del dominio.

Aquí viven los modelos Pydantic de la API y los cálculos sin I/O (duraciones,
progreso de nivel). El dominio no conoce HTTP ni la CLI.
"""
