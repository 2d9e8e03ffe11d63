"""Servicios de aplicación: flujos que combinan API, sesión y reglas de formulario."""
