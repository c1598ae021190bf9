"""Adaptadores de infraestructura (HTTP, CSV)."""
