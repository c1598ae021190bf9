"""Servicios del Core: orquestación de lotes y selección de licencias."""
