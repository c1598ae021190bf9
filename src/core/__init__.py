"""Core de irating-fetch: dominio, contratos, servicios y configuración.

No depende de la CLI ni del transporte HTTP concreto.
"""
