"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI captura `IRacingApiError` sin conocer httpx ni pydantic.
- Cada fallo del protocolo (mantenimiento, HTTP, payload) se reporta distinto.
"""

from __future__ import annotations


class IRacingApiError(Exception):
    """Base de todos los fallos al hablar con la API de datos."""


class DownForMaintenanceError(IRacingApiError):
    def __init__(self) -> None:
        super().__init__("iRacing is down for maintenance")


class HttpStatusError(IRacingApiError):
    """Respuesta 4xx/5xx distinta de mantenimiento."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code} from {url}")


class UnknownApiResponseError(IRacingApiError):
    def __init__(self) -> None:
        super().__init__("got invalid api response data")


class DeserializationError(IRacingApiError):
    """El cuerpo no es JSON o no tiene la forma mínima esperada."""


class ApiTransportError(IRacingApiError):
    """Fallo de la request por debajo de HTTP (DNS, conexión, timeout, redirects, decoding)."""


class LicenseNotFoundError(Exception):
    """El miembro no tiene licencia para la disciplina pedida."""

    def __init__(self, cust_id: int, discipline: str) -> None:
        self.cust_id = cust_id
        self.discipline = discipline
        super().__init__(f"driver {cust_id} has no {discipline} license")


class DriverFileError(Exception):
    """El CSV de pilotos no existe o tiene filas inválidas."""


class ConfigError(Exception):
    """El fichero de configuración indicado no se puede cargar."""
