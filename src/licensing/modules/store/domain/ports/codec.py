# src/licensing/modules/store/domain/ports/codec.py
"""
Puertos para la conversión entre licencias y su forma persistida.

Arquitectura: Domain Port (Interface)
Responsabilidad: Contratos mínimos que el almacén necesita del códec.
"""

from __future__ import annotations

from typing import Protocol

from licensing.modules.store.domain.content import LicenseContent
from licensing.modules.store.domain.entities import License


class LicenseSerializer(Protocol):
    """
    Convierte una licencia simple en texto (XML).

    Implementaciones esperadas:
    - XmlLicenseSerializer (Infraestructura)
    """

    def serialize(self, license: License) -> str:
        """Solo se invoca para licencias de variante PLAIN."""
        ...


class LicenseConverter(Protocol):
    """
    Reconstruye una licencia a partir del contenido leído de disco.

    Implementaciones esperadas:
    - XmlLicenseConverter (Infraestructura)
    """

    def convert(self, content: LicenseContent) -> License:
        """
        Args:
            content: str si el archivo se detectó como XML, bytes en otro caso.

        Raises:
            LicenseDecodeError: Si el contenido no representa una licencia.
        """
        ...
