# src/licensing/modules/store/application/use_cases.py
"""
Casos de Uso para la gestión de licencias instaladas.

Arquitectura: Modular Monolith
Capa: Application
Responsabilidad: Coordinar instalación, consulta y retirada de licencias sobre un LicenseStore.
"""

import logging
from pathlib import Path
from typing import Optional

from licensing.modules.store.domain.content import decode_content
from licensing.modules.store.domain.entities import License
from licensing.modules.store.domain.exceptions import IOFailure
from licensing.modules.store.domain.ports.codec import LicenseConverter

# === Imports de Dominio ===
from licensing.modules.store.domain.ports.store import LicenseStore
from licensing.modules.store.domain.value_objects import (
    LicenseId,
    LicenseStoreReference,
)

logger = logging.getLogger("licensing.app")


class LicenseCatalog:
    """
    Caso de Uso Principal: mantener el catálogo de licencias de un almacén.

    Colaboradores:
    - store: LicenseStore (Puerto)
    """

    def __init__(self, store: LicenseStore):
        self.store = store

    def install(self, ref: LicenseStoreReference, license: License) -> None:
        self.store.store(ref, license)
        logger.info(f"[INSTALL] Licencia {license.id} ({license.kind.value})")

    def find(
        self, ref: LicenseStoreReference, license_id: Optional[LicenseId] = None
    ) -> Optional[License]:
        """Sin license_id lee un almacén simple; con él, esa licencia del almacén múltiple."""
        return self.store.retrieve(ref, license_id)

    def installed(self, ref: LicenseStoreReference) -> list[License]:
        """Materializa la iteración perezosa; los archivos corruptos se omiten."""
        licenses = list(self.store.get_iterable(ref))
        logger.info(f"Licencias legibles en el almacén: {len(licenses)}")
        return licenses

    def uninstall(self, ref: LicenseStoreReference, license_id: LicenseId) -> bool:
        """Devuelve True si la licencia existía antes de borrarla."""
        # Sin decodificar: los archivos corruptos también deben poder borrarse
        existed = self.store.contains(ref, license_id)
        self.store.delete(ref, license_id)
        if existed:
            logger.info(f"[UNINSTALL] Licencia {license_id}")
        return existed

    def import_file(
        self, ref: LicenseStoreReference, source: Path, converter: LicenseConverter
    ) -> License:
        """
        Lee un archivo de licencia de cualquier ubicación (XML o sobre firmado)
        y lo instala en el almacén.

        Raises:
            IOFailure: Si el archivo no se puede leer o decodificar.
        """
        try:
            license = converter.convert(decode_content(source.read_bytes()))
        except Exception as e:
            raise IOFailure(f"No se pudo importar [{source}]: {e}", path=source) from e

        self.install(ref, license)
        return license

    def purge(self, ref: LicenseStoreReference) -> None:
        self.store.delete(ref)
        logger.info("[PURGE] Almacén eliminado")
