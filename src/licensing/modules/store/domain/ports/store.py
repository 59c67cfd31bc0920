# src/licensing/modules/store/domain/ports/store.py
"""
Puerto (Interface) para la persistencia de licencias.

Arquitectura: Modular Monolith
Capa: Domain -> Ports
Responsabilidad: Abstraer dónde y cómo se guardan las licencias.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional

# === Imports de Tipos de Dominio ===
from licensing.modules.store.domain.entities import License
from licensing.modules.store.domain.value_objects import (
    LicenseId,
    LicenseStoreReference,
)


class LicenseStore(ABC):
    """
    Contrato para guardar, recuperar, recorrer y borrar licencias.

    Política de errores:
    - Operaciones individuales (store, retrieve) son estrictas: propagan fallos.
    - Operaciones masivas (iteración, borrado del almacén) son best-effort:
      registran los fallos y continúan.
    - "No existe" nunca es un error: retrieve devuelve None.
    """

    @abstractmethod
    def store(self, store: LicenseStoreReference, license: License) -> None:
        """
        Crea o sobrescribe la licencia en el almacén.
        En un almacén múltiple el archivo se elige por license.id.
        """
        pass

    @abstractmethod
    def retrieve(
        self, store: LicenseStoreReference, license_id: Optional[LicenseId] = None
    ) -> Optional[License]:
        """
        Sin license_id: lee un almacén simple.
        Con license_id: lee esa licencia de un almacén múltiple.
        """
        pass

    @abstractmethod
    def contains(self, store: LicenseStoreReference, license_id: LicenseId) -> bool:
        """
        Indica si hay un archivo para ese id, sin leerlo ni decodificarlo.
        Un archivo corrupto también cuenta como presente.
        """
        pass

    @abstractmethod
    def get_iterable(self, store: LicenseStoreReference) -> Iterable[License]:
        """Recorre perezosamente todas las licencias legibles de un almacén múltiple."""
        pass

    @abstractmethod
    def delete(
        self, store: LicenseStoreReference, license_id: Optional[LicenseId] = None
    ) -> None:
        """
        Sin license_id: borra el almacén completo (best-effort).
        Con license_id: borra esa licencia si existe.
        """
        pass
