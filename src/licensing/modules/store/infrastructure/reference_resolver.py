# src/licensing/modules/store/infrastructure/reference_resolver.py
"""
Resolución de referencias de almacén a rutas concretas.

Arquitectura: Infrastructure Layer
Responsabilidad: Traducir un LicenseStoreReference a (Path, modo simple/múltiple).
"""

from __future__ import annotations

from pathlib import Path

from licensing.modules.store.domain.exceptions import (
    UnsupportedReferenceKind,
    WrongStoreKind,
)
from licensing.modules.store.domain.value_objects import (
    FileLicenseStoreReference,
    LicenseId,
    LicenseStoreReference,
)

LICENSE_FILE_EXT = ".license"


def resolve_path(store: LicenseStoreReference) -> Path:
    """Solo las referencias de sistema de archivos son soportadas."""
    if isinstance(store, FileLicenseStoreReference):
        return store.path
    raise UnsupportedReferenceKind(
        f"Referencia de almacén no soportada [{type(store).__name__}] por esta implementación."
    )


def is_multi(store: LicenseStoreReference) -> bool:
    """
    Todo lo que no se declare explícitamente simple se trata como múltiple.
    Una referencia genérica o desconocida es, por tanto, múltiple.
    """
    return not isinstance(store, FileLicenseStoreReference) or store.multi


def license_file_path(store: LicenseStoreReference, license_id: LicenseId) -> Path:
    """Ruta `<directorio>/<id en minúsculas>.license` dentro de un almacén múltiple."""
    directory = resolve_path(store)

    if not is_multi(store):
        raise WrongStoreKind(
            f"Referencia inesperada: [{directory}] debería ser un almacén de múltiples licencias."
        )

    return directory / f"{str(license_id).lower()}{LICENSE_FILE_EXT}"
