# src/licensing/modules/store/infrastructure/filesystem_store.py
"""
Adaptador de Infraestructura: almacén de licencias en el sistema de archivos.

Arquitectura: Modular Monolith
Capa: Infrastructure (Adapters)
Responsabilidad: Implementar LicenseStore sobre un archivo o un directorio de archivos .license.

Concurrencia: sin bloqueos. Un escritor y un lector concurrentes sobre el mismo
id pueden cruzarse; una escritura interrumpida deja un archivo truncado que la
lectura reporta como fallo de decodificación.
"""

import logging
import re
import shutil
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Optional, cast

from licensing.modules.store.domain.content import decode_content
from licensing.modules.store.domain.entities import License
from licensing.modules.store.domain.exceptions import (
    IOFailure,
    LicenseStoreError,
    NoSuchElement,
    OperationNotSupported,
    WrongStoreKind,
)
from licensing.modules.store.domain.ports.codec import (
    LicenseConverter,
    LicenseSerializer,
)

# === Imports de Dominio ===
from licensing.modules.store.domain.ports.store import LicenseStore
from licensing.modules.store.domain.value_objects import (
    LicenseId,
    LicenseKind,
    LicenseStoreReference,
)
from licensing.modules.store.infrastructure.observability import ObservabilityService
from licensing.modules.store.infrastructure.reference_resolver import (
    is_multi,
    license_file_path,
    resolve_path,
)

logger = logging.getLogger(__name__)

LICENSE_FILE_PATTERN = re.compile(
    r"[0-9a-f]{8}(?:-[0-9a-f]{4}){3}-[0-9a-f]{12}\.license"
)


def list_license_files(directory: Path) -> list[Path]:
    """
    Lista los archivos candidatos de un almacén múltiple, en orden de nombre.
    Un directorio inexistente equivale a un almacén vacío.
    """
    try:
        entries = sorted(directory.iterdir())
    except FileNotFoundError:
        return []
    except NotADirectoryError:
        logger.warning(f"El almacén no es un directorio: {directory}")
        return []
    except OSError as e:
        # Permisos o bucles de enlaces: se registra y el almacén se ve vacío
        logger.warning(f"No se pudo listar el almacén [{directory}]: {e}")
        return []

    return [p for p in entries if LICENSE_FILE_PATTERN.fullmatch(p.name)]


class LicenseFileIterator:
    """
    Iterador de un solo paso sobre una lista fija de archivos.

    Cada archivo se lee y decodifica solo cuando se consulta has_next().
    Consultar has_next() varias veces no avanza. Un archivo ilegible se
    registra como warning y se salta.
    """

    def __init__(self, files: Sequence[Path], read: Callable[[Path], License]):
        self._files = tuple(files)
        self._read = read
        self._index = 0
        self._next: Optional[License] = None

    def _compute_next(self) -> Optional[License]:
        while self._index < len(self._files):
            file = self._files[self._index]
            self._index += 1
            try:
                return self._read(file)
            except Exception:
                logger.warning(f"No se pudo leer el archivo de licencia [{file}].", exc_info=True)
        return None

    def has_next(self) -> bool:
        if self._next is None:
            self._next = self._compute_next()
        return self._next is not None

    def next(self) -> License:
        if not self.has_next():
            raise NoSuchElement()
        license = self._next
        self._next = None
        return cast(License, license)

    def remove(self) -> None:
        raise OperationNotSupported(
            "Este iterador no permite borrar licencias."
        )

    def __iter__(self) -> "LicenseFileIterator":
        return self

    __next__ = next


class LicenseFileIterable:
    """Cada llamada a iter() toma una instantánea nueva del directorio."""

    def __init__(self, directory: Path, read: Callable[[Path], License]):
        self.directory = directory
        self._read = read

    def __iter__(self) -> Iterator[License]:
        return LicenseFileIterator(list_license_files(self.directory), self._read)


class FileSystemLicenseStore(LicenseStore):
    """
    Implementación de LicenseStore sobre archivos locales.

    Colaboradores:
    - serializer: LicenseSerializer (licencias PLAIN -> texto XML)
    - converter: LicenseConverter (texto o bytes -> License)
    """

    def __init__(self, serializer: LicenseSerializer, converter: LicenseConverter):
        self._serializer = serializer
        self._converter = converter

    # === Lectura ===

    def _read_license(self, license_file: Path) -> License:
        """Lee, detecta el tipo de contenido y decodifica. Todo fallo es IOFailure."""
        try:
            data = license_file.read_bytes()
            return self._converter.convert(decode_content(data))
        except Exception as e:
            raise IOFailure(
                f"No se pudo leer la licencia de [{license_file}]: {e}", path=license_file
            ) from e

    @ObservabilityService.measure_latency(operation_name="license_store.retrieve")
    def retrieve(
        self, store: LicenseStoreReference, license_id: Optional[LicenseId] = None
    ) -> Optional[License]:
        if license_id is None:
            license_file = resolve_path(store)
            if is_multi(store):
                raise WrongStoreKind(
                    f"Referencia inesperada: [{license_file}] debería ser un almacén de una sola licencia."
                )
        else:
            license_file = license_file_path(store, license_id)

        if not license_file.exists():
            logger.debug(f"Sin licencia en: {license_file}")
            return None

        return self._read_license(license_file)

    def contains(self, store: LicenseStoreReference, license_id: LicenseId) -> bool:
        return license_file_path(store, license_id).exists()

    def get_iterable(self, store: LicenseStoreReference) -> LicenseFileIterable:
        directory = resolve_path(store)
        if not is_multi(store):
            raise WrongStoreKind(
                f"No se puede iterar un almacén de una sola licencia [{directory}]."
            )
        return LicenseFileIterable(directory, self._read_license)

    # === Escritura ===

    @ObservabilityService.measure_latency(operation_name="license_store.store")
    def store(self, store: LicenseStoreReference, license: License) -> None:
        if is_multi(store):
            license_file = license_file_path(store, license.id)
        else:
            license_file = resolve_path(store)

        if license.kind is LicenseKind.SIGNED:
            data = license.encoded  # type: ignore[attr-defined]
        else:
            try:
                data = self._serializer.serialize(license).encode("utf-8")
            except LicenseStoreError as e:
                raise IOFailure(
                    f"No se pudo serializar la licencia {license.id}: {e}", path=license_file
                ) from e

        try:
            license_file.write_bytes(data)
        except OSError as e:
            raise IOFailure(
                f"No se pudo escribir la licencia en [{license_file}]: {e}", path=license_file
            ) from e

        logger.debug(f"Licencia guardada: {license.id} | {license.kind.value} | {license_file}")

    # === Borrado ===

    def delete(
        self, store: LicenseStoreReference, license_id: Optional[LicenseId] = None
    ) -> None:
        if license_id is not None:
            self._unlink(license_file_path(store, license_id))
            return

        target = resolve_path(store)
        if is_multi(store):
            try:
                shutil.rmtree(target)
            except OSError as e:
                # Best-effort: el almacén puede no existir o quedar a medias
                logger.debug(f"Borrado del almacén [{target}] incompleto: {e}")
        else:
            self._unlink(target)

    @staticmethod
    def _unlink(license_file: Path) -> None:
        try:
            license_file.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"No se pudo borrar [{license_file}]: {e}")
