# src/licensing/modules/store/domain/exceptions.py
"""
Excepciones del dominio de Almacenamiento de Licencias.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes del sistema de archivos.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LicenseStoreError(Exception):
    """Clase base para errores en el módulo de almacenamiento."""

    pass


class UnsupportedReferenceKind(LicenseStoreError):
    """La referencia de almacén no es de un tipo que esta implementación sepa resolver."""

    pass


class WrongStoreKind(LicenseStoreError):
    """Operación de almacén simple sobre un almacén múltiple, o viceversa."""

    pass


class IOFailure(LicenseStoreError):
    """
    Fallo de lectura, escritura o decodificación sobre un archivo concreto.
    La causa original queda encadenada en __cause__.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class NoSuchElement(LicenseStoreError, StopIteration):
    """El iterador de licencias está agotado."""

    pass


class OperationNotSupported(LicenseStoreError):
    """Mutación solicitada sobre un iterador de solo lectura."""

    pass


class LicenseDecodeError(LicenseStoreError):
    """El contenido no es un XML de licencia ni un sobre firmado válido."""

    pass


class LicenseEncodeError(LicenseStoreError):
    """La licencia contiene valores que el formato XML no puede representar."""

    pass
