# src/licensing/modules/store/domain/value_objects.py
"""
Value Objects para el Bounded Context de Almacenamiento de Licencias.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Identificadores de licencia y referencias inmutables a almacenes.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y validación.
# ❌ SIN I/O: Una referencia nombra un lugar, no lo toca.


@dataclass(frozen=True)
class LicenseId:
    """
    Identificador único de una licencia dentro de un almacén múltiple.

    Su representación textual es la forma canónica de un UUID (minúsculas,
    con guiones). El nombre de archivo en disco depende de ella.
    """

    value: uuid.UUID

    @classmethod
    def generate(cls) -> LicenseId:
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, text: str) -> LicenseId:
        """Acepta mayúsculas o minúsculas. Lanza ValueError si no es un UUID."""
        return cls(uuid.UUID(text.strip()))

    def __str__(self) -> str:
        return str(self.value).lower()


class LicenseType(Enum):
    FREE = "FREE"
    TRIAL = "TRIAL"
    PAID = "PAID"


class LicenseKind(Enum):
    """
    Discriminador explícito de la variante de licencia.
    Decide el camino de escritura: texto serializado o bytes firmados tal cual.
    """

    PLAIN = "plain"
    SIGNED = "signed"


class LicenseStoreReference:
    """
    Handle opaco que nombra un lugar de persistencia.
    Las variantes concretas deciden cómo se resuelve.
    """


@dataclass(frozen=True)
class FileLicenseStoreReference(LicenseStoreReference):
    """
    Referencia a un almacén en el sistema de archivos.

    - multi=True: directorio con muchas licencias, una por archivo.
    - multi=False: un único archivo con exactamente una licencia.

    El modo queda fijado al construir la referencia.
    """

    path: Path
    multi: bool = True

    def __post_init__(self):
        # Normalizamos str -> Path sin romper la inmutabilidad
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))
