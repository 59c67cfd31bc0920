# src/licensing/modules/store/domain/entities.py
"""
Entidades del dominio de Licencias.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Representar una licencia en sus dos variantes (simple y firmada).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional

# === Imports del Mismo Módulo ===
from .value_objects import LicenseId, LicenseKind, LicenseType

# === Guía de Organización ===
# ✅ IDENTIDAD: Una licencia se localiza en disco por su id.
# ✅ VARIANTE: `kind` es parte del tipo, no de la configuración del almacén.


@dataclass(frozen=True)
class License:
    """
    Licencia simple. Antes de escribirse a disco debe pasar por el serializador.

    Los campos de negocio se transportan tal cual; validarlos o interpretarlos
    no es responsabilidad de este módulo.
    """

    kind: ClassVar[LicenseKind] = LicenseKind.PLAIN

    id: LicenseId
    type: LicenseType = LicenseType.FREE
    licensee: dict[str, str] = field(default_factory=dict)
    features: tuple[str, ...] = ()
    expiration_date: Optional[datetime] = None
    max_user_count: Optional[int] = None


@dataclass(frozen=True)
class SignedLicense(License):
    """
    Licencia firmada: ya trae su forma canónica codificada (sobre con firma).
    Se escribe byte a byte, sin pasar por el serializador.
    """

    kind: ClassVar[LicenseKind] = LicenseKind.SIGNED

    encoded: bytes = b""

    def __post_init__(self):
        if not self.encoded:
            raise ValueError(f"La licencia firmada {self.id} no trae su sobre codificado.")

    def unsigned(self) -> License:
        """Devuelve la misma licencia sin el sobre firmado."""
        return License(
            id=self.id,
            type=self.type,
            licensee=dict(self.licensee),
            features=self.features,
            expiration_date=self.expiration_date,
            max_user_count=self.max_user_count,
        )
