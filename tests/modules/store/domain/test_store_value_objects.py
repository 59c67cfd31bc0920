# tests/modules/store/domain/test_store_value_objects.py
"""
Tests para Value Objects del Almacén de Licencias.
Enfoque: identificadores canónicos e inmutabilidad de referencias.
"""

import dataclasses
import uuid
from pathlib import Path

import pytest

from licensing.modules.store.domain.value_objects import (
    FileLicenseStoreReference,
    LicenseId,
)

# === Casos de Prueba para LicenseId ===


def test_license_id_is_lowercase_canonical_uuid():
    # Arrange
    raw = "3FA85F64-5717-4562-B3FC-2C963F66AFA6"

    # Act
    license_id = LicenseId.parse(raw)

    # Assert
    assert str(license_id) == "3fa85f64-5717-4562-b3fc-2c963f66afa6"
    assert license_id == LicenseId(uuid.UUID(raw))


def test_license_id_rejects_non_uuid():
    with pytest.raises(ValueError):
        LicenseId.parse("not-a-uuid")


def test_generated_ids_are_distinct():
    assert LicenseId.generate() != LicenseId.generate()


# === Casos de Prueba para FileLicenseStoreReference ===


def test_reference_defaults_to_multi_and_normalizes_path():
    ref = FileLicenseStoreReference("/var/lib/licenses")  # type: ignore[arg-type]

    assert ref.multi is True
    assert ref.path == Path("/var/lib/licenses")


def test_reference_mode_is_immutable():
    """
    Regla: el modo simple/múltiple queda fijado al construir la referencia.
    """
    ref = FileLicenseStoreReference(Path("/tmp/x.license"), multi=False)

    with pytest.raises(dataclasses.FrozenInstanceError):
        ref.multi = True  # type: ignore[misc]
