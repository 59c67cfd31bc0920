# tests/modules/store/domain/test_license_entities.py
"""
Tests para las variantes de License.
"""

import pytest

from licensing.modules.store.domain.entities import License, SignedLicense
from licensing.modules.store.domain.value_objects import LicenseId, LicenseKind


def test_plain_license_kind():
    license = License(id=LicenseId.generate())

    assert license.kind is LicenseKind.PLAIN


def test_signed_license_kind_and_unsigned_copy():
    # Arrange
    license_id = LicenseId.generate()
    signed = SignedLicense(
        id=license_id, licensee={"name": "ACME"}, max_user_count=10, encoded=b"LICS..."
    )

    # Act
    plain = signed.unsigned()

    # Assert
    assert signed.kind is LicenseKind.SIGNED
    assert plain.kind is LicenseKind.PLAIN
    assert plain == License(id=license_id, licensee={"name": "ACME"}, max_user_count=10)


def test_plain_and_signed_are_never_equal():
    """Exactamente una variante aplica a cada valor."""
    license_id = LicenseId.generate()

    assert License(id=license_id) != SignedLicense(id=license_id, encoded=b"LICS...")


def test_signed_license_requires_encoded_envelope():
    """Una licencia firmada sin sobre dejaría un archivo vacío e ilegible."""
    with pytest.raises(ValueError):
        SignedLicense(id=LicenseId.generate())
