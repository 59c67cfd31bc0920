# tests/e2e/test_store_e2e.py
"""
Tests End-to-End (E2E) del Almacén de Licencias.
Objetivo: validar el ciclo de vida completo de un almacén múltiple sobre disco real.
"""

from licensing.modules.store.application.use_cases import LicenseCatalog
from licensing.modules.store.domain.value_objects import FileLicenseStoreReference
from licensing.modules.store.infrastructure.filesystem_store import (
    FileSystemLicenseStore,
)
from licensing.modules.store.infrastructure.xml_codec import (
    XmlLicenseConverter,
    XmlLicenseSerializer,
    seal_license,
)


def test_multi_store_full_lifecycle(tmp_path, license_factory):
    """
    Escenario: crear almacén, guardar 3 licencias, recuperar, iterar,
    borrar una, borrar el almacén.
    """
    # Arrange
    directory = tmp_path / "store"
    directory.mkdir()
    ref = FileLicenseStoreReference(directory)
    store = FileSystemLicenseStore(XmlLicenseSerializer(), XmlLicenseConverter())
    licenses = [license_factory(max_user_count=n) for n in (10, 20, 30)]

    # Act & Assert
    for license in licenses:
        store.store(ref, license)

    for license in licenses:
        assert store.retrieve(ref, license.id) == license

    assert len(list(store.get_iterable(ref))) == 3

    store.delete(ref, licenses[0].id)
    remaining = list(store.get_iterable(ref))
    assert len(remaining) == 2
    assert licenses[0] not in remaining

    store.delete(ref)
    assert list(store.get_iterable(ref)) == []
    assert list(store.get_iterable(ref)) == []


def test_mixed_formats_are_read_without_metadata(tmp_path, license_factory):
    """
    Escenario: el mismo directorio contiene licencias XML y sobres firmados.
    El formato se decide por contenido, no por extensión.
    """
    ref = FileLicenseStoreReference(tmp_path)
    catalog = LicenseCatalog(
        FileSystemLicenseStore(XmlLicenseSerializer(), XmlLicenseConverter())
    )
    plain = license_factory()
    signed = seal_license(license_factory(), b"opaque-signature")

    catalog.install(ref, plain)
    catalog.install(ref, signed)

    installed = {lic.id: lic for lic in catalog.installed(ref)}
    assert installed[plain.id] == plain
    assert installed[signed.id] == signed
    assert installed[signed.id].kind.value == "signed"
