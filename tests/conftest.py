# tests/conftest.py
from datetime import datetime, timezone

import pytest

from licensing.modules.store.domain.entities import License
from licensing.modules.store.domain.value_objects import (
    FileLicenseStoreReference,
    LicenseId,
    LicenseType,
)
from licensing.modules.store.infrastructure.filesystem_store import (
    FileSystemLicenseStore,
)
from licensing.modules.store.infrastructure.xml_codec import (
    XmlLicenseConverter,
    XmlLicenseSerializer,
)


@pytest.fixture
def license_factory():
    """
    Factory de licencias simples con campos de negocio realistas.
    Cada llamada genera un id nuevo salvo que se indique uno.
    """

    def _create(license_id: LicenseId | None = None, **overrides) -> License:
        fields = dict(
            id=license_id or LicenseId.generate(),
            type=LicenseType.PAID,
            licensee={"name": "ACME Corp", "email": "admin@acme.example"},
            features=("application-forum", "application-ideas"),
            expiration_date=datetime(2030, 1, 31, 12, 0, tzinfo=timezone.utc),
            max_user_count=50,
        )
        fields.update(overrides)
        return License(**fields)

    return _create


@pytest.fixture
def fs_store():
    return FileSystemLicenseStore(XmlLicenseSerializer(), XmlLicenseConverter())


@pytest.fixture
def multi_ref(tmp_path):
    directory = tmp_path / "licenses"
    directory.mkdir()
    return FileLicenseStoreReference(directory, multi=True)


@pytest.fixture
def single_ref(tmp_path):
    return FileLicenseStoreReference(tmp_path / "instance.license", multi=False)
