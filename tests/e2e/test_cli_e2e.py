# tests/e2e/test_cli_e2e.py
"""
Tests E2E para la CLI `licensing-store`.
"""

import pytest

from licensing.modules.store.domain.value_objects import LicenseId
from licensing.modules.store.entry_points import cli
from licensing.modules.store.infrastructure.xml_codec import (
    XmlLicenseSerializer,
    seal_license,
)


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    # La CLI reconfigura el root logger; en tests no tocamos los handlers de pytest
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


def test_import_list_show_delete(tmp_path, capsys, license_factory):
    # Arrange
    store_dir = tmp_path / "licenses"
    store_dir.mkdir()
    license = license_factory()
    source = tmp_path / "incoming.xml"
    source.write_text(XmlLicenseSerializer().serialize(license), encoding="utf-8")

    # Act & Assert
    assert cli.main(["--store", str(store_dir), "import", str(source)]) == 0
    assert str(license.id) in capsys.readouterr().out

    assert cli.main(["--store", str(store_dir), "list"]) == 0
    out = capsys.readouterr().out
    assert str(license.id) in out
    assert "PAID" in out

    assert cli.main(["--store", str(store_dir), "show", str(license.id).upper()]) == 0
    assert "ACME Corp" in capsys.readouterr().out

    assert cli.main(["--store", str(store_dir), "delete", str(license.id)]) == 0
    assert "Borrada" in capsys.readouterr().out

    assert cli.main(["--store", str(store_dir), "list"]) == 0
    assert "No hay licencias" in capsys.readouterr().out


def test_show_single_store(tmp_path, capsys, license_factory):
    single = tmp_path / "instance.license"
    single.write_bytes(seal_license(license_factory(), b"sig").encoded)

    assert cli.main(["--store", str(single), "--single", "show"]) == 0
    assert "signed" in capsys.readouterr().out


def test_wrong_store_kind_exits_with_error(tmp_path, capsys):
    single = tmp_path / "instance.license"

    assert cli.main(["--store", str(single), "--single", "list"]) == 1
    assert "Error" in capsys.readouterr().err


def test_purge_removes_store(tmp_path, capsys, license_factory):
    store_dir = tmp_path / "licenses"
    store_dir.mkdir()
    (store_dir / f"{license_factory().id}.license").write_text("corrupt")

    assert cli.main(["--store", str(store_dir), "purge"]) == 0
    assert not store_dir.exists()


def test_delete_corrupt_license(tmp_path, capsys):
    store_dir = tmp_path / "licenses"
    store_dir.mkdir()
    license_id = LicenseId.generate()
    (store_dir / f"{license_id}.license").write_bytes(b"\x00corrupt")

    assert cli.main(["--store", str(store_dir), "delete", str(license_id)]) == 0
    assert "Borrada" in capsys.readouterr().out
    assert list(store_dir.iterdir()) == []
