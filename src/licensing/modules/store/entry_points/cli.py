# src/licensing/modules/store/entry_points/cli.py
"""
Interfaz de Línea de Comandos (CLI) para el Almacén de Licencias.

Arquitectura: Interface Adapter
Responsabilidad: Traducir comandos de terminal a casos de uso del catálogo.
"""

import argparse
import logging
import sys
from pathlib import Path

from licensing.modules.store.application.use_cases import LicenseCatalog
from licensing.modules.store.domain.entities import License
from licensing.modules.store.domain.exceptions import LicenseStoreError
from licensing.modules.store.domain.value_objects import (
    FileLicenseStoreReference,
    LicenseId,
)
from licensing.modules.store.infrastructure.filesystem_store import (
    FileSystemLicenseStore,
)
from licensing.modules.store.infrastructure.observability import configure_logging
from licensing.modules.store.infrastructure.xml_codec import (
    XmlLicenseConverter,
    XmlLicenseSerializer,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="licensing-store", description="Gestión de un almacén de licencias"
    )
    parser.add_argument(
        "--store", "-s", required=True, help="Directorio (o archivo con --single) del almacén"
    )
    parser.add_argument(
        "--single",
        action="store_true",
        help="El almacén es un único archivo con una licencia",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Logs en DEBUG")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="Listar licencias legibles")
    show = commands.add_parser("show", help="Mostrar una licencia")
    show.add_argument("license_id", nargs="?", help="Id (omitir con --single)")
    imp = commands.add_parser("import", help="Importar un archivo de licencia")
    imp.add_argument("file", help="Archivo XML o sobre firmado")
    delete = commands.add_parser("delete", help="Borrar una licencia por id")
    delete.add_argument("license_id")
    commands.add_parser("purge", help="Borrar el almacén completo")

    return parser


def _format_row(license: License) -> str:
    expires = license.expiration_date.date().isoformat() if license.expiration_date else "-"
    return f"{str(license.id):<36} | {license.type.value:<6} | {license.kind.value:<6} | {expires}"


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    # 1. Composición (Wiring)
    ref = FileLicenseStoreReference(Path(args.store), multi=not args.single)
    store = FileSystemLicenseStore(XmlLicenseSerializer(), XmlLicenseConverter())
    catalog = LicenseCatalog(store)

    # 2. Ejecución del Caso de Uso
    try:
        if args.command == "list":
            licenses = catalog.installed(ref)
            if not licenses:
                print("No hay licencias en el almacén.")
                return 0
            print(f"{'ID':<36} | {'TIPO':<6} | {'FORMA':<6} | EXPIRA")
            print("-" * 72)
            for license in licenses:
                print(_format_row(license))

        elif args.command == "show":
            if args.single:
                license = catalog.find(ref)
            else:
                if not args.license_id:
                    print("Falta el id de la licencia.", file=sys.stderr)
                    return 2
                license = catalog.find(ref, LicenseId.parse(args.license_id))
            if license is None:
                print("Licencia no encontrada.")
                return 1
            print(_format_row(license))
            for name, value in license.licensee.items():
                print(f"   {name}: {value}")
            if license.features:
                print(f"   features: {', '.join(license.features)}")

        elif args.command == "import":
            license = catalog.import_file(ref, Path(args.file), XmlLicenseConverter())
            print(f"Importada: {license.id}")

        elif args.command == "delete":
            removed = catalog.uninstall(ref, LicenseId.parse(args.license_id))
            print("Borrada." if removed else "No existía.")

        elif args.command == "purge":
            catalog.purge(ref)
            print("Almacén eliminado.")

    except (LicenseStoreError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
