# src/licensing/modules/store/infrastructure/xml_codec.py
"""
Códec de licencias: XML plano y sobre binario firmado.

Arquitectura: Infrastructure Layer
Responsabilidad: Implementar LicenseSerializer y LicenseConverter.

Formato del sobre firmado (big-endian):
    b"LICS" | versión (1 byte) | len(payload) (4 bytes) | len(firma) (4 bytes)
    | payload XML UTF-8 | firma opaca

La firma se transporta, nunca se verifica aquí.
"""

from __future__ import annotations

import re
import struct
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Optional

from licensing.modules.store.domain.content import LicenseContent
from licensing.modules.store.domain.entities import License, SignedLicense
from licensing.modules.store.domain.exceptions import (
    LicenseDecodeError,
    LicenseEncodeError,
)
from licensing.modules.store.domain.value_objects import LicenseId, LicenseType

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

ENVELOPE_MAGIC = b"LICS"
ENVELOPE_VERSION = 1
_ENVELOPE_HEADER = struct.Struct(">4sBII")

# Caracteres que XML 1.0 no admite, más \r (el parser lo normaliza a \n en texto)
_NON_REPRESENTABLE = re.compile(
    "[^\x09\x0a\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)
# En atributos, \t y \n tampoco sobreviven a la normalización del parser
_NON_REPRESENTABLE_ATTR = re.compile("[^\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _checked(value: str, field_name: str, attribute: bool = False) -> str:
    pattern = _NON_REPRESENTABLE_ATTR if attribute else _NON_REPRESENTABLE
    match = pattern.search(value)
    if match:
        raise LicenseEncodeError(
            f"El campo {field_name} contiene un carácter no representable en XML: "
            f"U+{ord(match.group()):04X}"
        )
    return value


class XmlLicenseSerializer:
    """Serializa una licencia simple a un documento <license>."""

    def serialize(self, license: License) -> str:
        root = ET.Element("license")
        ET.SubElement(root, "id").text = str(license.id)
        ET.SubElement(root, "type").text = license.type.value

        licensee = ET.SubElement(root, "licensee")
        for name, value in license.licensee.items():
            entry = ET.SubElement(
                licensee, "entry", name=_checked(name, "licensee", attribute=True)
            )
            entry.text = _checked(value, f"licensee[{name!r}]")

        features = ET.SubElement(root, "features")
        for feature_id in license.features:
            ET.SubElement(features, "feature").text = _checked(feature_id, "features")

        if license.expiration_date is not None:
            ET.SubElement(root, "expirationDate").text = (
                license.expiration_date.isoformat()
            )
        if license.max_user_count is not None:
            ET.SubElement(root, "maxUserCount").text = str(license.max_user_count)

        return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def _parse_license_xml(text: str) -> License:
    try:
        root = ET.fromstring(text.encode("utf-8"))
    except ET.ParseError as e:
        raise LicenseDecodeError(f"XML de licencia mal formado: {e}") from e

    if root.tag != "license":
        raise LicenseDecodeError(f"Elemento raíz inesperado: <{root.tag}>")

    try:
        license_id = LicenseId.parse(root.findtext("id", default=""))
        license_type = LicenseType(root.findtext("type", default="FREE").strip())

        licensee = {
            entry.attrib.get("name", ""): entry.text or ""
            for entry in root.findall("licensee/entry")
        }
        features = tuple(
            feature.text or "" for feature in root.findall("features/feature")
        )

        expiration: Optional[datetime] = None
        expiration_text = root.findtext("expirationDate")
        if expiration_text:
            expiration = datetime.fromisoformat(expiration_text.strip())

        max_users: Optional[int] = None
        max_users_text = root.findtext("maxUserCount")
        if max_users_text:
            max_users = int(max_users_text)
    except ValueError as e:
        raise LicenseDecodeError(f"Campo de licencia inválido: {e}") from e

    return License(
        id=license_id,
        type=license_type,
        licensee=licensee,
        features=features,
        expiration_date=expiration,
        max_user_count=max_users,
    )


def seal_license(
    license: License, signature: bytes, serializer: Optional[XmlLicenseSerializer] = None
) -> SignedLicense:
    """
    Empaqueta una licencia y una firma (ya calculada por terceros) en un sobre.
    Devuelve la SignedLicense cuyo `encoded` es el sobre completo.
    """
    serializer = serializer or XmlLicenseSerializer()
    payload = serializer.serialize(license).encode("utf-8")
    header = _ENVELOPE_HEADER.pack(
        ENVELOPE_MAGIC, ENVELOPE_VERSION, len(payload), len(signature)
    )
    return SignedLicense(
        id=license.id,
        type=license.type,
        licensee=dict(license.licensee),
        features=license.features,
        expiration_date=license.expiration_date,
        max_user_count=license.max_user_count,
        encoded=header + payload + signature,
    )


def open_envelope(data: bytes) -> tuple[bytes, bytes]:
    """Separa (payload, firma). Lanza LicenseDecodeError si el sobre es inválido."""
    if len(data) < _ENVELOPE_HEADER.size:
        raise LicenseDecodeError(
            f"Sobre firmado truncado: {len(data)} bytes, cabecera de {_ENVELOPE_HEADER.size}"
        )

    magic, version, payload_len, signature_len = _ENVELOPE_HEADER.unpack_from(data)
    if magic != ENVELOPE_MAGIC:
        raise LicenseDecodeError(f"Firma de sobre desconocida: {magic!r}")
    if version != ENVELOPE_VERSION:
        raise LicenseDecodeError(f"Versión de sobre no soportada: {version}")

    start = _ENVELOPE_HEADER.size
    end = start + payload_len
    if len(data) != end + signature_len:
        raise LicenseDecodeError("Longitudes del sobre firmado inconsistentes")

    return data[start:end], data[end:]


class XmlLicenseConverter:
    """
    Texto -> License (XML plano).
    Bytes -> SignedLicense (sobre firmado con el mismo XML dentro).
    """

    def convert(self, content: LicenseContent) -> License:
        if isinstance(content, str):
            return _parse_license_xml(content)

        payload, _signature = open_envelope(content)
        try:
            inner = _parse_license_xml(payload.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise LicenseDecodeError("Payload del sobre no es UTF-8") from e

        return SignedLicense(
            id=inner.id,
            type=inner.type,
            licensee=inner.licensee,
            features=inner.features,
            expiration_date=inner.expiration_date,
            max_user_count=inner.max_user_count,
            encoded=content,
        )
