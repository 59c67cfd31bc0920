# src/licensing/modules/store/domain/content.py
"""
Detección del tipo de contenido de un archivo de licencia (sniffing).

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Decidir, por el prefijo de bytes, si el contenido es XML o un sobre binario.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Union

# Prefijo "<?xml " en bytes
XML_MAGIC = bytes([0x3C, 0x3F, 0x78, 0x6D, 0x6C, 0x20])

LicenseContent = Union[str, bytes]


class ContentKind(Enum):
    TEXT = auto()
    BINARY = auto()


def sniff(data: bytes) -> ContentKind:
    """
    Función pura: TEXT si los datos empiezan por XML_MAGIC, BINARY en otro caso.
    Un contenido más corto que el prefijo siempre es BINARY.
    """
    if data[: len(XML_MAGIC)] == XML_MAGIC:
        return ContentKind.TEXT
    return ContentKind.BINARY


def decode_content(data: bytes) -> LicenseContent:
    """Convierte a str (UTF-8) solo si el sniff dice TEXT; si no, devuelve los bytes."""
    if sniff(data) is ContentKind.TEXT:
        return data.decode("utf-8")
    return data
