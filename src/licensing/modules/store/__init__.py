# src/licensing/modules/store/__init__.py
"""
Módulo de Almacenamiento de Licencias.
"""

from __future__ import annotations

# Application
from .application.use_cases import LicenseCatalog

# Domain
from .domain.content import XML_MAGIC, ContentKind, decode_content, sniff
from .domain.entities import License, SignedLicense
from .domain.exceptions import (
    IOFailure,
    LicenseDecodeError,
    LicenseStoreError,
    NoSuchElement,
    OperationNotSupported,
    UnsupportedReferenceKind,
    WrongStoreKind,
)
from .domain.ports.codec import LicenseConverter, LicenseSerializer
from .domain.ports.store import LicenseStore
from .domain.value_objects import (
    FileLicenseStoreReference,
    LicenseId,
    LicenseKind,
    LicenseStoreReference,
    LicenseType,
)

# Infrastructure
from .infrastructure.filesystem_store import FileSystemLicenseStore
from .infrastructure.reference_resolver import is_multi, resolve_path
from .infrastructure.xml_codec import (
    XmlLicenseConverter,
    XmlLicenseSerializer,
    seal_license,
)

__all__ = [
    "XML_MAGIC",
    "ContentKind",
    "sniff",
    "decode_content",
    "License",
    "SignedLicense",
    "LicenseId",
    "LicenseKind",
    "LicenseType",
    "LicenseStoreReference",
    "FileLicenseStoreReference",
    "LicenseStoreError",
    "UnsupportedReferenceKind",
    "WrongStoreKind",
    "IOFailure",
    "NoSuchElement",
    "OperationNotSupported",
    "LicenseDecodeError",
    "LicenseSerializer",
    "LicenseConverter",
    "LicenseStore",
    "LicenseCatalog",
    "FileSystemLicenseStore",
    "resolve_path",
    "is_multi",
    "XmlLicenseSerializer",
    "XmlLicenseConverter",
    "seal_license",
]
