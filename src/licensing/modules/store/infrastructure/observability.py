# src/licensing/modules/store/infrastructure/observability.py
"""
Configuración centralizada de Logging y Métricas.

Principios SRE:
1. Logs estructurados para máquinas (Archivo).
2. Logs legibles para humanos (Consola).
3. Latencia y memoria residente en cada operación instrumentada.
"""

import functools
import json
import logging
import os
import sys
import time
import uuid
from pathlib import Path
from typing import Any, Callable

import psutil

from licensing.modules.store.domain.entities import License
from licensing.modules.store.domain.value_objects import (
    FileLicenseStoreReference,
    LicenseId,
    LicenseStoreReference,
)
from licensing.modules.store.infrastructure.reference_resolver import is_multi

logger = logging.getLogger("licensing")

DEFAULT_LOG_FILE = "licensing.log"


def configure_logging(level=logging.INFO, log_file: str | None = None):
    """
    Configura el sistema de logging con doble destino (File + Console).
    El archivo se toma de LICENSING_LOG_FILE si no se indica.
    """
    log_file = log_file or os.getenv("LICENSING_LOG_FILE", DEFAULT_LOG_FILE)

    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )
    # Formato detallado para archivo (Forensics)
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.debug(f"Observabilidad iniciada. Logs persistentes en: {log_file}")


def describe_store_call(args: tuple, kwargs: dict[str, Any]) -> dict[str, Any]:
    """
    Extrae de los argumentos de una operación de almacén:
    - target: ruta del almacén (o el primer Path suelto)
    - mode: "multi" | "single" según la referencia
    - license_id: id de la licencia o de la License implicada, si la hay
    """
    context: dict[str, Any] = {"target": "unknown", "mode": None, "license_id": None}

    for arg in (*args, *kwargs.values()):
        if isinstance(arg, FileLicenseStoreReference):
            context["target"] = str(arg.path)
            context["mode"] = "multi" if is_multi(arg) else "single"
        elif isinstance(arg, LicenseStoreReference):
            context["target"] = type(arg).__name__
            context["mode"] = "multi" if is_multi(arg) else "single"
        elif isinstance(arg, License):
            context["license_id"] = str(arg.id)
            context["kind"] = arg.kind.value
        elif isinstance(arg, LicenseId):
            context["license_id"] = str(arg)
        elif isinstance(arg, Path) and context["target"] == "unknown":
            context["target"] = str(arg)

    return context


class ObservabilityService:

    # Vista vertical (JSON indentado) si LICENSING_LOG_FORMAT=PRETTY
    PRETTY_PRINT = os.getenv("LICENSING_LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""
        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.debug(msg)

    @staticmethod
    def measure_latency(operation_name: str):
        """
        Decorador: registra inicio, fin o fallo de la operación con duración y RAM.
        Cada evento incluye el contexto del almacén (ver describe_store_call).
        """

        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()

                context = describe_store_call(args, kwargs)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={**context, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(time.perf_counter() - start_time, 4),
                            "crash_ram_mb": ObservabilityService._get_ram_usage_mb(),
                            **context,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.perf_counter() - start_time, 4),
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - start_ram, 2),
                        **context,
                        "status": "success",
                    },
                )
                return result

            return wrapper

        return decorator
