#!/usr/bin/env python3
"""
Pipeline de CI Local para el Almacén de Licencias.
Lint, tipos del dominio, tests unitarios y tests E2E sobre disco.

Uso: python scripts/ci_pipeline.py
"""

import subprocess
import sys
import time
from datetime import datetime

GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
BOLD = "\033[1m"
ENDC = "\033[0m"

STEPS = [
    # (nombre, comando, bloqueante)
    ("LINT", "ruff check src/ tests/", False),
    ("TIPOS (DOMINIO)", "mypy src/licensing/modules/store/domain", True),
    (
        "TESTS UNITARIOS",
        "pytest tests/modules/store/domain tests/modules/store/application -q",
        True,
    ),
    (
        "TESTS INFRAESTRUCTURA & E2E",
        "pytest tests/modules/store/infrastructure tests/e2e -q",
        True,
    ),
]


def run_step(name: str, command: str) -> bool:
    print(f"\n{BOLD}=== {name} ==={ENDC}\n$ {command}")
    start = time.time()
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == 0:
        print(f"{GREEN}PASÓ ({duration:.2f}s){ENDC}")
        return True

    print(f"{RED}FALLÓ ({duration:.2f}s){ENDC}")
    print(f"{YELLOW}{result.stdout}{result.stderr}{ENDC}")
    return False


def main():
    start_total = time.time()
    print(f"{BOLD}Pipeline CI - licensing-store{ENDC} ({datetime.now():%Y-%m-%d %H:%M})")

    for name, command, blocking in STEPS:
        if not run_step(name, command):
            if blocking:
                sys.exit(1)
            print(f"{YELLOW}Advertencias no bloqueantes{ENDC}")

    print(f"\n{GREEN}BUILD OK en {time.time() - start_total:.2f}s{ENDC}")


if __name__ == "__main__":
    main()
