"""Script de ejecución.

Permite ejecutar la CLI con `python -m main` desde `src/` durante desarrollo,
además del script `rkdash` instalado por pip.
"""

from __future__ import annotations

import sys

# UnicodeEncodeError en terminales Windows (cp1252): las tablas usan bloques y ✔.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
