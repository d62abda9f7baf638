#!/usr/bin/env python3
"""
Wrapper for gostructify.

This is a convenience wrapper that forwards to the gostructify module, so it
can be run from a checkout without installing the console script.
Run with --help to see available options.

Usage:
    python structify.py [global options] <dialect> [dialect options]
    ./structify.py [global options] <dialect> [dialect options]  (on Unix with execute permission)

Dialects:
    mariadb     Generate structs from a MariaDB database
    mysql       Generate structs from a MySQL database
    postgresql  Generate structs from a PostgreSQL database
    vertica     Generate structs from a Vertica database (ODBC DSN)

Examples:
    python structify.py --tags json,gorm --methods gorm mariadb --database test --tables users
    python structify.py --nullable-type guregu --dry-run postgresql --database app --tables accounts
    python structify.py vertica --dsn vertica --database analytics --tables events
"""

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent


def main() -> int:
    """Forward all arguments to the gostructify module."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    return subprocess.call(
        [sys.executable, "-m", "gostructify"] + sys.argv[1:],
        env=env,
    )


if __name__ == "__main__":
    sys.exit(main())
