"""
Helpers for tests that launch a real generator subprocess.
"""

import shlex
import sys


def python_command(script: str) -> str:
    """A shell-safe command line running ``script`` with this interpreter."""
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"


# Writes the received config's PYTHONPATH into <output_directory>/generated.txt
GENERATOR_SCRIPT = (
    "import json, os, pathlib, sys\n"
    "config = json.load(sys.stdin)\n"
    "out = pathlib.Path(config['output_directory'])\n"
    "out.mkdir(parents=True, exist_ok=True)\n"
    "(out / 'generated.txt').write_text(os.environ.get('PYTHONPATH', ''))\n"
)

FAILING_SCRIPT = "import sys\nsys.stderr.write('schema parse failed')\nsys.exit(3)\n"
