"""
Safe KEY=value config file parser.

The file is never sourced by a shell; values containing shell
constructs are rejected outright.
"""

import re
from pathlib import Path

FORBIDDEN_PATTERNS = [
    r'`',           # backticks
    r'\$\(',        # command substitution
    r'\$\{',        # variable expansion
    r';',           # command chaining
    r'&&',          # AND chaining
    r'\|',          # pipe / OR chaining
]

KEY_PATTERN = re.compile(r'^[A-Z][A-Z0-9_]*$')


def load_env(path: Path) -> dict[str, str]:
    """
    Parse a config file into a dict.

    Blank lines and lines starting with '#' are skipped, a leading
    "export " is tolerated, and matching surrounding quotes are stripped.

    Raises:
        FileNotFoundError: if the file doesn't exist
        ValueError: if a line is malformed or holds a forbidden pattern
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    result = {}
    for lineno, line in enumerate(path.read_text().splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        if line.startswith('export '):
            line = line[len('export '):].lstrip()

        if '=' not in line:
            raise ValueError(f"{path}:{lineno}: expected KEY=value")

        key, _, value = line.partition('=')
        key = key.strip()
        value = value.strip()

        if not KEY_PATTERN.match(key):
            raise ValueError(f"{path}:{lineno}: invalid key '{key}'")

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]

        for pattern in FORBIDDEN_PATTERNS:
            if re.search(pattern, value):
                raise ValueError(f"{path}:{lineno}: forbidden pattern in value of {key}")

        result[key] = value

    return result
