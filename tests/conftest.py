"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def project_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def copyright_file(tmp_path: Path) -> Path:
    """A copyright header with surrounding whitespace to be trimmed."""
    path = tmp_path / "copyright.txt"
    path.write_text(
        "\n\n/**\n * Copyright (c) 2024 Example Corp\n * All Rights Reserved.\n */\n\n\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A valid .suitegen.yml with every default set."""
    (tmp_path / "header.txt").write_text("// Example Corp\n", encoding="utf-8")
    content = textwrap.dedent("""\
        version: 1
        defaults:
          api_version: "2.x"
          script_type: suitelet
          copyright: header.txt
          modules:
            - log
            - runtime
    """)
    path = tmp_path / ".suitegen.yml"
    path.write_text(content, encoding="utf-8")
    return path
