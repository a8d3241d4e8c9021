from pathlib import Path

import pytest

PACKAGE_DIR = Path(__file__).resolve().parent.parent / "moodgarden"
HEADER = [
    "# Copyright (c) 2025 The MoodGarden Authors",
    "# This file is part of the MoodGarden - Your Wellness Garden project.",
    "# Licensed under the MIT License - see the LICENSE file for details.",
]


@pytest.mark.parametrize("path", sorted(PACKAGE_DIR.rglob("*.py")), ids=lambda p: str(p.relative_to(PACKAGE_DIR)))
def test_source_file_carries_project_header(path):
    assert path.read_text(encoding="utf-8").splitlines()[:3] == HEADER
