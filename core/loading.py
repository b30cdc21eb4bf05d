"""Line-oriented input loading."""

import textwrap
from pathlib import Path
from typing import List, Union


def load_lines(file_path: Union[str, Path]) -> List[str]:
    """Load a text file and return its lines without line terminators."""
    return Path(file_path).read_text(encoding="utf-8").splitlines()


def lines_from_text(text: str) -> List[str]:
    """
    Turn an indented multi-line string into lines.

    Common indentation is removed and the whole block is stripped, so
    fixtures can be written inline inside functions.
    """
    return [line.strip() for line in textwrap.dedent(text).strip().splitlines()]
