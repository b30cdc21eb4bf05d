"""Input splitting into tile blocks."""

from typing import List, Sequence


def split_blocks(lines: Sequence[str]) -> List[List[str]]:
    """
    Split lines into blank-line delimited blocks.

    Blank lines before the first block and after the last one are ignored.
    Inside the input every blank line ends a block, so two consecutive blank
    lines produce an empty block that the tile parser rejects.

    Args:
        lines: Input lines without line terminators

    Returns:
        List of blocks in input order, each a list of lines
    """
    lines = [line.rstrip() for line in lines]

    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1

    if start == end:
        return []

    blocks = [[]]
    for line in lines[start:end]:
        if line.strip():
            blocks[-1].append(line.strip())
        else:
            blocks.append([])

    return blocks
