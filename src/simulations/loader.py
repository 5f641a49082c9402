"""
Map loading: read the initial block of cells and validate its shape.

The core assumes a non-empty rectangular block; everything that breaks
that assumption is rejected here with MalformedInput.
"""

from core.grid import Grid, MalformedInput


def parse_map(text: str) -> str:
    """Validate map text and return it with trailing line breaks removed."""
    lines = text.rstrip("\r\n").splitlines()
    width = max((len(line) for line in lines), default=0)
    if not width:
        raise MalformedInput("map is empty")

    for idx, line in enumerate(lines):
        if len(line) != width:
            raise MalformedInput(
                f"row {idx} has length {len(line)}, expected {width}"
            )
    return "\n".join(lines)


def load_map(path: str) -> str:
    """Read and validate a map file."""
    with open(path, encoding="utf-8") as f:
        return parse_map(f.read())


def build_grid(text: str, infected_marker: str = "#") -> Grid:
    return Grid.from_text(parse_map(text), infected_marker=infected_marker)
