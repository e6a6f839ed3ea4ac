"""
Data models for imgdedup.

Contains dataclasses for fingerprints and reported duplicate pairs.
"""

from dataclasses import dataclass

# A single grid cell: averaged (red, green, blue) in the 0-255 range
Cell = tuple[int, int, int]
Grid = tuple[tuple[Cell, ...], ...]


def format_size(size_bytes: int) -> str:
    """Format file size in human-readable form."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


@dataclass(frozen=True)
class Fingerprint:
    """
    Coarse perceptual summary of an image.

    Attributes:
        grid: N x N cells of averaged (r, g, b), indexed grid[column][row]
        subdivisions: N, the grid side length
        width: Width of the source image in pixels
        height: Height of the source image in pixels
        file_size: Size of the source file in bytes
    """
    grid: Grid
    subdivisions: int
    width: int = 0
    height: int = 0
    file_size: int = 0

    def __post_init__(self):
        n = self.subdivisions
        if n < 1:
            raise ValueError(f"subdivisions must be >= 1, got {n}")
        if len(self.grid) != n or any(len(column) != n for column in self.grid):
            raise ValueError(f"grid must be {n} x {n}")
        for column in self.grid:
            for cell in column:
                if len(cell) != 3 or any(not 0 <= v <= 255 for v in cell):
                    raise ValueError(f"invalid cell value {cell!r}")

    @property
    def bounds(self) -> tuple[int, int]:
        """Return (width, height) of the source image."""
        return self.width, self.height

    @property
    def resolution(self) -> str:
        """Return resolution as 'W x H' string."""
        return f"{self.width} x {self.height}"

    @property
    def file_size_formatted(self) -> str:
        """Return human-readable file size."""
        return format_size(self.file_size)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'subdivisions': self.subdivisions,
            'width': self.width,
            'height': self.height,
            'file_size': self.file_size,
            'grid': [[list(cell) for cell in column] for column in self.grid],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Fingerprint':
        """Create Fingerprint from dictionary."""
        grid = tuple(
            tuple(tuple(int(v) for v in cell) for cell in column)
            for column in data['grid']
        )
        return cls(
            grid=grid,
            subdivisions=int(data['subdivisions']),
            width=int(data.get('width', 0)),
            height=int(data.get('height', 0)),
            file_size=int(data.get('file_size', 0)),
        )


@dataclass(frozen=True)
class DuplicatePair:
    """
    Two images whose fingerprint distance fell below the tolerance.

    Attributes:
        left: Path of the earlier file in traversal order
        right: Path of the later file in traversal order
        left_fingerprint: Fingerprint of left
        right_fingerprint: Fingerprint of right
        distance: Comparator distance between the two
    """
    left: str
    right: str
    left_fingerprint: Fingerprint
    right_fingerprint: Fingerprint
    distance: int

    @property
    def wants_difftool(self) -> bool:
        """Near-duplicate (not pixel-identical) with differing file sizes."""
        return (
            self.distance > 0
            and self.left_fingerprint.file_size != self.right_fingerprint.file_size
        )
