"""Loading patterns from text files and images."""

from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .errors import FileReadError, MalformedPatternError

# One row per weekday, Sunday first.
MAX_ROWS = 7
# Opaque images: pixels darker than this are drawn.
LUMINANCE_THRESHOLD = 128


@dataclass(frozen=True)
class Pattern:
    """A rectangular bitmap, stored row-major."""

    width: int
    height: int
    cells: Tuple[bool, ...]

    def __post_init__(self):
        if self.height > MAX_ROWS:
            raise MalformedPatternError(
                'pattern has too many rows: {} (max {})'.format(self.height, MAX_ROWS)
            )
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                'expected {} cells for a {}x{} pattern, got {}'.format(
                    self.width * self.height, self.width, self.height, len(self.cells)
                )
            )

    def index(self, x: int, y: int) -> Optional[int]:
        """Return the storage index of (x, y), or None when y is out of bounds.

        x wraps horizontally, so a narrow pattern repeats across a wide window.
        Negative x is brought into range by adding the width until it is
        non-negative, so the cost grows with abs(x) / width.
        """
        if y < 0 or y >= self.height or self.width <= 0:
            return None
        while x < 0:
            x += self.width
        return y * self.width + x % self.width

    def cell(self, x: int, y: int) -> Optional[bool]:
        """The value at (x, y), or None when the cell is absent."""
        idx = self.index(x, y)
        if idx is None:
            return None
        return self.cells[idx]

    def rows(self):
        for y in range(self.height):
            yield self.cells[y * self.width:(y + 1) * self.width]

    def preview(self, on='█', off=' ') -> str:
        return '\n'.join(
            ''.join(on if value else off for value in row) for row in self.rows()
        )


def pad(line: str, size: int) -> str:
    return line.ljust(size, ' ')


def parse_pattern(text: str, source: str = '<string>') -> Pattern:
    """Parse pattern text: one row per line, space = off, anything else = on."""
    if text.endswith('\n'):
        text = text[:-1]
    parsed = text.split('\n')
    if len(parsed) > MAX_ROWS:
        raise MalformedPatternError(
            'File {} has too many lines: {}'.format(source, len(parsed))
        )

    max_width = max(len(line) for line in parsed)
    parsed = [pad(line, max_width) for line in parsed]

    cells = tuple(char != ' ' for line in parsed for char in line)
    return Pattern(width=max_width, height=len(parsed), cells=cells)


def load_pattern(path) -> Pattern:
    try:
        # Undecodable bytes still count as non-space characters
        with open(path, encoding='utf-8', errors='surrogateescape') as f:
            text = f.read()
    except OSError as e:
        raise FileReadError("Couldn't read pattern file {}: {}".format(path, e)) from e
    return parse_pattern(text, source=str(path))


def load_image(path) -> Pattern:
    """Build a pattern from a bitmap image, one pixel per day.

    Images with an alpha band draw every pixel that is not fully transparent.
    Opaque images draw the dark pixels.
    """
    try:
        with Image.open(path) as img:
            img.load()
            return _image_pattern(img, path)
    except (OSError, UnidentifiedImageError) as e:
        raise FileReadError("Couldn't read image {}: {}".format(path, e)) from e


def _image_pattern(img, path) -> Pattern:
    img_width, img_height = img.size
    if img_height > MAX_ROWS:
        raise MalformedPatternError(
            'Image {} is too tall: {} rows (max {})'.format(path, img_height, MAX_ROWS)
        )

    has_alpha = 'A' in img.getbands()
    data = img.getchannel('A').load() if has_alpha else img.convert('L').load()

    cells = []
    for y in range(img_height):
        for x in range(img_width):
            value = data[x, y]
            cells.append(value > 0 if has_alpha else value < LUMINANCE_THRESHOLD)
    return Pattern(width=img_width, height=img_height, cells=tuple(cells))
