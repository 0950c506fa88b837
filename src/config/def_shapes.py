from dataclasses import dataclass
from enum import Enum

from ..parsing import parse_frets

### the named 'CAGED' chord shapes, defined for tunings that follow the
### interval pattern of standard tuning (see _settings.STANDARD_INTERVALS).
### each shape is written as the open-position major chord it is named after,
### along with the string that carries its root (the 'anchor'). the shape is then
### stored relative to the anchor's fret, so that it can be matched anywhere on the neck.

class Slot(Enum):
    """marks a string that a shape does not use, and which must
    therefore be muted for a voicing to match that shape exactly"""
    MUTED = 'x'

    def __str__(self):
        return self.value

@dataclass(frozen=True)
class ShapePattern:
    name: str       # the shape label, e.g. 'C'
    anchor: int     # index of the root-carrying string (0 is the lowest string)
    slots: tuple    # per string: an int offset from the anchor's fret, or Slot.MUTED

    @classmethod
    def from_frets(cls, name, frets, anchor):
        """builds a shape from an open-position fingering like 'x32010',
        by taking every fret relative to the fret on the anchor string"""
        fret_list = parse_frets(frets)
        anchor_fret = fret_list[anchor]
        if anchor_fret == -1:
            raise ValueError(f'Shape {name} is anchored on string {anchor}, but that string is muted in: {frets}')
        slots = tuple(Slot.MUTED if f == -1 else (f - anchor_fret) for f in fret_list)
        return cls(name, anchor, slots)

    def expected_frets(self, anchor_fret):
        """the frets this shape calls for when its anchor is on anchor_fret,
        as a tuple of ints (or Slot.MUTED)"""
        return tuple(s if s is Slot.MUTED else (anchor_fret + s) for s in self.slots)

    def __str__(self):
        slots_str = ','.join([str(s) if s is Slot.MUTED else f'{s:+d}' for s in self.slots])
        return f'{self.name}-shape (anchor: string {self.anchor}, offsets: {slots_str})'

# the order of this table is the order in which exact matches are tried:
shape_library = (
    ShapePattern.from_frets('E', '022100', anchor=0),
    ShapePattern.from_frets('G', '320003', anchor=0),
    ShapePattern.from_frets('A', 'x02220', anchor=1),
    ShapePattern.from_frets('C', 'x32010', anchor=1),
    ShapePattern.from_frets('D', 'xx0232', anchor=2),
    )

# shapes grouped by the string they are anchored on:
shapes_by_anchor = {}
for shape in shape_library:
    shapes_by_anchor.setdefault(shape.anchor, []).append(shape)
shapes_by_anchor = {anchor: tuple(shapes) for anchor, shapes in shapes_by_anchor.items()}
