from ..shapes import exact_shape, shape_score, fuzzy_score, follows_standard_intervals, matches_exactly
from ..config.def_shapes import shape_library, Slot, ShapePattern
from .testing_tools import compare, log

standard_pcs = (4, 9, 2, 7, 11, 4)
dropD_pcs = (2, 9, 2, 7, 11, 4)

def test_shape_library(verbose=False):
    log.verbose = verbose

    compare([s.name for s in shape_library], ['E', 'G', 'A', 'C', 'D'])
    c_shape = shape_library[3]
    compare(c_shape.slots, (Slot.MUTED, 0, -1, -3, -2, -3))
    compare(c_shape.expected_frets(3), (Slot.MUTED, 3, 2, 0, 1, 0))
    compare(c_shape.expected_frets(8), (Slot.MUTED, 8, 7, 5, 6, 5))
    compare(ShapePattern.from_frets('E', '022100', anchor=0), shape_library[0])

def test_exact_shapes(verbose=False):
    log.verbose = verbose

    compare(follows_standard_intervals(standard_pcs), True)
    compare(follows_standard_intervals(dropD_pcs), False)

    compare(exact_shape((-1, 3, 2, 0, 1, 0), standard_pcs, 0), 'C')
    compare(exact_shape((0, 2, 2, 1, 0, 0), standard_pcs, 4), 'E')
    compare(exact_shape((3, 2, 0, 0, 0, 3), standard_pcs, 7), 'G')
    compare(exact_shape((-1, 0, 2, 2, 2, 0), standard_pcs, 9), 'A')
    compare(exact_shape((-1, -1, 0, 2, 3, 2), standard_pcs, 2), 'D')
    # shapes are movable:
    compare(exact_shape((8, 10, 10, 9, 8, 8), standard_pcs, 0), 'E')
    compare(exact_shape((-1, 3, 5, 5, 5, 3), standard_pcs, 0), 'A')

    # the anchor string has to sound the root:
    compare(exact_shape((8, 10, 10, 9, 8, 8), standard_pcs, 5), None)
    # a string that the shape leaves out has to be muted:
    compare(exact_shape((0, 3, 2, 0, 1, 0), standard_pcs, 0), None)
    # no shape labels outside of standard-interval tunings:
    compare(exact_shape((-1, 0, 2, 2, 2, 0), dropD_pcs, 9), None)

    # a shape can't be matched if it would need a fret below the nut:
    c_shape = shape_library[3]
    compare(matches_exactly((-1, 1, 0, -1, -1, -1), c_shape, standard_pcs, 10), False)

def test_fuzzy_scores(verbose=False):
    log.verbose = verbose

    c_shape = shape_library[3]
    compare(fuzzy_score((-1, 3, 2, 0, 1, 0), c_shape, 3), (10, 5))
    compare(fuzzy_score((-1, 3, 2, 0, 1, -1), c_shape, 3), (8, 4))
    # a sounded string the shape doesn't use costs a point:
    compare(fuzzy_score((0, 3, 2, 0, 1, 0), c_shape, 3), (9, 5))

    compare(shape_score((-1, 3, 2, 0, 1, 0), standard_pcs, 0), 10)
    compare(shape_score((-1, 3, 2, 0, 1, -1), standard_pcs, 0), 8)
    compare(shape_score((8, 10, 10, 9, 8, 8), standard_pcs, 0), 12)
    # nothing resembles a shape closely enough:
    compare(shape_score((-1, -1, -1, 5, 5, 3), standard_pcs, 0), 0)
    compare(shape_score((-1, 3, 2, 0, 1, 0), dropD_pcs, 0), 0)
