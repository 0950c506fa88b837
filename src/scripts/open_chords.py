from src.guitar import standard
from src.chords import ChordSpec
from src.config.def_chords import chord_types
from src.notes import note_name

# the best voicing of every chord type on every root, in standard tuning:
for ct in chord_types:
    row = []
    for root in range(12):
        best = standard.best_voicing(ChordSpec(root, ct.intervals))
        tab = best.tab if best is not None else '-'
        row.append(f'{note_name(root)}{ct.suffix}: {tab}')
    print(f'{ct.name}:\n  ' + '\n  '.join(row) + '\n====')
