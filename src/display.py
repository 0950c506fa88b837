from . import _settings
from .util import log


class DataFrame:
    """a minimal table of rows and named columns, for printing results"""
    def __init__(self, colnames):
        self.column_names = colnames
        self.num_columns = len(colnames)
        self.column_data = {i:[] for i in range(self.num_columns)}

        self.row_data = []
        self.num_rows = 0

    def append(self, data_lst):
        """add a row of data to this dataframe, which we store as objects"""
        if len(data_lst) != self.num_columns:
            raise ValueError(f"tried to append row of length {len(data_lst)} but dataframe has {self.num_columns} columns")
        row = list(data_lst)
        self.row_data.append(row)
        self.num_rows += 1

        for i, item in enumerate(row):
            self.column_data[i].append(item)

    def __len__(self):
        """DataFrame length is the number of rows"""
        return self.num_rows

    def column_widths(self, up_to_row=None):
        """return the max str size in each column, up to a specified row"""
        widths = []
        for col_num, col in self.column_data.items():
            col_strs = [str(c) for c in col[:up_to_row]]
            str_lens = [len(s) for s in col_strs] + [len(self.column_names[col_num])]
            widths.append(max(str_lens))
        return widths

    def render(self, margin=' ', header_border=True, max_rows=None):
        """returns this table as a multi-line string"""
        margin_size = len(margin)
        printed_rows = []
        widths = self.column_widths(up_to_row=max_rows)
        # make header:
        header_row = [f'{self.column_names[i]:{widths[i]}}' for i in range(self.num_columns)]
        printed_rows.append(margin.join(header_row).rstrip())
        if header_border:
            total_width = sum(widths) + (self.num_columns-1)*margin_size
            printed_rows.append('='*total_width)
        # make rows:
        for row in self.row_data[:max_rows]:
            this_row = [f'{str(row[i]):{widths[i]}}' for i in range(self.num_columns)]
            printed_rows.append(margin.join(this_row).rstrip())
        return '\n'.join(printed_rows)

    def show(self, **kwargs):
        print(self.render(**kwargs))


def voicing_table(voicings, columns=['rank', 'frets', 'base', 'shape', 'score'],
                  capo=0, max_results=None, **kwargs):
    """prints a table of voicings in ranked order. columns can be any of:
        rank: position in the ranking, from 1
        frets: the voicing's tab, counted from the capo
        absolute: the voicing's tab, counted from the nut
        base: the fret a chord diagram would start from
        shape: name of the exactly-matched CAGED shape, if any
        score: CAGED similarity score
        sounding: number of strings played"""
    col_name_lookup = {   'rank': '#',
                         'frets': 'Frets',
                      'absolute': 'Nut frets',
                          'base': 'Base',
                         'shape': 'Shape',
                         'score': 'Score',
                      'sounding': 'Strings',
                      }
    for col_name in columns:
        if col_name not in col_name_lookup:
            raise ValueError(f'Unknown voicing_table column: {col_name!r}, expected one of: {list(col_name_lookup.keys())}')

    df = DataFrame([col_name_lookup[c] for c in columns])
    no_shape = _settings.CHARACTERS['no_shape']
    muted = _settings.CHARACTERS['muted']
    for i, voicing in enumerate(voicings):
        df_row = []
        for col_name in columns:
            if col_name == 'rank':
                df_row.append(str(i+1))
            elif col_name == 'frets':
                df_row.append(voicing.tab)
            elif col_name == 'absolute':
                abs_frets = voicing.absolute_frets(capo)
                df_row.append(' '.join([muted if f < 0 else str(f) for f in abs_frets]))
            elif col_name == 'base':
                df_row.append(str(voicing.base_fret))
            elif col_name == 'shape':
                df_row.append(voicing.shape if voicing.shape is not None else no_shape)
            elif col_name == 'score':
                df_row.append(str(voicing.shape_score))
            elif col_name == 'sounding':
                df_row.append(str(voicing.num_sounding))
        df.append(df_row)

    if getattr(voicings, 'truncated', False):
        log('Showing voicings from a truncated search')
    df.show(max_rows=max_results, **kwargs)
    return df
