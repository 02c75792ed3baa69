# imbus/validation/reference.py

import pandas as pd
from typing import List


def unmatched_references(df, reference_df, column, reference_column) -> List:
    """
    Return the values of df[column] that are absent from reference_df[reference_column].

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame containing the referencing column.
    reference_df : pd.DataFrame
        DataFrame containing the reference column.
    column : str
        Name of the column in df to check.
    reference_column : str
        Name of the column in reference_df to check against.

    Returns
    -------
    list
        Sorted unmatched values; empty if every value is referenced or
        either column is absent. Missing values are ignored.

    Examples
    --------
    >>> unmatched_references(effort_df, spatial_df, 'StatRec', 'StatRec')
    ['99Z9']
    """
    if column not in df.columns or reference_column not in reference_df.columns:
        return []
    missing = set(df[column].dropna().unique()) - set(reference_df[reference_column].dropna().unique())
    return sorted(missing, key=str)


def unmatched_tuples(df, reference_df, columns, reference_columns) -> List[tuple]:
    """
    Return the unique tuples of df[columns] absent from reference_df[reference_columns].

    Examples
    --------
    >>> unmatched_tuples(species_df, gear_eff_df, ['Code', 'Age'], ['Code', 'Age'])
    [('COD', 0)]
    """
    if df.empty:
        return []
    df_tuples = set(tuple(row) for row in df[columns].dropna().drop_duplicates().values)
    if reference_df.empty:
        ref_tuples = set()
    else:
        ref_tuples = set(tuple(row) for row in reference_df[reference_columns].dropna().drop_duplicates().values)
    return sorted(df_tuples - ref_tuples, key=str)
