"""
split a table into groups by a key column, apply a function per group and reassemble
"""
from typing import Any, Callable, Iterable, List, Optional

import pandas as pd


def _group_key(key):
    # every null flavour (None, nan, NA) forms one group keyed by None
    return None if pd.isnull(key) else key


def group_order(keys: Iterable, order: Optional[Iterable] = None) -> List:
    """
    the distinct keys in the order their groups should be visited. Null keys form a
    single group, given as None, which is always last

    Args:
        keys: the key value for every row
        order: explicit ordering of the keys. Keys not listed here follow the listed ones in their natural order

    Example:
        >>> group_order(['a', 'b', 'a'])
        ['a', 'b']
        >>> group_order(['a', 'b', 'a'], order=['b', 'a'])
        ['b', 'a']
    """
    distinct = {_group_key(key) for key in keys}
    has_null = None in distinct
    distinct.discard(None)
    if order is None:
        result = sorted(distinct)
    else:
        order = [key for key in order if not pd.isnull(key)]
        listed = [key for key in order if key in distinct]
        unlisted = sorted(distinct - set(order))
        result = listed + unlisted
    if has_null:
        result.append(None)
    return result


def aggregate_by_group(
    df: pd.DataFrame,
    value: str,
    by: str,
    func: Callable[[pd.Series], Any],
    order: Optional[Iterable] = None,
    elementwise: bool = False,
) -> pd.Series:
    """
    apply a function to the values of each group of rows

    Args:
        df: the table to group
        value: the column passed to func
        by: the column to group on
        func: function applied to the value column of each group
        order: explicit group order (see group_order)
        elementwise: func returns one value per row of the group rather than a single value

    Returns:
        one value per group indexed by the group key, or when elementwise one value per
        row concatenated group by group and indexed by the original row labels

    Raises:
        ValueError: an elementwise func returned the wrong number of values
    """
    groups = {
        _group_key(key): series
        for key, series in df.groupby(by, sort=False, dropna=False)[value]
    }
    keys = group_order(df[by], order)

    if not elementwise:
        return pd.Series([func(groups[key]) for key in keys], index=keys, dtype=object).infer_objects()

    parts = []
    for key in keys:
        group = groups[key]
        result = list(func(group))
        if len(result) != len(group):
            raise ValueError(
                'elementwise function must return one value per row',
                key,
                len(group),
                len(result),
            )
        parts.append(pd.Series(result, index=group.index))
    if not parts:
        return pd.Series([], dtype=float)
    return pd.concat(parts)
