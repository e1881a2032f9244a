"""
Aggregate module: grouped sums of per-area values feeding the report charts.
"""

import pandas as pd
from . import config


def biome_totals(df: pd.DataFrame) -> pd.Series:
    """
    Total `value_per_area` per biome, largest first.

    Ties keep the order in which biomes first appear in `df`.
    """
    totals = df.groupby('biome', sort=False)['value_per_area'].sum()
    return totals.sort_values(ascending=False, kind='stable')


def top_biomes(df: pd.DataFrame, n=config.TOP_N_BIOMES) -> list:
    """Names of the `n` biomes with the largest totals."""
    return list(biome_totals(df).index[:n])


def service_totals(df: pd.DataFrame) -> pd.Series:
    """Total `value_per_area` per service category, largest first."""
    totals = df.groupby('service_category', sort=False)['value_per_area'].sum()
    return totals.sort_values(ascending=False, kind='stable')


def by_biome_top_n_by_service(df: pd.DataFrame, n=config.TOP_N_BIOMES) -> pd.DataFrame:
    """
    Stacked composition of the top `n` biomes.

    Returns a long table (biome, service_category, value_per_area) with biomes
    in descending total order.
    """
    biomes = top_biomes(df, n)
    subset = df[df['biome'].isin(biomes)]
    table = (
        subset.groupby(['biome', 'service_category'], sort=False)['value_per_area']
        .sum()
        .reset_index()
    )
    table['biome'] = pd.Categorical(table['biome'], categories=biomes, ordered=True)
    table = table.sort_values(['biome', 'value_per_area'], ascending=[True, False], kind='stable')
    table['biome'] = table['biome'].astype(str)
    return table.reset_index(drop=True)


def by_service_by_biome(df: pd.DataFrame) -> pd.DataFrame:
    """
    Totals per service category, broken down by biome.

    Returns a long table (service_category, biome, value_per_area) with
    categories in descending total order. Not restricted to the top biomes.
    """
    order = list(service_totals(df).index)
    table = (
        df.groupby(['service_category', 'biome'], sort=False)['value_per_area']
        .sum()
        .reset_index()
    )
    table['service_category'] = pd.Categorical(table['service_category'], categories=order, ordered=True)
    table = table.sort_values(['service_category', 'value_per_area'], ascending=[True, False], kind='stable')
    table['service_category'] = table['service_category'].astype(str)
    return table.reset_index(drop=True)


def pivot_for_chart(table: pd.DataFrame, x_field, y_field, fill_field) -> pd.DataFrame:
    """Wide table (rows = x, columns = fill) preserving the row order of `table`."""
    x_order = list(dict.fromkeys(table[x_field]))
    fill_order = list(dict.fromkeys(table[fill_field]))
    wide = table.pivot_table(index=x_field, columns=fill_field, values=y_field, aggfunc='sum', fill_value=0)
    return wide.reindex(index=x_order, columns=fill_order, fill_value=0)
