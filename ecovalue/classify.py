"""
Classify module: map raw ecosystem-service labels to generalized categories.
"""

import pandas as pd
from . import config


def classify_service(label, categories=None):
    """
    Return the generalized category for a service label.

    Categories are checked in order and the first list containing the label
    wins. Labels found in no list, including missing labels, are 'Other'.
    """
    if categories is None:
        categories = config.SERVICE_CATEGORIES
    if not isinstance(label, str):
        return config.OTHER_CATEGORY

    label = label.strip()
    for category, members in categories.items():
        if label in members:
            return category
    return config.OTHER_CATEGORY


def add_service_category(df: pd.DataFrame) -> pd.DataFrame:
    """Add `service_category` from `es_service`."""
    df = df.copy()
    df['service_category'] = df['es_service'].map(classify_service)
    return df
