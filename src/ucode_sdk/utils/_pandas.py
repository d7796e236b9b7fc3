# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd


def dataframe_to_records(df: pd.DataFrame, na_as_null: bool = False) -> List[Dict[str, Any]]:
    """Convert a DataFrame to a list of dicts, converting Timestamps to ISO strings.

    :param df: Input DataFrame.
    :param na_as_null: When False (default), missing values are omitted from each dict.
        When True, missing values are included as None (sends null, clearing the field).
    """
    records = []
    for row in df.to_dict(orient="records"):
        clean = {}
        for k, v in row.items():
            if isinstance(v, (list, dict)) or pd.notna(v):
                clean[k] = v.isoformat() if isinstance(v, pd.Timestamp) else v
            elif na_as_null:
                clean[k] = None
        records.append(clean)
    return records


def extract_list_records(value: Any) -> List[Dict[str, Any]]:
    """Pull the record list out of a decoded get-list result.

    Accepts ``{"data": {"count": n, "response": [...]}}`` (the get-list
    payload), ``{"response": [...]}`` or a bare list.
    """
    if isinstance(value, list):
        return [r for r in value if isinstance(r, dict)]
    if not isinstance(value, dict):
        return []
    inner = value.get("data")
    if isinstance(inner, dict) and isinstance(inner.get("response"), list):
        return [r for r in inner["response"] if isinstance(r, dict)]
    if isinstance(value.get("response"), list):
        return [r for r in value["response"] if isinstance(r, dict)]
    return []


def records_to_dataframe(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Build a DataFrame from record dicts (outer union of keys, missing keys NaN)."""
    if not records:
        return pd.DataFrame()
    return pd.DataFrame.from_records(records)
