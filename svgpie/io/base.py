from __future__ import annotations

import collections.abc as cabc
import math
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from ..compute.core.types import DataItem
from ..errors import InvalidDataItem

FrameLike = Any  # pandas.DataFrame


def _absent(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def _row_to_item(
    row: Mapping[str, Any],
    *,
    value_col: str,
    color_col: str,
    title_col: Optional[str],
    href_col: Optional[str],
    expanded_col: Optional[str],
    pattern_col: Optional[str],
) -> DataItem:
    def opt(col: Optional[str]) -> Any:
        if col is None:
            return None
        v = row.get(col)
        return None if _absent(v) else v

    mapping = {
        "color": opt(color_col),
        "value": opt(value_col),
        "title": opt(title_col),
        "href": opt(href_col),
        "expanded": bool(opt(expanded_col) or False),
        "pattern": opt(pattern_col),
    }
    if mapping["title"] is not None:
        mapping["title"] = str(mapping["title"])
    return DataItem.from_mapping(mapping)


def iter_items(
    data: Union[FrameLike, Iterable[Union[DataItem, Mapping[str, Any]]]],
    *,
    value_col: str = "value",
    color_col: str = "color",
    title_col: Optional[str] = None,
    href_col: Optional[str] = None,
    expanded_col: Optional[str] = None,
    pattern_col: Optional[str] = None,
) -> Iterator[DataItem]:
    """Yield ``DataItem`` objects from in-memory data, in input order.

    Supports:
    - a pandas.DataFrame (one item per row, columns picked by name)
    - an iterable of mappings (``DataItem.from_mapping`` keys; the ``*_col``
      arguments rename the lookup keys)
    - an iterable of ``DataItem`` (pass-through)

    Notes:
    - NaN in an optional column means "not set".
    - Items with non-positive values are yielded too; filtering is left to
      the composer.
    """
    cols = dict(
        value_col=value_col,
        color_col=color_col,
        title_col=title_col,
        href_col=href_col,
        expanded_col=expanded_col,
        pattern_col=pattern_col,
    )

    import pandas as pd

    if isinstance(data, pd.DataFrame):
        missing = [c for c in (value_col, color_col) if c not in data.columns]
        if missing:
            raise InvalidDataItem(f"DataFrame is missing column(s): {', '.join(missing)}")
        for row in data.to_dict(orient="records"):
            yield _row_to_item(row, **cols)
        return

    if isinstance(data, cabc.Iterable) and not isinstance(
        data, (str, bytes, bytearray, cabc.Mapping)
    ):
        default_keys = (
            value_col == "value"
            and color_col == "color"
            and title_col is None
            and href_col is None
            and expanded_col is None
            and pattern_col is None
        )
        for entry in data:
            if isinstance(entry, DataItem):
                yield entry
            elif isinstance(entry, cabc.Mapping):
                if default_keys:
                    yield DataItem.from_mapping(entry)
                else:
                    yield _row_to_item(entry, **cols)
            else:
                raise InvalidDataItem(
                    f"data item must be a mapping or DataItem, got {type(entry).__name__}"
                )
        return

    raise TypeError(
        "Unsupported input for iter_items. Provide a pandas DataFrame or an iterable of mappings/DataItems."
    )
