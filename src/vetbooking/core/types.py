"""Shared type aliases."""

from datetime import datetime
from typing import Any, Union

# A stored document: field name to value, always carrying an ``_id``
Document = dict[str, Any]

# Mongo-style filter, projection and sort specifications
Filter = dict[str, Any]
Projection = dict[str, int]
SortSpec = list[tuple[str, int]]

ValidationValue = Union[
    str,
    int,
    float,
    bool,
    datetime,
    None,
    dict[str, "ValidationValue"],
]

# Request fields handed to a validator chain
ValidationContext = dict[str, ValidationValue]
