from __future__ import annotations
import logging
import os
from io import BytesIO
from typing import Callable, Iterable, Optional

import pandas as pd

from .convert import ConvOption, get_converter

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = os.getenv("ZENHAN_COLUMN_SUFFIX", "_変換")


def convert_dataframe(
    df: pd.DataFrame,
    columns: Iterable[str],
    conv: str,
    option: ConvOption | None = None,
    on_progress: Optional[Callable[[int, int], None]] = None,
    suffix: str | None = None,
) -> pd.DataFrame:
    """Convert text columns of ``df`` and return a new DataFrame.

    Identical cell values are converted only once per call.

    Parameters
    ----------
    df : pd.DataFrame
        Input data. It is not modified.
    columns : Iterable[str]
        Columns to convert.
    conv : str
        Conversion pattern name (``h2z``, ``z2h``, ``h2k``, ``h2hk``, ``k2h``).
    option : ConvOption | None
        Conversion options passed to the converter.
    on_progress : Callable[[int, int], None] | None
        Optional callback receiving processed and total row counts.
    suffix : str | None
        Suffix for the output columns. Defaults to ``ZENHAN_COLUMN_SUFFIX``;
        an empty string overwrites the source columns.
    """
    func = get_converter(conv)
    columns = list(columns)
    if suffix is None:
        suffix = DEFAULT_SUFFIX

    cache: dict[str, str] = {}

    def convert_cell(value):
        if pd.isna(value):
            return value
        text = str(value)
        if text not in cache:
            cache[text] = func(text, option)
        return cache[text]

    sources = [df[col] for col in columns]
    results: list[list] = [[] for _ in columns]
    total = len(df)
    for idx in range(total):
        for out, src in zip(results, sources):
            out.append(convert_cell(src.iloc[idx]))
        if on_progress:
            on_progress(idx + 1, total)

    logger.info(
        "converted %d rows in %d columns with %s (%d unique values)",
        total,
        len(columns),
        conv,
        len(cache),
    )

    df = df.copy()
    for col, values in zip(columns, results):
        df[f"{col}{suffix}"] = pd.Series(values, index=df.index, dtype=object)
    return df


def to_excel_bytes(
    df: pd.DataFrame,
    template_bytes: bytes | None = None,
    sheet_name: str | None = None,
) -> bytes:
    """Return Excel bytes for ``df`` using ``openpyxl``.

    ``sheet_name`` is typically the conversion pattern (``h2z``...). With
    ``template_bytes`` the workbook is kept: ``df`` replaces the sheet called
    ``sheet_name`` (added when missing) or, without a name, the first sheet.
    """
    if not template_bytes:
        buf = BytesIO()
        with pd.ExcelWriter(buf, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=sheet_name or "Sheet1")
        return buf.getvalue()

    buf = BytesIO(template_bytes)
    with pd.ExcelWriter(
        buf,
        engine="openpyxl",
        mode="a",
        if_sheet_exists="replace",
    ) as writer:
        sheets = writer.book.sheetnames
        sheet = sheet_name or (sheets[0] if sheets else "Sheet1")
        df.to_excel(writer, index=False, sheet_name=sheet)
        logger.debug("wrote %d rows to sheet %s of %s", len(df), sheet, sheets)
    return buf.getvalue()
