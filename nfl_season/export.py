from __future__ import annotations
from pathlib import Path
import pandas as pd


def write_outputs(table: pd.DataFrame, csv_path: str | Path | None = None,
                  xlsx_path: str | Path | None = None) -> None:
    """Write a season table to CSV and/or a single-sheet workbook."""
    if csv_path:
        Path(csv_path).parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(csv_path, index=False)
        print(f"Season table written to: {csv_path}")
    if xlsx_path:
        Path(xlsx_path).parent.mkdir(parents=True, exist_ok=True)
        with pd.ExcelWriter(xlsx_path, engine="xlsxwriter") as xw:
            table.to_excel(xw, index=False, sheet_name="games")
        print(f"Season workbook written to: {xlsx_path}")
