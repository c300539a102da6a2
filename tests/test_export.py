"""Tests for plan export."""
import io

import pandas as pd
from openpyxl import load_workbook

from vaxplan.io.excel_export import export_plan_to_csv, export_plan_to_excel
from vaxplan.solver.allocation import AllocationEngine


class TestExcelExport:
    """Tests for the xlsx workbook."""

    def test_sheets(self, small_registry, tmp_path):
        engine = AllocationEngine(small_registry)
        engine.allocate_week()
        path = tmp_path / "plan.xlsx"
        export_plan_to_excel(small_registry, engine.plan(), path)

        wb = load_workbook(path)
        assert wb.sheetnames == ["Plan", "Assignments", "Statistics"]

        ws = wb["Plan"]
        assert ws.cell(row=1, column=2).value == "Mon"
        assert ws.cell(row=2, column=1).value == "Milano"
        assert ws.cell(row=2, column=2).value == "6 / 80"
        assert ws.cell(row=3, column=2).value == "0 / 40"
        assert ws.cell(row=2, column=9).value == 6

        assert wb["Assignments"].max_row == 7  # header + 6 people

    def test_bytes_output(self, small_registry):
        engine = AllocationEngine(small_registry)
        buf = io.BytesIO()
        export_plan_to_excel(small_registry, engine.plan(), buf)
        assert buf.getvalue()[:2] == b"PK"

    def test_nan_statistics_written_as_blank(self, small_registry, tmp_path):
        path = tmp_path / "plan.xlsx"
        export_plan_to_excel(small_registry, AllocationEngine(small_registry).plan(), path)
        ws = load_workbook(path)["Statistics"]
        # nobody allocated -> distribution column is NaN -> empty cell
        assert ws.cell(row=2, column=5).value is None


class TestCSVExport:
    """Tests for assignment CSV export."""

    def test_csv(self, small_registry):
        engine = AllocationEngine(small_registry)
        engine.allocate_week()
        out = io.StringIO()
        export_plan_to_csv(engine.plan(), out)
        out.seek(0)
        df = pd.read_csv(out)
        assert len(df) == 6
        assert set(df["hub"]) == {"Milano"}
