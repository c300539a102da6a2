"""Excel export of the weekly allocation plan."""
import io
import math
from pathlib import Path
from typing import Union

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from vaxplan.models.days import DAYS, DAYS_PER_WEEK
from vaxplan.models.schedule import AllocationPlan
from vaxplan.registry import Registry
from vaxplan.solver.capacity import weekly_available
from vaxplan.solver.stats import StatisticsReporter

# Cell fill by utilisation of a hub/day
FULL_FILL = "C6EFCE"     # every slot used
PARTIAL_FILL = "FFEB9C"  # some slots unused
EMPTY_FILL = "EEEEEE"    # no slots that day

THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)


def _header_row(ws, values, row: int = 1):
    for c, value in enumerate(values, start=1):
        cell = ws.cell(row=row, column=c, value=value)
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center")


def _write_frame(ws, df: pd.DataFrame, width: int = 14):
    """Dump a DataFrame with a bold header row."""
    _header_row(ws, list(df.columns))
    for i in range(len(df)):
        for j in range(len(df.columns)):
            value = df.iat[i, j]
            if isinstance(value, float) and math.isnan(value):
                value = None
            elif hasattr(value, "item"):
                value = value.item()
            ws.cell(row=2 + i, column=1 + j, value=value)
    for i in range(1, len(df.columns) + 1):
        ws.column_dimensions[get_column_letter(i)].width = width
    ws.freeze_panes = "A2"


def export_plan_to_excel(
    registry: Registry,
    plan: AllocationPlan,
    output: Union[str, Path, io.BytesIO],
) -> None:
    """
    Write the plan as a workbook.

    Sheets:
        Plan: hub × day matrix "allocated / available"
        Assignments: one row per allocated person
        Statistics: per-interval proportions
    """
    wb = Workbook()

    # ========== Plan Sheet ==========
    ws_plan = wb.active
    ws_plan.title = "Plan"
    _header_row(ws_plan, ["Hub"] + DAYS + ["Total"])
    available = weekly_available(registry)
    for r, hub in enumerate(registry.hubs(), start=2):
        ws_plan.cell(row=r, column=1, value=hub).font = Font(bold=True)
        hub_total = 0
        for d in range(DAYS_PER_WEEK):
            used = len(plan.assigned_to(hub, d))
            offered = available[hub][d]
            hub_total += used
            cell = ws_plan.cell(row=r, column=2 + d, value=f"{used} / {offered}")
            color = EMPTY_FILL if offered == 0 else FULL_FILL if used >= offered else PARTIAL_FILL
            cell.fill = PatternFill(start_color=color, end_color=color, fill_type="solid")
            cell.alignment = Alignment(horizontal="center")
            cell.border = BORDER_THIN
        ws_plan.cell(row=r, column=2 + DAYS_PER_WEEK, value=hub_total).font = Font(bold=True)
    ws_plan.column_dimensions["A"].width = 24
    ws_plan.freeze_panes = "B2"

    # ========== Assignments Sheet ==========
    ws_assign = wb.create_sheet("Assignments")
    df = plan.to_dataframe()
    if not df.empty:
        df["person"] = [registry.get_person(ssn) for ssn in df["ssn"]]
        df["age"] = [registry.get_age(ssn) for ssn in df["ssn"]]
    _write_frame(ws_assign, df)

    # ========== Statistics Sheet ==========
    ws_stats = wb.create_sheet("Statistics")
    _write_frame(ws_stats, StatisticsReporter(registry).interval_summary())

    if isinstance(output, io.BytesIO):
        wb.save(output)
    else:
        wb.save(str(output))


def export_plan_to_csv(plan: AllocationPlan, output: Union[str, Path, io.StringIO]) -> None:
    """Export assignments to CSV."""
    df = plan.to_dataframe()
    if isinstance(output, io.StringIO):
        df.to_csv(output, index=False)
    else:
        df.to_csv(str(output), index=False)
