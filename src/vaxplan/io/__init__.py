# vaxplan/io - Input/output handling
from .csv_loader import HEADER, PeopleLoader, load_people, people_to_dataframe, save_people
from .excel_export import export_plan_to_csv, export_plan_to_excel

__all__ = [
    "HEADER",
    "PeopleLoader",
    "load_people",
    "save_people",
    "people_to_dataframe",
    "export_plan_to_excel",
    "export_plan_to_csv",
]
