import json
from schemas import (
    output_suffixes,
    table_columns,
)
from utils import (
    convert_to_dataframe,
    logger,
)
import xlsxwriter  # type: ignore [import-untyped]


def export_to_file(
    run_data: dict,
    filename: str = "dump",
    file_type: str = "wikitext",
) -> str:
    """Overwrite <filename>.<suffix> with this run's output"""
    full_name = f"{filename}.{output_suffixes[file_type]}"
    if file_type in ["csv", "xlsx"]:
        writer = convert_to_dataframe(run_data["rows"], list(table_columns.values()))
        if file_type == "xlsx":
            with xlsxwriter.Workbook(full_name) as wb:
                writer.write_excel(workbook=wb, include_header=True, autofit=True)
        elif file_type == "csv":
            with open(full_name, "w", newline="", encoding="utf-8") as f_out:
                writer.write_csv(file=f_out, include_header=True)
    elif file_type == "json":
        with open(full_name, "w", newline="", encoding="utf-8") as f_out:
            json.dump(run_data, f_out, indent=2, sort_keys=True, default=str, ensure_ascii=False)
    else:
        with open(full_name, "w", newline="", encoding="utf-8") as f_out:
            f_out.write(run_data["table"])

    logger.info(
        "%s file '%s' created successfully with %s rows.",
        file_type,
        full_name,
        len(run_data["rows"]),
    )
    return full_name


def print_summary(run_data: dict) -> None:
    """Print summary of the run"""
    logger.info("\n=== Wikitext Table Export Summary ===")
    logger.info("Fetched at %s", run_data["fetched_date"])
    logger.info("Query page: %s", run_data["page_url"])
    logger.info("Query service: %s", run_data["endpoint"])
    logger.info("Table profile: %s", run_data["profile"])
    logger.info("Rows: %s", len(run_data["rows"]))
    logger.info("Completed in %s seconds", run_data["query_runtime"])
