#!/usr/bin/env python3
"""
BDIJ Wikitext Table Exporter

Reads the SPARQL query published on a wiki page, runs it against the
wiki's query service and writes the results out as a wikitext table.

Usage:
    python main.py                      # Default page, endpoint and profile, writes dump.txt
    python main.py --profile linked     # Sortable table with [[Item:Qn|Qn]] links
    python main.py --file-type csv      # Same rows, as a csv
    python main.py --help               # Show help

    # Enable debugging
    python main.py --debug -o ministerios
"""

from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
import copy
import logging
from file_utils import export_to_file, print_summary
from schemas import (
    run_config_schema,
    supported_output_types,
    table_profiles,
)
from utils import logger, session
from wikitext import build_table_wrapper
# CLI, argument parsing, script orchestration


def main(argv: list | None = None) -> None:
    parser = ArgumentParser(
        description="BDIJ Wikitext Table Exporter",
        formatter_class=ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--page-url",
        default=run_config_schema["page_url"],
        help="Wiki page holding the query in a <pre> block",
    )
    parser.add_argument(
        "--endpoint",
        default=run_config_schema["endpoint"],
        help="SPARQL query service endpoint",
    )
    parser.add_argument(
        "--profile",
        default=run_config_schema["profile"],
        choices=list(table_profiles.keys()),
        help="table style: 'plain' fills gaps with N/A, 'linked' links entities and leaves gaps empty",
    )
    parser.add_argument(
        "--file-type",
        default="wikitext",
        choices=supported_output_types,
        help="type of file to export",
    )
    parser.add_argument(
        "--output-file-name",
        "-o",
        default="dump",
        help="The file we'll write data out to (excluding the suffix)",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=run_config_schema["timeout"],
        help="Seconds to wait on each http request",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Full debug information and logging",
    )

    args = parser.parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)

    config = copy.deepcopy(run_config_schema)
    config["page_url"] = args.page_url
    config["endpoint"] = args.endpoint
    config["profile"] = args.profile
    config["timeout"] = args.timeout

    try:
        run_data = build_table_wrapper(config, session)
        export_to_file(run_data, args.output_file_name, args.file_type)
        print_summary(run_data)
        logger.info("Process completed successfully.")
    except Exception as e:
        logger.error("Error during execution: %s", e)


if __name__ == "__main__":
    main()
