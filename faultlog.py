#!/usr/bin/env python3
"""Guard fault report: correlate guard records with their error logs.

Usage:
    python faultlog.py --guard-records guards.json --topology topology.json \\
        --log-store pels.json --output faultlog.json --summary faultlog.txt
    python faultlog.py --guard-records guards.json --topology topology.json \\
        --logging-url http://bmc.local:8080
"""
from __future__ import annotations

import argparse
import logging
import sys

from collectors.logging_client import build_log_store
from collectors.sources import SourceError, load_guard_records, load_log_store, load_topology
from engine.guard_records import AssemblyContext, assemble_report, count_reportable
from engine.settings import load_settings
from reporting.render import report_to_json, write_report_json, write_summary

_log = logging.getLogger("faultlog")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build the guard-record fault report as JSON."
    )
    parser.add_argument("--guard-records", required=True, help="Path to guard records JSON")
    parser.add_argument("--topology", help="Path to hardware topology JSON")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--log-store", help="Path to a log store snapshot JSON")
    source.add_argument("--logging-url", help="Base URL of the log store REST facade")
    parser.add_argument("--timeout", type=float, help="Log store request timeout in seconds")
    parser.add_argument("--output", help="Report JSON path (default: stdout)")
    parser.add_argument("--summary", help="Write an operator text summary to this path")
    parser.add_argument("--count-only", action="store_true",
                        help="Print the number of error-logged guard records and exit")
    parser.add_argument("--log-level", help="Diagnostic log level (default: INFO)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings(
        logging_url=args.logging_url,
        request_timeout=args.timeout,
        log_level=args.log_level.upper() if args.log_level else None,
    )
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        records = load_guard_records(args.guard_records)
        guard_count = count_reportable(records)
        if args.count_only:
            print(guard_count)
            return 0

        if not args.topology:
            _log.error("--topology is required to build the report")
            return 2
        topology = load_topology(args.topology)

        if args.log_store:
            log_store = load_log_store(args.log_store)
        elif settings.logging_url:
            log_store = build_log_store(settings.logging_url, settings.request_timeout)
        else:
            _log.error("No log store: pass --log-store or --logging-url (or set FAULTLOG_LOGGING_URL)")
            return 2
    except SourceError as e:
        _log.error("%s", e)
        return 2

    ctx = AssemblyContext(log_store=log_store, topology=topology)
    report = assemble_report(records, ctx)
    _log.info("Reported %d of %d error-logged guard record(s)", len(report), guard_count)

    if args.output:
        write_report_json(report, args.output)
    else:
        print(report_to_json(report))
    if args.summary:
        write_summary(report, args.summary, guard_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
