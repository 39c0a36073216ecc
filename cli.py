import argparse
import json
import logging
import os
import sys
import uuid as _uuid
from dataclasses import replace
from pathlib import Path

import sources  # noqa: F401 ensure registration
from config.settings import get_settings
from errors import FatalError
from pipelines.enrich_profile import enrich_one
from pipelines.runner import RunContext
from services.bio_parser import parse_bio
from services.reporting import print_summary
from services.result_sink import LogResultSink
from sources.base import rows_to_records
from sources.registry import get_source
from utils.logging_setup import init_logging


logger = logging.getLogger("cli")


def _session_factory(settings):
    # Imported lazily so `records` and `parse-bio` work without Playwright browsers installed
    from services.browser_session import PlaywrightSessionProvider
    return PlaywrightSessionProvider(settings)


def cmd_run(args):
	settings = args.settings
	overrides = {}
	if args.record_index is not None:
		overrides["record_index"] = args.record_index
	if args.headless:
		overrides["headless"] = True
	if args.close_browser:
		overrides["keep_browser_open"] = False
	if overrides:
		settings = replace(settings, **overrides)

	run_id = os.getenv("RUN_ID") or _uuid.uuid4().hex
	source = get_source(args.source or settings.source, settings)
	session = _session_factory(settings)
	sink = LogResultSink()
	ctx = RunContext(run_id=run_id)
	try:
		ctx = enrich_one(settings, source, session, sink, run_id=run_id, ctx=ctx)
	finally:
		if ctx.page is not None and settings.keep_browser_open:
			session.wait_until_closed()
		else:
			session.close()

	name = ctx.identity.name if ctx.identity else ""
	print_summary(name, ctx.profile, {**ctx.meta, "state": ctx.state.value})


def cmd_records(args):
	settings = args.settings
	source = get_source(args.source or settings.source, settings)
	settings.require(*source.required_settings)
	records = rows_to_records(source.read_grid())
	print(json.dumps([r.fields for r in records], indent=2, ensure_ascii=False))


def cmd_parse_bio(args):
	if args.file:
		text = Path(args.file).read_text(encoding="utf-8")
	else:
		text = args.text or ""
	fields = parse_bio(text)
	print(json.dumps({
		"position": fields.position,
		"company": fields.company,
		"location": fields.location,
		"maritalStatus": fields.marital_status,
	}, indent=2, ensure_ascii=False))


def main(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Resolve one identity on the social platform and extract its profile")
    parser.add_argument("--source", "-s", default=None, help=f"Identity source (default from settings: {settings.source})")
    parser.add_argument("--log-level", "-l", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=settings.log_level, help="Set logging level (default: from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Search, resolve and extract one identity record")
    p_run.add_argument("--record-index", "-r", type=int, default=None, help="Data row to process (0-based, default from settings)")
    p_run.add_argument("--headless", action="store_true", help="Run the browser headless")
    p_run.add_argument("--close-browser", action="store_true", help="Close the browser when done instead of leaving it open")
    p_run.set_defaults(func=cmd_run)

    p_rec = sub.add_parser("records", help="Print the identity records read from the source")
    p_rec.set_defaults(func=cmd_records)

    p_bio = sub.add_parser("parse-bio", help="Parse intro/bio text into position, company, location, marital status")
    bg = p_bio.add_mutually_exclusive_group(required=True)
    bg.add_argument("--text", "-t", type=str, help="Bio text")
    bg.add_argument("--file", "-f", type=str, help="Path to a file holding the bio text")
    p_bio.set_defaults(func=cmd_parse_bio)

    args = parser.parse_args(argv)
    init_logging(args.log_level)
    args.settings = settings
    try:
        args.func(args)
    except FatalError as e:
        logger.error(f"FATAL ERROR: {e}", extra={"status": "aborted"})
        sys.exit(1)
    except KeyError as e:
        logger.error(f"FATAL ERROR: Unknown source: {e}", extra={"status": "aborted"})
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
