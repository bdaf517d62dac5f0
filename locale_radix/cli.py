"""CLI entrypoint for locale-aware radix sorting."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from locale_radix.collation.cache import ComparisonCache
from locale_radix.common.config_loader import SortConfig, load_sort_config
from locale_radix.common.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_HARD_FAIL,
    EXIT_SUCCESS,
    INPUT_FORMATS,
    SENSITIVITIES,
)
from locale_radix.common.errors import InputError, LocaleRadixError
from locale_radix.common.fs import read_text, write_text
from locale_radix.common.ids import generate_run_id
from locale_radix.common.logging import build_logger, log_event
from locale_radix.common.time_utils import elapsed_ms
from locale_radix.sorting.radix import RadixSorter
from locale_radix.sorting.records import dump_records, key_extractor, parse_records


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="locale-radix", description=__doc__)
    parser.add_argument("command", choices=["sort"])
    parser.add_argument("input")
    parser.add_argument("--output", default=None)
    parser.add_argument("--locale", default=None)
    parser.add_argument("--sensitivity", default=None, choices=list(SENSITIVITIES))
    parser.add_argument("--key-field", default=None)
    parser.add_argument("--format", dest="input_format", default=None, choices=list(INPUT_FORMATS))
    parser.add_argument("--config", default=None)
    parser.add_argument("--overlay-config", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> SortConfig:
    return load_sort_config(
        Path(args.config) if args.config else None,
        overlay_path=Path(args.overlay_config) if args.overlay_config else None,
        overrides={
            "locale": args.locale,
            "sensitivity": args.sensitivity,
            "key_field": args.key_field,
            "input_format": args.input_format,
        },
    )


def sort_file(cfg: SortConfig, input_path: Path, cache: ComparisonCache) -> tuple[int, list, str]:
    if input_path.is_dir():
        raise InputError(f"Input path is a directory: {input_path}")
    records = parse_records(read_text(input_path), cfg.input_format)
    ordered = RadixSorter(cache).sort(records, cfg.locale, key_extractor(cfg.key_field))
    return len(records), ordered, dump_records(ordered, cfg.input_format)


def run_command(args: argparse.Namespace, cache: ComparisonCache | None = None) -> int:
    run_id = args.run_id or generate_run_id()
    logger = build_logger(
        run_id,
        level=args.log_level,
        log_path=Path(args.log_file) if args.log_file else None,
    )

    try:
        cfg = resolve_config(args)
    except LocaleRadixError as exc:
        log_event(logger, str(exc), run_id=run_id, event="CONFIG_FAIL", status="error", error_code=exc.error_code)
        return EXIT_CONFIG_ERROR

    cache = cache or ComparisonCache(sensitivity=cfg.sensitivity)
    log_event(
        logger,
        "sort start",
        run_id=run_id,
        event="SORT_START",
        status="ok",
        locale=cfg.locale,
        sensitivity=cache.sensitivity,
    )

    started = time.perf_counter()
    try:
        items_in, ordered, rendered = sort_file(cfg, Path(args.input), cache)
    except FileNotFoundError:
        log_event(
            logger,
            f"input not found: {args.input}",
            run_id=run_id,
            event="SORT_FAIL",
            status="error",
            error_code="INPUT_ERROR",
        )
        return EXIT_CONFIG_ERROR
    except LocaleRadixError as exc:
        log_event(logger, str(exc), run_id=run_id, event="SORT_FAIL", status="error", error_code=exc.error_code)
        return EXIT_CONFIG_ERROR
    except Exception:
        logger.exception(
            "unexpected sort failure",
            extra={"run_id": run_id, "event": "SORT_FAIL", "status": "error", "error_code": "UNEXPECTED_ERROR"},
        )
        return EXIT_HARD_FAIL

    try:
        if args.output:
            write_text(Path(args.output), rendered)
        else:
            sys.stdout.write(rendered)
    except OSError as exc:
        log_event(
            logger,
            f"output write failed: {exc}",
            run_id=run_id,
            event="SORT_FAIL",
            status="error",
            error_code="OUTPUT_ERROR",
        )
        return EXIT_HARD_FAIL

    stats = cache.stats()
    log_event(
        logger,
        "sort end",
        run_id=run_id,
        event="SORT_END",
        status="ok",
        locale=cfg.locale,
        sensitivity=cache.sensitivity,
        items_in=items_in,
        items_out=len(ordered),
        cache_hits=stats.hits,
        cache_misses=stats.misses,
        engines=stats.engines,
        duration_ms=elapsed_ms(started),
    )
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    return run_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
