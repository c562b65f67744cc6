#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Command line interface for the SleepLog app.

Usage:
    sleeplog [--config PATH] [--file PATH] [--log-level LEVEL] [COMMAND]

Commands:
    add         Record one day and save
    list        List recorded days with their fatigue scores
    summary     Show averages over the log
    predict     Predict next-day risk from the last few days
    menu        Interactive menu (default)
"""

import argparse
import logging
import re
import sys

from sleeplog.config.config_manager import ConfigManager
from sleeplog.core.models.data_models import RiskLevel, StoreStatus
from sleeplog.core.services.sleep_service import SleepService

logger = logging.getLogger(__name__)

RISK_LABELS = {
    RiskLevel.LOW: "Low risk",
    RiskLevel.MODERATE: "Moderate risk",
    RiskLevel.HIGH: "HIGH risk",
}

MENU_TEXT = (
    "\nSimple Sleep Predictor\n"
    "1) Add entry\n2) List entries\n3) Summary\n4) Predict next-day risk\n"
    "5) Save\n6) Load\n0) Exit (auto-save)"
)

_INT_PREFIX = re.compile(r'\s*([-+]?\d+)')
_FLOAT_PREFIX = re.compile(r'\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)')


def _to_int(text):
    """Leading integer of text, 0 when there is none"""
    m = _INT_PREFIX.match(text)
    return int(m.group(1)) if m else 0


def _to_float(text):
    """Leading decimal number of text, 0.0 when there is none"""
    m = _FLOAT_PREFIX.match(text)
    return float(m.group(1)) if m else 0.0


def setup_logging(level, log_file=None):
    """Configure root logging for the CLI"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(prog='sleeplog', description='Track sleep and predict next-day fatigue risk')

    parser.add_argument(
        '--config',
        type=str,
        default='config/config.yaml',
        help='Path to YAML configuration file'
    )

    parser.add_argument(
        '--file',
        type=str,
        default=None,
        help='Sleep log file (overrides storage.path)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (overrides logging.level)'
    )

    subparsers = parser.add_subparsers(dest='command')

    add = subparsers.add_parser('add', help='Record one day and save')
    add.add_argument('--date', type=str, default='', help='Date label, e.g. 2024-03-01')
    add.add_argument('--hours', type=float, required=True, help='Hours slept')
    add.add_argument('--quality', type=int, required=True, help='Sleep quality 1..10')
    add.add_argument('--screen', type=float, default=0.0, help='Screen hours today')
    add.add_argument('--caffeine', type=int, default=0, help='Caffeine mg today')
    add.add_argument('--note', type=str, default='', help='Optional note')

    subparsers.add_parser('list', help='List recorded days')
    subparsers.add_parser('summary', help='Show averages over the log')
    subparsers.add_parser('predict', help='Predict next-day risk')
    subparsers.add_parser('menu', help='Interactive menu')

    return parser.parse_args(argv)


def print_add_result(status, score, service):
    if status == StoreStatus.CAPACITY_EXCEEDED:
        print(f"Storage full (max {service.log.capacity}).")
    else:
        print(f"Added. Fatigue score: {score:.2f}")


def print_entries(service):
    rows = service.list_entries()
    if not rows:
        print("No entries.")
        return
    for i, (e, score) in enumerate(rows, start=1):
        print(f"{i:2d}) {e.date} | {e.hours:.2f} hrs | q={e.quality} | s={e.screen:.2f}h "
              f"| c={e.caffeine} mg | fatigue={score:.2f} | note: {e.note}")


def print_summary(service):
    metrics = service.summary()
    if metrics['days_recorded'] == 0:
        print("No data.")
        return
    print(f"Days recorded: {metrics['days_recorded']}")
    print(f"Average hours slept: {metrics['avg_hours']:.2f}")
    print(f"Average fatigue (all days): {metrics['avg_fatigue']:.2f}")
    print(f"Average recent fatigue ({service.window} days): {metrics['avg_recent_fatigue']:.2f}")


def print_prediction(service):
    prediction = service.predict()
    print(f"Predicted avg (last {prediction.window}): {prediction.average:.2f} -> "
          f"{RISK_LABELS[prediction.level]}")


def print_save_result(result):
    if result.status == StoreStatus.OK:
        print(f"Saved to {result.path}")
    else:
        print("Save failed")


def print_load_result(result):
    if result.loaded:
        print(f"Loaded {result.loaded} entries from {result.path}")
    else:
        print("Load failed or no file.")
    if result.stopped_at_line is not None:
        print(f"Stopped at malformed line {result.stopped_at_line}; later lines were ignored.")
    if result.skipped_lines:
        print(f"Skipped malformed lines: {', '.join(str(n) for n in result.skipped_lines)}")
    if result.dropped_over_capacity:
        print(f"{result.dropped_over_capacity} entries beyond capacity were not loaded.")


def prompt_entry(input_fn):
    """Ask for one day's values, coercing unparseable numbers to 0"""
    return {
        'date': input_fn("Date (YYYY-MM-DD): "),
        'hours': _to_float(input_fn("Hours slept (e.g., 7.5): ")),
        'quality': _to_int(input_fn("Sleep quality (1..10): ")),
        'screen': _to_float(input_fn("Screen hours today: ")),
        'caffeine': _to_int(input_fn("Caffeine mg today (approx): ")),
        'note': input_fn("Note (optional, no commas): "),
    }


def run_menu(service, input_fn=input):
    """Interactive loop; returns when the user exits or input ends"""
    while True:
        print(MENU_TEXT)
        try:
            opt = _to_int(input_fn("Choose: "))
            if opt == 1:
                if service.log.is_full:
                    print(f"Storage full (max {service.log.capacity}).")
                    continue
                status, _, score = service.add_entry(**prompt_entry(input_fn))
                print_add_result(status, score, service)
            elif opt == 2:
                print_entries(service)
            elif opt == 3:
                print_summary(service)
            elif opt == 4:
                print_prediction(service)
            elif opt == 5:
                print_save_result(service.save())
            elif opt == 6:
                print_load_result(service.load())
            elif opt == 0:
                service.save()
                print("Auto-saved. Bye.")
                return
            else:
                print("Invalid option.")
        except EOFError:
            service.save()
            print("\nAuto-saved. Bye.")
            return


def main(argv=None):
    args = parse_args(argv)
    config = ConfigManager(args.config)
    setup_logging(args.log_level or config.get('logging.level'), config.get('logging.file'))

    service = SleepService.from_config(config, path=args.file)
    startup = service.load()
    if startup.stopped_at_line is not None or startup.skipped_lines or startup.dropped_over_capacity:
        print_load_result(startup)

    command = args.command or 'menu'
    logger.debug(f"Running command {command}")
    if command == 'add':
        status, _, score = service.add_entry(
            date=args.date, hours=args.hours, quality=args.quality,
            screen=args.screen, caffeine=args.caffeine, note=args.note,
        )
        print_add_result(status, score, service)
        if status != StoreStatus.OK:
            return 1
        result = service.save()
        print_save_result(result)
        return 0 if result.status == StoreStatus.OK else 1
    elif command == 'list':
        print_entries(service)
    elif command == 'summary':
        print_summary(service)
    elif command == 'predict':
        print_prediction(service)
    else:
        run_menu(service)
    return 0


if __name__ == '__main__':
    sys.exit(main())
