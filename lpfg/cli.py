"""CLI entry and command wiring."""

import argparse
import sys

import pandas as pd

from lpfg.constants import APP_NAME, ExitCode
from lpfg.core.config import LOG_LEVELS, LoggingConfig
from lpfg.core.data_structures import WavelengthAxis
from lpfg.core.exceptions import ConfigurationError, MalformedRecordError, SourceUnavailableError
from lpfg.data.batch import evaluate_parameter_file, show_measured, show_parameters
from lpfg.data.loader import RecordFormat
from lpfg.models import MODEL_KINDS
from lpfg.shell import select_and_ingest
from lpfg.utils.analysis import characterize_dip
from lpfg.utils.logging import init_logging


def run_pairs(args):
    show_measured(args.file, sys.stdout)
    return ExitCode.OK


def run_params(args):
    show_parameters(args.file, sys.stdout)
    return ExitCode.OK


def build_axis(args):
    if args.step is not None:
        return WavelengthAxis.from_range(args.start, args.stop, args.step)
    return WavelengthAxis.linspace(args.start, args.stop, args.points)


def run_simulate(args):
    try:
        axis = build_axis(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.USAGE

    results = evaluate_parameter_file(args.file, axis=axis, model=args.model, fcn=args.fcn)

    if args.table:
        columns = {'wavelength': axis.values}
        for i, result in enumerate(results, start=1):
            columns[f'row_{i}'] = result.spectrum.transmission
        print(pd.DataFrame(columns).to_string(index=False))
        return ExitCode.OK

    for i, result in enumerate(results, start=1):
        p = result.parameters
        dip = characterize_dip(axis, result.spectrum.transmission)
        if dip is None:
            detail = "no dip found"
        else:
            detail = (f"dip at {dip.resonant_wavelength:.4f}, depth {dip.depth:.4f}, "
                      f"FWHM {dip.fwhm:.4f}, baseline {dip.baseline:.4f}")
        print(f"{i}: a={p.a} x0={p.x0} w={p.w} bias={p.bias} -> {detail}")
    return ExitCode.OK


def run_ingest(args):
    result = select_and_ingest(args.path, record_format=args.format)
    if isinstance(result, str):
        print(f"error: {result}", file=sys.stderr)
        return ExitCode.INPUT_ERROR
    print(result.summary())
    return ExitCode.OK


COMMANDS = {
    "pairs": run_pairs,
    "params": run_params,
    "simulate": run_simulate,
    "ingest": run_ingest,
}


def build_parser():
    parser = argparse.ArgumentParser(prog=APP_NAME)
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS)
    parser.add_argument("--log-file", help="Also write JSON logs to this file")
    sub = parser.add_subparsers(dest="command")

    p_pairs = sub.add_parser("pairs", help="List a raw wavelength;transmission file")
    p_pairs.add_argument("file")

    p_params = sub.add_parser("params", help="List a model parameter table")
    p_params.add_argument("file")

    p_simulate = sub.add_parser("simulate", help="Evaluate every row of a parameter table")
    p_simulate.add_argument("file")
    p_simulate.add_argument("--model", choices=MODEL_KINDS, default="lorentzian")
    p_simulate.add_argument("--start", type=float, required=True)
    p_simulate.add_argument("--stop", type=float, required=True)
    grid = p_simulate.add_mutually_exclusive_group(required=True)
    grid.add_argument("--step", type=float)
    grid.add_argument("--points", type=int)
    p_simulate.add_argument("--fcn", type=float, help="Selector for the hybrid model")
    p_simulate.add_argument("--table", action="store_true", help="Print every simulated value")

    p_ingest = sub.add_parser("ingest", help="Read a file and summarize it")
    p_ingest.add_argument("path", nargs="?", default="")
    p_ingest.add_argument("--format", choices=[f.value for f in RecordFormat])

    return parser


def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.USAGE

    init_logging(LoggingConfig(level=args.log_level, log_file=args.log_file))

    try:
        return COMMANDS[args.command](args)
    except (SourceUnavailableError, MalformedRecordError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.INPUT_ERROR
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.USAGE
