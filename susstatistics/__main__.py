"""
Command line front end.

    python -m susstatistics results.csv
    python -m susstatistics results.csv --independent --parametric
    python -m susstatistics results.csv --system "System A" --system "System B" \\
        --dependent --nonparametric --assumptions
"""

import argparse
import sys

from susstatistics.core.exceptions import (
    DesignError,
    InvalidArgumentError,
    ValidationError,
)
from susstatistics.hypothesis import levene_test, shapiro_test
from susstatistics.ingest import read_content, validate_content
from susstatistics.session import Calculator, Parametric, SampleDependence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='susstatistics',
        description='Inferential statistics for System Usability Scale studies',
    )
    parser.add_argument('path', help="';'-delimited SUS questionnaire file")
    parser.add_argument(
        '--system', '-s',
        action='append',
        metavar='NAME',
        help='System/variable to include (repeatable; default: all)',
    )

    dependence = parser.add_mutually_exclusive_group()
    dependence.add_argument(
        '--independent', dest='dependence', action='store_const',
        const=SampleDependence.INDEPENDENT,
        help='Different respondents per system',
    )
    dependence.add_argument(
        '--dependent', dest='dependence', action='store_const',
        const=SampleDependence.DEPENDENT,
        help='The same respondents rated every system',
    )

    parametric = parser.add_mutually_exclusive_group()
    parametric.add_argument(
        '--parametric', dest='parametric', action='store_const',
        const=Parametric.PARAMETRIC,
    )
    parametric.add_argument(
        '--nonparametric', dest='parametric', action='store_const',
        const=Parametric.NON_PARAMETRIC,
    )

    parser.add_argument(
        '--assumptions', '-a',
        action='store_true',
        help="Also report Levene's and Shapiro-Wilk tests",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    content = read_content(args.path)
    if content is None:
        print(f"ERROR: no content could be read from {args.path}")
        return 1

    valid, message = validate_content(content)
    if not valid:
        print(f"ERROR: {message}")
        return 1

    calc = Calculator.from_content(content)
    try:
        if args.system:
            calc.select(args.system)
    except InvalidArgumentError as e:
        print(f"ERROR: {e}")
        return 1

    for study in calc.active_studies:
        print(study.summary())
        print()

    if args.assumptions:
        active = calc.active_studies
        if len(active) >= 2:
            print(levene_test([s.sus_scores for s in active]).apa())
        for study in active:
            if study.n >= 3:
                print(f"{study.name}: {shapiro_test(study.sus_scores).apa()}")
        print()

    if args.dependence is None or args.parametric is None:
        return 0

    try:
        calc.set_sample_dependence(args.dependence)
        calc.set_parametric(args.parametric)
        solution = calc.run_test()
    except (DesignError, ValidationError) as e:
        print(f"ERROR: {e}")
        return 2

    print(solution.summary())
    for warning in solution.warnings:
        print(f"Warning: {warning}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
