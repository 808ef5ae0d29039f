# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import argparse
import json
import os
import time
from datetime import datetime

from dateutil import tz

from .backend import DateutilBackend, ZonedBackend
from .core.errors import TempsError
from .core.hhmmss import hhmmss
from .core.language import Language
from .core.logger import get_logger
from .dispatcher import get_grammar
from .interpreter import resolve

logger = get_logger(__name__)

BACKENDS = {
    "dateutil": DateutilBackend,
    "zoned": ZonedBackend,
}


def parse_base_time(value, backend):
    """ISO 8601 base time, naive values are taken in the backend zone; None means now."""
    if not value:
        return backend.now()
    base_time = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if base_time.tzinfo is None:
        return backend.localize(base_time)
    return base_time


def run_query(text, language, base_time, backend):
    """
    Parse and resolve one query

    Returns:
        tuple: (expression, resolved datetime)

    Raises:
        TempsError: if parsing or resolution fails
    """
    expr = get_grammar(language).parse(text)
    return expr, resolve(expr, base_time, backend)


def compare_results(calculated, expected):
    """`expected` is an ISO instant or the kind of the expected error."""
    if isinstance(calculated, TempsError):
        return calculated.kind == expected
    try:
        expected_time = datetime.fromisoformat(expected.replace("Z", "+00:00"))
    except ValueError:
        return False
    return calculated == expected_time


def benchmark(input_file, backend, show_all_cases=False, writer=print, language=None):
    """
    Run a JSONL file of {"query", "language", "base_time", "expected"} lines

    Returns:
        tuple: (total cases, success cases)
    """
    total_cases = 0
    success_cases = 0

    with open(input_file, encoding="utf-8") as fin:
        for line_num, line in enumerate(fin, 1):
            if not line.strip():
                continue
            total_cases += 1
            data = json.loads(line)
            query = data["query"]
            case_language = data.get("language", language or "english")
            base_time = parse_base_time(data.get("base_time"), backend)
            expected = data["expected"]

            _wall_start = time.time()
            try:
                expr, calculated = run_query(query, case_language, base_time, backend)
            except TempsError as e:
                expr, calculated = None, e
            _wall_cost = time.time() - _wall_start

            if compare_results(calculated, expected):
                success_cases += 1
                if show_all_cases:
                    writer(f"Line {line_num}: ✓ Success | total={_wall_cost:.6f}s")
                    writer(f"  Query: {query}")
                    writer(f"  Result: {calculated}")
            else:
                writer(f"Line {line_num}: ✗ Mismatch | total={_wall_cost:.6f}s")
                writer(f"  Query: {query}")
                writer(f"  Expression: {expr}")
                writer(f"  Calculated: {calculated}")
                writer(f"  Expected: {expected}")

    writer("\n" + "=" * 80)
    writer("BENCHMARK SUMMARY")
    writer("=" * 80)
    writer(f"Total test cases: {total_cases}")
    if total_cases:
        error_cases = total_cases - success_cases
        writer(f"Success cases: {success_cases} ({success_cases/total_cases*100:.2f}%)")
        writer(f"Error cases: {error_cases} ({error_cases/total_cases*100:.2f}%)")
    return total_cases, success_cases


def build_parser():
    parser = argparse.ArgumentParser(
        description="temps - natural language time expression parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --text "next monday at 3pm" --language english
  python main.py --text "vor 5 Minuten" --language german --base_time 2024-01-15T10:00:00Z
  python main.py --file cases.jsonl --backend zoned
        """,
    )
    parser.add_argument("--text", help="Time expression to parse and resolve")
    parser.add_argument("--file", help="JSONL file for batch evaluation")
    parser.add_argument("--output", help="Also write --file results to this path")
    parser.add_argument(
        "--language",
        type=str,
        choices=[language.value for language in Language],
        default="english",
        help="Language of the input (english/german)",
    )
    parser.add_argument(
        "--base_time",
        type=str,
        default=None,
        help="Reference time in ISO 8601 format, defaults to now",
    )
    parser.add_argument(
        "--backend",
        type=str,
        choices=sorted(BACKENDS),
        default="dateutil",
        help="Calendar backend: dateutil refuses DST gaps/folds, zoned resolves them",
    )
    parser.add_argument("--timezone", help="Local zone name such as Europe/Berlin, defaults to the system zone")
    parser.add_argument(
        "--show_all_cases",
        action="store_true",
        help="Print successful --file cases as well",
    )
    return parser


def main(argv=None):
    """Entry point, returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if bool(args.text) == bool(args.file):
        print("error: exactly one of --text or --file is required\n")
        parser.print_help()
        return 1
    if args.output and not args.file:
        print("error: --output can only be used with --file\n")
        return 1
    if args.file and not os.path.exists(args.file):
        print(f"error: file not found: {args.file}\n")
        return 1

    zone = None
    if args.timezone:
        zone = tz.gettz(args.timezone)
        if zone is None:
            print(f"error: unknown timezone: {args.timezone}\n")
            return 1
    backend = BACKENDS[args.backend](zone=zone)

    start_time = time.time()
    if args.text:
        try:
            base_time = parse_base_time(args.base_time, backend)
            expr, result = run_query(args.text, args.language, base_time, backend)
        except ValueError as e:
            print(f"error: invalid --base_time: {e}")
            return 1
        except TempsError as e:
            print(f"Query: {args.text}")
            print(f"Error: {e}")
            return 2

        print(f"Language: {args.language}")
        print(f"Query: {args.text}")
        print(f"BaseTime: {base_time.isoformat()}")
        print(f"Expression: {expr}")
        print(f"Result: {result.isoformat()}")
        print(f"Offset: {hhmmss(result - base_time)}")
    elif args.output:
        with open(args.output, "w", encoding="utf-8") as f:

            def writer(msg):
                print(msg)
                f.write(msg + "\n")

            benchmark(args.file, backend, args.show_all_cases, writer=writer, language=args.language)
    else:
        benchmark(args.file, backend, args.show_all_cases, language=args.language)

    logger.info(f"Total time: {time.time() - start_time}")
    return 0
