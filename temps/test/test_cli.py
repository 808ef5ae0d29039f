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

"""Command line interface"""

import json

from dateutil import tz

from temps.backend import DateutilBackend
from temps.cli import benchmark, main

BASE_TIME = "2024-01-15T10:00:00Z"


def test_text_query(capsys):
    code = main(["--text", "in 5 minutes", "--base_time", BASE_TIME, "--timezone", "UTC"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Result: 2024-01-15T10:05:00+00:00" in out
    assert "Offset: 00:05:00" in out


def test_german_query(capsys):
    code = main(["--text", "vor 2 Stunden", "--language", "german", "--base_time", BASE_TIME])
    out = capsys.readouterr().out

    assert code == 0
    assert "Result: 2024-01-15T08:00:00+00:00" in out
    assert "Offset: -02:00:00" in out


def test_unparseable_query(capsys):
    code = main(["--text", "blah", "--base_time", BASE_TIME, "--timezone", "UTC"])
    out = capsys.readouterr().out

    assert code == 2
    assert "Error: Failed to parse time expression" in out


def test_argument_errors(capsys, tmp_path):
    assert main([]) == 1
    assert main(["--text", "now", "--file", "cases.jsonl"]) == 1
    assert main(["--file", str(tmp_path / "missing.jsonl")]) == 1
    assert main(["--text", "now", "--timezone", "Not/AZone"]) == 1
    assert main(["--text", "now", "--base_time", "yesterday-ish"]) == 1
    capsys.readouterr()


def _write_cases(path):
    cases = [
        {"query": "in 5 minutes", "language": "english", "base_time": BASE_TIME, "expected": "2024-01-15T10:05:00Z"},
        {"query": "vor 2 Tagen", "language": "german", "base_time": BASE_TIME, "expected": "2024-01-13T10:00:00Z"},
        {"query": "now!", "language": "english", "base_time": BASE_TIME, "expected": "parse_error"},
        {"query": "now", "language": "english", "base_time": BASE_TIME, "expected": "2024-01-15T11:00:00Z"},
    ]
    with open(path, "w", encoding="utf-8") as f:
        for case in cases:
            f.write(json.dumps(case) + "\n")
        f.write("\n")


def test_benchmark(tmp_path):
    cases = tmp_path / "cases.jsonl"
    _write_cases(cases)

    lines = []
    total, success = benchmark(str(cases), DateutilBackend(zone=tz.UTC), writer=lines.append)

    assert (total, success) == (4, 3)
    assert any("Line 4: ✗ Mismatch" in line for line in lines)
    assert "Total test cases: 4" in lines


def test_file_with_output(tmp_path, capsys):
    cases = tmp_path / "cases.jsonl"
    report = tmp_path / "report.txt"
    _write_cases(cases)

    code = main(["--file", str(cases), "--output", str(report), "--timezone", "UTC", "--show_all_cases"])
    capsys.readouterr()

    assert code == 0
    text = report.read_text(encoding="utf-8")
    assert "BENCHMARK SUMMARY" in text
    assert "Success cases: 3 (75.00%)" in text
