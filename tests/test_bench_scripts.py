import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run_script(*args):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, *args],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
    )


def test_wordfreq_baseline_text():
    proc = run_script(
        "bench/python_wordfreq_baseline.py",
        "--text",
        "a a a a b",
        "--rounds",
        "2",
        "--trials",
        "3",
        "--no-alloc",
        "--top-k",
        "1",
    )
    assert proc.returncode == 0, proc.stderr
    lines = [json.loads(line) for line in proc.stdout.splitlines()]
    assert len(lines) == 3
    assert lines[0]["key_allocations"] == 6
    assert lines[-1]["top"] == [["a", 4]]
    assert lines[-1]["unique_words"] == 2
    assert lines[-1]["hapaxes"] == 1


def test_wordfreq_baseline_input_file(tmp_path):
    path = tmp_path / "book.txt"
    path.write_text("Hello, World! Hello world.", encoding="utf-8")
    proc = run_script(
        "bench/python_wordfreq_baseline.py",
        "--input",
        str(path),
        "--rounds",
        "1",
        "--trials",
        "1",
        "--method",
        "regex",
    )
    assert proc.returncode == 0, proc.stderr
    summary = json.loads(proc.stdout.splitlines()[-1])
    assert summary["method"] == "regex"
    assert summary["unique_words"] == 3
    assert summary["top"][0] == ["Hello", 2]


def test_wordfreq_baseline_requires_source():
    proc = run_script("bench/python_wordfreq_baseline.py")
    assert proc.returncode != 0
    assert "either --text or --input is required" in proc.stderr


def test_wordfreq_baseline_missing_file(tmp_path):
    proc = run_script("bench/python_wordfreq_baseline.py", "--input", str(tmp_path / "nope.txt"))
    assert proc.returncode != 0
    assert "FileNotFoundError" in proc.stderr


def test_tokenizer_baseline():
    proc = run_script("bench/python_tokenizer_baseline.py", "--text", "the cat, the hat")
    assert proc.returncode == 0, proc.stderr
    out = json.loads(proc.stdout)
    assert out["tokens"] == ["the", "cat", "the", "hat"]
    assert out["spans"][1] == [4, 3]


def test_generate_synthetic(tmp_path):
    out = tmp_path / "synthetic.txt"
    proc = run_script("bench/generate_synthetic.py", "--size-mb", "0.01", "--vocab-size", "200", "--out", str(out))
    assert proc.returncode == 0, proc.stderr
    text = out.read_text(encoding="utf-8")
    assert len(text.encode("utf-8")) >= 0.01 * 1024 * 1024
    again = tmp_path / "again.txt"
    run_script("bench/generate_synthetic.py", "--size-mb", "0.01", "--vocab-size", "200", "--out", str(again))
    assert again.read_text(encoding="utf-8") == text
