#!/usr/bin/env python3
"""
Evaluation runner for the Huffman file compressor.

This evaluation script:
- Compresses and decompresses every input file (or a built-in synthetic corpus)
- Verifies each round trip and records sizes, ratio and timings
- Generates a structured JSON report with environment metadata

Run with:
    python evaluation/evaluation.py [files ...] [--output report.json]
"""
import sys
import json
import uuid
import random
import platform
import subprocess
import time
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from huffman_errors import HuffmanError  # noqa: E402
from huffman_service import HuffmanService, read_bytes  # noqa: E402


def generate_run_id():
    """Generate a short unique run ID."""
    return uuid.uuid4().hex[:8]


def get_git_info():
    """Get git commit and branch information."""
    git_info = {"git_commit": "unknown", "git_branch": "unknown"}
    commands = {
        "git_commit": ["git", "rev-parse", "HEAD"],
        "git_branch": ["git", "rev-parse", "--abbrev-ref", "HEAD"],
    }
    for key, cmd in commands.items():
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=str(PROJECT_ROOT),
                timeout=5
            )
        except (OSError, subprocess.SubprocessError):
            continue
        if result.returncode == 0:
            value = result.stdout.strip()
            git_info[key] = value[:8] if key == "git_commit" else value
    return git_info


def get_environment_info():
    """Collect environment information for the report."""
    git_info = get_git_info()

    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "os": platform.system(),
        "os_release": platform.release(),
        "architecture": platform.machine(),
        "hostname": platform.node(),
        "git_commit": git_info["git_commit"],
        "git_branch": git_info["git_branch"],
    }


def synthetic_corpus(seed=1234):
    """Small deterministic samples covering the interesting alphabet shapes."""
    rng = random.Random(seed)
    return {
        "empty": b"",
        "single_byte": b"A",
        "repeated_byte": b"\x00" * 4096,
        "english_text": b"the quick brown fox jumps over the lazy dog. " * 200,
        "skewed": bytes(rng.choice(b"aaaaaaaabbbbccd") for _ in range(16 * 1024)),
        "all_bytes": bytes(range(256)) * 4,
        "random": bytes(rng.getrandbits(8) for _ in range(16 * 1024)),
    }


def evaluate_sample(service, name, data):
    """
    Round-trip one sample through the compressor.

    Args:
        service: The HuffmanService to use
        name: Label for this sample (file path or corpus key)
        data: The raw bytes to compress

    Returns:
        dict with sizes, ratio, timings and outcome
    """
    entry = {"name": name, "original_size": len(data)}
    try:
        t0 = time.perf_counter()
        compressed = service.compress(data)
        t1 = time.perf_counter()
        restored = service.decompress(compressed)
        t2 = time.perf_counter()
    except HuffmanError as e:
        entry.update({"outcome": "error", "error": str(e)})
        return entry

    entry.update({
        "compressed_size": len(compressed),
        "ratio": round(len(compressed) / len(data), 6) if data else None,
        "compress_seconds": round(t1 - t0, 6),
        "decompress_seconds": round(t2 - t1, 6),
        "outcome": "passed" if restored == data else "failed",
    })
    return entry


def run_evaluation(paths=None):
    """
    Run the round-trip evaluation.

    Args:
        paths: Files to evaluate; the synthetic corpus is used when empty

    Returns:
        dict with per-sample results and a summary
    """
    print(f"\n{'=' * 60}")
    print("HUFFMAN COMPRESSOR EVALUATION")
    print(f"{'=' * 60}")

    service = HuffmanService()
    samples = []
    if paths:
        for path in paths:
            try:
                samples.append((str(path), read_bytes(path)))
            except HuffmanError as e:
                samples.append((str(path), e))
    else:
        samples.extend(synthetic_corpus().items())

    results = []
    for name, data in samples:
        if isinstance(data, Exception):
            entry = {"name": name, "outcome": "error", "error": str(data)}
        else:
            entry = evaluate_sample(service, name, data)
        results.append(entry)

        status_icon = {
            "passed": "✅",
            "failed": "❌",
            "error": "💥",
        }.get(entry["outcome"], "❓")
        detail = entry.get("error") or f"{entry['original_size']} -> {entry['compressed_size']} bytes"
        print(f"  {status_icon} {name}: {detail}")

    passed = sum(1 for r in results if r["outcome"] == "passed")
    failed = sum(1 for r in results if r["outcome"] == "failed")
    errors = sum(1 for r in results if r["outcome"] == "error")
    original_total = sum(r.get("original_size", 0) for r in results if r["outcome"] == "passed")
    compressed_total = sum(r.get("compressed_size", 0) for r in results if r["outcome"] == "passed")

    summary = {
        "total": len(results),
        "passed": passed,
        "failed": failed,
        "errors": errors,
        "original_bytes": original_total,
        "compressed_bytes": compressed_total,
        "overall_ratio": round(compressed_total / original_total, 6) if original_total else None,
    }
    print(f"\nResults: {passed} passed, {failed} failed, {errors} errors (total: {len(results)})")

    return {
        "success": failed == 0 and errors == 0,
        "samples": results,
        "summary": summary,
    }


def generate_output_path():
    """Generate output path in format: evaluation/YYYY-MM-DD/HH-MM-SS/report.json"""
    now = datetime.now()
    date_str = now.strftime("%Y-%m-%d")
    time_str = now.strftime("%H-%M-%S")

    output_dir = PROJECT_ROOT / "evaluation" / date_str / time_str
    output_dir.mkdir(parents=True, exist_ok=True)

    return output_dir / "report.json"


def main(argv=None):
    """Main entry point for evaluation."""
    import argparse

    parser = argparse.ArgumentParser(description="Run Huffman compressor round-trip evaluation")
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files to evaluate (default: built-in synthetic corpus)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path (default: evaluation/YYYY-MM-DD/HH-MM-SS/report.json)"
    )

    args = parser.parse_args(argv)

    run_id = generate_run_id()
    started_at = datetime.now()

    print(f"Run ID: {run_id}")
    print(f"Started at: {started_at.isoformat()}")

    results = run_evaluation(args.paths)
    success = results["success"]

    finished_at = datetime.now()
    duration = (finished_at - started_at).total_seconds()

    report = {
        "run_id": run_id,
        "started_at": started_at.isoformat(),
        "finished_at": finished_at.isoformat(),
        "duration_seconds": round(duration, 6),
        "success": success,
        "error": None if success else "One or more samples did not round-trip",
        "environment": get_environment_info(),
        "results": results,
    }

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = generate_output_path()

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\n✅ Report saved to: {output_path}")

    print(f"\n{'=' * 60}")
    print("EVALUATION COMPLETE")
    print(f"{'=' * 60}")
    print(f"Run ID: {run_id}")
    print(f"Duration: {duration:.2f}s")
    print(f"Success: {'✅ YES' if success else '❌ NO'}")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
