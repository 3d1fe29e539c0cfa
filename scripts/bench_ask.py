#!/usr/bin/env python3
"""Benchmark question answering: latency (p50, p95, p99) and QPS.

Usage:
    export API_URL=http://localhost:3000
    python scripts/bench_ask.py [--num-docs 5] [--num-questions 50]

Seeds the store by uploading generated .txt documents through /api/upload,
then times POST /api/ask. Every question costs one embedding and one
completion request against the configured OpenAI account.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx

SEED_SENTENCES = (
    "The benchmark warehouse ships orders every weekday before noon.",
    "Returns are accepted within thirty days of delivery.",
    "Support is available by email and by phone during business hours.",
    "Premium members receive free express shipping on all orders.",
)

QUESTIONS = (
    "When are orders shipped?",
    "How long do I have to return an item?",
    "How can I contact support?",
    "What do premium members get?",
)


def seed_document(index: int) -> bytes:
    lines = [f"Benchmark document {index}."]
    lines.extend(f"{sentence} (ref {index}-{i})" for i, sentence in enumerate(SEED_SENTENCES * 10))
    return "\n".join(lines).encode("utf-8")


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark /api/ask")
    parser.add_argument("--num-docs", type=int, default=5, help="Documents to upload before asking")
    parser.add_argument("--num-questions", type=int, default=50, help="Number of ask requests")
    parser.add_argument("--output", type=str, default="results/bench_ask.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:3000").rstrip("/")

    with httpx.Client(timeout=120.0) as client:
        print(f"Uploading {args.num_docs} documents...")
        chunks_total = 0
        for i in range(args.num_docs):
            r = client.post(
                f"{api_url}/api/upload",
                files={"file": (f"bench_{i}.txt", seed_document(i), "text/plain")},
            )
            r.raise_for_status()
            chunks_total += r.json()["chunks_count"]
        print(f"Stored {chunks_total} chunks")

    latencies: list[float] = []
    errors = 0
    print(f"Running {args.num_questions} ask requests...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=60.0) as client:
        for i in range(args.num_questions):
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/api/ask",
                json={"question": QUESTIONS[i % len(QUESTIONS)]},
            )
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful questions.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Ask benchmark (documents={args.num_docs}, chunks={chunks_total}, "
        f"questions={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
