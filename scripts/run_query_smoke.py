#!/usr/bin/env python3
import json
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

from src.second_brain.core.config import ClientConfig
from src.second_brain.core.lifecycle import RequestLifecycle

OUT_DIR = os.getenv("OUT_DIR", "logs/smoke")

# NOTE: Requires a running answering service reachable at SECOND_BRAIN_API_BASE_URL.
# This is a smoke test for end-to-end wiring, not answer quality.

QUERIES = [
    # Plain definition question
    "What is RAG?",
    # Leading/trailing whitespace is trimmed before sending
    "   Summarize my notes on vector databases   ",
    # Low-signal input still round-trips to a success or error state
    "blorb flarq ???",
]


def main() -> int:
    load_dotenv()
    os.makedirs(OUT_DIR, exist_ok=True)
    config = ClientConfig.from_env()
    config.export_tracing_env()
    lifecycle = RequestLifecycle(config)

    for idx, query in enumerate(QUERIES, start=1):
        print(f"\n==> {query.strip()}")
        lifecycle.submit(query)
        state = lifecycle.state
        record = {"query": query.strip(), "status": state.status, "answer": lifecycle.answer, "error": lifecycle.error}
        out_path = os.path.join(OUT_DIR, f"{idx:02d}.json")
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2, ensure_ascii=False)
        print(json.dumps(record, ensure_ascii=False)[:2000])
        time.sleep(0.2)

    print(f"\nstate_history={lifecycle.state_history}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
