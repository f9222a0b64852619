"""Quick-example smoke runner: local vs AI-enhanced prompts.

Posts the quick-example requests (English and Portuguese) to /api/rtctf twice,
once with useAI=false and once with useAI=true, then writes a comparison
report to test-logs/smoke/{timestamp}.md.

Usage:
    python3 scripts/smoke_runner.py                 # Run all examples
    python3 scripts/smoke_runner.py 1 3 5           # Run specific examples
    RTCTF_BASE_URL=http://host:8000 python3 scripts/smoke_runner.py
"""

from __future__ import annotations

import asyncio
import os
import subprocess
import sys
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import httpx

BASE_URL = os.environ.get("RTCTF_BASE_URL", "http://localhost:8000")
REPORT_DIR = Path(__file__).resolve().parent.parent / "test-logs" / "smoke"

HEALTH_TIMEOUT = 30  # seconds

EXAMPLES: list[tuple[str, str]] = [
    ("en", "Create a marketing strategy for a new app"),
    ("en", "Explain machine learning to beginners"),
    ("en", "Analyze customer feedback data"),
    ("en", "Plan a team productivity workshop"),
    ("pt", "Criar uma estratégia de marketing para um novo aplicativo"),
    ("pt", "Explicar aprendizado de máquina para iniciantes"),
    ("pt", "Analisar dados de feedback de clientes"),
    ("pt", "Planejar um workshop de produtividade para a equipe"),
]


# ── Data classes ────────────────────────────────────────────────────────


@dataclass
class Variant:
    prompt: str = ""
    source: str = ""
    fallback: str | None = None
    status: int = 0
    error: str | None = None
    latency_ms: int = 0


@dataclass
class ExampleResult:
    index: int
    language: str
    text: str
    local: Variant
    enhanced: Variant


# ── Health check ───────────────────────────────────────────────────────


async def health_check(timeout: int = HEALTH_TIMEOUT) -> dict:
    """Wait for the backend and return its health payload."""
    url = f"{BASE_URL}/api/health"
    deadline = time.monotonic() + timeout
    last_err = None

    async with httpx.AsyncClient() as client:
        while time.monotonic() < deadline:
            try:
                resp = await client.get(url, timeout=5)
                if resp.status_code == 200:
                    print(f"  Backend ready ({url})")
                    return resp.json()
            except httpx.HTTPError as e:
                last_err = e
            await asyncio.sleep(1)

    raise RuntimeError(f"Backend not ready after {timeout}s: {last_err}")


# ── Runner ─────────────────────────────────────────────────────────────


async def _post(client: httpx.AsyncClient, text: str, language: str, use_ai: bool) -> Variant:
    variant = Variant()
    start = time.monotonic()
    try:
        resp = await client.post(
            f"{BASE_URL}/api/rtctf",
            json={"text": text, "useAI": use_ai, "language": language},
        )
        variant.status = resp.status_code
        body = resp.json()
        if resp.status_code == 200:
            variant.prompt = body["prompt"]
            variant.source = body["source"]
            variant.fallback = body.get("fallback")
        else:
            variant.error = body.get("error", f"HTTP {resp.status_code}")
    except (httpx.HTTPError, ValueError) as e:
        variant.error = str(e)
    variant.latency_ms = int((time.monotonic() - start) * 1000)
    return variant


async def run_example(client: httpx.AsyncClient, index: int, language: str, text: str) -> ExampleResult:
    local, enhanced = await asyncio.gather(
        _post(client, text, language, use_ai=False),
        _post(client, text, language, use_ai=True),
    )
    return ExampleResult(index=index, language=language, text=text, local=local, enhanced=enhanced)


# ── Report generation ──────────────────────────────────────────────────


def _git_short_hash() -> str:
    try:
        return subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=str(Path(__file__).resolve().parent.parent),
            text=True,
            stderr=subprocess.DEVNULL,
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


def _status(variant: Variant) -> str:
    if variant.error:
        return f"ERROR ({variant.status or '-'})"
    if variant.fallback:
        return f"{variant.source} [{variant.fallback}]"
    return variant.source


def write_report(results: list[ExampleResult], health: dict, timestamp: str) -> Path:
    """Generate markdown report and return file path."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    filepath = REPORT_DIR / f"{timestamp}.md"

    lines: list[str] = []
    w = lines.append

    total = len(results)
    failed = sum(1 for r in results if r.local.error or r.enhanced.error)

    w("# RTCTF smoke run\n")
    w("## Metadata\n")
    w(f"- **Run**: {timestamp}")
    w(f"- **Git**: {_git_short_hash()}")
    w(f"- **Server**: {BASE_URL}")
    w(f"- **Examples**: {total} (ok {total - failed} / failed {failed})")
    w("")

    for r in sorted(results, key=lambda x: x.index):
        w("---")
        w(f"\n### E{r.index} [{r.language}]: {r.text}\n")
        for name, variant in (("Local", r.local), ("useAI", r.enhanced)):
            w(f"**{name}** - {_status(variant)} / {variant.latency_ms}ms\n")
            if variant.error:
                w(f"> {variant.error}\n")
            else:
                w("```")
                w(variant.prompt)
                w("```\n")

    w("---\n")
    w("## Summary\n")
    w("| # | Lang | Text | Local | useAI | Local length | useAI length |")
    w("|---|------|------|-------|-------|--------------|--------------|")
    for r in sorted(results, key=lambda x: x.index):
        w(
            f"| E{r.index} | {r.language} | {r.text} | {_status(r.local)} | {_status(r.enhanced)} "
            f"| {len(r.local.prompt)} | {len(r.enhanced.prompt)} |"
        )
    w("")

    enhancement = health.get("enhancement", {})
    if enhancement:
        w("## Enhancement metrics (server, before run)\n")
        w(f"- **Attempts**: {enhancement.get('attempts', 0)}")
        w(f"- **Successes**: {enhancement.get('successes', 0)}")
        w(f"- **Prompt tokens**: {enhancement.get('promptTokens', 0):,}")
        w(f"- **Completion tokens**: {enhancement.get('completionTokens', 0):,}")
        w("")

    filepath.write_text("\n".join(lines), encoding="utf-8")
    return filepath


# ── Main ───────────────────────────────────────────────────────────────


async def main() -> None:
    print("RTCTF smoke runner")
    print("=" * 50)

    examples = list(enumerate(EXAMPLES, start=1))
    if len(sys.argv) > 1:
        selected = {int(a) for a in sys.argv[1:]}
        examples = [(i, e) for i, e in examples if i in selected]
        print(f"  Selected examples: {[i for i, _ in examples]}")

    if not examples:
        print("  Nothing to run.")
        return

    print("\n  Checking health...")
    health = await health_check()

    print(f"\n  Running {len(examples)} examples...")
    start = time.monotonic()
    async with httpx.AsyncClient(timeout=httpx.Timeout(30.0)) as client:
        results: list[ExampleResult] = await asyncio.gather(
            *(run_example(client, i, lang, text) for i, (lang, text) in examples)
        )
    print(f"  Done ({time.monotonic() - start:.1f}s)")

    for r in sorted(results, key=lambda x: x.index):
        print(f"    E{r.index:02d} [{r.language}] {_status(r.local)} | {_status(r.enhanced)} - {r.text}")

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    filepath = write_report(results, health, timestamp)
    print(f"\n  Report: {filepath}")


if __name__ == "__main__":
    asyncio.run(main())
