import os
from pathlib import Path
from time import perf_counter_ns

import pytest

from tokenscan import ErrorKind, reconstruct, scan_with_errors

SAMPLES = os.environ.get("TOKENSCAN_SAMPLES")


@pytest.mark.skipif(SAMPLES is None, reason="TOKENSCAN_SAMPLES is not set")
def test_sample_corpus():
    """Every character of every sample is either in a token or reported as dropped."""
    st = perf_counter_ns()
    file_count = 0
    tokens_count = 0
    for sample in Path(SAMPLES).rglob("*"):
        if not sample.is_file():
            continue
        source = sample.read_text(errors="replace")
        tokens, errors = scan_with_errors(source)
        dropped = sum(1 for e in errors if e.error_kind is ErrorKind.UNRECOGNIZED_CHARACTER)
        assert len(reconstruct(tokens)) + dropped == len(source), sample
        file_count += 1
        tokens_count += len(tokens)

    print(
        f"Got {tokens_count} tokens from {file_count} files."
        f" Elapsed: {(perf_counter_ns() - st) / 1_000_000} ms"
    )
