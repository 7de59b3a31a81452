"""Merging of adjacent stream outputs."""
from typing import List


def _same_stream(a, b) -> bool:
    return a.is_stream and b.is_stream and a.stream == b.stream


def coalesce_streams(outputs: List) -> List:
    """
    Merge each run of consecutive same-stream outputs into one output.

    Non-stream outputs, and stream outputs on another stream, pass through
    unchanged and end the current run. Inputs are not mutated: a merged run
    becomes a new output built from a copy of the first record, owned by the
    same cell.

    Args:
        outputs: Ordered Output objects of one cell

    Returns:
        New list of outputs, never with two adjacent same-stream outputs
    """
    result = []
    run = []

    def flush():
        if len(run) == 1:
            result.append(run[0])
        elif run:
            first = run[0]
            text = [fragment for o in run for fragment in o.text]
            merged = type(first)({**first.raw, "text": text}, first.cell, first.path)
            result.append(merged)
        run.clear()

    for output in outputs:
        if run and not _same_stream(run[-1], output):
            flush()
        if output.is_stream:
            run.append(output)
        else:
            result.append(output)

    flush()
    return result
