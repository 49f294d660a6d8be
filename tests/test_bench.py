from __future__ import annotations

from benchmarks.bench_rmq import bench_structure


def test_bench_structure_reports_numpy_summaries(capsys) -> None:
    elements = [0.5, 0.1, 0.9, 0.3]
    probes = [(0, 3), (1, 2), (2, 3)]
    result = bench_structure("fischer_heun", elements, probes, repeats=4)
    out = capsys.readouterr().out
    assert "fischer_heun n=4" in out
    assert "build_p95=" in out
    for key in ("build", "query"):
        summary = result[key]
        assert summary["count"] == 4.0
        assert summary["p50"] <= summary["p95"] <= summary["max"]
