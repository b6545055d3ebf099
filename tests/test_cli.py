import csv

import pytest

from parbench.cli import (
    load_csv,
    main,
    run_benchmark,
    save_labels_csv,
    save_matrix_csv,
)
from parbench.dataset import generate_dataset_csv
from parbench.sequential import SequentialKMeans


def test_load_csv_skips_header(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("x0,x1\n1,2\n3.5,-4\n")
    assert load_csv(path) == [[1.0, 2.0], [3.5, -4.0]]


def test_load_csv_stops_at_non_numeric_field(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("h\n1,2,abc,4\n")
    assert load_csv(path) == [[1.0, 2.0]]


def test_load_csv_reads_generated_dataset(tmp_path):
    path = tmp_path / "data.csv"
    generate_dataset_csv(7, 3, path)
    rows = load_csv(path)
    assert len(rows) == 7
    assert all(len(row) == 3 for row in rows)
    assert all(0.0 <= value < 10.0 for row in rows for value in row)


def test_save_matrix_csv_uses_ten_decimals(tmp_path):
    path = tmp_path / "m.csv"
    save_matrix_csv(path, [[1.0, 2.5], [-3.0, 0.0]])
    lines = path.read_text().splitlines()
    assert lines[0] == "1.0000000000,2.5000000000"
    assert len(lines) == 2


def test_save_matrix_round_trips_through_load(tmp_path):
    path = tmp_path / "m.csv"
    rows = [[0.0, 0.0], [1.25, -2.5], [3.0, 4.75]]
    save_matrix_csv(path, rows)
    # the first line is taken as a header by load_csv
    assert load_csv(path) == rows[1:]


def test_save_labels_csv_one_per_line(tmp_path):
    path = tmp_path / "l.csv"
    save_labels_csv(path, [0, 2, 1, -1])
    assert path.read_text().splitlines() == ["0", "2", "1", "-1"]


def test_run_benchmark_writes_summary_and_plots(tmp_path, capsys):
    summary = run_benchmark(tmp_path, [20], [2], runs=1, max_threads=2)
    assert summary == tmp_path / "results" / "summary.csv"
    with open(summary, newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert [row["threads"] for row in rows] == ["1", "2"]
    assert all(row["n_samples"] == "20" and row["k"] == "2" for row in rows)
    assert all(float(row["seq_time"]) >= 0.0 for row in rows)

    plots = tmp_path / "results" / "plots"
    centroid_lines = (plots / "centroids_seq_n20_k2.csv").read_text().splitlines()
    assert len(centroid_lines) == 2
    assert all(len(line.split(",")) == 3 for line in centroid_lines)
    for threads in (1, 2):
        labels = (plots / f"assignments_par_n20_k2_t{threads}.csv").read_text().split()
        assert len(labels) == 20
        assert set(labels) <= {"0", "1"}
    assert (tmp_path / "data" / "20_3.csv").exists()
    assert "Generating" in capsys.readouterr().out


def test_run_benchmark_saved_assignments_match_model(tmp_path):
    run_benchmark(tmp_path, [15], [3], runs=1, max_threads=1)
    data = load_csv(tmp_path / "data" / "15_3.csv")
    model = SequentialKMeans(3).fit(data)
    saved = (tmp_path / "results" / "plots" / "assignments_seq_n15_k3.csv").read_text().split()
    assert [int(label) for label in saved] == model.assignments


def test_run_benchmark_rejects_zero_runs(tmp_path):
    with pytest.raises(ValueError):
        run_benchmark(tmp_path, [10], [2], runs=0, max_threads=1)


def test_main_runs_small_configuration(tmp_path, capsys):
    code = main(
        [
            "--root", str(tmp_path),
            "--runs", "1",
            "--max-threads", "1",
            "--sizes", "10",
            "--clusters", "2",
        ]
    )
    assert code == 0
    lines = (tmp_path / "results" / "summary.csv").read_text().splitlines()
    assert lines[0] == "n_samples,k,threads,seq_time,tp_time,speedup"
    assert len(lines) == 2
    out = capsys.readouterr().out
    assert "All results written to results/summary.csv" in out
    assert "Done: n=10, k=2" in out