import numpy as np
import pytest

from parbench.parallel import ParallelKMeans
from parbench.sequential import SequentialKMeans


def _two_blobs():
    rng = np.random.default_rng(11)
    first = rng.normal((0.0, 0.0), 0.5, size=(50, 2))
    second = rng.normal((8.0, -8.0), 0.5, size=(50, 2))
    return first, second, np.vstack([first, second])


@pytest.mark.parametrize("threads", [1, 2, 3, 8])
def test_separates_two_blobs(threads):
    first, second, data = _two_blobs()
    model = ParallelKMeans(2, n_threads=threads).fit(data)
    labels = model.assignments
    assert len(set(labels[:50])) == 1
    assert len(set(labels[50:])) == 1
    assert labels[0] != labels[50]
    centroids = sorted(model.centroids)
    assert np.allclose(centroids[0], first.mean(axis=0))
    assert np.allclose(centroids[1], second.mean(axis=0))


@pytest.mark.parametrize("threads", [1, 2, 4])
def test_matches_sequential_result(threads):
    _, _, data = _two_blobs()
    sequential = SequentialKMeans(3, tol=0.0).fit(data)
    parallel = ParallelKMeans(3, tol=0.0, n_threads=threads).fit(data)
    assert np.allclose(parallel.centroids, sequential.centroids)
    assert parallel.assignments == sequential.assignments


def test_thread_count_does_not_change_result():
    _, _, data = _two_blobs()
    one = ParallelKMeans(4, n_threads=1).fit(data)
    many = ParallelKMeans(4, n_threads=6).fit(data)
    assert np.allclose(one.centroids, many.centroids)
    assert one.assignments == many.assignments


def test_more_threads_than_samples():
    model = ParallelKMeans(2, n_threads=16).fit([[5.0, 5.0]])
    assert model.centroids == [[5.0, 5.0], [0.0, 0.0]]
    assert model.assignments == [0]


def test_zero_iterations_leave_samples_unassigned():
    _, _, data = _two_blobs()
    model = ParallelKMeans(3, max_iters=0, n_threads=2).fit(data)
    assert model.assignments == [-1] * len(data)
    for centroid in model.centroids:
        assert any(np.array_equal(centroid, row) for row in data)


def test_predict_finds_closest_centroid():
    _, _, data = _two_blobs()
    model = ParallelKMeans(2, n_threads=2).fit(data)
    for point in data[::7]:
        label = model.predict(point)
        distances = [np.sum((point - np.array(c)) ** 2) for c in model.centroids]
        assert distances[label] == min(distances)


def test_unfitted_model():
    model = ParallelKMeans(2, n_threads=2)
    assert model.centroids == [[], []]
    assert model.assignments == []
    assert model.predict([0.0]) == -1


def test_empty_data_leaves_model_unchanged():
    _, _, data = _two_blobs()
    model = ParallelKMeans(2, n_threads=2).fit(data)
    before = (model.centroids, model.assignments)
    model.fit([])
    assert (model.centroids, model.assignments) == before


def test_default_thread_count_is_positive():
    model = ParallelKMeans(2)
    assert model.n_threads >= 1
    _, _, data = _two_blobs()
    assert len(model.fit(data).assignments) == len(data)


def test_invalid_thread_count_is_rejected():
    with pytest.raises(ValueError):
        ParallelKMeans(2, n_threads=0)


def test_predict_rejects_wrong_dimension():
    _, _, data = _two_blobs()
    model = ParallelKMeans(2, n_threads=2).fit(data)
    with pytest.raises(ValueError):
        model.predict([1.0])