# parbench

Timing benchmarks for Lloyd's k-means clustering. Each clustering runs once on
a single thread and once split across a pool of threads. The package also has
a set of classic 2-D image kernels and a direct CPU convolution that applies
them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## K-means

```python
from parbench.sequential import SequentialKMeans
from parbench.parallel import ParallelKMeans

data = [[0.0, 0.0], [0.1, 0.2], [9.8, 10.0], [10.0, 9.9]]

model = SequentialKMeans(2)          # max_iters=100, tol=1e-4
model.fit(data)
print(model.centroids)               # list of coordinate lists, one per cluster
print(model.assignments)             # cluster index of each fitted sample
print(model.predict([0.05, 0.1]))    # index of the closest centroid

par = ParallelKMeans(2, n_threads=4) # n_threads defaults to the CPU count
par.fit(data)
```

How both models behave:

- The initial centroids are samples picked with a fixed random seed. A fit on
  the same data with the same settings therefore always starts the same way.
- Each iteration assigns every point to its nearest centroid. On a tie, the
  lower index wins. Each centroid then moves to the mean of its points. A
  cluster that gets no points is reset to the origin.
- Iteration stops after `max_iters` rounds, or once no centroid has moved
  further than `tol`.
- `fit` returns the model. Fitting an empty data set leaves the model as it
  was.
- `predict` returns `-1` if there are no centroids. It raises `ValueError` if
  the point does not have as many coordinates as the centroids.
- A negative `k`, and for `ParallelKMeans` a thread count below 1, raise
  `ValueError`.

There is one difference between the two models. `SequentialKMeans.assignments`
is computed again from the final centroids. `ParallelKMeans.assignments` holds
the labels from the last assignment step, which was made before the final
centroid update.

## Synthetic datasets

`parbench.dataset.generate_dataset_csv(n_samples, dim, filename)` writes a CSV
file. The first line is a header `x0,x1,...`. It is followed by `n_samples`
rows of `dim` coordinates, drawn uniformly from `[0, 10)`. The generator is
seeded with a fixed value, so the file is the same every time.

## Running the benchmark

```
parbench
```

Options:

- `--root DIR`: directory for data and results (default: the current directory)
- `--runs N`: timed repeats per configuration (default: 30)
- `--max-threads N`: highest thread count to try (default: the CPU count, at
  most 12)
- `--sizes N [N ...]`: sample counts (default: 100 up to 10,000,000)
- `--clusters K [K ...]`: cluster counts (default: 3, 5, 10, 15, 20, 25, 30,
  40, 50)

With the default sizes a full sweep takes a long time. Pass smaller `--sizes`
and `--runs` for a quick check.

What the command does:

1. It creates `data/`, `results/` and `results/plots/` under the root.
2. It generates any missing 3-dimensional dataset as `data/<n>_3.csv`.
3. For every sample size and cluster count, it records the mean fit time of
   `SequentialKMeans`.
4. It then records the mean fit time of `ParallelKMeans` at every thread count
   from 1 to the maximum.
5. It writes one line per configuration to `results/summary.csv`, with the
   columns `n_samples,k,threads,seq_time,tp_time,speedup`.
6. It writes the centroids and assignments from the last run of each
   configuration to `results/plots/`.

From Python, `parbench.cli.run_benchmark(root, n_list, k_list, runs, max_threads)`
runs the same sweep and returns the path of the summary file. Three helpers
read and write the files it uses:

- `load_csv` reads a numeric CSV and skips its header line.
- `save_matrix_csv` writes rows of numbers with ten decimal places.
- `save_labels_csv` writes one label per line.

## Convolution kernels

`parbench.kernels` provides `prewitt_x`, `prewitt_y`, `gaussian_5x5`,
`gaussian_7x7`, `laplacian_of_gaussian_5x5` and `sharpen`. Each returns a
square float32 NumPy array.

`parbench.convolution.CpuConvolution(kernel)` takes any non-empty 2-D array of
real numbers. Its `apply(image)` method accepts a 2-D image (one channel) or a
3-D image (height × width × channels) of real numbers, and works like this:

- The kernel is anchored at its centre and is not flipped.
- Neighbours that fall outside the image count as zero.
- The result is a float32 array with the same shape as the input, so negative
  values and values above 255 are kept.

```python
import numpy as np
from parbench.convolution import CpuConvolution
from parbench.kernels import sharpen

image = np.zeros((4, 4), dtype=np.uint8)
out = CpuConvolution(sharpen()).apply(image)
```

## What this package does not do

The kernels and `CpuConvolution` are a library only. There is no command that
times them, no GPU convolution, and no reading, writing or converting of image
files. Images must be passed in as NumPy arrays.