# dendritic

A small, dependency-free library for N-dimensional arrays of numbers, with
element-wise, aggregate and matrix operations and a few preprocessing
helpers of the kind used before fitting simple models. It is meant for
learning and experimentation, not for production workloads.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The array type

`dendritic.ndarray.NDArray` stores its values in a flat list (`values`) in
row-major order, together with a `dendritic.shape.Shape` (`shape`). The
`size` and `rank` properties give the element count and number of
dimensions.

```python
from dendritic.ndarray import NDArray, NDArrayError

x = NDArray.array([2, 3], [0.0, 0.0, 1.0, 1.0, 2.0, 2.0])
zeros = NDArray.new([3, 4])
sevens = NDArray.fill([2, 2], 7.0)

x.index([1, 2])          # 5
x.indices(5)             # [1, 2]
x.get([1, 2])            # 2.0
x.axis(0, 1).values      # [1.0, 2.0, 2.0]  (second row)
x.axis(1, 0).values      # [0.0, 1.0]       (first column)

x.save("weights")        # writes weights.json
same = NDArray.load("weights")

try:
    NDArray.array([3, 4], [1.0, 2.0])
except NDArrayError as err:
    print(err)           # Values don't match size based on dimensions
```

Other methods:

- `reshape(shape)` changes the dimensions in place, keeping rank and size.
- `set(indices, value)` and `set_idx(idx, value)` write single elements;
  `idx(index)` reads by flat offset.
- `rows(index)` and `cols(index)` return one row or column as a list.
- `axis_indices(axis, indices)` stacks several slices; `drop_axis(axis, index)`
  removes one slice from a rank 2 array.
- `batch(batch_size)` returns overlapping windows of `batch_size` rows,
  advancing one row at a time.
- `value_indices(value)` lists the flat offsets holding `value`;
  `indice_query(indices)` returns the values at given offsets as a column.
- `split(axis, percentage)` splits along an axis, the first part taking
  `percentage` of it rounded up.

`Shape` offers `dim`, `reverse`, `remove`, `push`, `permute`, `idx`,
`indices`, `multi_index`, `strides` and `size` for the index arithmetic.

## Operations

The operations are plain functions that take arrays and return new arrays.

```python
from dendritic.ndarray import NDArray
from dendritic.ops import aggregate, binary, scalar, unary

a = NDArray.array([2, 3], [0.0, 0.0, 1.0, 1.0, 2.0, 2.0])
b = NDArray.array([1, 3], [1.0, 1.0, 1.0])

binary.add(a, a)               # also subtract, mult: element-wise
binary.scale_add(a, b)         # add a (1, N) row to every row; also scale_mult
binary.dot(a, unary.transpose(a))

unary.transpose(a)             # shape (3, 2)
unary.permute(a, [1, 0])
unary.sum_axis(a, 1)
unary.argmin(a, 0)             # also argmax, signum, norm, apply, nonzero,
                               # select_axis

scalar.scalar_mult(a, 10.0)    # also scalar_add, scalar_subtract, scalar_div

aggregate.avg(a)
aggregate.total(a)             # 1x1 array holding the sum
aggregate.mean(a, 1)           # per-column means
aggregate.stdev(a, 1)          # population; stdev_sample for the sample form
aggregate.unique(a)            # [0.0, 1.0, 2.0]
```

`aggregate` also has `length`, `square`, `absolute` and `sorted_values`.

Note that `unary.argmax` only counts values above zero: a slice with no
positive value reports position 0.

## Preprocessing

```python
from dendritic.ndarray import NDArray
from dendritic.preprocessing.encoding import OneHotEncoding
from dendritic.preprocessing.scaling import min_max_scalar, standard_scalar

x = NDArray.array([4, 3], [
    1.0, 2.0, 31.0,
    2.0, 3.0, 41.0,
    3.0, 4.0, 51.0,
    4.0, 5.0, 61.0,
])
scaled = min_max_scalar(x)       # every column mapped onto [0, 1]
standardised = standard_scalar(x)

labels = NDArray.array([4, 1], [1.0, 2.0, 0.0, 2.0])
encoder = OneHotEncoding(labels)
encoder.max_value()              # 3.0
encoder.num_samples()            # 4.0
encoded = encoder.transform()    # shape (4, 3)
```

Invalid input raises `NDArrayError`, a subclass of `ValueError`, with a
message that says what was wrong.

## What it does not do

The package is a library only: it has no command-line tool, and it contains
no model-training, regression or classification code, no dataset loaders
and no database access. Arrays are held in plain Python lists, so it is not
suited to large data.