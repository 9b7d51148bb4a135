import matplotlib
import matplotlib.pyplot
import numpy as np
import pathlib

from pcg32 import Generator


OUTPUT_DIR = pathlib.Path('output')

# (init_state, init_sequence)
STREAMS = (
  (np.uint64(42), np.uint64(54)),
  (np.uint64(0), np.uint64(1)),
  (np.uint64(0xDEADBEEF), np.uint64(0xCAFEF00D)),
)

SAMPLE_DRAWS = np.int32(100000)
PAIR_DRAWS = np.int32(5000)
BUCKETS = np.uint32(6)

# chi-squared, 5 degrees of freedom, alpha = 0.001
CHI_SQUARED_CRITICAL = np.float64(20.515)


def histogram(rng, bound, draws):
  counts = np.zeros(int(bound), dtype=np.int64)
  for _ in range(draws):
    counts[rng.next_u32_bounded(bound)] += 1
  return counts


def chi_squared(counts):
  expected = np.float64(counts.sum()) / np.float64(len(counts))
  return np.sum((counts - expected) ** 2 / expected)


def pairs(rng, count):
  points = np.empty((count, 2), dtype=np.float32)
  for i in range(len(points)):
    points[i][0] = rng.next_f32()
    points[i][1] = rng.next_f32()
  return points


def render_histogram(counts, filepath):
  matplotlib.pyplot.clf()
  matplotlib.pyplot.bar(np.arange(len(counts)), counts)
  matplotlib.pyplot.axhline(counts.sum() / len(counts), color='black',
                            linewidth=0.5)
  matplotlib.pyplot.xlabel('outcome')
  matplotlib.pyplot.ylabel('count')
  matplotlib.pyplot.savefig(filepath, dpi=150)


def render_pairs(points, filepath):
  x_coordinates = [x for x, y in points[:]]
  y_coordinates = [y for x, y in points[:]]

  matplotlib.pyplot.clf()
  matplotlib.pyplot.scatter(x_coordinates, y_coordinates, s=0.5)
  matplotlib.pyplot.gca().set_aspect('equal', adjustable='box')
  matplotlib.pyplot.axis('off')
  matplotlib.pyplot.savefig(filepath, dpi=300)


def run():
  OUTPUT_DIR.mkdir(exist_ok=True)

  for init_state, init_sequence in STREAMS:
    name = f'{init_state:016x}_{init_sequence:016x}'
    print(f'processing {name}')

    counts = histogram(Generator.seeded(init_state, init_sequence),
                       BUCKETS, SAMPLE_DRAWS)
    statistic = chi_squared(counts)
    print(f'  chi-squared {statistic:.3f} (critical {CHI_SQUARED_CRITICAL})')
    if statistic > CHI_SQUARED_CRITICAL:
      raise RuntimeError(f'stream {name} failed uniformity check')

    render_histogram(counts, OUTPUT_DIR / f'{name}_histogram.png')
    render_pairs(pairs(Generator.seeded(init_state, init_sequence), PAIR_DRAWS),
                 OUTPUT_DIR / f'{name}_pairs.png')


if __name__ == '__main__':
  run()
