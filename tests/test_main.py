"""Diagnostics script tests: histogram, statistic and rendered output."""

import numpy as np
import pytest

import main
from pcg32 import Generator


def test_histogram_counts_every_draw():
  counts = main.histogram(Generator.seeded(42, 54), np.uint32(6), 6000)
  assert len(counts) == 6
  assert counts.sum() == 6000
  assert np.all(counts > 0)


def test_histogram_matches_bounded_draws():
  rng = Generator.seeded(1, 2)
  expected = np.zeros(4, dtype=np.int64)
  for _ in range(100):
    expected[rng.next_u32_bounded(4)] += 1
  assert np.array_equal(main.histogram(Generator.seeded(1, 2), 4, 100),
                        expected)


def test_chi_squared():
  assert main.chi_squared(np.array([5, 5, 5, 5])) == 0.0
  assert main.chi_squared(np.array([10, 20])) == pytest.approx(10 / 3)


def test_pairs_in_unit_square():
  points = main.pairs(Generator.seeded(42, 54), 500)
  assert points.shape == (500, 2)
  assert points.dtype == np.float32
  assert points.min() >= 0.0 and points.max() < 1.0


def test_render(tmp_path):
  counts = main.histogram(Generator.seeded(42, 54), 6, 600)
  main.render_histogram(counts, tmp_path / 'histogram.png')
  main.render_pairs(main.pairs(Generator.seeded(42, 54), 200),
                    tmp_path / 'pairs.png')
  assert (tmp_path / 'histogram.png').stat().st_size > 0
  assert (tmp_path / 'pairs.png').stat().st_size > 0


def test_run_writes_plots(tmp_path, monkeypatch, capsys):
  monkeypatch.setattr(main, 'OUTPUT_DIR', tmp_path / 'output')
  monkeypatch.setattr(main, 'STREAMS', ((np.uint64(42), np.uint64(54)),))
  monkeypatch.setattr(main, 'SAMPLE_DRAWS', 3000)
  monkeypatch.setattr(main, 'PAIR_DRAWS', 100)
  main.run()

  name = '000000000000002a_0000000000000036'
  assert (tmp_path / 'output' / f'{name}_histogram.png').exists()
  assert (tmp_path / 'output' / f'{name}_pairs.png').exists()
  assert f'processing {name}' in capsys.readouterr().out


def test_run_rejects_failing_stream(tmp_path, monkeypatch):
  monkeypatch.setattr(main, 'OUTPUT_DIR', tmp_path)
  monkeypatch.setattr(main, 'STREAMS', ((np.uint64(42), np.uint64(54)),))
  monkeypatch.setattr(main, 'SAMPLE_DRAWS', 60)
  monkeypatch.setattr(main, 'CHI_SQUARED_CRITICAL', np.float64(-1))
  with pytest.raises(RuntimeError):
    main.run()
