"""Tests for chunk partitioning."""

from pathlib import Path

import pytest

from parallint.domain.services.partitioner import available_workers, partition


def _files(count):
    return [Path(f"/src/file{i}.js") for i in range(count)]


class TestPartition:
    """Partitioning of the target file set."""

    @pytest.mark.parametrize("count", [1, 2, 7, 10, 64, 101])
    @pytest.mark.parametrize("n", [1, 2, 3, 4, 8, 16])
    def test_concatenation_reproduces_input(self, count, n):
        files = _files(count)
        chunks = partition(files, n)

        joined = [f for chunk in chunks for f in chunk.files]
        assert joined == files
        assert len(chunks) <= n
        assert all(len(chunk) > 0 for chunk in chunks)

    def test_chunk_sizes_use_ceiling(self):
        chunks = partition(_files(10), 4)

        assert [len(chunk) for chunk in chunks] == [3, 3, 3, 1]

    def test_more_workers_than_files_gives_one_file_per_chunk(self):
        files = _files(3)
        chunks = partition(files, 8)

        assert len(chunks) == 3
        assert [chunk.files for chunk in chunks] == [(f,) for f in files]

    def test_empty_input_has_no_chunks(self):
        assert partition([], 4) == []

    def test_chunk_indexes_are_sequential(self):
        chunks = partition(_files(9), 4)

        assert [chunk.index for chunk in chunks] == list(range(len(chunks)))

    def test_three_files_two_workers(self):
        a, b, c = Path("/p/a.js"), Path("/p/b.js"), Path("/p/c.js")

        chunks = partition([a, b, c], 2)

        assert [chunk.files for chunk in chunks] == [(a, b), (c,)]

    def test_windows_past_the_end_are_dropped(self):
        # ceil(5 / 4) = 2 -> windows of 2, 2, 1 and an empty fourth one
        chunks = partition(_files(5), 4)

        assert [len(chunk) for chunk in chunks] == [2, 2, 1]

    @pytest.mark.parametrize("n", [0, -1])
    def test_rejects_non_positive_worker_count(self, n):
        with pytest.raises(ValueError):
            partition(_files(3), n)


class TestAvailableWorkers:
    """CPU-based worker count."""

    def test_defaults_to_cpu_count(self, monkeypatch):
        monkeypatch.setattr("os.cpu_count", lambda: 12)

        assert available_workers() == 12

    def test_capped_by_max_workers(self, monkeypatch):
        monkeypatch.setattr("os.cpu_count", lambda: 12)

        assert available_workers(max_workers=4) == 4

    def test_unknown_cpu_count_means_one(self, monkeypatch):
        monkeypatch.setattr("os.cpu_count", lambda: None)

        assert available_workers() == 1
