from pathlib import Path
import pytest
from nextword import Nextword, NextwordParams, StorageError
import nextword.search as S


def _seed(tmp: Path) -> str:
    root = tmp / "data"; root.mkdir()
    (root / "3gram-t.txt").write_text("the cat\tsat ran jumped\n", encoding="utf-8")
    # a directory where a data file should be: opening it fails with a real OSError
    (root / "2gram-c.txt").mkdir()
    return str(root)


@pytest.mark.e2e
def test_storage_error_carries_partial_candidates(tmp_path: Path):
    nw = Nextword(NextwordParams(data_path=_seed(tmp_path), greedy=True))
    with pytest.raises(StorageError) as info:
        nw.suggest("the cat ")
    assert info.value.candidates == ["sat", "ran", "jumped"]
    assert isinstance(info.value.__cause__, OSError)


@pytest.mark.e2e
def test_short_circuit_never_touches_broken_file(tmp_path: Path):
    nw = Nextword(NextwordParams(data_path=_seed(tmp_path)))
    assert nw.suggest("the cat ") == ["sat", "ran", "jumped"]


@pytest.mark.e2e
def test_dictionary_read_error_propagates(tmp_path: Path):
    root = tmp_path / "data"; root.mkdir()
    (root / "dict.txt").mkdir()
    nw = Nextword(NextwordParams(data_path=str(root)))
    with pytest.raises(StorageError) as info:
        nw.suggest("ca")
    assert info.value.candidates == []


@pytest.mark.e2e
def test_read_failure_mid_search_is_not_swallowed(tmp_path: Path, monkeypatch):
    root = tmp_path / "data"; root.mkdir()
    (root / "2gram-c.txt").write_text("cat\tsat\n", encoding="utf-8")

    def boom(*args, **kwargs):
        raise OSError(5, "Input/output error")

    monkeypatch.setattr(S, "binary_search", boom)
    nw = Nextword(NextwordParams(data_path=str(root)))
    with pytest.raises(StorageError):
        nw.suggest("cat ")
