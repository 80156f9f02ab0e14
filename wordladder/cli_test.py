import pytest

from wordladder.__main__ import main
from wordladder.constants import EXIT_ERROR, EXIT_NO_PATH, EXIT_OK, EXIT_USAGE
from wordladder.test_utils import PAIRS, SMALL_WORDS


def test_found(capsys):
    assert main(["cat", "dog", "--dict", SMALL_WORDS]) == EXIT_OK
    out = capsys.readouterr().out
    assert "The shortest path is cat -> cot -> dot -> dog (3 steps)" in out


def test_words_are_normalized(capsys):
    assert main(["VAN", "Car", "--dict", SMALL_WORDS]) == EXIT_OK
    assert "van -> can -> car (2 steps)" in capsys.readouterr().out


def test_one_step(capsys):
    assert main(["cat", "cot", "--dict", SMALL_WORDS]) == EXIT_OK
    assert "cat -> cot (1 step)" in capsys.readouterr().out


def test_no_path(capsys):
    assert main(["xyzzy", "plugh", "--dict", SMALL_WORDS]) == EXIT_NO_PATH
    assert "No path from 'xyzzy' to 'plugh' exists." in capsys.readouterr().err


def test_strict(capsys):
    assert main(["cat", "bwq", "--strict", "--dict", SMALL_WORDS]) == EXIT_ERROR
    assert "The word 'bwq' is not in the dictionary." in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["cat", "fish"],
        ["cat"],
        ["c4t", "dog"],
        ["", ""],
    ],
)
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["--dict", SMALL_WORDS])
    assert exc.value.code == EXIT_USAGE


def test_batch(capsys):
    assert main(["--pairs", PAIRS, "--workers", "2", "--dict", SMALL_WORDS]) == EXIT_NO_PATH
    out = capsys.readouterr().out
    assert "cold warm: cold -> cord -> word -> ward -> warm (4 steps)" in out
    assert "xyzzy plugh: no path" in out
    assert "3/4 pairs connected." in out


def test_batch_missing_file(tmp_path):
    assert main(["--pairs", str(tmp_path / "nope.txt"), "--dict", SMALL_WORDS]) == EXIT_ERROR


def test_fetch_dictionary_existing(tmp_path, capsys):
    path = tmp_path / "dictionary.txt"
    path.write_text("cat\n", encoding="utf-8")
    assert main(["--fetch-dictionary", "--dict", str(path)]) == EXIT_OK
    assert "already exists" in capsys.readouterr().out


def test_batch_rejects_unequal_pair_before_searching(tmp_path, capsys):
    pairs = tmp_path / "pairs.txt"
    pairs.write_text("cat dog\ncat fish\nvan car\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--pairs", str(pairs), "--dict", SMALL_WORDS])
    assert exc.value.code == EXIT_USAGE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 2: 'cat' and 'fish' are not the same length" in captured.err
