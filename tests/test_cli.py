import logging

import pytest

import huffman_cli


@pytest.fixture(autouse=True)
def restore_root_logger():
	root = logging.getLogger()
	handlers, level = root.handlers[:], root.level
	yield
	root.handlers[:] = handlers
	root.setLevel(level)


def test_compress_then_decompress(tmp_path, capsys):
	src = tmp_path / "notes.txt"
	packed = tmp_path / "notes.huff"
	restored = tmp_path / "notes.out"
	src.write_bytes(b"abracadabra" * 30)

	assert huffman_cli.main(["-c", str(src), str(packed)]) == 0
	assert "File compressed successfully!" in capsys.readouterr().out

	assert huffman_cli.main(["-d", str(packed), str(restored)]) == 0
	assert "File decompressed successfully!" in capsys.readouterr().out
	assert restored.read_bytes() == src.read_bytes()


@pytest.mark.parametrize("argv", [
	[],
	["-c"],
	["-c", "only-input"],
	["-x", "in", "out"],
	["-c", "in", "out", "extra"],
	["-c", "a", "b", "-d", "c", "d"],
	["-c", "a", "b", "-c", "a", "c"],
	["--", "-c", "a", "b"],
	["in", "out"],
	["-h"],
])
def test_bad_arguments_print_usage(argv, capsys):
	assert huffman_cli.main(argv) == 1
	captured = capsys.readouterr()
	assert "Usage:" in captured.out
	assert "-c <input_file> <output_file>" in captured.out
	assert "-d <input_file> <output_file>" in captured.out


def test_missing_input_reports_error(tmp_path, capsys):
	out = tmp_path / "out.huff"
	assert huffman_cli.main(["-c", str(tmp_path / "missing.txt"), str(out)]) == 2
	captured = capsys.readouterr()
	assert captured.err.startswith("Error:")
	assert "successfully" not in captured.out
	assert not out.exists()


def test_corrupt_container_reports_error(tmp_path, capsys):
	bad = tmp_path / "bad.huff"
	bad.write_bytes(b"\x09\x00\x00\x00")
	assert huffman_cli.main(["-d", str(bad), str(tmp_path / "out")]) == 2
	assert "Error:" in capsys.readouterr().err


def test_log_level_from_environment(monkeypatch):
	monkeypatch.setenv(huffman_cli.LOG_LEVEL_ENV, "debug")
	huffman_cli.configure_logging()
	root = logging.getLogger()
	assert root.level == logging.DEBUG
	assert len(root.handlers) == 1


def test_unknown_log_level_falls_back_to_warning(monkeypatch):
	monkeypatch.setenv(huffman_cli.LOG_LEVEL_ENV, "chatty")
	huffman_cli.configure_logging()
	assert logging.getLogger().level == logging.WARNING


def test_paths_may_start_with_a_dash(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	(tmp_path / "-notes.txt").write_bytes(b"dash-prefixed file name " * 10)

	assert huffman_cli.main(["-c", "-notes.txt", "-notes.huff"]) == 0
	assert huffman_cli.main(["-d", "-notes.huff", "-restored.txt"]) == 0
	assert (tmp_path / "-restored.txt").read_bytes() == (tmp_path / "-notes.txt").read_bytes()
	assert "File decompressed successfully!" in capsys.readouterr().out


def test_repeated_mode_does_not_write_output(tmp_path, capsys):
	src = tmp_path / "input.txt"
	src.write_bytes(b"payload")
	first, second = tmp_path / "first.huff", tmp_path / "second.huff"

	assert huffman_cli.main(["-c", str(src), str(first), "-c", str(src), str(second)]) == 1
	assert "Usage:" in capsys.readouterr().out
	assert not first.exists() and not second.exists()
