"""Tests for the command line renderer."""

from PIL import Image

from identicon.cli import EXIT_ERROR, EXIT_OK, MAX_SIZE, main

ZERO_HEX = "00" * 16


def test_grid_output(capsys):
    assert main([ZERO_HEX, "--hex", "--grid"]) == EXIT_OK
    out = capsys.readouterr().out
    assert out.splitlines() == ["#####"] * 5


def test_prints_hash_and_color_without_output(capsys):
    assert main([ZERO_HEX, "--hex"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == f"{ZERO_HEX} #E99696"


def test_hashes_text_with_md5_by_default(capsys):
    assert main(["", "--size", "32"]) == EXIT_OK
    assert capsys.readouterr().out.startswith("d41d8cd98f00b204e9800998ecf8427e ")


def test_writes_image(tmp_path):
    out = tmp_path / "octocat.png"
    assert main(["octocat", "-o", str(out), "--size", "100", "--mode", "identiconjs"]) == EXIT_OK
    with Image.open(out) as image:
        assert image.size == (100, 100)


def test_short_source_is_reported(capsys):
    assert main(["abcd", "--hex"]) == EXIT_ERROR
    assert "16" in capsys.readouterr().err


def test_identicon_js_accepts_short_hex(capsys):
    assert main(["00000000", "--hex", "--mode", "identiconjs"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "00000000 #D92626"


def test_config_file_sets_defaults(tmp_path, capsys):
    config = tmp_path / "c.yaml"
    config.write_text("mode: identiconjs\n")
    assert main(["00000000", "--hex", "--config", str(config)]) == EXIT_OK
    assert capsys.readouterr().out.strip().endswith("#D92626")


def test_bad_config_file(tmp_path, capsys):
    config = tmp_path / "c.yaml"
    config.write_text("size: -5\n")
    assert main(["x", "--config", str(config)]) == EXIT_ERROR
    assert "конфигурации" in capsys.readouterr().err


def test_missing_config_file_is_reported(tmp_path, capsys):
    assert main([ZERO_HEX, "--hex", "--config", str(tmp_path / "typo.yaml")]) == EXIT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "typo.yaml" in captured.err


def test_config_file_must_be_a_mapping(tmp_path, capsys):
    config = tmp_path / "c.yaml"
    config.write_text("- size\n- 128\n")
    assert main([ZERO_HEX, "--hex", "--config", str(config)]) == EXIT_ERROR
    assert "конфигурации" in capsys.readouterr().err


def test_unwritable_output_is_reported(tmp_path, capsys):
    target = tmp_path / "icon.png"
    target.mkdir()
    assert main([ZERO_HEX, "--hex", "-o", str(target), "--size", "16"]) == EXIT_ERROR
    assert capsys.readouterr().err.startswith("identicon: ")


def test_size_above_limit_is_rejected(capsys):
    assert main([ZERO_HEX, "--hex", "--size", str(MAX_SIZE + 1)]) == EXIT_ERROR
    assert str(MAX_SIZE) in capsys.readouterr().err


def test_size_at_limit_is_accepted(capsys):
    assert main([ZERO_HEX, "--hex", "--size", str(MAX_SIZE)]) == EXIT_OK
