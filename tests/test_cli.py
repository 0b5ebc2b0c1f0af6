from __future__ import annotations

from pathlib import Path

from PIL import Image

from utilbelt.cli import main


def test_slugify_command(capsys):
    assert main(["slugify", "Hello, World!"]) == 0
    assert capsys.readouterr().out.strip() == "hello-world"
    assert main(["slugify", "???"]) == 1


def test_truncate_command(capsys):
    assert main(["truncate", "hello world", "5", "--ellipsis"]) == 0
    assert capsys.readouterr().out.strip() == "hello..."
    assert main(["truncate", "hello", "-1"]) == 1
    assert "error:" in capsys.readouterr().err


def test_render_command(tmp_path: Path, capsys):
    config = tmp_path / "greeting.yaml"
    config.write_text('template: "Hi {$name}, you owe {$amount}{$currency}"\nvariables:\n  name: Ada\n  amount: 3\n', encoding="utf8")
    assert main(["render", str(config), "--set", "currency=EUR"]) == 0
    assert capsys.readouterr().out.strip() == "Hi Ada, you owe 3EUR"


def test_color_command(capsys):
    assert main(["color", "#000000FF", "--to", "#FFFFFFFF", "--amount", "1"]) == 0
    assert capsys.readouterr().out.strip() == "#FFFFFFFF"
    assert main(["color", "#FF0000FF", "--grayscale"]) == 0
    assert capsys.readouterr().out.strip() == "#4C4C4CFF"
    assert main(["color", "red"]) == 1


def test_filter_command(tmp_path: Path, capsys):
    source = tmp_path / "in.png"
    Image.new("RGB", (8, 8), (255, 0, 0)).save(source)
    pipeline = tmp_path / "pipeline.yaml"
    pipeline.write_text("filters:\n  - kind: grayscale\n", encoding="utf8")
    output = tmp_path / "out" / "result.png"

    assert main(["filter", str(source), str(output), "--config", str(pipeline), "--apply", "blur:1"]) == 0
    assert output.exists()
    with Image.open(output) as result:
        r, g, b = result.convert("RGB").getpixel((4, 4))
    assert r == g == b
    capsys.readouterr()

    assert main(["filter", str(source), str(output)]) == 1
    assert main(["filter", str(tmp_path / "missing.png"), str(output), "--apply", "sepia"]) == 1


def test_filter_command_reports_unknown_output_format(tmp_path: Path, capsys):
    source = tmp_path / "in.png"
    Image.new("RGB", (4, 4), (0, 128, 255)).save(source)

    assert main(["filter", str(source), str(tmp_path / "out.unknownext"), "--apply", "sepia"]) == 1
    assert "error:" in capsys.readouterr().err


def test_render_command_reports_non_utf8_config(tmp_path: Path, capsys):
    config = tmp_path / "latin1.yaml"
    config.write_bytes("template: caf\xe9\n".encode("latin-1"))

    assert main(["render", str(config)]) == 1
    assert "not UTF-8" in capsys.readouterr().err
