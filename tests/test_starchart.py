import matplotlib

matplotlib.use("Agg")

from skydome.starchart import main  # noqa: E402


def test_svg_output(tmp_path, capsys):
    out = tmp_path / "tokyo.svg"
    code = main(["--place", "Tokyo", "--when", "2024-01-01 21:00", "--format", "svg", "--output", str(out)])
    assert code == 0
    assert out.read_text(encoding="utf-8").startswith("<svg")
    assert f"Saved: {out}" in capsys.readouterr().out


def test_html_output_in_korean(tmp_path):
    out = tmp_path / "sky.html"
    code = main(
        ["--place", "Tokyo", "--when", "2024-01-01 21:00", "--format", "html", "--lang", "ko", "--output", str(out)]
    )
    assert code == 0
    text = out.read_text(encoding="utf-8")
    assert "<title>Tokyo, Japan의 밤하늘</title>" in text
    assert ">북<" in text


def test_png_output(tmp_path):
    out = tmp_path / "ny.png"
    code = main(["--when", "2024-06-21 22:00", "--count", "50", "--theme", "dark", "--output", str(out)])
    assert code == 0
    assert out.exists()


def test_input_errors_exit_2(tmp_path):
    assert main(["--place", "Atlantis", "--when", "2024-06-21 22:00", "--output", str(tmp_path / "a.png")]) == 2
    assert main(["--when", "garbage", "--output", str(tmp_path / "b.png")]) == 2
    assert main(["--when", "2024-06-21 22:00", "--width", "40", "--height", "40", "--output", str(tmp_path / "c.png")]) == 2
    assert main(["--when", "2024-06-21 22:00", "--count", "-5", "--output", str(tmp_path / "d.png")]) == 2


def test_non_finite_surface_exits_2(tmp_path):
    assert main(["--when", "2024-06-21 22:00", "--width", "nan", "--output", str(tmp_path / "a.png")]) == 2
    assert main(["--when", "2024-06-21 22:00", "--padding", "inf", "--output", str(tmp_path / "b.png")]) == 2


def test_plotly_html_output(tmp_path):
    out = tmp_path / "tokyo.html"
    code = main(["--place", "Tokyo", "--when", "2024-01-01 21:00", "--format", "plotly-html", "--output", str(out)])
    assert code == 0
    text = out.read_text(encoding="utf-8")
    assert "plotly" in text
    assert "Night sky over Tokyo, Japan" in text
