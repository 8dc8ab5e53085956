from typer.testing import CliRunner

from checkwise.cli import app

runner = CliRunner()


def _write(path, text):
    path.write_text(text)
    return str(path)


def test_diff_lines_equal(tmp_path):
    a = _write(tmp_path / "a.txt", "one\ntwo\n")
    b = _write(tmp_path / "b.txt", "one\ntwo\n")
    result = runner.invoke(app, ["diff-lines", a, b])
    assert result.exit_code == 0
    assert "Lines equal" in result.output


def test_diff_lines_reports_diff(tmp_path):
    a = _write(tmp_path / "a.txt", "abc\ndef\nxyz\n")
    b = _write(tmp_path / "b.txt", "abcd\ndef\nxyza\nlonger\n")
    result = runner.invoke(app, ["diff-lines", a, b])
    assert result.exit_code == 1
    assert "slices not equal" in result.output
    assert " !+  g[3] `longer`" in result.output


def test_diff_lines_missing_file(tmp_path):
    a = _write(tmp_path / "a.txt", "x")
    result = runner.invoke(app, ["diff-lines", a, str(tmp_path / "missing.txt")])
    assert result.exit_code == 2
    assert "Error" in result.output


def test_diff_text_no_color(tmp_path):
    a = _write(tmp_path / "a.txt", "abc")
    b = _write(tmp_path / "b.txt", "abd")
    result = runner.invoke(app, ["diff-text", a, b, "--no-color"])
    assert result.exit_code == 1
    assert "ab[-c-]{+d+}" in result.output
    assert "\x1b[" not in result.output


def test_diff_text_uses_config(tmp_path):
    a = _write(tmp_path / "a.txt", "abc")
    b = _write(tmp_path / "b.txt", "abd")
    cfg = _write(tmp_path / "checkwise.yaml", "diff:\n  color: false\n")
    result = runner.invoke(app, ["diff-text", a, b, "--config", cfg])
    assert result.exit_code == 1
    assert "ab[-c-]{+d+}" in result.output


def test_bad_config_exits_2(tmp_path):
    a = _write(tmp_path / "a.txt", "abc")
    cfg = _write(tmp_path / "checkwise.yaml", "bogus: 1\n")
    result = runner.invoke(app, ["diff-text", a, a, "--config", cfg])
    assert result.exit_code == 2
    assert "invalid config" in result.output


def test_files_equal(tmp_path):
    a = _write(tmp_path / "a.bin", "same")
    b = _write(tmp_path / "b.bin", "same")
    c = _write(tmp_path / "c.bin", "diff")
    assert runner.invoke(app, ["files-equal", a, b]).exit_code == 0
    result = runner.invoke(app, ["files-equal", a, c])
    assert result.exit_code == 1
    assert "differ" in result.output


def test_file_exists(tmp_path):
    a = _write(tmp_path / "a.txt", "x")
    assert runner.invoke(app, ["file-exists", a]).exit_code == 0
    result = runner.invoke(app, ["file-exists", str(tmp_path)])
    assert result.exit_code == 1
    assert "is a directory" in result.output


def test_schema_command_writes_files(tmp_path):
    out = tmp_path / "schema.json"
    doc = tmp_path / "schema.md"
    result = runner.invoke(app, ["schema", "--out", str(out), "--doc", str(doc)])
    assert result.exit_code == 0
    assert out.exists()
    assert doc.exists()


def test_schema_command_does_not_read_config(tmp_path):
    result = runner.invoke(app, ["schema", "--out", str(tmp_path / "s.json"), "--config", "missing.yaml"])
    assert result.exit_code == 2
    assert not (tmp_path / "s.json").exists()
