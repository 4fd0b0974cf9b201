# 12.10.26

import json

import pytest

from CastReceiver.cli.run import main
from CastReceiver.core.codec.side_channel import make_token


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    monkeypatch.setattr("CastReceiver.cli.run.Logger", lambda **kwargs: None)


@pytest.fixture
def manifest_file(tmp_path, sample_manifest):
    path = tmp_path / "master.m3u8"
    path.write_text(sample_manifest, encoding="utf-8")
    return path


def test_rewrite_to_output(manifest_file, tmp_path):
    output = tmp_path / "out.m3u8"

    assert main(["rewrite", str(manifest_file), "-o", str(output)]) == 0
    assert 'LANGUAGE="en-XB"' in output.read_text(encoding="utf-8")


def test_rewrite_to_stdout(manifest_file, capsys):
    assert main(["rewrite", str(manifest_file)]) == 0

    assert "xyzzy.obj." in capsys.readouterr().out


def test_rewrite_table(manifest_file, capsys):
    assert main(["rewrite", str(manifest_file), "--table"]) == 0

    out = capsys.readouterr().out
    assert "en-XA" in out
    assert "SUBTITLES" in out


def test_rewrite_missing_file(tmp_path):
    assert main(["rewrite", str(tmp_path / "missing.m3u8")]) == 1


def test_decode_token(capsys):
    assert main(["decode", make_token({"LANGUAGE": "en", "FORCED": "YES"})]) == 0

    assert json.loads(capsys.readouterr().out) == {"LANGUAGE": "en", "FORCED": "YES"}


def test_decode_invalid_token():
    assert main(["decode", "xyzzy.obj.@@@"]) == 1
