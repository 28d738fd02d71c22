"""Tests for the ffmpeg wrappers that do not need an ffmpeg binary."""

import subprocess
from io import BytesIO

import pytest
from PIL import Image

from anima.errors import EncoderProcessError
from anima.render import FFmpegEncoder, concat_segments, resolve_ffmpeg_binary


def test_encoder_command_pipes_png_frames(tmp_path):
    """The encoder reads PNG frames from stdin and writes H.264."""
    encoder = FFmpegEncoder(tmp_path / "out.mp4", 64, 36, 30, ffmpeg_binary="/opt/ffmpeg")

    cmd = encoder.command()

    assert cmd[0] == "/opt/ffmpeg"
    assert cmd[cmd.index("-f") + 1] == "image2pipe"
    assert cmd[cmd.index("-r") + 1] == "30"
    assert cmd[cmd.index("-i") + 1] == "-"
    assert cmd[cmd.index("-pix_fmt") + 1] == "yuv420p"
    assert cmd[-1] == str(tmp_path / "out.mp4")


def test_missing_binary_raises_encoder_error(tmp_path):
    """A missing ffmpeg binary surfaces as EncoderProcessError."""
    encoder = FFmpegEncoder(tmp_path / "out.mp4", 64, 36, 30, ffmpeg_binary=str(tmp_path / "no-ffmpeg"))

    with pytest.raises(EncoderProcessError, match="not found"):
        encoder.start()


def test_resolve_ffmpeg_binary(monkeypatch):
    """Explicit binary beats ANIMA_FFMPEG, which beats the default."""
    monkeypatch.delenv("ANIMA_FFMPEG", raising=False)
    assert resolve_ffmpeg_binary() == "ffmpeg"

    monkeypatch.setenv("ANIMA_FFMPEG", "/env/ffmpeg")
    assert resolve_ffmpeg_binary() == "/env/ffmpeg"
    assert resolve_ffmpeg_binary("/explicit/ffmpeg") == "/explicit/ffmpeg"


def test_concat_single_segment_is_copied(tmp_path):
    """A single partial file is copied without invoking ffmpeg."""
    source = tmp_path / "segment_00000001.mp4"
    source.write_bytes(b"only")
    output = tmp_path / "out" / "final.mp4"

    concat_segments([source], output, ffmpeg_binary=str(tmp_path / "no-ffmpeg"))

    assert output.read_bytes() == b"only"


def test_concat_requires_paths(tmp_path):
    """Concatenating nothing is an error."""
    with pytest.raises(ValueError, match="Nothing to concatenate"):
        concat_segments([], tmp_path / "out.mp4")


def test_concat_writes_list_and_removes_it(tmp_path, monkeypatch):
    """Multiple files go through the concat demuxer; the list file is transient."""
    paths = [tmp_path / "a.mp4", tmp_path / "it's.mp4"]
    captured = {}

    def fake_run(cmd, **kwargs):
        list_path = cmd[cmd.index("-i") + 1]
        with open(list_path, encoding="utf-8") as f:
            captured["list"] = f.read()
        captured["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, 0, "", "")

    monkeypatch.setattr(subprocess, "run", fake_run)
    output = tmp_path / "final.mp4"

    concat_segments(paths, output, ffmpeg_binary="ffmpeg")

    assert captured["list"].splitlines() == [
        f"file '{paths[0].resolve()}'",
        "file '" + str(paths[1].resolve()).replace("'", "'\\''") + "'",
    ]
    assert captured["cmd"][captured["cmd"].index("-c") + 1] == "copy"
    assert not (tmp_path / ".concat_list.txt").exists()


def test_concat_failure_raises_and_cleans_up(tmp_path, monkeypatch):
    """A non-zero ffmpeg exit raises and still removes the list file."""
    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 1, "", "invalid data")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(EncoderProcessError, match="invalid data") as exc_info:
        concat_segments([tmp_path / "a.mp4", tmp_path / "b.mp4"], tmp_path / "final.mp4")

    assert exc_info.value.returncode == 1
    assert not (tmp_path / ".concat_list.txt").exists()


class FakeProcess:
    """Stands in for the ffmpeg Popen handle."""

    def __init__(self, returncode: int = 0, stderr: bytes = b""):
        self.stdin = BytesIO()
        self.returncode = None
        self.killed = False
        self._exit_code = returncode
        self._stderr = stderr

    def poll(self):
        return self.returncode

    def kill(self):
        self.killed = True
        self._exit_code = -9

    def communicate(self):
        self.returncode = self._exit_code
        return b"", self._stderr


def _patch_popen(monkeypatch, process: FakeProcess) -> list[list[str]]:
    commands: list[list[str]] = []

    def fake_popen(cmd, **kwargs):
        commands.append(cmd)
        return process

    monkeypatch.setattr(subprocess, "Popen", fake_popen)
    return commands


def test_encoder_writes_png_frames_to_stdin(tmp_path, monkeypatch):
    """Frames are streamed to ffmpeg as PNG images, resized to the output size."""
    process = FakeProcess()
    commands = _patch_popen(monkeypatch, process)

    with FFmpegEncoder(tmp_path / "out.mp4", 8, 6, 10) as encoder:
        encoder.write_frame(Image.new("RGB", (16, 12)))

    assert len(commands) == 1
    written = Image.open(BytesIO(process.stdin.getvalue()))
    assert written.format == "PNG"
    assert written.size == (8, 6)


def test_encoder_close_raises_on_nonzero_exit(tmp_path, monkeypatch):
    """A failing ffmpeg exit surfaces as EncoderProcessError with its stderr."""
    _patch_popen(monkeypatch, FakeProcess(returncode=1, stderr=b"unknown encoder"))
    encoder = FFmpegEncoder(tmp_path / "out.mp4", 8, 6, 10)
    encoder.start()

    with pytest.raises(EncoderProcessError, match="unknown encoder") as exc_info:
        encoder.close()

    assert exc_info.value.returncode == 1
    assert exc_info.value.stderr == "unknown encoder"


def test_encoder_is_killed_when_frame_submission_fails(tmp_path, monkeypatch):
    """An exception inside the encoder block kills ffmpeg and propagates."""
    process = FakeProcess()
    _patch_popen(monkeypatch, process)

    with pytest.raises(RuntimeError, match="frame failed"):
        with FFmpegEncoder(tmp_path / "out.mp4", 8, 6, 10):
            raise RuntimeError("frame failed")

    assert process.killed
