import pytest

from gifsplicer import assemble, main
from sample_frames import GREEN_WHITE, RED_BLACK, RED_BLUE, build_frame


@pytest.fixture
def frame_files(tmp_path):
    paths = []
    for i, palette in enumerate((RED_BLUE, GREEN_WHITE, RED_BLACK)):
        path = tmp_path / f"frame{i}.gif"
        path.write_bytes(build_frame(palette))
        paths.append(str(path))
    return paths


def test_build_matches_library(tmp_path, frame_files, capsys):
    out = tmp_path / "anim.gif"
    rc = main(["build", *frame_files, "--out", str(out), "--delays", "10,20,30", "--loop", "2"])
    assert rc == 0
    buffers = [open(p, "rb").read() for p in frame_files]
    assert out.read_bytes() == assemble(buffers, [10, 20, 30], 2)
    assert "3 frames" in capsys.readouterr().out


def test_build_single_delay_no_transparency(tmp_path, frame_files):
    out = tmp_path / "anim.gif"
    rc = main(["build", *frame_files, "--out", str(out), "--delay", "7", "--no-transparency"])
    assert rc == 0
    buffers = [open(p, "rb").read() for p in frame_files]
    assert out.read_bytes() == assemble(buffers, [7, 7, 7], transparent=None)


def test_build_threaded_with_transparent_color(tmp_path, frame_files):
    out = tmp_path / "anim.gif"
    rc = main(["-v", "build", *frame_files, "--out", str(out), "--transparent", "0,0,255",
               "--workers", "2"])
    assert rc == 0
    buffers = [open(p, "rb").read() for p in frame_files]
    assert out.read_bytes() == assemble(buffers, [10, 10, 10], transparent=(0, 0, 255))


def test_build_delay_count_error(tmp_path, frame_files, capsys):
    rc = main(["build", *frame_files, "--out", str(tmp_path / "x.gif"), "--delays", "10,20"])
    assert rc == 2
    assert "Error: Got 2 delays for 3 frames" in capsys.readouterr().out
    assert not (tmp_path / "x.gif").exists()


def test_build_rejects_animated_input(tmp_path, frame_files, capsys):
    anim = tmp_path / "anim.gif"
    assert main(["build", *frame_files, "--out", str(anim)]) == 0
    rc = main(["build", str(anim), "--out", str(tmp_path / "again.gif")])
    assert rc == 2
    assert "Frame #0: already animated" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    rc = main(["build", str(tmp_path / "nope.gif"), "--out", str(tmp_path / "x.gif")])
    assert rc == 2
    assert "Error: file not found" in capsys.readouterr().out


def test_info(tmp_path, frame_files, capsys):
    anim = tmp_path / "anim.gif"
    main(["build", *frame_files, "--out", str(anim), "--delays", "10,20,30"])
    capsys.readouterr()
    assert main(["info", str(anim)]) == 0
    text = capsys.readouterr().out
    assert "Version: GIF89a" in text
    assert "Frames: 3" in text
    assert "Animation Looping: infinite" in text
    assert "Local Color Table: present, size 2" in text
    assert "Delay: 0.30s" in text


def test_info_not_a_gif(tmp_path, capsys):
    path = tmp_path / "x.gif"
    path.write_bytes(b"hello world")
    assert main(["info", str(path)]) == 2
    assert "Not a GIF file" in capsys.readouterr().out
