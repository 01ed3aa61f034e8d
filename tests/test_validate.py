import pytest

from gifsplicer import (AlreadyAnimatedError, FrameError, GifFrame, InvalidFormatError,
                        assemble, netscape_loop_block, validate_frames)
from sample_frames import FOUR_COLORS, RED_BLUE, build_frame


def test_accepts_87a_and_89a():
    frames = validate_frames([build_frame(signature=b"GIF87a"), build_frame()])
    assert [f.index for f in frames] == [0, 1]
    assert all(isinstance(f, GifFrame) for f in frames)


def test_bad_signature_reports_index():
    buffers = [build_frame(), build_frame(), b"\x89PNG\r\n\x1a\n" + bytes(20)]
    with pytest.raises(InvalidFormatError) as exc:
        validate_frames(buffers)
    assert exc.value.index == 2
    assert isinstance(exc.value, FrameError)


def test_bad_signature_fails_before_assembly():
    buffers = [build_frame(RED_BLUE, prefix=b"\x00"), build_frame(signature=b"GIF90a")]
    # frame 0 would fail assembly; validation of frame 1 comes first
    with pytest.raises(InvalidFormatError) as exc:
        assemble(buffers, [1, 1])
    assert exc.value.index == 1


def test_truncated_header():
    with pytest.raises(InvalidFormatError):
        validate_frames([b"GIF89a\x01\x00"])


def test_missing_trailer():
    with pytest.raises(InvalidFormatError) as exc:
        validate_frames([build_frame(), build_frame(trailer=False)])
    assert exc.value.index == 1


def test_netscape_block_rejected():
    animated = build_frame(prefix=netscape_loop_block(0))
    with pytest.raises(AlreadyAnimatedError) as exc:
        validate_frames([build_frame(), build_frame(), animated])
    assert exc.value.index == 2


def test_netscape_after_trailer_ignored():
    frame = build_frame() + netscape_loop_block(0)
    assert len(validate_frames([frame])) == 1


def test_first_failure_wins():
    buffers = [build_frame(prefix=netscape_loop_block(3)), b"nope"]
    with pytest.raises(AlreadyAnimatedError) as exc:
        validate_frames(buffers)
    assert exc.value.index == 0


def test_assembled_output_is_refused_as_input():
    out = assemble([build_frame(), build_frame(FOUR_COLORS)], [10, 10])
    with pytest.raises(AlreadyAnimatedError) as exc:
        assemble([out], [10])
    assert exc.value.index == 0


def test_frame_views():
    frame = GifFrame(0, build_frame(FOUR_COLORS))
    assert frame.signature == b"GIF89a"
    assert frame.color_table_length == 4
    assert frame.color_table == list(FOUR_COLORS)
    assert frame.scan_offset == 13 + 12
    assert frame.body[:1] == b","
    assert not frame.body.endswith(b";")


def test_frame_views_without_table():
    frame = GifFrame(0, build_frame(table=False))
    assert frame.color_table_length == 0
    assert frame.color_table == []
    assert frame.body[:1] == b","
    # the scan position still counts a two-entry table
    assert frame.scan_offset == 19
