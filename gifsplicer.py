#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GIF Splicer: build an animated GIF from single-frame GIFs (no external deps)

Goals covered by this file:
- Splice N already-encoded GIF images into one GIF89a animation
- No pixel decoding, quantization or LZW recompression: bytes are copied as-is
- Global color table taken from frame 0; per-frame local tables dropped when
  they repeat the global one, embedded otherwise
- Graphics control extension per frame (delay, disposal, transparency index)
- Netscape loop extension (0 = loop forever)
- Structural inspector to print what ended up in a GIF file
- Optional thread pool for per-frame assembly (results stay in input order)

Usage examples:
    python gifsplicer.py build a.gif b.gif c.gif --out anim.gif --delay 10
    python gifsplicer.py build *.gif --out anim.gif --delays 10,20,10 --loop 3
    python gifsplicer.py info anim.gif

Notes:
- Inputs must be complete single-image GIFs; an input that already carries a
  NETSCAPE2.0 block is rejected.
- The screen size of the animation is the one of frame 0; other frames are not
  checked against it.
"""
from __future__ import annotations
import argparse
import logging
import struct
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import BinaryIO, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# -----------------------------
# Constants
# -----------------------------
SIGNATURES = (b"GIF87a", b"GIF89a")
OUTPUT_SIGNATURE = b"GIF89a"
CONTENT_TYPE = "image/gif"

EXTENSION_INTRODUCER = 0x21  # '!'
IMAGE_SEPARATOR = 0x2C  # ','
TRAILER = 0x3B  # ';'
GRAPHIC_CONTROL_LABEL = 0xF9
APPLICATION_LABEL = 0xFF
COMMENT_LABEL = 0xFE
PLAIN_TEXT_LABEL = 0x01

NETSCAPE_MARKER = b"NETSCAPE"
NETSCAPE_APP_ID = b"NETSCAPE2.0"

HEADER_LEN = 13  # signature (6) + logical screen descriptor (7)
FLAGS_OFFSET = 10
IMAGE_DESCRIPTOR_LEN = 10
GRAPHIC_CONTROL_LEN = 8

# Restore to background color
DEFAULT_DISPOSAL = 2
DEFAULT_TRANSPARENT = (0, 0, 0)

RGB = Tuple[int, int, int]
ColorTable = List[RGB]

# -----------------------------
# Errors
# -----------------------------
class GIFError(Exception):
    pass


class FrameError(GIFError):
    """An input frame was refused; ``index`` is its position in the input."""

    def __init__(self, index: int, message: str):
        super().__init__(f"Frame #{index}: {message}")
        self.index = index


class InvalidFormatError(FrameError):
    def __init__(self, index: int, message: str = "not a GIF (missing GIF87a/89a)"):
        super().__init__(index, message)


class AlreadyAnimatedError(FrameError):
    def __init__(self, index: int):
        super().__init__(index, "already animated (contains a NETSCAPE extension)")


class UnexpectedBlockError(FrameError):
    def __init__(self, index: int, lead: Optional[int]):
        what = "nothing" if lead is None else f"0x{lead:02X}"
        super().__init__(index, f"expected image descriptor or extension, found {what}")
        self.lead = lead


class DelayCountError(GIFError):
    def __init__(self, frames: int, delays: int):
        super().__init__(f"Got {delays} delays for {frames} frames")
        self.frames = frames
        self.delays = delays


class EmptyAnimationError(GIFError):
    def __init__(self):
        super().__init__("No frames to assemble")

# -----------------------------
# Byte helpers
# -----------------------------

@dataclass(frozen=True)
class ColorTableFlags:
    """Packed flags byte of a logical screen or image descriptor.

    Only the color-table bits are named; bits 3..6 (color resolution, sort,
    interlace) are carried through untouched in ``other_bits``.
    """
    present: bool
    size_code: int
    other_bits: int = 0

    @classmethod
    def from_byte(cls, packed: int) -> "ColorTableFlags":
        return cls(bool(packed & 0x80), packed & 0x07, packed & 0x78)

    @property
    def table_length(self) -> int:
        return 2 << self.size_code

    def embed_table(self, size_code: int) -> "ColorTableFlags":
        return replace(self, present=True, size_code=size_code & 0x07)

    def to_byte(self) -> int:
        return (0x80 if self.present else 0) | self.other_bits | self.size_code


class ByteCursor:
    """Read position over an immutable buffer."""

    def __init__(self, data: bytes, pos: int = 0):
        self.data = data
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def peek(self, ahead: int = 0) -> Optional[int]:
        i = self.pos + ahead
        if i >= len(self.data):
            return None
        return self.data[i]

    def startswith(self, prefix: bytes, ahead: int = 0) -> bool:
        return self.data.startswith(prefix, self.pos + ahead)

    def advance(self, n: int = 1) -> None:
        self.pos += n

    def read(self, n: int) -> bytes:
        if self.pos + n > len(self.data):
            raise GIFError(f"Unexpected EOF while reading {n} bytes")
        b = self.data[self.pos:self.pos + n]
        self.pos += n
        return b

    def read_u8(self) -> int:
        if self.at_end():
            raise GIFError("Unexpected EOF while reading u8")
        b = self.data[self.pos]
        self.pos += 1
        return b

    def read_u16le(self) -> int:
        return struct.unpack("<H", self.read(2))[0]

    def read_rest(self, keep: int = 0) -> bytes:
        """Everything up to the end of the buffer, minus ``keep`` trailing bytes."""
        end = max(self.pos, len(self.data) - keep)
        b = self.data[self.pos:end]
        self.pos = end
        return b


def parse_color_table(data: bytes) -> ColorTable:
    return [(data[i], data[i+1], data[i+2]) for i in range(0, len(data) - 2, 3)]


def color_tables_equal(a: ColorTable, b: ColorTable) -> bool:
    # Callers compare equal-length tables only.
    for x, y in zip(a, b):
        if x != y:
            return False
    return True


def find_color(table: ColorTable, rgb: RGB) -> Optional[int]:
    for i, entry in enumerate(table):
        if entry == rgb:
            return i
    return None

# -----------------------------
# Configuration & input frames
# -----------------------------

@dataclass
class AnimationConfig:
    loops: int = 0  # 0 means infinite
    disposal: int = DEFAULT_DISPOSAL
    transparent: Optional[RGB] = DEFAULT_TRANSPARENT

    def __post_init__(self):
        self.loops = max(0, self.loops)
        if self.loops > 0xFFFF:
            raise ValueError(f"loop count {self.loops} does not fit in 16 bits")
        if not 0 <= self.disposal <= 7:
            raise ValueError(f"disposal method must be 0..7, got {self.disposal}")
        if self.transparent is not None:
            rgb = tuple(self.transparent)
            if len(rgb) != 3 or any(not 0 <= c <= 255 for c in rgb):
                raise ValueError(f"transparent color must be an RGB triple, got {self.transparent!r}")
            self.transparent = rgb


@dataclass(frozen=True)
class GifFrame:
    """One encoded single-image GIF, read in place and never modified."""
    index: int
    data: bytes

    @property
    def signature(self) -> bytes:
        return self.data[:6]

    @property
    def flags(self) -> ColorTableFlags:
        return ColorTableFlags.from_byte(self.data[FLAGS_OFFSET])

    @property
    def color_table_length(self) -> int:
        flags = self.flags
        return flags.table_length if flags.present else 0

    @property
    def color_table_bytes(self) -> bytes:
        return self.data[HEADER_LEN:HEADER_LEN + 3 * self.color_table_length]

    @property
    def color_table(self) -> ColorTable:
        return parse_color_table(self.color_table_bytes)

    @property
    def scan_offset(self) -> int:
        # Where the block scan starts, whether or not the table bit is set.
        return HEADER_LEN + 3 * self.flags.table_length

    @property
    def body(self) -> bytes:
        """Blocks after the color table, without the frame's own trailer."""
        cursor = ByteCursor(self.data, HEADER_LEN + 3 * self.color_table_length)
        return cursor.read_rest(keep=1)

# -----------------------------
# Validation
# -----------------------------

def check_frame(frame: GifFrame) -> None:
    if frame.signature not in SIGNATURES:
        raise InvalidFormatError(frame.index)
    if len(frame.data) < HEADER_LEN:
        raise InvalidFormatError(frame.index, "truncated logical screen descriptor")

    cursor = ByteCursor(frame.data, frame.scan_offset)
    while True:
        b = cursor.peek()
        if b is None:
            raise InvalidFormatError(frame.index, "no trailer found")
        if b == EXTENSION_INTRODUCER and cursor.startswith(NETSCAPE_MARKER, 3):
            raise AlreadyAnimatedError(frame.index)
        if b == TRAILER:
            return
        cursor.advance()


def validate_frames(buffers: Sequence[bytes]) -> List[GifFrame]:
    """Check every buffer before anything is assembled; first failure wins."""
    frames = []
    for i, data in enumerate(buffers):
        frame = GifFrame(i, bytes(data))
        check_frame(frame)
        frames.append(frame)
    return frames

# -----------------------------
# Blocks
# -----------------------------

def netscape_loop_block(loops: int) -> bytes:
    return (bytes([EXTENSION_INTRODUCER, APPLICATION_LABEL, 0x0B]) + NETSCAPE_APP_ID
            + struct.pack("<BBHB", 3, 1, loops & 0xFFFF, 0))


def graphic_control_block(disposal: int, delay: int,
                          transparent_index: Optional[int] = None) -> bytes:
    if not 0 <= delay <= 0xFFFF:
        raise ValueError(f"delay must be 0..65535 centiseconds, got {delay}")
    packed = disposal << 2
    index = 0
    if transparent_index is not None:
        packed += 1
        index = transparent_index
    return struct.pack("<BBBBHBB", EXTENSION_INTRODUCER, GRAPHIC_CONTROL_LABEL, 4,
                       packed, delay, index, 0)


def build_header(frame: GifFrame, loops: int) -> bytes:
    """Signature, screen descriptor, global table and loop block, all from frame 0.

    A frame 0 without a global color table yields the bare signature: no
    screen descriptor and no loop block follow.
    """
    out = bytearray(OUTPUT_SIGNATURE)
    if frame.flags.present:
        out += frame.data[6:HEADER_LEN]
        out += frame.color_table_bytes
        out += netscape_loop_block(max(0, loops))
    return bytes(out)


def split_body(frame: GifFrame) -> Tuple[bytes, bytes]:
    """Return (image descriptor, payload), dropping any leading control block."""
    cursor = ByteCursor(frame.body)
    lead = cursor.peek()
    if lead == EXTENSION_INTRODUCER:
        cursor.advance(GRAPHIC_CONTROL_LEN)
    elif lead != IMAGE_SEPARATOR:
        raise UnexpectedBlockError(frame.index, lead)
    try:
        descriptor = cursor.read(IMAGE_DESCRIPTOR_LEN)
    except GIFError:
        raise InvalidFormatError(frame.index, "truncated image descriptor") from None
    return descriptor, cursor.read_rest()


def build_segment(frame: GifFrame, delay: int, config: AnimationConfig,
                  global_table: ColorTable, global_size_code: int,
                  first: bool) -> bytes:
    """[control ext][descriptor][local table, if kept][payload] for one frame."""
    local_len = frame.color_table_length
    local_table = frame.color_table

    transparent_index = None
    if config.transparent is not None and local_len:
        transparent_index = find_color(local_table, config.transparent)
    control = graphic_control_block(config.disposal, delay, transparent_index)

    descriptor, payload = split_body(frame)

    if local_len and not first:
        same = (len(global_table) == local_len
                and color_tables_equal(global_table, local_table))
        if not same:
            # The size field gets the global table's code, not the local one.
            flags = ColorTableFlags.from_byte(descriptor[9]).embed_table(global_size_code)
            descriptor = descriptor[:9] + bytes([flags.to_byte()])
            return control + descriptor + frame.color_table_bytes + payload
    return control + descriptor + payload

# -----------------------------
# Assembly
# -----------------------------

@dataclass
class AssemblyContext:
    """Output buffer plus the state shared between per-frame steps."""
    config: AnimationConfig
    global_table: ColorTable
    global_size_code: int
    out: bytearray = field(default_factory=bytearray)
    first: bool = True
    finished: bool = False

    @classmethod
    def start(cls, frame0: GifFrame, config: AnimationConfig) -> "AssemblyContext":
        ctx = cls(config, frame0.color_table, frame0.flags.size_code)
        ctx.out += build_header(frame0, config.loops)
        return ctx

    def segment(self, frame: GifFrame, delay: int, first: Optional[bool] = None) -> bytes:
        if first is None:
            first = self.first
        return build_segment(frame, delay, self.config, self.global_table,
                             self.global_size_code, first)

    def append_segment(self, segment: bytes) -> None:
        if self.finished:
            raise GIFError("Animation already finished")
        self.out += segment
        self.first = False

    def append_frame(self, frame: GifFrame, delay: int) -> None:
        self.append_segment(self.segment(frame, delay))

    def finish(self) -> bytes:
        if self.finished:
            raise GIFError("Animation already finished")
        self.out.append(TRAILER)
        self.finished = True
        return bytes(self.out)


def assemble(buffers: Sequence[bytes], delays: Sequence[int], loops: int = 0, *,
             disposal: int = DEFAULT_DISPOSAL,
             transparent: Optional[RGB] = DEFAULT_TRANSPARENT,
             workers: Optional[int] = None) -> bytes:
    """Splice single-frame GIFs into one animated GIF.

    ``delays`` are in centiseconds, one per frame. Either the whole animation
    is returned or an exception is raised; nothing partial is exposed.
    """
    config = AnimationConfig(loops, disposal, transparent)
    if not buffers:
        raise EmptyAnimationError()
    if len(delays) != len(buffers):
        raise DelayCountError(len(buffers), len(delays))

    frames = validate_frames(buffers)
    ctx = AssemblyContext.start(frames[0], config)

    if workers is not None and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            segments = list(pool.map(
                lambda fd: ctx.segment(fd[0], fd[1], first=fd[0].index == 0),
                zip(frames, delays)))
        for segment in segments:
            ctx.append_segment(segment)
    else:
        for frame, delay in zip(frames, delays):
            ctx.append_frame(frame, delay)

    return ctx.finish()


class AnimatedGif:
    """Finished animation; assembly happens in the constructor."""
    content_type = CONTENT_TYPE

    def __init__(self, source_images: Sequence[bytes], image_delays: Sequence[int],
                 loops: int = 0, *, disposal: int = DEFAULT_DISPOSAL,
                 transparent: Optional[RGB] = DEFAULT_TRANSPARENT,
                 workers: Optional[int] = None):
        self.data = assemble(source_images, image_delays, loops, disposal=disposal,
                             transparent=transparent, workers=workers)

    def __len__(self) -> int:
        return len(self.data)

    def get_animation(self) -> bytes:
        return self.data

    def write_to(self, stream: BinaryIO) -> int:
        return stream.write(self.data)

    def save(self, path: str) -> None:
        with open(path, "wb") as f:
            self.write_to(f)

# -----------------------------
# Inspection
# -----------------------------

@dataclass
class LogicalScreen:
    width: int
    height: int
    gct_flag: bool
    color_resolution: int  # bits per primary - 1 (from packed field)
    sort_flag: bool
    gct_size_exp: int  # size = 2^(N+1)
    bg_color_index: int
    pixel_aspect_ratio: int  # (PAR+15)/64 if PAR != 0

@dataclass
class ImageDescriptor:
    left: int
    top: int
    width: int
    height: int
    lct_flag: bool
    interlace: bool
    sort_flag: bool
    lct_size_exp: int

@dataclass
class GraphicControl:
    disposal_method: int  # 0-7
    user_input: bool
    transparent_flag: bool
    delay_cs: int  # centiseconds
    transparent_index: Optional[int]

@dataclass
class NetscapeLoop:
    loops: int  # 0 means infinite

@dataclass
class ImageBlock:
    descriptor: ImageDescriptor
    lct: Optional[ColorTable]
    lzw_min_code_size: int
    data_subblocks: List[bytes]
    gce: Optional[GraphicControl]

@dataclass
class GIF:
    version: str
    ls: LogicalScreen
    gct: Optional[ColorTable]
    frames: List[ImageBlock]
    netscape: Optional[NetscapeLoop]
    comments: List[str]
    plaintexts: int


def read_subblocks(cursor: ByteCursor) -> List[bytes]:
    blocks = []
    while True:
        n = cursor.read_u8()
        if n == 0:
            return blocks
        blocks.append(cursor.read(n))


def parse_gif_bytes(data: bytes) -> GIF:
    """Walk the block structure of a GIF; LZW data is kept as raw sub-blocks."""
    cursor = ByteCursor(bytes(data))
    header = cursor.read(6)
    if header not in SIGNATURES:
        raise GIFError("Not a GIF file (missing GIF87a/89a)")
    version = header.decode('ascii')

    width = cursor.read_u16le()
    height = cursor.read_u16le()
    packed = cursor.read_u8()
    flags = ColorTableFlags.from_byte(packed)
    ls = LogicalScreen(width, height, flags.present, (packed & 0b0111_0000) >> 4,
                       (packed & 0b0000_1000) != 0, flags.size_code,
                       cursor.read_u8(), cursor.read_u8())
    gct = None
    if flags.present:
        gct = parse_color_table(cursor.read(3 * flags.table_length))

    frames: List[ImageBlock] = []
    netscape: Optional[NetscapeLoop] = None
    comments: List[str] = []
    plaintexts = 0
    gce: Optional[GraphicControl] = None

    while True:
        if cursor.at_end():
            raise GIFError("Unexpected EOF before trailer")
        b0 = cursor.read_u8()
        if b0 == TRAILER:
            break
        elif b0 == EXTENSION_INTRODUCER:
            label = cursor.read_u8()
            if label == GRAPHIC_CONTROL_LABEL:
                if cursor.read_u8() != 4:
                    raise GIFError("Bad GCE block size")
                packed = cursor.read_u8()
                delay_cs = cursor.read_u16le()
                transparent_index = cursor.read_u8()
                if cursor.read_u8() != 0:
                    raise GIFError("Missing GCE block terminator")
                transparent_flag = (packed & 1) == 1
                gce = GraphicControl((packed >> 2) & 0b111, ((packed >> 1) & 1) == 1,
                                     transparent_flag, delay_cs,
                                     transparent_index if transparent_flag else None)
            elif label == APPLICATION_LABEL:
                app_id = cursor.read(cursor.read_u8())
                app_data = b"".join(read_subblocks(cursor))
                if app_id.startswith(NETSCAPE_APP_ID) or app_id.startswith(b"ANIMEXTS1.0"):
                    # Netscape Looping: sub-block "\x01 <loops: u16>"
                    if len(app_data) >= 3 and app_data[0] == 1:
                        netscape = NetscapeLoop(app_data[1] | (app_data[2] << 8))
            elif label == COMMENT_LABEL:
                comments.append(b"".join(read_subblocks(cursor)).decode('utf-8', 'replace'))
            elif label == PLAIN_TEXT_LABEL:
                cursor.read(cursor.read_u8())
                read_subblocks(cursor)
                plaintexts += 1
            else:
                read_subblocks(cursor)
        elif b0 == IMAGE_SEPARATOR:
            left = cursor.read_u16le()
            top = cursor.read_u16le()
            iw = cursor.read_u16le()
            ih = cursor.read_u16le()
            packed = cursor.read_u8()
            lflags = ColorTableFlags.from_byte(packed)
            lct = None
            if lflags.present:
                lct = parse_color_table(cursor.read(3 * lflags.table_length))
            lzw_min_code_size = cursor.read_u8()
            descriptor = ImageDescriptor(left, top, iw, ih, lflags.present,
                                         (packed & 0b0100_0000) != 0,
                                         (packed & 0b0010_0000) != 0, lflags.size_code)
            frames.append(ImageBlock(descriptor, lct, lzw_min_code_size,
                                     read_subblocks(cursor), gce))
            gce = None  # GCE applies to next image only
        else:
            raise GIFError(f"Unknown block introducer: 0x{b0:02X}")

    return GIF(version, ls, gct, frames, netscape, comments, plaintexts)

# -----------------------------
# High-level actions
# -----------------------------

DISPOSAL_NAMES = {
    0: "None (keep)", 1: "Keep (unused)", 2: "Restore to BG", 3: "Restore to previous"
}


def action_info(gif: GIF) -> None:
    ls = gif.ls
    print("Header:")
    print(f"  Version: {gif.version} (GIF file signature)")
    print("Logical Screen Descriptor:")
    print(f"  Canvas: {ls.width}x{ls.height} pixels (logical screen)")
    print(f"  Global Color Table: {'present' if ls.gct_flag else 'absent'}")
    if ls.gct_flag:
        print(f"    Size: {2 ** (ls.gct_size_exp + 1)} colors; Sorted: {ls.sort_flag}")
        print(f"    Background Color Index: {ls.bg_color_index}")

    print(f"Frames: {len(gif.frames)}")
    if gif.netscape:
        loops = gif.netscape.loops
        print(f"  Animation Looping: {'infinite' if loops == 0 else loops} times (Netscape ext)")
    if gif.comments:
        print(f"Comments: {len(gif.comments)}")
    if gif.plaintexts:
        print(f"Plain Text Extensions: {gif.plaintexts}")

    for i, fr in enumerate(gif.frames):
        d = fr.descriptor
        print(f"\nFrame {i}: {d.width}x{d.height} at ({d.left},{d.top}){' interlaced' if d.interlace else ''}")
        if fr.lct is not None:
            print(f"  Local Color Table: present, size {len(fr.lct)}")
        if fr.gce:
            disp = fr.gce.disposal_method
            disp_name = DISPOSAL_NAMES.get(disp, f"Reserved {disp}")
            print(f"  Delay: {fr.gce.delay_cs/100:.2f}s, Transparent idx: {fr.gce.transparent_index}, Disposal: {disp_name}")


def load_frames(paths: Sequence[str]) -> List[bytes]:
    buffers = []
    for path in paths:
        with open(path, 'rb') as f:
            buffers.append(f.read())
        logger.debug("loaded %s (%d bytes)", path, len(buffers[-1]))
    return buffers


def action_build(args: argparse.Namespace) -> None:
    buffers = load_frames(args.frames)
    if args.delays is not None:
        delays = args.delays
    else:
        delays = [args.delay] * len(buffers)
    transparent = None if args.no_transparency else args.transparent
    logger.debug("assembling %d frames, loop=%d disposal=%d transparent=%s",
                 len(buffers), args.loop, args.disposal, transparent)
    anim = AnimatedGif(buffers, delays, args.loop, disposal=args.disposal,
                       transparent=transparent, workers=args.workers)
    anim.save(args.out)
    print(f"Wrote {args.out}: {len(buffers)} frames, {len(anim)} bytes")

# -----------------------------
# CLI
# -----------------------------

def parse_int_list(text: str) -> List[int]:
    try:
        return [int(v) for v in text.split(",") if v.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {text!r}")


def parse_rgb(text: str) -> RGB:
    values = parse_int_list(text)
    if len(values) != 3:
        raise argparse.ArgumentTypeError(f"expected R,G,B, got {text!r}")
    return values[0], values[1], values[2]


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Splice single-frame GIFs into an animated GIF (no deps)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Assemble frames into one animation")
    p_build.add_argument("frames", nargs="+", help="Single-frame .gif files, in order")
    p_build.add_argument("--out", required=True, help="Output .gif path")
    p_build.add_argument("--delay", type=int, default=10, help="Delay for every frame (1/100 s)")
    p_build.add_argument("--delays", type=parse_int_list, default=None,
                         help="Per-frame delays, comma-separated (1/100 s)")
    p_build.add_argument("--loop", type=int, default=0, help="Loop count (0=infinite)")
    p_build.add_argument("--disposal", type=int, default=DEFAULT_DISPOSAL, help="Disposal method 0-7")
    p_build.add_argument("--transparent", type=parse_rgb, default=DEFAULT_TRANSPARENT,
                         help="Transparent color as R,G,B (default 0,0,0)")
    p_build.add_argument("--no-transparency", action="store_true")
    p_build.add_argument("--workers", type=int, default=None, help="Assemble frames on N threads")

    p_info = sub.add_parser("info", help="Print header/frame structure of a GIF")
    p_info.add_argument("gif", help="Path to .gif")

    return p


def main(argv: List[str]) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.cmd == 'build':
            action_build(args)
            return 0
        elif args.cmd == 'info':
            with open(args.gif, 'rb') as f:
                action_info(parse_gif_bytes(f.read()))
            return 0
    except (GIFError, ValueError) as e:
        print(f"Error: {e}")
        return 2
    except FileNotFoundError as e:
        print(f"Error: file not found: {e.filename}")
        return 2
    ap.print_help()
    return 1


def cli() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
