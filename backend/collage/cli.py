"""
Collage: lay images out in a justified grid and save one JPEG.

Usage:
  collage a.jpg b.png c.webp -o grid.jpg          # default layout config
  collage photos/ -o grid.jpg --preset            # composite preset from settings
  collage photos/ -o grid.jpg --row-height 440 500 --tolerance 0.1
"""

from __future__ import annotations

import argparse
import os
import sys

from PIL import UnidentifiedImageError

from collage.config import settings
from collage.engine.config import LayoutConfig, WidowLayoutStyle
from collage.engine.errors import InvalidAspectRatio
from collage.render.composite import compose, decode_image, encode_jpeg

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".gif", ".bmp", ".tif", ".tiff"}


def collect_inputs(inputs: list[str]) -> list[str]:
    """Expand folders to their image files (sorted); keep files as given."""
    paths: list[str] = []
    for path in inputs:
        if os.path.isdir(path):
            names = sorted(
                f for f in os.listdir(path) if os.path.splitext(f)[1].lower() in IMAGE_EXTENSIONS
            )
            paths.extend(os.path.join(path, name) for name in names)
        else:
            paths.append(path)
    return paths


def build_config(args: argparse.Namespace) -> LayoutConfig:
    config = settings.composite_layout_config() if args.preset else LayoutConfig()
    if args.width is not None:
        config.container_width = args.width
    if args.row_height:
        config.target_row_height = list(args.row_height)
    if args.tolerance is not None:
        config.target_row_height_tolerance = args.tolerance
    config.max_num_rows = args.max_rows
    config.show_widows = not args.hide_widows
    config.full_width_breakout_row_cadence = args.breakout_cadence
    config.widow_layout_style = WidowLayoutStyle(args.widow_style)
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Justified image-grid collage")
    parser.add_argument("inputs", nargs="+", help="Image files or folders of images")
    parser.add_argument("-o", "--output", required=True, help="Output JPEG path")
    parser.add_argument("--preset", action="store_true", help="Start from the composite preset")
    parser.add_argument("--width", type=float, help="Container width")
    parser.add_argument("--row-height", type=float, nargs="+", help="Target row height(s), cycled")
    parser.add_argument("--tolerance", type=float, help="Target row height tolerance")
    parser.add_argument("--max-rows", type=int, default=None, help="Maximum number of rows")
    parser.add_argument("--hide-widows", action="store_true", help="Drop the trailing incomplete row")
    parser.add_argument("--breakout-cadence", type=int, default=0, help="Every Nth row is full width")
    parser.add_argument(
        "--widow-style",
        choices=[s.value for s in WidowLayoutStyle],
        default=WidowLayoutStyle.LEFT.value,
    )
    parser.add_argument("-q", "--quality", type=int, default=None, help="JPEG quality")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    paths = collect_inputs(args.inputs)
    missing = [p for p in paths if not os.path.isfile(p)]
    if missing:
        print(f"File not found: {missing[0]}")
        sys.exit(1)
    if not paths:
        print("No image files found.")
        sys.exit(1)

    images = []
    for path in paths:
        with open(path, "rb") as f:
            data = f.read()
        try:
            images.append(decode_image(data))
        except UnidentifiedImageError:
            print(f"Not an image: {path}")
            sys.exit(1)

    config = build_config(args)
    try:
        canvas, result = compose(images, config)
    except InvalidAspectRatio as e:
        print(f"{paths[e.index]}: {e}")
        sys.exit(1)

    quality = args.quality if args.quality is not None else settings.composite_jpeg_quality
    with open(args.output, "wb") as f:
        f.write(encode_jpeg(canvas, quality))

    print(f"Laid out {len(result.boxes)}/{len(images)} images, {result.widow_count} widows")
    print(f"Canvas: {canvas.width}x{canvas.height} -> {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
