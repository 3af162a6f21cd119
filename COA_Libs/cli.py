"""
Command line entry point for Coat of Arms Core.

Commands:
    generate   Build random coats of arms from an asset library
    watermark  Draw a translucent text watermark on an image
    convert    Re-encode an image in the format of the output file name
"""

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import random
import sys

from PIL import Image, ImageColor, ImageFont

from COA_Libs import __version__
from COA_Libs.constants import DEFAULT_COPYRIGHT_HOLDER, WORKING_MODE
from COA_Libs.errors import CoatOfArmsError
from COA_Libs.ExportLib.image_export import save_image
from COA_Libs.HeraldryLib.asset_provider import (
    AssetLibraryConfig,
    DirectoryAssetProvider,
    load_asset_library_config,
)
from COA_Libs.HeraldryLib.coat_of_arms_generator import generate_batch
from COA_Libs.ImageEditingLib.watermark import (
    Opacity,
    WatermarkSpec,
    apply_watermark,
    watermark_copyright,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coat-of-arms",
        description="Procedural coat of arms generation and image utilities",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate random coats of arms")
    source = generate.add_mutually_exclusive_group(required=True)
    source.add_argument("--assets", help="Asset library directory")
    source.add_argument("--config", help="Asset library JSON config")
    generate.add_argument("--output", required=True, help="Output file (extension picks the format)")
    generate.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    generate.add_argument("--count", type=int, default=1, help="Number of emblems (default: 1)")
    generate.add_argument("--workers", type=int, default=None, help="Worker threads for batches")

    watermark = subparsers.add_parser("watermark", help="Watermark an image")
    watermark.add_argument("input", help="Image to watermark")
    watermark.add_argument("output", help="Output file (extension picks the format)")
    watermark.add_argument("--text", default=None, help="Watermark text (default: copyright line)")
    watermark.add_argument("--holder", default=DEFAULT_COPYRIGHT_HOLDER, help="Name used in the default copyright line")
    watermark.add_argument("--top", action="store_true", help="Place the watermark at the top")
    watermark.add_argument("--container-top", type=int, default=0, help="Container top Y for top placement")
    watermark.add_argument(
        "--opacity",
        default=Opacity.HALF.value,
        help="One of 100%%, 75%%, 50%%, 25%%, 10%% (anything else means 50%%)",
    )
    watermark.add_argument("--color", default="#ffffff", help="Watermark color (default: #ffffff)")
    watermark.add_argument("--font", default=None, help="TrueType font file")
    watermark.add_argument("--font-size", type=int, default=24, help="Font size (default: 24)")

    convert = subparsers.add_parser("convert", help="Re-encode an image")
    convert.add_argument("input", help="Image to convert")
    convert.add_argument("output", help="Output file (extension picks the format)")

    return parser


def numbered_output(output: str, index: int, count: int) -> str:
    """Output file for emblem index of a batch; a single emblem keeps the name."""
    if count == 1:
        return output
    path = Path(output)
    return str(path.with_name(f"{path.stem}_{index + 1}{path.suffix}"))


def run_generate(args: argparse.Namespace) -> int:
    if args.config:
        config = load_asset_library_config(Path(args.config))
    else:
        config = AssetLibraryConfig(base_directory=args.assets)

    def provider_factory(rng: random.Random) -> DirectoryAssetProvider:
        return DirectoryAssetProvider(config, rng)

    results = generate_batch(provider_factory, args.count, seed=args.seed, max_workers=args.workers)
    for index, result in enumerate(results):
        tinctures = ", ".join(t.name for t in result.ordinary_tinctures)
        if result.charge_tincture is not None:
            tinctures += f" / charge {result.charge_tincture.name}"
        path = save_image(result.image, numbered_output(args.output, index, args.count))
        print(f"{path}: {tinctures}")
    return 0


def run_watermark(args: argparse.Namespace) -> int:
    image = open_image(args.input)

    if args.font:
        font = ImageFont.truetype(args.font, args.font_size)
    else:
        font = ImageFont.load_default(size=args.font_size)

    watermark_spec = WatermarkSpec(
        text=args.text if args.text is not None else watermark_copyright(args.holder),
        font=font,
        color=ImageColor.getrgb(args.color),
        opacity=args.opacity,
        at_top=args.top,
        container_top=args.container_top,
    )
    apply_watermark(image, watermark_spec)
    print(save_image(image, args.output))
    return 0


def run_convert(args: argparse.Namespace) -> int:
    print(save_image(open_image(args.input), args.output))
    return 0


def open_image(file_name: str):
    with Image.open(file_name) as img:
        return img.convert(WORKING_MODE)


COMMANDS = {
    "generate": run_generate,
    "watermark": run_watermark,
    "convert": run_convert,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return COMMANDS[args.command](args)
    except (CoatOfArmsError, OSError, ValueError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
