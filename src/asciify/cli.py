import argparse
import logging
import sys
from pathlib import Path

from asciify.converter import convert_image
from asciify.errors import AsciifyError, ImageNotFoundError


def main():
    parser = argparse.ArgumentParser(
        description="Convert a PNG or JPEG image to ASCII art.",
        epilog="The result is saved to a new file with the same name as the image, with .txt appended to it.",
    )
    parser.add_argument("image", nargs="?", help="Path to input image")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log progress to stderr")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.image is None:
        parser.print_help(sys.stdout)
        return

    if not Path(args.image).is_file():
        print(f"Could not find image file to read in: {args.image}", file=sys.stderr)
        sys.exit(1)

    print(f"Processing file: {args.image}")
    try:
        output = convert_image(args.image)
    except ImageNotFoundError:
        print(f"Could not find image file to read in: {args.image}", file=sys.stderr)
        sys.exit(1)
    except AsciifyError as exc:
        print(f"Failed to process and convert image: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Output saved to file: {output}")
