import argparse
import json
import logging
import sys

from core.config import SlicerSettings
from core.errors import ImporterError
from core.importer import FileImageImporter
from core.session import SlicerSession
from core.slicer import Alignment

logger = logging.getLogger("atlas_slicer")

def build_parser(settings: SlicerSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Slice an image into sprites using its TextureAtlas descriptor.")
    parser.add_argument("image", help="Path to the atlas image.")
    parser.add_argument("--descriptor", help="Descriptor file to use instead of the .xml/.txt next to the image.")
    parser.add_argument("--pivot", default=settings.alignment,
                        help="Pivot alignment: " + ", ".join(a.label for a in Alignment))
    parser.add_argument("--offset", type=float, nargs=2, metavar=("X", "Y"), default=settings.custom_offset,
                        help="Pivot used with --pivot Custom.")
    parser.add_argument("--strict", action="store_true", default=settings.strict,
                        help="Treat SubTextures with missing attributes as errors.")
    parser.add_argument("--dry-run", action="store_true", help="Print the slices instead of applying them.")
    parser.add_argument("--save-defaults", action="store_true", help="Remember --pivot/--offset/--strict.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser

def main(argv=None) -> int:
    settings = SlicerSettings.load()
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        alignment = Alignment.from_name(args.pivot)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1
    custom_offset = (args.offset[0], args.offset[1])

    if args.save_defaults:
        try:
            SlicerSettings(alignment=alignment.name, custom_offset=custom_offset, strict=args.strict).save()
        except OSError as e:
            logger.error("Could not save defaults: %s", e)
            return 1

    session = SlicerSession(FileImageImporter(), alignment, custom_offset, strict=args.strict)
    try:
        session.select(args.image)
        if args.descriptor:
            try:
                with open(args.descriptor, 'rb') as f:
                    data = f.read()
            except OSError as e:
                logger.error("Could not read descriptor %s: %s", args.descriptor, e)
                return 1
            session.use_descriptor(data)

        if not session.can_slice():
            for message in session.blocking_messages():
                print(message)
            return 1

        if args.dry_run:
            print(json.dumps([s.to_dict() for s in session.build()], indent=4))
            return 0

        outcome = session.perform_slice()
    except (ImporterError, OSError) as e:
        logger.error("There was an error while trying to reimport the image: %s", e)
        return 2

    print(outcome.value)
    return 0

if __name__ == "__main__":
    sys.exit(main())
