"""Command-line interface for metskit."""

import argparse
import logging
import sys
from pathlib import Path

from schemas.header import MetsHdr
from schemas.mets import Mets

from .exceptions import MetsError
from .idgen import IDGenerator
from .io import MetsReader, MetsWriter
from .validation import validate


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def new_document(args: argparse.Namespace) -> int:
    """Execute the new command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    objid = args.objid or IDGenerator().mint()
    mets = Mets(
        objid=objid,
        label=args.label,
        type=args.type,
        mets_hdr=MetsHdr(),
    )

    try:
        path = MetsWriter().write_file(mets, args.output)
    except (OSError, MetsError) as e:
        logger.error(f"Failed to write METS document: {e}")
        return 1

    logger.info(f"Created METS document {objid}")
    logger.info(f"  Output: {path}")
    return 0


def normalize(args: argparse.Namespace) -> int:
    """Execute the normalize command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    input_path = args.input.resolve()
    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        return 1

    try:
        mets = MetsReader().read_file(input_path)
        path = MetsWriter().write_file(mets, args.output)
    except (OSError, MetsError) as e:
        logger.error(f"Failed to normalize {input_path}: {e}")
        return 1

    logger.info(f"  Output: {path}")
    return 0


def validate_document(args: argparse.Namespace) -> int:
    """Execute the validate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when the document is consistent, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    input_path = args.input.resolve()
    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        return 1

    try:
        mets = MetsReader().read_file(input_path)
    except (OSError, MetsError) as e:
        logger.error(f"Failed to read {input_path}: {e}")
        return 1

    problems = validate(mets)
    if problems:
        logger.warning(f"Found {len(problems)} problem(s) in {input_path}")
        for problem in problems:
            logger.warning(f"  - {problem}")
        return 1

    logger.info(f"{input_path} is valid")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="metskit",
        description="Create, normalize and check METS documents",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    new_parser = subparsers.add_parser(
        "new",
        help="Write a minimal METS document",
        description="Write a METS document containing a header and one empty structMap.",
    )
    new_parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Path of the METS file to write",
    )
    new_parser.add_argument(
        "--objid",
        type=str,
        default=None,
        help="OBJID of the document (default: a generated ID)",
    )
    new_parser.add_argument(
        "--label",
        type=str,
        default=None,
        help="LABEL of the document",
    )
    new_parser.add_argument(
        "--type",
        type=str,
        default=None,
        help="TYPE of the document",
    )
    new_parser.set_defaults(func=new_document)

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Read a METS document and write it back out",
        description=(
            "Read a METS document and rewrite it, updating the header dates "
            "and adding any mandatory sections that are missing."
        ),
    )
    normalize_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path of the METS file to read",
    )
    normalize_parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Path of the METS file to write",
    )
    normalize_parser.set_defaults(func=normalize)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a METS document for broken references",
        description=(
            "Read a METS document and report duplicate IDs, unresolved "
            "ADMID/DMDID/FILEID references and malformed metadata sections."
        ),
    )
    validate_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path of the METS file to check",
    )
    validate_parser.set_defaults(func=validate_document)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
