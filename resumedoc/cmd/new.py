"""Starter document command."""

import argparse
from pathlib import Path

from resumedoc.document.templates import blank_document, sample_document
from resumedoc.export import Format, save_document
from resumedoc.shared import Color, FileAlreadyExistsError, UnsupportedFormatError, echo


def cmd_new(args: argparse.Namespace) -> int:
    """Write a blank or sample resume in the format implied by the output suffix."""
    output_path = Path(args.output)

    try:
        fmt = Format.from_path(output_path)
        if output_path.exists() and not args.overwrite:
            raise FileAlreadyExistsError(str(output_path))
    except (UnsupportedFormatError, FileAlreadyExistsError) as e:
        echo(str(e), Color.ERROR)
        return 1

    if args.blank:
        doc = blank_document(args.title) if args.title else blank_document()
    else:
        doc = sample_document()
        if args.title:
            doc.title = args.title

    save_document(doc, output_path, fmt)
    echo(f"Created {output_path}", Color.SUCCESS)
    return 0
