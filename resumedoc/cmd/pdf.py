"""Resume to PDF export command."""

import argparse
from pathlib import Path

from resumedoc.cmd.convert import load_input
from resumedoc.export import Format, ResumePDFGenerator, default_output_path
from resumedoc.shared import Color, InvalidPaperSizeError, PaperSize, echo


def cmd_pdf(args: argparse.Namespace) -> int:
    """Handle resume to PDF export."""
    try:
        paper_size = PaperSize.from_string(args.size)
    except InvalidPaperSizeError as e:
        echo(str(e), Color.ERROR)
        return 1

    doc = load_input(Path(args.input), verbose=args.verbose)
    if doc is None:
        return 1

    output_path = Path(args.output) if args.output else default_output_path(doc, Format.PDF)

    try:
        generator = ResumePDFGenerator(
            font_name=args.font,
            paper_size=paper_size,
            verbose=args.verbose,
        )
        generator.generate(doc, output_path)
    except Exception as e:
        echo(f"PDF generation failed: {e}", Color.ERROR)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    echo(f"Resume PDF created: {output_path}", Color.SUCCESS)
    return 0
