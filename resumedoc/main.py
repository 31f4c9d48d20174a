import argparse
import sys

from resumedoc.cmd import cmd_convert, cmd_new, cmd_pdf
from resumedoc.export import Format
from resumedoc.shared import PaperSize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert resumes between JSON, YAML, Markdown, HTML and PDF."
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    convert_parser = subparsers.add_parser("convert", help="Convert resume files")
    convert_parser.add_argument(
        "inputs",
        nargs="+",
        help="Input files (.json, .yaml, .yml, .md, .markdown, .html, .htm)",
    )
    convert_parser.add_argument(
        "-t",
        "--to",
        required=True,
        choices=[f.value for f in Format],
        help="Target format",
    )
    convert_parser.add_argument(
        "-o",
        "--output",
        help="Output file, or output directory when converting several inputs "
        "(default: a file named after the resume title)",
    )
    convert_parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Insert field values into HTML without escaping",
    )
    convert_parser.add_argument(
        "--overwrite", action="store_true", help="Overwrite existing files"
    )
    convert_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    convert_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )

    pdf_parser = subparsers.add_parser("pdf", help="Export a resume to PDF")
    pdf_parser.add_argument("input", help="Input resume file")
    pdf_parser.add_argument(
        "-o", "--output", help="Output PDF path (default: named after the resume title)"
    )
    pdf_parser.add_argument(
        "--font",
        default="Helvetica",
        help="Font family: Helvetica, Times or Courier (default: Helvetica)",
    )
    pdf_parser.add_argument(
        "-s",
        "--size",
        default="A4",
        help=f"Page size (default: A4, one of {', '.join(s.name for s in PaperSize)})",
    )
    pdf_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    new_parser = subparsers.add_parser("new", help="Create a starter resume")
    new_parser.add_argument(
        "-o",
        "--output",
        default="resume.json",
        help="Output path; the suffix picks the format (default: resume.json)",
    )
    new_parser.add_argument(
        "--blank", action="store_true", help="Start from an empty template"
    )
    new_parser.add_argument("--title", help="Resume title")
    new_parser.add_argument(
        "--overwrite", action="store_true", help="Overwrite existing files"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "convert":
        return cmd_convert(args)
    elif args.command == "pdf":
        return cmd_pdf(args)
    elif args.command == "new":
        return cmd_new(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
