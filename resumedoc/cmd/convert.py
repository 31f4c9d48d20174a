"""Conversion command between JSON, YAML, Markdown, HTML and PDF."""

import argparse
import json
from pathlib import Path

import yaml
from pydantic import ValidationError
from tqdm import tqdm

from resumedoc.document import ResumeDocument
from resumedoc.document.html_format import PARSE_ERROR_TITLE
from resumedoc.export import Format, default_output_path, load_document, save_document
from resumedoc.shared import (
    Color,
    FileAlreadyExistsError,
    UnsupportedFormatError,
    echo,
)


def load_input(input_path: Path, verbose: bool = False) -> ResumeDocument | None:
    """Load a document, reporting problems instead of raising."""
    if not input_path.exists():
        echo(f"Input file not found: {input_path}", Color.ERROR)
        return None

    try:
        doc = load_document(input_path)
    except UnsupportedFormatError as e:
        echo(str(e), Color.ERROR)
        return None
    except json.JSONDecodeError as e:
        echo(f"Invalid JSON: {e}", Color.ERROR)
        return None
    except yaml.YAMLError as e:
        echo(f"Invalid YAML: {e}", Color.ERROR)
        return None
    except ValidationError as e:
        echo("Resume validation failed:", Color.ERROR)
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            echo(f"  {loc}: {error['msg']}", Color.ERROR)
        return None

    if doc.title == PARSE_ERROR_TITLE:
        echo(f"{input_path} could not be parsed as HTML", Color.WARNING)
    elif verbose:
        echo(f"Loaded {input_path}: {len(doc.sections)} section(s)", Color.INFO)
    return doc


def _output_path(doc: ResumeDocument, target: Format, args: argparse.Namespace, single: bool) -> Path:
    if single and args.output:
        return Path(args.output)
    directory = Path(args.output) if args.output else Path(".")
    return default_output_path(doc, target, directory)


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle conversion of one or more resume files."""
    target = Format(args.to)
    inputs = [Path(p) for p in args.inputs]
    single = len(inputs) == 1

    if not single and args.output and Path(args.output).is_file():
        echo(f"Output must be a directory when converting several files: {args.output}", Color.ERROR)
        return 1

    written: list[str] = []
    failures = 0

    for input_path in tqdm(inputs, desc="Converting", disable=single):
        doc = load_input(input_path, verbose=args.verbose)
        if doc is None:
            failures += 1
            continue

        output_path = _output_path(doc, target, args, single)
        try:
            if output_path.exists() and not args.overwrite:
                raise FileAlreadyExistsError(str(output_path))
            save_document(doc, output_path, target, escape=not args.no_escape)
        except FileAlreadyExistsError as e:
            echo(str(e), Color.ERROR)
            failures += 1
            continue
        except Exception as e:
            echo(f"Conversion failed for {input_path}: {e}", Color.ERROR)
            if args.verbose:
                import traceback

                traceback.print_exc()
            failures += 1
            continue

        written.append(str(output_path))
        if not args.json:
            echo(f"{input_path} -> {output_path}", Color.SUCCESS)

    if args.json:
        print(json.dumps({"written": written, "failed": failures}, indent=2))

    return 1 if failures else 0
