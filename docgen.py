import argparse
import json
import logging
import sys
from pathlib import Path

from apidocs.choice import FormatChoice, prompt_format_choice
from apidocs.config import load_settings
from apidocs.delivery import export_with_choice, write_document
from apidocs.errors import ApiDocsError, DeliveryError, ValidationError
from apidocs.examples import example_record
from apidocs.exports import EXPORT_FORMATS, NOTHING_TO_EXPORT, build_export, render, render_formats
from apidocs.infer import infer_record
from apidocs.loader import load_records

logger = logging.getLogger("docgen")


def _read_payload(path):
    """Read an example payload file; JSON when it parses, raw text otherwise."""
    if path is None:
        return None
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValidationError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    try:
        return json.loads(text)
    except ValueError:
        return text


def _emit(content: str, output) -> None:
    if output is None:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
        return
    path = Path(output)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise DeliveryError(f"Failed to write {path}: {exc.strerror or exc}") from exc
    print(f"Wrote {path}")


def cmd_render(args: argparse.Namespace) -> int:
    """Render a records file in the selected format.

    The format can be any registered renderer or ``json``.  Output goes to
    stdout unless ``-o`` is given.
    """
    records = load_records(Path(args.file))
    _emit(render(records, args.format, title=args.title), args.output)
    return 0


def cmd_example(args: argparse.Namespace) -> int:
    """Render the canned example endpoint."""
    _emit(render([example_record()], args.format, title=args.title), args.output)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Write an export file under its standard filename.

    Without ``--format`` the user is asked to choose; dismissing the
    choice writes nothing and is not an error.
    """
    records = load_records(Path(args.file))
    directory = Path(args.directory) if args.directory else args.settings.output_dir

    if args.format:
        document = build_export(records, args.format, title=args.title)
        path = write_document(document, directory)
    else:
        if not records:
            raise ValidationError(NOTHING_TO_EXPORT)
        choice = prompt_format_choice(FormatChoice())
        path = export_with_choice(records, choice, directory, title=args.title)
        if path is None:
            print("Export cancelled.")
            return 0

    print(f"Documentation exported to {path}")
    return 0


def cmd_infer(args: argparse.Namespace) -> int:
    """Build a record from example request/response payloads and print it as JSON."""
    record = infer_record(
        method=args.method,
        path=args.path,
        description=args.description or "",
        request=_read_payload(args.request),
        response=_read_payload(args.response),
        notes=args.notes,
    )
    _emit(render([record], "json"), args.output)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docgen.py",
        description="Render API endpoint documentation as HTML, Markdown, JSON or Word.",
    )

    # Global options
    parser.add_argument(
        "--title",
        default=None,
        help="Document title (default: APIDOCS_TITLE or 'API Documentation').",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: APIDOCS_LOG_LEVEL or WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command")

    # render subcommand
    render_cmd = subparsers.add_parser(
        "render",
        help="Render a documentation file in one format.",
    )
    render_cmd.add_argument("file", metavar="FILE", help="JSON or YAML records file.")
    render_cmd.add_argument(
        "--format",
        choices=render_formats(),
        default="md",
        help="Output format (default: md).",
    )
    render_cmd.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout.")
    render_cmd.set_defaults(func=cmd_render)

    # export subcommand
    export_cmd = subparsers.add_parser(
        "export",
        help="Export documentation to a file (asks for the format if not given).",
    )
    export_cmd.add_argument("file", metavar="FILE", help="JSON or YAML records file.")
    export_cmd.add_argument(
        "--format",
        choices=list(EXPORT_FORMATS),
        default=None,
        help="Export format; prompts when omitted.",
    )
    export_cmd.add_argument(
        "-d", "--directory",
        default=None,
        help="Output directory (default: APIDOCS_OUTPUT_DIR or current directory).",
    )
    export_cmd.set_defaults(func=cmd_export)

    # example subcommand
    example_cmd = subparsers.add_parser(
        "example",
        help="Render the built-in example endpoint.",
    )
    example_cmd.add_argument(
        "--format",
        choices=render_formats(),
        default="md",
        help="Output format (default: md).",
    )
    example_cmd.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout.")
    example_cmd.set_defaults(func=cmd_example)

    # infer subcommand
    infer_cmd = subparsers.add_parser(
        "infer",
        help="Describe an endpoint from example request/response payloads.",
    )
    infer_cmd.add_argument("--method", required=True, help="HTTP method, e.g. POST.")
    infer_cmd.add_argument("--path", required=True, help="Route path, e.g. /api/v1/orders.")
    infer_cmd.add_argument("--description", default="", help="Endpoint description.")
    infer_cmd.add_argument("--notes", default=None, help="Newline separated notes.")
    infer_cmd.add_argument("--request", default=None, help="File with an example request body.")
    infer_cmd.add_argument("--response", default=None, help="File with an example response body.")
    infer_cmd.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout.")
    infer_cmd.set_defaults(func=cmd_infer)

    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    settings = load_settings()
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.settings = settings
    if args.title is None:
        args.title = settings.title

    try:
        return args.func(args)
    except ApiDocsError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
