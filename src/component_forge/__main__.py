"""
Command-line host.

    component-forge generate "Create a pricing card component" --storybook --mock-data
    component-forge format "a login form"
    component-forge serve --port 8765
"""

import argparse
import getpass
import sys
from pathlib import Path

from .agents import ComponentService, DescriptionFormatter
from .core import (
    FormatRequest,
    GenerationRequest,
    ImageStaging,
    MissingCredentialError,
    ValidationError,
    configure_logging,
    create_container,
    get_logger,
    get_settings,
)

logger = get_logger(__name__)


def prompt_api_key() -> str | None:
    try:
        return getpass.getpass("Please enter your Gemini API key: ")
    except (EOFError, KeyboardInterrupt):
        return None


def prompt_folder() -> Path | None:
    """Ask for a components directory; empty answer means cancel."""
    try:
        answer = input("No components directory found. Folder to use (empty for ./components): ").strip()
    except (EOFError, KeyboardInterrupt):
        return None
    return Path(answer).expanduser() if answer else None


def _add_workspace_option(parser: argparse.ArgumentParser, default: object) -> None:
    parser.add_argument(
        "--workspace", type=Path, default=default, help="Workspace root (default: current directory)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="component-forge",
        description="Generate React + TypeScript components from a description",
    )
    _add_workspace_option(parser, None)
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a component")
    gen.add_argument("description", help="What the component should look like and do")
    gen.add_argument("--image", type=Path, help="Reference image (PNG)")
    gen.add_argument("--storybook", action="store_true", help="Also write <Name>.stories.tsx")
    gen.add_argument("--mock-data", action="store_true", help="Also write <Name>.mock.ts")
    gen.add_argument("--output", type=Path, help="Components directory to write into")
    gen.add_argument("--no-write", action="store_true", help="Print the component instead of writing files")
    # Accepted after the subcommand as well; SUPPRESS keeps an earlier value
    _add_workspace_option(gen, argparse.SUPPRESS)

    fmt = sub.add_parser("format", help="Rewrite a description in more detail")
    fmt.add_argument("description")
    _add_workspace_option(fmt, argparse.SUPPRESS)

    serve = sub.add_parser("serve", help="Run the panel server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    _add_workspace_option(serve, argparse.SUPPRESS)
    return parser


def _generate(args: argparse.Namespace, service: ComponentService) -> int:
    image = args.image.read_bytes() if args.image else None
    request = GenerationRequest(
        description=args.description,
        reference_image=image,
        want_storybook=args.storybook,
        want_mock_data=args.mock_data,
        create_file=not args.no_write,
        output_path=args.output,
    )
    with ImageStaging() as staging:
        outcome = service.run(request, staging)

    if args.no_write:
        print(outcome.result.component_code)
        return 0
    if outcome.write_error:
        # Files may be partially written; the generated code stays visible
        print(outcome.result.component_code)
        print(
            f'Error: component "{outcome.result.component_name}" was generated but not written: '
            f"{outcome.write_error}",
            file=sys.stderr,
        )
        return 1
    print(f'Component "{outcome.result.component_name}" generated successfully')
    for path in outcome.written.files if outcome.written else []:
        print(f"  {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    updates = {}
    if args.workspace:
        updates["workspace_root"] = args.workspace
    if args.log_level:
        updates["log_level"] = args.log_level
    if args.command == "serve":
        if args.host:
            updates["host"] = args.host
        if args.port:
            updates["port"] = args.port
    if updates:
        settings = settings.model_copy(update=updates)

    configure_logging(settings.log_level, settings.json_logs)

    if args.command == "serve":
        from .main import run

        run(settings, choose_folder=prompt_folder)
        return 0

    container = create_container(settings, key_prompt=prompt_api_key, choose_folder=prompt_folder)
    try:
        if args.command == "generate":
            return _generate(args, container.get(ComponentService))
        formatted = container.get(DescriptionFormatter).format(FormatRequest(text=args.description))
        print(formatted)
        return 0
    except (ValidationError, MissingCredentialError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
