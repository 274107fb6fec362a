"""
Main CLI entry point for the JSON / TOML / YAML converter.

Without arguments (or with --gui) this launches the three-pane live
converter. With --convert-file it converts a single file instead:
- Source format detected from the file suffix unless given
- Target format from --target-format or the --output suffix
- Dry-run mode prints the converted text, highlighted on a terminal

Usage:
    python -m json_toml_yaml.cli.main --gui --port 8080
    python -m json_toml_yaml.cli.main --convert-file pyproject.toml --target-format yaml
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from ..core.formats import ConversionError, DataFormat
from ..core.highlighter import DEFAULT_THEME, available_themes, highlight
from ..core.registry import FormatRegistry, default_registry

FORMAT_CHOICES = [fmt.value for fmt in DataFormat]


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description='Convert between JSON, TOML and YAML, live in a GUI or file by file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the live converter in a native window
  %(prog)s --gui --native

  # Convert a TOML file to YAML next to it (config.yaml)
  %(prog)s --convert-file config.toml --target-format yaml

  # Preview the JSON form of a YAML file without writing anything
  %(prog)s --convert-file compose.yml --target-format json --dry-run
        """
    )

    # Single-file conversion mode
    parser.add_argument(
        '--convert-file',
        type=Path,
        help='Single file to convert'
    )

    parser.add_argument(
        '--output',
        type=Path,
        help='Output file path (auto-generated from the target format if not specified)'
    )

    parser.add_argument(
        '--source-format',
        type=str,
        choices=FORMAT_CHOICES,
        help='Source format name (auto-detected from the file suffix if not specified)'
    )

    parser.add_argument(
        '--target-format',
        type=str,
        choices=FORMAT_CHOICES,
        help='Target format name (auto-detected from --output if not specified)'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the converted text instead of writing it'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output with detailed logging'
    )

    parser.add_argument(
        '--color',
        type=str,
        default='auto',
        choices=['auto', 'always', 'never'],
        help='Highlight dry-run output (default: auto, when writing to a terminal)'
    )

    parser.add_argument(
        '--theme',
        type=str,
        default=DEFAULT_THEME,
        help=f'Highlighting theme for terminal output (default: {DEFAULT_THEME})'
    )

    # GUI options
    parser.add_argument(
        '--gui',
        action='store_true',
        help='Launch the graphical user interface'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=8080,
        help='Port for the GUI server (default: 8080)'
    )

    parser.add_argument(
        '--native',
        action='store_true',
        help='Open the GUI in a native window instead of a browser tab'
    )

    parser.add_argument(
        '--editor-theme',
        type=str,
        default='oneDark',
        help='Editor theme for the GUI panes (default: oneDark)'
    )

    parser.add_argument(
        '--state-file',
        type=Path,
        help='Custom path for the UI state file (default: ~/.json_toml_yaml_state.json)'
    )

    return parser


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


def setup_registry() -> FormatRegistry:
    """
    Initialize format registry with all available adapters.

    Returns:
        FormatRegistry with registered adapters
    """
    return default_registry()


def use_color(args) -> bool:
    if args.color == 'always':
        return True
    if args.color == 'never':
        return False
    return sys.stdout.isatty()


def launch_gui(args) -> int:
    try:
        from ..gui.main import start as start_gui
    except ImportError as e:
        print(f"Error: Could not import GUI: {e}", file=sys.stderr)
        print("Ensure nicegui is installed: pip install nicegui", file=sys.stderr)
        return 1

    state_file = args.state_file.expanduser().resolve() if args.state_file else None
    try:
        start_gui(port=args.port, native=args.native,
                  editor_theme=args.editor_theme, state_file=state_file)
        return 0
    except Exception as e:
        print(f"Error launching GUI: {e}", file=sys.stderr)
        return 1


def convert_single_file(args) -> int:
    """
    Convert a single file from one format to another.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    registry = setup_registry()

    # 1. Validate source file
    source_file = args.convert_file.expanduser().resolve()
    if not source_file.exists():
        print(f"Error: File not found: {source_file}", file=sys.stderr)
        return 1
    if source_file.is_dir():
        print(f"Error: Path is a directory, not a file: {source_file}", file=sys.stderr)
        return 1

    # 2. Determine source adapter (explicit or auto-detect)
    if args.source_format:
        source_adapter = registry.get_adapter(args.source_format)
    else:
        source_adapter = registry.detect_format(source_file)
        if not source_adapter:
            print(f"Error: Cannot auto-detect format for: {source_file}", file=sys.stderr)
            return 1

    # 3. Determine target adapter (explicit or from output extension)
    if args.target_format:
        target_adapter = registry.get_adapter(args.target_format)
    elif args.output:
        target_adapter = registry.detect_format(args.output)
        if not target_adapter:
            print(f"Error: Cannot auto-detect target format from: {args.output}", file=sys.stderr)
            return 1
    else:
        print("Error: --target-format or --output required for conversion", file=sys.stderr)
        return 1

    # 4. Determine output path (explicit or auto-generate)
    if args.output:
        output_file = args.output.expanduser().resolve()
    else:
        output_file = source_file.with_suffix(target_adapter.file_extension)

    if output_file == source_file and not args.dry_run:
        print(f"Error: Output would overwrite the source file: {source_file}", file=sys.stderr)
        return 1

    # 5. Perform conversion
    try:
        if args.verbose:
            print(f"Converting {source_file} -> {output_file}")
            print(f"  Source format: {source_adapter.format_name}")
            print(f"  Target format: {target_adapter.format_name}")

        value = source_adapter.read(source_file)
        output_content = target_adapter.dumps(value)

        if args.dry_run:
            if args.verbose:
                print(f"Would write to: {output_file}")
            if use_color(args):
                job = highlight(output_content, target_adapter.format_name, args.theme)
                sys.stdout.write(job.to_ansi())
            else:
                sys.stdout.write(output_content)
            if not output_content.endswith('\n'):
                sys.stdout.write('\n')
            return 0

        # Write output
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(output_content)

        if args.verbose:
            print(f"Successfully converted to {output_file}")

        return 0

    except (ConversionError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc(file=sys.stderr)
        return 1


def main(argv: Optional[list] = None):
    """
    Main entry point for CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.theme not in available_themes():
        print(f"Error: Unknown theme: {args.theme}", file=sys.stderr)
        return 1

    # GUI launch conditions:
    # 1. Explicit --gui flag
    # 2. No file to convert (default to GUI)
    if args.gui or not args.convert_file:
        return launch_gui(args)

    return convert_single_file(args)


if __name__ == '__main__':
    sys.exit(main())
