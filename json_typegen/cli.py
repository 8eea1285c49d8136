"""Command-line interface for json_typegen.

Loads a JSON sample from a file, URL or stdin and prints the generated
model code for the selected target language.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    ConfigError,
    GenerationResult,
    __version__,
    convert,
    get_identifier_policy,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    load_config,
)
from .codegen.core.config import GeneratorConfig, get_config_manager
from .codegen.core.naming import assign_names
from .codegen.core.schema import infer_type
from .codegen.registry import get_registry
from .logging_config import get_logger, setup_logging
from .tree_view import build_type_tree
from .utils import JSONLoaderError, load_json, load_json_from_stream

logger = get_logger(__name__)

# rich Syntax lexer names per target
SYNTAX_LEXERS = {
    "typescript": "typescript",
    "java": "java",
    "flutter": "dart",
    "swift": "swift",
    "go": "go",
    "kotlin": "kotlin",
}


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="json-typegen",
        description="Generate typed model code from a sample JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json-typegen data.json --target go
  json-typegen --url https://example.com/user.json -t kotlin -r User
  json-typegen --stdin -t swift -o Models.swift < data.json
  json-typegen --list-targets
        """.strip(),
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument("file", nargs="?", help="JSON file to convert")
    input_group.add_argument("--url", help="URL to fetch JSON from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read JSON from standard input"
    )

    generation = parser.add_argument_group("code generation")
    generation.add_argument(
        "--target",
        "-t",
        default="typescript",
        metavar="LANGUAGE",
        help="Target language or alias (default: typescript)",
    )
    generation.add_argument(
        "--root-name",
        "-r",
        default="Root",
        metavar="NAME",
        help="Name for the root type (default: Root)",
    )
    generation.add_argument(
        "--output", "-o", metavar="FILE", help="Output file (default: stdout)"
    )
    generation.add_argument(
        "--config", metavar="FILE", help="JSON configuration file"
    )
    generation.add_argument(
        "--save-config",
        metavar="FILE",
        help="Write the effective settings to a JSON configuration file",
    )
    generation.add_argument(
        "--package-name",
        metavar="NAME",
        help="Package name (Go, Java, Kotlin)",
    )
    generation.add_argument(
        "--indent-size", type=int, metavar="N", help="Spaces per indent level"
    )
    generation.add_argument(
        "--tabs", action="store_true", default=None, help="Indent with tabs"
    )
    generation.add_argument(
        "--comments",
        action="store_true",
        default=None,
        help="Comment fields whose type could not be inferred",
    )
    generation.add_argument(
        "--unique-names",
        action="store_true",
        default=None,
        help="Suffix a counter onto repeated nested type names",
    )
    generation.add_argument(
        "--max-depth", type=int, metavar="N", help="Maximum nesting depth"
    )

    info = parser.add_argument_group("information")
    info.add_argument(
        "--list-targets",
        action="store_true",
        help="List supported target languages and exit",
    )
    info.add_argument(
        "--show-tree",
        action="store_true",
        help="Print the inferred type tree",
    )
    info.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata",
    )
    info.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


class CodegenCLI:
    """Handle one command-line invocation."""

    def __init__(
        self, console: Console | None = None, err_console: Console | None = None
    ) -> None:
        # Code goes to stdout; everything else to stderr
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def run(self, args: argparse.Namespace) -> int:
        """Run the command.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if args.list_targets:
            return self.list_targets()

        if not is_language_supported(args.target):
            self.err_console.print(f"[red]✗ Unsupported target '{args.target}'[/red]")
            self.err_console.print(
                f"[dim]Supported targets: {', '.join(list_supported_languages())}[/dim]"
            )
            return 1
        language = get_registry().resolve(args.target)

        try:
            source, data = self._load_input(args)
            config = self._build_config(args, language)
            if args.save_config:
                get_config_manager().save_config(config, args.save_config)
                self.err_console.print(
                    f"[green]✓[/green] Saved {language} settings to "
                    f"[cyan]{args.save_config}[/cyan]"
                )
        except (JSONLoaderError, ConfigError) as e:
            self.err_console.print(f"[red]✗ Error:[/red] {e}")
            logger.debug("Failed to prepare conversion", exc_info=True)
            return 1

        logger.info("Converting %s to %s", source, language)
        result = convert(data, args.root_name, language, config)

        if not result.success:
            self.err_console.print(
                f"[red]✗ Code generation failed:[/red] {result.error_message}"
            )
            return 1

        if args.show_tree:
            self._show_tree(data, args.root_name, language, config)

        if not self._write_output(result, language, args.output):
            return 1

        if args.verbose:
            self._show_metadata(result)

        if result.warnings:
            self.err_console.print("[yellow]⚠️  Warnings:[/yellow]")
            for warning in result.warnings:
                self.err_console.print(f"  [yellow]•[/yellow] {warning}")

        return 0

    def _load_input(self, args: argparse.Namespace) -> tuple[str, Any]:
        if args.stdin:
            return load_json_from_stream(sys.stdin)
        if args.file or args.url:
            return load_json(file_path=args.file, url=args.url)
        raise JSONLoaderError("Input source required (FILE, --url, or --stdin)")

    def _build_config(self, args: argparse.Namespace, language: str) -> GeneratorConfig:
        """Merge language defaults, the config file and CLI overrides."""
        overrides = {
            "package_name": args.package_name,
            "indent_size": args.indent_size,
            "use_tabs": args.tabs,
            "add_comments": args.comments,
            "unique_type_names": args.unique_names,
            "max_depth": args.max_depth,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}
        return load_config(language, overrides, args.config)

    def _show_tree(
        self, data: Any, root_name: str, language: str, config: GeneratorConfig
    ) -> None:
        tree = infer_type(data, config.max_depth)
        binding = assign_names(
            tree, root_name, get_identifier_policy(language), config.unique_type_names
        )
        self.err_console.print(build_type_tree(tree, binding, root_name))

    def _write_output(
        self, result: GenerationResult, language: str, output: str | None
    ) -> bool:
        if output:
            output_path = Path(output)
            try:
                output_path.write_text(result.code, encoding="utf-8")
            except OSError as e:
                self.err_console.print(
                    f"[red]✗ Failed to write to {output_path}:[/red] {e}"
                )
                return False
            self.err_console.print(
                f"[green]✓[/green] Generated {language} code saved to "
                f"[cyan]{output_path}[/cyan]"
            )
        elif self.console.is_terminal:
            self.console.print(
                Syntax(result.code, SYNTAX_LEXERS.get(language, language), theme="monokai")
            )
        else:
            # Piped output stays plain
            self.console.file.write(result.code)
        return True

    def _show_metadata(self, result: GenerationResult) -> None:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        self.err_console.print(metadata_table)

    def list_targets(self) -> int:
        """Print a table of supported targets."""
        table = Table(
            title="📋 Supported Targets", box=box.ROUNDED, title_style="bold cyan"
        )
        table.add_column("Target", style="bold green", no_wrap=True)
        table.add_column("Extension", style="cyan")
        table.add_column("Aliases", style="blue")
        table.add_column("Field names", style="magenta")
        table.add_column("Escaping", style="dim")

        for name, info in list_all_language_info().items():
            aliases = ", ".join(info["aliases"]) if info["aliases"] else "-"
            table.add_row(
                name,
                info["file_extension"],
                aliases,
                info["identifier_case"],
                info["escape_rule"],
            )

        self.console.print(table)
        self.console.print(
            Panel(
                "[bold]Usage:[/bold] json-typegen [dim]input.json[/dim] "
                "--target [cyan]TARGET[/cyan] --root-name [cyan]NAME[/cyan]",
                title="💡 Quick Start",
                border_style="blue",
            )
        )
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the json-typegen command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return CodegenCLI().run(args)


if __name__ == "__main__":
    sys.exit(main())
