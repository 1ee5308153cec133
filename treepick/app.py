import argparse
import sys
from typing import Any, Dict, List, Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.utils import get_cwidth
from prompt_toolkit.widgets import Frame
from rich.console import Console
from rich.panel import Panel

from . import __version__
from .config.defaults import default_config
from .config.manager import ConfigManager
from .controller import InputController
from .loaders import FORMATS, DocumentLoadError, load_document
from .navigation import Navigator
from .navigation.matcher import CASE_SENSITIVITY_MODES
from .utils.constants import DEFAULT_CONFIG_DIR, HELP_MESSAGE

StyleFragments = List[Tuple[str, str]]


class PickerApp:
    """Full-screen picker over one document.

    The screen shows a help line, the breadcrumb followed by the filter being
    typed, and the candidates at the current level with the selection
    highlighted.
    """

    def __init__(self, document: Any, config: Optional[Dict[str, Any]] = None,
                 console: Optional[Console] = None):
        """Initialize the PickerApp.

        Args:
            document: Document to navigate
            config: Validated configuration (defaults when omitted)
            console: Rich console for status messages (defaults to stderr)
        """
        self.config = config or default_config()
        self.console = console or Console(stderr=True)
        self.navigator = Navigator(
            document, case_sensitivity=self.config["matching"]["caseSensitivity"]
        )
        self.controller = InputController(self.navigator)

    def filter_line(self) -> str:
        """Text of the filter line: the breadcrumb then the live filter."""
        return self.navigator.breadcrumb(include_filter=True)

    def candidate_fragments(self) -> StyleFragments:
        """Formatted text listing the current candidates, one per line."""
        window = self.navigator.choices()
        if window is None:
            return []
        before, selected, after = window

        fragments: StyleFragments = []
        for text in before:
            fragments.append(("class:candidate", f"{text}\n"))
        # Keeps the selection scrolled into view
        fragments.append(("[SetCursorPosition]", ""))
        fragments.append(("class:candidate.selected", f"{selected}\n"))
        for text in after:
            fragments.append(("class:candidate", f"{text}\n"))
        return fragments

    def _key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        controller = self.controller

        @kb.add("c-c")
        def _(event):
            event.app.exit(result=None)

        @kb.add("enter")
        def _(event):
            answer = controller.confirm()
            if answer is not None:
                event.app.exit(result=answer)

        @kb.add("c-u")
        def _(event):
            controller.clear_filter()

        @kb.add("c-j")
        @kb.add("down")
        def _(event):
            controller.select_next()

        @kb.add("c-k")
        @kb.add("up")
        def _(event):
            controller.select_prev()

        @kb.add("c-w")
        def _(event):
            controller.delete_word()

        @kb.add("backspace")
        def _(event):
            controller.backspace()

        @kb.add("<any>")
        def _(event):
            if event.data.isprintable():
                controller.insert_text(event.data)

        return kb

    def _style(self) -> Style:
        try:
            return Style.from_dict(self.config["style"])
        except ValueError as e:
            self.console.print(Panel(
                f"[red]Invalid style in configuration:[/red]\n{str(e)}",
                title="Error", border_style="red", expand=False
            ))
            return Style.from_dict(default_config()["style"])

    def _layout(self) -> Layout:
        filter_window = Window(
            FormattedTextControl(
                lambda: [("class:filter", self.filter_line())],
                get_cursor_position=lambda: Point(x=get_cwidth(self.filter_line()), y=0),
                show_cursor=True,
                focusable=True,
            ),
            height=1,
        )
        matches_window = Window(FormattedTextControl(self.candidate_fragments))

        rows = []
        if self.config["displaySettings"]["showHelp"]:
            rows.append(Window(FormattedTextControl(HELP_MESSAGE), height=1))
        rows.append(Frame(filter_window, title="Filter"))
        rows.append(Frame(matches_window, title="Matches"))
        return Layout(HSplit(rows), focused_element=filter_window)

    def build_application(self, input=None, output=None) -> Application:
        return Application(
            layout=self._layout(),
            key_bindings=self._key_bindings(),
            style=self._style(),
            full_screen=True,
            input=input,
            output=output,
        )

    def run(self, input=None, output=None) -> Optional[str]:
        """Run the picker until a final value is chosen or the user exits.

        Args:
            input: prompt_toolkit input to read keys from (terminal when omitted)
            output: prompt_toolkit output to draw on (terminal when omitted)

        Returns:
            The breadcrumb naming the chosen value, or None if cancelled
        """
        try:
            return self.build_application(input, output).run()
        except (KeyboardInterrupt, EOFError):
            return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treepick",
        description="Pick a value from a JSON or tree file by fuzzy filtering each level"
    )
    parser.add_argument("input_file", help="JSON or indented tree file to navigate")
    parser.add_argument("--format", choices=FORMATS, default="auto",
                        help="Input format. Default: decided from the file extension")
    parser.add_argument("--case", choices=CASE_SENSITIVITY_MODES,
                        help="Case sensitivity of the filter. Default: from configuration ('smart')")
    parser.add_argument("--config", default=None,
                        help=f"Name of a configuration in {DEFAULT_CONFIG_DIR}")
    parser.add_argument("--save-config", metavar="NAME", nargs="?", const="default", default=None,
                        help="Save the effective settings under NAME (default: 'default') before starting")
    parser.add_argument("--reset-config", action="store_true", default=False,
                        help="Start from the default settings instead of any saved configuration")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace, config_manager: ConfigManager) -> Dict[str, Any]:
    """Resolve the configuration, command line flags taking precedence."""
    if args.reset_config:
        config = config_manager.reset_configuration()
    elif args.config:
        config = config_manager.load_configuration(args.config)
    elif config_manager.config_exists("default"):
        config = config_manager.load_configuration("default")
    else:
        config = default_config()

    if args.case:
        config["matching"]["caseSensitivity"] = args.case

    if args.save_config:
        config_manager.save_configuration(config, args.save_config)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    console = Console(stderr=True)
    config = load_settings(args, ConfigManager(console))

    try:
        document = load_document(args.input_file, args.format)
    except DocumentLoadError as e:
        console.print(Panel(
            f"[bold red]Could not load[/bold red] [blue]{e.path}[/blue]\n\n{str(e.cause)}",
            title="Error", border_style="red", expand=False
        ))
        return 1

    answer = PickerApp(document, config, console).run()
    if answer is None:
        return 1

    # Written verbatim, the answer is meant to be captured by a shell
    sys.stdout.write(answer + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
