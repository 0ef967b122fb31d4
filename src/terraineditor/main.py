"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line (generator path, log level, log file).
2. Instantiates the Data Model (ProjectState) from the bundled or given defaults.
3. Resolves the river generator (external one, or the bundled demo).
4. Instantiates the Main Window and passes the model and generator into it.
"""
import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from terraineditor import config
from terraineditor.controller import demo_generator
from terraineditor.controller.generation import RiverGenerator, load_generator
from terraineditor.errors import GenerationError
from terraineditor.logging_config import setup_logging
from terraineditor.model.defaults import load_defaults
from terraineditor.model.state import ProjectState
from terraineditor.view.main_window import VISIBLE_APP_NAME, MainWindow

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terraineditor",
        description="Paint a slope map, shape a contour and preview the generated river network."
    )
    parser.add_argument(
        "--generator",
        default=os.environ.get(config.GENERATOR_ENV_VAR),
        help=(
            "River generator as 'package.module:function' "
            f"(default: ${config.GENERATOR_ENV_VAR}, else the bundled demo generator)"
        ),
    )
    parser.add_argument(
        "--defaults",
        default=None,
        help="JSON file with the initial slope map, contour and weights (default: bundled defaults)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser


def resolve_generator(path: Optional[str]) -> RiverGenerator:
    """Load the generator at `path`, or fall back to the demo generator when none is given."""
    if not path:
        logger.info("No river generator configured, using the demo generator.")
        return demo_generator.generate_river
    return load_generator(path)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Resolve the generator and the initial inputs before any window exists
    try:
        generator = resolve_generator(args.generator)
    except GenerationError as e:
        logger.error(str(e))
        parser.error(str(e))

    try:
        defaults = load_defaults(args.defaults)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot load defaults: {e}")
        parser.error(f"cannot load defaults: {e}")

    # 3. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(VISIBLE_APP_NAME)

    # 4. Initialize the Data Model
    project = ProjectState.from_defaults(defaults)

    # 5. Initialize the Main Window, passing the model
    window = MainWindow(project, generator)
    window.show()

    # 6. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
