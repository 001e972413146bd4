import argparse
import logging
import sys

from PyQt5.QtWidgets import QApplication

from inkmark.config import load_settings
from inkmark.ui import MainWindow


def parse_args(argv):
    parser = argparse.ArgumentParser(prog="inkmark", description="Annotate PDF documents.")
    parser.add_argument("file", nargs="?", help="PDF file to open")
    parser.add_argument("--settings", help="Path to a settings.json file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Run the Inkmark PDF application.
    Opens the PDF given on the command line, if any.
    """
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = load_settings(args.settings)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])
    window = MainWindow(args.file, settings)
    window.showMaximized()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
