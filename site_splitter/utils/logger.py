# site_splitter/utils/logger.py

import sys


class Log:
    """
    Console Logger with Colors using ANSI Escape Codes.
    Colors are only emitted when stdout is a terminal, so redirected
    output and captured test output stay plain.
    """

    # ANSI Colors
    HEADER = '\033[95m'      # Purple
    BLUE = '\033[94m'        # Blue
    CYAN = '\033[96m'        # Cyan
    GREEN = '\033[92m'       # Green
    WARNING = '\033[93m'     # Yellow
    FAIL = '\033[91m'        # Red
    BOLD = '\033[1m'         # Bold
    RESET = '\033[0m'        # Reset to default

    # -v/--verbose 옵션으로 활성화
    verbose = False

    @staticmethod
    def paint(color: str, text: str) -> str:
        if not sys.stdout.isatty():
            return text
        return f"{color}{text}{Log.RESET}"

    @staticmethod
    def info(msg: str):
        """General information (White/Default)"""
        print(f"  [Info] {msg}")

    @staticmethod
    def trace(msg: str):
        """Lifecycle tracing (Cyan), verbose mode only"""
        if Log.verbose:
            print(Log.paint(Log.CYAN, f"  [Trace] {msg}"))

    @staticmethod
    def success(msg: str):
        """Success messages (Green)"""
        print(Log.paint(Log.GREEN, f"[Success] {msg}"))

    @staticmethod
    def warning(msg: str):
        """Warning messages (Yellow)"""
        print(Log.paint(Log.WARNING, f"[Warning] {msg}"))

    @staticmethod
    def error(msg: str):
        """Error messages (Red)"""
        print(Log.paint(Log.FAIL, f"  [Error] {msg}"))

    @staticmethod
    def performance(msg: str):
        """Performance metrics (Purple)"""
        print(Log.paint(Log.HEADER, f"  [Perf]  {msg}"))

    @staticmethod
    def section(msg: str):
        """Section Divider (Bold Blue)"""
        print("\n" + Log.paint(Log.BLUE + Log.BOLD, f"=== {msg} ==="))
