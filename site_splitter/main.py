# site_splitter/main.py
import sys
import traceback
from typing import Optional

import click

from site_splitter.processors import ExportCombiner, ExportSplitter
from site_splitter.utils import Log, measure_time

INVALID_ARGUMENTS = "❌ Invalid arguments!"


# ==========================================
# 1. 글로벌 예외 핸들러 정의
# ==========================================
def global_exception_handler(exc_type, exc_value, exc_traceback):
    """
    프로그램 내에서 잡히지 않은(Uncaught) 모든 예외를 여기서 처리합니다.
    """
    if issubclass(exc_type, KeyboardInterrupt):
        Log.warning("Interrupted by user (KeyboardInterrupt)")
        return

    error_msg = f"{exc_type.__name__}: {exc_value}"
    Log.error(f"Aborted by an unexpected error.\n{'-'*60}")

    traceback_details = "".join(traceback.format_tb(exc_traceback))
    print(Log.paint(Log.FAIL, f"{traceback_details}{error_msg}"))
    print(f"{'-'*60}")


# ==========================================
# 2. Dispatcher
# ==========================================
@measure_time
def execute(convert: Optional[str], prefix: bool, source: Optional[str]) -> bool:
    """Run the splitter (-c) or the combiner (-s). Returns False on bad arguments."""
    if convert is not None:
        ExportSplitter().run(convert, apply_prefix=prefix)
    elif source is not None:
        ExportCombiner().run(source)
    else:
        click.echo(INVALID_ARGUMENTS)
        return False
    return True


class LenientCommand(click.Command):
    """
    Usage errors (missing option value, unknown flag, extra arguments) are not
    a process failure: parameters fall back to their defaults and the
    dispatcher prints the invalid arguments message.
    """

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            Log.trace(f"Usage error: {e.format_message()}")
            ctx.params = {
                param.name: param.default
                for param in self.get_params(ctx)
                if param.expose_value
            }
            ctx.args = []
            return []


@click.command(cls=LenientCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-c", "--convert", "convert", default=None, metavar="NAME",
              help="Split NAME.json into the directory NAME")
@click.option("-p", "--prefix", is_flag=True, default=False,
              help="Prefix split files with their position (use with -c)")
@click.option("-s", "--source", "source", default=None, metavar="DIR",
              help="Combine the directory DIR into gen-DIR.json")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show trace output")
def cli(convert: Optional[str], prefix: bool, source: Optional[str], verbose: bool) -> None:
    """Split a site customization export into per-site files, and back."""
    Log.verbose = verbose
    execute(convert, prefix, source)


def main():
    # 예외 훅 등록
    sys.excepthook = global_exception_handler
    cli()


if __name__ == "__main__":
    main()
