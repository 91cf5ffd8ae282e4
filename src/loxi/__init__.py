#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import List, Optional

from loxi.lox import ExitCode, Lox


def main(argv: Optional[List[str]] = None) -> None:
    """Main entrypoint for the loxi command.

    This function is invoked if this __init__.py is executed directly, or via
    the loxi CLI entrypoint.

    With no arguments it will start an interactive prompt, parsing one
    expression per line.

    If the argument is a file, its expression will be parsed and printed.

    Otherwise, the following commands are provided:
    loxi run_prompt <- Run the interactive prompt
    loxi run <source_or_stdin> <- Parse a source string and print it, - for stdin.
    loxi run_file <file> <- Parse a Lox source at a given path and print it.
    loxi tokens <file> <- Scan a Lox source at a given path and print its tokens.

    Args:
        argv: Optional[List[str]]. Command line, including the program name.
            Defaults to sys.argv.
    """

    if argv is None:
        argv = sys.argv

    # First argument in argv is always the script itself in Python
    if len(argv) == 2:
        if argv[1] == "run_prompt":
            run_prompt()
            return

        run_file(argv[1])
    elif len(argv) == 3:
        command = argv[1]
        match command:
            case "run":
                source = argv[2]
                if source == "-":
                    try:
                        source = sys.stdin.read()
                    except KeyboardInterrupt:
                        return

                run(source)
            case "run_file":
                run_file(argv[2])
            case "tokens":
                print_tokens(argv[2])
            case _:
                print(f"unrecognized command: {command}", file=sys.stderr)
                sys.exit(ExitCode.NO_INPUT)

    elif len(argv) > 3:
        print("Usage: loxi [command] [script]")
        sys.exit(ExitCode.USAGE)
    else:
        run_prompt()


def read_source(path: str) -> str:
    script_path = Path(path)
    if not script_path.exists():
        print(f"File at {script_path} not found", file=sys.stderr)
        sys.exit(ExitCode.NO_INPUT)

    return script_path.read_text()


def run_file(path: str) -> None:
    lox = Lox()
    lox.run(read_source(path))

    # Indicate an error in the exit code.
    if lox.had_error:
        sys.exit(ExitCode.DATA_ERROR)


def run_prompt() -> None:
    lox = Lox()
    try:
        while True:
            line = input("> ")

            if not line:
                break

            lox.run(line)

            # Reset error flag since this is an interactive session.
            lox.reset()
    except (KeyboardInterrupt, EOFError):
        return


def run(source: str) -> None:
    Lox().run(source)


def print_tokens(path: str) -> None:
    lox = Lox()
    if not lox.print_tokens(read_source(path)):
        sys.exit(ExitCode.DATA_ERROR)


if __name__ == "__main__":
    main()
