"""
Command-line entry point.

Usage:
    calc 3 + 4              prints 7
    calc 10 - 3 - 2         prints 5
    calc 2 + 3 x 4          prints 14

Each token is a separate argument. Multiplication is "x" so that the shell does
not expand it. The result is printed on stdout with exit status 0; any error is
printed as a single "Error! ..." line with a nonzero exit status.
"""
import sys
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from postfix_calc.common.config import Settings
from postfix_calc.common.logger import configure_logging, logger
from postfix_calc.common.operations import OperationRequest
from postfix_calc.engine.calculation import Calculation


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    tokens : List[str]
        Expression tokens, exactly as received from the shell.
    """

    tokens: List[str] = Field(default_factory=list)


def parse_args(argv: Optional[Sequence[str]] = None) -> CliArgs:
    """
    Collect expression tokens from the command line.

    argparse is not used: tokens such as "-3" or "-" would be taken for options.

    :param argv: Arguments without the program name; defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    if argv is None:
        argv = sys.argv[1:]
    return CliArgs(tokens=list(argv))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Evaluate the expression given on the command line.

    :param argv: Arguments without the program name; defaults to sys.argv[1:]
    :return: Process exit status
    :rtype: int
    """
    settings = Settings()
    configure_logging(settings.log_level)

    cli_args = parse_args(argv)
    request = OperationRequest(tokens=cli_args.tokens)
    outcome = Calculation(request=request).run()

    if outcome.succeeded:
        print(outcome.result)
        return 0

    print(f"Error! {outcome.error}")
    logger.debug(f"Exiting with status {settings.error_exit_code}")
    return settings.error_exit_code


if __name__ == "__main__":
    sys.exit(main())
