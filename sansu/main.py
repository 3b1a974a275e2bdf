import sys
from typing import TextIO

import click

from sansu.errors import SansuError
from sansu.helper import describe_error, format_number
from sansu.parse import evaluate


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
def main(filename: TextIO, output: TextIO):
    expression = filename.read().rstrip("\r\n")
    try:
        result = evaluate(expression)
    except SansuError as e:
        click.echo(describe_error(e), err=True, nl=False)
        sys.exit(1)

    click.echo(f"Result = {format_number(result)}", file=output)


if __name__ == "__main__":
    main()
