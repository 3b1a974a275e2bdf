import typer

from sansu.errors import SansuError
from sansu.helper import describe_error, format_number
from sansu.parse import evaluate
from sansu.token import Token
from sansu.tokenize import tokenize

app = typer.Typer()


def format_token(token: Token) -> str:
    return f"{token.kind.name} {token.text!r} {token.location}"


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: str,
    tokens: bool = typer.Option(False, "--tokens", help="Print the token stream"),
):
    try:
        if tokens:
            for token in tokenize(expression):
                typer.echo(format_token(token))
            return
        result = evaluate(expression)
    except SansuError as e:
        typer.echo(describe_error(e), err=True, nl=False)
        raise typer.Exit(1)
    typer.echo(f"Result = {format_number(result)}")


if __name__ == "__main__":
    app()
