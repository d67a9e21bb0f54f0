"""webfox CLI - httpie-style HTTP client: wx [FLAGS] [METHOD] URL [ITEM ...]."""

import sys

import click

PROG = "wx"
VERSION = "0.1.0"

USAGE = """\
usage: wx [FLAGS] [METHOD] URL [PARAM [PARAM ...]]

FLAGS:
    -f, --form        Encode body data as application/x-www-form-urlencoded
    -m, --multi       Send body as multipart/form-data
    -d, --debug       Print request headers and body
    -h, --help        Print this help message
    -v, --version     Print version information

    Short flags can be merged: -fd is -f -d.

METHOD:
    GET, HEAD, PUT, POST, DELETE, PATCH, OPTIONS, TRACE or CONNECT
    Defaults to POST if body data PARAM exists, otherwise GET.

URL:
    :3000/path        http://localhost:3000/path
    :/path            http://localhost/path
    example.com/path  http://example.com/path

PARAM:
    HTTP Header:        name:value  (e.g. Host:google.com)
    Query string:       name==value (e.g. q==search)
    Body data (string): name=value  (e.g. first=john)
    Body data (json):   name:=value (e.g. values:='[1,2,3]')

SETTINGS (.webfox.yaml, ~/.webfox/config.yaml or $WEBFOX_CONFIG):
    settings:
      timeout: 30          # seconds, or $WEBFOX_TIMEOUT
      verify: true         # TLS verification, or $WEBFOX_VERIFY
      strict_form: false   # reject name:=value with -f, or $WEBFOX_STRICT_FORM
      env_file: .env       # loaded before the overrides above

EXAMPLE:
    wx POST https://my.api.se/some X-API-KEY:badcat key=home count:=5
    wx https://google.com q=="batman movies"
"""


@click.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
    add_help_option=False,
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
def main(argv):
    """Build an HTTP request from the command line, send it, print the response."""
    from webfox.args import Command, parse_args
    from webfox.body import build_body
    from webfox.core import load_settings
    from webfox.errors import WebfoxError
    from webfox.executor import execute_request
    from webfox.output import format_body, format_head, format_request

    try:
        parsed = parse_args([PROG, *argv])
    except WebfoxError as e:
        click.echo(str(e), err=True)
        sys.exit(2)

    if parsed.command is Command.PRINT_HELP:
        click.echo(USAGE)
        return

    if parsed.command is Command.PRINT_VERSION:
        click.echo(f"webfox {VERSION}")
        return

    try:
        settings = load_settings()
    except ValueError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    body = None
    if parsed.data:
        try:
            body = build_body(parsed.data, parsed.format, strict_form=settings["strict_form"])
        except WebfoxError as e:
            click.echo(str(e), err=True)
            sys.exit(2)

    if parsed.debug:
        click.echo(format_request(parsed, body), err=True)
        click.echo("", err=True)

    result = execute_request(
        method=parsed.effective_method,
        url=parsed.url,
        headers=dict(parsed.headers),
        query=parsed.query,
        body=body,
        content_format=parsed.format,
        timeout=settings["timeout"],
        verify=settings["verify"],
    )
    if result.error:
        click.echo(f"ERROR: {result.error}", err=True)
        sys.exit(1)

    click.echo(format_head(result), err=True)
    click.echo("", err=True)
    text = format_body(result)
    if text:
        click.echo(text)
