"""RapidShare CLI - Main commands."""
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.markup import escape
from rich.table import Table

from rapidshare import RapidshareClient, RapidshareError, FileStatus
from rapidshare.core.files import is_file_url

app = typer.Typer(
    name="rapidshare",
    help="RapidShare API client",
    add_completion=False
)
console = Console()

STATUS_STYLES = {
    FileStatus.OK: "green",
    FileStatus.ERROR: "red",
    FileStatus.UNKNOWN: "yellow",
}

CookieOption = typer.Option(None, "--cookie", "-c", envvar="RAPIDSHARE_COOKIE", help="Session cookie")
LoginOption = typer.Option(None, "--login", "-l", envvar="RAPIDSHARE_LOGIN", help="Premium account login")
PasswordOption = typer.Option(None, "--password", "-p", envvar="RAPIDSHARE_PASSWORD", help="Premium account password")
FreeOption = typer.Option(False, "--free", help="Free user, skip login")


def make_client(cookie: Optional[str], login: Optional[str],
                password: Optional[str], free: bool) -> RapidshareClient:
    """Builds a connected client or exits with an error."""
    if not (free or cookie or login):
        console.print("[red]Provide --cookie, --login/--password or --free[/red]")
        raise typer.Exit(1)
    if login and not password:
        password = typer.prompt("Password", hide_input=True)

    try:
        return RapidshareClient(
            cookie,
            login=login,
            password=password,
            free_user=free
        ).connect()
    except RapidshareError as e:
        console.print(f"[red]Login failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def parse_params(pairs: List[str]) -> dict:
    """Turns KEY=VALUE arguments into a dict."""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            console.print(f"[red]Expected KEY=VALUE, got: {escape(pair)}[/red]")
            raise typer.Exit(2)
        params[key] = value
    return params


def download_with_progress(client: RapidshareClient, url: str, dest: Path) -> bool:
    """Downloads one file with a progress bar. Returns False if skipped."""
    records = client.check_files(url)
    if not records or not records[0].is_ok:
        console.print(f"[yellow]File not found: {escape(url)}[/yellow]")
        return False

    info = records[0]
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console
    ) as progress:
        task = progress.add_task(info.file_name or url, total=None)

        def on_progress(done: int, total: int):
            progress.update(task, completed=done, total=total or None)

        path = client.download(info, dest, progress_callback=on_progress)

    console.print(f"[green]Saved {path}[/green]")
    return True


@app.command()
def account(
    cookie: Optional[str] = CookieOption,
    login: Optional[str] = LoginOption,
    password: Optional[str] = PasswordOption,
):
    """Show account details."""
    client = make_client(cookie, login, password, False)
    try:
        details = client.get_account_details()
    except RapidshareError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        client.close()

    table = Table(title="Account details")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in details.items():
        table.add_row(key, value or "")
    console.print(table)


@app.command()
def check(
    urls: List[str] = typer.Argument(..., help="RapidShare file links"),
    cookie: Optional[str] = CookieOption,
    login: Optional[str] = LoginOption,
    password: Optional[str] = PasswordOption,
    free: bool = FreeOption,
):
    """Check the status of files."""
    client = make_client(cookie, login, password, free)
    try:
        records = client.check_files(urls)
    except RapidshareError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        client.close()

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("Status")
    table.add_column("MD5", style="dim")
    for record in records:
        style = STATUS_STYLES[record.status]
        table.add_row(
            record.file_id or "",
            record.file_name or "",
            record.file_size or "",
            f"[{style}]{record.status.value}[/{style}]",
            record.md5 or ""
        )
    console.print(table)


@app.command()
def download(
    urls: List[str] = typer.Argument(..., help="RapidShare file links"),
    dest: Path = typer.Option(Path("."), "--dest", "-d", help="Download directory"),
    cookie: Optional[str] = CookieOption,
    login: Optional[str] = LoginOption,
    password: Optional[str] = PasswordOption,
    free: bool = FreeOption,
):
    """Download files."""
    client = make_client(cookie, login, password, free)
    failed = 0
    try:
        for url in urls:
            try:
                if not download_with_progress(client, url, dest):
                    failed += 1
            except RapidshareError as e:
                console.print(f"[red]{escape(url)}: {escape(str(e))}[/red]")
                failed += 1
    finally:
        client.close()

    if failed:
        raise typer.Exit(1)


@app.command()
def queue(
    queue_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one link per line"),
    dest: Path = typer.Option(Path("."), "--dest", "-d", help="Download directory"),
    cookie: Optional[str] = CookieOption,
    login: Optional[str] = LoginOption,
    password: Optional[str] = PasswordOption,
    free: bool = FreeOption,
):
    """Download every file link listed in a queue file."""
    lines = (line.strip() for line in queue_file.read_text().splitlines())
    urls = [line for line in lines if is_file_url(line)]
    if not urls:
        console.print("[yellow]No file links in queue[/yellow]")
        return

    client = make_client(cookie, login, password, free)
    try:
        for url in urls:
            try:
                download_with_progress(client, url, dest)
            except RapidshareError as e:
                console.print(f"[red]{escape(url)}: {escape(str(e))}[/red]")
    finally:
        client.close()


@app.command()
def call(
    service: str = typer.Argument(..., help="Service name, e.g. getrapidtranslogs"),
    params: Optional[List[str]] = typer.Argument(None, help="KEY=VALUE parameters"),
    shape: str = typer.Option("raw", "--shape", "-s", help="Response shape: raw, csv or hash"),
    cookie: Optional[str] = CookieOption,
    login: Optional[str] = LoginOption,
    password: Optional[str] = PasswordOption,
    free: bool = FreeOption,
):
    """Call any RapidShare service."""
    client = make_client(cookie, login, password, free)
    try:
        result = client.call(service, parse_params(params or []), shape)
    except RapidshareError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        client.close()

    if isinstance(result, dict):
        for key, value in result.items():
            console.print(f"{key}: {value or ''}", markup=False)
    elif isinstance(result, list):
        for row in result:
            console.print(",".join(row), markup=False)
    else:
        console.print(result, markup=False)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
