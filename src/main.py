import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import install
from rich.tree import Tree

import huffcode

console = Console()
install(show_locals=True)

app = typer.Typer()


def parse_code_book(codes: list[str], is_logging: bool) -> huffcode.CodeBook:
    code_book = huffcode.CodeBook(is_logging=is_logging)
    for code in codes:
        # The symbol is the first character, so "==0" gives "=" the codeword 0.
        symbol, sep, bits = code[:1], code[1:2], code[2:]
        if sep != "=":
            raise typer.BadParameter(f"Expected SYMBOL=BITS with a single-character symbol, but got {code!r}")
        try:
            code_book.add(symbol, huffcode.BitSequence.from_string(bits))
        except ValueError as e:
            raise typer.BadParameter(str(e))
    return code_book


def add_branch(parent: Tree, node: huffcode.Node, label: str) -> None:
    if node.symbol is not None:
        label = f"{label} -> [bold]{escape(repr(node.symbol))}[/]"
    branch = parent.add(label)
    for bit, child in ((0, node.zero), (1, node.one)):
        if child is not None:
            add_branch(branch, child, str(bit))


@app.command()
def encode(
    text: str = typer.Argument(..., help="Text to encode"),
    codes: list[str] = typer.Option(..., "-c", "--code", help="Codeword of a symbol, e.g. a=0 (repeatable)"),
    strict: bool = typer.Option(False, "--strict", help="Fail on symbols missing from the code book"),
    hex_output: bool = typer.Option(False, "--hex", help="Print the bits packed into bytes, as hex, followed by the bit count"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    code_book = parse_code_book(codes, logging)
    try:
        encoded = code_book.encode(text, strict=strict)
        if hex_output:
            console.print(f"{encoded.to_bytes().hex()} {len(encoded)}")
        else:
            console.print(str(encoded))
    except huffcode.UnknownSymbolError as e:
        console.print(f"[bold red]Encoding failed:[/] {e}")
        raise typer.Exit(1)


@app.command()
def decode(
    bits: str = typer.Argument(..., help="Bits to decode, e.g. 01011"),
    codes: list[str] = typer.Option(..., "-c", "--code", help="Codeword of a symbol, e.g. a=0 (repeatable)"),
    hex_input: bool = typer.Option(False, "--hex", help="Read BITS as hex bytes"),
    length: int | None = typer.Option(None, "--length", min=0, help="Number of bits to use from the hex bytes"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    code_tree = huffcode.CodeTree.from_code_book(parse_code_book(codes, logging), is_logging=logging)
    if not code_tree.is_valid():
        console.print("[bold red]Invalid code tree:[/] the code book is not a complete prefix-free code")
        raise typer.Exit(1)
    try:
        if hex_input:
            # The last byte is zero-padded, so --length drops the padding.
            sequence = huffcode.BitSequence.from_bytes(bytes.fromhex(bits), length=length)
        else:
            sequence = huffcode.BitSequence.from_string(bits)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    try:
        console.print(code_tree.decode(sequence), markup=False)
    except huffcode.MalformedSequenceError as e:
        console.print(f"[bold red]Decoding failed:[/] {e}")
        raise typer.Exit(1)


@app.command()
def validate(
    codes: list[str] = typer.Option(..., "-c", "--code", help="Codeword of a symbol, e.g. a=0 (repeatable)"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    code_tree = huffcode.CodeTree.from_code_book(parse_code_book(codes, logging), is_logging=logging)
    if code_tree.is_valid():
        console.print("[green]valid[/]")
    else:
        console.print("[bold red]invalid[/]")
        raise typer.Exit(1)


@app.command()
def show(
    codes: list[str] = typer.Option(..., "-c", "--code", help="Codeword of a symbol, e.g. a=0 (repeatable)"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    code_tree = huffcode.CodeTree.from_code_book(parse_code_book(codes, logging), is_logging=logging)
    tree = Tree("code tree")
    add_branch(tree, code_tree.root, "root")
    console.print(tree)


if __name__ == "__main__":
    app()
