"""Tokenize and parse Markdown, printing spans and block kinds."""

from hilo import parse, tokenize

source = "# Hello\n\n1. First item\n12abc is plain text"

for token in tokenize(source):
    print(token, repr(token.text(source)))

tree = parse(source)
for block in tree.blocks():
    print(block.kind, block.slice, repr(block.text(source)))
