"""Dollar delimiters on a plain MarkdownIt instance, with client-side output."""

from markdown_it import MarkdownIt

from mathspan import math_plugin

md = MarkdownIt("commonmark").use(
    math_plugin,
    {
        "delimiters": [
            {"left": "$$", "right": "$$", "display": True},
            {"left": "$", "right": "$", "display": False},
        ],
        "output": "source",
    },
)

source = """
Mass-energy: $E = mc^2$

$$
\\nabla \\cdot \\mathbf{E} = \\frac{\\rho}{\\varepsilon_0}
$$
"""

for token in md.parse(source):
    if token.type == "math_block":
        print("display span on lines", token.map, "->", token.meta["tex"])

print(md.render(source))
