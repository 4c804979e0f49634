"""Render inline and display math in a few lines."""

from mathspan import Markdown

md = Markdown()

source = """
Euler's identity is \\(e^{i\\pi} + 1 = 0\\).

\\[
\\sum_{k=1}^{n} k = \\frac{n(n+1)}{2}
\\]
"""

print(md(source))
