"""Line-breaking core: word source, line state, splitting, rendering.

WHY: The greedy fill loop, the overflow splitting policy chain, the
nobreak backtracking guard and the justification math interact closely
but are each testable on their own. Keeping them in separate modules
makes every policy easy to find and exercise in isolation.

HOW: LineBuilder (builder.py) drives the loop. It pulls words from a
WordSource (words.py), keeps a Line (line.py), and on overflow consults
NoBreakGuard (nobreak.py) and OverflowSplitter (splitter.py). Finished
lines go through LineRenderer (renderer.py).

RULES:
- Nothing in this package performs I/O
- Nothing in this package raises for any word content or width
"""
